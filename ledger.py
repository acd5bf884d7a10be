import logging
import threading
import uuid
from datetime import datetime
from typing import Dict, Iterable, List, Optional

from availability import AvailabilityTracker
from catalog import Catalog
from errors import (
    BookingNotFound,
    MissingField,
    NoInventory,
    OverlapConflict,
    UnknownRoomType,
)
from models import Booking
from overlap import overlaps
from pricing import PricingEngine, Timestamp, parse_timestamp
from refunds import refund

logger = logging.getLogger(__name__)


def _is_blank(value) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


class BookingLedger:
    """
    The authoritative set of active bookings.

    One re-entrant lock guards the booking set, the room-number index and the
    availability tracker, so every check-then-insert runs as a single step.
    """

    def __init__(self, catalog: Catalog, bookings: Iterable[Booking] = ()) -> None:
        self.catalog = catalog
        self.pricing = PricingEngine(catalog)
        self.availability = AvailabilityTracker(catalog)
        self._lock = threading.RLock()
        self._bookings: Dict[str, Booking] = {}
        self._by_room: Dict[str, List[Booking]] = {}

        for booking in bookings:
            self._restore(booking)

    # ---------- internals ----------

    def _insert(self, booking: Booking) -> None:
        self.availability.reserve(booking.room_type_code)
        self._bookings[booking.id] = booking
        self._by_room.setdefault(booking.room_number, []).append(booking)

    def _remove(self, booking: Booking) -> None:
        del self._bookings[booking.id]
        room_list = self._by_room[booking.room_number]
        room_list.remove(booking)
        if not room_list:
            del self._by_room[booking.room_number]
        self.availability.release(booking.room_type_code)

    def _restore(self, booking: Booking) -> None:
        if booking.room_type_code not in self.catalog:
            raise UnknownRoomType(booking.room_type_code)
        if overlaps(
            booking.room_number,
            booking.start_time,
            booking.end_time,
            self._by_room.get(booking.room_number, []),
        ):
            raise OverlapConflict(booking.room_number)
        self._insert(booking)

    def _get(self, booking_id: str) -> Booking:
        booking = self._bookings.get(booking_id)
        if booking is None:
            raise BookingNotFound(booking_id)
        return booking

    # ---------- public API ----------

    def create_booking(
        self,
        guest_name: str,
        guest_email: str,
        room_type_code: str,
        room_number: str,
        start_time: Timestamp,
        end_time: Timestamp,
    ) -> Booking:
        fields = {
            "guest_name": guest_name,
            "guest_email": guest_email,
            "room_type_code": room_type_code,
            "room_number": room_number,
            "start_time": start_time,
            "end_time": end_time,
        }
        missing = [name for name, value in fields.items() if _is_blank(value)]
        if missing:
            raise MissingField(missing)

        room_type_code = room_type_code.strip()
        room_number = room_number.strip()

        with self._lock:
            if room_type_code not in self.catalog:
                raise UnknownRoomType(room_type_code)

            if self.availability.remaining(room_type_code) == 0:
                logger.debug("No inventory left for room type %s", room_type_code)
                raise NoInventory(room_type_code)

            start = parse_timestamp(start_time)
            end = parse_timestamp(end_time)
            if overlaps(room_number, start, end, self._by_room.get(room_number, [])):
                logger.debug("Overlap on room %s for %s - %s", room_number, start, end)
                raise OverlapConflict(room_number)

            price = self.pricing.price(room_type_code, start, end)

            booking = Booking(
                id=uuid.uuid4().hex,
                guest_name=guest_name.strip(),
                guest_email=guest_email.strip(),
                room_type_code=room_type_code,
                room_number=room_number,
                start_time=start,
                end_time=end,
                price=price,
            )
            self._insert(booking)

        logger.info(
            "Created booking %s: room %s (type %s) %s - %s, price %s",
            booking.id, room_number, room_type_code, start, end, price,
        )
        return booking

    def cancel_booking(
        self, booking_id: str, evaluation_time: Optional[Timestamp] = None
    ) -> float:
        now = datetime.now() if evaluation_time is None else parse_timestamp(evaluation_time)

        with self._lock:
            booking = self._get(booking_id)
            amount = refund(booking.price, booking.start_time, now)
            self._remove(booking)

        logger.info("Cancelled booking %s, refund %s", booking_id, amount)
        return amount

    def discard(self, booking_id: str) -> Booking:
        """Remove a booking and free its room without computing a refund."""
        with self._lock:
            booking = self._get(booking_id)
            self._remove(booking)
        logger.info("Discarded booking %s", booking_id)
        return booking

    def get_booking(self, booking_id: str) -> Booking:
        with self._lock:
            return self._get(booking_id)

    def list_bookings(self) -> List[Booking]:
        with self._lock:
            return list(self._bookings.values())

    def remaining(self, room_type_code: str) -> int:
        with self._lock:
            return self.availability.remaining(room_type_code)

    def quote_price(
        self, room_type_code: str, start_time: Timestamp, end_time: Timestamp
    ) -> float:
        return self.pricing.price(room_type_code, start_time, end_time)
