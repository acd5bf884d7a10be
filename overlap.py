from datetime import datetime
from typing import Iterable, List

from models import Booking


def intervals_overlap(
    start_a: datetime, end_a: datetime, start_b: datetime, end_b: datetime
) -> bool:
    # Half-open [start, end): touching intervals do not conflict
    return start_a < end_b and start_b < end_a


def conflicting_bookings(
    room_number: str,
    start_time: datetime,
    end_time: datetime,
    existing_bookings: Iterable[Booking],
) -> List[Booking]:
    return [
        b for b in existing_bookings
        if b.room_number == room_number
        and intervals_overlap(start_time, end_time, b.start_time, b.end_time)
    ]


def overlaps(
    room_number: str,
    start_time: datetime,
    end_time: datetime,
    existing_bookings: Iterable[Booking],
) -> bool:
    """True if any existing booking on the same room number intersects the interval."""
    return bool(conflicting_bookings(room_number, start_time, end_time, existing_bookings))
