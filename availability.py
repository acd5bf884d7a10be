from typing import Dict

from catalog import Catalog
from errors import NoInventory, UnknownRoomType


class AvailabilityTracker:
    """
    Remaining-room counters per room type.

    Not thread-safe on its own; the ledger owns the tracker and mutates it
    under the same lock as the booking set.
    """

    def __init__(self, catalog: Catalog) -> None:
        self.catalog = catalog
        self._remaining: Dict[str, int] = {rt.code: rt.total_rooms for rt in catalog}

    def _check(self, room_type_code: str) -> None:
        if room_type_code not in self._remaining:
            raise UnknownRoomType(room_type_code)

    def remaining(self, room_type_code: str) -> int:
        self._check(room_type_code)
        return self._remaining[room_type_code]

    def reserve(self, room_type_code: str) -> None:
        self._check(room_type_code)
        if self._remaining[room_type_code] == 0:
            raise NoInventory(room_type_code)
        self._remaining[room_type_code] -= 1

    def release(self, room_type_code: str) -> None:
        self._check(room_type_code)
        total = self.catalog.type_by_code(room_type_code).total_rooms
        self._remaining[room_type_code] = min(total, self._remaining[room_type_code] + 1)

    def snapshot(self) -> Dict[str, int]:
        return dict(self._remaining)
