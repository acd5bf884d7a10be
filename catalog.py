from typing import Dict, Iterable, Iterator, Optional

from models import RoomType

DEFAULT_ROOM_TYPES = (
    RoomType(code="A", name="Room type A", hourly_price=100, total_rooms=2),
    RoomType(code="B", name="Room type B", hourly_price=80, total_rooms=3),
    RoomType(code="C", name="Room type C", hourly_price=50, total_rooms=5),
)


class Catalog:
    """Read-only table of room types, keyed by code."""

    def __init__(self, room_types: Iterable[RoomType] = DEFAULT_ROOM_TYPES) -> None:
        self._types: Dict[str, RoomType] = {}
        for room_type in room_types:
            if room_type.code in self._types:
                raise ValueError(f"Duplicate room type code: {room_type.code}")
            if room_type.hourly_price < 0:
                raise ValueError(f"Room type {room_type.code} has a negative hourly price")
            if room_type.total_rooms <= 0:
                raise ValueError(f"Room type {room_type.code} must have at least one room")
            self._types[room_type.code] = room_type

    def type_by_code(self, code: str) -> Optional[RoomType]:
        return self._types.get(code)

    def __contains__(self, code: object) -> bool:
        return code in self._types

    def __iter__(self) -> Iterator[RoomType]:
        return iter(self._types.values())

    def __len__(self) -> int:
        return len(self._types)
