from datetime import datetime, timedelta
from typing import Union

from catalog import Catalog
from errors import InvalidInterval, UnknownRoomType

Timestamp = Union[datetime, str]

HOURS_PER_DAY = 24
SECONDS_PER_HOUR = 3600


def parse_timestamp(value: Timestamp) -> datetime:
    """
    Accept a datetime or an ISO-8601 string (e.g. "2024-05-01T10:00").
    Timezone-aware values are converted to local naive time so they compare
    with naive ones.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        try:
            text = value.strip()
            if text.endswith(("Z", "z")):
                text = text[:-1] + "+00:00"
            parsed = datetime.fromisoformat(text)
        except ValueError:
            raise InvalidInterval(f"Unparseable timestamp: {value!r}") from None
    else:
        raise InvalidInterval(f"Unparseable timestamp: {value!r}")

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def billable_hours(start_time: datetime, end_time: datetime) -> int:
    """Whole days as hours plus whole remaining hours; partial hours are dropped."""
    duration: timedelta = end_time - start_time
    return duration.days * HOURS_PER_DAY + duration.seconds // SECONDS_PER_HOUR


class PricingEngine:
    def __init__(self, catalog: Catalog) -> None:
        self.catalog = catalog

    def price(self, room_type_code: str, start_time: Timestamp, end_time: Timestamp) -> float:
        start = parse_timestamp(start_time)
        end = parse_timestamp(end_time)
        if end <= start:
            raise InvalidInterval("End time must be after start time.")

        room_type = self.catalog.type_by_code(room_type_code)
        if room_type is None:
            raise UnknownRoomType(room_type_code)

        return billable_hours(start, end) * room_type.hourly_price
