class BookingError(Exception):
    kind = "booking_error"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class MissingField(BookingError):
    kind = "missing_field"

    def __init__(self, fields: list[str]):
        self.fields = fields
        super().__init__(f"Please fill in all fields: {', '.join(fields)}")


class UnknownRoomType(BookingError):
    kind = "unknown_room_type"

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"Unknown room type: {code}")


class NoInventory(BookingError):
    kind = "no_inventory"

    def __init__(self, code: str):
        self.code = code
        super().__init__(f"No available rooms of type {code} left.")


class OverlapConflict(BookingError):
    kind = "overlap_conflict"

    def __init__(self, room_number: str):
        self.room_number = room_number
        super().__init__(f"Overlapping booking detected for room {room_number}.")


class InvalidInterval(BookingError):
    kind = "invalid_interval"


class BookingNotFound(BookingError):
    kind = "booking_not_found"

    def __init__(self, booking_id: str):
        self.booking_id = booking_id
        super().__init__(f"Booking {booking_id} not found.")
