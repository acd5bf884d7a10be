from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict


# Pydantic Schemas for Request/Response
class BookingCreate(BaseModel):
    # Everything optional so that blank or missing fields are reported by
    # the ledger as a single MissingField error
    guest_name: Optional[str] = None
    guest_email: Optional[str] = None
    room_type_code: Optional[str] = None
    room_number: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None


class BookingRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    guest_name: str
    guest_email: str
    room_type_code: str
    room_number: str
    start_time: datetime
    end_time: datetime
    price: float
    created_at: datetime


class RoomTypeRead(BaseModel):
    code: str
    name: str
    hourly_price: float
    total_rooms: int
    available: int


class AvailabilityRead(BaseModel):
    code: str
    remaining: int
    total_rooms: int


class QuoteRead(BaseModel):
    room_type_code: str
    start_time: datetime
    end_time: datetime
    price: float


class CancellationRead(BaseModel):
    booking_id: str
    refund_amount: float
