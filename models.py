from datetime import datetime
from pydantic import BaseModel, ConfigDict, NaiveDatetime
from sqlmodel import SQLModel, Field


class RoomType(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str
    name: str
    hourly_price: float
    total_rooms: int


class Booking(SQLModel, table=True):
    __tablename__ = "bookings"

    id: str = Field(primary_key=True)
    guest_name: str
    guest_email: str
    room_type_code: str = Field(index=True)
    # Room numbers identify physical rooms across all room types
    room_number: str = Field(index=True)
    # Local naive times throughout, never UTC-aware
    start_time: NaiveDatetime
    end_time: NaiveDatetime
    price: float
    created_at: NaiveDatetime = Field(default_factory=datetime.now, index=True)
