import logging
import sys
from contextlib import asynccontextmanager
from typing import Annotated, List, Optional

from fastapi import FastAPI, Depends, HTTPException, Request, status
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from catalog import Catalog
from config import CORS_ORIGINS, LOG_LEVEL
from database import (
    async_session,
    close_db,
    delete_booking,
    get_session,
    init_db,
    load_bookings,
    save_booking,
)
from errors import BookingError, UnknownRoomType
from handlers import booking_error_handler
from ledger import BookingLedger
from pricing import parse_timestamp
from schemas import (
    AvailabilityRead,
    BookingCreate,
    BookingRead,
    CancellationRead,
    QuoteRead,
    RoomTypeRead,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(
        level=LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )

    await init_db()
    async with async_session() as session:
        bookings = await load_bookings(session)

    # Restoring re-checks inventory and overlaps; a broken store fails startup
    app.state.ledger = BookingLedger(Catalog(), bookings)
    try:
        yield
    finally:
        await close_db()


app = FastAPI(title="Hotel Room Booking System", lifespan=lifespan)

app.add_exception_handler(BookingError, booking_error_handler)


def get_ledger(request: Request) -> BookingLedger:
    return request.app.state.ledger


LedgerDep = Annotated[BookingLedger, Depends(get_ledger)]
SessionDep = Annotated[AsyncSession, Depends(get_session)]


@app.get("/health")
async def health():
    return {"status": "ok"}


# --- Catalog & availability ---
@app.get("/room-types", response_model=List[RoomTypeRead])
async def list_room_types(ledger: LedgerDep):
    return [
        RoomTypeRead(
            code=room_type.code,
            name=room_type.name,
            hourly_price=room_type.hourly_price,
            total_rooms=room_type.total_rooms,
            available=ledger.remaining(room_type.code),
        )
        for room_type in ledger.catalog
    ]


@app.get("/room-types/{code}/availability", response_model=AvailabilityRead)
async def get_availability(code: str, ledger: LedgerDep):
    room_type = ledger.catalog.type_by_code(code)
    if room_type is None:
        raise UnknownRoomType(code)
    return AvailabilityRead(
        code=code,
        remaining=ledger.remaining(code),
        total_rooms=room_type.total_rooms,
    )


# --- Live price preview ---
@app.get("/quote", response_model=QuoteRead)
async def quote_price(
    room_type_code: str,
    start_time: str,
    end_time: str,
    ledger: LedgerDep,
):
    price = ledger.quote_price(room_type_code, start_time, end_time)
    return QuoteRead(
        room_type_code=room_type_code,
        start_time=parse_timestamp(start_time),
        end_time=parse_timestamp(end_time),
        price=price,
    )


# --- Bookings ---
@app.post("/bookings", status_code=status.HTTP_201_CREATED, response_model=BookingRead)
async def create_booking(
    booking_data: BookingCreate,
    ledger: LedgerDep,
    session: SessionDep,
):
    booking = ledger.create_booking(**booking_data.model_dump())

    try:
        await save_booking(session, booking)
    except SQLAlchemyError:
        # Undo the in-memory insert so the ledger and the store agree
        logger.exception("Could not store booking %s", booking.id)
        await session.rollback()
        ledger.discard(booking.id)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Could not store the booking, please try again.",
        )

    return booking


@app.get("/bookings", response_model=List[BookingRead])
async def list_bookings(ledger: LedgerDep):
    return ledger.list_bookings()


@app.get("/bookings/{booking_id}", response_model=BookingRead)
async def get_booking(booking_id: str, ledger: LedgerDep):
    return ledger.get_booking(booking_id)


@app.delete("/bookings/{booking_id}", response_model=CancellationRead)
async def cancel_booking(
    booking_id: str,
    ledger: LedgerDep,
    session: SessionDep,
    evaluation_time: Optional[str] = None,
):
    refund_amount = ledger.cancel_booking(booking_id, evaluation_time)

    try:
        await delete_booking(session, booking_id)
    except SQLAlchemyError:
        # The in-memory cancellation stands; the stale row reloads on restart
        logger.exception("Could not remove booking %s from the database", booking_id)
        await session.rollback()

    return CancellationRead(booking_id=booking_id, refund_amount=refund_amount)


app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
