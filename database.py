import logging
from typing import List

from sqlmodel import SQLModel, select
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker

from config import DATABASE_URL
from models import Booking

logger = logging.getLogger(__name__)

# 1. Create the Async Engine
engine = create_async_engine(DATABASE_URL, echo=False, future=True)

async_session = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False
)


async def init_db():
    async with engine.begin() as conn:
        # This creates the tables if they don't exist
        await conn.run_sync(SQLModel.metadata.create_all)


async def close_db():
    await engine.dispose()


async def get_session() -> AsyncSession:
    async with async_session() as session:
        yield session


# 2. Booking store: the ledger is the source of truth, these only mirror it

async def load_bookings(session: AsyncSession) -> List[Booking]:
    statement = select(Booking).order_by(Booking.created_at)
    result = await session.execute(statement)
    bookings = list(result.scalars().all())
    logger.info("Loaded %d bookings from the database", len(bookings))
    return bookings


async def save_booking(session: AsyncSession, booking: Booking) -> None:
    # Store a copy so the ledger's instance never gets bound to a session
    session.add(Booking(**booking.model_dump()))
    await session.commit()


async def delete_booking(session: AsyncSession, booking_id: str) -> None:
    stored = await session.get(Booking, booking_id)
    if stored is None:
        logger.warning("Booking %s was not in the database", booking_id)
        return
    await session.delete(stored)
    await session.commit()
