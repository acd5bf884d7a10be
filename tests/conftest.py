import os
import tempfile

# config.py refuses to import without a database URL
_DB_DIR = tempfile.mkdtemp(prefix="booking-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_DB_DIR}/test_bookings.db"

from datetime import datetime

import httpx
import pytest
from httpx import ASGITransport
from sqlmodel import SQLModel

from catalog import Catalog
from ledger import BookingLedger
from models import RoomType

START = datetime(2024, 5, 10, 10, 0)


@pytest.fixture
def catalog():
    return Catalog()


@pytest.fixture
def small_catalog():
    return Catalog([
        RoomType(code="S", name="Single", hourly_price=10, total_rooms=1),
        RoomType(code="D", name="Double", hourly_price=20, total_rooms=2),
    ])


@pytest.fixture
def ledger(catalog):
    return BookingLedger(catalog)


@pytest.fixture
async def fresh_db():
    from database import engine

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def client(fresh_db):
    from main import app, lifespan

    async with lifespan(app):
        async with httpx.AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as c:
            yield c
