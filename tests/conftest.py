from collections.abc import AsyncGenerator
from datetime import UTC, datetime, timedelta

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from snatched.analytics.service import AnalyticsService
from snatched.database import create_tables, drop_tables
from snatched.errors import StoreUnavailableError
from snatched.main import app
from snatched.schemas.workout import WorkoutRecord, WorkoutType
from snatched.store.memory import InMemoryRecordStore
from snatched.store.sql import SqlRecordStore

test_engine = create_async_engine("sqlite+aiosqlite://", echo=False)
test_session = async_sessionmaker(test_engine, expire_on_commit=False)

# Saturday
NOW = datetime(2025, 3, 15, 12, 0, tzinfo=UTC)


class FixedClock:
    """Clock that only moves when told to."""

    def __init__(self, now: datetime = NOW) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now += timedelta(**kwargs)


class UnavailableStore(InMemoryRecordStore):
    async def _load(self) -> list[WorkoutRecord]:
        raise StoreUnavailableError("disk on fire")

    async def _persist(self, record: WorkoutRecord) -> None:
        raise StoreUnavailableError("disk on fire")


def make_record(
    timestamp: datetime,
    workout_type: WorkoutType = WorkoutType.STAIR_MASTER,
    steps: int = 1000,
    calories: float = 100.0,
) -> WorkoutRecord:
    return WorkoutRecord(
        timestamp=timestamp,
        workout_type=workout_type,
        steps=steps,
        calories_burned=calories,
    )


@pytest.fixture(autouse=True)
async def setup_db() -> AsyncGenerator[None, None]:
    await create_tables(test_engine)
    yield
    await drop_tables(test_engine)


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
async def analytics(clock: FixedClock) -> AsyncGenerator[AnalyticsService, None]:
    store = SqlRecordStore(test_session)
    service = AnalyticsService(store, tz=UTC, clock=clock)
    app.state.record_store = store
    app.state.analytics = service
    await service.start()
    yield service
    service.stop()


@pytest.fixture
async def client(analytics: AnalyticsService) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
