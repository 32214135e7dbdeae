"""Record store persisted in the `workouts` table."""

import logging
from datetime import UTC

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from snatched.errors import StoreUnavailableError
from snatched.models.workout import Workout
from snatched.schemas.workout import WorkoutRecord
from snatched.store.base import RecordStore

logger = logging.getLogger(__name__)


def record_to_row(record: WorkoutRecord) -> Workout:
    return Workout(
        id=str(record.id),
        timestamp=record.timestamp.astimezone(UTC).replace(tzinfo=None),
        workout_type=record.workout_type.value,
        steps=record.steps,
        calories_burned=record.calories_burned,
    )


class SqlRecordStore(RecordStore):
    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        super().__init__()
        self._session_factory = session_factory

    async def _load(self) -> list[WorkoutRecord]:
        stmt = select(Workout).order_by(Workout.timestamp, Workout.seq)
        try:
            async with self._session_factory() as session:
                result = await session.execute(stmt)
                rows = list(result.scalars().all())
        except SQLAlchemyError as e:
            raise StoreUnavailableError(f"Failed to load workouts: {e}") from e
        return [WorkoutRecord.model_validate(row) for row in rows]

    async def _persist(self, record: WorkoutRecord) -> None:
        try:
            async with self._session_factory() as session:
                session.add(record_to_row(record))
                await session.commit()
        except SQLAlchemyError as e:
            logger.error("Failed to save workout %s: %s", record.id, e)
            raise StoreUnavailableError(f"Failed to save workout: {e}") from e
