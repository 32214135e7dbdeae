"""Keeps a published analytics snapshot in step with a record store."""

import asyncio
import logging
import time
from collections.abc import Callable
from datetime import UTC, datetime, tzinfo

from snatched.analytics.aggregation import RECENT_LIMIT, aggregate
from snatched.analytics.streaks import consecutive_days, longest_streak
from snatched.errors import StoreUnavailableError
from snatched.schemas.analytics import AnalyticsSnapshot, StreakSummary
from snatched.schemas.workout import WorkoutRecord, WorkoutResult, WorkoutType
from snatched.store.base import RecordStore

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(UTC)


class AnalyticsService:
    """Recomputes the analytics snapshot whenever the record store changes.

    Every refresh rebuilds the snapshot from the full history in a worker
    thread. Refreshes are numbered; a result is only published if no newer
    refresh has started in the meantime, so the latest trigger always wins.
    Publishing swaps a single reference, so readers see either the old or
    the new snapshot, never a mix.
    """

    def __init__(
        self,
        store: RecordStore,
        tz: tzinfo,
        clock: Clock | None = None,
        recent_limit: int = RECENT_LIMIT,
    ) -> None:
        self._store = store
        self._tz = tz
        self._clock = clock or utc_now
        self._recent_limit = recent_limit
        self._generation = 0
        self._in_flight = 0
        self._records: list[WorkoutRecord] = []
        self._snapshot = aggregate([], self._clock(), tz, recent_limit)
        self._unsubscribe: Callable[[], None] | None = None

    @property
    def tz(self) -> tzinfo:
        return self._tz

    @property
    def snapshot(self) -> AnalyticsSnapshot:
        return self._snapshot

    @property
    def records(self) -> list[WorkoutRecord]:
        """History used for the current snapshot."""
        return list(self._records)

    @property
    def is_refreshing(self) -> bool:
        return self._in_flight > 0

    def now(self) -> datetime:
        return self._clock()

    async def start(self) -> AnalyticsSnapshot:
        if self._unsubscribe is None:
            self._unsubscribe = self._store.subscribe(self.refresh)
        return await self.refresh()

    def stop(self) -> None:
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    async def _load_records(self) -> list[WorkoutRecord]:
        try:
            return await self._store.load_all()
        except StoreUnavailableError as e:
            logger.warning("Record store unavailable, using empty history: %s", e)
            return []

    async def refresh(self) -> AnalyticsSnapshot:
        """Recompute the snapshot from scratch and publish it unless superseded.

        Returns the published snapshot, which is the newer one if this
        refresh was overtaken.
        """
        self._generation += 1
        generation = self._generation
        self._in_flight += 1
        try:
            records = await self._load_records()
            now = self._clock()
            start = time.monotonic()
            snapshot = await asyncio.to_thread(
                aggregate, records, now, self._tz, self._recent_limit
            )
            elapsed_ms = (time.monotonic() - start) * 1000
        finally:
            self._in_flight -= 1

        if generation != self._generation:
            logger.debug(
                "Discarding stale snapshot (generation %d < %d)", generation, self._generation
            )
            return self._snapshot

        self._records = records
        self._snapshot = snapshot
        logger.info(
            "Analytics snapshot recomputed: records=%d elapsed=%.1fms", len(records), elapsed_ms
        )
        return snapshot

    async def log_workout(self, workout_type: WorkoutType, result: WorkoutResult) -> WorkoutRecord:
        """Save an estimated workout to the store.

        Raises:
            StoreUnavailableError: the store could not persist the record.
        """
        record = WorkoutRecord.from_result(workout_type, result, self._clock())
        return await self._store.append(record)

    def streak(self) -> StreakSummary:
        records = self._records
        return StreakSummary(
            current_streak=consecutive_days(records, self._clock(), self._tz),
            longest_streak=longest_streak(records, self._tz),
        )
