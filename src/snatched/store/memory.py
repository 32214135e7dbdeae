import bisect
from collections.abc import Iterable

from snatched.schemas.workout import WorkoutRecord
from snatched.store.base import RecordStore


class InMemoryRecordStore(RecordStore):
    """Record store held in a process-local list, kept in timestamp order."""

    def __init__(self, records: Iterable[WorkoutRecord] = ()) -> None:
        super().__init__()
        self._records = sorted(records, key=lambda r: r.timestamp)

    async def _load(self) -> list[WorkoutRecord]:
        # Copy so readers never observe a later append
        return list(self._records)

    async def _persist(self, record: WorkoutRecord) -> None:
        # insort places equal timestamps after existing ones, matching append order
        bisect.insort(self._records, record, key=lambda r: r.timestamp)
