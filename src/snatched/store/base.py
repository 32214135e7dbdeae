import asyncio
import logging
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable

from snatched.schemas.workout import WorkoutRecord

logger = logging.getLogger(__name__)

Listener = Callable[[], Awaitable[object]]


class RecordStore(ABC):
    """Append-only, time-ordered collection of workout records.

    Implementations provide `_load` and `_persist`; this base class serialises
    appends and notifies subscribers after every successful one. Subscribers
    are async callables with no arguments and are expected to re-read the
    store themselves.
    """

    def __init__(self) -> None:
        self._listeners: list[Listener] = []
        self._write_lock = asyncio.Lock()

    @abstractmethod
    async def _load(self) -> list[WorkoutRecord]:
        """Return every record, oldest first.

        Raises StoreUnavailableError if the backing storage cannot be read.
        """
        ...

    @abstractmethod
    async def _persist(self, record: WorkoutRecord) -> None:
        """Durably add one record.

        Raises StoreUnavailableError if the record could not be written.
        """
        ...

    async def load_all(self) -> list[WorkoutRecord]:
        return await self._load()

    async def append(self, record: WorkoutRecord) -> WorkoutRecord:
        """Persist a record, then tell every subscriber that the records changed."""
        async with self._write_lock:
            await self._persist(record)
        logger.info(
            "Saved %s workout %s (%d steps, %.1f kcal)",
            record.workout_type.value,
            record.id,
            record.steps,
            record.calories_burned,
        )
        await self._notify()
        return record

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a change listener. Returns a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def _notify(self) -> None:
        for listener in list(self._listeners):
            await listener()
