from snatched.store.base import RecordStore
from snatched.store.memory import InMemoryRecordStore
from snatched.store.sql import SqlRecordStore

__all__ = ["InMemoryRecordStore", "RecordStore", "SqlRecordStore"]
