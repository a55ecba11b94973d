import logging
import threading
from contextlib import contextmanager
from typing import Dict, List

from fastapi import Request

from string_analyzer.exceptions import Conflict, NotFound
from string_analyzer.models import StringRecord

logger = logging.getLogger(__name__)


class ReadWriteLock:
    """
    Many readers or a single writer.

    A writer waiting for the lock blocks new readers, so a steady stream of
    reads cannot starve inserts and deletes.
    """

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @contextmanager
    def read_locked(self):
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write_locked(self):
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


class RecordStore:
    """In-memory records keyed by their exact string value."""

    def __init__(self):
        self._records: Dict[str, StringRecord] = {}
        self._lock = ReadWriteLock()

    def insert(self, record: StringRecord) -> StringRecord:
        with self._lock.write_locked():
            if record.value in self._records:
                raise Conflict()
            self._records[record.value] = record
        logger.info(f"Stored string {record.id[:12]} (length={record.properties.length})")
        return record

    def get(self, value: str) -> StringRecord:
        with self._lock.read_locked():
            record = self._records.get(value)
        if record is None:
            raise NotFound()
        return record

    def delete(self, value: str) -> None:
        with self._lock.write_locked():
            record = self._records.pop(value, None)
        if record is None:
            raise NotFound()
        logger.info(f"Deleted string {record.id[:12]}")

    def list(self) -> List[StringRecord]:
        """Snapshot of every stored record, in no particular order."""
        with self._lock.read_locked():
            return list(self._records.values())

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._records)

    def __contains__(self, value: str) -> bool:
        with self._lock.read_locked():
            return value in self._records


# ------------------------------------------------------------------------------
# STORE DEPENDENCY
# ------------------------------------------------------------------------------
def get_store(request: Request) -> RecordStore:
    """Dependency to provide the app's record store."""
    return request.app.state.store
