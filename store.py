from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Dict, Iterator, Optional

from errors import DuplicateIdError
from models import ScoredResult


class ReadWriteLock:
    """
    Lets any number of readers in at once, or a single writer alone.

    Waiting writers block new readers so inserts are not starved by a stream of lookups.
    """

    def __init__(self):
        self._condition = threading.Condition(threading.Lock())
        self._readers = 0
        self._writing = False
        self._writersWaiting = 0

    @contextmanager
    def readLocked(self) -> Iterator[None]:
        with self._condition:
            while self._writing or self._writersWaiting:
                self._condition.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._condition:
                self._readers -= 1
                if not self._readers:
                    self._condition.notify_all()

    @contextmanager
    def writeLocked(self) -> Iterator[None]:
        with self._condition:
            self._writersWaiting += 1
            try:
                while self._writing or self._readers:
                    self._condition.wait()
            finally:
                self._writersWaiting -= 1
            self._writing = True
        try:
            yield
        finally:
            with self._condition:
                self._writing = False
                self._condition.notify_all()


class ResultStore:
    """
    In-memory map from receipt ID to its scored result.

    Results are inserted once and never updated or removed. Lookups share a read
    lock; an insert holds the write lock, so a reader sees either no entry or the
    complete result.
    """

    def __init__(self):
        self._results: Dict[str, ScoredResult] = {}
        self._lock = ReadWriteLock()

    def insert(self, receiptId: str, result: ScoredResult) -> None:
        """
        Store ``result`` under ``receiptId``.

        Raises:
            DuplicateIdError: If a result is already stored under ``receiptId``.
        """
        with self._lock.writeLocked():
            if receiptId in self._results:
                raise DuplicateIdError(receiptId)
            self._results[receiptId] = result

    def lookup(self, receiptId: str) -> Optional[ScoredResult]:
        with self._lock.readLocked():
            return self._results.get(receiptId)

    def __contains__(self, receiptId: object) -> bool:
        with self._lock.readLocked():
            return receiptId in self._results

    def __len__(self) -> int:
        with self._lock.readLocked():
            return len(self._results)
