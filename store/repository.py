"""
In-memory keyed record store with write notifications and best-match query.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import Generic

from events.channel import Cancel, EventChannel, Listener

from .errors import InvalidRecordError
from .schemas import AfterSetEvent, BeforeSetEvent, BestMatch, T

logger = logging.getLogger(__name__)

ScoreFn = Callable[[T], float]
Visitor = Callable[[T], None]


def _require_id(record: object) -> str:
    record_id = getattr(record, "id", None)
    if record_id is None:
        raise InvalidRecordError(record, "id is required")
    if not isinstance(record_id, str):
        raise InvalidRecordError(record, "id must be a string")
    if not record_id:
        raise InvalidRecordError(record, "id must be non-empty")
    return record_id


class KeyedStore(Generic[T]):
    """Canonical identifier -> record mapping for one record type.

    Enumeration follows insertion order; overwriting a record keeps the
    position of its identifier. Every write is announced twice: before the
    mapping changes (listeners may veto by raising) and after.
    """

    def __init__(self, record_type: type | None = None) -> None:
        self.record_type: type | None = record_type
        self._records: dict[str, T] = {}
        self._before_add: EventChannel[BeforeSetEvent[T]] = EventChannel()
        self._after_add: EventChannel[AfterSetEvent[T]] = EventChannel()
        self._lock: threading.RLock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def __contains__(self, record_id: object) -> bool:
        with self._lock:
            return record_id in self._records

    def __repr__(self) -> str:
        name = self.record_type.__name__ if self.record_type is not None else "object"
        return f"KeyedStore[{name}](records={len(self)})"

    def set(self, record: T) -> None:
        record_id = _require_id(record)
        with self._lock:
            current = self._records.get(record_id)
            self._before_add.publish(BeforeSetEvent(value=current, new_value=record))
            self._records[record_id] = record
            logger.debug(f"set {record_id} (replaced={current is not None})")
            self._after_add.publish(AfterSetEvent(value=record))

    def get(self, record_id: str) -> T | None:
        with self._lock:
            return self._records.get(record_id)

    def ids(self) -> list[str]:
        with self._lock:
            return list(self._records)

    def on_before_add(self, listener: Listener[BeforeSetEvent[T]]) -> Cancel:
        return self._before_add.subscribe(listener)

    def on_after_add(self, listener: Listener[AfterSetEvent[T]]) -> Cancel:
        return self._after_add.subscribe(listener)

    def visit(self, visitor: Visitor[T]) -> None:
        for record in self._snapshot():
            visitor(record)

    def select_best(self, score_fn: ScoreFn[T]) -> BestMatch[T]:
        """Return the first record with the strictly highest positive score.

        The running maximum starts at 0, so nothing is selected when the store
        is empty or no record scores above 0.
        """
        best: T | None = None
        best_score: float = 0
        for record in self._snapshot():
            score = score_fn(record)
            if score > best_score:
                best_score = score
                best = record
        return BestMatch(item=best, max=best_score)

    def _snapshot(self) -> tuple[T, ...]:
        with self._lock:
            return tuple(self._records.values())
