"""
One KeyedStore per record type, built on first access.
"""

from __future__ import annotations

import logging
import threading
from typing import cast

from .repository import KeyedStore
from .schemas import T

logger = logging.getLogger(__name__)


class StoreRegistry:
    """Cache of stores keyed by record type.

    ``get`` always returns the same store for the same type until ``reset``
    is called.
    """

    def __init__(self) -> None:
        self._stores: dict[type, KeyedStore] = {}
        self._lock: threading.Lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._stores)

    def __contains__(self, record_type: object) -> bool:
        with self._lock:
            return record_type in self._stores

    def get(self, record_type: type[T]) -> KeyedStore[T]:
        if not isinstance(record_type, type):
            raise TypeError("record_type must be a class")
        with self._lock:
            existing = self._stores.get(record_type)
            if existing is None:
                existing = KeyedStore(record_type)
                self._stores[record_type] = existing
                logger.debug(f"created store for {record_type.__name__}")
        return cast(KeyedStore[T], existing)

    def reset(self) -> None:
        with self._lock:
            self._stores.clear()


default_registry = StoreRegistry()


def get_store(record_type: type[T]) -> KeyedStore[T]:
    """Return the process-wide store for ``record_type``."""
    return default_registry.get(record_type)


def reset_stores() -> None:
    default_registry.reset()
