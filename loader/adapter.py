from __future__ import annotations

from typing import Generic, Protocol, TypeVar

from store.repository import KeyedStore
from store.schemas import T

R_contra = TypeVar("R_contra", contravariant=True)


class RecordHandler(Protocol[R_contra]):
    def add_record(self, record: R_contra) -> None: ...


class StoreAdapter(Generic[T]):
    """RecordHandler that writes every record into a store."""

    def __init__(self, store: KeyedStore[T]) -> None:
        self.store: KeyedStore[T] = store

    def add_record(self, record: T) -> None:
        self.store.set(record)
