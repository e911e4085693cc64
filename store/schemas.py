"""
Record capability and event payload types.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Protocol, TypeVar, runtime_checkable


@runtime_checkable
class HasId(Protocol):
    """Anything with a stable string identifier can be stored."""

    @property
    def id(self) -> str: ...


T = TypeVar("T", bound=HasId)


@dataclass(frozen=True)
class BeforeSetEvent(Generic[T]):
    value: T | None
    new_value: T


@dataclass(frozen=True)
class AfterSetEvent(Generic[T]):
    value: T


@dataclass(frozen=True)
class BestMatch(Generic[T]):
    item: T | None
    max: float

    @property
    def found(self) -> bool:
        return self.item is not None
