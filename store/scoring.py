"""Score functions built from record fields, for use with ``select_best``."""

from __future__ import annotations

import numbers
from collections.abc import Callable, Mapping


def _read_field(record: object, name: str) -> object:
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def _coerce_score(value: object, name: str) -> float:
    if value is None:
        return 0.0
    if isinstance(value, bool):
        raise TypeError(f"{name} must be numeric, got bool")
    if isinstance(value, numbers.Real):
        return float(value)
    raise TypeError(f"{name} must be numeric, got {type(value).__name__}")


def field_score(name: str) -> Callable[[object], float]:
    """Score a record by one numeric field; a missing field scores 0."""
    if not name:
        raise ValueError("field name must be non-empty")

    def score(record: object) -> float:
        return _coerce_score(_read_field(record, name), name)

    return score


def weighted_score(weights: Mapping[str, float]) -> Callable[[object], float]:
    if not weights:
        raise ValueError("weights must be non-empty")
    items = tuple(weights.items())

    def score(record: object) -> float:
        return sum(weight * _coerce_score(_read_field(record, name), name) for name, weight in items)

    return score
