"""
Store Module

Process-local keyed record storage with lifecycle hooks.

This module provides:
- KeyedStore: identifier -> record mapping for one record type
- Before/after write notifications with veto on pre-write failure
- Best-match query over an arbitrary scoring function
- A resettable registry holding one store per record type
- Field-based scoring helpers
"""

__version__ = "0.1.0"

from .errors import InvalidRecordError, StoreError
from .registry import StoreRegistry, default_registry, get_store, reset_stores
from .repository import KeyedStore
from .schemas import AfterSetEvent, BeforeSetEvent, BestMatch, HasId
from .scoring import field_score, weighted_score

__all__ = [
    "AfterSetEvent",
    "BeforeSetEvent",
    "BestMatch",
    "HasId",
    "InvalidRecordError",
    "KeyedStore",
    "StoreError",
    "StoreRegistry",
    "default_registry",
    "field_score",
    "get_store",
    "reset_stores",
    "weighted_score",
]
