"""Exceptions raised by the store."""

from __future__ import annotations


class StoreError(Exception):
    """Base class for store failures."""


class InvalidRecordError(StoreError, ValueError):
    """A record cannot be keyed: its identifier is missing or empty."""

    def __init__(self, record: object, reason: str) -> None:
        self.record: object = record
        self.reason: str = reason
        super().__init__(f"Invalid record {record!r}: {reason}")
