"""
Events Module

Typed, synchronous publish/subscribe primitive.

This module provides:
- EventChannel: one-to-many delivery of a single event type
- Cancellation handles that remove exactly one registration
- Snapshot publication (listeners added mid-publish wait for the next event)
"""

__version__ = "0.1.0"

from .channel import Cancel, EventChannel, Listener

__all__ = [
    "Cancel",
    "EventChannel",
    "Listener",
]
