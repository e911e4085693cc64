from __future__ import annotations

import logging

from events.channel import Cancel
from store.repository import KeyedStore
from store.schemas import AfterSetEvent, HasId

logger = logging.getLogger(__name__)


def announce_new_records(store: KeyedStore[HasId]) -> Cancel:
    """Log every record written to ``store``; returns the cancel handle."""

    def announce(event: AfterSetEvent[HasId]) -> None:
        logger.info(f"new record >> {event.value!r}")

    return store.on_after_add(announce)
