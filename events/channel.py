from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Generic, TypeAlias, TypeVar

E = TypeVar("E")

Listener: TypeAlias = Callable[[E], None]
Cancel: TypeAlias = Callable[[], None]


class _Registration(Generic[E]):
    __slots__ = ("listener",)

    def __init__(self, listener: Listener[E]) -> None:
        self.listener: Listener[E] = listener


class EventChannel(Generic[E]):
    """Deliver events to every registered listener, in registration order.

    Publication iterates over a snapshot of the listener list, so a listener
    subscribed while a publish is running is first called on the next publish.
    Listener exceptions propagate to the publisher and stop delivery.
    """

    def __init__(self) -> None:
        self._registrations: list[_Registration[E]] = []
        self._lock: threading.Lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._registrations)

    def subscribe(self, listener: Listener[E]) -> Cancel:
        if not callable(listener):
            raise TypeError("listener must be callable")
        registration = _Registration(listener)
        with self._lock:
            self._registrations.append(registration)

        def cancel() -> None:
            with self._lock:
                # Identity match: the same callable may be subscribed more than once.
                self._registrations = [
                    existing for existing in self._registrations if existing is not registration
                ]

        return cancel

    def publish(self, event: E) -> None:
        with self._lock:
            snapshot = tuple(self._registrations)
        for registration in snapshot:
            registration.listener(event)
