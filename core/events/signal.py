from __future__ import annotations

import weakref
from contextlib import contextmanager
from threading import RLock
from typing import Callable, Generic, Iterator, TypeVar

T = TypeVar("T")


class Signal(Generic[T]):
    """
    Observer primitive for domain events.

    Subscribers run synchronously in connection order on the emitting thread.
    A weakref.proxy subscriber whose referent is gone is dropped on the next
    emit; errors raised by live subscribers propagate to the emitter.
    """

    def __init__(self) -> None:
        self._subscribers: list[Callable[[T], None]] = []
        self._lock: RLock = RLock()

    @staticmethod
    def _matches(entry: Callable[[T], None], callback: Callable[[T], None]) -> bool:
        if entry is callback:
            return True
        # comparing a dead weakref.proxy raises ReferenceError
        if isinstance(entry, weakref.ProxyTypes) or isinstance(callback, weakref.ProxyTypes):
            return False
        return entry == callback

    def connect(self, callback: Callable[[T], None]) -> None:
        with self._lock:
            if not any(self._matches(entry, callback) for entry in self._subscribers):
                self._subscribers.append(callback)

    def disconnect(self, callback: Callable[[T], None]) -> None:
        with self._lock:
            self._subscribers = [
                entry for entry in self._subscribers if not self._matches(entry, callback)
            ]

    @contextmanager
    def connected(self, callback: Callable[[T], None]) -> Iterator[None]:
        self.connect(callback)
        try:
            yield
        finally:
            self.disconnect(callback)

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscribers)

    def emit(self, payload: T) -> None:
        with self._lock:
            subscribers = list(self._subscribers)

        dead: set[int] = set()
        for callback in subscribers:
            try:
                callback(payload)
            except ReferenceError:
                dead.add(id(callback))

        if dead:
            with self._lock:
                self._subscribers = [e for e in self._subscribers if id(e) not in dead]
