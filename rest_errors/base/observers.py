"""Observer list for normalization events.

Replaces event-emitter inheritance with composition: the normalizer owns an
:class:`ErrorObservers` instance and forwards ``on``/``off`` to it.

Registration and dispatch share a lock. Dispatch iterates over a snapshot taken
under the lock and calls handlers outside it, so a handler may subscribe or
unsubscribe without deadlocking. Handler exceptions propagate to the caller.
"""
from __future__ import annotations

from threading import RLock
from typing import Callable, Dict, List

from .errors_parts.normalized_error import NormalizedError

ErrorHandler = Callable[[NormalizedError], None]


class ErrorObservers:
    """Thread-safe mapping of event names to subscriber callbacks."""

    __slots__ = ("_lock", "_handlers")

    def __init__(self) -> None:
        self._lock = RLock()
        self._handlers: Dict[str, List[ErrorHandler]] = {}

    def on(self, event: str, handler: ErrorHandler) -> None:
        """Subscribe ``handler`` to ``event``. Duplicate subscriptions fire twice."""
        if not callable(handler):
            raise TypeError("handler must be callable")
        with self._lock:
            self._handlers.setdefault(event, []).append(handler)

    def off(self, event: str, handler: ErrorHandler) -> bool:
        """Remove one subscription of ``handler``; return whether one existed."""
        with self._lock:
            handlers = self._handlers.get(event, [])
            if handler not in handlers:
                return False
            handlers.remove(handler)
            return True

    def listeners(self, event: str) -> List[ErrorHandler]:
        with self._lock:
            return list(self._handlers.get(event, ()))

    def emit(self, event: str, error: NormalizedError) -> int:
        """Call every handler for ``event`` with ``error``; return the count."""
        snapshot = self.listeners(event)
        for handler in snapshot:
            handler(error)
        return len(snapshot)


__all__ = ["ErrorObservers", "ErrorHandler"]
