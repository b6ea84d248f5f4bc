"""
Hello Server — Process-Wide Application State
===============================================

What:  The shared request counter behind GET /count.
How:   One RequestCounter per application instance, created by create_app()
       and stored on `app.state.counter`. Handlers receive it by reference
       through the `get_counter` dependency.

The lock only guards the read-modify-write; it is never held across an await.
"""

import threading

from fastapi import Request


class RequestCounter:
    """A lock-protected integer that only counts up."""

    def __init__(self, start: int = 0) -> None:
        self._lock = threading.Lock()
        self._count = start

    def increment(self) -> int:
        """Add one and return the new value."""
        with self._lock:
            self._count += 1
            return self._count

    @property
    def value(self) -> int:
        with self._lock:
            return self._count


def get_counter(request: Request) -> RequestCounter:
    """FastAPI dependency: the counter owned by the running application."""
    return request.app.state.counter
