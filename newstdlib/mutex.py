"""A mutual-exclusion lock with try and timed acquisition."""

from __future__ import annotations

import threading
from types import TracebackType
from typing import Optional, Type


class Mutex:
    """A non-recursive lock that can also be tried or acquired with a deadline.

    Usable as a context manager. Once destroyed, every operation raises
    :class:`RuntimeError`.
    """

    __slots__ = ("_lock", "_destroyed")

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._destroyed = False

    def _check_alive(self) -> None:
        if self._destroyed:
            raise RuntimeError("mutex has been destroyed")

    def lock(self) -> None:
        """Block until the mutex is held by the caller."""
        self._check_alive()
        self._lock.acquire()

    def unlock(self) -> None:
        """Release the mutex."""
        self._check_alive()
        try:
            self._lock.release()
        except RuntimeError as exc:
            raise RuntimeError("unlock of a mutex that is not locked") from exc

    def try_lock(self) -> bool:
        """Take the mutex if it is free; return False at once if it is busy."""
        self._check_alive()
        return self._lock.acquire(blocking=False)

    def timed_lock(self, seconds: float) -> bool:
        """Wait up to ``seconds`` for the mutex; return whether it was taken."""
        self._check_alive()
        if seconds < 0:
            raise ValueError(f"timeout must not be negative, got {seconds}")
        return self._lock.acquire(timeout=seconds)

    def destroy(self) -> None:
        """Retire the mutex; it must not be locked."""
        if self._destroyed:
            return
        if self._lock.locked():
            raise RuntimeError("cannot destroy a locked mutex")
        self._destroyed = True

    @property
    def locked(self) -> bool:
        """True while some thread holds the mutex."""
        return self._lock.locked()

    def __enter__(self) -> Mutex:
        self.lock()
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.unlock()

    def __repr__(self) -> str:
        state = "destroyed" if self._destroyed else ("locked" if self.locked else "unlocked")
        return f"<Mutex {state}>"