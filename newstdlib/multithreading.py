"""A registry of named threads."""

from __future__ import annotations

import threading
from typing import Any, Callable, Dict, Hashable, Iterator

from .text import String
from .threads import Thread


def _name(name: Any) -> Hashable:
    if isinstance(name, String):
        return str(name)
    return name


class ThreadRegistry:
    """Starts threads under a name and gives access to them by that name.

    Each registered thread is a :class:`Thread`, so inside its target
    ``Thread.finish``, ``Thread.send`` and ``Thread.receive`` work as usual.
    A name stays registered after its thread has ended.
    """

    __slots__ = ("_threads", "_lock")

    def __init__(self) -> None:
        self._threads: Dict[Hashable, Thread] = {}
        self._lock = threading.Lock()

    def create(self, name: Any, target: Callable[..., Any], *args: Any) -> Thread:
        """Start ``target(*args)`` on a new thread registered under ``name``.

        Raises :class:`ValueError` if the name is already taken; no thread
        is started in that case.
        """
        key = _name(name)
        with self._lock:
            if key in self._threads:
                raise ValueError(f"a thread named {key!r} already exists")
            thread = Thread(target, *args)
            self._threads[key] = thread
        return thread

    def _lookup(self, name: Any) -> Thread:
        key = _name(name)
        with self._lock:
            try:
                return self._threads[key]
            except KeyError:
                raise KeyError(f"no thread named {key!r}") from None

    def get_one(self, name: Any) -> Any:
        """Wait for the named thread to end and return its result."""
        return self._lookup(name).get()

    def wait_one(self, name: Any) -> None:
        """Wait for the named thread to end, discarding its result."""
        self._lookup(name).wait()

    def is_alive(self, name: Any) -> bool:
        """True if a thread is registered under ``name``."""
        return self.is_exist(name)

    def is_exist(self, name: Any) -> bool:
        """True if a thread is registered under ``name``."""
        key = _name(name)
        with self._lock:
            return key in self._threads

    def __contains__(self, name: object) -> bool:
        return self.is_exist(name)

    def __len__(self) -> int:
        with self._lock:
            return len(self._threads)

    def __iter__(self) -> Iterator[Hashable]:
        with self._lock:
            return iter(list(self._threads))

    def __repr__(self) -> str:
        with self._lock:
            names = ", ".join(repr(k) for k in self._threads)
        return f"<ThreadRegistry [{names}]>"