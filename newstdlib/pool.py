"""A heterogeneous collection of owned objects."""

from __future__ import annotations

from collections import deque
from typing import Any, Callable, Iterator, TypeVar

T = TypeVar("T")


class Pool:
    """Holds objects of any type in insertion order."""

    __slots__ = ("_objects",)

    def __init__(self, *items: Any) -> None:
        self._objects: deque[Any] = deque()
        for item in items:
            self.add(item)

    def add(self, item: Any) -> None:
        """Put ``item`` at the end of the pool."""
        self._objects.append(item)

    def acquire(self, factory: Callable[..., T], *args: Any, **kwargs: Any) -> T:
        """Build an object with ``factory``, add it to the pool and return it."""
        obj = factory(*args, **kwargs)
        self.add(obj)
        return obj

    def _check(self, index: int) -> None:
        if not 0 <= index < len(self._objects):
            raise IndexError(f"pool index {index} out of range")

    def at(self, index: int) -> Any:
        """Return the object at ``index``."""
        self._check(index)
        return self._objects[index]

    def remove_at(self, index: int) -> None:
        """Remove the object at ``index``."""
        self._check(index)
        del self._objects[index]

    def release(self) -> None:
        """Remove every object."""
        self._objects.clear()

    def size(self) -> int:
        return len(self._objects)

    def is_empty(self) -> bool:
        return not self._objects

    def __len__(self) -> int:
        return len(self._objects)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._objects)

    def __getitem__(self, index: int) -> Any:
        return self.at(index)

    def __repr__(self) -> str:
        return f"Pool({', '.join(repr(o) for o in self._objects)})"