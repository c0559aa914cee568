"""A small holder for a replaceable callable."""

from __future__ import annotations

from typing import Any, Callable, Optional


class Function:
    """Holds a callable that can be invoked, inspected and swapped."""

    __slots__ = ("_fun",)

    def __init__(self, fun: Optional[Callable[..., Any]] = None) -> None:
        self._fun = fun

    def get(self) -> Optional[Callable[..., Any]]:
        """Return the held callable, or None when empty."""
        return self._fun

    def play(self, *args: Any) -> Any:
        """Call the held callable with ``args`` and return its result."""
        if self._fun is None:
            raise TypeError("no function is set")
        return self._fun(*args)

    def replace(self, fun: Optional[Callable[..., Any]]) -> None:
        """Hold ``fun`` instead of the current callable."""
        self._fun = fun

    def __call__(self, *args: Any) -> Any:
        return self.play(*args)

    def __bool__(self) -> bool:
        return self._fun is not None

    def __repr__(self) -> str:
        return f"Function({self._fun!r})"