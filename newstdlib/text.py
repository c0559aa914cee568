"""A mutable string with C-style comparison helpers."""

from __future__ import annotations

import random
from typing import Iterator, Optional, Union

StrLike = Union["String", str, None]


def _text_of(value: object) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, String):
        return value._data
    if isinstance(value, str):
        return value
    raise TypeError(f"expected str or String, not {type(value).__name__}")


def _sign(a: str, b: str) -> int:
    return (a > b) - (a < b)


class String:
    """Mutable text that may also be null (holding no data at all).

    Comparisons follow ``strcmp``: they return a negative number, zero or a
    positive number. A null string compares like an empty one.
    """

    __slots__ = ("_data",)
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, value: StrLike = None) -> None:
        self._data: Optional[str] = _text_of(value)

    @property
    def _text(self) -> str:
        return self._data or ""

    @staticmethod
    def _operand(other: StrLike) -> str:
        return _text_of(other) or ""

    def contains(self, other: StrLike) -> bool:
        """Return True if ``other`` occurs in this string."""
        return self._operand(other) in self._text

    def compare_with(self, other: StrLike) -> int:
        """Return -1, 0 or 1 as this string sorts before, equal to or after ``other``."""
        return _sign(self._text, self._operand(other))

    def compare_n_bytes_with(self, other: StrLike, n: int) -> int:
        """Like :meth:`compare_with`, looking at the first ``n`` characters only."""
        if n < 0:
            raise ValueError(f"n must not be negative, got {n}")
        return _sign(self._text[:n], self._operand(other)[:n])

    def is_equal_with(self, other: StrLike) -> bool:
        return self.compare_with(other) == 0

    def is_n_byte_equal_with(self, other: StrLike, n: int) -> bool:
        return self.compare_n_bytes_with(other, n) == 0

    def replace(self, other: StrLike) -> None:
        """Overwrite the contents with ``other``."""
        self._data = _text_of(other)

    overwrite = replace

    def join(self, other: StrLike) -> None:
        """Append ``other`` to the end of this string."""
        self._data = self._text + self._operand(other)

    append = join

    def erase(self, index: int) -> None:
        """Remove the character at ``index``; an index past the end does nothing."""
        if index < 0:
            raise IndexError(f"index must not be negative, got {index}")
        if self._data is None or index >= len(self._data):
            return
        self._data = self._data[:index] + self._data[index + 1 :]

    def shuffle(self) -> None:
        """Randomly reorder the characters in place."""
        if not self._data:
            return
        chars = list(self._data)
        random.shuffle(chars)
        self._data = "".join(chars)

    def swap(self, other: String) -> None:
        """Exchange contents with another String."""
        if not isinstance(other, String):
            raise TypeError(f"can only swap with String, not {type(other).__name__}")
        self._data, other._data = other._data, self._data

    def empty(self) -> bool:
        """Return True if the string is null or has no characters."""
        return not self._data

    def data(self) -> Optional[str]:
        """Return the contents, or None for a null string."""
        return self._data

    def at(self, index: int) -> str:
        return self._text[index]

    def first(self) -> str:
        if not self._data:
            raise IndexError("first() on an empty string")
        return self._data[0]

    def last(self) -> str:
        if not self._data:
            raise IndexError("last() on an empty string")
        return self._data[-1]

    def clear(self) -> None:
        """Drop the contents, leaving a null string."""
        self._data = None

    destroy = clear

    def __len__(self) -> int:
        return len(self._text)

    def __getitem__(self, index: int) -> str:
        return self.at(index)

    def __iter__(self) -> Iterator[str]:
        return iter(self._text)

    def __contains__(self, item: object) -> bool:
        return isinstance(item, (str, String)) and self.contains(item)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"String({self._data!r})"

    def _compare(self, other: object) -> Optional[int]:
        if isinstance(other, (str, String)):
            return self.compare_with(other)
        return None

    def __eq__(self, other: object) -> bool:
        result = self._compare(other)
        return NotImplemented if result is None else result == 0

    def __ne__(self, other: object) -> bool:
        result = self._compare(other)
        return NotImplemented if result is None else result != 0

    def __lt__(self, other: object) -> bool:
        result = self._compare(other)
        return NotImplemented if result is None else result < 0

    def __le__(self, other: object) -> bool:
        result = self._compare(other)
        return NotImplemented if result is None else result <= 0

    def __gt__(self, other: object) -> bool:
        result = self._compare(other)
        return NotImplemented if result is None else result > 0

    def __ge__(self, other: object) -> bool:
        result = self._compare(other)
        return NotImplemented if result is None else result >= 0

    def __add__(self, other: object) -> String:
        if not isinstance(other, (str, String)):
            return NotImplemented
        result = String(self)
        result.join(other)
        return result

    def __radd__(self, other: object) -> String:
        if not isinstance(other, str):
            return NotImplemented
        return String(other + self._text)

    def __iadd__(self, other: object) -> String:
        if not isinstance(other, (str, String)):
            return NotImplemented
        self.join(other)
        return self

    def __mul__(self, count: object) -> String:
        """Repeat the text; a count of 0 or 1 leaves a single copy."""
        if isinstance(count, bool) or not isinstance(count, int):
            return NotImplemented
        if count < 0:
            raise ValueError(f"count must not be negative, got {count}")
        if self._data is None:
            return String()
        return String(self._data * max(count, 1))

    def __imul__(self, count: object) -> String:
        result = self.__mul__(count)
        if result is NotImplemented:
            return result
        self._data = result._data
        return self