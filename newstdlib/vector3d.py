"""A three-component double-precision vector."""

from __future__ import annotations

import math
from numbers import Real
from typing import Callable, Iterator


def _div(a: float, b: float) -> float:
    """IEEE division: a zero divisor gives an infinity or NaN."""
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


class Vector3d:
    """Mutable 3D vector of doubles.

    ``*`` between two vectors is the cross product; ``+``, ``-`` and ``/``
    work component-wise. Every operator also accepts a scalar, which is
    applied to each component.
    """

    __slots__ = ("x", "y", "z")
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> None:
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __repr__(self) -> str:
        return f"Vector3d({self.x!r}, {self.y!r}, {self.z!r})"

    def cross(self, other: Vector3d) -> Vector3d:
        """Return the cross product ``self x other``."""
        return Vector3d(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def _elementwise(self, other: object, op: Callable[[float, float], float]):
        if isinstance(other, Vector3d):
            return Vector3d(op(self.x, other.x), op(self.y, other.y), op(self.z, other.z))
        if isinstance(other, Real):
            s = float(other)
            return Vector3d(op(self.x, s), op(self.y, s), op(self.z, s))
        return NotImplemented

    def _assign(self, result: object) -> object:
        if result is NotImplemented:
            return result
        self.x, self.y, self.z = result
        return self

    def __add__(self, other: object):
        return self._elementwise(other, lambda a, b: a + b)

    def __sub__(self, other: object):
        return self._elementwise(other, lambda a, b: a - b)

    def __truediv__(self, other: object):
        return self._elementwise(other, _div)

    def __mul__(self, other: object):
        if isinstance(other, Vector3d):
            return self.cross(other)
        return self._elementwise(other, lambda a, b: a * b)

    def __iadd__(self, other: object):
        return self._assign(self + other)

    def __isub__(self, other: object):
        return self._assign(self - other)

    def __imul__(self, other: object):
        return self._assign(self * other)

    def __itruediv__(self, other: object):
        return self._assign(self / other)

    def __pos__(self) -> Vector3d:
        return Vector3d(*self)

    def __neg__(self) -> Vector3d:
        return Vector3d(-self.x, -self.y, -self.z)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Vector3d):
            return self.x == other.x and self.y == other.y and self.z == other.z
        if isinstance(other, Real):
            s = float(other)
            return self.x == s and self.y == s and self.z == s
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result