"""Integer helpers with unsigned 64-bit semantics and angle conversions."""

from __future__ import annotations

import math
import struct

PI = 3.14159265359

_UINT64_MAX = (1 << 64) - 1
_UINT64_MOD = 1 << 64


def _f32(value: float) -> float:
    """Round a number to the nearest single-precision float."""
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _uint64(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, not {type(value).__name__}")
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    if value > _UINT64_MAX:
        raise ValueError(f"{name} does not fit in 64 unsigned bits: {value}")
    return value


def power_of(n: int, p: int) -> int:
    """Return ``n`` raised to ``p``, wrapped to 64 unsigned bits."""
    n = _uint64("n", n)
    p = _uint64("p", p)
    if n == 0 and p == 0:
        raise ValueError("power_of(0, 0) is ambiguous")
    if n == 0:
        return 0
    if n == 1:
        return 1
    return pow(n, p, _UINT64_MOD)


def factorial_of(n: int) -> int:
    """Return ``n!``, wrapped to 64 unsigned bits."""
    n = _uint64("n", n)
    result = 1
    for factor in range(2, n + 1):
        result = (result * factor) & _UINT64_MAX
    return result


def int_divide_by(a: int, b: int) -> int:
    """Return the integer quotient ``a / b``."""
    a = _uint64("a", a)
    b = _uint64("b", b)
    if b == 0:
        raise ZeroDivisionError("division by zero")
    return a // b


def fast_int_divide_by(a: int, b: int) -> int:
    """Return ``a * (1 / b)`` computed entirely in integers."""
    a = _uint64("a", a)
    b = _uint64("b", b)
    if b == 0:
        raise ZeroDivisionError("division by zero")
    return (a * (1 // b)) & _UINT64_MAX


def int_multiply_by(a: int, b: int) -> int:
    """Return ``a * b``, wrapped to 64 unsigned bits."""
    a = _uint64("a", a)
    b = _uint64("b", b)
    return (a * b) & _UINT64_MAX


def deg_to_rad(deg: float) -> float:
    """Convert degrees to radians in single precision."""
    factor = _f32(_f32(PI) / 180.0)
    return _f32(_f32(deg) * factor)


def rad_to_deg(rad: float) -> float:
    """Convert radians to degrees in single precision."""
    factor = _f32(180.0 / _f32(PI))
    return _f32(_f32(rad) * factor)