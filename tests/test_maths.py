import math

import pytest

from newstdlib.maths import (
    PI,
    deg_to_rad,
    factorial_of,
    fast_int_divide_by,
    int_divide_by,
    int_multiply_by,
    power_of,
    rad_to_deg,
)


@pytest.mark.parametrize("n,p", [(2, 10), (3, 5), (10, 18), (7, 3)])
def test_power_of_matches_exact_power_when_small(n, p):
    assert power_of(n, p) == n**p


def test_power_of_special_cases():
    assert power_of(0, 5) == 0
    assert power_of(1, 1000) == 1
    assert power_of(7, 0) == 1
    assert power_of(7, 1) == 7


def test_power_of_wraps_to_64_bits():
    assert power_of(2, 64) == 0
    assert power_of(3, 50) == (3**50) % (1 << 64)


def test_power_of_zero_to_zero_is_rejected():
    with pytest.raises(ValueError):
        power_of(0, 0)


@pytest.mark.parametrize("n", [0, 1, 5, 10, 20])
def test_factorial_matches_math(n):
    assert factorial_of(n) == math.factorial(n)


def test_factorial_wraps_to_64_bits():
    assert factorial_of(25) == math.factorial(25) % (1 << 64)


def test_negative_input_rejected():
    with pytest.raises(ValueError):
        factorial_of(-1)
    with pytest.raises(ValueError):
        power_of(-2, 3)


def test_non_int_rejected():
    with pytest.raises(TypeError):
        int_multiply_by(2.5, 3)


def test_int_divide_by():
    assert int_divide_by(17, 5) * 5 + 17 % 5 == 17
    with pytest.raises(ZeroDivisionError):
        int_divide_by(1, 0)


def test_fast_int_divide_by_follows_integer_reciprocal():
    assert fast_int_divide_by(10, 1) == 10
    assert fast_int_divide_by(10, 3) == 0
    with pytest.raises(ZeroDivisionError):
        fast_int_divide_by(10, 0)


def test_int_multiply_by_wraps():
    assert int_multiply_by(6, 7) == 42
    assert int_multiply_by(1 << 63, 2) == 0


def test_deg_to_rad_half_turn_is_pi():
    assert deg_to_rad(180.0) == pytest.approx(PI, rel=1e-6)


@pytest.mark.parametrize("deg", [0.0, 30.0, 90.0, -45.0, 360.0])
def test_angle_round_trip(deg):
    assert rad_to_deg(deg_to_rad(deg)) == pytest.approx(deg, abs=1e-4)