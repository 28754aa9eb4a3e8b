from __future__ import annotations

import pytest

from earclip.arith import DEFAULT_EPSILON, DEFAULT_SCALE, FixedPoint, FloatingPoint, make_arithmetic
from earclip.errors import PolygonInputError


def test_fixed_point_scales_decimal_exactly() -> None:
    fp = FixedPoint()
    assert fp.scale == DEFAULT_SCALE == 10_000_000
    assert fp.to_internal(0.3) == 3_000_000
    assert fp.to_internal("1.25") == 12_500_000
    assert fp.to_internal(-2) == -20_000_000
    assert isinstance(fp.to_internal(0.1), int)


def test_fixed_point_rounds_half_even() -> None:
    fp = FixedPoint()
    assert fp.to_internal("0.00000015") == 2
    assert fp.to_internal("0.00000025") == 2


def test_fixed_point_rejects_bad_input() -> None:
    fp = FixedPoint()
    with pytest.raises(PolygonInputError):
        fp.to_internal(float("nan"))
    with pytest.raises(PolygonInputError):
        fp.to_internal(float("inf"))
    with pytest.raises(PolygonInputError):
        fp.to_internal("abc")


def test_fixed_point_conversions_back_to_real() -> None:
    fp = FixedPoint(10)
    assert fp.point((1.5, -0.2)) == (15, -2)
    assert fp.to_real(15) == 1.5
    # doubled area of a unit square at scale 10
    assert fp.area_to_real(200) == 1.0


def test_fixed_point_consistency_is_exact() -> None:
    fp = FixedPoint()
    assert fp.consistent(10 ** 20, 10 ** 20)
    assert not fp.consistent(10 ** 20, 10 ** 20 + 1)


def test_fixed_point_scale_must_be_positive() -> None:
    with pytest.raises(ValueError):
        FixedPoint(0)


def test_floating_point() -> None:
    fl = FloatingPoint()
    assert fl.epsilon == DEFAULT_EPSILON
    assert fl.scale == 1
    assert fl.to_internal("0.5") == 0.5
    assert fl.area_to_real(2.0) == 1.0
    assert fl.consistent(1.0, 1.0 + 1e-9)
    assert not fl.consistent(1.0, 1.0 + 1e-6)
    with pytest.raises(PolygonInputError):
        fl.to_internal("x")
    with pytest.raises(PolygonInputError):
        fl.to_internal(float("inf"))
    with pytest.raises(ValueError):
        FloatingPoint(-1.0)


def test_make_arithmetic() -> None:
    assert isinstance(make_arithmetic("fixed"), FixedPoint)
    assert make_arithmetic("fixed", scale=1000).scale == 1000
    assert isinstance(make_arithmetic("floating"), FloatingPoint)
    assert make_arithmetic("float", epsilon=1e-6).epsilon == 1e-6
    with pytest.raises(ValueError):
        make_arithmetic("decimal")
