"""
Numeric backends for the ear clipper.

Two representations are supported:

- fixed point: every coordinate is an ``int`` equal to the decimal input times
  ``scale``. 10,000,000 units per coordinate unit gives 0.1 um resolution on
  board-scale (mm) geometry, and Python integers never overflow, so every area
  is exact.
- floating point: coordinates are ``float`` and areas whose magnitude is at
  most ``epsilon`` are treated as exactly zero.

The backend is picked when the engine is constructed.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_EVEN, Decimal, InvalidOperation
from typing import Union

from .errors import PolygonInputError

Num = Union[int, float]

DEFAULT_SCALE = 10_000_000
DEFAULT_EPSILON = 1e-8


class Arithmetic:
    """Common interface of the two backends."""

    name = "abstract"
    scale: int = 1
    epsilon: Num = 0

    def to_internal(self, value) -> Num:
        raise NotImplementedError

    def to_real(self, value: Num) -> float:
        return value / self.scale

    def point(self, xy) -> tuple:
        x, y = xy
        return (self.to_internal(x), self.to_internal(y))

    def area_to_real(self, doubled_area: Num) -> float:
        """Convert a doubled internal area to a plain area in input units."""
        return doubled_area / self.scale / self.scale / 2.0

    def consistent(self, a: Num, b: Num) -> bool:
        return abs(a - b) <= self.epsilon

    def __repr__(self) -> str:
        return f"{type(self).__name__}(scale={self.scale}, epsilon={self.epsilon})"


class FixedPoint(Arithmetic):
    name = "fixed"
    epsilon = 0

    def __init__(self, scale: int = DEFAULT_SCALE):
        if int(scale) != scale or scale < 1:
            raise ValueError(f"scale must be a positive integer, got {scale!r}")
        self.scale = int(scale)

    def to_internal(self, value) -> int:
        # str() keeps the shortest decimal repr of floats, so 0.3 scales to
        # exactly 3000000 rather than 2999999.
        try:
            d = Decimal(str(value))
        except InvalidOperation:
            raise PolygonInputError(f"not a number: {value!r}") from None
        if not d.is_finite():
            raise PolygonInputError(f"non-finite coordinate: {value!r}")
        return int((d * self.scale).to_integral_value(rounding=ROUND_HALF_EVEN))

    def consistent(self, a: Num, b: Num) -> bool:
        return a == b


class FloatingPoint(Arithmetic):
    name = "floating"
    scale = 1

    def __init__(self, epsilon: float = DEFAULT_EPSILON):
        if epsilon < 0:
            raise ValueError(f"epsilon must be non-negative, got {epsilon!r}")
        self.epsilon = float(epsilon)

    def to_internal(self, value) -> float:
        try:
            f = float(value)
        except (TypeError, ValueError):
            raise PolygonInputError(f"not a number: {value!r}") from None
        if not math.isfinite(f):
            raise PolygonInputError(f"non-finite coordinate: {value!r}")
        return f


def make_arithmetic(mode: str = "fixed", scale: int = DEFAULT_SCALE,
                    epsilon: float = DEFAULT_EPSILON) -> Arithmetic:
    if mode == "fixed":
        return FixedPoint(scale)
    if mode in ("float", "floating"):
        return FloatingPoint(epsilon)
    raise ValueError(f"unknown arithmetic mode: {mode!r}")
