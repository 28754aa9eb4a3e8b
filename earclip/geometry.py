"""
Exact 2D predicates used by the ear clipper.

All areas are doubled (no division by two) so that fixed-point input stays in
integers. ``epsilon`` is 0 for fixed-point arithmetic, where the results are
exact, and a small positive tolerance for floating point.
"""

from __future__ import annotations

from typing import Sequence, Tuple

from .arith import Num

Point = Tuple[Num, Num]
Vector = Point


def cross_product(u: Vector, v: Vector) -> Num:
    return u[0] * v[1] - u[1] * v[0]


def signed_area(a: Point, b: Point, c: Point, epsilon: Num = 0) -> Num:
    """Twice the signed area of triangle abc, positive for a left turn at b."""
    ax, ay = a
    bx, by = b
    cx, cy = c
    area = cross_product((bx - ax, by - ay), (cx - ax, cy - ay))
    if abs(area) <= epsilon:
        return 0
    return area


def point_strictly_inside_triangle(v: Point, a: Point, b: Point, c: Point,
                                   epsilon: Num = 0) -> bool:
    """
    True iff v lies strictly inside triangle abc.

    A point on an edge or coincident with a corner is not inside. Holes are
    stitched to the outer ring by two coincident edges of opposite direction,
    and the stitch vertices would otherwise block every ear next to the seam.
    """
    vab = signed_area(v, a, b, epsilon)
    if vab == 0:
        return False

    vbc = signed_area(v, b, c, epsilon)
    if vbc == 0:
        return False
    if (vab > 0) != (vbc > 0):
        return False

    vca = signed_area(v, c, a, epsilon)
    if vca == 0:
        return False
    return (vbc > 0) == (vca > 0)


def point_on_open_segment(v: Point, a: Point, b: Point, epsilon: Num = 0) -> bool:
    """True iff v lies on segment ab and is neither a nor b."""
    if v == a or v == b or signed_area(a, b, v, epsilon) != 0:
        return False
    ax, ay = a
    bx, by = b
    vx, vy = v
    dot = (vx - ax) * (bx - ax) + (vy - ay) * (by - ay)
    return 0 < dot < (bx - ax) ** 2 + (by - ay) ** 2


def integrate_polygon(points: Sequence[Point]) -> Num:
    """
    Doubled signed area of the ring by trapezoid integration.

    Positive for counter-clockwise rings. The ring is closed implicitly.
    """
    n = len(points)
    if n < 3:
        return 0
    total = 0
    for i in range(n):
        x0, y0 = points[i]
        x1, y1 = points[(i + 1) % n]
        total += (y0 + y1) * (x1 - x0)
    return -total
