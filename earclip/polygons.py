"""
Polygon generators for tests, datasets and benchmarks.

Every generator returns a counter-clockwise ring as a list of (x, y) tuples
without a closing duplicate.
"""

from __future__ import annotations

import math
import random
from typing import Callable, Dict, List, Tuple

Ring = List[Tuple[float, float]]


def rotate_points(points: Ring, angle_rad: float) -> Ring:
    ca = math.cos(angle_rad)
    sa = math.sin(angle_rad)
    return [(ca * x - sa * y, sa * x + ca * y) for (x, y) in points]


def convex_polygon(n: int, radius: float = 1.0) -> Ring:
    return [(radius * math.cos(2 * math.pi * i / n), radius * math.sin(2 * math.pi * i / n))
            for i in range(n)]


def star_polygon(points: int = 5, outer: float = 2.0, inner: float = 0.8) -> Ring:
    pts = []
    for i in range(points * 2):
        angle = math.pi / 2 + i * math.pi / points
        r = outer if i % 2 == 0 else inner
        pts.append((r * math.cos(angle), r * math.sin(angle)))
    return pts


def comb_polygon(teeth: int = 3) -> Ring:
    pts = [(0, 0), (teeth * 2, 0), (teeth * 2, 1)]
    for i in range(teeth - 1, -1, -1):
        x = i * 2 + 1
        pts.extend([(x + 0.5, 1), (x, 2), (x - 0.5, 1)])
    pts.append((0, 1))
    return pts


def l_shape() -> Ring:
    return [(0, 0), (2, 0), (2, 1), (1, 1), (1, 2), (0, 2)]


def arrow_shape() -> Ring:
    return [(0, 1), (2, 1), (2, 0), (4, 1.5), (2, 3), (2, 2), (0, 2)]


def paper_example() -> Ring:
    return [
        (0.0, 2.5), (1.2, 5.5), (2.5, 3.8), (4.0, 6.5),
        (5.5, 4.8), (7.0, 7.0), (8.0, 5.5), (6.5, 3.5),
        (8.0, 1.5), (5.0, 2.5), (3.0, 0.0), (1.5, 1.5),
    ][::-1]


def random_polygon(n: int, radius: float = 100.0, seed: int = 42) -> Ring:
    """Star-shaped around the origin, hence always simple."""
    rng = random.Random(seed + n)
    angles = sorted(rng.random() * 2 * math.pi for _ in range(n))
    points = []
    for angle in angles:
        r = radius * (0.4 + 0.6 * rng.random())
        points.append((r * math.cos(angle), r * math.sin(angle)))
    return points


def dent_polygon(n: int, dent_depth: float = 0.25, radius: float = 100.0) -> Ring:
    # Nearly circular with a single inward dent: one reflex vertex.
    pts = []
    dent_i = max(0, n // 3)
    for i in range(n):
        a = 2 * math.pi * i / n
        rr = radius * (dent_depth if i == dent_i else 1.0)
        pts.append((rr * math.cos(a), rr * math.sin(a)))
    return pts


def square_disk(size: float = 4.0, margin: float = 1.0) -> Ring:
    """
    Square with a square hole, as a single ring.

    The outer boundary runs counter-clockwise back to its first corner, walks
    the seam to the hole, runs the hole clockwise, and the ring closes along
    the same seam in the opposite direction.
    """
    lo, hi = margin, size - margin
    return [
        (0.0, 0.0), (size, 0.0), (size, size), (0.0, size),
        (0.0, 0.0),
        (lo, lo), (lo, hi), (hi, hi), (hi, lo),
        (lo, lo),
    ]


FAMILIES: Dict[str, Callable[[int], Ring]] = {
    'convex': lambda n: convex_polygon(n, 100.0),
    'random': random_polygon,
    'star': lambda n: star_polygon(max(3, n // 2), 100.0, 30.0),
    'comb': lambda n: comb_polygon(max(1, (n - 4) // 3)),
    'dent': dent_polygon,
}
