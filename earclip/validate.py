"""
Triangulation checks.

1. Winding: every triangle has the orientation of the polygon
2. Count: optional expected number of triangles
3. Area preservation: sum of triangle areas == polygon area
4. Coverage (optional, sampled): every sample strictly inside the polygon
   lies in exactly one triangle, every sample outside lies in none

The sampled check uses the even-odd rule, so hole rings stitched to the outer
boundary through a pair of coincident edges are handled: the seam edges
cancel each other.
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

import numpy as np

from .clipper import Triangle

Pt = Tuple[float, float]


def polygon_area(pts: Sequence[Pt]) -> float:
    """Signed area of the ring, positive for counter-clockwise."""
    n = len(pts)
    area = 0.0
    for i in range(n):
        j = (i + 1) % n
        area += pts[i][0] * pts[j][1] - pts[j][0] * pts[i][1]
    return area / 2


def triangle_area(tri: Triangle) -> float:
    a, b, c = tri.vertices
    return ((b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0])) / 2


def _inside_polygon(samples: np.ndarray, ring: np.ndarray) -> np.ndarray:
    x = samples[:, 0][:, None]
    y = samples[:, 1][:, None]
    x0, y0 = ring[:, 0][None, :], ring[:, 1][None, :]
    nxt = np.roll(ring, -1, axis=0)
    x1, y1 = nxt[:, 0][None, :], nxt[:, 1][None, :]

    straddles = (y0 > y) != (y1 > y)
    with np.errstate(divide="ignore", invalid="ignore"):
        x_cross = x0 + (y - y0) * (x1 - x0) / (y1 - y0)
    crossings = straddles & (x < x_cross)
    return crossings.sum(axis=1) % 2 == 1


def _containing_counts(samples: np.ndarray, tris: np.ndarray) -> np.ndarray:
    """Number of triangles strictly containing each sample."""
    px = samples[:, 0][:, None]
    py = samples[:, 1][:, None]

    def side(a, b):
        ax, ay = tris[:, a, 0][None, :], tris[:, a, 1][None, :]
        bx, by = tris[:, b, 0][None, :], tris[:, b, 1][None, :]
        return (bx - ax) * (py - ay) - (by - ay) * (px - ax)

    d1, d2, d3 = side(0, 1), side(1, 2), side(2, 0)
    inside = ((d1 > 0) & (d2 > 0) & (d3 > 0)) | ((d1 < 0) & (d2 < 0) & (d3 < 0))
    return inside.sum(axis=1)


def coverage_defects(pts: Sequence[Pt], triangles: Sequence[Triangle],
                     samples: int = 2000, seed: int = 0) -> int:
    """Count sample points covered the wrong number of times."""
    ring = np.asarray(pts, dtype=float)
    lo = ring.min(axis=0)
    hi = ring.max(axis=0)
    rng = np.random.default_rng(seed)
    sample_pts = lo + rng.random((samples, 2)) * (hi - lo)

    expected = _inside_polygon(sample_pts, ring).astype(int)
    if triangles:
        tris = np.asarray([t.vertices for t in triangles], dtype=float)
        counts = _containing_counts(sample_pts, tris)
    else:
        counts = np.zeros(samples, dtype=int)
    return int(np.count_nonzero(counts != expected))


def verify_triangulation(pts: Sequence[Pt], triangles: Sequence[Triangle],
                         expected_count: Optional[int] = None,
                         coverage_samples: int = 0,
                         rel_tol: float = 1e-6) -> Tuple[bool, str]:
    """Verify a triangulation against its ring of real coordinates."""
    if len(pts) > 1 and tuple(pts[0]) == tuple(pts[-1]):
        pts = list(pts[:-1])

    if expected_count is not None and len(triangles) != expected_count:
        return False, f"Wrong count: {len(triangles)} != {expected_count}"

    poly_a = polygon_area(pts)
    for i, tri in enumerate(triangles):
        a = triangle_area(tri)
        if a == 0:
            return False, f"Degenerate triangle {i}: {tri.handles}"
        if (a > 0) != (poly_a > 0):
            return False, f"Winding mismatch in triangle {i}: {tri.handles}"

    tri_a = sum(triangle_area(t) for t in triangles)
    if abs(poly_a - tri_a) > rel_tol * max(1.0, abs(poly_a)):
        return False, f"Area mismatch: {poly_a:.12f} vs {tri_a:.12f}"

    if coverage_samples:
        bad = coverage_defects(pts, triangles, coverage_samples)
        if bad:
            return False, f"Coverage: {bad} of {coverage_samples} samples covered wrongly"

    return True, "OK"
