"""
Ear clipping with incremental re-classification.

The live polygon is an arena of vertices addressed by their input index
(a "handle"). Two integer lists, ``_prev`` and ``_next``, form an intrusive
doubly linked ring over the arena; clipping a vertex relinks its neighbours
and leaves every other handle valid.

Two sets of handles drive the loop:

- ``eartips``: convex vertices whose triangle contains no concave vertex
- ``concave``: reflex vertices, the only ones that can block an ear

After each clip only the two neighbours of the removed tip are
re-classified. Concave vertices can turn convex as their neighbours go away,
but never the other way round, so ``concave`` only ever shrinks after
construction.

Example::

    clipper = EarClipper([(0, 0), (1, 0), (1, 1), (0, 1)])
    for tri in clipper.clip():
        print(tri.vertices)
"""

from __future__ import annotations

import heapq
import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Optional, Set, TextIO, Tuple

from .arith import Arithmetic, FixedPoint, Num
from .errors import AreaMismatchError, ClassificationError, DegeneratePolygonError
from .geometry import (
    Point,
    integrate_polygon,
    point_on_open_segment,
    point_strictly_inside_triangle,
    signed_area,
)

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Triangle:
    """A clipped ear in (prev, tip, next) order."""

    handles: Tuple[int, int, int]
    vertices: Tuple[Tuple[float, float], Tuple[float, float], Tuple[float, float]]
    area: Num  # doubled signed area, internal units


class EarClipper:
    """
    Triangulates one polygon ring. Construct, then drain ``clip()`` or call
    ``triangulate()``.

    ``points`` are real (x, y) pairs; they are converted to the internal
    representation of ``arithmetic`` (fixed point by default). A trailing copy
    of the first point is dropped.
    """

    def __init__(self, points: Iterable[Tuple[float, float]],
                 arithmetic: Optional[Arithmetic] = None,
                 diagnostics: Optional[TextIO] = None):
        self.arith = arithmetic if arithmetic is not None else FixedPoint()
        self.diagnostics = diagnostics

        pts = [self.arith.point(p) for p in points]
        if len(pts) > 1 and pts[0] == pts[-1]:
            pts.pop()
        if len(pts) < 3:
            raise DegeneratePolygonError(
                f"polygon needs at least 3 distinct vertices, got {len(pts)}")

        self.points: List[Point] = pts
        n = len(pts)
        self._prev = [(i - 1) % n for i in range(n)]
        self._next = [(i + 1) % n for i in range(n)]
        self.size = n

        self.eartips: Set[int] = set()
        self.concave: Set[int] = set()
        self._queue: List[int] = []

        self.area_from_integral: Num = integrate_polygon(pts)
        self.area_from_triangulation: Num = 0

        self.stats: Dict[str, int] = {
            'n': n,
            'r': 0,
            'ear_checks': 0,
            'point_in_tri_tests': 0,
            'triangles': 0,
            'degenerate': 0,
        }
        self._find_concave_and_eartips()

    # ring navigation

    def prev(self, h: int) -> int:
        return self._prev[h]

    def next(self, h: int) -> int:
        return self._next[h]

    def ring(self) -> List[int]:
        """Live handles in ring order, starting from the lowest handle."""
        if self.size == 0:
            return []
        start = min(h for h in range(len(self.points)) if self._alive(h))
        out = [start]
        h = self._next[start]
        while h != start:
            out.append(h)
            h = self._next[h]
        return out

    def _alive(self, h: int) -> bool:
        return self._next[h] != -1

    def _unlink(self, h: int) -> None:
        p0, p2 = self._prev[h], self._next[h]
        self._next[p0] = p2
        self._prev[p2] = p0
        self._prev[h] = self._next[h] = -1
        self.size -= 1

    # classification

    def _area(self, p0: int, p1: int, p2: int) -> Num:
        return signed_area(self.points[p0], self.points[p1], self.points[p2],
                           self.arith.epsilon)

    def is_convex(self, h: int) -> bool:
        area = self._area(self._prev[h], h, self._next[h])
        return area != 0 and (area > 0) == (self.area_from_integral > 0)

    def is_ear(self, h: int) -> bool:
        """
        True if no concave vertex lies strictly inside h's triangle.

        A concave vertex in the open interior of the closing diagonal
        (prev, next) also blocks: cutting there would pinch the ring into two
        loops joined at that vertex. Coincident corners never block.
        """
        self.stats['ear_checks'] += 1
        a = self.points[self._prev[h]]
        b = self.points[h]
        c = self.points[self._next[h]]
        eps = self.arith.epsilon
        for v in self.concave:
            self.stats['point_in_tri_tests'] += 1
            p = self.points[v]
            if point_strictly_inside_triangle(p, a, b, c, eps):
                return False
            if point_on_open_segment(p, a, c, eps):
                return False
        return True

    def _add_eartip(self, h: int) -> None:
        if h not in self.eartips:
            self.eartips.add(h)
            heapq.heappush(self._queue, h)

    def _pop_eartip(self) -> int:
        # Lazy deletion: handles dropped from eartips stay in the heap.
        while True:
            h = heapq.heappop(self._queue)
            if h in self.eartips:
                self.eartips.discard(h)
                return h

    def _find_concave_and_eartips(self) -> None:
        convex = []
        for h in range(self.size):
            area = self._area(self._prev[h], h, self._next[h])
            if area == 0:
                continue
            if (area > 0) == (self.area_from_integral > 0):
                convex.append(h)
            else:
                self.concave.add(h)
        self.stats['r'] = len(self.concave)

        for h in convex:
            if self.is_ear(h):
                self._add_eartip(h)

        log.debug("classified %d vertices: %d convex, %d concave, %d ears",
                  self.size, len(convex), len(self.concave), len(self.eartips))

    # clipping

    def _triangle(self, p0: int, p1: int, p2: int, area: Num) -> Triangle:
        to_real = self.arith.to_real
        verts = tuple((to_real(x), to_real(y))
                      for x, y in (self.points[p0], self.points[p1], self.points[p2]))
        return Triangle((p0, p1, p2), verts, area)

    def clip(self) -> Iterator[Triangle]:
        """
        Clip ears until none is left or fewer than three vertices remain,
        yielding each non-degenerate triangle as soon as it is cut.

        Raises AreaMismatchError once exhausted if the triangles do not add up
        to the polygon area.
        """
        while self.eartips and self.size >= 3:
            p1 = self._pop_eartip()
            p0, p2 = self._prev[p1], self._next[p1]
            area = self._area(p0, p1, p2)
            if area != 0 and not self.is_convex(p1):
                raise ClassificationError(
                    f"ear tip {p1} at {self.points[p1]} is not convex")

            self._unlink(p1)
            if area != 0:
                self.area_from_triangulation += area
                self.stats['triangles'] += 1
                log.debug("clip %d: (%d, %d, %d) area=%s", p1, p0, p1, p2, area)
                yield self._triangle(p0, p1, p2, area)
            else:
                self.stats['degenerate'] += 1
                log.debug("drop degenerate vertex %d", p1)

            for p in (p0, p2):
                if self.is_convex(p):
                    self.concave.discard(p)
                    if self.is_ear(p):
                        self._add_eartip(p)
                    else:
                        self.eartips.discard(p)

        self._finish()

    def triangulate(self) -> List[Triangle]:
        return list(self.clip())

    def _finish(self) -> None:
        log.info("%s point arithmetic: %d triangles, %d degenerate, %d vertices left",
                 self.arith.name, self.stats['triangles'], self.stats['degenerate'],
                 self.size)
        if self.diagnostics is not None:
            self.report(self.diagnostics)
        if not self.arith.consistent(self.area_from_triangulation, self.area_from_integral):
            raise AreaMismatchError(
                f"area_from_triangulation={self.area_from_triangulation} != "
                f"area_from_integral={self.area_from_integral} "
                f"({self.size} vertices left unclipped)")

    def report(self, stream: TextIO) -> None:
        """Write the arithmetic mode and both total areas."""
        integral = abs(self.arith.area_to_real(self.area_from_integral))
        triangulated = abs(self.arith.area_to_real(self.area_from_triangulation))
        print(f"Using {self.arith.name} point arithmetic", file=stream)
        print(f"area_from_integral      = {integral:.20f}", file=stream)
        print(f"area_from_triangulation = {triangulated:.20f}", file=stream)
