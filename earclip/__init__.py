"""
Ear clipping triangulation of simple polygons, including holes stitched to
the outer boundary through coincident, oppositely directed edges.
"""

from .arith import DEFAULT_EPSILON, DEFAULT_SCALE, FixedPoint, FloatingPoint, make_arithmetic
from .clipper import EarClipper, Triangle
from .errors import (
    AreaMismatchError,
    ClassificationError,
    DegeneratePolygonError,
    EarClipError,
    PolygonInputError,
    TriangulationError,
)
from .geometry import (
    integrate_polygon,
    point_on_open_segment,
    point_strictly_inside_triangle,
    signed_area,
)

__version__ = "0.1.0"
