"""Exception hierarchy for the ear clipper."""

from __future__ import annotations


class EarClipError(Exception):
    """Base error of the package."""


class PolygonInputError(EarClipError, ValueError):
    """Unreadable polygon file, malformed line or non-finite coordinate."""


class DegeneratePolygonError(EarClipError):
    """Fewer than three vertices left after dropping the closing duplicate."""


class TriangulationError(EarClipError):
    """The clipping loop broke one of its invariants."""


class AreaMismatchError(TriangulationError):
    """Triangulated area differs from the integrated polygon area."""


class ClassificationError(TriangulationError):
    """A non-degenerate ear tip was no longer convex when clipped."""
