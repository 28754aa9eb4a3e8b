"""
Polygon CSV input and triangle output.

Input format: one ``x,y`` pair per line. Blank lines and lines starting with
``#`` are ignored.

Output format: each triangle as three ``x,y`` lines in (prev, tip, next)
order followed by an empty line.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, TextIO, Tuple, Union

from .clipper import Triangle
from .errors import PolygonInputError

PathLike = Union[str, Path]


def parse_points(lines: Iterable[str], source: str = "<input>") -> List[Tuple[float, float]]:
    points = []
    for lineno, raw in enumerate(lines, 1):
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        parts = line.split(",")
        if len(parts) != 2:
            raise PolygonInputError(f"{source}:{lineno}: expected 'x,y', got {line!r}")
        try:
            x, y = float(parts[0]), float(parts[1])
        except ValueError:
            raise PolygonInputError(f"{source}:{lineno}: not a number pair: {line!r}") from None
        points.append((x, y))
    return points


def read_points(path: PathLike) -> List[Tuple[float, float]]:
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            return parse_points(f, str(path))
    except OSError as e:
        raise PolygonInputError(f"cannot read {path}: {e.strerror}") from e


def write_points(points: Iterable[Tuple[float, float]], path: PathLike) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        for x, y in points:
            # High precision so the ring survives a round trip unchanged.
            f.write(f"{x:.17g},{y:.17g}\n")


def format_point(p: Tuple[float, float]) -> str:
    return f"{p[0]:.15g},{p[1]:.15g}"


def write_triangle(stream: TextIO, tri: Triangle) -> None:
    for p in tri.vertices:
        stream.write(format_point(p) + "\n")
    stream.write("\n")
