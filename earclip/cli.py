"""
Command line front end.

    earclip polygon.csv                 # fixed point, triangles to stdout
    earclip polygon.csv --float         # floating point with epsilon
    earclip polygon.csv -o tris.txt --validate
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .arith import DEFAULT_EPSILON, DEFAULT_SCALE, make_arithmetic
from .clipper import EarClipper
from .errors import DegeneratePolygonError, TriangulationError
from .polyio import read_points, write_triangle
from .validate import verify_triangulation

log = logging.getLogger(__name__)


def setup_logging(verbose: int = 0) -> None:
    level = logging.WARNING
    if verbose == 1:
        level = logging.INFO
    elif verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="earclip",
        description="Triangulate a polygon ring by ear clipping")
    parser.add_argument("polygon", help="CSV file with one x,y vertex per line")
    parser.add_argument("--float", dest="mode", action="store_const", const="floating",
                        default="fixed", help="use floating point instead of fixed point")
    parser.add_argument("--scale", type=int, default=DEFAULT_SCALE,
                        help=f"fixed point units per coordinate unit (default {DEFAULT_SCALE})")
    parser.add_argument("--epsilon", type=float, default=DEFAULT_EPSILON,
                        help=f"floating point zero-area tolerance (default {DEFAULT_EPSILON})")
    parser.add_argument("--output", "-o", help="write triangles here instead of stdout")
    parser.add_argument("--validate", action="store_true",
                        help="check winding, area and sampled coverage of the result")
    parser.add_argument("--verbose", "-v", action="count", default=0)
    return parser


def run(args: argparse.Namespace) -> int:
    points = read_points(args.polygon)
    log.info("read %d points from %s", len(points), args.polygon)
    arith = make_arithmetic(args.mode, args.scale, args.epsilon)

    out = open(args.output, "w", encoding="utf-8") if args.output else sys.stdout
    try:
        clipper = EarClipper(points, arith, diagnostics=sys.stdout)
        triangles = []
        for tri in clipper.clip():
            write_triangle(out, tri)
            triangles.append(tri)
    finally:
        if out is not sys.stdout:
            out.close()

    if args.validate:
        ok, msg = verify_triangulation(points, triangles, coverage_samples=2000)
        print(f"{'PASS' if ok else 'FAIL'}: n={clipper.stats['n']}, "
              f"triangles={len(triangles)}, {msg}")
        if not ok:
            return 2
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)
    try:
        return run(args)
    except (ValueError, DegeneratePolygonError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    except TriangulationError as e:
        print(f"triangulation failed: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
