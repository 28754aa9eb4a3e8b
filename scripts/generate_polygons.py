#!/usr/bin/env python3
"""
Generate deterministic polygon datasets as CSV rings.
The format is one vertex per line:
x0,y0
x1,y1
...
"""

import argparse
from pathlib import Path

from earclip.polygons import FAMILIES, rotate_points, square_disk
from earclip.polyio import write_points


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--output", default="polygons/generated", type=Path)
    parser.add_argument(
        "--sizes",
        nargs="+",
        type=int,
        default=[10, 50, 100, 500, 1000, 2000, 5000],
    )
    parser.add_argument("--families", nargs="+", default=sorted(FAMILIES), choices=sorted(FAMILIES))
    args = parser.parse_args()

    # Deterministic rotation so axis-aligned families do not stay axis-aligned.
    rot = 0.123456789  # radians

    for n in args.sizes:
        for family in args.families:
            pts = rotate_points(FAMILIES[family](n), rot)
            write_points(pts, args.output / f"{family}_{n}.csv")
    write_points(square_disk(), args.output / "square_disk.csv")

    print(f"Generated polygons in {args.output}")


if __name__ == "__main__":
    main()
