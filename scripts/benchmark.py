#!/usr/bin/env python3
"""
Ear clipper benchmark.

Times EarClipper on every polygon family and size, in fixed and floating
point arithmetic, and reports:
- time_ms        wall time of the full clip loop
- r              concave vertices at construction
- tests          point-in-triangle tests (the O(n * r) term)

Outputs a pivot table on stdout and the raw rows as CSV.
"""

from __future__ import annotations

import argparse
import statistics
import time
from pathlib import Path
from typing import Dict, List

import pandas as pd

from earclip.arith import DEFAULT_EPSILON, DEFAULT_SCALE, make_arithmetic
from earclip.clipper import EarClipper
from earclip.polygons import FAMILIES

OUT_CSV = Path(__file__).resolve().parent.parent / "results" / "earclip_benchmark.csv"


def run_once(points, mode: str) -> Dict[str, float]:
    arith = make_arithmetic(mode, DEFAULT_SCALE, DEFAULT_EPSILON)
    start = time.perf_counter()
    clipper = EarClipper(points, arith)
    triangles = clipper.triangulate()
    elapsed_ms = (time.perf_counter() - start) * 1000
    return {
        'time_ms': elapsed_ms,
        'triangles': len(triangles),
        'r': clipper.stats['r'],
        'tests': clipper.stats['point_in_tri_tests'],
    }


def benchmark(families: List[str], sizes: List[int], modes: List[str], repeats: int) -> pd.DataFrame:
    rows = []
    for family in families:
        for n in sizes:
            points = FAMILIES[family](n)
            for mode in modes:
                runs = [run_once(points, mode) for _ in range(repeats)]
                rows.append({
                    'polygon_type': family,
                    'n': len(points),
                    'mode': mode,
                    'r': runs[0]['r'],
                    'triangles': runs[0]['triangles'],
                    'tests': runs[0]['tests'],
                    'time_ms': statistics.median(r['time_ms'] for r in runs),
                })
                print(f"{family:>8} n={len(points):>6} {mode:>8}: "
                      f"{rows[-1]['time_ms']:>10.2f} ms  r={runs[0]['r']}")
    return pd.DataFrame(rows)


def summarize(df: pd.DataFrame) -> None:
    df = df.copy()
    df['tests_per_n'] = df['tests'] / df['n']

    print()
    print("=" * 80)
    print("EAR CLIPPER BENCHMARK (median time, ms)")
    print("=" * 80)
    for ptype in df['polygon_type'].unique():
        pdata = df[df['polygon_type'] == ptype]
        pivot = pdata.pivot_table(values='time_ms', index='n', columns='mode')
        r_vals = pdata.groupby('n')['r'].first()
        tests = pdata.groupby('n')['tests_per_n'].first()
        print(f"\n{ptype.upper()}:")
        print("-" * 60)
        for n in sorted(pivot.index):
            cells = "  ".join(f"{mode}={pivot.loc[n, mode]:>9.2f}" for mode in pivot.columns)
            print(f"  n={n:>6}  r={int(r_vals[n]):>5}  tests/n={tests[n]:>8.1f}  {cells}")
    print("=" * 80)


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--families", nargs="+", default=sorted(FAMILIES), choices=sorted(FAMILIES))
    parser.add_argument("--sizes", nargs="+", type=int, default=[100, 500, 1000, 2000])
    parser.add_argument("--modes", nargs="+", default=["fixed", "floating"],
                        choices=["fixed", "floating"])
    parser.add_argument("--repeats", type=int, default=3)
    parser.add_argument("--output", type=Path, default=OUT_CSV)
    args = parser.parse_args()

    df = benchmark(args.families, args.sizes, args.modes, args.repeats)
    summarize(df)

    args.output.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(args.output, index=False)
    print(f"\nWrote {args.output}")


if __name__ == "__main__":
    main()
