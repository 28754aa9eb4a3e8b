from __future__ import annotations

import io

import pytest

from earclip.clipper import EarClipper
from earclip.errors import PolygonInputError
from earclip.polyio import format_point, parse_points, read_points, write_points, write_triangle


def test_parse_points_skips_blank_and_comment_lines() -> None:
    lines = ["# square\n", "0,0\n", "\n", "1, 0\n", " 1,1 \n", "0,1"]
    assert parse_points(lines) == [(0.0, 0.0), (1.0, 0.0), (1.0, 1.0), (0.0, 1.0)]


@pytest.mark.parametrize("line", ["1;2", "1,2,3", "a,b", "1"])
def test_parse_points_rejects_malformed_lines(line) -> None:
    with pytest.raises(PolygonInputError, match=r"poly.csv:2"):
        parse_points(["0,0", line], "poly.csv")


def test_read_points(tmp_path) -> None:
    path = tmp_path / "square.csv"
    path.write_text("0,0\n1,0\n1,1\n0,1\n0,0\n", encoding="utf-8")
    assert read_points(path) == [(0, 0), (1, 0), (1, 1), (0, 1), (0, 0)]


def test_read_points_missing_file(tmp_path) -> None:
    with pytest.raises(PolygonInputError, match="cannot read"):
        read_points(tmp_path / "nope.csv")


def test_write_points_keeps_full_precision(tmp_path) -> None:
    pts = [(0.1, 1 / 3), (2.0, -0.0000001), (1e6, 7.25)]
    path = tmp_path / "out" / "ring.csv"
    write_points(pts, path)
    assert read_points(path) == pts


def test_format_point() -> None:
    assert format_point((0.0, 1.0)) == "0,1"
    assert format_point((-2.5, 0.1234567)) == "-2.5,0.1234567"


def test_write_triangle() -> None:
    buf = io.StringIO()
    for tri in EarClipper([(0, 0), (1, 0), (1, 1), (0, 1)]).clip():
        write_triangle(buf, tri)
    assert buf.getvalue() == "0,1\n0,0\n1,0\n\n0,1\n1,0\n1,1\n\n"
