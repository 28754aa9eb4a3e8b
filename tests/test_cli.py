from __future__ import annotations

from earclip.cli import main
from earclip.polygons import square_disk
from earclip.polyio import write_points


def write_square(tmp_path):
    path = tmp_path / "square.csv"
    path.write_text("0,0\n1,0\n1,1\n0,1\n0,0\n", encoding="utf-8")
    return path


def test_cli_prints_triangles_and_areas(tmp_path, capsys) -> None:
    assert main([str(write_square(tmp_path))]) == 0
    out = capsys.readouterr().out
    assert out == (
        "0,1\n0,0\n1,0\n\n"
        "0,1\n1,0\n1,1\n\n"
        "Using fixed point arithmetic\n"
        "area_from_integral      = 1.00000000000000000000\n"
        "area_from_triangulation = 1.00000000000000000000\n"
    )


def test_cli_floating_point(tmp_path, capsys) -> None:
    assert main([str(write_square(tmp_path)), "--float"]) == 0
    assert "Using floating point arithmetic" in capsys.readouterr().out


def test_cli_output_file_and_validate(tmp_path, capsys) -> None:
    poly = tmp_path / "disk.csv"
    write_points(square_disk(), poly)
    out_path = tmp_path / "tris.txt"

    assert main([str(poly), "-o", str(out_path), "--validate"]) == 0
    stdout = capsys.readouterr().out
    assert "PASS: n=10, triangles=8, OK" in stdout
    assert "area_from_integral      = 12.00000000000000000000" in stdout

    blocks = out_path.read_text(encoding="utf-8").strip().split("\n\n")
    assert len(blocks) == 8
    assert all(len(b.splitlines()) == 3 for b in blocks)


def test_cli_too_few_vertices(tmp_path, capsys) -> None:
    path = tmp_path / "line.csv"
    path.write_text("0,0\n1,0\n0,0\n", encoding="utf-8")
    assert main([str(path)]) == 1
    assert "at least 3 distinct vertices" in capsys.readouterr().err


def test_cli_malformed_input(tmp_path, capsys) -> None:
    path = tmp_path / "bad.csv"
    path.write_text("0,0\n1;0\n", encoding="utf-8")
    assert main([str(path)]) == 1
    assert "bad.csv:2" in capsys.readouterr().err


def test_cli_missing_file(tmp_path, capsys) -> None:
    assert main([str(tmp_path / "missing.csv")]) == 1
    assert "cannot read" in capsys.readouterr().err


def test_cli_custom_scale(tmp_path, capsys) -> None:
    assert main([str(write_square(tmp_path)), "--scale", "1000"]) == 0
    assert "area_from_triangulation = 1.00000000000000000000" in capsys.readouterr().out


def test_cli_bad_scale(tmp_path, capsys) -> None:
    assert main([str(write_square(tmp_path)), "--scale", "0"]) == 1
    assert "scale must be a positive integer" in capsys.readouterr().err
