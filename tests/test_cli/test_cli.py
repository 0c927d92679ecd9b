"""Tests for the mass-export command line."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from tests.conftest import NO_PATH_SVG, TRIANGLE_PATH, TRIANGLE_SVG

from iconstyle.cli import build_parser, main


@pytest.fixture
def source_dir(tmp_path: Path) -> Path:
    src = tmp_path / "source"
    src.mkdir()
    (src / "test_icon.svg").write_text(TRIANGLE_SVG, encoding="utf-8")
    return src


def test_mass_export_neumorphism(source_dir, tmp_path, caplog):
    caplog.set_level(logging.INFO)
    out = tmp_path / "output"

    code = main([
        "mass-export",
        "--source", str(source_dir),
        "--output", str(out),
        "--style", "neumorphism",
        "--color", "#fafafa",
    ])

    assert code == 0
    assert "Mass export complete!" in caplog.text
    assert "Found 1 SVG files to process." in caplog.text

    content = (out / "test_icon-neumorphism.svg").read_text(encoding="utf-8")
    assert "<defs>" in content
    assert 'id="neumorphism-shadow"' in content
    assert 'filter="url(#neumorphism-shadow)"' in content
    assert 'fill="#fafafa"' in content
    assert f'd="{TRIANGLE_PATH}"' in content


def test_mass_export_with_gradient_and_sizes(source_dir, tmp_path):
    out = tmp_path / "output"
    code = main([
        "mass-export", "-s", str(source_dir), "-o", str(out),
        "--style", "frosted-glass",
        "--gradient", "linear-gradient(45deg, #ff0000, #0000ff)",
        "--width", "64", "--height", "64", "--padding", "8", "--corner-radius", "12",
        "--workers", "2",
    ])
    assert code == 0
    content = (out / "test_icon-frostedglass.svg").read_text(encoding="utf-8")
    assert 'fill="url(#base-gradient)"' in content
    assert 'rx="12"' in content
    assert "scale(2)" in content


def test_per_file_failure_does_not_fail_run(source_dir, tmp_path, caplog):
    caplog.set_level(logging.INFO)
    (source_dir / "broken.svg").write_text(NO_PATH_SVG, encoding="utf-8")
    out = tmp_path / "output"

    code = main(["mass-export", "-s", str(source_dir), "-o", str(out), "--style", "glassmorphism"])

    assert code == 0
    assert "Failed to process file" in caplog.text
    assert (out / "test_icon-glassmorphism.svg").exists()
    assert not (out / "broken-glassmorphism.svg").exists()


def test_invalid_gradient_exits_nonzero(source_dir, tmp_path, caplog):
    code = main([
        "mass-export", "-s", str(source_dir), "-o", str(tmp_path / "output"),
        "--style", "neumorphism", "--gradient", "linear-gradient(45,#ff0000,#0000ff)",
    ])
    assert code == 1
    assert "must end with 'deg'" in caplog.text


def test_invalid_size_exits_nonzero(source_dir, tmp_path):
    code = main([
        "mass-export", "-s", str(source_dir), "-o", str(tmp_path / "output"),
        "--style", "neumorphism", "--width", "0",
    ])
    assert code == 1


def test_missing_source_exits_nonzero(tmp_path, caplog):
    code = main([
        "mass-export", "-s", str(tmp_path / "missing"), "-o", str(tmp_path / "output"),
        "--style", "neumorphism",
    ])
    assert code == 1
    assert "not a valid directory" in caplog.text


def test_unknown_style_rejected(tmp_path):
    with pytest.raises(SystemExit):
        build_parser().parse_args(["mass-export", "-s", "a", "-o", "b", "--style", "flat"])


def test_defaults():
    args = build_parser().parse_args(["mass-export", "-s", "a", "-o", "b", "--style", "glassmorphism"])
    assert args.color == "#333333"
    assert (args.width, args.height, args.padding) == (128, 128, 16)
    assert args.corner_radius == 25.0
    assert args.gradient is None


def test_nan_corner_radius_exits_nonzero(source_dir, tmp_path):
    code = main([
        "mass-export", "-s", str(source_dir), "-o", str(tmp_path / "output"),
        "--style", "glassmorphism", "--corner-radius", "nan",
    ])
    assert code == 1
    assert not (tmp_path / "output").exists()
