"""End-to-end tests for icon composition."""

from __future__ import annotations

import xml.etree.ElementTree as ET

import pytest

from tests.conftest import FLUENT_SVG, NESTED_SVG, NO_PATH_SVG, TRIANGLE_PATH, TRIANGLE_SVG

from iconstyle.engine.composer import generate_icon
from iconstyle.errors import SvgParsingError
from iconstyle.models.style import Gradient, StyleConfig, StylePreset

NS = "{http://www.w3.org/2000/svg}"


def test_neumorphism_full_document():
    svg = generate_icon(TRIANGLE_SVG, StylePreset.NEUMORPHISM, StyleConfig())
    assert svg == (
        '<svg width="128" height="128" viewBox="0 0 128 128" xmlns="http://www.w3.org/2000/svg">'
        '<defs><filter id="neumorphism-shadow">'
        '<feDropShadow dx="5.12" dy="5.12" stdDeviation="6.144" flood-color="rgba(0,0,0,0.12)"/>'
        '<feDropShadow dx="-5.12" dy="-5.12" stdDeviation="6.144" flood-color="rgba(255,255,255,0.7)"/>'
        "</filter></defs>"
        '<rect width="128" height="128" rx="25" ry="25" fill="#e0e0e0" filter="url(#neumorphism-shadow)"/>'
        '<g transform="translate(16, 16) scale(4)"><path d="M12 2L2 22h20L12 2z" fill="#333333"/></g>'
        "</svg>"
    )


def test_custom_icon_color():
    svg = generate_icon(FLUENT_SVG, StylePreset.NEUMORPHISM, StyleConfig(icon_color="#fafafa"))
    assert "scale(4)" in svg
    assert 'id="neumorphism-shadow"' in svg
    assert 'filter="url(#neumorphism-shadow)"' in svg
    assert f'<path d="{TRIANGLE_PATH}" fill="#fafafa"/>' in svg


def test_default_styles_when_omitted(triangle_svg, default_styles):
    assert generate_icon(triangle_svg, StylePreset.GLASSMORPHISM) == generate_icon(
        triangle_svg, StylePreset.GLASSMORPHISM, default_styles
    )


def test_glassmorphism_output():
    svg = generate_icon(TRIANGLE_SVG, StylePreset.GLASSMORPHISM)
    assert 'fill-opacity="0.2"' in svg
    assert 'stroke="rgba(255,255,255,0.3)"' in svg
    assert "neumorphism-shadow" not in svg


def test_gradient_output():
    styles = StyleConfig(gradient=Gradient(angle=90, start_color="#ff0000", stop_color="#00ff00"))
    svg = generate_icon(TRIANGLE_SVG, StylePreset.NEUMORPHISM, styles)
    assert '<linearGradient id="base-gradient"' in svg
    assert 'stop-color="#ff0000"' in svg
    assert 'fill="url(#base-gradient)"' in svg


@pytest.mark.parametrize("preset", list(StylePreset))
def test_output_is_well_formed_with_single_path(preset):
    styles = StyleConfig(width=96, height=64, padding=8)
    svg = generate_icon(NESTED_SVG, preset, styles)
    root = ET.fromstring(svg)

    assert root.tag == f"{NS}svg"
    assert root.get("width") == "96"
    assert root.get("height") == "64"
    assert root.get("viewBox") == "0 0 96 64"
    assert len(root.findall(f"{NS}defs")) == 1
    assert len(root.findall(f"{NS}rect")) == 1

    paths = list(root.iter(f"{NS}path"))
    assert len(paths) == 1
    assert paths[0].get("d") == "M2 12h44m-8-8 8 8-8 8"


def test_oversized_padding_still_generates():
    svg = generate_icon(TRIANGLE_SVG, StylePreset.FROSTED_GLASS, StyleConfig(padding=64))
    assert 'transform="translate(0, 0) scale(0)"' in svg


def test_parse_errors_propagate():
    with pytest.raises(SvgParsingError):
        generate_icon(NO_PATH_SVG, StylePreset.NEUMORPHISM)
