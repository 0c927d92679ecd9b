"""Shared test fixtures."""

from __future__ import annotations

import pytest

from iconstyle.models.style import StyleConfig


TRIANGLE_PATH = "M12 2L2 22h20L12 2z"

# Minimal single-path icon
TRIANGLE_SVG = f'<svg viewBox="0 0 24 24"><path d="{TRIANGLE_PATH}"></path></svg>'

# Typical exported icon: namespaced, sized, with presentation attributes
FLUENT_SVG = (
    '<svg width="24" height="24" viewBox="0 0 24 24" fill="none" xmlns="http://www.w3.org/2000/svg">'
    f'<path d="{TRIANGLE_PATH}" fill="#000000"></path></svg>'
)

# Path nested in a group, preceded by a <path> without geometry
NESTED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 48 24">
  <title>arrow</title>
  <g fill="none">
    <path fill="#ff0000"/>
    <g>
      <path d="M2 12h44m-8-8 8 8-8 8"/>
    </g>
  </g>
  <path d="M0 0h1"/>
</svg>'''

NO_VIEWBOX_SVG = '<svg width="24" height="24"><path d="M0 0h24v24H0z"/></svg>'

NO_PATH_SVG = '<svg viewBox="0 0 24 24"><circle cx="12" cy="12" r="10"/></svg>'

NOT_SVG = '<html><body><path d="M0 0"/></body></html>'


@pytest.fixture
def triangle_svg() -> str:
    return TRIANGLE_SVG


@pytest.fixture
def default_styles() -> StyleConfig:
    return StyleConfig()


# Positive viewBox whose fit scale overflows to infinity
TINY_VIEWBOX_SVG = f'<svg viewBox="0 0 1e-320 1e-320"><path d="{TRIANGLE_PATH}"/></svg>'
