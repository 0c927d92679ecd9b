"""Source SVG parser: extracts the viewBox size and the first outline path.

Only a single top-level <svg> with a 4-number viewBox and one <path d="...">
are recognized. The path data is copied verbatim; its commands are never
interpreted, so any valid outline syntax passes through untouched.
"""

from __future__ import annotations

import logging
import math
import xml.etree.ElementTree as ET

from iconstyle.errors import SvgParsingError
from iconstyle.models.style import BoundingBox, Icon

logger = logging.getLogger(__name__)

_ROOT_TAG = "svg"
_PATH_TAG = "path"
_VIEWBOX_ATTR = "viewBox"


def _strip_ns(tag: object) -> str:
    if not isinstance(tag, str):
        return ""
    return tag.split("}")[-1] if "}" in tag else tag


def _parse_number(token: str) -> float | None:
    try:
        return float(token)
    except ValueError:
        return None


def parse_viewbox(value: str) -> BoundingBox:
    """Reduce a viewBox value to its width/height.

    Tokens that are not numbers are dropped before counting, so a malformed
    token surfaces as a wrong-count error. The origin (first two numbers) is
    discarded.
    """
    numbers = [n for n in (_parse_number(t) for t in value.split()) if n is not None]
    if len(numbers) != 4:
        raise SvgParsingError("viewBox attribute has invalid format. Expected 4 numbers.")

    width, height = numbers[2], numbers[3]
    if not (math.isfinite(width) and math.isfinite(height) and width > 0 and height > 0):
        raise SvgParsingError(f"viewBox width and height must be positive and finite, got {width} x {height}")
    return BoundingBox(width=width, height=height)


def parse_svg(svg_text: str) -> Icon:
    """Parse raw SVG markup into an Icon (path data + viewBox size)."""
    try:
        root = ET.fromstring(svg_text)
    except ET.ParseError as e:
        raise SvgParsingError(str(e)) from e

    if _strip_ns(root.tag) != _ROOT_TAG:
        raise SvgParsingError("Root element is not <svg>")

    viewbox = root.get(_VIEWBOX_ATTR)
    if viewbox is None:
        raise SvgParsingError("SVG does not have a viewBox attribute")
    box = parse_viewbox(viewbox)

    # Document-order (depth-first) search for the first <path> carrying geometry
    path_data = next(
        (el.get("d") for el in root.iter() if _strip_ns(el.tag) == _PATH_TAG and "d" in el.attrib),
        None,
    )
    if path_data is None:
        raise SvgParsingError("No <path> element with a 'd' attribute found")

    logger.debug("Parsed SVG: viewBox %g×%g, path %d chars", box.width, box.height, len(path_data))
    return Icon(path_data=path_data, box=box)
