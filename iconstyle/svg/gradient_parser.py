"""Parse a CSS-like ``linear-gradient(<angle>deg, <start>, <stop>)`` descriptor."""

from __future__ import annotations

import logging
import re

from iconstyle.errors import InvalidInput
from iconstyle.models.style import Gradient

logger = logging.getLogger(__name__)

_PREFIX = "linear-gradient("
_SUFFIX = ")"
_ANGLE_UNIT = "deg"

# Unsigned 16-bit angle, optional leading "+", ASCII digits only.
_ANGLE_RE = re.compile(r"\+?[0-9]+")
_ANGLE_MAX = 0xFFFF


def parse_gradient(text: str) -> Gradient:
    """Parse a two-stop linear gradient descriptor.

    Example: ``"linear-gradient(45deg, #ff0000, #0000ff)"``. Whitespace around
    the descriptor and around each comma-separated part is ignored. Colors are
    only checked for a leading ``#`` and are returned exactly as written.

    Raises:
        InvalidInput: if any part of the descriptor is malformed.
    """
    trimmed = text.strip()
    if not trimmed.startswith(_PREFIX) or not trimmed.endswith(_SUFFIX):
        raise InvalidInput("Gradient string must be in linear-gradient(...) format")

    content = trimmed[len(_PREFIX):-len(_SUFFIX)]
    parts = [part.strip() for part in content.split(",")]
    if len(parts) != 3:
        raise InvalidInput("Gradient must have 3 parts: angle, start-color, stop-color")

    angle_str, start_color, stop_color = parts

    if not angle_str.endswith(_ANGLE_UNIT):
        raise InvalidInput("Gradient angle must end with 'deg'")
    digits = angle_str[:-len(_ANGLE_UNIT)]
    if not _ANGLE_RE.fullmatch(digits) or int(digits) > _ANGLE_MAX:
        raise InvalidInput(f"Invalid angle value: {angle_str}")

    if not start_color.startswith("#") or not stop_color.startswith("#"):
        raise InvalidInput("Colors must be in hex format (e.g., #RRGGBB)")

    gradient = Gradient(angle=int(digits), start_color=start_color, stop_color=stop_color)
    logger.debug("Parsed gradient %s", gradient)
    return gradient
