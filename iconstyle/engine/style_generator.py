"""Styled base generator: rounded rect plus preset-specific definitions.

Each preset maps to one pure function returning the extra rect attributes and
an optional definition. Adding a preset means adding a StylePreset member and
an entry in ``_PRESET_STYLES``.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Callable

from iconstyle.models.style import Gradient, StyleConfig, StyledBase, StylePreset
from iconstyle.svg.serializer import element
from iconstyle.utils.math_helpers import format_number, format_percent

logger = logging.getLogger(__name__)

NEUMORPHISM_FILTER_ID = "neumorphism-shadow"
GLASS_BLUR_FILTER_ID = "glass-blur"
GRADIENT_ID = "base-gradient"

NEUMORPHISM_FILL = "#e0e0e0"
DEFAULT_FILL = "white"

# Shadow offset as a fraction of base width; blur is 1.2× the offset.
_SHADOW_OFFSET_DIVISOR = 25.0
_SHADOW_BLUR_FACTOR = 1.2
_SHADOW_DARK = "rgba(0,0,0,0.12)"
_SHADOW_LIGHT = "rgba(255,255,255,0.7)"

_GLASS_STROKE = "rgba(255,255,255,0.3)"
_GLASS_STROKE_WIDTH = "1"

# preset -> (blur stdDeviation, fill opacity)
_GLASS_PARAMS: dict[StylePreset, tuple[float, float]] = {
    StylePreset.GLASSMORPHISM: (5.0, 0.2),
    StylePreset.FROSTED_GLASS: (12.0, 0.1),
}


@dataclass(frozen=True)
class PresetStyle:
    """Rect attributes and an optional <defs> entry contributed by a preset."""

    attributes: dict[str, str] = field(default_factory=dict)
    definition: str | None = None


def create_styled_base(styles: StyleConfig, preset: StylePreset) -> StyledBase:
    """Build the <defs> content and the base <rect> for a style config and preset.

    A configured gradient always wins over the preset's default fill. The
    gradient definition, when present, precedes the preset's own definition.
    """
    definitions: list[str] = []
    rect_attrs = {
        "width": str(styles.width),
        "height": str(styles.height),
        "rx": format_number(styles.corner_radius),
        "ry": format_number(styles.corner_radius),
    }

    if styles.gradient is not None:
        definitions.append(create_gradient_def(styles.gradient))
        rect_attrs["fill"] = f"url(#{GRADIENT_ID})"
    else:
        rect_attrs["fill"] = NEUMORPHISM_FILL if preset is StylePreset.NEUMORPHISM else DEFAULT_FILL

    style = _PRESET_STYLES[preset](styles, preset)
    rect_attrs.update(style.attributes)
    if style.definition:
        definitions.append(style.definition)

    logger.debug("Styled base for %s: %d definition(s)", preset.value, len(definitions))
    return StyledBase(definitions="".join(definitions), base_shape=element("rect", rect_attrs))


def gradient_vector(angle: int) -> tuple[float, float, float, float]:
    """Endpoints (x1, y1, x2, y2) in percent for a CSS-style angle (0 = up).

    The angle is rotated by -90° and projected onto a circle of radius 50%
    centered on the box.
    """
    theta = math.radians(angle - 90.0)
    dx = math.cos(theta) * 50.0
    dy = math.sin(theta) * 50.0
    return 50.0 - dx, 50.0 - dy, 50.0 + dx, 50.0 + dy


def create_gradient_def(gradient: Gradient) -> str:
    x1, y1, x2, y2 = gradient_vector(gradient.angle)
    stops = (
        element("stop", {"offset": "0%", "stop-color": gradient.start_color})
        + element("stop", {"offset": "100%", "stop-color": gradient.stop_color})
    )
    attrs = {
        "id": GRADIENT_ID,
        "x1": format_percent(x1),
        "y1": format_percent(y1),
        "x2": format_percent(x2),
        "y2": format_percent(y2),
    }
    return element("linearGradient", attrs, children=stops)


def _neumorphism_style(styles: StyleConfig, preset: StylePreset) -> PresetStyle:
    offset = styles.width / _SHADOW_OFFSET_DIVISOR
    blur = format_number(offset * _SHADOW_BLUR_FACTOR)

    layers = []
    for sign, flood in ((1, _SHADOW_DARK), (-1, _SHADOW_LIGHT)):
        d = format_number(sign * offset)
        layers.append(
            element("feDropShadow", {"dx": d, "dy": d, "stdDeviation": blur, "flood-color": flood})
        )
    return PresetStyle(
        attributes={"filter": f"url(#{NEUMORPHISM_FILTER_ID})"},
        definition=element("filter", {"id": NEUMORPHISM_FILTER_ID}, children="".join(layers)),
    )


def _glass_style(styles: StyleConfig, preset: StylePreset) -> PresetStyle:
    blur, opacity = _GLASS_PARAMS[preset]
    # Defined in <defs> only; the rect does not reference it.
    blur_filter = element(
        "filter",
        {"id": GLASS_BLUR_FILTER_ID},
        children=element("feGaussianBlur", {"stdDeviation": format_number(blur)}),
    )
    return PresetStyle(
        attributes={
            "fill-opacity": format_number(opacity),
            "stroke": _GLASS_STROKE,
            "stroke-width": _GLASS_STROKE_WIDTH,
        },
        definition=blur_filter,
    )


_PRESET_STYLES: dict[StylePreset, Callable[[StyleConfig, StylePreset], PresetStyle]] = {
    StylePreset.NEUMORPHISM: _neumorphism_style,
    StylePreset.GLASSMORPHISM: _glass_style,
    StylePreset.FROSTED_GLASS: _glass_style,
}
