"""Icon composer: source SVG + preset + styles -> final SVG string."""

from __future__ import annotations

import logging

from iconstyle.engine.style_generator import create_styled_base
from iconstyle.engine.transform import calculate_transform
from iconstyle.models.style import StyleConfig, StylePreset
from iconstyle.svg.parser import parse_svg
from iconstyle.svg.serializer import serialize_icon

logger = logging.getLogger(__name__)


def generate_icon(svg_text: str, preset: StylePreset, styles: StyleConfig | None = None) -> str:
    """Restyle a single-path source icon onto a decorative base.

    Raises:
        SvgParsingError: if the source markup lacks a usable viewBox or path.
    """
    styles = styles or StyleConfig()

    icon = parse_svg(svg_text)
    transform = calculate_transform(icon.box, styles)
    styled = create_styled_base(styles, preset)

    svg = serialize_icon(
        width=styles.width,
        height=styles.height,
        definitions=styled.definitions,
        base_shape=styled.base_shape,
        transform=transform.to_svg(),
        path_data=icon.path_data,
        icon_color=styles.icon_color,
    )
    logger.debug("Generated %s icon (%d chars)", preset.value, len(svg))
    return svg
