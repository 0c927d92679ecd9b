"""Fit-and-center transform for placing the icon path inside the padded base."""

from __future__ import annotations

import logging
import math

from iconstyle.errors import SvgParsingError
from iconstyle.models.style import BoundingBox, IconTransform, StyleConfig

logger = logging.getLogger(__name__)

# Padding that leaves no drawable area collapses the icon to a point.
DEGENERATE_TRANSFORM = IconTransform(translate_x=0.0, translate_y=0.0, scale=0.0)


def calculate_transform(box: BoundingBox, styles: StyleConfig) -> IconTransform:
    """Scale the viewBox uniformly to fit the padded area and center it on both axes.

    Raises:
        SvgParsingError: if the viewBox is so small that the scale overflows.
    """
    target_w = styles.width - 2 * styles.padding
    target_h = styles.height - 2 * styles.padding

    if target_w <= 0 or target_h <= 0:
        logger.debug("Padding %d leaves no drawable area, using degenerate transform", styles.padding)
        return DEGENERATE_TRANSFORM

    scale = min(target_w / box.width, target_h / box.height)

    tx = styles.padding + (target_w - box.width * scale) / 2
    ty = styles.padding + (target_h - box.height * scale) / 2

    if not all(math.isfinite(v) for v in (scale, tx, ty)):
        raise SvgParsingError(f"viewBox {box.width:g} x {box.height:g} is too small to scale")

    transform = IconTransform(translate_x=tx, translate_y=ty, scale=scale)
    logger.debug("Transform for %g×%g viewBox: %s", box.width, box.height, transform)
    return transform
