"""Value objects flowing through the icon generation pipeline."""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict, Field

from iconstyle.utils.math_helpers import format_number


class StylePreset(str, enum.Enum):
    """Decorative treatment applied to the base shape."""

    NEUMORPHISM = "neumorphism"
    GLASSMORPHISM = "glassmorphism"
    FROSTED_GLASS = "frosted-glass"

    @property
    def file_suffix(self) -> str:
        """Name used in exported file names, e.g. ``home-frostedglass.svg``."""
        return self.value.replace("-", "")


class Gradient(BaseModel):
    """Two-stop linear gradient. Colors are kept exactly as given."""

    model_config = ConfigDict(frozen=True)

    angle: int = Field(..., ge=0, le=65535, description="Direction in degrees, 0 = up")
    start_color: str = Field(..., pattern=r"^#")
    stop_color: str = Field(..., pattern=r"^#")


class StyleConfig(BaseModel):
    """User-configurable properties of the generated icon."""

    model_config = ConfigDict(frozen=True)

    width: int = Field(default=128, gt=0)
    height: int = Field(default=128, gt=0)
    corner_radius: float = Field(default=25.0, allow_inf_nan=False)
    padding: int = Field(default=16, ge=0)
    icon_color: str = "#333333"
    gradient: Gradient | None = None


class BoundingBox(BaseModel):
    """Width/height of the source viewBox. The min-x/min-y origin is not kept."""

    model_config = ConfigDict(frozen=True)

    width: float
    height: float


class Icon(BaseModel):
    """Essential data extracted from a source SVG."""

    model_config = ConfigDict(frozen=True)

    path_data: str
    box: BoundingBox


class IconTransform(BaseModel):
    """Translate-then-uniform-scale placing the icon path inside the base."""

    model_config = ConfigDict(frozen=True)

    translate_x: float = 0.0
    translate_y: float = 0.0
    scale: float = 0.0

    def to_svg(self) -> str:
        return (
            f"translate({format_number(self.translate_x)}, {format_number(self.translate_y)})"
            f" scale({format_number(self.scale)})"
        )

    def __str__(self) -> str:
        return self.to_svg()


class StyledBase(BaseModel):
    """Markup produced for the decorative base: inner <defs> content plus the <rect>."""

    model_config = ConfigDict(frozen=True)

    definitions: str = ""
    base_shape: str
