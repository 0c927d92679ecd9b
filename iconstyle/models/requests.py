"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from iconstyle.models.style import StyleConfig, StylePreset


class GenerateRequest(BaseModel):
    svg: str = Field(..., description="Source SVG with a viewBox and one <path d>")
    preset: StylePreset = Field(..., description="Style preset for the base")
    styles: StyleConfig = Field(default_factory=StyleConfig, description="Size, padding and colors")
    gradient: str | None = Field(
        default=None,
        description='Optional "linear-gradient(<n>deg, #start, #stop)"; overrides styles.gradient',
    )


class BatchGenerateRequest(BaseModel):
    svgs: list[str] = Field(..., description="Source SVGs, each restyled independently")
    preset: StylePreset
    styles: StyleConfig = Field(default_factory=StyleConfig)
    gradient: str | None = None
