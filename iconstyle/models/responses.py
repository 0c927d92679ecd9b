"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    environment: str = "development"


class PresetInfo(BaseModel):
    name: str
    file_suffix: str


class GenerateResponse(BaseModel):
    svg: str
    preset: str = ""


class BatchItemResult(BaseModel):
    index: int
    svg: str | None = None
    error: str | None = None


class BatchGenerateResponse(BaseModel):
    results: list[BatchItemResult] = Field(default_factory=list)
    succeeded: int = 0
    failed: int = 0
