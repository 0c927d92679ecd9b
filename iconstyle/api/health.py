"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from iconstyle import __version__
from iconstyle.config import Settings
from iconstyle.dependencies import get_settings
from iconstyle.models.responses import HealthResponse, PresetInfo
from iconstyle.models.style import StylePreset

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(settings: Settings = Depends(get_settings)) -> HealthResponse:
    return HealthResponse(status="ok", version=__version__, environment=settings.iconstyle_env)


@router.get("/presets", response_model=list[PresetInfo])
async def presets() -> list[PresetInfo]:
    return [PresetInfo(name=p.value, file_suffix=p.file_suffix) for p in StylePreset]
