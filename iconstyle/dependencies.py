"""FastAPI dependency injection."""

from __future__ import annotations

from iconstyle.config import Settings, settings


def get_settings() -> Settings:
    return settings
