"""FastAPI dependency injection."""

from __future__ import annotations

from fastapi import Depends

from pixelsight.config import Settings, settings
from pixelsight.engine.config import AnalysisConfig


def get_settings() -> Settings:
    return settings


def get_analysis_config(app_settings: Settings = Depends(get_settings)) -> AnalysisConfig:
    return AnalysisConfig(max_dimension=app_settings.max_image_dimension)
