"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from pixelsight.models.analysis import AnalysisModel


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    transforms_registered: int = 0


class AnalyzeResponse(BaseModel):
    analysis: AnalysisModel
    width: int
    height: int
    processing_time_ms: float = 0.0
    transforms_completed: int = 0


class CompareResponse(BaseModel):
    score: int = Field(..., ge=0, le=100)
    reason: str
    compatible: bool


class CompareImagesResponse(BaseModel):
    first: AnalysisModel
    second: AnalysisModel
    comparison: CompareResponse
    processing_time_ms: float = 0.0
