"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from pixelsight.models.analysis import AnalysisModel


class AnalyzeRequest(BaseModel):
    image: str = Field(..., description="Image as a data URL or bare base64 string")


class CompareRequest(BaseModel):
    first: AnalysisModel | None = Field(None, description="Analysis of the first image")
    second: AnalysisModel | None = Field(None, description="Analysis of the second image")


class CompareImagesRequest(BaseModel):
    first_image: str = Field(..., description="First image as a data URL or base64")
    second_image: str = Field(..., description="Second image as a data URL or base64")
