"""Wire models for analysis results — pydantic mirrors of the engine's value objects."""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from pixelsight.engine.results import (
    AnalysisResult,
    AverageColor,
    ColorStats,
    Composition,
    DetectedObject,
    DominantColor,
    Label,
    LabelName,
    ObjectName,
)


class LabelModel(BaseModel):
    description: LabelName
    score: float = Field(..., ge=0.0, le=1.0)

    @field_validator("description", mode="before")
    @classmethod
    def _normalise_description(cls, value: object) -> object:
        if isinstance(value, str) and not isinstance(value, LabelName):
            return LabelName.parse(value)
        return value


class DetectedObjectModel(BaseModel):
    name: ObjectName
    score: float = Field(..., ge=0.0, le=1.0)


class CompositionModel(BaseModel):
    rule_of_thirds: float = Field(0.0, ge=0.0, le=1.0)
    symmetry: float = Field(0.0, ge=0.0, le=1.0)
    center_focus: bool = False


class AverageColorModel(BaseModel):
    r: float = Field(..., ge=0.0, le=255.0)
    g: float = Field(..., ge=0.0, le=255.0)
    b: float = Field(..., ge=0.0, le=255.0)


class ColorStatsModel(BaseModel):
    average: AverageColorModel
    is_grayscale: bool = False
    is_colorful: bool = False
    dominant_color: DominantColor = DominantColor.MIXED


class AnalysisModel(BaseModel):
    labels: list[LabelModel] = Field(default_factory=list)
    objects: list[DetectedObjectModel] = Field(default_factory=list)
    composition: CompositionModel = Field(default_factory=CompositionModel)
    colors: ColorStatsModel

    @classmethod
    def from_result(cls, result: AnalysisResult) -> AnalysisModel:
        avg = result.colors.average
        return cls(
            labels=[LabelModel(description=label.description, score=label.score) for label in result.labels],
            objects=[DetectedObjectModel(name=obj.name, score=obj.score) for obj in result.objects],
            composition=CompositionModel(
                rule_of_thirds=result.composition.rule_of_thirds,
                symmetry=result.composition.symmetry,
                center_focus=result.composition.center_focus,
            ),
            colors=ColorStatsModel(
                average=AverageColorModel(r=avg.r, g=avg.g, b=avg.b),
                is_grayscale=result.colors.is_grayscale,
                is_colorful=result.colors.is_colorful,
                dominant_color=result.colors.dominant_color,
            ),
        )

    def to_result(self) -> AnalysisResult:
        avg = self.colors.average
        return AnalysisResult(
            labels=tuple(Label(description=label.description, score=label.score) for label in self.labels),
            objects=tuple(DetectedObject(name=obj.name, score=obj.score) for obj in self.objects),
            composition=Composition(
                rule_of_thirds=self.composition.rule_of_thirds,
                symmetry=self.composition.symmetry,
                center_focus=self.composition.center_focus,
            ),
            colors=ColorStats(
                average=AverageColor(r=avg.r, g=avg.g, b=avg.b),
                is_grayscale=self.colors.is_grayscale,
                is_colorful=self.colors.is_colorful,
                dominant_color=self.colors.dominant_color,
            ),
        )
