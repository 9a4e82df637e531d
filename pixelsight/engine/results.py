"""Value objects produced by the pipeline and the comparison scorer.

Everything here is frozen: a result is built once per analysis and handed
to the caller, who owns it exclusively.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


class DominantColor(str, enum.Enum):
    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    GRAY = "gray"
    MIXED = "mixed"


class LabelName(str, enum.Enum):
    LANDSCAPE = "landscape"
    PORTRAIT = "portrait"
    SQUARE = "square"
    MONOCHROME = "monochrome"
    COLORFUL = "colorful"
    COMPLEX = "complex"
    SIMPLE = "simple"
    PERSON = "person"
    ARCHITECTURE = "architecture"
    # Never emitted by the classifier; only appears in the incompatibility table.
    BUILDING = "building"

    @classmethod
    def parse(cls, text: str) -> LabelName:
        """Case-insensitive lookup; raises ValueError for unknown labels."""
        return cls(text.strip().lower())


class ObjectName(str, enum.Enum):
    RECTANGLE = "rectangle"
    CIRCLE = "circle"


@dataclass(frozen=True)
class AverageColor:
    r: float
    g: float
    b: float


@dataclass(frozen=True)
class ColorStats:
    average: AverageColor
    is_grayscale: bool
    is_colorful: bool
    dominant_color: DominantColor


@dataclass(frozen=True)
class Label:
    description: LabelName
    score: float


@dataclass(frozen=True)
class DetectedObject:
    name: ObjectName
    score: float


@dataclass(frozen=True)
class Composition:
    rule_of_thirds: float
    symmetry: float
    center_focus: bool


@dataclass(frozen=True)
class AnalysisResult:
    labels: tuple[Label, ...]
    objects: tuple[DetectedObject, ...]
    composition: Composition
    colors: ColorStats

    @property
    def label_names(self) -> frozenset[str]:
        """Lower-cased label descriptions, for order-insensitive matching."""
        return frozenset(label.description.value.lower() for label in self.labels)


@dataclass(frozen=True)
class ComparisonResult:
    score: int
    reason: str
