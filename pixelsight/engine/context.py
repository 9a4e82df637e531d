"""AnalysisContext — the per-call state object flowing through all transforms.

One context is created per ``analyze`` call and discarded afterwards; nothing
in it is shared between analyses.

Layer 0 results → color_stats, complexity, has_rectangles, has_circles
Layer 1 results → center_focus, rule_of_thirds, symmetry
Layer 2 results → labels, objects
"""

from __future__ import annotations

from dataclasses import dataclass, field

from pixelsight.engine.config import AnalysisConfig
from pixelsight.engine.pixels import PixelBuffer
from pixelsight.engine.results import (
    AnalysisResult,
    ColorStats,
    Composition,
    DetectedObject,
    Label,
)


@dataclass
class AnalysisContext:
    """Shared state for a single image's analysis."""

    buffer: PixelBuffer
    config: AnalysisConfig = field(default_factory=AnalysisConfig)

    # --- Layer 0: measurements ---
    color_stats: ColorStats | None = None
    complexity: float = 0.0
    has_rectangles: bool = False
    has_circles: bool = False

    # --- Layer 1: composition ---
    center_focus: bool = False
    rule_of_thirds: float = 0.0
    symmetry: float = 0.0

    # --- Layer 2: classification ---
    labels: list[Label] = field(default_factory=list)
    objects: list[DetectedObject] = field(default_factory=list)

    # --- Pipeline metadata ---
    completed_transforms: set[str] = field(default_factory=set)
    errors: dict[str, str] = field(default_factory=dict)

    @property
    def width(self) -> int:
        return self.buffer.width

    @property
    def height(self) -> int:
        return self.buffer.height

    @property
    def aspect_ratio(self) -> float:
        return self.buffer.aspect_ratio

    def to_result(self) -> AnalysisResult:
        """Freeze the stage outputs into an AnalysisResult."""
        if self.color_stats is None:
            raise ValueError("Color statistics were never computed")
        return AnalysisResult(
            labels=tuple(self.labels),
            objects=tuple(self.objects),
            composition=Composition(
                rule_of_thirds=self.rule_of_thirds,
                symmetry=self.symmetry,
                center_focus=self.center_focus,
            ),
            colors=self.color_stats,
        )
