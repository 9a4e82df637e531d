"""T2.01 — Label Classifier.

Combines upstream signals into semantic labels, appended in a fixed order:

  aspect > 1.5 → landscape, aspect < 0.8 → portrait, else square
  grayscale → monochrome, else colorful (if colorful)
  complexity > 0.7 → complex, complexity < 0.3 → simple
  aspect < 1 AND center focus → person
  aspect > 1.2 AND rectangular shapes → architecture

Labels are only ever appended. Every label carries the same uncalibrated score.
"""

from __future__ import annotations

from pixelsight.engine.config import AnalysisConfig
from pixelsight.engine.context import AnalysisContext
from pixelsight.engine.registry import Layer, transform
from pixelsight.engine.results import ColorStats, Label, LabelName


def classify_labels(
    aspect_ratio: float,
    colors: ColorStats,
    complexity: float,
    center_focus: bool,
    has_rectangles: bool,
    config: AnalysisConfig | None = None,
) -> list[Label]:
    config = config or AnalysisConfig()
    names: list[LabelName] = []

    if aspect_ratio > config.landscape_aspect:
        names.append(LabelName.LANDSCAPE)
    elif aspect_ratio < config.portrait_aspect:
        names.append(LabelName.PORTRAIT)
    else:
        names.append(LabelName.SQUARE)

    if colors.is_grayscale:
        names.append(LabelName.MONOCHROME)
    elif colors.is_colorful:
        names.append(LabelName.COLORFUL)

    if complexity > config.complexity_high:
        names.append(LabelName.COMPLEX)
    elif complexity < config.complexity_low:
        names.append(LabelName.SIMPLE)

    if aspect_ratio < config.person_max_aspect and center_focus:
        names.append(LabelName.PERSON)

    if aspect_ratio > config.architecture_min_aspect and has_rectangles:
        names.append(LabelName.ARCHITECTURE)

    return [Label(description=name, score=config.label_score) for name in names]


@transform(
    id="T2.01",
    layer=Layer.CLASSIFICATION,
    dependencies=["T0.01", "T0.02", "T0.03", "T1.01"],
    description="Assign semantic labels from aspect, color, complexity and shape signals",
)
def labels(ctx: AnalysisContext) -> None:
    if ctx.color_stats is None:
        raise ValueError("T0.01 color statistics missing")
    ctx.labels = classify_labels(
        ctx.aspect_ratio,
        ctx.color_stats,
        ctx.complexity,
        ctx.center_focus,
        ctx.has_rectangles,
        ctx.config,
    )
