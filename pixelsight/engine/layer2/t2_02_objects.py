"""T2.02 — Primitive Object List.

Reports the shape detectors' findings as scored objects, independently of labels.
"""

from __future__ import annotations

from pixelsight.engine.config import AnalysisConfig
from pixelsight.engine.context import AnalysisContext
from pixelsight.engine.registry import Layer, transform
from pixelsight.engine.results import DetectedObject, ObjectName


def detect_objects(
    has_rectangles: bool,
    has_circles: bool,
    config: AnalysisConfig | None = None,
) -> list[DetectedObject]:
    config = config or AnalysisConfig()
    objects: list[DetectedObject] = []
    if has_rectangles:
        objects.append(DetectedObject(name=ObjectName.RECTANGLE, score=config.object_score))
    if has_circles:
        objects.append(DetectedObject(name=ObjectName.CIRCLE, score=config.object_score))
    return objects


@transform(
    id="T2.02",
    layer=Layer.CLASSIFICATION,
    dependencies=["T0.03", "T0.04"],
    description="List detected rectangle/circle primitives",
)
def objects(ctx: AnalysisContext) -> None:
    ctx.objects = detect_objects(ctx.has_rectangles, ctx.has_circles, ctx.config)
