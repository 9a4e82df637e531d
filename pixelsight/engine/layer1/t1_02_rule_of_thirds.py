"""T1.02 — Rule of Thirds.

Fraction of the four thirds-line intersections that pass the center-focus test.
"""

from __future__ import annotations

from pixelsight.engine.config import AnalysisConfig
from pixelsight.engine.context import AnalysisContext
from pixelsight.engine.layer1.t1_01_center_focus import has_center_focus
from pixelsight.engine.pixels import PixelBuffer
from pixelsight.engine.registry import Layer, transform


def thirds_points(width: int, height: int) -> list[tuple[float, float]]:
    third_x, third_y = width / 3, height / 3
    return [
        (third_x, third_y),
        (third_x * 2, third_y),
        (third_x, third_y * 2),
        (third_x * 2, third_y * 2),
    ]


def rule_of_thirds_score(buffer: PixelBuffer, config: AnalysisConfig | None = None) -> float:
    points = thirds_points(buffer.width, buffer.height)
    focused = sum(1 for x, y in points if has_center_focus(buffer, x, y, config))
    return focused / len(points)


@transform(
    id="T1.02",
    layer=Layer.COMPOSITION,
    description="Score focus at the four rule-of-thirds intersections",
)
def rule_of_thirds(ctx: AnalysisContext) -> None:
    ctx.rule_of_thirds = rule_of_thirds_score(ctx.buffer, ctx.config)
