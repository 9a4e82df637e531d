"""T0.04 — Circular Shape Detector.

Radial-symmetry heuristic on a circle of radius min(w, h)/4 around the image
center: for each angle, compare brightness at θ and θ+180°. Pairs with a point
outside the image are skipped. More than half of the 36 default samples
matching means the image has circular structure.
"""

from __future__ import annotations

import math

from pixelsight.engine.config import AnalysisConfig
from pixelsight.engine.context import AnalysisContext
from pixelsight.engine.pixels import PixelBuffer
from pixelsight.engine.registry import Layer, transform

_FULL_TURN = 360
_HALF_TURN = 180


def _point_on_circle(cx: float, cy: float, radius: float, angle: int) -> tuple[float, float]:
    theta = angle * math.pi / _HALF_TURN
    return cx + math.cos(theta) * radius, cy + math.sin(theta) * radius


def count_radial_matches(buffer: PixelBuffer, config: AnalysisConfig | None = None) -> int:
    config = config or AnalysisConfig()
    width, height = buffer.width, buffer.height
    cx, cy = width / 2, height / 2
    radius = min(width, height) / config.radial_radius_divisor

    def inside(x: float, y: float) -> bool:
        return 0 <= x < width and 0 <= y < height

    matches = 0
    for angle in range(0, _FULL_TURN, config.radial_angle_step):
        x1, y1 = _point_on_circle(cx, cy, radius, angle)
        x2, y2 = _point_on_circle(cx, cy, radius, angle + _HALF_TURN)
        if not (inside(x1, y1) and inside(x2, y2)):
            continue
        diff = abs(buffer.brightness_at(x1, y1) - buffer.brightness_at(x2, y2))
        if diff < config.radial_brightness_tolerance:
            matches += 1
    return matches


def has_circular_shapes(buffer: PixelBuffer, config: AnalysisConfig | None = None) -> bool:
    config = config or AnalysisConfig()
    return count_radial_matches(buffer, config) > config.radial_min_hits


@transform(
    id="T0.04",
    layer=Layer.MEASUREMENT,
    description="Detect circular structure from radial brightness symmetry",
)
def circular_shapes(ctx: AnalysisContext) -> None:
    ctx.has_circles = has_circular_shapes(ctx.buffer, ctx.config)
