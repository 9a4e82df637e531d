"""T0.03 — Rectangular Shape Detector.

Straight-edge heuristic: sample a grid every ``step`` pixels; at each sample,
walk ``step`` pixels right along the row and count how many stay within the
brightness tolerance of the sample itself. A sample with enough continuity is
a "straight line" hit. The image has rectangular structure when hits exceed
one per ``line_density_divisor`` pixels of area.
"""

from __future__ import annotations

import numpy as np

from pixelsight.engine.config import AnalysisConfig
from pixelsight.engine.context import AnalysisContext
from pixelsight.engine.pixels import PixelBuffer
from pixelsight.engine.registry import Layer, transform


def count_straight_lines(buffer: PixelBuffer, config: AnalysisConfig | None = None) -> int:
    config = config or AnalysisConfig()
    step = config.line_sample_step
    xs = np.arange(0, buffer.width - step, step)
    if xs.size == 0:
        return 0

    rows = buffer.brightness[::step]  # sample rows y = 0, step, 2*step, ...
    offsets = xs[:, None] + np.arange(step)  # (n_samples_x, step)
    windows = rows[:, offsets]  # (n_rows, n_samples_x, step)
    anchors = windows[:, :, :1]

    continuity = np.count_nonzero(
        np.abs(windows - anchors) < config.line_brightness_tolerance, axis=2
    )
    return int(np.count_nonzero(continuity > config.line_min_continuity))


def has_rectangular_shapes(buffer: PixelBuffer, config: AnalysisConfig | None = None) -> bool:
    config = config or AnalysisConfig()
    hits = count_straight_lines(buffer, config)
    return hits > buffer.pixel_count / config.line_density_divisor


@transform(
    id="T0.03",
    layer=Layer.MEASUREMENT,
    description="Detect rectangular structure from horizontal brightness continuity",
)
def rectangular_shapes(ctx: AnalysisContext) -> None:
    ctx.has_rectangles = has_rectangular_shapes(ctx.buffer, ctx.config)
