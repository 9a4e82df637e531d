"""T0.01 — Color Statistics.

Per-channel averages over every pixel, plus a gray/colorful tally:
a pixel is gray when all three pairwise channel differences are below
the tolerance, colorful otherwise. The two image-level flags are derived
independently from their own ratios, so both, either or neither may hold.
"""

from __future__ import annotations

import numpy as np

from pixelsight.engine.config import AnalysisConfig
from pixelsight.engine.context import AnalysisContext
from pixelsight.engine.pixels import PixelBuffer
from pixelsight.engine.registry import Layer, transform
from pixelsight.engine.results import AverageColor, ColorStats, DominantColor


def dominant_color(r: float, g: float, b: float, tolerance: float = 20.0) -> DominantColor:
    """Name the strictly strongest channel; fall back to gray or mixed."""
    if r > g and r > b:
        return DominantColor.RED
    if g > r and g > b:
        return DominantColor.GREEN
    if b > r and b > g:
        return DominantColor.BLUE
    if abs(r - g) < tolerance and abs(g - b) < tolerance and abs(r - b) < tolerance:
        return DominantColor.GRAY
    return DominantColor.MIXED


def compute_color_stats(buffer: PixelBuffer, config: AnalysisConfig | None = None) -> ColorStats:
    config = config or AnalysisConfig()
    rgb = buffer.pixels[:, :, :3].reshape(-1, 3).astype(np.int16)
    total = rgb.shape[0]

    sums = rgb.sum(axis=0, dtype=np.int64)
    avg_r, avg_g, avg_b = (float(s) / total for s in sums)

    r, g, b = rgb[:, 0], rgb[:, 1], rgb[:, 2]
    tol = config.gray_pixel_tolerance
    gray_mask = (np.abs(r - g) < tol) & (np.abs(g - b) < tol) & (np.abs(r - b) < tol)
    gray_count = int(np.count_nonzero(gray_mask))
    colorful_count = total - gray_count

    return ColorStats(
        average=AverageColor(r=avg_r, g=avg_g, b=avg_b),
        is_grayscale=gray_count / total > config.grayscale_ratio,
        is_colorful=colorful_count / total > config.colorful_ratio,
        dominant_color=dominant_color(avg_r, avg_g, avg_b, config.gray_dominance_tolerance),
    )


@transform(
    id="T0.01",
    layer=Layer.MEASUREMENT,
    description="Average color, grayscale/colorful ratios and dominant channel",
)
def color_statistics(ctx: AnalysisContext) -> None:
    ctx.color_stats = compute_color_stats(ctx.buffer, ctx.config)
