"""T0.02 — Complexity Estimator.

Texture/edge-density proxy: for every interior pixel, the absolute
difference between its brightness and the mean brightness of its four
neighbours, summed and normalised by width*height*255. The 1-pixel border
is skipped (no wraparound, no reflection), so images under 3x3 score 0.
"""

from __future__ import annotations

import numpy as np

from pixelsight.engine.context import AnalysisContext
from pixelsight.engine.pixels import PixelBuffer
from pixelsight.engine.registry import Layer, transform

_MAX_CHANNEL = 255


def estimate_complexity(buffer: PixelBuffer) -> float:
    if buffer.width < 3 or buffer.height < 3:
        return 0.0

    # Work on integer R+G+B sums S so flat regions stay exactly zero:
    # |S/3 - mean(N)/3| == |4*S - sum(N)| / 12
    sums = buffer.pixels[:, :, :3].sum(axis=2, dtype=np.int64)
    center = sums[1:-1, 1:-1]
    neighbours = sums[:-2, 1:-1] + sums[2:, 1:-1] + sums[1:-1, :-2] + sums[1:-1, 2:]
    total_variation = float(np.abs(4 * center - neighbours).sum()) / 12.0

    return min(total_variation / (buffer.pixel_count * _MAX_CHANNEL), 1.0)


@transform(
    id="T0.02",
    layer=Layer.MEASUREMENT,
    description="Local-neighbourhood brightness variation (busy vs. plain)",
)
def complexity(ctx: AnalysisContext) -> None:
    ctx.complexity = estimate_complexity(ctx.buffer)
