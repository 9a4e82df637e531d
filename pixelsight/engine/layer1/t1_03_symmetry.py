"""T1.03 — Bilateral Symmetry.

Compare every pixel in the left half (x < width/2) with its mirror at
width-1-x on the same row. For odd widths the middle column is compared with
itself. Score = matching pairs / compared pairs.
"""

from __future__ import annotations

import numpy as np

from pixelsight.engine.config import AnalysisConfig
from pixelsight.engine.context import AnalysisContext
from pixelsight.engine.pixels import PixelBuffer
from pixelsight.engine.registry import Layer, transform


def symmetry_score(buffer: PixelBuffer, config: AnalysisConfig | None = None) -> float:
    config = config or AnalysisConfig()
    lum = buffer.brightness
    half = (buffer.width + 1) // 2  # number of x with x < width / 2
    left = lum[:, :half]
    right = lum[:, buffer.width - 1 - np.arange(half)]

    compared = left.size
    if compared == 0:
        return 0.0
    matches = int(np.count_nonzero(np.abs(left - right) < config.symmetry_tolerance))
    return matches / compared


@transform(
    id="T1.03",
    layer=Layer.COMPOSITION,
    description="Left-right mirror symmetry of brightness",
)
def symmetry(ctx: AnalysisContext) -> None:
    ctx.symmetry = symmetry_score(ctx.buffer, ctx.config)
