"""T1.01 — Center Focus.

A point "has focus" when it is brighter than the mean of the four image
corners by a fixed margin. The transform records the test at the image
center; rule of thirds (T1.02) reuses the same test at other points.
"""

from __future__ import annotations

from pixelsight.engine.config import AnalysisConfig
from pixelsight.engine.context import AnalysisContext
from pixelsight.engine.pixels import PixelBuffer
from pixelsight.engine.registry import Layer, transform


def corner_brightness(buffer: PixelBuffer) -> float:
    """Mean brightness of the four corner pixels."""
    lum = buffer.brightness
    right, bottom = buffer.width - 1, buffer.height - 1
    corners = (lum[0, 0], lum[0, right], lum[bottom, 0], lum[bottom, right])
    return float(sum(corners)) / len(corners)


def has_center_focus(
    buffer: PixelBuffer,
    cx: float,
    cy: float,
    config: AnalysisConfig | None = None,
) -> bool:
    config = config or AnalysisConfig()
    return buffer.brightness_at(cx, cy) > corner_brightness(buffer) + config.center_focus_margin


@transform(
    id="T1.01",
    layer=Layer.COMPOSITION,
    description="Is the image center brighter than its corners",
)
def center_focus(ctx: AnalysisContext) -> None:
    ctx.center_focus = has_center_focus(ctx.buffer, ctx.width / 2, ctx.height / 2, ctx.config)
