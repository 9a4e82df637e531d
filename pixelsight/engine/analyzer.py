"""Public entry points: analyze one buffer, or many in parallel."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor

from pixelsight.engine.config import AnalysisConfig
from pixelsight.engine.context import AnalysisContext
from pixelsight.engine.errors import AnalysisError
from pixelsight.engine.pipeline import create_pipeline
from pixelsight.engine.pixels import PixelBuffer
from pixelsight.engine.results import AnalysisResult

logger = logging.getLogger(__name__)


def analyze_context(buffer: PixelBuffer, config: AnalysisConfig | None = None) -> AnalysisContext:
    """Run every stage on ``buffer`` and return the finished context.

    Raises InvalidBufferError for oversized buffers and AnalysisError if any
    stage failed.
    """
    pipeline = create_pipeline(config)
    ctx = pipeline.run(pipeline.new_context(buffer))
    if ctx.errors:
        raise AnalysisError(ctx.errors)
    return ctx


def analyze(buffer: PixelBuffer, config: AnalysisConfig | None = None) -> AnalysisResult:
    """Run every stage on ``buffer`` and return the frozen result.

    A partial result is never returned.
    """
    return analyze_context(buffer, config).to_result()


def analyze_many(
    buffers: Iterable[PixelBuffer],
    config: AnalysisConfig | None = None,
    max_workers: int | None = None,
) -> list[AnalysisResult]:
    """Analyze independent buffers concurrently, preserving input order."""
    items = list(buffers)
    logger.info("Analyzing %d buffers", len(items))
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        return list(pool.map(lambda buf: analyze(buf, config), items))
