"""PixelSight heuristic image-analysis engine."""

from pixelsight.engine.analyzer import analyze, analyze_context, analyze_many
from pixelsight.engine.compare import are_compatible, compare
from pixelsight.engine.config import AnalysisConfig
from pixelsight.engine.context import AnalysisContext
from pixelsight.engine.errors import (
    AnalysisError,
    ImageDecodeError,
    ImageTooLargeError,
    InvalidBufferError,
    PixelSightError,
)
from pixelsight.engine.pipeline import Pipeline, create_pipeline
from pixelsight.engine.pixels import PixelBuffer
from pixelsight.engine.registry import Layer, get_registry, transform
from pixelsight.engine.results import AnalysisResult, ComparisonResult

__all__ = [
    "analyze",
    "analyze_context",
    "analyze_many",
    "compare",
    "are_compatible",
    "AnalysisConfig",
    "AnalysisContext",
    "AnalysisError",
    "ImageDecodeError",
    "ImageTooLargeError",
    "InvalidBufferError",
    "PixelSightError",
    "Pipeline",
    "create_pipeline",
    "PixelBuffer",
    "Layer",
    "get_registry",
    "transform",
    "AnalysisResult",
    "ComparisonResult",
]
