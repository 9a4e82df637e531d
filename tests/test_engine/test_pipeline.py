"""Tests for the pipeline orchestrator."""

import pytest

from pixelsight.engine.config import AnalysisConfig
from pixelsight.engine.context import AnalysisContext
from pixelsight.engine.errors import ImageTooLargeError
from pixelsight.engine.pipeline import Pipeline, create_pipeline
from pixelsight.engine.registry import Layer, TransformRegistry, TransformSpec
from tests.conftest import solid


def test_pipeline_runs_transforms():
    reg = TransformRegistry()
    results = []

    def t1(ctx: AnalysisContext) -> None:
        results.append("t1")

    def t2(ctx: AnalysisContext) -> None:
        results.append("t2")

    reg.register(TransformSpec(id="T0.01", layer=Layer.MEASUREMENT, fn=t1))
    reg.register(TransformSpec(id="T0.02", layer=Layer.MEASUREMENT, fn=t2, dependencies=["T0.01"]))

    pipeline = Pipeline(registry=reg)
    ctx = AnalysisContext(buffer=solid(4, 4))
    pipeline.run(ctx)

    assert results == ["t1", "t2"]
    assert "T0.01" in ctx.completed_transforms
    assert "T0.02" in ctx.completed_transforms


def test_pipeline_handles_errors():
    reg = TransformRegistry()

    def fail(ctx: AnalysisContext) -> None:
        raise ValueError("test error")

    reg.register(TransformSpec(id="T0.01", layer=Layer.MEASUREMENT, fn=fail))

    pipeline = Pipeline(registry=reg)
    ctx = AnalysisContext(buffer=solid(4, 4))
    pipeline.run(ctx)

    assert "T0.01" in ctx.errors
    assert "test error" in ctx.errors["T0.01"]


def test_run_streaming_events():
    pipeline = create_pipeline()
    ctx = pipeline.new_context(solid(20, 20))
    events = list(pipeline.run_streaming(ctx))

    # one "running" and one finished event per transform
    assert len(events) == 18
    assert [e["status"] for e in events[::2]] == ["running"] * 9
    assert all(e["status"] == "ok" for e in events[1::2])
    assert events[-1]["total"] == 9
    assert len(ctx.completed_transforms) == 9
    assert ctx.to_result().colors.is_grayscale is True


def test_run_streaming_reports_errors():
    reg = TransformRegistry()

    def fail(ctx: AnalysisContext) -> None:
        raise RuntimeError("boom")

    reg.register(TransformSpec(id="T0.01", layer=Layer.MEASUREMENT, fn=fail))
    ctx = AnalysisContext(buffer=solid(4, 4))
    events = list(Pipeline(registry=reg).run_streaming(ctx))

    assert events[-1]["status"] == "error"
    assert events[-1]["error"] == "boom"
    assert ctx.errors == {"T0.01": "boom"}


def test_new_context_enforces_max_dimension():
    pipeline = create_pipeline(AnalysisConfig(max_dimension=16))
    with pytest.raises(ImageTooLargeError):
        pipeline.new_context(solid(17, 4))
    assert pipeline.new_context(solid(16, 16)).width == 16


def test_to_result_requires_color_stats():
    with pytest.raises(ValueError):
        AnalysisContext(buffer=solid(4, 4)).to_result()
