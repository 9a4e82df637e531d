"""POST /api/analyze — decode an image and run the full pipeline."""

from __future__ import annotations

import asyncio
import json
import logging
import time
from collections.abc import AsyncGenerator

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import StreamingResponse

from pixelsight.config import Settings
from pixelsight.dependencies import get_analysis_config, get_settings
from pixelsight.engine.analyzer import analyze_context
from pixelsight.engine.config import AnalysisConfig
from pixelsight.engine.context import AnalysisContext
from pixelsight.engine.errors import AnalysisError, ImageDecodeError, InvalidBufferError
from pixelsight.engine.pipeline import create_pipeline
from pixelsight.engine.pixels import PixelBuffer
from pixelsight.imaging.decoder import decode_data_url
from pixelsight.models.analysis import AnalysisModel
from pixelsight.models.requests import AnalyzeRequest
from pixelsight.models.responses import AnalyzeResponse

logger = logging.getLogger(__name__)

router = APIRouter()

_SENTINEL = object()  # marks end of queue

# base64 inflates payloads by 4/3
_BASE64_RATIO = 4 / 3


def check_payload_size(image: str, app_settings: Settings) -> None:
    if len(image) > app_settings.max_upload_bytes * _BASE64_RATIO:
        raise HTTPException(status_code=413, detail="Image payload too large")


def decode_request_image(image: str, app_settings: Settings) -> PixelBuffer:
    """Decode an uploaded image, mapping bad input to 413/422."""
    check_payload_size(image, app_settings)
    try:
        return decode_data_url(image)
    except (ImageDecodeError, InvalidBufferError) as e:
        raise HTTPException(status_code=422, detail=str(e)) from e


def run_analysis(buffer: PixelBuffer, config: AnalysisConfig) -> AnalysisContext:
    """Analyze synchronously, mapping engine errors to HTTP errors."""
    try:
        return analyze_context(buffer, config)
    except InvalidBufferError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    except AnalysisError as e:
        logger.error("Analysis failed: %s", e)
        raise HTTPException(status_code=500, detail=str(e)) from e


async def _stream_analyze(image: str, config: AnalysisConfig) -> AsyncGenerator[str, None]:
    """Drive pipeline.run_streaming() in a thread, yielding SSE events as they arrive."""
    start = time.perf_counter()
    pipeline = create_pipeline(config)

    try:
        buffer = decode_data_url(image)
        ctx = pipeline.new_context(buffer)
    except (ImageDecodeError, InvalidBufferError) as e:
        data = json.dumps({"type": "error", "message": str(e)})
        yield f"event: error\ndata: {data}\n\n"
        return

    loop = asyncio.get_running_loop()
    queue: asyncio.Queue = asyncio.Queue()

    def _run_pipeline() -> None:
        """Sync pipeline in thread — pushes progress dicts onto the async queue."""
        try:
            for progress in pipeline.run_streaming(ctx):
                loop.call_soon_threadsafe(queue.put_nowait, progress)
        finally:
            loop.call_soon_threadsafe(queue.put_nowait, _SENTINEL)

    # Start pipeline in a thread so the event loop stays free to flush SSE
    loop.run_in_executor(None, _run_pipeline)

    while True:
        item = await queue.get()
        if item is _SENTINEL:
            break
        yield f"event: progress\ndata: {json.dumps(item)}\n\n"

    if ctx.errors:
        data = json.dumps({"type": "error", "message": str(AnalysisError(ctx.errors))})
        yield f"event: error\ndata: {data}\n\n"
        return

    response = AnalyzeResponse(
        analysis=AnalysisModel.from_result(ctx.to_result()),
        width=buffer.width,
        height=buffer.height,
        processing_time_ms=round((time.perf_counter() - start) * 1000, 1),
        transforms_completed=len(ctx.completed_transforms),
    )
    yield f"event: result\ndata: {response.model_dump_json()}\n\n"
    yield f"event: done\ndata: {json.dumps({'type': 'done'})}\n\n"


@router.post("/analyze/stream")
async def analyze_stream(
    req: AnalyzeRequest,
    app_settings: Settings = Depends(get_settings),
    config: AnalysisConfig = Depends(get_analysis_config),
) -> StreamingResponse:
    check_payload_size(req.image, app_settings)
    return StreamingResponse(
        _stream_analyze(req.image, config),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
            "X-Accel-Buffering": "no",
        },
    )


@router.post("/analyze", response_model=AnalyzeResponse)
async def analyze(
    req: AnalyzeRequest,
    app_settings: Settings = Depends(get_settings),
    config: AnalysisConfig = Depends(get_analysis_config),
) -> AnalyzeResponse:
    start = time.perf_counter()
    buffer = decode_request_image(req.image, app_settings)

    loop = asyncio.get_running_loop()
    ctx = await loop.run_in_executor(None, run_analysis, buffer, config)

    elapsed = (time.perf_counter() - start) * 1000
    return AnalyzeResponse(
        analysis=AnalysisModel.from_result(ctx.to_result()),
        width=buffer.width,
        height=buffer.height,
        processing_time_ms=round(elapsed, 1),
        transforms_completed=len(ctx.completed_transforms),
    )
