"""POST /api/compare — compatibility and similarity between two images."""

from __future__ import annotations

import asyncio
import time

from fastapi import APIRouter, Depends

from pixelsight.api.analyze import decode_request_image, run_analysis
from pixelsight.config import Settings
from pixelsight.dependencies import get_analysis_config, get_settings
from pixelsight.engine.compare import are_compatible, compare as compare_results
from pixelsight.engine.config import AnalysisConfig
from pixelsight.engine.results import AnalysisResult
from pixelsight.models.analysis import AnalysisModel
from pixelsight.models.requests import CompareImagesRequest, CompareRequest
from pixelsight.models.responses import CompareImagesResponse, CompareResponse

router = APIRouter()


def _comparison(first: AnalysisResult | None, second: AnalysisResult | None) -> CompareResponse:
    result = compare_results(first, second)
    return CompareResponse(
        score=result.score,
        reason=result.reason,
        compatible=are_compatible(first, second),
    )


@router.post("/compare", response_model=CompareResponse)
async def compare(req: CompareRequest) -> CompareResponse:
    first = req.first.to_result() if req.first is not None else None
    second = req.second.to_result() if req.second is not None else None
    return _comparison(first, second)


@router.post("/compare/images", response_model=CompareImagesResponse)
async def compare_images(
    req: CompareImagesRequest,
    app_settings: Settings = Depends(get_settings),
    config: AnalysisConfig = Depends(get_analysis_config),
) -> CompareImagesResponse:
    start = time.perf_counter()
    first_buffer = decode_request_image(req.first_image, app_settings)
    second_buffer = decode_request_image(req.second_image, app_settings)

    # Independent images: analyze both in the default executor at once
    loop = asyncio.get_running_loop()
    first_ctx, second_ctx = await asyncio.gather(
        loop.run_in_executor(None, run_analysis, first_buffer, config),
        loop.run_in_executor(None, run_analysis, second_buffer, config),
    )

    first, second = first_ctx.to_result(), second_ctx.to_result()

    elapsed = (time.perf_counter() - start) * 1000
    return CompareImagesResponse(
        first=AnalysisModel.from_result(first),
        second=AnalysisModel.from_result(second),
        comparison=_comparison(first, second),
        processing_time_ms=round(elapsed, 1),
    )
