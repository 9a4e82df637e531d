"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pixelsight.config import settings
from pixelsight.engine.registry import load_transforms

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.pixelsight_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


def create_app() -> FastAPI:
    app = FastAPI(
        title="PixelSight",
        description="Offline heuristic image characterization and comparison",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Import all transform modules so @transform decorators fire
    load_transforms()

    from pixelsight.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
