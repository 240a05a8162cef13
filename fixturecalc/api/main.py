"""FastAPI application factory."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from fixturecalc.api.routes import router
from fixturecalc.config import settings
from fixturecalc.utils.logging import configure_logging


def create_app() -> FastAPI:
    configure_logging()

    app = FastAPI(
        title="Frame Fixture Calculator",
        description="Bicycle frame geometry to frame fixture setup coordinates",
        version="0.1.0",
    )

    # CORS: the form frontend runs on its own dev server
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(router, prefix="/api")

    return app


app = create_app()
