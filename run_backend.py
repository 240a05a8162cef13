#!/usr/bin/env python3
"""Start the Frame Fixture Calculator API server."""

import uvicorn

from fixturecalc.config import settings

if __name__ == "__main__":
    uvicorn.run(
        "fixturecalc.api.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.API_RELOAD,
        reload_dirs=["fixturecalc"],
    )
