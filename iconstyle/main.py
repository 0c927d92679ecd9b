"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from iconstyle import __version__
from iconstyle.config import settings
from iconstyle.errors import IconEngineError

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.iconstyle_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)


async def _engine_error_handler(request: Request, exc: IconEngineError) -> JSONResponse:
    return JSONResponse(status_code=422, content={"detail": str(exc)})


def create_app() -> FastAPI:
    app = FastAPI(
        title="iconstyle",
        description="Restyle single-path SVG icons onto neumorphism and glass bases",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(IconEngineError, _engine_error_handler)

    from iconstyle.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
