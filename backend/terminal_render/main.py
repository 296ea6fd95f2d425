"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from terminal_render.config import settings
from terminal_render.render.rasterizer import RenderBackendError

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.terminal_log_level.upper(), logging.DEBUG),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


async def _render_backend_failed(request: Request, exc: RenderBackendError) -> JSONResponse:
    logger.error("Render backend failure on %s: %s", request.url.path, exc)
    return JSONResponse({"error": "Rendering backend failure"}, status_code=500)


def create_app() -> FastAPI:
    app = FastAPI(
        title="Public Terminal Renderer",
        description="Token previews and social images for on-chain terminal messages",
        version="0.1.0",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RenderBackendError, _render_backend_failed)

    from terminal_render.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
