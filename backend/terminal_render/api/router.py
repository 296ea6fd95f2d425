"""Master API router: mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from terminal_render.api import health, metadata, opengraph, preview

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(opengraph.router)
api_router.include_router(preview.router)
api_router.include_router(metadata.router)
