"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from terminal_render.config import Settings
from terminal_render.dependencies import get_settings
from terminal_render.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(cfg: Settings = Depends(get_settings)) -> HealthResponse:
    return HealthResponse(status="ok", version="0.1.0", environment=cfg.terminal_env)
