"""FastAPI dependency injection."""

from __future__ import annotations

from fastapi import Depends

from terminal_render.config import Settings, settings
from terminal_render.ledger.client import LedgerClient
from terminal_render.ledger.protocols import Ledger
from terminal_render.render.engine import ArtifactEngine


def get_settings() -> Settings:
    return settings


def get_ledger() -> Ledger:
    return LedgerClient(
        settings.rpc_url,
        settings.contract_address,
        timeout=settings.rpc_timeout_s,
    )


def get_engine(ledger: Ledger = Depends(get_ledger)) -> ArtifactEngine:
    return ArtifactEngine(ledger)
