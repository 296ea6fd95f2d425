"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    terminal_env: str = "development"
    terminal_log_level: str = "debug"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Ledger (Base mainnet message contract)
    rpc_url: str = "https://mainnet.base.org"
    contract_address: str = "0x5a14B368718699065EB8d813337B4A6F0C3C35C7"
    rpc_timeout_s: float = 10.0

    # Public site, used for metadata external_url
    public_url: str = "https://publicterminal.xyz"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
