"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    honeycomb_env: str = "development"
    honeycomb_log_level: str = "debug"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Client shown when none is selected
    default_client_id: str = "regeneron"

    # Surrounding app endpoints (the live feed transport is not part of this service)
    api_base_url: str = "http://localhost:3001/api"
    websocket_url: str = "ws://localhost:3001"

    # Directory holding master_template.json and maps/<client>.json; empty = built-in defaults
    data_dir: str = ""

    # Geometry
    hex_size: float = 30.0
    hex_spacing: float = 65.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
