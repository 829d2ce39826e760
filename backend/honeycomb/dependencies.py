"""FastAPI dependency injection."""

from __future__ import annotations

from honeycomb.config import Settings, settings
from honeycomb.engine.config import RenderConfig
from honeycomb.loader import create_template_source
from honeycomb.store import FootprintStore

_store: FootprintStore | None = None


def get_settings() -> Settings:
    return settings


def create_store(cfg: Settings) -> FootprintStore:
    return FootprintStore(
        create_template_source(cfg),
        config=RenderConfig(hex_size=cfg.hex_size, hex_spacing=cfg.hex_spacing),
    )


def get_store() -> FootprintStore:
    global _store
    if _store is None:
        _store = create_store(settings)
    return _store
