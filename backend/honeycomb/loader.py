"""Template sources: where master templates and client map files come from."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from honeycomb.config import Settings
from honeycomb.engine.composer import TemplateLoadError, TemplateSource
from honeycomb.engine.defaults import default_map_file, default_master_template
from honeycomb.engine.domain import MapFile, MasterTemplate
from honeycomb.models.documents import MapFileDocument, MasterTemplateDocument

logger = logging.getLogger(__name__)

MASTER_TEMPLATE_FILE = "master_template.json"
MAPS_DIR = "maps"


class DefaultTemplateSource:
    """Built-in defaults; never fails."""

    def fetch_master_template(self) -> MasterTemplate:
        return default_master_template()

    def fetch_map_file(self, client_id: str) -> MapFile:
        return default_map_file(client_id)


class FileTemplateSource:
    """JSON documents on disk.

    Layout::

        <data_dir>/master_template.json
        <data_dir>/maps/<client_id>.json
    """

    def __init__(self, data_dir: str | Path):
        self.data_dir = Path(data_dir)

    def _read(self, path: Path) -> str:
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise TemplateLoadError(f"cannot read {path}: {e}") from e

    def fetch_master_template(self) -> MasterTemplate:
        path = self.data_dir / MASTER_TEMPLATE_FILE
        try:
            return MasterTemplateDocument.model_validate_json(self._read(path)).to_domain()
        except (ValidationError, ValueError) as e:
            raise TemplateLoadError(f"invalid master template {path}: {e}") from e

    def fetch_map_file(self, client_id: str) -> MapFile:
        if not client_id or "/" in client_id or "\\" in client_id or client_id.startswith("."):
            raise TemplateLoadError(f"invalid client id {client_id!r}")
        path = self.data_dir / MAPS_DIR / f"{client_id}.json"
        try:
            doc = MapFileDocument.model_validate_json(self._read(path))
        except (ValidationError, ValueError) as e:
            raise TemplateLoadError(f"invalid map file {path}: {e}") from e
        if doc.client_id != client_id:
            logger.warning("Map file %s declares client %s, expected %s", path, doc.client_id, client_id)
            doc = doc.model_copy(update={"client_id": client_id})
        return doc.to_domain()


def create_template_source(cfg: Settings) -> TemplateSource:
    if cfg.data_dir:
        logger.info("Loading templates from %s", cfg.data_dir)
        return FileTemplateSource(cfg.data_dir)
    return DefaultTemplateSource()
