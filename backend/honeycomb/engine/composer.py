"""Template composer: master template + client map file -> renderable cells."""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime, timezone
from typing import Callable, Mapping, Optional, Protocol

from honeycomb.engine.catalog import DEFAULT_SERVICE_TYPES, ServiceTypeEntry, service_type_abbreviation
from honeycomb.engine.defaults import default_map_file, default_master_template
from honeycomb.engine.domain import (
    Cell,
    Cluster,
    EngagementState,
    FootprintTemplate,
    MapFile,
    MasterTemplate,
    TemplateSlot,
)
from honeycomb.engine.geometry import HexCoordinate
from honeycomb.engine.slots import DEFAULT_SLOT_CATALOG, SlotCatalog
from honeycomb.engine.styles import DEFAULT_STYLE_CATALOG, StyleCatalog

logger = logging.getLogger(__name__)


class TemplateLoadError(Exception):
    """A master template or map file could not be obtained."""


class TemplateSource(Protocol):
    def fetch_master_template(self) -> MasterTemplate: ...

    def fetch_map_file(self, client_id: str) -> MapFile: ...


DisplayNameSource = Callable[[TemplateSlot, MapFile, Mapping[str, ServiceTypeEntry]], Optional[str]]


def _name_from_map_file(slot: TemplateSlot, map_file: MapFile, types: Mapping[str, ServiceTypeEntry]) -> str | None:
    return map_file.cell_display_names.get(slot.id) or None


def _name_from_template(slot: TemplateSlot, map_file: MapFile, types: Mapping[str, ServiceTypeEntry]) -> str | None:
    return slot.display_name or None


def _name_from_service_type(
    slot: TemplateSlot, map_file: MapFile, types: Mapping[str, ServiceTypeEntry]
) -> str | None:
    return service_type_abbreviation(slot.service_type_id, types)


def _name_from_service_area(
    slot: TemplateSlot, map_file: MapFile, types: Mapping[str, ServiceTypeEntry]
) -> str | None:
    return slot.service_area or slot.id


# Highest priority first; the first non-empty name wins.
DISPLAY_NAME_SOURCES: tuple[DisplayNameSource, ...] = (
    _name_from_map_file,
    _name_from_template,
    _name_from_service_type,
    _name_from_service_area,
)


def resolve_display_name(
    slot: TemplateSlot,
    map_file: MapFile,
    service_types: Mapping[str, ServiceTypeEntry] = DEFAULT_SERVICE_TYPES,
) -> str:
    for source in DISPLAY_NAME_SOURCES:
        name = source(slot, map_file, service_types)
        if name:
            return name
    return slot.id


def slot_position(cluster: Cluster, slot: TemplateSlot, slots: SlotCatalog) -> HexCoordinate | None:
    """Absolute axial position of a template slot, or None if it has no geometry."""
    offset = slot.offset
    if offset is None:
        definition = slots.get(slot.slot)
        if definition is None:
            return None
        offset = definition.offset
    return cluster.center + offset


def _now_iso(now: datetime | None) -> str:
    return (now or datetime.now(timezone.utc)).isoformat()


def compose(
    master: MasterTemplate,
    map_file: MapFile,
    *,
    slots: SlotCatalog = DEFAULT_SLOT_CATALOG,
    service_types: Mapping[str, ServiceTypeEntry] = DEFAULT_SERVICE_TYPES,
    styles: StyleCatalog = DEFAULT_STYLE_CATALOG,
    now: datetime | None = None,
) -> FootprintTemplate:
    """Join a master template with one client's map file.

    Hidden clusters and inactive slots produce no cell at all. Every cell
    starts NOT_ENGAGED with the catalog's baseline visual properties.
    """
    cells: list[Cell] = []
    baseline = styles.baseline_visual()

    for cluster in master.clusters:
        if not map_file.is_cluster_visible(cluster.id):
            continue
        for slot in cluster.slots:
            if slot.id not in map_file.active_cells:
                continue
            position = slot_position(cluster, slot, slots)
            if position is None:
                logger.warning(
                    "Cell %s in cluster %s references unknown slot %s, skipping",
                    slot.id, cluster.id, slot.slot,
                )
                continue
            cells.append(
                Cell(
                    id=slot.id,
                    cluster_id=cluster.id,
                    service_area=slot.service_area,
                    position=position,
                    display_name=resolve_display_name(slot, map_file, service_types),
                    is_active=True,
                    engagement_state=EngagementState.NOT_ENGAGED,
                    visual_properties=baseline,
                    cell_state=slot.cell_state,
                )
            )

    logger.debug(
        "Composed %d cells for client %s (template %s, map %s)",
        len(cells), map_file.client_id, master.version, map_file.version,
    )

    return FootprintTemplate(
        id=f"{map_file.client_id}-{map_file.version}",
        client_id=map_file.client_id,
        master_template=master,
        map_file=map_file,
        generated_cells=tuple(cells),
        generated_date=_now_iso(now),
        version=map_file.version,
    )


def compose_default(client_id: str, **kwargs) -> FootprintTemplate:
    return compose(default_master_template(), default_map_file(client_id), **kwargs)


def load_footprint(client_id: str, source: TemplateSource, **kwargs) -> FootprintTemplate:
    """Fetch and compose a client's footprint, falling back to the defaults.

    A failed fetch is a recoverable condition: it is logged and the default
    master template and map file are composed for the same client id.
    """
    try:
        master = source.fetch_master_template()
        map_file = source.fetch_map_file(client_id)
    except TemplateLoadError as e:
        logger.warning("Template load failed for client %s (%s), using default template", client_id, e)
        return compose_default(client_id, **kwargs)

    logger.info("Loaded template %s and map %s for client %s", master.version, map_file.version, client_id)
    return compose(master, map_file, **kwargs)


def update_cell_state(
    template: FootprintTemplate,
    cell_id: str,
    state: EngagementState,
    now: datetime | None = None,
) -> FootprintTemplate:
    """New footprint with one cell's engagement state replaced. Unknown ids change nothing."""
    if template.get_cell(cell_id) is None:
        return template
    cells = tuple(
        replace(cell, engagement_state=state) if cell.id == cell_id else cell
        for cell in template.generated_cells
    )
    return replace(template, generated_cells=cells, generated_date=_now_iso(now))
