"""Hard-coded default master template and map file.

Used whenever a client's documents cannot be loaded, so the diagram never
comes up empty. Both builders are deterministic for a given client id.
"""

from __future__ import annotations

from honeycomb.engine.domain import Cluster, MapFile, MasterTemplate, ServiceAreaType, TemplateSlot
from honeycomb.engine.geometry import HexCoordinate

DEFAULT_TEMPLATE_VERSION = "1.0.0"

# (cluster id, label, center, service areas in slot order)
DEFAULT_CLUSTERS: tuple[tuple[str, str, HexCoordinate, tuple[ServiceAreaType, ...]], ...] = (
    (
        "core-systems",
        "Core Systems",
        HexCoordinate(0, 0, 0),
        (
            ServiceAreaType.ELN,
            ServiceAreaType.LIMS,
            ServiceAreaType.SDMS,
            ServiceAreaType.CDS,
            ServiceAreaType.BI,
            ServiceAreaType.ODM,
            ServiceAreaType.CM,
        ),
    ),
    (
        "consulting-services",
        "Consulting Services",
        HexCoordinate(5, -2, -3),
        (
            ServiceAreaType.STRATEGIC_CONSULTING,
            ServiceAreaType.DIGITAL_TRANSFORMATION,
            ServiceAreaType.REGULATORY_AFFAIRS,
            ServiceAreaType.QUALITY_ASSURANCE,
        ),
    ),
)

# Primary service type per area; areas without one label themselves.
SERVICE_AREA_TO_TYPE: dict[str, str] = {
    ServiceAreaType.ELN: "ST_ELN",
    ServiceAreaType.LIMS: "ST_LIMS",
    ServiceAreaType.SDMS: "ST_SDMS",
    ServiceAreaType.CDS: "ST_CDS",
    ServiceAreaType.BI: "ST_BI",
    ServiceAreaType.ODM: "ST_ODM",
    ServiceAreaType.CM: "ST_CM",
    ServiceAreaType.DIGITAL_TRANSFORMATION: "ST_ERP",
    ServiceAreaType.REGULATORY_AFFAIRS: "ST_REGULATORY_SUBMISSION",
    ServiceAreaType.QUALITY_ASSURANCE: "ST_QMS",
}

_DEFAULT_DISPLAY_NAMES = {
    ServiceAreaType.STRATEGIC_CONSULTING: "Strategy",
    ServiceAreaType.DIGITAL_TRANSFORMATION: "Digital",
}


def default_cell_id(cluster_id: str, service_area: ServiceAreaType) -> str:
    return f"{cluster_id}-{service_area.value.lower()}"


def default_master_template() -> MasterTemplate:
    clusters = []
    for cluster_id, label, center, areas in DEFAULT_CLUSTERS:
        slots = tuple(
            TemplateSlot(
                id=default_cell_id(cluster_id, area),
                slot=f"C{index}",
                service_area=area.value,
                service_type_id=SERVICE_AREA_TO_TYPE.get(area),
            )
            for index, area in enumerate(areas, start=1)
        )
        clusters.append(Cluster(id=cluster_id, center=center, slots=slots, label=label))

    return MasterTemplate(
        id=f"default-{DEFAULT_TEMPLATE_VERSION}",
        version=DEFAULT_TEMPLATE_VERSION,
        clusters=tuple(clusters),
        description="Default pharmaceutical services honeycomb template",
    )


def default_map_file(client_id: str) -> MapFile:
    """Every default cell active, every cluster visible."""
    active: list[str] = []
    names: dict[str, str] = {}
    visibility: dict[str, bool] = {}

    for cluster_id, _label, _center, areas in DEFAULT_CLUSTERS:
        visibility[cluster_id] = True
        for area in areas:
            cell_id = default_cell_id(cluster_id, area)
            active.append(cell_id)
            if area in _DEFAULT_DISPLAY_NAMES:
                names[cell_id] = _DEFAULT_DISPLAY_NAMES[area]

    return MapFile(
        id=f"default-{client_id}",
        client_id=client_id,
        version=DEFAULT_TEMPLATE_VERSION,
        active_cells=frozenset(active),
        cell_display_names=names,
        cluster_visibility=visibility,
        created_by="system",
    )
