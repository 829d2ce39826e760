"""Domain model: templates, map files, cells and engagement overlays.

Master templates and map files are built once and never mutated; composed
cells are derived from them and recomputed rather than patched.
"""

from __future__ import annotations

import enum
from dataclasses import asdict, dataclass, field, replace

from honeycomb.engine.geometry import HexCoordinate

# A cluster holds at most this many inner slots (C1..C10).
MAX_SLOTS_PER_CLUSTER = 10


class ServiceAreaType(str, enum.Enum):
    ELN = "ELN"
    BI = "BI"
    SDMS = "SDMS"
    CDS = "CDS"
    LIMS = "LIMS"
    ODM = "ODM"
    CM = "CM"
    STRATEGIC_CONSULTING = "STRATEGIC_CONSULTING"
    DIGITAL_TRANSFORMATION = "DIGITAL_TRANSFORMATION"
    REGULATORY_AFFAIRS = "REGULATORY_AFFAIRS"
    QUALITY_ASSURANCE = "QUALITY_ASSURANCE"


class EngagementState(str, enum.Enum):
    NOT_ENGAGED = "NOT_ENGAGED"
    CURRENTLY_ENGAGED = "CURRENTLY_ENGAGED"
    ACTIVELY_PURSUING = "ACTIVELY_PURSUING"


@dataclass(frozen=True)
class CellVisualProperties:
    border_color: str
    # None = no explicit fill; the resolver chain decides
    background_color: str | None
    border_thickness: float
    opacity: float


@dataclass(frozen=True)
class VisualOverrides:
    """Partial visual properties carried by one engagement record."""

    border_color: str | None = None
    background_color: str | None = None
    border_thickness: float | None = None
    opacity: float | None = None

    def apply_to(self, base: CellVisualProperties) -> CellVisualProperties:
        changes = {k: v for k, v in asdict(self).items() if v is not None}
        return replace(base, **changes)


@dataclass(frozen=True)
class TemplateSlot:
    """One inner slot of a cluster as defined by a master template."""

    # Cell identifier referenced by map files and engagement overlays
    id: str
    # Positional key into the slot catalog (C1..C10)
    slot: str
    service_area: str
    service_type_id: str | None = None
    display_name: str | None = None
    cell_state: str | None = None
    # Explicit relative offset; None = take it from the slot catalog
    offset: HexCoordinate | None = None


@dataclass(frozen=True)
class Cluster:
    id: str
    center: HexCoordinate
    slots: tuple[TemplateSlot, ...] = ()
    label: str | None = None

    def __post_init__(self) -> None:
        if len(self.slots) > MAX_SLOTS_PER_CLUSTER:
            raise ValueError(
                f"Cluster {self.id} has {len(self.slots)} slots (max {MAX_SLOTS_PER_CLUSTER})"
            )
        seen: set[str] = set()
        for slot in self.slots:
            if slot.slot in seen:
                raise ValueError(f"Duplicate slot {slot.slot} in cluster {self.id}")
            seen.add(slot.slot)


@dataclass(frozen=True)
class MasterTemplate:
    id: str
    version: str
    clusters: tuple[Cluster, ...] = ()
    description: str = ""
    created_date: str = ""

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for cluster in self.clusters:
            for slot in cluster.slots:
                if slot.id in seen:
                    raise ValueError(f"Duplicate cell id {slot.id} in template {self.id}")
                seen.add(slot.id)

    def get_cluster(self, cluster_id: str) -> Cluster | None:
        for cluster in self.clusters:
            if cluster.id == cluster_id:
                return cluster
        return None


@dataclass(frozen=True)
class MapFile:
    """Per-client overlay: which cells exist, what they are called, which clusters show."""

    id: str
    client_id: str
    version: str
    active_cells: frozenset[str] = frozenset()
    cell_display_names: dict[str, str] = field(default_factory=dict)
    # Missing key = visible; a map file only lists exceptions
    cluster_visibility: dict[str, bool] = field(default_factory=dict)
    created_date: str = ""
    created_by: str = "system"

    def is_cluster_visible(self, cluster_id: str) -> bool:
        return self.cluster_visibility.get(cluster_id, True) is not False


@dataclass(frozen=True)
class Cell:
    id: str
    cluster_id: str
    service_area: str
    position: HexCoordinate
    display_name: str
    is_active: bool
    engagement_state: EngagementState
    visual_properties: CellVisualProperties
    cell_state: str | None = None


@dataclass(frozen=True)
class FootprintTemplate:
    id: str
    client_id: str
    master_template: MasterTemplate
    map_file: MapFile
    generated_cells: tuple[Cell, ...] = ()
    generated_date: str = ""
    version: str = ""

    def get_cell(self, cell_id: str) -> Cell | None:
        for cell in self.generated_cells:
            if cell.id == cell_id:
                return cell
        return None


@dataclass(frozen=True)
class EngagementData:
    """Live per-cell overlay record. A newer record for a cell replaces the old one."""

    cell_id: str
    engagement_state: EngagementState
    visual_properties: VisualOverrides | None = None
    cell_state: str | None = None
    last_updated: str = ""
