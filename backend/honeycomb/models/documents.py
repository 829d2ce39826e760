"""On-disk template documents: master template and client map file.

Field names are accepted in snake_case or camelCase; unknown fields are
ignored and missing optional fields take their documented defaults.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from honeycomb.engine.domain import Cluster, MapFile, MasterTemplate, TemplateSlot
from honeycomb.engine.geometry import HexCoordinate
from honeycomb.engine.slots import normalize_offset

_DOC_CONFIG = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class HexCoordinateModel(BaseModel):
    model_config = _DOC_CONFIG

    q: float = Field(default=0.0, allow_inf_nan=False)
    r: float = Field(default=0.0, allow_inf_nan=False)
    s: float | None = Field(default=None, allow_inf_nan=False)

    def to_domain(self) -> HexCoordinate:
        return normalize_offset(self.q, self.r, self.s)


class TemplateSlotModel(BaseModel):
    model_config = _DOC_CONFIG

    slot: str = Field(..., description="Slot key C1..C10")
    id: str | None = Field(default=None, description="Cell id; defaults to the slot key")
    service_area: str = ""
    service_type_id: str | None = None
    display_name: str | None = None
    cell_state: str | None = None
    axial_offset: HexCoordinateModel | None = None

    def to_domain(self) -> TemplateSlot:
        return TemplateSlot(
            id=self.id or self.slot,
            slot=self.slot,
            service_area=self.service_area,
            service_type_id=self.service_type_id,
            display_name=self.display_name,
            cell_state=self.cell_state,
            offset=self.axial_offset.to_domain() if self.axial_offset is not None else None,
        )


class ClusterModel(BaseModel):
    model_config = _DOC_CONFIG

    id: str
    label: str | None = None
    center_position: HexCoordinateModel = Field(default_factory=HexCoordinateModel)
    cell_slots: list[TemplateSlotModel] = Field(default_factory=list)

    def to_domain(self) -> Cluster:
        return Cluster(
            id=self.id,
            center=self.center_position.to_domain(),
            slots=tuple(s.to_domain() for s in self.cell_slots),
            label=self.label,
        )


class MasterTemplateDocument(BaseModel):
    model_config = _DOC_CONFIG

    id: str = ""
    version: str = "1.0.0"
    description: str = ""
    created_date: str = ""
    clusters: list[ClusterModel] = Field(default_factory=list)

    def to_domain(self) -> MasterTemplate:
        return MasterTemplate(
            id=self.id or self.version,
            version=self.version,
            clusters=tuple(c.to_domain() for c in self.clusters),
            description=self.description,
            created_date=self.created_date,
        )


class MapFileDocument(BaseModel):
    model_config = _DOC_CONFIG

    id: str = ""
    client_id: str
    version: str = "1.0.0"
    active_cells: list[str] = Field(default_factory=list)
    cell_display_names: dict[str, str] = Field(default_factory=dict)
    cluster_visibility: dict[str, bool] = Field(default_factory=dict)
    created_date: str = ""
    created_by: str = "system"

    @model_validator(mode="before")
    @classmethod
    def _flatten_configuration(cls, data):
        # Older map files nest the overlay under "configuration"
        if isinstance(data, dict) and isinstance(data.get("configuration"), dict):
            data = {**data, **data["configuration"]}
        return data

    def to_domain(self) -> MapFile:
        return MapFile(
            id=self.id or f"{self.client_id}-{self.version}",
            client_id=self.client_id,
            version=self.version,
            active_cells=frozenset(self.active_cells),
            cell_display_names=dict(self.cell_display_names),
            cluster_visibility=dict(self.cluster_visibility),
            created_date=self.created_date,
            created_by=self.created_by,
        )
