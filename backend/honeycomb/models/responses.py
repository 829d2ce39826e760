"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from honeycomb.engine.domain import EngagementState


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    fill_strategies_registered: int = 0


class ResolvedStyleModel(BaseModel):
    fill: str
    border_color: str
    border_width: float
    opacity: float
    text_color: str
    label: str
    fill_source: str


class RenderedCellModel(BaseModel):
    id: str
    cluster_id: str
    x: float
    y: float
    points: list[tuple[float, float]]
    engagement_state: EngagementState
    style: ResolvedStyleModel
    hovered: bool = False
    selected: bool = False


class ClusterOutlineModel(BaseModel):
    id: str
    label: str | None = None
    x: float
    y: float
    radius: float
    points: list[tuple[float, float]]


class ViewportModel(BaseModel):
    min_x: float
    min_y: float
    max_x: float
    max_y: float


class LegendEntryModel(BaseModel):
    state: EngagementState
    label: str
    color: str


class AreaSummaryModel(BaseModel):
    cell_id: str
    service_area: str
    area_name: str
    category: str = ""
    display_name: str
    engagement_state: EngagementState
    state_label: str
    state_color: str


class FootprintResponse(BaseModel):
    client_id: str
    template_id: str
    generated_date: str = ""
    cells: list[RenderedCellModel] = Field(default_factory=list)
    clusters: list[ClusterOutlineModel] = Field(default_factory=list)
    viewport: ViewportModel
    legend: list[LegendEntryModel] = Field(default_factory=list)
    summary: dict[str, int] = Field(default_factory=dict)
    areas: list[AreaSummaryModel] = Field(default_factory=list, description="Per-cell engagement table, most engaged first")
    hovered: str | None = None
    selected: str | None = None


class EngagementResponse(BaseModel):
    client_id: str
    records: int = 0


class PointerEventResponse(BaseModel):
    event: str
    cell_id: str | None = None
    hovered: str | None = None
    selected: str | None = None
