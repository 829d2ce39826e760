"""API request models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, model_validator

from honeycomb.engine.domain import EngagementData, EngagementState, VisualOverrides


class VisualPropertiesModel(BaseModel):
    border_color: str | None = None
    background_color: str | None = None
    border_thickness: float | None = Field(default=None, ge=0)
    opacity: float | None = Field(default=None, ge=0, le=1)

    def to_domain(self) -> VisualOverrides:
        return VisualOverrides(
            border_color=self.border_color,
            background_color=self.background_color,
            border_thickness=self.border_thickness,
            opacity=self.opacity,
        )


class CellEngagementRequest(BaseModel):
    engagement_state: EngagementState = Field(..., description="New engagement state for the cell")
    visual_properties: VisualPropertiesModel | None = None
    cell_state: str | None = Field(default=None, description="Cell-state key (legacy keys accepted)")
    last_updated: str = ""

    def to_domain(self, cell_id: str) -> EngagementData:
        return EngagementData(
            cell_id=cell_id,
            engagement_state=self.engagement_state,
            visual_properties=self.visual_properties.to_domain() if self.visual_properties else None,
            cell_state=self.cell_state,
            last_updated=self.last_updated,
        )


class EngagementRecordModel(CellEngagementRequest):
    cell_id: str

    def to_domain(self, cell_id: str | None = None) -> EngagementData:
        return super().to_domain(cell_id or self.cell_id)


class EngagementUpdateRequest(BaseModel):
    records: list[EngagementRecordModel] = Field(default_factory=list)


class PointerEventRequest(BaseModel):
    event: Literal["click", "hover_enter", "hover_exit"]
    cell_id: str | None = Field(default=None, description="Resolved cell id")
    x: float | None = Field(default=None, description="Pointer x in footprint pixel space")
    y: float | None = Field(default=None, description="Pointer y in footprint pixel space")

    @model_validator(mode="after")
    def _needs_target(self) -> PointerEventRequest:
        if self.event != "hover_exit" and self.cell_id is None and (self.x is None or self.y is None):
            raise ValueError("cell_id or both x and y are required")
        return self
