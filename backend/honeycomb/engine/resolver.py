"""State resolver: effective fill, border, opacity and label for a cell.

Fill priority (highest first):
    1. explicit per-cell ``background_color``
    2. cell-state catalog style (legacy keys aliased first)
    3. engagement-state color
    4. NOT_ENGAGED color
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from honeycomb.engine.domain import Cell, EngagementData, EngagementState
from honeycomb.engine.registry import FillChain, FillPriority, fill_strategy, get_fill_chain
from honeycomb.engine.styles import DEFAULT_STYLE_CATALOG, StyleCatalog


@fill_strategy(id="override", priority=FillPriority.OVERRIDE, description="Explicit per-cell fill")
def override_fill(cell: Cell, catalog: StyleCatalog) -> str | None:
    return cell.visual_properties.background_color or None


@fill_strategy(id="cell_state", priority=FillPriority.CELL_STATE, description="Cell-state catalog fill")
def cell_state_fill(cell: Cell, catalog: StyleCatalog) -> str | None:
    style = catalog.cell_state_style(cell.cell_state)
    return style.background_color if style is not None else None


@fill_strategy(
    id="engagement_state",
    priority=FillPriority.ENGAGEMENT_STATE,
    description="Engagement-state color",
)
def engagement_fill(cell: Cell, catalog: StyleCatalog) -> str | None:
    return catalog.engagement_color(cell.engagement_state)


@fill_strategy(id="not_engaged", priority=FillPriority.FALLBACK, description="NOT_ENGAGED color")
def not_engaged_fill(cell: Cell, catalog: StyleCatalog) -> str | None:
    return catalog.engagement_color(EngagementState.NOT_ENGAGED)


@dataclass(frozen=True)
class ResolvedStyle:
    fill: str
    border_color: str
    border_width: float
    opacity: float
    text_color: str
    label: str
    # Id of the fill strategy that produced ``fill``
    fill_source: str


def apply_engagement(cell: Cell, record: EngagementData | None) -> Cell:
    """Overlay one engagement record onto a composed cell. Never mutates ``cell``.

    The record's partial visual properties are merged onto the cell's own
    properties; nothing carries over from earlier records.
    """
    if record is None or record.cell_id != cell.id:
        return cell
    visual = cell.visual_properties
    if record.visual_properties is not None:
        visual = record.visual_properties.apply_to(visual)
    return replace(
        cell,
        engagement_state=record.engagement_state,
        cell_state=record.cell_state or cell.cell_state,
        visual_properties=visual,
    )


def resolve_style(
    cell: Cell,
    record: EngagementData | None = None,
    catalog: StyleCatalog = DEFAULT_STYLE_CATALOG,
    chain: FillChain | None = None,
) -> ResolvedStyle:
    effective = apply_engagement(cell, record)
    fill, source = (chain or get_fill_chain()).resolve(effective, catalog)

    text_color = catalog.text_color
    if source == "cell_state":
        style = catalog.cell_state_style(effective.cell_state)
        if style is not None:
            text_color = style.text_color

    visual = effective.visual_properties
    return ResolvedStyle(
        fill=fill,
        border_color=visual.border_color or catalog.border_color,
        border_width=visual.border_thickness,
        opacity=visual.opacity,
        text_color=text_color,
        label=effective.display_name,
        fill_source=source,
    )


def apply_hover(style: ResolvedStyle, catalog: StyleCatalog = DEFAULT_STYLE_CATALOG) -> ResolvedStyle:
    """Hover look: border color, border width and opacity only.

    Returns a new style; the resolved base is untouched, so leaving hover
    simply means rendering the base again.
    """
    return replace(
        style,
        border_color=catalog.hover_border_color,
        border_width=catalog.hover_border_thickness,
        opacity=catalog.hover_opacity,
    )
