"""Rendering surface input: pixel-space cells, cluster outlines, viewport."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Mapping

from shapely.geometry import Polygon
from shapely.ops import unary_union

from honeycomb.engine.catalog import ENGAGEMENT_STATES, SERVICE_AREAS
from honeycomb.engine.composer import slot_position
from honeycomb.engine.config import RenderConfig
from honeycomb.engine.domain import Cell, Cluster, EngagementData, EngagementState, FootprintTemplate
from honeycomb.engine.geometry import axial_to_pixel, hex_polygon, pixel_to_axial
from honeycomb.engine.registry import FillChain
from honeycomb.engine.resolver import ResolvedStyle, apply_engagement, apply_hover, resolve_style
from honeycomb.engine.slots import DEFAULT_SLOT_CATALOG, SlotCatalog
from honeycomb.engine.styles import DEFAULT_STYLE_CATALOG, StyleCatalog


@dataclass(frozen=True)
class Viewport:
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    def as_viewbox(self) -> str:
        return f"{self.min_x:g} {self.min_y:g} {self.width:g} {self.height:g}"


@dataclass(frozen=True)
class RenderedCell:
    id: str
    cluster_id: str
    x: float
    y: float
    points: tuple[tuple[float, float], ...]
    engagement_state: EngagementState
    style: ResolvedStyle
    hovered: bool = False
    selected: bool = False


@dataclass(frozen=True)
class ClusterOutline:
    id: str
    label: str | None
    x: float
    y: float
    radius: float
    points: tuple[tuple[float, float], ...]


@dataclass(frozen=True)
class LegendEntry:
    state: EngagementState
    label: str
    color: str


@dataclass(frozen=True)
class AreaSummaryRow:
    cell_id: str
    service_area: str
    area_name: str
    category: str
    display_name: str
    engagement_state: EngagementState
    state_label: str
    state_color: str


@dataclass
class FootprintView:
    client_id: str
    template_id: str
    cells: list[RenderedCell] = field(default_factory=list)
    clusters: list[ClusterOutline] = field(default_factory=list)
    viewport: Viewport = field(default_factory=lambda: Viewport(0.0, 0.0, 0.0, 0.0))
    legend: list[LegendEntry] = field(default_factory=list)

    def get_cell(self, cell_id: str) -> RenderedCell | None:
        for cell in self.cells:
            if cell.id == cell_id:
                return cell
        return None


def _points(arr) -> tuple[tuple[float, float], ...]:
    return tuple((float(x), float(y)) for x, y in arr)


def enrich_cells(
    template: FootprintTemplate,
    overlay: Mapping[str, EngagementData],
) -> list[Cell]:
    """Generated cells with the live overlay applied. The template is never touched."""
    return [apply_engagement(cell, overlay.get(cell.id)) for cell in template.generated_cells]


def cluster_outline(
    cluster: Cluster,
    config: RenderConfig = RenderConfig(),
    slots: SlotCatalog = DEFAULT_SLOT_CATALOG,
) -> ClusterOutline:
    """Outer hexagon of a cluster, large enough to contain every slot's cell."""
    cx, cy = axial_to_pixel(cluster.center, config.hex_spacing)
    reach = 0.0
    for slot in cluster.slots:
        position = slot_position(cluster, slot, slots)
        if position is None:
            continue
        x, y = axial_to_pixel(position, config.hex_spacing)
        reach = max(reach, math.hypot(x - cx, y - cy))
    # Circumradius whose inscribed circle covers the furthest cell
    radius = (reach + config.hex_size) * 2 / math.sqrt(3)
    return ClusterOutline(
        id=cluster.id,
        label=cluster.label,
        x=cx,
        y=cy,
        radius=radius,
        points=_points(hex_polygon((cx, cy), radius)),
    )


def compute_viewport(
    cells: list[RenderedCell],
    clusters: list[ClusterOutline],
    config: RenderConfig = RenderConfig(),
) -> Viewport:
    """Bounds of every cell hexagon and cluster outline, plus padding."""
    shapes = [Polygon(c.points) for c in cells] + [Polygon(c.points) for c in clusters]
    if not shapes:
        return Viewport(0.0, 0.0, config.empty_width, config.empty_height)
    xmin, ymin, xmax, ymax = unary_union(shapes).bounds
    pad = config.viewport_padding
    return Viewport(xmin - pad, ymin - pad, xmax + pad, ymax + pad)


def build_view(
    template: FootprintTemplate,
    overlay: Mapping[str, EngagementData] | None = None,
    *,
    hovered: str | None = None,
    selected: str | None = None,
    catalog: StyleCatalog = DEFAULT_STYLE_CATALOG,
    config: RenderConfig = RenderConfig(),
    slots: SlotCatalog = DEFAULT_SLOT_CATALOG,
    chain: FillChain | None = None,
) -> FootprintView:
    """Project a composed footprint plus live overlay into pixel space."""
    overlay = overlay or {}
    rendered: list[RenderedCell] = []

    for cell in template.generated_cells:
        if not cell.is_active:
            continue
        record = overlay.get(cell.id)
        style = resolve_style(cell, record, catalog, chain)
        if cell.id == hovered:
            style = apply_hover(style, catalog)
        x, y = axial_to_pixel(cell.position, config.hex_spacing)
        rendered.append(
            RenderedCell(
                id=cell.id,
                cluster_id=cell.cluster_id,
                x=x,
                y=y,
                points=_points(hex_polygon((x, y), config.hex_size)),
                engagement_state=apply_engagement(cell, record).engagement_state,
                style=style,
                hovered=cell.id == hovered,
                selected=cell.id == selected,
            )
        )

    visible = [c for c in template.master_template.clusters if template.map_file.is_cluster_visible(c.id)]
    outlines = [cluster_outline(c, config, slots) for c in visible]

    return FootprintView(
        client_id=template.client_id,
        template_id=template.id,
        cells=rendered,
        clusters=outlines,
        viewport=compute_viewport(rendered, outlines, config),
        legend=legend(catalog),
    )


def legend(catalog: StyleCatalog = DEFAULT_STYLE_CATALOG) -> list[LegendEntry]:
    entries = []
    for state, info in ENGAGEMENT_STATES.items():
        entries.append(LegendEntry(state, info.display_name, catalog.engagement_color(state) or info.color))
    return entries


def engagement_summary(cells: list[Cell] | list[RenderedCell]) -> dict[str, int]:
    """Number of cells in each engagement state (every state present, zero included)."""
    counts = {state.value: 0 for state in EngagementState}
    for cell in cells:
        counts[EngagementState(cell.engagement_state).value] += 1
    return counts


def cell_at_point(
    template: FootprintTemplate,
    point: tuple[float, float],
    config: RenderConfig = RenderConfig(),
) -> str | None:
    """Id of the composed cell under a pixel point, if any."""
    target = pixel_to_axial(point, config.hex_spacing)
    for cell in template.generated_cells:
        if cell.is_active and cell.position == target:
            return cell.id
    return None


def area_summary(
    cells: list[Cell],
    catalog: StyleCatalog = DEFAULT_STYLE_CATALOG,
) -> list[AreaSummaryRow]:
    """One row per cell for the engagement summary table.

    Most engaged first (by engagement-state priority), then by area name.
    Service areas missing from the catalog keep their raw value as name.
    """
    rows = []
    for cell in cells:
        area = SERVICE_AREAS.get(cell.service_area)
        state = EngagementState(cell.engagement_state)
        info = ENGAGEMENT_STATES[state]
        rows.append(
            AreaSummaryRow(
                cell_id=cell.id,
                service_area=cell.service_area,
                area_name=area.display_name if area is not None else cell.service_area,
                category=area.category if area is not None else "",
                display_name=cell.display_name,
                engagement_state=state,
                state_label=info.display_name,
                state_color=catalog.engagement_color(state) or info.color,
            )
        )
    rows.sort(key=lambda row: (-ENGAGEMENT_STATES[row.engagement_state].priority, row.area_name, row.cell_id))
    return rows
