"""Generate SVG from a footprint view or a blank cluster canvas."""

from __future__ import annotations

import math
from typing import Any

from honeycomb.engine.geometry import hex_path
from honeycomb.engine.layout import CanvasPreset, generate_cluster_layout
from honeycomb.engine.slots import DEFAULT_SLOT_CATALOG, SlotCatalog
from honeycomb.engine.view import FootprintView
from honeycomb.svg.serializer import serialize_svg

_STYLES = {
    ".hex-cell": "cursor: pointer",
    ".hex-text": "pointer-events: none; font-family: sans-serif",
    ".cluster-outline": "fill: none",
}


def _points_attr(points: tuple[tuple[float, float], ...]) -> str:
    return " ".join(f"{x:.2f},{y:.2f}" for x, y in points)


def view_to_svg_dicts(view: FootprintView, font_size: float = 11.0) -> list[dict[str, Any]]:
    """Cluster outlines first, then one group per cell (hexagon + label)."""
    elements: list[dict[str, Any]] = []

    for cluster in view.clusters:
        elements.append({
            "tag": "polygon",
            "id": f"{cluster.id}-cluster",
            "class": "cluster-outline",
            "points": _points_attr(cluster.points),
            "stroke": "#9E9E9E",
            "stroke-width": "2",
        })
        if cluster.label:
            elements.append({
                "tag": "text",
                "class": "hex-text",
                "x": f"{cluster.x:.2f}",
                "y": f"{cluster.y - cluster.radius * math.sqrt(3) / 2 + font_size * 1.5:.2f}",
                "text-anchor": "middle",
                "font-size": f"{font_size * 1.2:g}",
                "fill": "#333",
                "text": cluster.label,
            })

    for cell in view.cells:
        style = cell.style
        elements.append({
            "tag": "g",
            "id": cell.id,
            "class": "hex-cell",
            "data-state": cell.engagement_state.value,
            "children": [
                {
                    "tag": "polygon",
                    "points": _points_attr(cell.points),
                    "fill": style.fill,
                    "stroke": style.border_color,
                    "stroke-width": f"{style.border_width:g}",
                    "opacity": f"{style.opacity:g}",
                },
                {
                    "tag": "text",
                    "class": "hex-text",
                    "x": f"{cell.x:.2f}",
                    "y": f"{cell.y:.2f}",
                    "text-anchor": "middle",
                    "dominant-baseline": "middle",
                    "font-size": f"{font_size:g}",
                    "fill": style.text_color,
                    "text": style.label,
                },
            ],
        })

    return elements


def render_footprint_svg(view: FootprintView, font_size: float = 11.0) -> str:
    vp = view.viewport
    return serialize_svg(
        view_to_svg_dicts(view, font_size),
        viewbox=(vp.min_x, vp.min_y, vp.width, vp.height),
        title=f"{view.client_id} service engagement footprint",
        styles=_STYLES,
    )


def render_canvas_svg(preset: CanvasPreset, slots: SlotCatalog = DEFAULT_SLOT_CATALOG) -> str:
    """Blank canvas: every cluster hexagon from the layout with its inner slots."""
    offsets = slots.pixel_offsets(preset.inner_cell_size, preset.spacing_multiplier, preset.group_offset)
    hex_height = math.sqrt(3) * preset.layout.hex_size
    elements: list[dict[str, Any]] = []

    for n, anchor in enumerate(generate_cluster_layout(preset.layout), start=1):
        children: list[dict[str, Any]] = [
            {
                "tag": "path",
                "d": hex_path((anchor.cx, anchor.cy), preset.layout.hex_size),
                "fill": "white",
                "stroke": "black",
                "stroke-width": "2",
            },
            {
                "tag": "text",
                "x": f"{anchor.cx:.2f}",
                "y": f"{anchor.cy - hex_height / 3:.2f}",
                "text-anchor": "middle",
                "dominant-baseline": "middle",
                "font-size": f"{preset.layout.hex_size / 6:g}",
                "text": f"Cluster {n}",
            },
        ]
        for slot in slots:
            dx, dy = offsets[slot.id]
            center = (anchor.cx + dx, anchor.cy + dy)
            children.append({
                "tag": "path",
                "id": f"{anchor.id}-{slot.id.lower()}",
                "d": hex_path(center, preset.inner_cell_size),
                "fill": "white",
                "stroke": "black",
                "stroke-width": "2",
            })
        elements.append({"tag": "g", "id": anchor.id, "children": children})

    return serialize_svg(
        elements,
        viewbox=(0.0, 0.0, preset.layout.canvas_width, preset.canvas_height),
        width=preset.layout.canvas_width,
        height=preset.canvas_height,
        title="Hexagon clusters",
    )
