"""Honeycomb footprint engine."""

from honeycomb.engine.composer import TemplateLoadError, compose, load_footprint, update_cell_state
from honeycomb.engine.geometry import HexCoordinate, axial_to_pixel, hex_distance, pixel_to_axial
from honeycomb.engine.registry import FillPriority, fill_strategy, get_fill_chain
from honeycomb.engine.resolver import ResolvedStyle, resolve_style
from honeycomb.engine.view import FootprintView, build_view

__all__ = [
    "fill_strategy",
    "FillPriority",
    "get_fill_chain",
    "HexCoordinate",
    "axial_to_pixel",
    "pixel_to_axial",
    "hex_distance",
    "TemplateLoadError",
    "compose",
    "load_footprint",
    "update_cell_state",
    "ResolvedStyle",
    "resolve_style",
    "FootprintView",
    "build_view",
]
