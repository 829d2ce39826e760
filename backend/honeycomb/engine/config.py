"""Render configuration: geometry and interaction tunables."""

from __future__ import annotations

from dataclasses import dataclass

from honeycomb.engine.geometry import HEX_SIZE, HEX_SPACING


@dataclass(frozen=True)
class RenderConfig:
    """Controls how a composed footprint is projected into pixel space."""

    # Cell hexagon radius (px)
    hex_size: float = HEX_SIZE
    # Axial spacing constant S
    hex_spacing: float = HEX_SPACING

    # Viewport padding floor (px); effective padding is max(floor, factor * hex_size)
    viewport_min_padding: float = 40.0
    viewport_padding_factor: float = 1.5

    # Viewport used when there is nothing to draw
    empty_width: float = 800.0
    empty_height: float = 600.0

    # Label font size for cell text
    label_font_size: float = 11.0

    @property
    def viewport_padding(self) -> float:
        return max(self.viewport_min_padding, self.viewport_padding_factor * self.hex_size)
