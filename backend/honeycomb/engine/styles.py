"""Style catalog: engagement colors, cell-state styles, legacy key aliases.

Passed explicitly into the composer and resolver; tests substitute their own.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from honeycomb.engine.catalog import ENGAGEMENT_STATES
from honeycomb.engine.domain import CellVisualProperties, EngagementState


@dataclass(frozen=True)
class CellStateStyle:
    key: str
    label: str
    background_color: str
    text_color: str
    border_color: str | None = None


# Canonical cell-level state keys
CLIENT_AREA = "CLIENT_AREA"
NON_CLIENT_AREA = "NON_CLIENT_AREA"
ENGAGED_CLIENT_AREA = "ENGAGED_CLIENT_AREA"


_DEFAULT_CELL_STATES = {
    CLIENT_AREA: CellStateStyle(CLIENT_AREA, "Client area", "#0277BD", "#FFFFFF", "#01579B"),
    NON_CLIENT_AREA: CellStateStyle(NON_CLIENT_AREA, "Non-client area", "#E0E0E0", "#000000", "#9E9E9E"),
    ENGAGED_CLIENT_AREA: CellStateStyle(
        ENGAGED_CLIENT_AREA, "Engaged client area", "#2E7D32", "#FFFFFF", "#1B5E20"
    ),
}

# Retired honeycomb state keys still found in older configurations.
_DEFAULT_LEGACY_ALIASES = {
    "ENGAGED": ENGAGED_CLIENT_AREA,
    "NOT_ENGAGED": NON_CLIENT_AREA,
    "ACTIVE_PERSUAL": CLIENT_AREA,
}


@dataclass(frozen=True)
class StyleCatalog:
    engagement_colors: Mapping[str, str] = field(
        default_factory=lambda: {state.value: info.color for state, info in ENGAGEMENT_STATES.items()}
    )
    cell_states: Mapping[str, CellStateStyle] = field(default_factory=lambda: dict(_DEFAULT_CELL_STATES))
    legacy_aliases: Mapping[str, str] = field(default_factory=lambda: dict(_DEFAULT_LEGACY_ALIASES))

    border_color: str = "#333"
    text_color: str = "#333"
    border_thickness: float = 2.0
    opacity: float = 1.0

    hover_border_color: str = "#007ACC"
    hover_border_thickness: float = 3.0
    hover_opacity: float = 0.8

    def canonical_state_key(self, key: str | None) -> str | None:
        """Translate a legacy key to its current name. Unknown keys -> None."""
        if not key:
            return None
        if key in self.cell_states:
            return key
        alias = self.legacy_aliases.get(key)
        if alias is not None and alias in self.cell_states:
            return alias
        return None

    def cell_state_style(self, key: str | None) -> CellStateStyle | None:
        canonical = self.canonical_state_key(key)
        if canonical is None:
            return None
        return self.cell_states[canonical]

    def engagement_color(self, state: EngagementState | str | None) -> str | None:
        if state is None:
            return None
        value = state.value if isinstance(state, EngagementState) else state
        return self.engagement_colors.get(value)

    @property
    def fallback_fill(self) -> str:
        return self.engagement_colors.get(EngagementState.NOT_ENGAGED.value, "#E5E5E5")

    def baseline_visual(self) -> CellVisualProperties:
        """Visual properties every freshly composed cell starts with."""
        return CellVisualProperties(
            border_color=self.border_color,
            background_color=None,
            border_thickness=self.border_thickness,
            opacity=self.opacity,
        )


DEFAULT_STYLE_CATALOG = StyleCatalog()
