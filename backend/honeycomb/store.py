"""In-memory footprint state for the surrounding app.

Holds the composed template of the current client, the live engagement
overlay keyed by cell id, and the pointer state (hovered / selected cell).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from honeycomb.engine.composer import TemplateSource, load_footprint, update_cell_state
from honeycomb.engine.config import RenderConfig
from honeycomb.engine.domain import Cell, EngagementData, EngagementState, FootprintTemplate
from honeycomb.engine.slots import DEFAULT_SLOT_CATALOG, SlotCatalog
from honeycomb.engine.styles import DEFAULT_STYLE_CATALOG, StyleCatalog
from honeycomb.engine.view import FootprintView, build_view, cell_at_point, enrich_cells

logger = logging.getLogger(__name__)

POINTER_EVENTS = ("click", "hover_enter", "hover_exit")


@dataclass
class ClientState:
    template: FootprintTemplate
    engagement: dict[str, EngagementData] = field(default_factory=dict)
    hovered: str | None = None
    selected: str | None = None


class FootprintStore:
    def __init__(
        self,
        source: TemplateSource,
        *,
        catalog: StyleCatalog = DEFAULT_STYLE_CATALOG,
        config: RenderConfig = RenderConfig(),
        slots: SlotCatalog = DEFAULT_SLOT_CATALOG,
    ):
        self.source = source
        self.catalog = catalog
        self.config = config
        self.slots = slots
        self._clients: dict[str, ClientState] = {}
        self.current_client: str | None = None

    # -- templates --

    def load(self, client_id: str) -> FootprintTemplate:
        """(Re)compose a client's footprint. The engagement overlay is kept."""
        template = load_footprint(client_id, self.source, slots=self.slots, styles=self.catalog)
        self.set_template(client_id, template)
        return template

    def get_or_load(self, client_id: str) -> FootprintTemplate:
        state = self._clients.get(client_id)
        if state is None:
            return self.load(client_id)
        self.current_client = client_id
        return state.template

    def set_template(self, client_id: str, template: FootprintTemplate) -> None:
        state = self._clients.get(client_id)
        if state is None:
            self._clients[client_id] = ClientState(template=template)
        else:
            state.template = template
            # Pointer state on cells that no longer exist is dropped
            if state.hovered and template.get_cell(state.hovered) is None:
                state.hovered = None
            if state.selected and template.get_cell(state.selected) is None:
                state.selected = None
        self.current_client = client_id

    def get_template(self, client_id: str) -> FootprintTemplate | None:
        state = self._clients.get(client_id)
        return state.template if state else None

    def _state(self, client_id: str) -> ClientState:
        self.get_or_load(client_id)
        return self._clients[client_id]

    def _require_cell(self, state: ClientState, cell_id: str) -> Cell:
        cell = state.template.get_cell(cell_id)
        if cell is None:
            raise KeyError(cell_id)
        return cell

    def update_cell_state(self, client_id: str, cell_id: str, engagement_state: EngagementState) -> FootprintTemplate:
        state = self._state(client_id)
        self._require_cell(state, cell_id)
        state.template = update_cell_state(state.template, cell_id, engagement_state)
        return state.template

    # -- engagement overlay --

    def replace_engagement(self, client_id: str, records: list[EngagementData]) -> dict[str, EngagementData]:
        """Swap in a full engagement snapshot. Later records win for the same cell."""
        state = self._state(client_id)
        overlay: dict[str, EngagementData] = {}
        for record in records:
            if state.template.get_cell(record.cell_id) is None:
                logger.debug("Engagement record for unknown cell %s retained", record.cell_id)
            overlay[record.cell_id] = record
        state.engagement = overlay
        logger.info("Engagement snapshot for %s: %d records", client_id, len(overlay))
        return overlay

    def update_cell_engagement(self, client_id: str, record: EngagementData) -> EngagementData:
        """Last write wins. Records for unknown cells are kept but have no effect."""
        state = self._state(client_id)
        if state.template.get_cell(record.cell_id) is None:
            logger.debug("Engagement record for unknown cell %s retained", record.cell_id)
        state.engagement[record.cell_id] = record
        return record

    def clear_engagement(self, client_id: str) -> None:
        state = self._clients.get(client_id)
        if state is not None:
            state.engagement = {}

    def engagement(self, client_id: str) -> dict[str, EngagementData]:
        return dict(self._state(client_id).engagement)

    def enriched_cells(self, client_id: str) -> list[Cell]:
        state = self._state(client_id)
        return enrich_cells(state.template, state.engagement)

    # -- pointer --

    def handle_pointer(
        self,
        client_id: str,
        event: str,
        cell_id: str | None = None,
        point: tuple[float, float] | None = None,
    ) -> str | None:
        """Apply a pointer event; returns the cell it landed on, if any.

        ``click`` selects, ``hover_enter`` sets the hovered cell and
        ``hover_exit`` clears it. Raises KeyError for an unknown cell id.
        """
        if event not in POINTER_EVENTS:
            raise ValueError(f"Unknown pointer event: {event}")
        state = self._state(client_id)

        if cell_id is None and point is not None:
            cell_id = cell_at_point(state.template, point, self.config)

        if event == "hover_exit":
            if cell_id is None or state.hovered == cell_id:
                state.hovered = None
            return cell_id

        if cell_id is None:
            # Pointer over empty canvas
            if event == "hover_enter":
                state.hovered = None
            return None

        self._require_cell(state, cell_id)
        if event == "click":
            state.selected = cell_id
        else:
            state.hovered = cell_id
        return cell_id

    def pointer_state(self, client_id: str) -> tuple[str | None, str | None]:
        state = self._state(client_id)
        return state.hovered, state.selected

    def view(self, client_id: str) -> FootprintView:
        state = self._state(client_id)
        return build_view(
            state.template,
            state.engagement,
            hovered=state.hovered,
            selected=state.selected,
            catalog=self.catalog,
            config=self.config,
            slots=self.slots,
        )
