"""Fill strategy registry: the ordered "first match wins" chain behind cell fills.

Usage:
    @fill_strategy(id="engagement_state", priority=FillPriority.ENGAGEMENT_STATE)
    def engagement_fill(cell: Cell, catalog: StyleCatalog) -> str | None:
        return catalog.engagement_color(cell.engagement_state)

Adding a fill source = one decorated function. Strategies run in priority
order and the first non-empty color wins.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional

if TYPE_CHECKING:
    from honeycomb.engine.domain import Cell
    from honeycomb.engine.styles import StyleCatalog

logger = logging.getLogger(__name__)

FALLBACK_SOURCE = "fallback"


class FillPriority(enum.IntEnum):
    OVERRIDE = 0
    CELL_STATE = 1
    ENGAGEMENT_STATE = 2
    FALLBACK = 3


@dataclass
class FillStrategy:
    id: str
    priority: FillPriority
    fn: Callable[["Cell", "StyleCatalog"], Optional[str]]
    description: str = ""


class FillChain:
    """Ordered registry of fill strategies."""

    def __init__(self) -> None:
        self._strategies: dict[str, FillStrategy] = {}

    def register(self, spec: FillStrategy) -> None:
        if spec.id in self._strategies:
            raise ValueError(f"Duplicate fill strategy ID: {spec.id}")
        self._strategies[spec.id] = spec
        logger.debug("Registered fill strategy %s (%s)", spec.id, spec.priority.name)

    def get(self, strategy_id: str) -> FillStrategy:
        return self._strategies[strategy_id]

    def ordered(self) -> list[FillStrategy]:
        return sorted(self._strategies.values(), key=lambda s: (s.priority, s.id))

    def resolve(self, cell: "Cell", catalog: "StyleCatalog") -> tuple[str, str]:
        """Return (color, strategy id) from the first strategy with a non-empty result."""
        for spec in self.ordered():
            color = spec.fn(cell, catalog)
            if color:
                return color, spec.id
        return catalog.fallback_fill, FALLBACK_SOURCE

    @property
    def count(self) -> int:
        return len(self._strategies)


# Module-level singleton
_chain = FillChain()


def get_fill_chain() -> FillChain:
    return _chain


def fill_strategy(
    *,
    id: str,
    priority: FillPriority,
    description: str = "",
):
    """Decorator to register a fill strategy on the default chain."""

    def decorator(fn: Callable[["Cell", "StyleCatalog"], Optional[str]]):
        _chain.register(FillStrategy(id=id, priority=priority, fn=fn, description=description))
        return fn

    return decorator
