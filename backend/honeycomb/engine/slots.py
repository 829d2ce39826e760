"""Slot catalog: fixed inner-cell offsets (C1..C10) relative to a cluster center."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator

from honeycomb.engine.domain import MAX_SLOTS_PER_CLUSTER
from honeycomb.engine.geometry import HexCoordinate, axial_to_pixel, round_half_up

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SlotDefinition:
    id: str
    index: int
    offset: HexCoordinate


def normalize_offset(q: float, r: float, s: float | None = None) -> HexCoordinate:
    """Round q and r to integers and recompute s = -q - r.

    A stored ``s`` that disagrees with the recomputed value is reported and
    discarded; the computed value always wins.
    """
    nq = round_half_up(q)
    nr = round_half_up(r)
    ns = -nq - nr
    if s is not None and s != ns:
        logger.warning(
            "Normalized slot offset q=%s->%d r=%s->%d (provided s=%s, computed s=%d)",
            q, nq, r, nr, s, ns,
        )
    return HexCoordinate(nq, nr, ns)


class SlotCatalog:
    """Ordered table of slot definitions for one cluster shape."""

    def __init__(self, slots: Iterable[SlotDefinition] = ()) -> None:
        self._slots: dict[str, SlotDefinition] = {}
        for slot in slots:
            self.add(slot)

    def add(self, slot: SlotDefinition) -> None:
        if slot.id in self._slots:
            raise ValueError(f"Duplicate slot ID: {slot.id}")
        if len(self._slots) >= MAX_SLOTS_PER_CLUSTER:
            raise ValueError(f"Slot catalog is full ({MAX_SLOTS_PER_CLUSTER} slots)")
        self._slots[slot.id] = slot

    @classmethod
    def from_offsets(
        cls, offsets: Iterable[tuple[float, float] | tuple[float, float, float]]
    ) -> SlotCatalog:
        """Build C1..Cn from raw, possibly fractional, offsets."""
        slots = []
        for i, raw in enumerate(offsets, start=1):
            q, r = raw[0], raw[1]
            s = raw[2] if len(raw) > 2 else None
            slots.append(SlotDefinition(id=f"C{i}", index=i, offset=normalize_offset(q, r, s)))
        return cls(slots)

    def get(self, slot_id: str) -> SlotDefinition | None:
        return self._slots.get(slot_id)

    def all(self) -> list[SlotDefinition]:
        return sorted(self._slots.values(), key=lambda s: s.index)

    def __iter__(self) -> Iterator[SlotDefinition]:
        return iter(self.all())

    def __len__(self) -> int:
        return len(self._slots)

    def pixel_offsets(
        self,
        inner_cell_size: float,
        spacing_multiplier: float = 1.0,
        group_offset: tuple[float, float] = (0.0, 0.0),
    ) -> dict[str, tuple[float, float]]:
        """Pixel offset of each slot from its cluster's drawn center.

        ``spacing_multiplier`` spreads the slots independently of the cell
        radius; ``group_offset`` shifts the whole group. A small downward
        title clearance keeps the group clear of the cluster title.
        """
        spread = inner_cell_size * spacing_multiplier
        title_clearance = max(6, round_half_up(inner_cell_size * 0.35))
        gx, gy = group_offset
        result: dict[str, tuple[float, float]] = {}
        for slot in self.all():
            x, y = axial_to_pixel(slot.offset, spacing=spread)
            result[slot.id] = (x + gx, y + title_clearance + gy)
        return result


# 2-3-2-1-2 row pattern of a cluster, already normalized to integer offsets.
INNER_CELL_SLOT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, 0),   # C1
    (0, -1),   # C2
    (-3, 1),   # C3
    (-1, 0),   # C4
    (1, -1),   # C5
    (-2, 1),   # C6
    (0, 0),    # C7
    (-1, 1),   # C8
    (-2, 2),   # C9
    (0, 1),    # C10
)

DEFAULT_SLOT_CATALOG = SlotCatalog.from_offsets(INNER_CELL_SLOT_OFFSETS)
