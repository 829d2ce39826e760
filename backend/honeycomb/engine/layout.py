"""Layout generator: places cluster anchors on a canvas from a row-count pattern."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

# Approximation of √3/2 used for the row step; kept literal for visual parity.
_ROW_STEP_FACTOR = 0.866


@dataclass(frozen=True)
class LayoutConfig:
    hex_size: float
    gap: float
    row_gap: float
    canvas_width: float
    # Number of clusters in each row, top to bottom
    rows: list[int] = field(default_factory=list)
    # Floor for the space above the first row (external chrome)
    min_top_padding: float = 20.0


@dataclass(frozen=True)
class ClusterAnchor:
    id: str
    row: int
    index: int
    cx: float
    cy: float


def row_content_width(count: int, hex_size: float, gap: float) -> float:
    if count <= 0:
        return 0.0
    return count * 2 * hex_size + (count - 1) * gap


def generate_cluster_layout(config: LayoutConfig) -> list[ClusterAnchor]:
    """One anchor per cluster, row-major.

    Rows are centred against the widest row rather than each against the
    canvas, so rows with different counts share one centre line. The widest
    row's block is centred on the canvas, clamped to the left edge when
    it is wider than the canvas.
    """
    hex_width = 2 * config.hex_size
    hex_height = math.sqrt(3) * config.hex_size

    widest = max((row_content_width(n, config.hex_size, config.gap) for n in config.rows), default=0.0)
    # Left-clamped when the widest row overflows the canvas
    block_left = max(0.0, (config.canvas_width - widest) / 2)

    y = max(config.min_top_padding, hex_height / 2 + config.min_top_padding)
    anchors: list[ClusterAnchor] = []

    for row_index, count in enumerate(config.rows):
        content = row_content_width(count, config.hex_size, config.gap)
        start_x = block_left + (widest - content) / 2
        for i in range(count):
            cx = start_x + i * (hex_width + config.gap) + config.hex_size
            anchors.append(ClusterAnchor(id=f"row{row_index}-hex{i}", row=row_index, index=i, cx=cx, cy=y))
        y = y + hex_height * _ROW_STEP_FACTOR + config.row_gap

    return anchors


@dataclass(frozen=True)
class CanvasPreset:
    """Blank cluster canvas: layout plus the size of the inner cells."""

    layout: LayoutConfig
    canvas_height: float
    inner_cell_size: float
    spacing_multiplier: float = 1.0
    group_offset: tuple[float, float] = (0.0, 0.0)


CANVAS_LAYOUT = CanvasPreset(
    layout=LayoutConfig(hex_size=250, gap=250, row_gap=-160, canvas_width=2000, rows=[2, 3, 2, 3]),
    canvas_height=1200,
    inner_cell_size=40,
)
