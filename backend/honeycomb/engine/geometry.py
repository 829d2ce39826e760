"""Axial hex geometry: coordinates, pixel transforms, outlines. No engine imports."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

# Radius of a rendered cell hexagon (px).
HEX_SIZE = 30.0
# Axial spacing constant S: distance scale between neighbouring cell centres.
HEX_SPACING = 65.0

_SQRT3 = math.sqrt(3.0)

# Neighbour order matches the ring walk in hex_spiral.
_DIRECTIONS: tuple[tuple[int, int], ...] = (
    (1, 0),
    (1, -1),
    (0, -1),
    (-1, 0),
    (-1, 1),
    (0, 1),
)


def round_half_up(value: float) -> int:
    """Nearest integer, ties toward +inf (2.5 -> 3, -2.5 -> -2)."""
    if not math.isfinite(value):
        raise ValueError(f"Cannot round non-finite value {value}")
    return int(math.floor(value + 0.5))


@dataclass(frozen=True)
class HexCoordinate:
    """Cube/axial coordinate. ``s`` is derived when omitted; q + r + s == 0 always."""

    q: int
    r: int
    s: int | None = None

    def __post_init__(self) -> None:
        derived = -self.q - self.r
        if self.s is None:
            object.__setattr__(self, "s", derived)
        elif self.s != derived:
            raise ValueError(
                f"Invalid hex coordinate q={self.q} r={self.r} s={self.s}: q + r + s must be 0"
            )

    @classmethod
    def normalized(cls, q: float, r: float) -> HexCoordinate:
        """Round q/r to integers and derive s. Stored offsets with an ``s`` go through
        ``slots.normalize_offset``, which reports a disagreeing value."""
        return cls(round_half_up(q), round_half_up(r))

    def __add__(self, other: HexCoordinate) -> HexCoordinate:
        return HexCoordinate(self.q + other.q, self.r + other.r)

    def __sub__(self, other: HexCoordinate) -> HexCoordinate:
        return HexCoordinate(self.q - other.q, self.r - other.r)

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.q, self.r, self.s)  # type: ignore[return-value]


ORIGIN = HexCoordinate(0, 0)


def is_valid(hex: HexCoordinate) -> bool:
    return hex.q + hex.r + hex.s == 0


def axial_to_pixel(hex: HexCoordinate, spacing: float = HEX_SPACING) -> tuple[float, float]:
    """x = S * 1.5q, y = S * (√3/2 q + √3 r)."""
    x = spacing * (1.5 * hex.q)
    y = spacing * (_SQRT3 / 2 * hex.q + _SQRT3 * hex.r)
    return (x, y)


def cube_round(q: float, r: float, s: float) -> HexCoordinate:
    """Round fractional cube coordinates to the nearest hex.

    Each axis is rounded independently; the axis with the largest rounding
    delta is then recomputed from the other two so q + r + s == 0 exactly.
    """
    rq = round_half_up(q)
    rr = round_half_up(r)
    rs = round_half_up(s)

    q_diff = abs(rq - q)
    r_diff = abs(rr - r)
    s_diff = abs(rs - s)

    if q_diff > r_diff and q_diff > s_diff:
        rq = -rr - rs
    elif r_diff > s_diff:
        rr = -rq - rs
    else:
        rs = -rq - rr

    return HexCoordinate(rq, rr, rs)


def pixel_to_axial(point: tuple[float, float], spacing: float = HEX_SPACING) -> HexCoordinate:
    """Inverse of axial_to_pixel followed by cube rounding."""
    x, y = point
    q = (2.0 / 3.0 * x) / spacing
    r = (-1.0 / 3.0 * x + _SQRT3 / 3.0 * y) / spacing
    return cube_round(q, r, -q - r)


def hex_distance(a: HexCoordinate, b: HexCoordinate) -> int:
    dq = a.q - b.q
    dr = a.r - b.r
    return (abs(dq) + abs(dq + dr) + abs(dr)) // 2


def hex_polygon(center: tuple[float, float], size: float) -> NDArray[np.float64]:
    """Six outline vertices, vertex i at i * 60°. Shape (6, 2); closure is implicit."""
    angles = np.arange(6) * (np.pi / 3)
    cx, cy = center
    return np.column_stack((cx + size * np.cos(angles), cy + size * np.sin(angles)))


def hex_path(center: tuple[float, float], size: float) -> str:
    """SVG path data for a closed hexagon outline."""
    pts = hex_polygon(center, size)
    joined = " L ".join(f"{x:.2f},{y:.2f}" for x, y in pts)
    return f"M {joined} Z"


def hex_neighbor(hex: HexCoordinate, direction: int) -> HexCoordinate:
    dq, dr = _DIRECTIONS[direction % 6]
    return HexCoordinate(hex.q + dq, hex.r + dr)


def hex_spiral(center: HexCoordinate, radius: int) -> list[HexCoordinate]:
    """Center followed by each ring out to ``radius``, walking the six directions."""
    results = [center]
    for ring in range(1, radius + 1):
        hex = HexCoordinate(center.q - ring, center.r + ring)
        for direction in range(6):
            for _ in range(ring):
                results.append(hex)
                hex = hex_neighbor(hex, direction)
    return results
