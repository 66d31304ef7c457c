"""Axial hex coordinate math for a pointy-top hex grid.

All functions are pure and operate on ``(q, r)`` tuples; the third cube
coordinate is implicit (``s = -q - r``).
Reference: https://www.redblobgames.com/grids/hexagons/
"""
from __future__ import annotations

import math
from typing import List, Tuple

from hexstack.constants import HEX_SIZE

Coord = Tuple[int, int]

SQRT3 = math.sqrt(3)

# Neighbor order is significant: merges resolve neighbors in this sequence.
AXIAL_DIRECTIONS: Tuple[Coord, ...] = (
    (1, 0), (1, -1), (0, -1),
    (-1, 0), (-1, 1), (0, 1),
)


def axial_to_pixel(q: int, r: int, size: float = HEX_SIZE) -> Tuple[float, float]:
    """Center of hex (q, r) relative to the grid origin, y growing with r."""
    x = size * (SQRT3 * q + (SQRT3 / 2) * r)
    y = size * (1.5 * r)
    return x, y


def pixel_to_axial(x: float, y: float, size: float = HEX_SIZE) -> Coord:
    """Hex containing the point (x, y) relative to the grid origin."""
    q = ((SQRT3 / 3) * x - (1 / 3) * y) / size
    r = ((2 / 3) * y) / size
    return hex_round(q, r)


def hex_round(q: float, r: float) -> Coord:
    """Round fractional axial coordinates to the nearest hex."""
    s = -q - r
    rq = round(q)
    rr = round(r)
    rs = round(s)

    q_diff = abs(rq - q)
    r_diff = abs(rr - r)
    s_diff = abs(rs - s)

    if q_diff > r_diff and q_diff > s_diff:
        rq = -rr - rs
    elif r_diff > s_diff:
        rr = -rq - rs
    # else: s = -q - r (implicit, not stored)

    return int(rq), int(rr)


def hex_distance(a: Coord, b: Coord) -> int:
    dq = a[0] - b[0]
    dr = a[1] - b[1]
    return max(abs(dq), abs(dr), abs(dq + dr))


def in_bounds(q: int, r: int, radius: int) -> bool:
    return max(abs(q), abs(r), abs(-q - r)) <= radius


def cells_in_radius(radius: int) -> List[Coord]:
    """All cells of a hexagonal grid of the given radius, in canonical order."""
    cells: List[Coord] = []
    for q in range(-radius, radius + 1):
        r1 = max(-radius, -q - radius)
        r2 = min(radius, -q + radius)
        for r in range(r1, r2 + 1):
            cells.append((q, r))
    return cells


def neighbors(q: int, r: int) -> List[Coord]:
    return [(q + dq, r + dr) for dq, dr in AXIAL_DIRECTIONS]


def hex_corners(cx: float, cy: float, size: float) -> List[Tuple[float, float]]:
    """Polygon corners of a pointy-top hex centered on (cx, cy)."""
    corners: List[Tuple[float, float]] = []
    for i in range(6):
        angle = math.radians(60 * i - 30)
        corners.append((cx + size * math.cos(angle), cy + size * math.sin(angle)))
    return corners
