"""Movement costs and heuristics for 8-connected grids."""

from __future__ import annotations

import math
from typing import Iterable, Tuple

from .types import Position

# Orthogonal moves first, then diagonals.
DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (0, 1),
    (1, 0),
    (0, -1),
    (-1, 0),
    (1, 1),
    (-1, 1),
    (1, -1),
    (-1, -1),
)

DIRECTION_COSTS: Tuple[float, ...] = tuple(math.hypot(dx, dy) for dx, dy in DIRECTIONS)

SQRT2 = math.sqrt(2.0)


def heuristic(a: Tuple[int, int], b: Tuple[int, int]) -> float:
    """Euclidean distance between two cells.

    Never exceeds the octile distance, so it stays admissible and consistent
    for the costs in ``DIRECTION_COSTS``.
    """
    return math.hypot(a[0] - b[0], a[1] - b[1])


def octile_distance(a: Tuple[int, int], b: Tuple[int, int]) -> float:
    """Exact cost of the cheapest 8-connected route on an obstacle-free grid."""
    dx = abs(a[0] - b[0])
    dy = abs(a[1] - b[1])
    diagonal = min(dx, dy)
    straight = max(dx, dy) - diagonal
    return diagonal * SQRT2 + straight


def step_cost(a: Tuple[int, int], b: Tuple[int, int]) -> float:
    """Cost of moving between two adjacent cells."""
    delta = (b[0] - a[0], b[1] - a[1])
    try:
        return DIRECTION_COSTS[DIRECTIONS.index(delta)]
    except ValueError:
        raise ValueError(f"Cells {tuple(a)} and {tuple(b)} are not 8-neighbours") from None


def route_cost(start: Tuple[int, int], route: Iterable[Position]) -> float:
    """Total movement cost of walking ``route`` from ``start``.

    The start cell is not part of the route, matching what the search returns.
    """
    total = 0.0
    previous = start
    for cell in route:
        total += step_cost(previous, cell)
        previous = cell
    return total
