"""
Grid query surface consumed by the search engine.

The engine only needs three things from a world: its width, its height, and a
per-cell walkability lookup. Anything providing those can be searched - the
tile world in ``tilenav.environment`` is one implementation, tests use the
small ``WalkabilityGrid``.

Contract for implementations:
- ``width`` and ``height`` are positive and fixed for the grid's lifetime
- ``is_walkable(x, y)`` returns False for coordinates outside the grid
- the engine never mutates the grid; the owner must not mutate walkability
  while a search over the same grid is running

The module-level ``is_cell_walkable`` is the adapter the engine goes through.
It checks bounds before delegating so a search never asks the world about a
cell outside ``[0, width) x [0, height)``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Tuple


class GridDimensionError(ValueError):
    """Raised when a grid is constructed with non-positive width or height."""


def check_dimensions(width: int, height: int) -> None:
    """Fail fast on malformed grid dimensions."""
    if width <= 0 or height <= 0:
        raise GridDimensionError(
            f"Grid dimensions must be positive, got width={width} height={height}"
        )


class GridQuerySurface(ABC):
    """Read-only view of a grid's bounds and walkability."""

    width: int
    height: int

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    @abstractmethod
    def is_walkable(self, x: int, y: int) -> bool:
        """Whether an agent may stand on the cell right now."""


def is_cell_walkable(grid: GridQuerySurface, position: Tuple[int, int]) -> bool:
    """Bounds-checked walkability lookup used by the search engine."""
    x, y = position
    # Bounds first: the world is never asked about cells it does not have.
    if not (0 <= x < grid.width and 0 <= y < grid.height):
        return False
    return bool(grid.is_walkable(x, y))
