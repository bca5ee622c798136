"""Pathfinding engine: cost model, grid boundary adapter and A* search."""

from .types import Position, Route, SearchNode, SearchResult, as_position
from .costs import (
    DIRECTIONS,
    DIRECTION_COSTS,
    heuristic,
    octile_distance,
    route_cost,
    step_cost,
)
from .grid import GridDimensionError, GridQuerySurface, check_dimensions, is_cell_walkable
from .search import Pathfinder, find_path

__all__ = [
    "Position",
    "Route",
    "SearchNode",
    "SearchResult",
    "as_position",
    "DIRECTIONS",
    "DIRECTION_COSTS",
    "heuristic",
    "octile_distance",
    "route_cost",
    "step_cost",
    "GridDimensionError",
    "GridQuerySurface",
    "check_dimensions",
    "is_cell_walkable",
    "Pathfinder",
    "find_path",
]
