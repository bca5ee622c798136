"""
Tilenav - A* navigation for tile-grid simulations.

Computes collision-free shortest routes for agents over a partially blocked,
8-connected tile world whose walkability can change between requests.

One route per request, synchronously, on demand.
No caching. No global state. The grid is injected by the caller.
"""

__version__ = "0.1.0"

# Pathfinding engine
from .pathfinding import (
    Pathfinder,
    find_path,
    Position,
    Route,
    SearchNode,
    SearchResult,
    DIRECTIONS,
    DIRECTION_COSTS,
    heuristic,
    octile_distance,
    route_cost,
    GridQuerySurface,
    GridDimensionError,
    is_cell_walkable,
)

# Tile world
from .environment import (
    Building,
    BuildingType,
    Door,
    Resource,
    ResourceType,
    Tile,
    TileMap,
    TileType,
    WalkabilityGrid,
    TileMapState,
    TileState,
    PathRequest,
    RouteSummary,
    tile_map_from_state,
    tile_map_to_state,
    MapLoader,
    render_ascii_window,
    validate_grid_move,
)

# Route consumers
from .navigation import PathFollower, StepOutcome, resolve_request

__all__ = [
    # Engine
    "Pathfinder",
    "find_path",
    "Position",
    "Route",
    "SearchNode",
    "SearchResult",
    "DIRECTIONS",
    "DIRECTION_COSTS",
    "heuristic",
    "octile_distance",
    "route_cost",
    "GridQuerySurface",
    "GridDimensionError",
    "is_cell_walkable",
    # World
    "Building",
    "BuildingType",
    "Door",
    "Resource",
    "ResourceType",
    "Tile",
    "TileMap",
    "TileType",
    "WalkabilityGrid",
    "TileMapState",
    "TileState",
    "PathRequest",
    "RouteSummary",
    "tile_map_from_state",
    "tile_map_to_state",
    "MapLoader",
    "render_ascii_window",
    "validate_grid_move",
    # Navigation
    "PathFollower",
    "StepOutcome",
    "resolve_request",
]
