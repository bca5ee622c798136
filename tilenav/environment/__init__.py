"""Tile world model and helpers for tilenav."""

from .grid import (
    Building,
    BuildingType,
    Door,
    Resource,
    ResourceType,
    TerrainProperties,
    Tile,
    TileMap,
    TileType,
    WalkabilityGrid,
)
from .schemas import (
    BuildingState,
    PathRequest,
    ResourceState,
    RouteSummary,
    TileMapState,
    TileState,
    tile_map_from_state,
    tile_map_to_state,
)
from .helpers import render_ascii_window, validate_grid_move
from .loader import DEFAULT_LEGEND, MapLoader

__all__ = [
    "Building",
    "BuildingType",
    "Door",
    "Resource",
    "ResourceType",
    "TerrainProperties",
    "Tile",
    "TileMap",
    "TileType",
    "WalkabilityGrid",
    "BuildingState",
    "PathRequest",
    "ResourceState",
    "RouteSummary",
    "TileMapState",
    "TileState",
    "tile_map_from_state",
    "tile_map_to_state",
    "render_ascii_window",
    "validate_grid_move",
    "DEFAULT_LEGEND",
    "MapLoader",
]
