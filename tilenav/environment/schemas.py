"""Pydantic schemas for tile world snapshots.

These models mirror the dataclasses in ``grid.py`` but keep world snapshots
serializable (JSON files, debugging dumps, replay fixtures).
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

from .grid import (
    Building,
    BuildingType,
    Door,
    Resource,
    ResourceType,
    Tile,
    TileMap,
    TileType,
)


class ResourceState(BaseModel):
    """Harvestable resource on a tile."""

    type: ResourceType
    health: Optional[int] = Field(
        None, ge=0, description="Remaining health; None uses the type's base health",
    )
    depleted: bool = False


class BuildingState(BaseModel):
    """Structure on a tile. ``solid`` defaults to the type's usual solidity."""

    type: BuildingType
    solid: Optional[bool] = None
    is_open: Optional[bool] = Field(None, description="Doors only")


class TileState(BaseModel):
    """Encodes the contents of a single tile."""

    terrain: TileType = TileType.GRASS
    resource: Optional[ResourceState] = None
    building: Optional[BuildingState] = None


class TileMapState(BaseModel):
    """Sparse representation of a tile world."""

    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)
    default_terrain: TileType = TileType.GRASS
    tiles: Dict[Tuple[int, int], TileState] = Field(
        default_factory=dict,
        description="Sparse map: (x, y) → tile contents",
    )

    @field_validator("tiles", mode="before")
    @classmethod
    def parse_tile_keys(cls, value):
        # JSON object keys are strings; pydantic dumps tuple keys as "x,y".
        if isinstance(value, dict):
            return {_parse_tile_key(key): tile for key, tile in value.items()}
        return value


def _parse_tile_key(key):
    if not isinstance(key, str):
        return key
    parts = key.split(",")
    if len(parts) != 2:
        raise ValueError(f"Tile key must look like 'x,y', got {key!r}")
    return int(parts[0]), int(parts[1])


class PathRequest(BaseModel):
    """A route request as it travels between game systems."""

    agent_id: Optional[str] = None
    start: Tuple[int, int]
    target: Tuple[int, int]


class RouteSummary(BaseModel):
    """Serializable outcome of a route request."""

    agent_id: Optional[str] = Field(None, description="Echoed from the request")
    start: Tuple[int, int]
    target: Tuple[int, int]
    found: bool
    route: Optional[List[Tuple[int, int]]] = Field(
        None, description="Cells after start up to target; None when unreachable",
    )
    cost: Optional[float] = None
    expanded: int = 0


def tile_map_to_state(tile_map: TileMap) -> TileMapState:
    """Snapshot a ``TileMap`` into its serializable form."""
    tiles: Dict[Tuple[int, int], TileState] = {}
    for key, tile in tile_map.tiles.items():
        resource = None
        if tile.resource is not None:
            resource = ResourceState(
                type=tile.resource.type,
                health=tile.resource.health,
                depleted=tile.resource.depleted,
            )
        building = None
        if tile.building is not None:
            building = BuildingState(
                type=tile.building.type,
                solid=tile.building.solid,
                is_open=tile.building.is_open if isinstance(tile.building, Door) else None,
            )
        tiles[key] = TileState(
            terrain=tile.terrain,
            resource=resource,
            building=building,
        )
    return TileMapState(
        width=tile_map.width,
        height=tile_map.height,
        default_terrain=tile_map.default_terrain,
        tiles=tiles,
    )


def tile_map_from_state(state: TileMapState) -> TileMap:
    """Rebuild a ``TileMap`` from a snapshot."""
    tile_map = TileMap(
        width=state.width,
        height=state.height,
        default_terrain=state.default_terrain,
    )
    for (x, y), tile_state in state.tiles.items():
        tile = Tile(x, y, terrain=tile_state.terrain)
        if tile_state.resource is not None:
            tile.resource = Resource(
                type=tile_state.resource.type,
                health=tile_state.resource.health if tile_state.resource.health is not None else -1,
                depleted=tile_state.resource.depleted,
            )
        if tile_state.building is not None:
            tile.building = _building_from_state(tile_state.building)
        if not tile_map.set_tile(x, y, tile):
            raise ValueError(f"Tile at ({x}, {y}) lies outside a {state.width}x{state.height} map")
    return tile_map


def _building_from_state(state: BuildingState) -> Building:
    if state.type is BuildingType.DOOR:
        return Door(is_open=bool(state.is_open))
    building = Building.of(state.type)
    if state.solid is not None:
        building.solid = state.solid
    return building
