"""Tile world model (terrain, buildings, resources).

Tiles combine a terrain type with an optional building and an optional
harvestable resource. Walkability is decided per tile in this order:

1. a solid building blocks the tile (walls, closed doors, chests, ...)
2. a bridge or dock makes the tile walkable whatever the terrain underneath
3. an undepleted resource (tree, stone, crystals) blocks the tile
4. otherwise the terrain type decides (water and mountains block)

``TileMap`` stores tiles sparsely: cells without an explicit tile use the map's
``default_terrain``. Reads never create tiles, so several searches can query the
same map at once.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, Optional, Set, Tuple

from ..pathfinding.costs import DIRECTIONS
from ..pathfinding.grid import GridQuerySurface, check_dimensions
from ..pathfinding.types import Position


@dataclass(frozen=True)
class TerrainProperties:
    water: bool
    walkable: bool


_WATER = TerrainProperties(water=True, walkable=False)
_LAND = TerrainProperties(water=False, walkable=True)


class TileType(str, Enum):
    """Terrain types produced by world generation."""

    DEEP_WATER = "deep_water"
    SHALLOW_WATER = "shallow_water"
    RIVER = "river"
    COAST = "coast"
    ICE = "ice"
    BEACH = "beach"
    SAND = "sand"
    GRASS = "grass"
    FOREST = "forest"
    SAVANNA = "savanna"
    HILL = "hill"
    MOUNTAIN = "mountain"
    SNOW = "snow"
    SWAMP = "swamp"

    @property
    def properties(self) -> TerrainProperties:
        return _TERRAIN_PROPERTIES[self]

    @property
    def is_walkable(self) -> bool:
        return self.properties.walkable

    @property
    def is_water(self) -> bool:
        return self.properties.water


_TERRAIN_PROPERTIES: Dict[TileType, TerrainProperties] = {
    TileType.DEEP_WATER: _WATER,
    TileType.SHALLOW_WATER: _WATER,
    TileType.RIVER: _WATER,
    TileType.COAST: _WATER,
    TileType.ICE: _LAND,
    TileType.BEACH: _LAND,
    TileType.SAND: _LAND,
    TileType.GRASS: _LAND,
    TileType.FOREST: _LAND,
    TileType.SAVANNA: _LAND,
    TileType.HILL: _LAND,
    TileType.MOUNTAIN: TerrainProperties(water=False, walkable=False),
    TileType.SNOW: _LAND,
    TileType.SWAMP: _LAND,
}


class BuildingType(str, Enum):
    WALL = "wall"
    DOOR = "door"
    BRIDGE = "bridge"
    DOCK = "dock"
    FENCE = "fence"
    CHEST = "chest"
    FURNACE = "furnace"
    ANVIL = "anvil"
    WORKBENCH = "workbench"
    STANDING_TORCH = "standing_torch"
    CAMPFIRE = "campfire"
    BED = "bed"


# Buildings that let agents cross otherwise unwalkable terrain.
CROSSING_BUILDINGS = frozenset({BuildingType.BRIDGE, BuildingType.DOCK})

_NON_SOLID_BUILDINGS = frozenset({
    BuildingType.BRIDGE,
    BuildingType.DOCK,
    BuildingType.CAMPFIRE,
    BuildingType.STANDING_TORCH,
})


@dataclass
class Building:
    """A constructed structure occupying one tile."""

    type: BuildingType
    solid: bool = True
    destructible: bool = True

    @classmethod
    def of(cls, building_type: BuildingType | str) -> "Building":
        """Create a building with the solidity its type normally has."""
        building_type = BuildingType(building_type)
        if building_type is BuildingType.DOOR:
            return Door()
        return cls(type=building_type, solid=building_type not in _NON_SOLID_BUILDINGS)


@dataclass
class Door(Building):
    """Door that blocks while closed and lets agents through while open."""

    type: BuildingType = BuildingType.DOOR
    is_open: bool = False

    def __post_init__(self) -> None:
        self.solid = not self.is_open

    def toggle_open(self) -> bool:
        self.is_open = not self.is_open
        self.solid = not self.is_open
        return self.is_open


class ResourceType(str, Enum):
    STONE = "stone"
    CRYSTALS = "crystals"
    TREE = "tree"


RESOURCE_BASE_HEALTH: Dict[ResourceType, int] = {
    ResourceType.TREE: 30,
    ResourceType.STONE: 40,
    ResourceType.CRYSTALS: 25,
}


@dataclass
class Resource:
    """Harvestable resource. Blocks its tile until depleted."""

    type: ResourceType
    health: int = -1
    depleted: bool = False

    def __post_init__(self) -> None:
        self.type = ResourceType(self.type)
        if self.health < 0:
            self.health = RESOURCE_BASE_HEALTH[self.type]

    def damage(self, amount: int) -> bool:
        """Apply damage. Returns True when this hit depleted the resource."""
        if self.depleted:
            return False
        self.health = max(0, self.health - amount)
        if self.health == 0:
            self.depleted = True
            return True
        return False


@dataclass
class Tile:
    """A single world cell."""

    x: int
    y: int
    terrain: TileType = TileType.GRASS
    resource: Optional[Resource] = None
    building: Optional[Building] = None

    @property
    def position(self) -> Position:
        return Position(self.x, self.y)

    def has_resource(self) -> bool:
        return self.resource is not None and not self.resource.depleted

    def has_building(self) -> bool:
        return self.building is not None

    def is_walkable(self) -> bool:
        if self.building is not None:
            if self.building.solid:
                return False
            if self.building.type in CROSSING_BUILDINGS:
                return True
        if self.has_resource():
            return False
        return self.terrain.is_walkable

    def is_buildable(self) -> bool:
        return not self.has_resource() and not self.has_building()


@dataclass
class TileMap(GridQuerySurface):
    """Bounded tile world implementing the grid query surface."""

    width: int
    height: int
    default_terrain: TileType = TileType.GRASS
    tiles: Dict[Tuple[int, int], Tile] = field(default_factory=dict)

    def __post_init__(self) -> None:
        check_dimensions(self.width, self.height)
        self.default_terrain = TileType(self.default_terrain)
        for (x, y), tile in self.tiles.items():
            if not self.in_bounds(x, y):
                raise ValueError(f"Tile at ({x}, {y}) lies outside a {self.width}x{self.height} map")
            if (tile.x, tile.y) != (x, y):
                raise ValueError(f"Tile keyed at ({x}, {y}) reports position ({tile.x}, {tile.y})")

    def get_tile(self, x: int, y: int) -> Optional[Tile]:
        """Stored tile at the coordinates, or None when absent or out of bounds."""
        if not self.in_bounds(x, y):
            return None
        return self.tiles.get((x, y))

    def ensure_tile(self, x: int, y: int) -> Optional[Tile]:
        """Return the tile at the coordinates, creating a default one if needed."""
        if not self.in_bounds(x, y):
            return None
        tile = self.tiles.get((x, y))
        if tile is None:
            tile = Tile(x, y, self.default_terrain)
            self.tiles[(x, y)] = tile
        return tile

    def set_tile(self, x: int, y: int, tile: Optional[Tile]) -> bool:
        """Store (or clear with None) a tile. Returns False when out of bounds."""
        if not self.in_bounds(x, y):
            return False
        if tile is None:
            self.tiles.pop((x, y), None)
            return True
        if (tile.x, tile.y) != (x, y):
            raise ValueError(f"Tile at ({tile.x}, {tile.y}) cannot be stored at ({x}, {y})")
        self.tiles[(x, y)] = tile
        return True

    def set_terrain(self, x: int, y: int, terrain: TileType | str) -> bool:
        tile = self.ensure_tile(x, y)
        if tile is None:
            return False
        tile.terrain = TileType(terrain)
        return True

    def place_building(self, x: int, y: int, building: Building) -> bool:
        """Place a building on a buildable tile.

        Bridges and docks must go on water; everything else needs walkable land.
        """
        tile = self.ensure_tile(x, y)
        if tile is None or not tile.is_buildable():
            return False
        if building.type in CROSSING_BUILDINGS:
            if not tile.terrain.is_water:
                return False
        elif not tile.terrain.is_walkable:
            return False
        tile.building = building
        return True

    def remove_building(self, x: int, y: int) -> Optional[Building]:
        tile = self.get_tile(x, y)
        if tile is None or tile.building is None:
            return None
        building, tile.building = tile.building, None
        return building

    def place_resource(self, x: int, y: int, resource: Resource) -> bool:
        tile = self.ensure_tile(x, y)
        if tile is None or not tile.is_buildable() or not tile.terrain.is_walkable:
            return False
        tile.resource = resource
        return True

    def is_walkable(self, x: int, y: int) -> bool:
        if not self.in_bounds(x, y):
            return False
        tile = self.tiles.get((x, y))
        if tile is None:
            return self.default_terrain.is_walkable
        return tile.is_walkable()

    def neighbors(self, x: int, y: int) -> Iterator[Position]:
        """Walkable 8-neighbours of a cell."""
        for dx, dy in DIRECTIONS:
            nx, ny = x + dx, y + dy
            if self.is_walkable(nx, ny):
                yield Position(nx, ny)


@dataclass
class WalkabilityGrid(GridQuerySurface):
    """Minimal grid: bounds plus a set of blocked cells."""

    width: int
    height: int
    blocked: Set[Tuple[int, int]] = field(default_factory=set)

    def __post_init__(self) -> None:
        check_dimensions(self.width, self.height)
        self.blocked = {(int(x), int(y)) for x, y in self.blocked}

    def is_walkable(self, x: int, y: int) -> bool:
        return self.in_bounds(x, y) and (x, y) not in self.blocked

    def block(self, *cells: Tuple[int, int]) -> None:
        for x, y in cells:
            self.blocked.add((x, y))

    def unblock(self, *cells: Tuple[int, int]) -> None:
        for x, y in cells:
            self.blocked.discard((x, y))
