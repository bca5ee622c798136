"""Tests for the tile world model and its walkability rules."""

import pytest

from tilenav.environment import (
    Building,
    BuildingType,
    Door,
    Resource,
    ResourceType,
    Tile,
    TileMap,
    TileType,
    WalkabilityGrid,
)
from tilenav.pathfinding import GridDimensionError, Pathfinder


def test_terrain_walkability():
    assert TileType.GRASS.is_walkable
    assert TileType.ICE.is_walkable
    assert not TileType.MOUNTAIN.is_walkable
    for water in (TileType.DEEP_WATER, TileType.SHALLOW_WATER, TileType.RIVER, TileType.COAST):
        assert water.is_water
        assert not water.is_walkable


def test_tile_walkability_precedence():
    # Solid building blocks even on walkable terrain.
    assert not Tile(0, 0, TileType.GRASS, building=Building.of("wall")).is_walkable()

    # Bridges make water walkable.
    assert Tile(0, 0, TileType.RIVER, building=Building.of(BuildingType.BRIDGE)).is_walkable()
    assert Tile(0, 0, TileType.DEEP_WATER, building=Building.of("dock")).is_walkable()

    # Live resources block, depleted ones do not.
    tree = Resource(type=ResourceType.TREE)
    tile = Tile(0, 0, TileType.FOREST, resource=tree)
    assert not tile.is_walkable()
    tree.damage(tree.health)
    assert tree.depleted
    assert tile.is_walkable()

    # Non-solid buildings fall through to the terrain.
    assert Tile(0, 0, TileType.GRASS, building=Building.of("campfire")).is_walkable()
    assert not Tile(0, 0, TileType.MOUNTAIN).is_walkable()


def test_resource_damage_and_base_health():
    stone = Resource(type="stone")
    assert stone.health == 40
    assert stone.damage(15) is False
    assert stone.health == 25
    assert stone.damage(100) is True
    assert stone.health == 0
    assert stone.damage(1) is False


def test_door_toggles_solidity():
    door = Door()
    assert door.solid
    assert door.type is BuildingType.DOOR
    assert door.toggle_open() is True
    assert not door.solid
    door.toggle_open()
    assert door.solid
    assert isinstance(Building.of("door"), Door)


@pytest.mark.parametrize("width,height", [(0, 5), (5, 0), (-1, 3)])
def test_invalid_dimensions_fail_at_construction(width, height):
    with pytest.raises(GridDimensionError):
        TileMap(width=width, height=height)
    with pytest.raises(ValueError):
        WalkabilityGrid(width=width, height=height)


def test_tile_access_is_bounds_checked():
    tile_map = TileMap(width=3, height=2)

    assert tile_map.get_tile(5, 5) is None
    assert tile_map.get_tile(1, 1) is None  # sparse, nothing stored yet
    assert tile_map.ensure_tile(1, 1).terrain is TileType.GRASS
    assert tile_map.set_tile(3, 0, Tile(3, 0)) is False
    assert tile_map.set_tile(2, 1, Tile(2, 1, TileType.SAND)) is True
    assert tile_map.get_tile(2, 1).terrain is TileType.SAND
    assert not tile_map.is_walkable(-1, 0)
    assert not tile_map.is_walkable(3, 0)

    with pytest.raises(ValueError):
        tile_map.set_tile(0, 0, Tile(1, 1))


def test_default_terrain_applies_to_missing_tiles():
    lake = TileMap(width=4, height=4, default_terrain=TileType.DEEP_WATER)
    assert not lake.is_walkable(2, 2)

    lake.set_terrain(2, 2, TileType.SAND)
    assert lake.is_walkable(2, 2)
    assert lake.tiles.keys() == {(2, 2)}


def test_building_placement_rules():
    tile_map = TileMap(width=4, height=2)
    tile_map.set_terrain(1, 0, TileType.RIVER)

    assert tile_map.place_building(0, 0, Building.of("bridge")) is False  # not on water
    assert tile_map.place_building(1, 0, Building.of("wall")) is False    # not on water
    assert tile_map.place_building(1, 0, Building.of("bridge")) is True
    assert tile_map.place_building(1, 0, Building.of("bridge")) is False  # occupied
    assert tile_map.is_walkable(1, 0)

    assert tile_map.place_resource(2, 0, Resource(type="tree")) is True
    assert tile_map.place_building(2, 0, Building.of("wall")) is False
    assert tile_map.place_building(9, 9, Building.of("wall")) is False

    removed = tile_map.remove_building(1, 0)
    assert removed is not None and removed.type is BuildingType.BRIDGE
    assert not tile_map.is_walkable(1, 0)
    assert tile_map.remove_building(3, 1) is None


def test_neighbors_skip_blocked_and_out_of_bounds():
    tile_map = TileMap(width=3, height=3)
    tile_map.place_building(1, 0, Building.of("wall"))

    neighbours = set(tile_map.neighbors(0, 0))
    assert neighbours == {(0, 1), (1, 1)}


def test_routes_change_when_a_door_opens():
    tile_map = TileMap(width=5, height=3)
    for y in (0, 2):
        tile_map.place_building(2, y, Building.of("wall"))
    door = Door()
    tile_map.place_building(2, 1, door)
    pathfinder = Pathfinder(tile_map)

    assert pathfinder.find_path((0, 1), (4, 1)) is None

    door.toggle_open()
    assert pathfinder.find_path((0, 1), (4, 1)) == [(1, 1), (2, 1), (3, 1), (4, 1)]


def test_routes_avoid_water_and_use_bridges():
    tile_map = TileMap(width=5, height=5)
    for y in range(5):
        tile_map.set_terrain(2, y, TileType.RIVER)
    pathfinder = Pathfinder(tile_map)

    assert pathfinder.find_path((0, 2), (4, 2)) is None

    tile_map.place_building(2, 4, Building.of("bridge"))
    route = pathfinder.find_path((0, 2), (4, 2))
    assert route is not None
    assert (2, 4) in route
