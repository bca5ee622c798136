"""Tests for map loading via MapLoader."""

import json

import pytest

from tilenav.config import Config
from tilenav.environment import BuildingType, Door, MapLoader, ResourceType, TileType
from tilenav.pathfinding import Pathfinder


def write_map(tmp_path, name, data):
    (tmp_path / f"{name}.json").write_text(json.dumps(data), encoding="utf-8")
    return MapLoader(maps_dir=tmp_path)


def test_loader_parses_rows_and_legend(tmp_path):
    loader = write_map(
        tmp_path,
        "yard",
        {
            "name": "Yard",
            "rows": [
                ".T.",
                "~=~",
                ".#@",
            ],
            "legend": {"@": {"terrain": "sand"}},
            "spawns": {"hero": [0, 0]},
        },
    )
    tile_map, spawns = loader.load("yard")

    assert (tile_map.width, tile_map.height) == (3, 3)
    assert spawns == {"hero": (0, 0)}
    assert tile_map.get_tile(0, 0) is None  # plain default terrain stays sparse
    assert tile_map.get_tile(1, 0).resource.type is ResourceType.TREE
    assert tile_map.get_tile(0, 1).terrain is TileType.DEEP_WATER
    assert tile_map.get_tile(1, 1).building.type is BuildingType.BRIDGE
    assert tile_map.get_tile(1, 2).building.type is BuildingType.WALL
    assert tile_map.get_tile(2, 2).terrain is TileType.SAND

    assert not tile_map.is_walkable(1, 0)
    assert tile_map.is_walkable(1, 1)
    assert not tile_map.is_walkable(1, 2)


def test_loader_rejects_bad_maps(tmp_path):
    loader = MapLoader(maps_dir=tmp_path)

    with pytest.raises(ValueError, match="rows"):
        loader.parse({"name": "No rows"})
    with pytest.raises(ValueError, match="ragged"):
        loader.parse({"name": "Ragged", "rows": ["...", ".."]})
    with pytest.raises(ValueError, match="Unknown map symbol"):
        loader.parse({"name": "Odd", "rows": [".?."]})
    with pytest.raises(ValueError, match="Cannot place"):
        loader.parse({"name": "Bad bridge", "rows": ["="], "legend": {"=": {"building": "bridge"}}})
    with pytest.raises(ValueError, match="outside"):
        loader.parse({"name": "Spawn", "rows": ["..."], "spawns": {"x": [5, 0]}})
    with pytest.raises(FileNotFoundError):
        loader.load("missing")


def test_example_map_door_gates_the_yard():
    loader = MapLoader(maps_dir=Config.PROJECT_ROOT / "examples" / "maps")
    tile_map, spawns = loader.load("river_crossing")
    pathfinder = Pathfinder(tile_map)

    assert pathfinder.find_path(spawns["slime"], spawns["player"]) is None

    door_tile = tile_map.get_tile(11, 4)
    assert isinstance(door_tile.building, Door)
    door_tile.building.toggle_open()

    route = pathfinder.find_path(spawns["slime"], spawns["player"])
    assert route is not None
    assert route[-1] == spawns["player"]
    assert (11, 4) in route
    # The river is only crossable on the bridge.
    assert {(4, 2), (5, 2)} & set(route)
