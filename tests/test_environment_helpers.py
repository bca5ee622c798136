"""Tests for environment helper utilities and snapshot schemas."""

import pytest
from pydantic import ValidationError

from tilenav.environment import (
    Building,
    Door,
    Resource,
    TileMap,
    TileMapState,
    TileState,
    TileType,
    WalkabilityGrid,
    render_ascii_window,
    tile_map_from_state,
    tile_map_to_state,
    validate_grid_move,
)


def test_validate_grid_move():
    # 5x5 grid with a wall at (2,2) in the middle
    grid = WalkabilityGrid(width=5, height=5, blocked={(2, 2)})

    # Valid move: adjacent cell, walkable
    assert validate_grid_move(grid, (1, 1), (1, 2)) is True

    # Invalid: target is blocked
    assert validate_grid_move(grid, (1, 1), (2, 2)) is False

    # Invalid: out of bounds
    assert validate_grid_move(grid, (1, 1), (10, 10)) is False

    # Valid route exists going around the obstacle
    assert validate_grid_move(grid, [1, 2], [3, 2]) is True

    # Movement budget: one diagonal step costs ~1.414
    assert validate_grid_move(grid, (0, 0), (1, 1), max_cost=1.0) is False
    assert validate_grid_move(grid, (0, 0), (1, 1), max_cost=1.5) is True


def test_render_ascii_window_overlays_route():
    grid = WalkabilityGrid(width=5, height=3, blocked={(2, 1)})
    window = render_ascii_window(
        grid,
        (0, 1),
        radius=4,
        route=[(1, 0), (2, 0), (3, 0), (4, 1)],
    )

    assert window.splitlines() == [
        ".***.",
        "@.#.X",
        ".....",
    ]


def test_render_ascii_window_clips_to_grid_and_accepts_symbols():
    grid = WalkabilityGrid(width=10, height=10, blocked={(5, 5)})
    window = render_ascii_window(grid, (5, 4), radius=1, symbols={"blocked": "█"})

    lines = window.splitlines()
    assert len(lines) == 3 and all(len(line) == 3 for line in lines)
    assert lines[1] == ".@."
    assert lines[2] == ".█."

    corner = render_ascii_window(grid, (0, 0), radius=2)
    assert corner.splitlines()[0] == "@.."


def test_tile_map_state_round_trip_preserves_walkability():
    tile_map = TileMap(width=4, height=3)
    tile_map.set_terrain(1, 0, TileType.RIVER)
    tile_map.place_building(1, 0, Building.of("bridge"))
    tile_map.set_terrain(1, 1, TileType.RIVER)
    tile_map.place_resource(2, 2, Resource(type="crystals", health=5))
    door = Door()
    tile_map.place_building(3, 1, door)
    door.toggle_open()

    state = tile_map_to_state(tile_map)
    restored = tile_map_from_state(TileMapState.model_validate_json(state.model_dump_json()))

    for x in range(4):
        for y in range(3):
            assert restored.is_walkable(x, y) == tile_map.is_walkable(x, y)
    assert restored.get_tile(2, 2).resource.health == 5
    assert isinstance(restored.get_tile(3, 1).building, Door)
    assert restored.get_tile(3, 1).building.is_open


def test_tile_map_state_reads_string_keys_from_json():
    state = TileMapState.model_validate_json(
        '{"width": 3, "height": 3, "tiles": {"1,2": {"terrain": "mountain"}}}'
    )
    assert list(state.tiles) == [(1, 2)]
    assert tile_map_from_state(state).is_walkable(1, 2) is False

    with pytest.raises(ValidationError):
        TileMapState.model_validate_json('{"width": 3, "height": 3, "tiles": {"1": {}}}')


def test_tile_map_state_validates_dimensions():
    with pytest.raises(ValidationError):
        TileMapState(width=0, height=3)

    state = TileMapState(width=2, height=2, tiles={(5, 5): TileState()})
    with pytest.raises(ValueError):
        tile_map_from_state(state)
