"""
Slime Chase - a follower re-planning around a changing world
=============================================================

WHAT THIS SHOWS:
- Loading a map from examples/maps
- A slime chasing the player with PathFollower.chase()
- "No route" handled as a value: the slime wanders while the yard door is shut
- Opening the door between ticks changes the next route

RUN:
    python -m examples.chase.run --ticks 30 --open-door-at 5
"""

import argparse
import random

from tilenav import MapLoader, Pathfinder, PathFollower, StepOutcome, render_ascii_window
from tilenav.environment import Door
from tilenav.logging_utils import log_agent, log_info, log_success


def main() -> None:
    parser = argparse.ArgumentParser(description="Slime chase demo")
    parser.add_argument("--map", default="river_crossing")
    parser.add_argument("--ticks", type=int, default=30)
    parser.add_argument("--open-door-at", type=int, default=5)
    parser.add_argument("--seed", type=int, default=7)
    args = parser.parse_args()

    tile_map, spawns = MapLoader().load(args.map)
    pathfinder = Pathfinder.from_config(tile_map)
    player = spawns["player"]
    slime = PathFollower(pathfinder, spawns["slime"], agent_id="slime", rng=random.Random(args.seed))

    doors = [tile for tile in tile_map.tiles.values() if isinstance(tile.building, Door)]
    log_info(f"Loaded '{args.map}' ({tile_map.width}x{tile_map.height}), {len(doors)} door(s)")

    for tick in range(1, args.ticks + 1):
        if tick == args.open_door_at:
            for tile in doors:
                tile.building.toggle_open()
            log_info(f"tick {tick}: doors opened")

        outcome = slime.chase(player, aggro_range=100.0)
        log_agent(f"tick {tick}: slime {outcome.value} -> {tuple(slime.position)}")

        if outcome is StepOutcome.ARRIVED and slime.position == player:
            log_success(f"slime reached the player on tick {tick}")
            break

    route = pathfinder.find_path(slime.position, player)
    print(render_ascii_window(tile_map, slime.position, radius=12, route=route))


if __name__ == "__main__":
    main()
