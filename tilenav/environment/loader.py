"""
Map loading for JSON-defined tile worlds.

Maps are drawn as ASCII rows plus a legend that maps each character to the
contents of a tile. Row 0 is ``y = 0``; column ``i`` of a row is ``x = i``.

Map file structure:
```json
{
  "name": "River Crossing",
  "description": "...",
  "default_terrain": "grass",
  "legend": {
    ".": {"terrain": "grass"},
    "~": {"terrain": "deep_water"},
    "=": {"terrain": "river", "building": "bridge"},
    "T": {"resource": "tree"}
  },
  "rows": [
    "..~..",
    "..=..",
    "T.~.."
  ],
  "spawns": {"slime": [0, 0], "player": [4, 2]}
}
```

The legend is merged over ``DEFAULT_LEGEND`` so small maps can skip it.

Usage:
    loader = MapLoader()
    tile_map, spawns = loader.load("river_crossing")
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from ..config import Config
from ..pathfinding.types import Position
from .grid import Building, Resource, TileMap, TileType


DEFAULT_LEGEND: Dict[str, Dict[str, str]] = {
    ".": {},
    ",": {"terrain": "sand"},
    "~": {"terrain": "deep_water"},
    "^": {"terrain": "mountain"},
    "#": {"building": "wall"},
    "D": {"building": "door"},
    "=": {"terrain": "river", "building": "bridge"},
    "T": {"resource": "tree"},
    "o": {"resource": "stone"},
    "*": {"resource": "crystals"},
}


class MapLoader:
    """Load and validate tile maps from JSON files.

    Directory structure:
    - Default: ``Config.MAPS_DIR`` ({PROJECT_ROOT}/examples/maps unless overridden)
    - Override via constructor: MapLoader(Path("/custom/maps"))
    - Map files: {map_name}.json

    Validation:
    - Required fields: name, rows
    - All rows must have the same length (no ragged maps)
    - Every character must appear in the legend
    - Raises ValueError when any check fails
    """

    def __init__(self, maps_dir: Optional[Path] = None):
        self.maps_dir = maps_dir or Config.MAPS_DIR

    def load(self, map_name: str) -> Tuple[TileMap, Dict[str, Position]]:
        """Load a map by name and return it with its named spawn points."""
        map_path = self.maps_dir / f"{map_name}.json"
        if not map_path.exists():
            raise FileNotFoundError(f"Map file not found: {map_path}")

        with open(map_path, "r", encoding="utf-8") as f:
            data = json.load(f)

        return self.parse(data)

    def parse(self, data: Dict[str, Any]) -> Tuple[TileMap, Dict[str, Position]]:
        """Build a map from already-decoded JSON data."""
        self._validate(data)

        rows = data["rows"]
        legend = {**DEFAULT_LEGEND, **data.get("legend", {})}
        tile_map = TileMap(
            width=len(rows[0]),
            height=len(rows),
            default_terrain=TileType(data.get("default_terrain", TileType.GRASS)),
        )

        for y, row in enumerate(rows):
            for x, symbol in enumerate(row):
                if symbol not in legend:
                    raise ValueError(f"Unknown map symbol {symbol!r} at ({x}, {y})")
                self._apply_symbol(tile_map, x, y, legend[symbol])

        spawns: Dict[str, Position] = {}
        for name, coords in data.get("spawns", {}).items():
            position = Position(int(coords[0]), int(coords[1]))
            if not tile_map.in_bounds(*position):
                raise ValueError(f"Spawn '{name}' at {tuple(position)} lies outside the map")
            spawns[name] = position

        return tile_map, spawns

    def _validate(self, data: Dict[str, Any]) -> None:
        for key in ("name", "rows"):
            if key not in data:
                raise ValueError(f"Map missing required field: {key}")

        rows = data["rows"]
        if not isinstance(rows, list) or not rows:
            raise ValueError("Map must define at least one row")
        width = len(rows[0])
        if width == 0:
            raise ValueError("Map rows must not be empty")
        for index, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(
                    f"Row {index} has length {len(row)}, expected {width} (ragged map)"
                )

    def _apply_symbol(self, tile_map: TileMap, x: int, y: int, entry: Dict[str, str]) -> None:
        terrain = entry.get("terrain")
        building = entry.get("building")
        resource = entry.get("resource")

        # Plain default terrain stays implicit to keep the map sparse.
        if terrain is None and building is None and resource is None:
            return
        if terrain is not None:
            tile_map.set_terrain(x, y, terrain)
        if building is not None and not tile_map.place_building(x, y, Building.of(building)):
            raise ValueError(f"Cannot place {building} at ({x}, {y})")
        if resource is not None and not tile_map.place_resource(x, y, Resource(type=resource)):
            raise ValueError(f"Cannot place {resource} at ({x}, {y})")
