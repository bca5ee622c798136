"""Utilities for tile grids: move validation and ASCII debug views."""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Set, Tuple

from ..pathfinding.costs import route_cost
from ..pathfinding.grid import GridQuerySurface, is_cell_walkable
from ..pathfinding.search import Pathfinder
from ..pathfinding.types import as_position


def validate_grid_move(
    grid: GridQuerySurface,
    current_pos: Tuple[int, int] | List[int],
    target_pos: Tuple[int, int] | List[int],
    *,
    max_cost: Optional[float] = None,
) -> bool:
    """Validate whether an agent can move from current_pos to target_pos on the grid.

    Checks three constraints:
    1. Target position is within grid bounds and walkable
    2. A route exists from current to target (respecting obstacles)
    3. Optional: the route's movement cost is at most ``max_cost``

    Args:
        grid: Grid to validate against
        current_pos: Agent's current (x, y) position (tuple or list)
        target_pos: Desired (x, y) destination (tuple or list)
        max_cost: Optional movement budget (1.0 allows one orthogonal step,
            ~1.415 also allows one diagonal step)

    Returns:
        True if the move is valid and reachable, False otherwise
    """
    current = as_position(current_pos)
    target = as_position(target_pos)

    # Bounds and walkability of the destination itself
    if not is_cell_walkable(grid, target):
        return False

    # Reachability: the engine answers None when walls cut the target off
    route = Pathfinder(grid).find_path(current, target)
    if route is None:
        return False

    # Movement budget counts diagonal steps as sqrt(2)
    if max_cost is not None and route_cost(current, route) > max_cost:
        return False

    return True


_DEFAULT_SYMBOLS: Dict[str, str] = {
    "open": ".",
    "blocked": "#",
    "route": "*",
    "center": "@",
    "target": "X",
}


def render_ascii_window(
    grid: GridQuerySurface,
    center: Tuple[int, int],
    *,
    radius: int,
    route: Optional[Iterable[Tuple[int, int]]] = None,
    symbols: Optional[Dict[str, str]] = None,
) -> str:
    """Render a window of the grid around ``center`` with an optional route overlay.

    Rows are printed with ``y`` increasing downwards, matching map files. The
    last cell of the route is drawn as the target.
    """

    # Negative radii collapse to a single-cell window
    radius = max(int(radius), 0)

    # Caller symbols override the defaults key by key
    mapping = {**_DEFAULT_SYMBOLS}
    if symbols:
        mapping.update(symbols)

    route_cells: List[Tuple[int, int]] = [tuple(cell) for cell in route] if route else []
    on_route: Set[Tuple[int, int]] = set(route_cells)
    target = route_cells[-1] if route_cells else None

    # Clip the window to the grid so edges render without padding
    cx, cy = center
    min_x = max(0, cx - radius)
    max_x = min(grid.width - 1, cx + radius)
    min_y = max(0, cy - radius)
    max_y = min(grid.height - 1, cy + radius)

    lines: List[str] = []
    for y in range(min_y, max_y + 1):
        row_chars: List[str] = []
        for x in range(min_x, max_x + 1):
            cell = (x, y)
            # Overlay precedence: center, then target, then route, then terrain
            if cell == (cx, cy):
                row_chars.append(mapping["center"])
            elif cell == target:
                row_chars.append(mapping["target"])
            elif cell in on_route:
                row_chars.append(mapping["route"])
            elif is_cell_walkable(grid, cell):
                row_chars.append(mapping["open"])
            else:
                row_chars.append(mapping["blocked"])
        lines.append("".join(row_chars))

    return "\n".join(lines)
