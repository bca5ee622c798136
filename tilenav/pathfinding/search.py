"""A* search over an 8-connected grid.

One call to ``Pathfinder.find_path`` owns its frontier, best-cost table and
predecessor table; nothing is kept on the instance between calls, so a single
``Pathfinder`` can serve many agents (and many threads, provided the grid's
read path is safe for concurrent reads).

The frontier is a binary heap without decrease-key. When a cheaper route to a
cell is found, a fresh entry is pushed and the old one is left behind; popped
entries whose ``g`` is worse than the best-cost table are discarded as stale.

Heap entries are ordered by ``(f, h, seq)``: equal-``f`` cells prefer the one
closer to the target, then the one pushed first. This makes routes
reproducible for a fixed grid, start and target.
"""

from __future__ import annotations

from heapq import heappop, heappush
from itertools import count
from math import inf
from typing import Dict, List, Optional, Tuple

from ..config import Config
from ..logging_utils import log_search
from .costs import DIRECTION_COSTS, DIRECTIONS, heuristic
from .grid import GridQuerySurface, is_cell_walkable
from .types import Position, Route, SearchNode, SearchResult, as_position

# (f, h, insertion sequence, node)
FrontierEntry = Tuple[float, float, int, SearchNode]


class Pathfinder:
    """Shortest-route search against a read-only grid.

    Args:
        grid: Anything exposing ``width``, ``height`` and ``is_walkable(x, y)``
        max_expansions: Optional cap on expanded cells per search. When the cap
            is reached before the target is popped the search reports no route
            and marks the result as exhausted.
    """

    def __init__(self, grid: GridQuerySurface, *, max_expansions: Optional[int] = None):
        if grid is None:
            raise ValueError("Pathfinder requires a grid")
        if max_expansions is not None and max_expansions <= 0:
            raise ValueError("max_expansions must be positive when set")
        self.grid = grid
        self.max_expansions = max_expansions

    @classmethod
    def from_config(cls, grid: GridQuerySurface) -> "Pathfinder":
        """Build a pathfinder using the expansion cap from ``Config``."""
        Config.validate()
        return cls(grid, max_expansions=Config.MAX_EXPANSIONS)

    def is_walkable(self, position: Tuple[int, int]) -> bool:
        return is_cell_walkable(self.grid, position)

    def find_path(self, start: Tuple[int, int], target: Tuple[int, int]) -> Optional[Route]:
        """Return the route from ``start`` to ``target``, excluding ``start``.

        Returns ``None`` when no route exists (either endpoint out of bounds or
        unwalkable, target unreachable, or the expansion cap was hit) and ``[]``
        when start and target are the same cell.
        """
        return self.search(start, target).route

    def search(self, start: Tuple[int, int], target: Tuple[int, int]) -> SearchResult:
        """Run A* and return the route together with search counters."""
        start = as_position(start)
        target = as_position(target)

        # Invalid requests are a normal "no route" outcome, not an error.
        if not self.is_walkable(start) or not self.is_walkable(target):
            self._debug(f"rejected {tuple(start)} -> {tuple(target)}: endpoint not walkable")
            return SearchResult(route=None)

        # Already there: an empty route, distinct from the None sentinel
        if start == target:
            return SearchResult(route=[], cost=0.0)

        frontier: List[FrontierEntry] = []
        best_cost: Dict[Position, float] = {start: 0.0}
        came_from: Dict[Position, Position] = {}
        sequence = count()

        # Seed the frontier with the start; it is the only cell without a predecessor
        start_h = heuristic(start, target)
        heappush(frontier, (start_h, start_h, next(sequence), SearchNode(start, 0.0, start_h)))
        result = SearchResult(route=None, pushed=1)

        while frontier:
            _, _, _, current = heappop(frontier)

            # Lazy deletion: a cheaper entry for this cell was pushed after this one.
            if current.g > best_cost.get(current.position, inf):
                result.stale_pops += 1
                continue

            # Checked on pop, not on push, so the first route to the target is optimal
            if current.position == target:
                result.route = _reconstruct(came_from, target)
                result.cost = best_cost[target]
                self._debug(
                    f"route {tuple(start)} -> {tuple(target)} cost={result.cost:.3f} "
                    f"steps={len(result.route)} expanded={result.expanded} "
                    f"pushed={result.pushed} stale={result.stale_pops}"
                )
                return result

            # The target check above runs first so a route found on the cap still counts
            if self.max_expansions is not None and result.expanded >= self.max_expansions:
                result.exhausted = True
                self._debug(
                    f"gave up {tuple(start)} -> {tuple(target)} after {result.expanded} expansions"
                )
                return result

            result.expanded += 1
            for (dx, dy), move_cost in zip(DIRECTIONS, DIRECTION_COSTS):
                neighbor = current.position.offset(dx, dy)
                # Out-of-bounds neighbours are rejected before the grid is asked
                if not self.is_walkable(neighbor):
                    continue

                candidate = current.g + move_cost
                # Only strictly better routes are recorded; ties keep the first route found.
                if candidate < best_cost.get(neighbor, inf):
                    best_cost[neighbor] = candidate
                    came_from[neighbor] = current.position
                    # The old heap entry stays behind and is discarded as stale when popped
                    h = heuristic(neighbor, target)
                    heappush(
                        frontier,
                        (candidate + h, h, next(sequence), SearchNode(neighbor, candidate, h)),
                    )
                    result.pushed += 1

        self._debug(
            f"no route {tuple(start)} -> {tuple(target)} after {result.expanded} expansions"
        )
        return result

    def _debug(self, message: str) -> None:
        if Config.DEBUG_SEARCH:
            log_search(message)


def _reconstruct(came_from: Dict[Position, Position], target: Position) -> Route:
    """Walk predecessors back from ``target`` and return the route without its start."""
    path = [target]
    current = target
    while current in came_from:
        current = came_from[current]
        path.append(current)
    path.reverse()
    # The first entry is the start cell; callers already know where they are.
    return path[1:]


def find_path(
    grid: GridQuerySurface,
    start: Tuple[int, int],
    target: Tuple[int, int],
    *,
    max_expansions: Optional[int] = None,
) -> Optional[Route]:
    """One-shot convenience wrapper around ``Pathfinder.find_path``."""
    return Pathfinder(grid, max_expansions=max_expansions).find_path(start, target)
