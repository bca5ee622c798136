"""
Route consumers: agents that request routes and walk them tile by tile.

The search engine answers one request at a time and makes no decisions for its
callers. ``PathFollower`` is the caller side of that contract:

- ``None`` from the engine means "target currently unreachable"; the follower
  clears its path and leaves the fallback (wait, wander, new target) to the
  agent logic that drives it
- ``[]`` means the agent already stands on the target
- the world may change while a route is being followed (doors close, walls go
  up); before each step the follower checks the next tile and re-plans once
  toward the same goal if it became blocked

Usage:
    follower = PathFollower(Pathfinder(tile_map), (0, 0))
    if follower.move_to((12, 7)):
        while follower.step() not in (StepOutcome.ARRIVED, StepOutcome.BLOCKED):
            ...
"""

from __future__ import annotations

import random
from collections import deque
from enum import Enum
from typing import Deque, List, Optional, Tuple

from .config import Config
from .logging_utils import log_agent
from .environment.schemas import PathRequest, RouteSummary
from .pathfinding.costs import DIRECTIONS, heuristic
from .pathfinding.search import Pathfinder
from .pathfinding.types import Position, as_position


class StepOutcome(str, Enum):
    MOVED = "moved"
    REPLANNED = "replanned"
    ARRIVED = "arrived"
    IDLE = "idle"
    BLOCKED = "blocked"
    WANDERED = "wandered"


class PathFollower:
    """Moves one agent along routes produced by a shared ``Pathfinder``.

    The follower owns only its own position and remaining path. Several
    followers can share one ``Pathfinder`` since the engine keeps no per-call
    state.
    """

    def __init__(
        self,
        pathfinder: Pathfinder,
        position: Tuple[int, int],
        *,
        agent_id: Optional[str] = None,
        rng: Optional[random.Random] = None,
    ):
        self.pathfinder = pathfinder
        self.position: Position = as_position(position)
        self.agent_id = agent_id or "agent"
        self.rng = rng or random.Random()
        self.goal: Optional[Position] = None
        self.path: Deque[Position] = deque()

    @property
    def is_moving(self) -> bool:
        return bool(self.path)

    @property
    def remaining(self) -> List[Position]:
        return list(self.path)

    def clear_path(self) -> None:
        self.path.clear()
        self.goal = None

    def move_to(self, target: Tuple[int, int]) -> bool:
        """Request a route to ``target``. Returns False when it is unreachable."""
        target = as_position(target)
        route = self.pathfinder.find_path(self.position, target)
        if route is None:
            self.clear_path()
            if Config.DEBUG_SEARCH:
                log_agent(f"{self.agent_id}: {tuple(target)} unreachable from {tuple(self.position)}")
            return False

        self.path = deque(route)
        self.goal = target if route else None
        return True

    def step(self) -> StepOutcome:
        """Advance one tile along the current path."""
        if not self.path:
            return StepOutcome.IDLE

        replanned = False
        if not self.pathfinder.is_walkable(self.path[0]):
            # The world changed under the route; re-plan once, and a second
            # failure means the goal is sealed off.
            goal = self.goal
            if goal is None or not self.move_to(goal) or not self.path:
                self.clear_path()
                return StepOutcome.BLOCKED
            replanned = True
            if Config.DEBUG_SEARCH:
                log_agent(f"{self.agent_id}: re-planned toward {tuple(goal)}")

        self.position = self.path.popleft()
        if not self.path:
            self.goal = None
            return StepOutcome.ARRIVED
        return StepOutcome.REPLANNED if replanned else StepOutcome.MOVED

    def wander(self) -> bool:
        """Hop to a random walkable neighbour. Returns False when boxed in."""
        options = [
            self.position.offset(dx, dy)
            for dx, dy in DIRECTIONS
            if self._can_wander_onto(self.position.offset(dx, dy))
        ]
        if not options:
            return False
        self.clear_path()
        self.position = self.rng.choice(options)
        return True

    def _can_wander_onto(self, cell: Position) -> bool:
        if not self.pathfinder.is_walkable(cell):
            return False
        # Aimless moves stay off every structure, bridges and open doors included;
        # only routed moves cross them.
        get_tile = getattr(self.pathfinder.grid, "get_tile", None)
        tile = get_tile(cell.x, cell.y) if get_tile is not None else None
        return tile is None or not tile.has_building()

    def chase(self, target: Tuple[int, int], aggro_range: Optional[float] = None) -> StepOutcome:
        """Close in on a moving target, wandering when it is out of range or unreachable."""
        target = as_position(target)
        if self.position == target:
            self.clear_path()
            return StepOutcome.ARRIVED

        reach = Config.DEFAULT_AGGRO_RANGE if aggro_range is None else aggro_range
        if heuristic(self.position, target) > reach:
            return StepOutcome.WANDERED if self.wander() else StepOutcome.IDLE

        if self.goal != target or not self.path:
            if not self.move_to(target):
                return StepOutcome.WANDERED if self.wander() else StepOutcome.IDLE

        return self.step()


def resolve_request(pathfinder: Pathfinder, request: PathRequest) -> RouteSummary:
    """Answer a serialized route request with a serializable summary."""
    result = pathfinder.search(request.start, request.target)
    return RouteSummary(
        agent_id=request.agent_id,
        start=request.start,
        target=request.target,
        found=result.found,
        route=[tuple(cell) for cell in result.route] if result.route is not None else None,
        cost=result.cost,
        expanded=result.expanded,
    )
