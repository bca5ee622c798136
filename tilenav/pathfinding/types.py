"""Value types shared by the search engine and its callers.

Identity is purely positional: ``Position`` is the only key used in the
per-search tables. ``SearchNode`` is a transient frontier entry carrying cost
fields for one push onto the heap; it is never reused across searches.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, NamedTuple, Optional


class Position(NamedTuple):
    """Integer grid coordinate. Equal to a plain ``(x, y)`` tuple."""

    x: int
    y: int

    def offset(self, dx: int, dy: int) -> "Position":
        return Position(self.x + dx, self.y + dy)


# Ordered cells from just after the start to the target inclusive. ``None`` is
# the no-route sentinel; ``[]`` means start and target are the same cell.
Route = List[Position]


@dataclass(frozen=True)
class SearchNode:
    """A cell under consideration, with the costs recorded when it was pushed."""

    position: Position
    g: float
    h: float

    @property
    def f(self) -> float:
        return self.g + self.h


@dataclass
class SearchResult:
    """Outcome of one search plus counters useful for debugging and tuning.

    ``route`` follows the route contract (``None`` for no route, ``[]`` when
    already at the target). ``exhausted`` is only set by bounded searches that
    hit their expansion cap before the frontier emptied.
    """

    route: Optional[Route]
    cost: Optional[float] = None
    expanded: int = 0
    pushed: int = 0
    stale_pops: int = 0
    exhausted: bool = False

    @property
    def found(self) -> bool:
        return self.route is not None


def as_position(value) -> Position:
    """Normalize ``(x, y)`` tuples, lists and Positions to ``Position``."""
    if isinstance(value, Position):
        return value
    x, y = value
    return Position(int(x), int(y))
