"""Static spatial model: 1-indexed coordinates, cost zones, and the bounded grid.

Edge-cost invariant: an edge is inflated by a zone only when BOTH endpoints lie
on that zone's rectangular perimeter. Interior edges keep the default cost.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from gridpath.config.constants import DEFAULT_EDGE_COST

# Neighbor order (North, East, South, West) is part of the seeded-run contract.
_DIRECTIONS: tuple[tuple[int, int], ...] = ((0, 1), (1, 0), (0, -1), (-1, 0))


class InvalidAdjacencyError(ValueError):
    """Raised when an edge query is made between non-adjacent coordinates."""


@dataclass(frozen=True, order=True)
class Coordinate:
    """Immutable 1-indexed grid cell."""

    x: int
    y: int

    def distance_to(self, other: Coordinate) -> int:
        """Manhattan distance, ignoring obstacles."""
        return abs(self.x - other.x) + abs(self.y - other.y)

    def is_adjacent(self, other: Coordinate) -> bool:
        return self.distance_to(other) == 1

    def __str__(self) -> str:
        return f"({self.x},{self.y})"


@dataclass(frozen=True)
class CostZone:
    """Axis-aligned rectangle whose perimeter edges carry ``cost``."""

    corner_a: Coordinate
    corner_b: Coordinate
    cost: int

    @property
    def x_range(self) -> tuple[int, int]:
        return min(self.corner_a.x, self.corner_b.x), max(self.corner_a.x, self.corner_b.x)

    @property
    def y_range(self) -> tuple[int, int]:
        return min(self.corner_a.y, self.corner_b.y), max(self.corner_a.y, self.corner_b.y)

    def on_perimeter(self, c: Coordinate) -> bool:
        x1, x2 = self.x_range
        y1, y2 = self.y_range
        within_x = x1 <= c.x <= x2
        within_y = y1 <= c.y <= y2
        return ((c.y == y1 or c.y == y2) and within_x) or ((c.x == x1 or c.x == x2) and within_y)

    def affects_edge(self, a: Coordinate, b: Coordinate) -> bool:
        """Return True when both endpoints of an adjacent edge sit on the perimeter."""
        return a.is_adjacent(b) and self.on_perimeter(a) and self.on_perimeter(b)


@dataclass(frozen=True)
class Grid:
    """Bounded ``rows x cols`` grid with obstacles and cost zones.

    Read-only during simulation. Obstacles and zones are not validated
    against the bounds; out-of-bound cells are simply never valid moves.
    """

    rows: int
    cols: int
    obstacles: frozenset[Coordinate] = field(default_factory=frozenset)
    cost_zones: tuple[CostZone, ...] = ()

    @classmethod
    def create(
        cls,
        rows: int,
        cols: int,
        obstacles: Iterable[Coordinate] = (),
        cost_zones: Iterable[CostZone] = (),
    ) -> Grid:
        return cls(
            rows=rows,
            cols=cols,
            obstacles=frozenset(obstacles),
            cost_zones=tuple(cost_zones),
        )

    def in_bounds(self, c: Coordinate) -> bool:
        return 1 <= c.x <= self.rows and 1 <= c.y <= self.cols

    def is_obstacle(self, c: Coordinate) -> bool:
        return c in self.obstacles

    def valid_moves(self, c: Coordinate) -> list[Coordinate]:
        """Return in-bound, non-obstacle orthogonal neighbors in N, E, S, W order."""
        moves: list[Coordinate] = []
        for dx, dy in _DIRECTIONS:
            candidate = Coordinate(c.x + dx, c.y + dy)
            if self.in_bounds(candidate) and not self.is_obstacle(candidate):
                moves.append(candidate)
        return moves

    def edge_cost(self, a: Coordinate, b: Coordinate) -> int:
        """Return the max cost over all zones affecting edge ``a``-``b`` (default 1)."""
        if not a.is_adjacent(b):
            raise InvalidAdjacencyError(f"{a} and {b} are not grid-adjacent")
        cost = DEFAULT_EDGE_COST
        for zone in self.cost_zones:
            if zone.affects_edge(a, b):
                cost = max(cost, zone.cost)
        return cost

    def max_edge_cost(self) -> int:
        return max([DEFAULT_EDGE_COST, *(zone.cost for zone in self.cost_zones)])

    def path_cost(self, path: Iterable[Coordinate]) -> int:
        """Sum of edge costs over consecutive pairs of ``path``."""
        nodes = list(path)
        return sum(self.edge_cost(a, b) for a, b in zip(nodes, nodes[1:]))
