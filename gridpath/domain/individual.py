"""Mobile individual: path history, lifecycle timestamps, and reproduction.

Path invariant: non-empty, consecutive cells grid-adjacent, no repeated cell
outside of a single ``move`` call (loops are cut as soon as they close).
"""

from __future__ import annotations

import math
import weakref
from collections.abc import Iterable
from dataclasses import dataclass, field

from gridpath.config.constants import INHERITED_PATH_FRACTION
from gridpath.domain.comfort import comfort
from gridpath.domain.grid import Coordinate, Grid


def remove_cycles(path: Iterable[Coordinate]) -> list[Coordinate]:
    """Return ``path`` with every closed loop cut back to its first visit."""
    simple: list[Coordinate] = []
    index: dict[Coordinate, int] = {}
    for coord in path:
        first = index.get(coord)
        if first is None:
            index[coord] = len(simple)
            simple.append(coord)
            continue
        for dropped in simple[first + 1 :]:
            del index[dropped]
        del simple[first + 1 :]
    return simple


def inherited_prefix_length(vertices: int, phi: float) -> int:
    """Number of parent path vertices a child inherits, clamped to ``[1, vertices]``."""
    count = math.ceil(
        vertices * INHERITED_PATH_FRACTION + vertices * (1 - INHERITED_PATH_FRACTION) * phi
    )
    return max(1, min(count, vertices))


@dataclass(eq=False)
class Individual:
    """A single agent. Equality and hashing are by identity."""

    path: list[Coordinate]
    birth_time: int = 0
    death_time: int = 0
    _parent_ref: weakref.ReferenceType[Individual] | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if not self.path:
            raise ValueError("path must not be empty")

    @classmethod
    def spawn(cls, start: Coordinate, birth_time: int = 0, death_time: int = 0) -> Individual:
        """Create an initial individual standing on ``start``."""
        return cls(path=[start], birth_time=birth_time, death_time=death_time)

    @property
    def position(self) -> Coordinate:
        return self.path[-1]

    @property
    def length(self) -> int:
        """Number of edges in the path."""
        return len(self.path) - 1

    @property
    def parent(self) -> Individual | None:
        """Provenance link; None for initial individuals or once the parent is collected."""
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    def move(self, next_position: Coordinate) -> None:
        self.path.append(next_position)
        self.path = remove_cycles(self.path)

    def cost(self, grid: Grid) -> int:
        return grid.path_cost(self.path)

    def comfort(self, grid: Grid, destination: Coordinate, k: int) -> float:
        return comfort(self.path, grid, destination, k)

    def reached(self, destination: Coordinate) -> bool:
        return self.position == destination

    def reproduce(self, k: int, grid: Grid, destination: Coordinate) -> Individual:
        """Create a child inheriting a comfort-weighted prefix of this path.

        Birth and death times are left at 0; the caller assigns them.
        """
        phi = self.comfort(grid, destination, k)
        prefix = inherited_prefix_length(len(self.path), phi)
        return Individual(path=list(self.path[:prefix]), _parent_ref=weakref.ref(self))
