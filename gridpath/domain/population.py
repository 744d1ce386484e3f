"""Population membership, alive queries, comfort ranking, and epidemic culling."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from random import Random

from gridpath.config.constants import EPIDEMIC_GUARANTEED_SURVIVORS, EPIDEMIC_MIN_ALIVE
from gridpath.domain.grid import Coordinate, Grid
from gridpath.domain.individual import Individual

logger = logging.getLogger(__name__)


class PopulationManager:
    """Owns the current individuals and remembers every individual ever added.

    Membership is by identity. Comfort ranking needs the grid, destination and
    exponent, which are fixed for the lifetime of a run.
    """

    def __init__(self, grid: Grid, destination: Coordinate, k: int) -> None:
        self.grid = grid
        self.destination = destination
        self.k = k
        self._members: dict[Individual, None] = {}
        self._history: list[Individual] = []

    def __len__(self) -> int:
        return len(self._members)

    def __contains__(self, individual: object) -> bool:
        return individual in self._members

    def __iter__(self) -> Iterator[Individual]:
        return iter(list(self._members))

    def add(self, individual: Individual) -> None:
        if individual in self:
            return
        self._members[individual] = None
        self._history.append(individual)

    def remove(self, individual: Individual) -> bool:
        """Remove ``individual``; return False if it was not a member."""
        if individual not in self:
            return False
        del self._members[individual]
        return True

    def members(self) -> list[Individual]:
        return list(self._members)

    def history(self) -> list[Individual]:
        """Every individual ever added, in insertion order, alive or not."""
        return list(self._history)

    def all_alive(self, now: float) -> list[Individual]:
        return [ind for ind in self._members if ind.death_time > now]

    def comfort_of(self, individual: Individual) -> float:
        return individual.comfort(self.grid, self.destination, self.k)

    def top_k(self, count: int, now: int) -> list[Individual]:
        """Return the ``count`` alive individuals with highest comfort, descending."""
        alive = self.all_alive(now)
        # sorted() is stable, so equal comfort keeps insertion order
        ranked = sorted(alive, key=self.comfort_of, reverse=True)
        return ranked[:count]

    def apply_epidemic(self, now: int, rng: Random) -> list[Individual]:
        """Cull the alive population and return the removed individuals.

        The top comfort individuals always survive. Every other alive
        individual survives with probability equal to its comfort: it is
        removed unless a uniform draw falls below its comfort.
        """
        alive = self.all_alive(now)
        if len(alive) < EPIDEMIC_MIN_ALIVE:
            return []
        spared = set(self.top_k(EPIDEMIC_GUARANTEED_SURVIVORS, now))
        removed: list[Individual] = []
        for ind in alive:
            if ind in spared:
                continue
            if rng.random() < self.comfort_of(ind):
                continue
            self.remove(ind)
            removed.append(ind)
        logger.debug(
            "epidemic at t=%d removed %d of %d alive individuals", now, len(removed), len(alive)
        )
        return removed
