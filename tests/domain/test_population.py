"""Tests for gridpath.domain.population module."""

from __future__ import annotations

from random import Random

from gridpath.domain.grid import Coordinate, Grid
from gridpath.domain.individual import Individual
from gridpath.domain.population import PopulationManager

DEST = Coordinate(5, 5)


class FixedRandom(Random):
    """Random whose ``random()`` always returns the same value."""

    def __init__(self, value: float) -> None:
        super().__init__(0)
        self.value = value

    def random(self) -> float:
        return self.value


def _manager() -> PopulationManager:
    return PopulationManager(Grid.create(5, 5), DEST, 1)


def _at(x: int, y: int, death_time: int = 100) -> Individual:
    return Individual(path=[Coordinate(x, y)], death_time=death_time)


class TestMembership:
    def test_add_and_remove_by_identity(self) -> None:
        pop = _manager()
        a, b = _at(1, 1), _at(1, 1)
        pop.add(a)
        pop.add(b)
        assert len(pop) == 2
        assert pop.remove(a) is True
        assert a not in pop
        assert b in pop

    def test_remove_non_member_returns_false(self) -> None:
        pop = _manager()
        assert pop.remove(_at(1, 1)) is False

    def test_duplicate_add_ignored(self) -> None:
        pop = _manager()
        a = _at(1, 1)
        pop.add(a)
        pop.add(a)
        assert len(pop) == 1
        assert pop.history() == [a]

    def test_history_keeps_removed(self) -> None:
        pop = _manager()
        a, b = _at(1, 1), _at(2, 2)
        pop.add(a)
        pop.add(b)
        pop.remove(a)
        assert pop.members() == [b]
        assert pop.history() == [a, b]

    def test_all_alive_filters_by_death_time(self) -> None:
        pop = _manager()
        dead, alive = _at(1, 1, death_time=5), _at(1, 1, death_time=6)
        pop.add(dead)
        pop.add(alive)
        assert pop.all_alive(5) == [alive]
        assert pop.all_alive(4) == [dead, alive]


class TestTopK:
    def test_ranked_by_comfort_descending(self) -> None:
        pop = _manager()
        far, mid, near = _at(1, 1), _at(3, 3), _at(5, 4)
        for ind in (far, near, mid):
            pop.add(ind)
        assert pop.top_k(2, 0) == [near, mid]
        assert pop.top_k(10, 0) == [near, mid, far]

    def test_ties_keep_insertion_order(self) -> None:
        pop = _manager()
        first, second = _at(2, 2), _at(2, 2)
        pop.add(first)
        pop.add(second)
        assert pop.top_k(1, 0) == [first]


class TestEpidemic:
    def _populate(self, count: int) -> tuple[PopulationManager, list[Individual]]:
        pop = _manager()
        # Distinct distances to the destination give distinct comforts.
        cells = [(5, 4), (4, 4), (4, 3), (3, 3), (3, 2), (2, 2), (2, 1), (1, 1)]
        individuals = [_at(x, y) for x, y in cells[:count]]
        for ind in individuals:
            pop.add(ind)
        return pop, individuals

    def test_below_threshold_is_noop(self) -> None:
        pop, individuals = self._populate(5)
        removed = pop.apply_epidemic(0, FixedRandom(0.9999))
        assert removed == []
        assert pop.members() == individuals

    def test_top_five_always_survive(self) -> None:
        pop, individuals = self._populate(6)
        removed = pop.apply_epidemic(0, FixedRandom(0.9999))
        assert removed == [individuals[5]]
        assert pop.members() == individuals[:5]

    def test_survival_when_draw_below_comfort(self) -> None:
        pop, individuals = self._populate(8)
        removed = pop.apply_epidemic(0, FixedRandom(0.0))
        assert removed == []
        assert len(pop) == 8

    def test_dead_members_not_counted(self) -> None:
        pop, individuals = self._populate(6)
        individuals[0].death_time = 0
        removed = pop.apply_epidemic(0, FixedRandom(0.9999))
        assert removed == []
        assert len(pop) == 6

    def test_history_retains_culled(self) -> None:
        pop, individuals = self._populate(8)
        pop.apply_epidemic(0, FixedRandom(0.9999))
        assert len(pop) == 5
        assert pop.history() == individuals
