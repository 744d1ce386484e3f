"""Tests for gridpath.domain.individual module."""

from __future__ import annotations

import gc
from random import Random

import pytest

from gridpath.domain.grid import Coordinate, Grid
from gridpath.domain.individual import Individual, inherited_prefix_length, remove_cycles

A, B, C, D = Coordinate(1, 1), Coordinate(1, 2), Coordinate(2, 2), Coordinate(2, 1)
DEST = Coordinate(5, 5)


class TestRemoveCycles:
    def test_simple_path_unchanged(self) -> None:
        assert remove_cycles([A, B, C]) == [A, B, C]

    def test_back_step_truncates(self) -> None:
        assert remove_cycles([A, B, C, B]) == [A, B]

    def test_full_loop_returns_to_start(self) -> None:
        assert remove_cycles([A, B, C, D, A]) == [A]

    def test_revisit_after_truncation_is_kept(self) -> None:
        assert remove_cycles([A, B, C, B, C]) == [A, B, C]

    def test_idempotent(self) -> None:
        rng = Random(5)
        grid = Grid.create(4, 4)
        for _ in range(20):
            walk = [A]
            for _ in range(15):
                moves = grid.valid_moves(walk[-1])
                walk.append(moves[rng.randrange(len(moves))])
            once = remove_cycles(walk)
            assert remove_cycles(once) == once
            assert len(set(once)) == len(once)
            assert once[0] == A
            assert once[-1] == walk[-1]


class TestInheritedPrefixLength:
    def test_single_vertex(self) -> None:
        assert inherited_prefix_length(1, 0.5) == 1

    def test_rounds_up(self) -> None:
        assert inherited_prefix_length(10, 0.5) == 10

    def test_never_exceeds_vertices(self) -> None:
        assert inherited_prefix_length(4, 0.999) == 4

    def test_low_comfort_keeps_most_of_long_path(self) -> None:
        assert inherited_prefix_length(100, 0.5) == 95


class TestIndividual:
    def test_empty_path_rejected(self) -> None:
        with pytest.raises(ValueError, match="must not be empty"):
            Individual(path=[])

    def test_spawn(self) -> None:
        ind = Individual.spawn(A, birth_time=0, death_time=7)
        assert ind.path == [A]
        assert ind.position == A
        assert ind.length == 0
        assert ind.death_time == 7
        assert ind.parent is None

    def test_identity_equality(self) -> None:
        assert Individual.spawn(A) != Individual.spawn(A)

    def test_move_appends_and_cuts_loops(self) -> None:
        ind = Individual.spawn(A)
        ind.move(B)
        ind.move(C)
        assert ind.path == [A, B, C]
        ind.move(B)
        assert ind.path == [A, B]
        assert ind.length == 1

    def test_cost_and_reached(self) -> None:
        grid = Grid.create(2, 2)
        ind = Individual(path=[A, B, C])
        assert ind.cost(grid) == 2
        assert ind.reached(C)
        assert not ind.reached(A)


class TestReproduce:
    def test_child_path_is_parent_prefix(self) -> None:
        grid = Grid.create(5, 5)
        path = [Coordinate(1, y) for y in range(1, 6)] + [Coordinate(x, 5) for x in range(2, 5)]
        parent = Individual(path=path, birth_time=1, death_time=30)
        child = parent.reproduce(2, grid, DEST)
        phi = parent.comfort(grid, DEST, 2)
        assert len(child.path) == inherited_prefix_length(len(path), phi)
        assert child.path == parent.path[: len(child.path)]
        assert child.birth_time == 0
        assert child.death_time == 0

    def test_child_path_is_independent_copy(self) -> None:
        grid = Grid.create(5, 5)
        parent = Individual(path=[A, B])
        child = parent.reproduce(1, grid, DEST)
        child.move(Coordinate(1, 3))
        assert parent.path == [A, B]

    def test_single_cell_parent(self) -> None:
        parent = Individual.spawn(A)
        child = parent.reproduce(1, Grid.create(5, 5), DEST)
        assert child.path == [A]

    def test_parent_link_is_weak(self) -> None:
        parent = Individual.spawn(A)
        child = parent.reproduce(1, Grid.create(5, 5), DEST)
        assert child.parent is parent
        del parent
        gc.collect()
        assert child.parent is None
