"""Comfort score coupling path geometry to event timing.

Comfort is a pure function of the path, the grid, and the destination and is
recomputed on every call. Both factors are clamped before exponentiation so
the score stays strictly inside (0, 1) and ``log(comfort)`` is always finite.
"""

from __future__ import annotations

from collections.abc import Sequence

from gridpath.config.constants import COMFORT_CEIL, COMFORT_FLOOR
from gridpath.domain.grid import Coordinate, Grid


def _clamp(value: float) -> float:
    return max(COMFORT_FLOOR, min(COMFORT_CEIL, value))


def path_efficiency(path: Sequence[Coordinate], grid: Grid) -> float:
    """Clamped reward for short, cheap paths."""
    length = len(path) - 1
    cost = grid.path_cost(path)
    raw = (1 - cost - length + 2) / ((grid.max_edge_cost() - 1) * length + 3)
    return _clamp(raw)


def destination_proximity(position: Coordinate, grid: Grid, destination: Coordinate) -> float:
    """Clamped reward for being close to the destination."""
    raw = 1 - position.distance_to(destination) / (grid.rows + grid.cols + 1)
    return _clamp(raw)


def comfort(
    path: Sequence[Coordinate],
    grid: Grid,
    destination: Coordinate,
    k: int,
) -> float:
    """Return ``efficiency**k * proximity**k`` for a non-empty path."""
    if not path:
        raise ValueError("path must not be empty")
    part1 = path_efficiency(path, grid)
    part2 = destination_proximity(path[-1], grid, destination)
    return part1**k * part2**k


def comfort_bounds(k: int) -> tuple[float, float]:
    """Inclusive range any comfort value can take for exponent ``k``."""
    return (COMFORT_FLOOR**k) ** 2, (COMFORT_CEIL**k) ** 2
