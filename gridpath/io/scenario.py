"""Random scenario generation: scalar parameters plus drawn zones and obstacles."""

from __future__ import annotations

from random import Random

from gridpath.config.constants import RANDOM_ZONE_MAX_COST, RANDOM_ZONE_MIN_COST
from gridpath.config.types import SimulationConfig
from gridpath.domain.grid import Coordinate, CostZone
from gridpath.io.input_file import ScalarParameters


def random_cost_zone(rows: int, cols: int, rng: Random) -> CostZone:
    """Draw a zone anchored inside the grid and extending up/right from corner A."""
    x1 = rng.randint(1, rows)
    y1 = rng.randint(1, cols)
    x2 = x1 + rng.randrange(max(1, rows - x1))
    y2 = y1 + rng.randrange(max(1, cols - y1))
    cost = rng.randint(RANDOM_ZONE_MIN_COST, RANDOM_ZONE_MAX_COST)
    return CostZone(Coordinate(x1, y1), Coordinate(x2, y2), cost)


def random_obstacle(rows: int, cols: int, rng: Random) -> Coordinate:
    return Coordinate(rng.randint(1, rows), rng.randint(1, cols))


def random_scenario(
    scalars: ScalarParameters,
    rng: Random,
    epidemic_at_capacity: bool = False,
) -> SimulationConfig:
    """Build a configuration whose zones and obstacles are drawn from ``rng``.

    Obstacles are not kept off the start or destination cell; an obstacle on
    the destination makes it unreachable for the whole run.
    """
    zones = tuple(
        random_cost_zone(scalars.rows, scalars.cols, rng) for _ in range(scalars.n_zones)
    )
    obstacles = tuple(
        random_obstacle(scalars.rows, scalars.cols, rng) for _ in range(scalars.n_obstacles)
    )
    return scalars.to_config(zones, obstacles, epidemic_at_capacity)
