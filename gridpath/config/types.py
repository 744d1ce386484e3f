"""Configuration dataclasses for simulation runs.

All frozen dataclasses validate themselves on construction so that the
simulation core never sees non-positive dimensions or rates.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from gridpath.domain.grid import Coordinate, CostZone, Grid

__all__ = [
    "BatchConfig",
    "SimulationConfig",
]


@dataclass(frozen=True)
class SimulationConfig:
    """Validated parameters for one simulation run."""

    rows: int
    cols: int
    start: Coordinate
    destination: Coordinate
    horizon: int
    initial_population: int
    max_population: int
    comfort_exponent: int
    death_mean: float
    move_mean: float
    reproduce_mean: float
    cost_zones: tuple[CostZone, ...] = ()
    obstacles: tuple[Coordinate, ...] = ()
    epidemic_at_capacity: bool = False
    """Run an epidemic whenever the alive count exceeds ``max_population``."""

    def __post_init__(self) -> None:
        if self.rows < 1 or self.cols < 1:
            raise ValueError("grid dimensions must be >= 1")
        if self.horizon < 1:
            raise ValueError("horizon must be >= 1")
        if self.initial_population < 0:
            raise ValueError("initial_population must be >= 0")
        if self.max_population < 1:
            raise ValueError("max_population must be >= 1")
        if self.comfort_exponent < 1:
            raise ValueError("comfort_exponent must be >= 1")
        for name in ("death_mean", "move_mean", "reproduce_mean"):
            if not getattr(self, name) > 0:
                raise ValueError(f"{name} must be > 0")
        grid = Grid.create(self.rows, self.cols)
        if not grid.in_bounds(self.start):
            raise ValueError(f"start {self.start} lies outside the {self.rows}x{self.cols} grid")
        if not grid.in_bounds(self.destination):
            raise ValueError(
                f"destination {self.destination} lies outside the {self.rows}x{self.cols} grid"
            )
        if any(zone.cost < 1 for zone in self.cost_zones):
            raise ValueError("cost zone costs must be >= 1")

    def build_grid(self) -> Grid:
        return Grid.create(
            self.rows,
            self.cols,
            obstacles=self.obstacles,
            cost_zones=self.cost_zones,
        )


@dataclass(frozen=True)
class BatchConfig:
    """Settings for repeating one configuration across several seeds."""

    seeds: tuple[int, ...]
    out_dir: Path = Path("data")

    def __post_init__(self) -> None:
        if not self.seeds:
            raise ValueError("seeds must not be empty")
        if len(set(self.seeds)) != len(self.seeds):
            raise ValueError("seeds must be unique")
