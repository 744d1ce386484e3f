"""Plain-text console report for parameters, observations, and the best fit."""

from __future__ import annotations

from collections.abc import Sequence

from gridpath.config.types import SimulationConfig
from gridpath.domain.grid import Coordinate
from gridpath.io.input_file import OBSTACLES_HEADER, ZONES_HEADER
from gridpath.simulation.engine import BestFit, Observation


def format_path(path: Sequence[Coordinate]) -> str:
    return "[" + ",".join(str(c) for c in path) + "]"


def format_parameters(config: SimulationConfig) -> str:
    """Echo the input parameters; the three means are truncated to integers."""
    header = [
        config.rows,
        config.cols,
        config.start.x,
        config.start.y,
        config.destination.x,
        config.destination.y,
        len(config.cost_zones),
        len(config.obstacles),
        config.horizon,
        config.initial_population,
        config.max_population,
        config.comfort_exponent,
        int(config.death_mean),
        int(config.move_mean),
        int(config.reproduce_mean),
    ]
    lines = [" ".join(str(value) for value in header)]
    if config.cost_zones:
        lines.append(ZONES_HEADER)
        for zone in config.cost_zones:
            a, b = zone.corner_a, zone.corner_b
            lines.append(f"{a.x} {a.y} {b.x} {b.y} {zone.cost}")
    if config.obstacles:
        lines.append(OBSTACLES_HEADER)
        lines.extend(f"{c.x} {c.y}" for c in config.obstacles)
    return "\n".join(lines) + "\n"


def _format_time(time: float) -> str:
    return str(int(time)) if float(time).is_integer() else f"{time:g}"


def format_observation(observation: Observation) -> str:
    if observation.cost is not None:
        metric = str(observation.cost)
    elif observation.comfort is not None:
        metric = f"{observation.comfort:.6f}"
    else:
        metric = "0"
    return "\n".join(
        [
            f"Observation {observation.index}:",
            f"\tPresent time: {_format_time(observation.time)}",
            f"\tNumber of realized events: {observation.events}",
            f"\tPopulation size: {observation.population_size}",
            f"\tFinal point has been hit: {'yes' if observation.destination_hit else 'no'}",
            f"\tPath of the best fit individual: {format_path(observation.best_path)}",
            f"\tCost/Comfort: {metric}",
        ]
    ) + "\n"


def format_best_fit(best_fit: BestFit) -> str:
    return f"Best fit individual: {format_path(best_fit.path)} with cost {best_fit.cost}"
