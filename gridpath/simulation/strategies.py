"""Move, Death, and Reproduce strategies and the comfort-scaled timing draw.

Each strategy receives the event, the current time, and explicit handles to
the grid, calendar, population and configuration. A strategy never cancels
events; instead every (re)schedule is gated on the target's death time and
the horizon before it is pushed.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass
from random import Random

from gridpath.config.types import SimulationConfig
from gridpath.domain.grid import Grid
from gridpath.domain.individual import Individual
from gridpath.domain.population import PopulationManager
from gridpath.simulation.calendar import EventCalendar
from gridpath.simulation.events import Event, EventKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StrategyDeps:
    """Handles a strategy needs besides the event itself."""

    grid: Grid
    calendar: EventCalendar
    population: PopulationManager
    config: SimulationConfig
    rng: Random


Strategy = Callable[[Event, int, StrategyDeps], None]


def next_interval(
    mean_base: float,
    individual: Individual,
    grid: Grid,
    config: SimulationConfig,
    rng: Random,
) -> int:
    """Draw a waiting time from an exponential whose mean shrinks with comfort.

    ``lambda = 1 / ((1 - ln(phi)) * mean_base)``; the draw uses inverse-CDF
    sampling and is rounded up to whole time units.
    """
    phi = individual.comfort(grid, config.destination, config.comfort_exponent)
    rate = 1.0 / ((1.0 - math.log(phi)) * mean_base)
    u = rng.random()
    return math.ceil(-math.log(1.0 - u) / rate)


def _schedule_if_before_death(
    kind: EventKind,
    individual: Individual,
    time: int,
    deps: StrategyDeps,
) -> bool:
    """Push ``kind`` at ``time`` only if it precedes death and is within the horizon."""
    if time < individual.death_time and time <= deps.config.horizon:
        deps.calendar.push(Event(time=time, kind=kind, individual=individual))
        return True
    return False


def apply_move(event: Event, now: int, deps: StrategyDeps) -> None:
    individual = event.individual
    if individual is None:
        return
    moves = deps.grid.valid_moves(individual.position)
    if not moves:
        # Stationary until death; no further moves are scheduled.
        return
    individual.move(moves[deps.rng.randrange(len(moves))])
    if now < individual.death_time and now < deps.config.horizon:
        interval = next_interval(
            deps.config.move_mean, individual, deps.grid, deps.config, deps.rng
        )
        _schedule_if_before_death(EventKind.MOVE, individual, now + interval, deps)


def apply_death(event: Event, now: int, deps: StrategyDeps) -> None:
    individual = event.individual
    if individual is None:
        return
    deps.population.remove(individual)
    logger.debug("individual %x died at t=%d", id(individual), now)


def apply_reproduce(event: Event, now: int, deps: StrategyDeps) -> None:
    parent = event.individual
    if parent is None:
        return
    config = deps.config

    interval = next_interval(config.reproduce_mean, parent, deps.grid, config, deps.rng)
    _schedule_if_before_death(EventKind.REPRODUCE, parent, now + interval, deps)

    child = parent.reproduce(config.comfort_exponent, deps.grid, config.destination)
    child.birth_time = now
    child.death_time = now + next_interval(config.death_mean, child, deps.grid, config, deps.rng)
    deps.population.add(child)

    if now <= config.horizon:
        schedule_lifecycle(child, now, deps)


def schedule_lifecycle(individual: Individual, now: int, deps: StrategyDeps) -> None:
    """Schedule the first Death, Reproduce and Move events of a newborn.

    Each event is gated independently: death must fall within the horizon,
    reproduce and move must also precede the death time.
    """
    config = deps.config
    if individual.death_time <= config.horizon:
        deps.calendar.push(
            Event(time=individual.death_time, kind=EventKind.DEATH, individual=individual)
        )
    reproduce_at = now + next_interval(
        config.reproduce_mean, individual, deps.grid, config, deps.rng
    )
    _schedule_if_before_death(EventKind.REPRODUCE, individual, reproduce_at, deps)
    move_at = now + next_interval(config.move_mean, individual, deps.grid, config, deps.rng)
    _schedule_if_before_death(EventKind.MOVE, individual, move_at, deps)


STRATEGIES: dict[EventKind, Strategy] = {
    EventKind.MOVE: apply_move,
    EventKind.DEATH: apply_death,
    EventKind.REPRODUCE: apply_reproduce,
}


def dispatch(event: Event, now: int, deps: StrategyDeps) -> None:
    """Run the strategy registered for ``event.kind``."""
    STRATEGIES[event.kind](event, now, deps)
