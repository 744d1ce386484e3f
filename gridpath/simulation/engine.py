"""Discrete-event simulation driver: initialization, main loop, and observations.

Driver states: INITIALIZING -> RUNNING -> DRAINING -> TERMINATED. Observations
are taken at ``OBSERVATION_INTERVALS + 1`` checkpoints (time 0 and every
``horizon / OBSERVATION_INTERVALS`` units). A checkpoint is emitted just
before the first event at or after its time; checkpoints never reached by an
event are emitted from the final state while draining.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from random import Random

from gridpath.config.constants import OBSERVATION_INTERVALS
from gridpath.config.types import SimulationConfig
from gridpath.domain.grid import Coordinate
from gridpath.domain.individual import Individual
from gridpath.domain.population import PopulationManager
from gridpath.simulation.calendar import EventCalendar
from gridpath.simulation.strategies import (
    StrategyDeps,
    dispatch,
    next_interval,
    schedule_lifecycle,
)

logger = logging.getLogger(__name__)


class EngineState(str, Enum):
    """Lifecycle of a :class:`Simulation` driver."""

    INITIALIZING = "initializing"
    RUNNING = "running"
    DRAINING = "draining"
    TERMINATED = "terminated"


@dataclass(frozen=True)
class Observation:
    """Read-only snapshot emitted at one checkpoint.

    ``cost`` is set when the best-fit individual reached the destination,
    ``comfort`` otherwise. Both are None when there is no best fit.
    """

    index: int
    time: float
    events: int
    population_size: int
    destination_hit: bool
    best_path: tuple[Coordinate, ...]
    cost: int | None
    comfort: float | None


@dataclass(frozen=True)
class BestFit:
    """Final best-fit record; an empty path with zero cost when nobody exists."""

    path: tuple[Coordinate, ...]
    cost: int
    destination_hit: bool


@dataclass(frozen=True)
class SimulationReport:
    """Everything a run emits, in emission order."""

    observations: tuple[Observation, ...]
    best_fit: BestFit
    events: int
    final_time: int
    final_population: int


ObservationSink = Callable[[Observation], None]


def checkpoint_time(index: int, horizon: int) -> float:
    return index * horizon / OBSERVATION_INTERVALS


class Simulation:
    """Event-driven simulation over one validated configuration.

    The random source is injected so seeded runs are reproducible.
    """

    def __init__(
        self,
        config: SimulationConfig,
        rng: Random | None = None,
        sink: ObservationSink | None = None,
    ) -> None:
        self.state = EngineState.INITIALIZING
        self.config = config
        self.rng = rng if rng is not None else Random()
        self.sink = sink
        self.grid = config.build_grid()
        self.calendar = EventCalendar()
        self.population = PopulationManager(
            self.grid, config.destination, config.comfort_exponent
        )
        self.deps = StrategyDeps(
            grid=self.grid,
            calendar=self.calendar,
            population=self.population,
            config=config,
            rng=self.rng,
        )
        self.now = 0
        self.events_processed = 0
        self.stale_events = 0
        self.observations: list[Observation] = []
        self._next_checkpoint = 0
        self._seed_population()

    def _seed_population(self) -> None:
        config = self.config
        for _ in range(config.initial_population):
            individual = Individual.spawn(config.start, birth_time=0)
            individual.death_time = next_interval(
                config.death_mean, individual, self.grid, config, self.rng
            )
            self.population.add(individual)
            schedule_lifecycle(individual, 0, self.deps)
        logger.info(
            "seeded %d individuals with %d pending events",
            config.initial_population,
            len(self.calendar),
        )

    # ------------------------------------------------------------------
    # Best fit and observations
    # ------------------------------------------------------------------

    def best_fit(self) -> Individual | None:
        """Pick the best individual ever created, alive or dead.

        Among those standing on the destination the cheapest path wins;
        otherwise the highest comfort wins. Ties keep the first encountered.
        """
        everyone = self.population.history()
        destination = self.config.destination
        best: Individual | None = None
        best_cost = 0
        for ind in everyone:
            if ind.reached(destination):
                cost = ind.cost(self.grid)
                if best is None or cost < best_cost:
                    best, best_cost = ind, cost
        if best is not None:
            return best
        best_comfort = 0.0
        for ind in everyone:
            value = self.population.comfort_of(ind)
            if best is None or value > best_comfort:
                best, best_comfort = ind, value
        return best

    def observe(self, index: int, time: float) -> Observation:
        """Snapshot the run at checkpoint ``time``; alive means ``death_time > time``."""
        best = self.best_fit()
        if best is None:
            observation = Observation(
                index=index,
                time=time,
                events=self.events_processed,
                population_size=len(self.population.all_alive(time)),
                destination_hit=False,
                best_path=(),
                cost=None,
                comfort=None,
            )
        else:
            hit = best.reached(self.config.destination)
            observation = Observation(
                index=index,
                time=time,
                events=self.events_processed,
                population_size=len(self.population.all_alive(time)),
                destination_hit=hit,
                best_path=tuple(best.path),
                cost=best.cost(self.grid) if hit else None,
                comfort=None if hit else self.population.comfort_of(best),
            )
        self.observations.append(observation)
        if self.sink is not None:
            self.sink(observation)
        logger.info(
            "observation %d at t=%s: events=%d alive=%d hit=%s",
            index,
            time,
            observation.events,
            observation.population_size,
            observation.destination_hit,
        )
        return observation

    def _emit_checkpoints_until(self, time: float) -> None:
        while self._next_checkpoint <= OBSERVATION_INTERVALS:
            at = checkpoint_time(self._next_checkpoint, self.config.horizon)
            if at > time:
                return
            self.observe(self._next_checkpoint, at)
            self._next_checkpoint += 1

    # ------------------------------------------------------------------
    # Main loop
    # ------------------------------------------------------------------

    def step(self) -> bool:
        """Dispatch the earliest event; return False once the run must stop."""
        if self.state is EngineState.INITIALIZING:
            self.state = EngineState.RUNNING
        if self.state is not EngineState.RUNNING:
            return False
        next_time = self.calendar.peek_time()
        if next_time is None or next_time > self.config.horizon:
            self.state = EngineState.DRAINING
            return False

        event = self.calendar.pop()
        self.now = event.time
        self._emit_checkpoints_until(self.now)

        if event.individual is not None and event.individual not in self.population:
            self.stale_events += 1
            logger.debug("skipping %s event for removed individual at t=%d", event.kind, self.now)
            return True

        logger.debug("dispatching %s at t=%d", event.kind.value, self.now)
        dispatch(event, self.now, self.deps)
        self.events_processed += 1

        if self.config.epidemic_at_capacity:
            alive = self.population.all_alive(self.now)
            if len(alive) > self.config.max_population:
                self.population.apply_epidemic(self.now, self.rng)
        return True

    def run(self) -> SimulationReport:
        logger.info(
            "running %dx%d grid to t=%d with %d individuals",
            self.config.rows,
            self.config.cols,
            self.config.horizon,
            self.config.initial_population,
        )
        while self.step():
            pass

        self.state = EngineState.DRAINING
        while self._next_checkpoint <= OBSERVATION_INTERVALS:
            self.observe(
                self._next_checkpoint,
                checkpoint_time(self._next_checkpoint, self.config.horizon),
            )
            self._next_checkpoint += 1

        best = self.best_fit()
        if best is None:
            best_fit = BestFit(path=(), cost=0, destination_hit=False)
        else:
            best_fit = BestFit(
                path=tuple(best.path),
                cost=best.cost(self.grid),
                destination_hit=best.reached(self.config.destination),
            )
        self.state = EngineState.TERMINATED
        logger.info(
            "terminated at t=%d after %d events (%d stale skipped)",
            self.now,
            self.events_processed,
            self.stale_events,
        )
        return SimulationReport(
            observations=tuple(self.observations),
            best_fit=best_fit,
            events=self.events_processed,
            final_time=self.now,
            final_population=len(self.population.all_alive(self.now)),
        )


def run_simulation(
    config: SimulationConfig,
    seed: int | None = None,
    sink: ObservationSink | None = None,
) -> SimulationReport:
    """Build and run a simulation seeded with ``seed``."""
    return Simulation(config, rng=Random(seed), sink=sink).run()
