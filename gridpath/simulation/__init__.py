"""Simulation layer: event calendar, strategies, and the discrete-event driver."""

from gridpath.simulation.calendar import EventCalendar
from gridpath.simulation.engine import (
    BestFit,
    EngineState,
    Observation,
    Simulation,
    SimulationReport,
    run_simulation,
)
from gridpath.simulation.events import Event, EventKind
from gridpath.simulation.strategies import StrategyDeps, dispatch, next_interval

__all__ = [
    "BestFit",
    "EngineState",
    "Event",
    "EventCalendar",
    "EventKind",
    "Observation",
    "Simulation",
    "SimulationReport",
    "StrategyDeps",
    "dispatch",
    "next_interval",
    "run_simulation",
]
