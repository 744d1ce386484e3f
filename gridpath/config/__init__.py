"""Configuration layer: constants and typed config dataclasses."""

from gridpath.config.constants import (
    COMFORT_CEIL,
    COMFORT_FLOOR,
    DEFAULT_EDGE_COST,
    EPIDEMIC_GUARANTEED_SURVIVORS,
    EPIDEMIC_MIN_ALIVE,
    FLUSH_THRESHOLD,
    INHERITED_PATH_FRACTION,
    OBSERVATION_INTERVALS,
)
from gridpath.config.types import BatchConfig, SimulationConfig

__all__ = [
    "BatchConfig",
    "COMFORT_CEIL",
    "COMFORT_FLOOR",
    "DEFAULT_EDGE_COST",
    "EPIDEMIC_GUARANTEED_SURVIVORS",
    "EPIDEMIC_MIN_ALIVE",
    "FLUSH_THRESHOLD",
    "INHERITED_PATH_FRACTION",
    "OBSERVATION_INTERVALS",
    "SimulationConfig",
]
