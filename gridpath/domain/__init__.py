"""Domain layer: grid model, comfort score, individuals, and population."""

from gridpath.domain.comfort import comfort, comfort_bounds
from gridpath.domain.grid import Coordinate, CostZone, Grid, InvalidAdjacencyError
from gridpath.domain.individual import Individual, inherited_prefix_length, remove_cycles
from gridpath.domain.population import PopulationManager

__all__ = [
    "Coordinate",
    "CostZone",
    "Grid",
    "Individual",
    "InvalidAdjacencyError",
    "PopulationManager",
    "comfort",
    "comfort_bounds",
    "inherited_prefix_length",
    "remove_cycles",
]
