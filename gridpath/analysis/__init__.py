"""Analysis helpers: grid graph reference costs and batch statistics."""

from gridpath.analysis.grid_graph import build_grid_graph, is_reachable, optimal_path_cost
from gridpath.analysis.summary import summarize_runs

__all__ = [
    "build_grid_graph",
    "is_reachable",
    "optimal_path_cost",
    "summarize_runs",
]
