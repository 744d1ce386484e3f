"""NetworkX view of the grid for reachability and optimal-cost reference.

Nodes are in-bound, non-obstacle cells; edges join grid-adjacent nodes and
carry ``weight`` equal to the grid's edge cost.
"""

from __future__ import annotations

import networkx as nx

from gridpath.domain.grid import Coordinate, Grid


def build_grid_graph(grid: Grid, include: tuple[Coordinate, ...] = ()) -> nx.Graph:
    """Build the weighted cell graph; ``include`` adds cells even if they are obstacles."""
    g = nx.Graph()
    for cell in include:
        if grid.in_bounds(cell):
            g.add_node(cell)
    for x in range(1, grid.rows + 1):
        for y in range(1, grid.cols + 1):
            cell = Coordinate(x, y)
            if not grid.is_obstacle(cell):
                g.add_node(cell)
    for cell in list(g.nodes):
        for neighbor in grid.valid_moves(cell):
            if not g.has_edge(cell, neighbor):
                g.add_edge(cell, neighbor, weight=grid.edge_cost(cell, neighbor))
    return g


def is_reachable(grid: Grid, source: Coordinate, target: Coordinate) -> bool:
    """True when ``target`` can be reached from ``source`` without crossing obstacles."""
    if source == target:
        return True
    g = build_grid_graph(grid, include=(source,))
    if source not in g or target not in g:
        return False
    return nx.has_path(g, source, target)


def optimal_path_cost(grid: Grid, source: Coordinate, target: Coordinate) -> int | None:
    """Cheapest path cost between two cells, or None when unreachable."""
    if source == target:
        return 0
    g = build_grid_graph(grid, include=(source,))
    if source not in g or target not in g:
        return None
    try:
        return int(nx.dijkstra_path_length(g, source, target, weight="weight"))
    except nx.NetworkXNoPath:
        return None
