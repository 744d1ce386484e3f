"""Fixed numeric parameters of the path-evolution simulation.

Checkpoint count, comfort clamps, epidemic thresholds, inheritance fraction
and random-zone cost range live here so the grid, strategies and scenario
generator agree on them.
"""

from __future__ import annotations

OBSERVATION_INTERVALS = 20
"""Number of equal horizon intervals between observation checkpoints."""

COMFORT_FLOOR = 0.001
"""Lower clamp applied to both comfort factors before exponentiation."""

COMFORT_CEIL = 0.999
"""Upper clamp applied to both comfort factors before exponentiation."""

DEFAULT_EDGE_COST = 1
"""Cost of an edge not lying on the perimeter of any cost zone."""

EPIDEMIC_MIN_ALIVE = 6
"""Epidemic is a no-op below this many alive individuals."""

EPIDEMIC_GUARANTEED_SURVIVORS = 5
"""Top-comfort individuals always spared by an epidemic."""

INHERITED_PATH_FRACTION = 0.9
"""Fixed share of the parent's path vertices inherited by a child."""

RANDOM_ZONE_MIN_COST = 2
"""Smallest cost drawn for a randomly generated cost zone."""

RANDOM_ZONE_MAX_COST = 5
"""Largest cost drawn for a randomly generated cost zone."""

FLUSH_THRESHOLD = 8_192
"""Flush observation rows to Parquet once this in-memory row count is reached."""
