"""Aggregate statistics over a batch of seeded runs."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import numpy as np


def _quantiles(values: Sequence[float]) -> dict[str, float | None]:
    if not values:
        return {"mean": None, "p25": None, "p50": None, "p75": None}
    arr = np.asarray(values, dtype=float)
    p25, p50, p75 = np.percentile(arr, [25, 50, 75])
    return {
        "mean": float(arr.mean()),
        "p25": float(p25),
        "p50": float(p50),
        "p75": float(p75),
    }


def summarize_runs(rows: Sequence[dict[str, Any]]) -> dict[str, Any]:
    """Summarize per-seed run rows (as written to ``run_summary.parquet``).

    Best-cost statistics only cover runs whose best fit reached the
    destination; ``cost_gap`` compares them to the optimal path cost.
    """
    n_runs = len(rows)
    hits = [row for row in rows if row["destination_hit"]]
    hit_costs = [float(row["best_cost"]) for row in hits]
    gaps = [
        float(row["best_cost"]) - float(row["optimal_cost"])
        for row in hits
        if row.get("optimal_cost") is not None
    ]
    events = np.asarray([row["events"] for row in rows], dtype=float)
    optimal = {row.get("optimal_cost") for row in rows}
    return {
        "runs": n_runs,
        "hit_rate": (len(hits) / n_runs) if n_runs else 0.0,
        "best_cost": _quantiles(hit_costs),
        "cost_gap": _quantiles(gaps),
        "mean_events": float(events.mean()) if n_runs else None,
        "optimal_cost": optimal.pop() if len(optimal) == 1 else None,
    }
