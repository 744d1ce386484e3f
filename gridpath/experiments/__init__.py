"""Experiments layer: multi-seed batch orchestration."""

from gridpath.experiments.batch import deterministic_run_id, run_logged, run_seed_batch

__all__ = [
    "deterministic_run_id",
    "run_logged",
    "run_seed_batch",
]
