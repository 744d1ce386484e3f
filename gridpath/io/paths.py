"""Path construction helpers for simulation output directories."""

from __future__ import annotations

from pathlib import Path


def logs_dir(out_dir: Path) -> Path:
    """Return path to the logs subdirectory within an output directory."""
    return out_dir / "logs"


def observation_log_path(out_dir: Path) -> Path:
    """Return path to the observation log Parquet file."""
    return logs_dir(out_dir) / "observations.parquet"


def run_summary_path(out_dir: Path) -> Path:
    """Return path to the per-seed run summary Parquet file."""
    return logs_dir(out_dir) / "run_summary.parquet"


def batch_summary_path(out_dir: Path) -> Path:
    """Return path to the batch summary JSON file."""
    return logs_dir(out_dir) / "batch_summary.json"
