"""Parquet schema definitions for simulation artifacts.

Arrow schemas used for persisting observation logs and per-seed run
summaries are centralised here so that every module works against the same
column contracts.
"""

from __future__ import annotations

import pyarrow as pa

OBSERVATION_SCHEMA_VERSION = 1
RUN_SUMMARY_SCHEMA_VERSION = 1

RECORD_OBSERVATION = "observation"
RECORD_BEST_FIT = "best_fit"

OBSERVATION_SCHEMA = pa.schema(
    [
        ("schema_version", pa.int64()),
        ("run_id", pa.string()),
        ("seed", pa.int64()),
        ("record_type", pa.string()),
        ("index", pa.int64()),
        ("time", pa.float64()),
        ("events", pa.int64()),
        ("population_size", pa.int64()),
        ("destination_hit", pa.bool_()),
        ("path_x", pa.list_(pa.int64())),
        ("path_y", pa.list_(pa.int64())),
        ("cost", pa.int64()),
        ("comfort", pa.float64()),
    ]
)

RUN_SUMMARY_SCHEMA = pa.schema(
    [
        ("schema_version", pa.int64()),
        ("run_id", pa.string()),
        ("seed", pa.int64()),
        ("events", pa.int64()),
        ("final_time", pa.int64()),
        ("final_population", pa.int64()),
        ("destination_hit", pa.bool_()),
        ("best_cost", pa.int64()),
        ("best_path_length", pa.int64()),
        ("optimal_cost", pa.int64()),
    ]
)
