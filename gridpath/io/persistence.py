"""Parquet persistence for observation records and run summaries."""

from __future__ import annotations

from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from gridpath.config.constants import FLUSH_THRESHOLD
from gridpath.io.schemas import (
    OBSERVATION_SCHEMA,
    OBSERVATION_SCHEMA_VERSION,
    RECORD_BEST_FIT,
    RECORD_OBSERVATION,
    RUN_SUMMARY_SCHEMA,
)
from gridpath.simulation.engine import BestFit, Observation


def _empty_observation_columns() -> dict[str, list[object]]:
    return {name: [] for name in OBSERVATION_SCHEMA.names}


def flush_observation_columns(
    columns: dict[str, list[object]],
    log_path: Path,
    writer: pq.ParquetWriter | None,
) -> pq.ParquetWriter | None:
    """Write accumulated observation rows to Parquet and clear in-memory buffers."""
    if not columns["run_id"]:
        return writer
    table = pa.Table.from_pydict(columns, schema=OBSERVATION_SCHEMA)
    if writer is None:
        writer = pq.ParquetWriter(log_path, OBSERVATION_SCHEMA)
    writer.write_table(table)
    for values in columns.values():
        values.clear()
    return writer


class ObservationLogWriter:
    """Buffered writer for ``observations.parquet``.

    Use as a context manager; the file is finalized on exit even when the
    run raises.
    """

    def __init__(self, log_path: Path, flush_threshold: int = FLUSH_THRESHOLD) -> None:
        self.log_path = Path(log_path)
        self.flush_threshold = flush_threshold
        self._columns = _empty_observation_columns()
        self._writer: pq.ParquetWriter | None = None
        self.rows_written = 0

    def __enter__(self) -> ObservationLogWriter:
        self.log_path.parent.mkdir(parents=True, exist_ok=True)
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _append(self, row: dict[str, object]) -> None:
        for name, values in self._columns.items():
            values.append(row[name])
        self.rows_written += 1
        if len(self._columns["run_id"]) >= self.flush_threshold:
            self.flush()

    def write_observation(self, run_id: str, seed: int | None, observation: Observation) -> None:
        self._append(
            {
                "schema_version": OBSERVATION_SCHEMA_VERSION,
                "run_id": run_id,
                "seed": seed,
                "record_type": RECORD_OBSERVATION,
                "index": observation.index,
                "time": float(observation.time),
                "events": observation.events,
                "population_size": observation.population_size,
                "destination_hit": observation.destination_hit,
                "path_x": [c.x for c in observation.best_path],
                "path_y": [c.y for c in observation.best_path],
                "cost": observation.cost,
                "comfort": observation.comfort,
            }
        )

    def write_best_fit(
        self,
        run_id: str,
        seed: int | None,
        best_fit: BestFit,
        events: int,
        final_time: int,
        population_size: int,
    ) -> None:
        self._append(
            {
                "schema_version": OBSERVATION_SCHEMA_VERSION,
                "run_id": run_id,
                "seed": seed,
                "record_type": RECORD_BEST_FIT,
                "index": None,
                "time": float(final_time),
                "events": events,
                "population_size": population_size,
                "destination_hit": best_fit.destination_hit,
                "path_x": [c.x for c in best_fit.path],
                "path_y": [c.y for c in best_fit.path],
                "cost": best_fit.cost,
                "comfort": None,
            }
        )

    def flush(self) -> None:
        self._writer = flush_observation_columns(self._columns, self.log_path, self._writer)

    def close(self) -> None:
        self.flush()
        if self._writer is None:
            # Nothing was written; still leave a readable, empty file behind.
            self._writer = pq.ParquetWriter(self.log_path, OBSERVATION_SCHEMA)
        self._writer.close()
        self._writer = None


def write_run_summaries(rows: list[dict[str, object]], path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    pq.write_table(pa.Table.from_pylist(rows, schema=RUN_SUMMARY_SCHEMA), path)
