"""Tests for gridpath.io.persistence module."""

from __future__ import annotations

from pathlib import Path

import pyarrow.parquet as pq

from gridpath.domain.grid import Coordinate
from gridpath.io.persistence import ObservationLogWriter, write_run_summaries
from gridpath.io.schemas import (
    OBSERVATION_SCHEMA,
    OBSERVATION_SCHEMA_VERSION,
    RECORD_BEST_FIT,
    RECORD_OBSERVATION,
    RUN_SUMMARY_SCHEMA,
    RUN_SUMMARY_SCHEMA_VERSION,
)
from gridpath.simulation.engine import BestFit, Observation

PATH = (Coordinate(1, 1), Coordinate(1, 2))


def _observation(index: int) -> Observation:
    return Observation(
        index=index,
        time=index * 2.5,
        events=index * 3,
        population_size=4,
        destination_hit=False,
        best_path=PATH,
        cost=None,
        comfort=0.25,
    )


class TestObservationLogWriter:
    def test_writes_observations_and_best_fit(self, tmp_path: Path) -> None:
        log_path = tmp_path / "logs" / "observations.parquet"
        with ObservationLogWriter(log_path) as log:
            log.write_observation("run_s1", 1, _observation(0))
            log.write_observation("run_s1", 1, _observation(1))
            log.write_best_fit(
                "run_s1",
                1,
                BestFit(path=PATH, cost=1, destination_hit=False),
                events=9,
                final_time=50,
                population_size=2,
            )
        assert log.rows_written == 3

        table = pq.read_table(log_path)
        assert table.column_names == OBSERVATION_SCHEMA.names
        rows = table.to_pylist()
        assert [r["record_type"] for r in rows] == [
            RECORD_OBSERVATION,
            RECORD_OBSERVATION,
            RECORD_BEST_FIT,
        ]
        assert all(r["schema_version"] == OBSERVATION_SCHEMA_VERSION for r in rows)
        assert rows[1]["time"] == 2.5
        assert rows[1]["path_x"] == [1, 1]
        assert rows[1]["path_y"] == [1, 2]
        assert rows[1]["cost"] is None
        assert rows[2]["index"] is None
        assert rows[2]["cost"] == 1
        assert rows[2]["comfort"] is None
        assert rows[2]["time"] == 50.0

    def test_small_flush_threshold_keeps_all_rows(self, tmp_path: Path) -> None:
        log_path = tmp_path / "observations.parquet"
        with ObservationLogWriter(log_path, flush_threshold=2) as log:
            for i in range(5):
                log.write_observation("run_s0", 0, _observation(i))
        indices = pq.read_table(log_path).column("index").to_pylist()
        assert indices == [0, 1, 2, 3, 4]

    def test_empty_log_still_readable(self, tmp_path: Path) -> None:
        log_path = tmp_path / "nested" / "observations.parquet"
        with ObservationLogWriter(log_path):
            pass
        table = pq.read_table(log_path)
        assert table.num_rows == 0
        assert table.column_names == OBSERVATION_SCHEMA.names


class TestWriteRunSummaries:
    def test_round_trip(self, tmp_path: Path) -> None:
        row = {
            "schema_version": RUN_SUMMARY_SCHEMA_VERSION,
            "run_id": "run_s3",
            "seed": 3,
            "events": 120,
            "final_time": 49,
            "final_population": 7,
            "destination_hit": True,
            "best_cost": 8,
            "best_path_length": 8,
            "optimal_cost": 8,
        }
        path = tmp_path / "logs" / "run_summary.parquet"
        write_run_summaries([row], path)
        table = pq.read_table(path)
        assert table.column_names == RUN_SUMMARY_SCHEMA.names
        assert table.to_pylist() == [row]
