"""CLI entrypoint for simulation runs.

Two input modes, as in the parameter-file format:

- ``-f FILE`` reads all parameters, zones and obstacles from a file;
- ``-r N M XI YI XF YF NZ NO TAU NU NUMAX K MU DELTA RHO`` takes the fifteen
  scalar parameters on the command line and draws zones and obstacles at
  random.

Run options (seed, seeds, output directory, epidemic, log level) may also
come from ``--config path/to/config.json``. CLI arguments override
config-file values; config-file values override built-in defaults.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from random import Random

from gridpath.config.types import BatchConfig, SimulationConfig
from gridpath.experiments.batch import run_logged, run_seed_batch
from gridpath.io.input_file import parse_parameter_file, parse_scalar_parameters
from gridpath.io.paths import observation_log_path
from gridpath.io.persistence import ObservationLogWriter
from gridpath.io.report import format_best_fit, format_observation, format_parameters
from gridpath.io.scenario import random_scenario
from gridpath.simulation.engine import Observation, Simulation, SimulationReport

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# CLI parsing helpers
# ---------------------------------------------------------------------------


def _parse_seed_list(raw_seeds: str) -> tuple[int, ...]:
    """Parse comma-delimited integer seeds."""
    parts = [part.strip() for part in raw_seeds.split(",") if part.strip()]
    if not parts:
        raise ValueError("seeds must not be empty")
    try:
        return tuple(int(part) for part in parts)
    except ValueError as exc:
        raise ValueError("seeds must be integers") from exc


def _build_config(
    args: argparse.Namespace,
    seed: int | None,
    epidemic_at_capacity: bool,
) -> SimulationConfig:
    if args.file is not None:
        return parse_parameter_file(args.file, epidemic_at_capacity=epidemic_at_capacity)
    scalars = parse_scalar_parameters(list(args.random))
    return random_scenario(scalars, Random(seed), epidemic_at_capacity=epidemic_at_capacity)


def _print_observation(observation: Observation) -> None:
    print(format_observation(observation))


def _run_single(
    config: SimulationConfig,
    seed: int | None,
    out_dir: Path | None,
) -> SimulationReport:
    print(format_parameters(config))
    if out_dir is None:
        report = Simulation(config, rng=Random(seed), sink=_print_observation).run()
    else:
        with ObservationLogWriter(observation_log_path(out_dir)) as log:
            report = run_logged(config, seed, log)
        for observation in report.observations:
            _print_observation(observation)
    print(format_best_fit(report.best_fit))
    return report


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for simulation runs."""
    parser = argparse.ArgumentParser(
        description="Run the discrete-event path-evolution simulation"
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("-f", "--file", type=Path, default=None, help="parameter file")
    source.add_argument(
        "-r",
        "--random",
        nargs=15,
        metavar="VALUE",
        default=None,
        help="n m xi yi xf yf n_zones n_obstacles tau nu nu_max k mu delta rho",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file for run options (CLI args override file values)",
    )
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument(
        "--seeds",
        type=str,
        default=None,
        help="comma-delimited seeds; runs a batch and writes Parquet/JSON summaries",
    )
    parser.add_argument("--out-dir", type=Path, default=None)
    parser.add_argument(
        "--epidemic-at-capacity", action=argparse.BooleanOptionalAction, default=None
    )
    parser.add_argument("--log-level", type=str, default=None)
    args = parser.parse_args(argv)

    file_cfg: dict[str, object] = {}
    if args.config is not None:
        try:
            file_cfg = json.loads(Path(args.config).read_text())
        except (OSError, json.JSONDecodeError) as exc:
            parser.error(f"cannot read config file: {exc}")

    def _get(cli_val: object, key: str, default: object) -> object:
        if cli_val is not None:
            return cli_val
        return file_cfg.get(key, default)

    log_level = str(_get(args.log_level, "log_level", "WARNING")).upper()
    if not isinstance(logging.getLevelName(log_level), int):
        parser.error(f"unknown log level: {log_level}")
    logging.basicConfig(level=log_level, stream=sys.stderr)

    raw_seed = _get(args.seed, "seed", None)
    seed = None if raw_seed is None else int(raw_seed)  # type: ignore[call-overload]
    raw_seeds = _get(args.seeds, "seeds", None)
    raw_out_dir = _get(args.out_dir, "out_dir", None)
    out_dir = None if raw_out_dir is None else Path(str(raw_out_dir))
    epidemic = bool(_get(args.epidemic_at_capacity, "epidemic_at_capacity", False))

    try:
        config = _build_config(args, seed, epidemic)
        if raw_seeds is not None:
            seeds = (
                _parse_seed_list(raw_seeds)
                if isinstance(raw_seeds, str)
                else tuple(int(s) for s in raw_seeds)  # type: ignore[attr-defined]
            )
            batch = BatchConfig(seeds=seeds, out_dir=out_dir or Path("data"))
    except (OSError, ValueError) as exc:
        parser.error(str(exc))

    if raw_seeds is None:
        _run_single(config, seed, out_dir)
        return

    rows = run_seed_batch(config, batch)
    summary = {
        "mode": "batch",
        "runs": len(rows),
        "destination_hits": sum(1 for row in rows if row["destination_hit"]),
        "out_dir": str(batch.out_dir),
    }
    print(json.dumps(summary, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
