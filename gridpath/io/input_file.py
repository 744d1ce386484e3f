"""Parser for the whitespace-separated simulation parameter file.

Layout::

    n m xi yi xf yf n_zones n_obstacles tau nu nu_max k mu delta rho
    special cost zones:          (only when n_zones > 0)
    x1 y1 x2 y2 cost             (n_zones lines)
    obstacles:                   (only when n_obstacles > 0)
    x y                          (n_obstacles lines)

Blank lines are ignored. Every error is a ``ValueError`` naming the line.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from gridpath.config.types import SimulationConfig
from gridpath.domain.grid import Coordinate, CostZone

HEADER_FIELD_COUNT = 15
ZONES_HEADER = "special cost zones:"
OBSTACLES_HEADER = "obstacles:"


@dataclass(frozen=True)
class ScalarParameters:
    """The fifteen scalar values shared by file and random-scenario input."""

    rows: int
    cols: int
    start: Coordinate
    destination: Coordinate
    n_zones: int
    n_obstacles: int
    horizon: int
    initial_population: int
    max_population: int
    comfort_exponent: int
    death_mean: float
    move_mean: float
    reproduce_mean: float

    def __post_init__(self) -> None:
        if self.n_zones < 0:
            raise ValueError("number of cost zones must be >= 0")
        if self.n_obstacles < 0:
            raise ValueError("number of obstacles must be >= 0")

    def to_config(
        self,
        cost_zones: tuple[CostZone, ...],
        obstacles: tuple[Coordinate, ...],
        epidemic_at_capacity: bool = False,
    ) -> SimulationConfig:
        return SimulationConfig(
            rows=self.rows,
            cols=self.cols,
            start=self.start,
            destination=self.destination,
            horizon=self.horizon,
            initial_population=self.initial_population,
            max_population=self.max_population,
            comfort_exponent=self.comfort_exponent,
            death_mean=self.death_mean,
            move_mean=self.move_mean,
            reproduce_mean=self.reproduce_mean,
            cost_zones=cost_zones,
            obstacles=obstacles,
            epidemic_at_capacity=epidemic_at_capacity,
        )


def parse_scalar_parameters(tokens: list[str]) -> ScalarParameters:
    """Parse the fifteen header tokens (integers, then three real means)."""
    if len(tokens) != HEADER_FIELD_COUNT:
        raise ValueError(f"expected {HEADER_FIELD_COUNT} parameters, got {len(tokens)}")
    try:
        ints = [int(token) for token in tokens[:12]]
        reals = [float(token) for token in tokens[12:]]
    except ValueError as exc:
        raise ValueError(f"malformed numeric parameter: {exc}") from exc
    n, m, xi, yi, xf, yf, n_zones, n_obstacles, tau, nu, nu_max, k = ints
    mu, delta, rho = reals
    return ScalarParameters(
        rows=n,
        cols=m,
        start=Coordinate(xi, yi),
        destination=Coordinate(xf, yf),
        n_zones=n_zones,
        n_obstacles=n_obstacles,
        horizon=tau,
        initial_population=nu,
        max_population=nu_max,
        comfort_exponent=k,
        death_mean=mu,
        move_mean=delta,
        reproduce_mean=rho,
    )


def _int_fields(line: str, expected: int, line_no: int, label: str) -> list[int]:
    parts = line.split()
    if len(parts) != expected:
        raise ValueError(f"line {line_no}: {label} needs {expected} integers, got {len(parts)}")
    try:
        return [int(part) for part in parts]
    except ValueError as exc:
        raise ValueError(f"line {line_no}: {label} must contain integers") from exc


def parse_parameter_text(text: str, epidemic_at_capacity: bool = False) -> SimulationConfig:
    """Parse parameter-file contents into a validated :class:`SimulationConfig`."""
    lines = [(no, line.strip()) for no, line in enumerate(text.splitlines(), start=1)]
    lines = [(no, line) for no, line in lines if line]
    if not lines:
        raise ValueError("parameter file is empty")
    cursor = iter(lines)

    first_no, first = next(cursor)
    try:
        scalars = parse_scalar_parameters(first.split())
    except ValueError as exc:
        raise ValueError(f"line {first_no}: {exc}") from exc

    def take(label: str) -> tuple[int, str]:
        try:
            return next(cursor)
        except StopIteration:
            raise ValueError(f"unexpected end of file while reading {label}") from None

    zones: list[CostZone] = []
    if scalars.n_zones > 0:
        no, header = take("cost zone header")
        if header.lower() != ZONES_HEADER:
            raise ValueError(f"line {no}: expected '{ZONES_HEADER}'")
        for _ in range(scalars.n_zones):
            no, line = take("cost zones")
            x1, y1, x2, y2, cost = _int_fields(line, 5, no, "cost zone")
            zones.append(CostZone(Coordinate(x1, y1), Coordinate(x2, y2), cost))

    obstacles: list[Coordinate] = []
    if scalars.n_obstacles > 0:
        no, header = take("obstacle header")
        if header.lower() != OBSTACLES_HEADER:
            raise ValueError(f"line {no}: expected '{OBSTACLES_HEADER}'")
        for _ in range(scalars.n_obstacles):
            no, line = take("obstacles")
            x, y = _int_fields(line, 2, no, "obstacle")
            obstacles.append(Coordinate(x, y))

    leftover = next(cursor, None)
    if leftover is not None:
        raise ValueError(f"line {leftover[0]}: unexpected trailing content")

    return scalars.to_config(tuple(zones), tuple(obstacles), epidemic_at_capacity)


def parse_parameter_file(path: Path, epidemic_at_capacity: bool = False) -> SimulationConfig:
    return parse_parameter_text(Path(path).read_text(), epidemic_at_capacity)
