"""Tests for gridpath.io.report module."""

from __future__ import annotations

from gridpath.domain.grid import Coordinate
from gridpath.io.input_file import parse_parameter_text
from gridpath.io.report import (
    format_best_fit,
    format_observation,
    format_parameters,
    format_path,
)
from gridpath.simulation.engine import BestFit, Observation

PATH = (Coordinate(1, 1), Coordinate(1, 2), Coordinate(2, 2))


def _observation(**overrides: object) -> Observation:
    fields: dict[str, object] = {
        "index": 3,
        "time": 7.5,
        "events": 42,
        "population_size": 9,
        "destination_hit": False,
        "best_path": PATH,
        "cost": None,
        "comfort": 0.1234567,
    }
    fields.update(overrides)
    return Observation(**fields)  # type: ignore[arg-type]


class TestFormatPath:
    def test_bracketed_coordinates(self) -> None:
        assert format_path(PATH) == "[(1,1),(1,2),(2,2)]"

    def test_empty(self) -> None:
        assert format_path(()) == "[]"


class TestFormatParameters:
    def test_echo_with_zones_and_obstacles(self) -> None:
        text = (
            "5 5 1 1 5 5 1 2 50 3 20 3 10.9 1.5 2\n"
            "special cost zones:\n"
            "2 2 4 4 5\n"
            "obstacles:\n"
            "3 3\n"
            "1 5\n"
        )
        assert format_parameters(parse_parameter_text(text)) == (
            "5 5 1 1 5 5 1 2 50 3 20 3 10 1 2\n"
            "special cost zones:\n"
            "2 2 4 4 5\n"
            "obstacles:\n"
            "3 3\n"
            "1 5\n"
        )

    def test_sections_omitted_when_empty(self) -> None:
        config = parse_parameter_text("4 4 1 1 4 4 0 0 10 1 5 1 3 1 1\n")
        assert format_parameters(config) == "4 4 1 1 4 4 0 0 10 1 5 1 3 1 1\n"


class TestFormatObservation:
    def test_comfort_when_not_hit(self) -> None:
        assert format_observation(_observation()) == (
            "Observation 3:\n"
            "\tPresent time: 7.5\n"
            "\tNumber of realized events: 42\n"
            "\tPopulation size: 9\n"
            "\tFinal point has been hit: no\n"
            "\tPath of the best fit individual: [(1,1),(1,2),(2,2)]\n"
            "\tCost/Comfort: 0.123457\n"
        )

    def test_cost_when_hit(self) -> None:
        text = format_observation(
            _observation(time=10.0, destination_hit=True, cost=12, comfort=None)
        )
        assert "\tPresent time: 10\n" in text
        assert "\tFinal point has been hit: yes\n" in text
        assert text.endswith("\tCost/Comfort: 12\n")

    def test_no_best_fit(self) -> None:
        text = format_observation(_observation(best_path=(), comfort=None))
        assert "\tPath of the best fit individual: []\n" in text
        assert text.endswith("\tCost/Comfort: 0\n")


class TestFormatBestFit:
    def test_line(self) -> None:
        best = BestFit(path=PATH, cost=2, destination_hit=False)
        assert format_best_fit(best) == "Best fit individual: [(1,1),(1,2),(2,2)] with cost 2"
