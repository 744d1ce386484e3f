from gridpath.config.constants import (
    COMFORT_CEIL,
    COMFORT_FLOOR,
    DEFAULT_EDGE_COST,
    EPIDEMIC_GUARANTEED_SURVIVORS,
    EPIDEMIC_MIN_ALIVE,
    FLUSH_THRESHOLD,
    INHERITED_PATH_FRACTION,
    OBSERVATION_INTERVALS,
    RANDOM_ZONE_MAX_COST,
    RANDOM_ZONE_MIN_COST,
)


def test_observation_intervals_is_twenty() -> None:
    assert OBSERVATION_INTERVALS == 20


def test_comfort_clamps_are_strictly_inside_unit_interval() -> None:
    assert 0.0 < COMFORT_FLOOR < COMFORT_CEIL < 1.0


def test_default_edge_cost_is_one() -> None:
    assert DEFAULT_EDGE_COST == 1


def test_epidemic_threshold_exceeds_guaranteed_survivors() -> None:
    assert EPIDEMIC_MIN_ALIVE == EPIDEMIC_GUARANTEED_SURVIVORS + 1


def test_inherited_fraction_in_unit_interval() -> None:
    assert 0.0 < INHERITED_PATH_FRACTION < 1.0


def test_random_zone_cost_range_is_inflating() -> None:
    assert DEFAULT_EDGE_COST < RANDOM_ZONE_MIN_COST <= RANDOM_ZONE_MAX_COST


def test_flush_threshold_is_large() -> None:
    assert isinstance(FLUSH_THRESHOLD, int) and FLUSH_THRESHOLD >= 1024
