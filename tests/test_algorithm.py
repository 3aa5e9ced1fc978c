import pytest

from yazz.algorithm import (
    DEFAULT_PROBABILITY,
    observation_probability,
    observations_map,
)


def test_map_marks_unknown_symbols():
    result = observations_map(["A", "C", "B", "A"], ["A", "B"])
    assert result == {"A": 0, "C": -1, "B": 1}


def test_probability_of_known_symbol():
    emissions = [[0.4, 0.6], [0.5, 0.5]]
    observ_map = observations_map(["B"], ["A", "B"])
    assert observation_probability("B", 0, emissions, observ_map) == 0.6


def test_probability_of_unknown_symbol():
    observ_map = observations_map(["?"], ["A", "B"])
    assert observation_probability("?", 1, [[1.0, 0.0], [0.0, 1.0]], observ_map) == (
        DEFAULT_PROBABILITY
    )


def test_missing_symbol_raises():
    with pytest.raises(KeyError):
        observation_probability("Z", 0, [[1.0]], {"A": 0})