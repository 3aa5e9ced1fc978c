"""Forward-backward algorithm for hidden Markov models."""

from collections.abc import Mapping, Sequence

from .algorithm import observation_probability, observations_map
from .config import DEBUG_ENABLED
from .hmm import HmModel
from .printer import format_matrix


def forward(
    initial_dst: Sequence[float],
    transitions: Sequence[Sequence[float]],
    emissions: Sequence[Sequence[float]],
    sequence: Sequence[str],
    observ_map: Mapping[str, int],
) -> list[list[float]]:
    """Forward variables ``a[state][t]``."""
    if not sequence:
        raise ValueError("sequence must not be empty")
    states = range(len(initial_dst))
    columns = [[
        initial_dst[i] * observation_probability(sequence[0], i, emissions, observ_map)
        for i in states
    ]]
    for observation in sequence[1:]:
        previous = columns[-1]
        columns.append([
            observation_probability(observation, j, emissions, observ_map)
            * sum(previous[k] * transitions[k][j] for k in states)
            for j in states
        ])
    a = [list(row) for row in zip(*columns)]
    if DEBUG_ENABLED:
        print("A matrix is:\n" + format_matrix(a))
    return a


def backward(
    transitions: Sequence[Sequence[float]],
    emissions: Sequence[Sequence[float]],
    sequence: Sequence[str],
    observ_map: Mapping[str, int],
) -> list[list[float]]:
    """Backward variables ``b[state][t]``."""
    if not sequence:
        raise ValueError("sequence must not be empty")
    states = range(len(transitions))
    columns = [[1.0 for _ in states]]
    for observation in reversed(sequence[1:]):
        following = columns[-1]
        probabilities = [
            observation_probability(observation, k, emissions, observ_map)
            for k in states
        ]
        columns.append([
            sum(following[k] * transitions[j][k] * probabilities[k] for k in states)
            for j in states
        ])
    columns.reverse()
    b = [list(row) for row in zip(*columns)]
    if DEBUG_ENABLED:
        print("B matrix is:\n" + format_matrix(b))
    return b


def calc_possibility(model: HmModel, sequence: Sequence[str]) -> float:
    """Probability that ``model`` produces ``sequence``."""
    if not sequence:
        raise ValueError("sequence must not be empty")
    observ_map = observations_map(sequence, model.observations)
    a = forward(model.initial_dst, model.transitions, model.emissions,
                sequence, observ_map)
    probability = sum(row[-1] for row in a)
    if DEBUG_ENABLED:
        print(f"Probability is: {probability}\n")
    return probability