"""Shared helpers for hidden Markov model algorithms."""

from collections.abc import Iterable, Mapping, Sequence

INVALID_INDEX = -1
DEFAULT_PROBABILITY = 1e-4


def observations_map(
    sequence: Iterable[str], observations: Sequence[str]
) -> dict[str, int]:
    """Map each observed symbol to its index in ``observations`` (-1 if unknown)."""
    index = {}
    for position, value in enumerate(observations):
        index.setdefault(value, position)
    return {value: index.get(value, INVALID_INDEX) for value in sequence}


def observation_probability(
    observation: str,
    state_id: int,
    emissions: Sequence[Sequence[float]],
    observ_map: Mapping[str, int],
) -> float:
    """Emission probability of ``observation`` in a state; unknown symbols get a small default."""
    if observation not in observ_map:
        raise KeyError(f"Observation not found: {observation}")
    index = observ_map[observation]
    if index >= 0:
        return emissions[state_id][index]
    return DEFAULT_PROBABILITY