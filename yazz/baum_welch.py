"""Baum-Welch training of hidden Markov models."""

import math
from collections.abc import Mapping, Sequence

from .algorithm import observation_probability, observations_map
from .config import DEBUG_ENABLED
from .forward_backward import backward, forward
from .hmm import HmModel
from .printer import format_matrix, format_matrix_3d, format_vector

ITER_LIMIT = 50
CONVERGENCE_EPSILON = 1e-3


class ConvergenceError(RuntimeError):
    """Raised when training does not converge within the iteration limit."""


def _divide(numerator: float, denominator: float) -> float:
    if denominator == 0:
        return math.nan if numerator == 0 else math.copysign(math.inf, numerator)
    return numerator / denominator


def _gamma(a: list[list[float]], b: list[list[float]]) -> list[list[float]]:
    steps = len(a[0])
    totals = [sum(a_row[t] * b_row[t] for a_row, b_row in zip(a, b)) for t in range(steps)]
    gamma = [
        [_divide(a_row[t] * b_row[t], totals[t]) for t in range(steps)]
        for a_row, b_row in zip(a, b)
    ]
    if DEBUG_ENABLED:
        print("Y matrix is:\n" + format_matrix(gamma))
    return gamma


def _xi(
    transitions: Sequence[Sequence[float]],
    emissions: Sequence[Sequence[float]],
    sequence: Sequence[str],
    observ_map: Mapping[str, int],
    a: list[list[float]],
    b: list[list[float]],
) -> list[list[list[float]]]:
    states = range(len(transitions))
    xi = [[[] for _ in states] for _ in states]
    for t, observation in enumerate(sequence[1:]):
        probabilities = [
            observation_probability(observation, l, emissions, observ_map)
            for l in states
        ]
        terms = [
            [a[i][t] * transitions[i][j] * b[j][t + 1] * probabilities[j] for j in states]
            for i in states
        ]
        total = sum(sum(row) for row in terms)
        for i in states:
            for j in states:
                xi[i][j].append(_divide(terms[i][j], total))
    if DEBUG_ENABLED:
        print("E matrix is:\n" + format_matrix_3d(xi))
    return xi


def _update_model(
    model: HmModel,
    sequence: Sequence[str],
    gamma: list[list[float]],
    xi: list[list[list[float]]],
) -> float:
    state_cnt = model.state_cnt
    observation_cnt = model.observation_cnt

    new_initial = [row[0] for row in gamma]
    conv_initial = sum(
        abs(new - old) for new, old in zip(new_initial, model.initial_dst)
    ) / state_cnt
    model.initial_dst = new_initial
    if DEBUG_ENABLED:
        print("Initial distributions is:\n" + format_vector(new_initial))

    new_transitions = []
    conv_transitions = 0.0
    for i in range(state_cnt):
        sum_y = sum(gamma[i][:-1])
        row = []
        for j in range(state_cnt):
            value = _divide(sum(xi[i][j]), sum_y)
            conv_transitions += abs(value - model.transitions[i][j])
            row.append(value)
        new_transitions.append(row)
    conv_transitions /= state_cnt * state_cnt
    model.transitions = new_transitions
    if DEBUG_ENABLED:
        print("Transition matrix is:\n" + format_matrix(new_transitions))

    new_emissions = []
    conv_emissions = 0.0
    for i in range(state_cnt):
        sum_y = sum(gamma[i])
        row = []
        for j, symbol in enumerate(model.observations):
            sum_yo = sum(
                weight for weight, observed in zip(gamma[i], sequence)
                if observed == symbol
            )
            value = _divide(sum_yo, sum_y)
            conv_emissions += abs(value - model.emissions[i][j])
            row.append(value)
        new_emissions.append(row)
    conv_emissions /= state_cnt * observation_cnt
    model.emissions = new_emissions
    if DEBUG_ENABLED:
        print("Emission matrix is:\n" + format_matrix(new_emissions))

    return (conv_initial + conv_transitions + conv_emissions) / 3.0


def perform(model: HmModel, sequence: Sequence[str]) -> int:
    """Train ``model`` in place on ``sequence``; return the number of iterations."""
    if not sequence:
        raise ValueError("sequence must not be empty")
    sequence = list(sequence)
    observ_map = observations_map(sequence, model.observations)

    iterations = 0
    while True:
        a = forward(model.initial_dst, model.transitions, model.emissions,
                    sequence, observ_map)
        b = backward(model.transitions, model.emissions, sequence, observ_map)
        gamma = _gamma(a, b)
        xi = _xi(model.transitions, model.emissions, sequence, observ_map, a, b)
        convergence = _update_model(model, sequence, gamma, xi)
        if DEBUG_ENABLED:
            print(f"Total convergence: {convergence}\n")
        iterations += 1
        if not (convergence > CONVERGENCE_EPSILON and iterations < ITER_LIMIT):
            break

    if iterations >= ITER_LIMIT:
        raise ConvergenceError(
            f"Baum-Welch did not converge within {ITER_LIMIT} iterations"
        )
    return iterations