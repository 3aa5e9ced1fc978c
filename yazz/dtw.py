"""Dynamic time warping distance between sequences."""

import math
from collections.abc import Sequence


def calc_distance(seq1: Sequence[float], seq2: Sequence[float]) -> float:
    """Distance between two sequences of numbers."""
    diff = [[abs(a - b) for b in seq2] for a in seq1]
    return _find_distance(diff)


def calc_distance_vector(
    seq1: Sequence[float], seq2: Sequence[float], vector_size: int
) -> float:
    """Distance between two flat sequences of ``vector_size``-long vectors."""
    if vector_size <= 0:
        raise ValueError("vector_size must be positive")
    vectors1 = _split(seq1, vector_size)
    vectors2 = _split(seq2, vector_size)
    diff = [
        [math.sqrt(sum((x - y) ** 2 for x, y in zip(a, b))) for b in vectors2]
        for a in vectors1
    ]
    return _find_distance(diff)


def _split(values: Sequence[float], size: int) -> list[Sequence[float]]:
    count = len(values) // size
    return [values[n * size:(n + 1) * size] for n in range(count)]


def _predecessor(path: list[list[float]], i: int, j: int) -> tuple[int, int]:
    """The cheapest neighbour of an inner cell, ties going towards the left."""
    diagonal, up, left = path[i - 1][j - 1], path[i - 1][j], path[i][j - 1]
    if diagonal < up:
        return (i - 1, j - 1) if diagonal < left else (i, j - 1)
    return (i - 1, j) if up < left else (i, j - 1)


def _find_distance(diff: list[list[float]]) -> float:
    rows = len(diff)
    cols = len(diff[0]) if rows else 0
    if rows == 0 or cols == 0:
        raise ValueError("sequences must not be empty")

    path = [[0.0] * cols for _ in range(rows)]
    path[0][0] = diff[0][0]
    for i in range(1, rows):
        path[i][0] = diff[i][0] + path[i - 1][0]
    for j in range(1, cols):
        path[0][j] = diff[0][j] + path[0][j - 1]
    for i in range(1, rows):
        for j in range(1, cols):
            pi, pj = _predecessor(path, i, j)
            path[i][j] = diff[i][j] + path[pi][pj]

    i, j = rows - 1, cols - 1
    warp = [path[i][j]]
    while i > 0 or j > 0:
        if i > 0 and j > 0:
            i, j = _predecessor(path, i, j)
        elif i == 0:
            j -= 1
        else:
            i -= 1
        warp.append(path[i][j])

    return sum(warp) / len(warp)