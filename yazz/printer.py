"""Plain-text rendering of vectors and matrices."""

from collections.abc import Iterable, Sequence


def _format_value(value: object) -> str:
    if isinstance(value, float):
        return format(value, "g")
    return str(value)


def format_vector(values: Iterable[object]) -> str:
    """Render values as ``[a, b, c]``."""
    return "[" + ", ".join(_format_value(value) for value in values) + "]"


def format_matrix(matrix: Iterable[Sequence[object]]) -> str:
    """Render a matrix with each value followed by a tab, one row per line."""
    return "".join(
        "".join(_format_value(value) + "\t" for value in row) + "\n" for row in matrix
    )


def format_matrix_3d(matrix: Iterable[Iterable[Sequence[object]]]) -> str:
    """Render a 3-D matrix as comma-separated lines, blocks split by blank lines."""
    return "".join(
        "".join(", ".join(_format_value(v) for v in line) + "\n" for line in block)
        + "\n"
        for block in matrix
    )