"""Text layouts for matrices, simplex tables and strategy vectors."""

from __future__ import annotations

from collections.abc import Sequence

__all__ = ["format_matrix", "format_simplex_table", "format_vector"]


def format_matrix(matrix: Sequence[Sequence[float]]) -> str:
    """Render a matrix row by row, each entry fixed to 2 decimals in 7 columns."""
    return "".join(
        "".join(f"{value:7.2f}" for value in row) + "\n" for row in matrix
    )


def format_simplex_table(
    table: Sequence[Sequence[float]],
    basis: Sequence[int],
    free: Sequence[int],
) -> str:
    """Render a simplex table with its basic and free variable labels.

    ``table`` has one row per basic variable followed by the objective row;
    its first column holds the right-hand sides and the rest belong to the
    free variables. Variable numbers are zero-based and shown one-based.
    """
    if len(table) != len(basis) + 1:
        raise ValueError("table must have one row per basic variable plus the objective row")
    if any(len(row) != len(free) + 1 for row in table):
        raise ValueError("table rows must have one column per free variable plus the right-hand side")

    header = " ".rjust(2) + "Si0".rjust(8) + "".join(
        f"x{variable + 1}".rjust(8) for variable in free
    )
    labels = [f"x{variable + 1}" for variable in basis] + ["F"]
    body = [
        label.rjust(2) + "".join(f"{value:8.3f}" for value in row)
        for label, row in zip(labels, table)
    ]
    return "\nsimplex table:\n" + "\n".join([header, *body]) + "\n"


def format_vector(
    label: str,
    values: Sequence[float],
    digits: int = 3,
    fixed: bool = True,
) -> str:
    """Render ``label: v1 v2 ...`` with a trailing space and newline.

    With ``fixed`` each value has ``digits`` decimals; otherwise ``digits``
    significant digits in general notation.
    """
    spec = f".{digits}f" if fixed else f".{digits}g"
    return f"{label}: " + "".join(f"{value:{spec}} " for value in values) + "\n"