"""Solvers for matrix, bimatrix, continuous, cooperative and influence games."""

__version__ = "0.1.0"

__all__ = [
    "bimatrix",
    "brown_robinson",
    "cli",
    "continuous",
    "cooperative",
    "formatting",
    "game",
    "influence",
    "linalg",
    "maxmin",
    "simplex",
]