"""Command-line entry point that writes the game reports."""

from __future__ import annotations

import argparse
import io
import random
import sys
from pathlib import Path

from . import bimatrix, continuous, cooperative, influence
from .brown_robinson import brown_robinson_table
from .formatting import format_matrix, format_vector
from .game import solve_game
from .linalg import solve_by_inverse
from .maxmin import max_min, min_max

__all__ = ["main"]

_LP_MATRIX = (
    (16.0, 3.0, 14.0, 4.0, 8.0),
    (0.0, 6.0, 17.0, 0.0, 12.0),
    (10.0, 3.0, 4.0, 16.0, 2.0),
    (2.0, 10.0, 9.0, 11.0, 19.0),
)

_ITERATIVE_MATRIX = (
    (17.0, 4.0, 9.0),
    (0.0, 16.0, 9.0),
    (12.0, 2.0, 19.0),
)


def _simplex_report(args: argparse.Namespace) -> str:
    out = io.StringIO()
    out.write("Matrix game:\n")
    out.write(format_matrix(_LP_MATRIX))
    out.write(f"\ndata min_max:  {min_max(_LP_MATRIX).value:.2f}\n")
    out.write(f"\ndata max_min:  {max_min(_LP_MATRIX, 0).value:.2f}\n")
    solution = solve_game(_LP_MATRIX, out)
    out.write(f"\ndata F1:   {solution.first_value:.3f}\n")
    out.write(f"\ndata F2:   {solution.second_value:.3f}\n")
    out.write(format_vector("P", solution.p))
    out.write(format_vector("Q", solution.q))
    return out.getvalue()


def _iterative_report(args: argparse.Namespace) -> str:
    out = io.StringIO()
    matrix = _ITERATIVE_MATRIX
    out.write(f"min max (options):    {min_max(matrix).value:g}\n")
    out.write(f"max min (options):    {max_min(matrix, 0).value:g}\n")
    out.write("\n")
    result = brown_robinson_table(matrix, out, 0.1)
    out.write("\n[Braun Robinson]\n")
    out.write(
        f"F1:    {result.upper:.3f}\n"
        f"F2:   {result.lower:.3f}\n"
        f"Fsr:  {result.value:.3f}\n"
    )
    out.write(format_vector("P", result.p))
    out.write(format_vector("Q", result.q))
    out.write("\n[analytics (inverse matrix)]\n")
    solution = solve_by_inverse(matrix)
    out.write(f"v: {solution.value:.3f}\n")
    out.write(format_vector("P", solution.p))
    out.write(format_vector("Q", solution.q))
    return out.getvalue()


def _continuous_report(args: argparse.Namespace) -> str:
    out = io.StringIO()
    continuous.write_report(continuous.QuadraticKernel(), out)
    return out.getvalue()


def _bimatrix_report(args: argparse.Namespace) -> str:
    out = io.StringIO()
    rng = random.Random(args.seed) if args.seed is not None else None
    bimatrix.write_report(out, rng)
    return out.getvalue()


def _section(title: str, text: str) -> str:
    if text and not text.endswith("\n"):
        text += "\n"
    return f"\n[{title}]\n{text}"


def _cooperative_report(args: argparse.Namespace) -> str:
    main_out, superadditivity, convexity = io.StringIO(), io.StringIO(), io.StringIO()
    cooperative.write_reports(
        cooperative.CooperativeGame(), main_out, superadditivity, convexity
    )
    return (
        _section("superadditivity", superadditivity.getvalue())
        + _section("convexity", convexity.getvalue())
        + _section("shapley", main_out.getvalue())
    )


def _influence_report(args: argparse.Namespace) -> str:
    out = io.StringIO()
    influence.write_report(out, 43 if args.seed is None else args.seed)
    return out.getvalue()


def _parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "-o", "--output", help="also write the report to this file"
    )
    seeded = argparse.ArgumentParser(add_help=False)
    seeded.add_argument("--seed", type=int, help="seed for the random numbers")

    parser = argparse.ArgumentParser(
        prog="matrixgames", description="Solve game-theory problems and print reports."
    )
    commands = parser.add_subparsers(dest="command", required=True)
    for name, report, parents, summary in (
        ("simplex", _simplex_report, [common], "matrix game by linear programming"),
        ("brown-robinson", _iterative_report, [common],
         "matrix game by fictitious play and the inverse matrix"),
        ("continuous", _continuous_report, [common], "convex-concave game on a grid"),
        ("bimatrix", _bimatrix_report, [common, seeded], "Pareto and Nash solutions"),
        ("cooperative", _cooperative_report, [common], "Shapley vector and checks"),
        ("influence", _influence_report, [common, seeded], "opinion influence game"),
    ):
        command = commands.add_parser(name, parents=parents, help=summary)
        command.set_defaults(report=report)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the chosen report, print it and optionally save it to a file."""
    args = _parser().parse_args(argv)
    try:
        text = args.report(args)
    except (ValueError, ArithmeticError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    if args.output:
        Path(args.output).write_text(text, encoding="utf-8")
    sys.stdout.write(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())