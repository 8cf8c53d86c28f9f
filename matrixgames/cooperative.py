"""Cooperative games: superadditivity, convexity and the Shapley vector."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from math import factorial
from typing import TextIO

__all__ = [
    "DEFAULT_VALUES",
    "Violation",
    "CooperativeGame",
    "coalition_members",
    "write_reports",
]

# Characteristic function of the four-player game; the index in binary gives
# the coalition, bit 0 standing for player 1.
DEFAULT_VALUES: tuple[float, ...] = (0, 1, 1, 4, 3, 4, 4, 9, 3, 6, 4, 9, 7, 8, 8, 11)

# Individual rationality compares each share with coalitions 1 .. 10 in turn.
_RATIONALITY_CYCLE = 10


def coalition_members(coalition: int, players: int = 4) -> tuple[int, ...]:
    """Return the one-based numbers of the players in a bitmask coalition."""
    if players < 1:
        raise ValueError("players must be positive")
    if not 0 <= coalition < 1 << players:
        raise ValueError(f"coalition {coalition} does not fit {players} players")
    return tuple(p for p in range(1, players + 1) if coalition >> (p - 1) & 1)


@dataclass(frozen=True)
class Violation:
    """A pair of coalitions for which a condition on the game fails."""

    first: int
    second: int

    @property
    def intersection(self) -> int:
        return self.first & self.second

    @property
    def union(self) -> int:
        return self.first | self.second


@dataclass(frozen=True)
class CooperativeGame:
    """A characteristic function indexed by bitmask coalitions."""

    values: tuple[float, ...] = DEFAULT_VALUES

    def __post_init__(self) -> None:
        values = tuple(self.values)
        size = len(values)
        if size < 2 or size & (size - 1):
            raise ValueError("need one value per coalition: a power of two, at least 2")
        object.__setattr__(self, "values", values)

    @property
    def players(self) -> int:
        return len(self.values).bit_length() - 1

    @property
    def grand_coalition(self) -> int:
        return len(self.values) - 1

    def _pairs(self) -> Iterator[tuple[int, int]]:
        size = len(self.values)
        for first in range(size - 1):
            for second in range(first + 1, size):
                yield first, second

    def _superadditivity_checks(self) -> Iterator[tuple[Violation, bool]]:
        v = self.values
        for first, second in self._pairs():
            if first & second:
                continue
            pair = Violation(first, second)
            yield pair, v[pair.union] >= v[first] + v[second]

    def _convexity_checks(self) -> Iterator[tuple[Violation, bool]]:
        v = self.values
        for first, second in self._pairs():
            pair = Violation(first, second)
            yield pair, v[pair.intersection] + v[pair.union] >= v[first] + v[second]

    def superadditivity_violation(self) -> Violation | None:
        """Return the first disjoint pair with v(S | T) < v(S) + v(T), if any."""
        return next((pair for pair, ok in self._superadditivity_checks() if not ok), None)

    def convexity_violation(self) -> Violation | None:
        """Return the first pair with v(S & T) + v(S | T) < v(S) + v(T), if any."""
        return next((pair for pair, ok in self._convexity_checks() if not ok), None)

    def shapley_vector(self) -> tuple[float, ...]:
        """Return each player's Shapley value."""
        n = self.players
        total = factorial(n)
        v = self.values
        shares = []
        for player in range(1, n + 1):
            bit = 1 << (player - 1)
            weighted = sum(
                factorial(size - 1)
                * factorial(n - size)
                * (v[coalition] - v[coalition & ~bit])
                for coalition in range(1, len(v))
                if coalition & bit
                for size in (coalition.bit_count(),)
            )
            shares.append(weighted / total)
        return tuple(shares)

    def is_group_rational(self, shapley: Sequence[float]) -> bool:
        """Return True if the shares add up exactly to the grand coalition's value."""
        if len(shapley) != self.players:
            raise ValueError("need one share per player")
        return sum(shapley) == self.values[-1]

    def _rationality_steps(
        self, shapley: Sequence[float]
    ) -> Iterator[tuple[int, bool, int]]:
        """Yield (player, passed, coalition) while searching each player's check."""
        cycle = list(range(1, min(_RATIONALITY_CYCLE, len(self.values) - 1) + 1))
        for player, share in enumerate(shapley, 1):
            for coalition in cycle:
                passed = share > self.values[coalition]
                yield player, passed, coalition
                if passed:
                    break
            else:
                raise ArithmeticError(
                    f"player {player}'s share never exceeds a coalition value"
                )


def _number(value: float) -> str:
    return str(value) if isinstance(value, int) else f"{value:g}"


def _members(coalition: int, players: int) -> str:
    return "".join(f"{m} " for m in coalition_members(coalition, players))


def _superadditivity_line(game: CooperativeGame, pair: Violation, relation: str) -> str:
    v, n = game.values, game.players
    return (
        f"v({{ {_members(pair.first, n)}}} OR {{ {_members(pair.second, n)}}} = "
        f"{{ {_members(pair.union, n)}}}) = {_number(v[pair.union])} {relation} "
        f"v({{ {_members(pair.first, n)}}}) = {_number(v[pair.first])} + "
        f"v({{ {_members(pair.second, n)}}}) = {_number(v[pair.second])}"
    )


def _convexity_line(game: CooperativeGame, pair: Violation, relation: str) -> str:
    v, n = game.values, game.players
    first, second = _members(pair.first, n), _members(pair.second, n)
    return (
        f"v({{ {first}}} OR {{ {second}}} = {{ {_members(pair.union, n)}}}) = "
        f"{_number(v[pair.union])}"
        f" + v({{ {first}}} SUM {{ {second}}} = {{ {_members(pair.intersection, n)}}}) = "
        f"{_number(v[pair.intersection])}"
        f" {relation} v({{ {first}}}) = {_number(v[pair.first])} + "
        f"v({{ {second}}}) = {_number(v[pair.second])}"
    )


def _write_check(
    out: TextIO,
    checks: Iterator[tuple[Violation, bool]],
    line,
    name: str,
) -> None:
    for pair, ok in checks:
        if not ok:
            out.write(f"The game is not: {name}\ncondition violation found\n")
            out.write(line(pair, "<"))
            return
        out.write(line(pair, ">=") + "\n")
    out.write(f"The game is: {name}")


def write_reports(
    game: CooperativeGame,
    main_out: TextIO,
    superadditivity_out: TextIO,
    convexity_out: TextIO,
) -> None:
    """Write the superadditivity, convexity and Shapley-vector reports."""
    _write_check(
        superadditivity_out,
        game._superadditivity_checks(),
        lambda pair, rel: _superadditivity_line(game, pair, rel),
        "SUPERADDITIVITY",
    )
    superadditivity_out.write("\n\n")

    _write_check(
        convexity_out,
        game._convexity_checks(),
        lambda pair, rel: _convexity_line(game, pair, rel),
        "BULGE",
    )
    convexity_out.write("\n")

    shapley = game.shapley_vector()
    main_out.write("\nElements of the Shapley vector X: ")
    main_out.write("".join(f"{x:g} " for x in shapley))
    main_out.write(f"\nThe sum of the elements of the Shapley vector:{sum(shapley):g}")
    main_out.write(
        "\nThe value of the characteristic function for the entire set of players: "
        f"{_number(game.values[-1])}\n"
    )
    verdict = "DONE" if game.is_group_rational(shapley) else "NOT DONE"
    main_out.write(f"The condition of group rationalization: {verdict}\n")

    passed = True
    for player, passed, coalition in game._rationality_steps(shapley):
        if passed:
            main_out.write(
                f"\nThe condition of individual rationalization [{player} player]:DONE"
                "\nThe value of the element of the Shapley vector: "
                f"{shapley[player - 1]:g}"
                "\nThe meaning of the character of the function: "
                f"{_number(game.values[coalition])}\n"
            )
        else:
            main_out.write(
                f"\nThe condition of individual rationalization [{player} player]:NOT DONE"
                "\nThe value of the element of the Shapley vector: nullptr"
                "\nThe meaning of the character of the function: nullptr\n"
                "SEARCHING FOR THE BEST...\n"
            )
    verdict = "DONE" if passed else "NOT DONE"
    main_out.write(f"The condition of individual rationalization: {verdict}")