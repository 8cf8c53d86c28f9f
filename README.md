# matrixgames

A small toolkit for classic problems of game theory and operations research,
written in plain Python with no runtime dependencies.

- **Zero-sum matrix games**
  - `matrixgames.maxmin`: lower and upper values in pure strategies
    (`max_min`, `min_max`, both returning an `Extremum` with the value and the
    row or column that attains it) and `min_element`.
  - `matrixgames.simplex`: a tableau simplex method that minimises
    `costs . x` under `constraints x <= bounds`, `x >= 0` (`simplex`, returning
    a `SimplexResult`; `SimplexError` when it cannot continue).
  - `matrixgames.game`: `solve_game` finds both players' mixed strategies
    through a pair of linear programs, for games with a positive value
    (`GameSolution`).
  - `matrixgames.linalg`: determinant, inverse, vector/matrix products and
    `solve_by_inverse`, the inverse-matrix solution of a square game whose
    optimal strategies use every row and column (`InverseSolution`).
  - `matrixgames.brown_robinson`: the iterative Brown–Robinson (fictitious
    play) method, either with a step-by-step table (`brown_robinson_table`)
    or starting from the maximin row with automatic shifting of negative
    payoffs (`brown_robinson`). Both return a `BrownRobinsonResult`.
- **Continuous convex–concave games** (`matrixgames.continuous`): a
  `QuadraticKernel` H(x, y) = a x² + b y² + c x y + d x + e y with its
  analytic stationary point, and grid approximations solved by saddle point
  or by fictitious play (`grid_matrix`, `solve_grid`, `GridSolution`).
- **Bimatrix games** (`matrixgames.bimatrix`): Pareto-optimal cells and pure
  Nash equilibria (`is_pareto_optimal`, `is_nash_equilibrium`, `pareto_set`,
  `nash_set`), random payoff matrices, and the completely mixed equilibrium of
  a square game (`mixed_equilibrium`, `MixedEquilibrium`). A cell with equal
  payoffs for both players is never reported as a Nash equilibrium.
- **Cooperative games** (`matrixgames.cooperative`): a `CooperativeGame` given
  by its characteristic function over bitmask coalitions, with
  superadditivity and convexity checks (returning the first failing pair as a
  `Violation`, or `None`), the Shapley vector and group rationality.
- **Information influence** (`matrixgames.influence`): random row-stochastic
  trust matrices, opinion dynamics until consensus (`converge`) and a game
  between two players' influence agents (`influence_step`,
  `play_influence_game`).
- `matrixgames.formatting`: the text layouts used in the reports.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

The `matrixgames` command writes one report per subcommand to standard
output:

```
matrixgames simplex
matrixgames brown-robinson
matrixgames continuous
matrixgames bimatrix --seed 1
matrixgames cooperative
matrixgames influence --seed 43
```

- `simplex`: a built-in 4×5 game, its pure-strategy bounds, both linear
  programs with every simplex table, the game values and strategies.
- `brown-robinson`: a built-in 3×3 game, its pure-strategy bounds, the
  Brown–Robinson iteration table (stopping at a gap of 0.1), the resulting
  estimates, then the inverse-matrix solution.
- `continuous`: the game with kernel
  H(x, y) = −15x² + 20/3·y² + 40xy − 12x − 24y, its analytic solution and the
  grid solutions for N = 2 … 32.
- `bimatrix`: Pareto and Nash solutions of random 10×10 and 2×2 games and of
  a fixed 2×2 game, with its mixed equilibrium. `--seed` makes the random
  matrices repeatable.
- `cooperative`: superadditivity, convexity, Shapley vector and rationality
  checks for a built-in four-player game, in three sections.
- `influence`: consensus over a random 10-person trust matrix and the
  influence game between agents 1, 2 and 3, 4. `--seed` defaults to 43.

Every subcommand takes `-o FILE` / `--output FILE` to save the report to a
file as well. When a computation fails (for example a singular matrix) the
command prints `error: ...` to standard error and exits with status 1.

## Library use

```python
import io

from matrixgames.maxmin import max_min, min_max
from matrixgames.game import solve_game
from matrixgames.brown_robinson import brown_robinson
from matrixgames.linalg import solve_by_inverse

matrix = [
    [17, 4, 9],
    [0, 16, 9],
    [12, 2, 19],
]

print(max_min(matrix), min_max(matrix))

log = io.StringIO()
solution = solve_game(matrix, log)   # the programs and simplex tables go to log
print(solution)

print(brown_robinson(matrix))
print(solve_by_inverse(matrix))
```

Cooperative games are described by the values of the characteristic function
indexed by coalition bit masks (player 1 is the lowest bit):

```python
from matrixgames.cooperative import CooperativeGame

game = CooperativeGame([0, 1, 1, 4, 3, 4, 4, 9, 3, 6, 4, 9, 7, 8, 8, 11])
print(game.superadditivity_violation())
print(game.convexity_violation())
print(game.shapley_vector())
```

Bimatrix games:

```python
from matrixgames.bimatrix import pareto_set, nash_set, mixed_equilibrium

first = [[4, 5], [0, 7]]
second = [[7, 2], [2, 3]]
print(pareto_set(first, second))
print(nash_set(first, second))
print(mixed_equilibrium(first, second))
```

## What it does not do

The command line only reports on its built-in games (and random ones); it
does not read matrices or characteristic functions from files or from the
command line. To solve your own games, call the library functions.