# dynprog

A small collection of classic dynamic-programming solvers, usable as a
library or from the command line. Counting results are reported modulo
1 000 000 007 (`MOD` in the modules).

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library

The solvers are grouped into three modules. Invalid arguments (negative
sums, empty grids, mismatched lengths and the like) raise `ValueError`.

### `dynprog.counting`

- `count_dice_combinations(n)` – ordered sequences of die throws (1 to 6)
  summing to `n`.
- `count_coin_combinations_ordered(coins, target)` – ordered ways to make
  `target` from the given positive coin values.
- `count_coin_combinations_unordered(coins, target)` – distinct multisets of
  coins summing to `target`; with no coins the answer is 0.
- `minimize_coins(coins, target)` – fewest coins summing to `target`, or
  `None` when it cannot be done.
- `removing_digits_steps(n)` – fewest steps to reach zero, each step
  subtracting one of the current number's non-zero digits.
- `count_towers(n)` – ways to build a tower of height `n` (at least 1) and
  width 2.
- `count_array_descriptions(values, upper)` – ways to fill the zeros in
  `values` with numbers from 1 to `upper` so that neighbours differ by at
  most one.

```python
from dynprog.counting import count_dice_combinations, minimize_coins, count_towers

count_dice_combinations(3)          # 4
minimize_coins([1, 5, 7], 11)       # 3
minimize_coins([2], 3)              # None
count_towers(2)                     # 8
```

### `dynprog.grids`

Grids are given as a sequence of equal-length strings.

- `count_grid_paths(grid)` – paths from the top-left to the bottom-right cell
  moving only right or down through free cells (`.`); any other character is
  a trap.
- `minimal_grid_path(grid)` – the lexicographically smallest string read along
  a right/down path through a letter grid.
- `rectangle_cuts(a, b)` – fewest straight cuts that divide an `a × b`
  rectangle into squares.

```python
from dynprog.grids import count_grid_paths, rectangle_cuts

count_grid_paths(["..", ".."])      # 2
rectangle_cuts(3, 5)                # 3
```

### `dynprog.sequences`

- `edit_distance(first, second)` – Levenshtein distance between two sequences.
- `longest_common_subsequence(a, b)` – one longest common subsequence, as a
  list.
- `max_pages(prices, pages, budget)` – 0/1 knapsack: the most pages that can
  be bought within `budget`.
- `money_sums(coins)` – every distinct positive sum that some subset of the
  coins adds up to, in increasing order.

```python
from dynprog.sequences import edit_distance, max_pages

edit_distance("LOVE", "MOVIE")                  # 2
max_pages([4, 8, 5, 3], [5, 12, 8, 1], 10)      # 13
```

## Command line

Installing the package provides a `dynprog` command. It takes a problem name,
reads that problem's whitespace-separated input from standard input (or from
a file given with `-i`/`--input`) and prints the answer. Errors in the input
are reported on standard error with exit status 1.

```
dynprog --help
echo "3 11  1 5 7" | dynprog minimize-coins
```

Problems and their input:

| Problem             | Input                                   | Output                     |
|---------------------|-----------------------------------------|----------------------------|
| `dice`              | `n`                                     | count                      |
| `coins-ordered`     | `n target` then `n` coins               | count                      |
| `coins-unordered`   | `n target` then `n` coins               | count                      |
| `minimize-coins`    | `n target` then `n` coins               | fewest coins, `-1` if none |
| `removing-digits`   | `n`                                     | steps                      |
| `towers`            | `t` then `t` heights                    | one count per line         |
| `array-description` | `n upper` then `n` values (0 = unknown) | count                      |
| `grid-paths`        | `n` then `n × n` cells                  | count                      |
| `minimal-grid-path` | `n` then `n × n` letters                | path string                |
| `rectangle-cutting` | `a b`                                   | cuts                       |
| `edit-distance`     | two words                               | distance                   |
| `lcs`               | `n m` then `n` and `m` integers         | length, then the sequence  |
| `book-shop`         | `n budget`, `n` prices, `n` page counts | pages                      |
| `money-sums`        | `n` then `n` coins                      | count, then the sums       |