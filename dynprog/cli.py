"""Command-line front end: read a problem's input and print its answer."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Iterator, Sequence
from pathlib import Path

from dynprog.counting import (
    count_array_descriptions,
    count_coin_combinations_ordered,
    count_coin_combinations_unordered,
    count_dice_combinations,
    count_towers,
    minimize_coins,
    removing_digits_steps,
)
from dynprog.grids import count_grid_paths, minimal_grid_path, rectangle_cuts
from dynprog.sequences import (
    edit_distance,
    longest_common_subsequence,
    max_pages,
    money_sums,
)


class _Tokens:
    """Whitespace-separated tokens of the input, consumed in order."""

    def __init__(self, text: str) -> None:
        self._items: Iterator[str] = iter(text.split())

    def word(self) -> str:
        try:
            return next(self._items)
        except StopIteration:
            raise ValueError("unexpected end of input") from None

    def integer(self) -> int:
        word = self.word()
        try:
            return int(word)
        except ValueError:
            raise ValueError(f"expected an integer, got {word!r}") from None

    def integers(self, count: int) -> list[int]:
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        return [self.integer() for _ in range(count)]

    def rest(self) -> list[str]:
        return list(self._items)


def _read_square_grid(tokens: _Tokens) -> list[str]:
    size = tokens.integer()
    if size < 1:
        raise ValueError(f"grid size must be positive, got {size}")
    cells = "".join(tokens.rest())
    if len(cells) < size * size:
        raise ValueError("unexpected end of input")
    return [cells[start:start + size] for start in range(0, size * size, size)]


def _dice(tokens: _Tokens) -> Iterable[str]:
    yield str(count_dice_combinations(tokens.integer()))


def _read_coins(tokens: _Tokens) -> tuple[list[int], int]:
    count, target = tokens.integer(), tokens.integer()
    return tokens.integers(count), target


def _coins_ordered(tokens: _Tokens) -> Iterable[str]:
    coins, target = _read_coins(tokens)
    yield str(count_coin_combinations_ordered(coins, target))


def _coins_unordered(tokens: _Tokens) -> Iterable[str]:
    coins, target = _read_coins(tokens)
    yield str(count_coin_combinations_unordered(coins, target))


def _minimize_coins(tokens: _Tokens) -> Iterable[str]:
    coins, target = _read_coins(tokens)
    best = minimize_coins(coins, target)
    yield str(-1 if best is None else best)


def _removing_digits(tokens: _Tokens) -> Iterable[str]:
    yield str(removing_digits_steps(tokens.integer()))


def _towers(tokens: _Tokens) -> Iterable[str]:
    heights = tokens.integers(tokens.integer())
    return [str(count_towers(height)) for height in heights]


def _array_description(tokens: _Tokens) -> Iterable[str]:
    length, upper = tokens.integer(), tokens.integer()
    yield str(count_array_descriptions(tokens.integers(length), upper))


def _grid_paths(tokens: _Tokens) -> Iterable[str]:
    yield str(count_grid_paths(_read_square_grid(tokens)))


def _minimal_grid_path(tokens: _Tokens) -> Iterable[str]:
    yield minimal_grid_path(_read_square_grid(tokens))


def _rectangle_cutting(tokens: _Tokens) -> Iterable[str]:
    a, b = tokens.integer(), tokens.integer()
    yield str(rectangle_cuts(a, b))


def _edit_distance(tokens: _Tokens) -> Iterable[str]:
    first, second = tokens.word(), tokens.word()
    yield str(edit_distance(first, second))


def _lcs(tokens: _Tokens) -> Iterable[str]:
    n, m = tokens.integer(), tokens.integer()
    first, second = tokens.integers(n), tokens.integers(m)
    common = longest_common_subsequence(first, second)
    yield str(len(common))
    yield " ".join(map(str, common))


def _book_shop(tokens: _Tokens) -> Iterable[str]:
    count, budget = tokens.integer(), tokens.integer()
    prices = tokens.integers(count)
    pages = tokens.integers(count)
    yield str(max_pages(prices, pages, budget))


def _money_sums(tokens: _Tokens) -> Iterable[str]:
    sums = money_sums(tokens.integers(tokens.integer()))
    yield str(len(sums))
    yield " ".join(map(str, sums))


_COMMANDS: dict[str, tuple[str, Callable[[_Tokens], Iterable[str]]]] = {
    "dice": ("ways to reach a sum with dice throws", _dice),
    "coins-ordered": ("ordered coin combinations for a sum", _coins_ordered),
    "coins-unordered": ("unordered coin combinations for a sum", _coins_unordered),
    "minimize-coins": ("fewest coins for a sum, -1 if impossible", _minimize_coins),
    "removing-digits": ("fewest digit subtractions down to zero", _removing_digits),
    "towers": ("ways to build towers of the given heights", _towers),
    "array-description": ("arrays matching a partial description", _array_description),
    "grid-paths": ("paths through a grid avoiding traps", _grid_paths),
    "minimal-grid-path": ("lexicographically smallest grid path", _minimal_grid_path),
    "rectangle-cutting": ("fewest cuts splitting a rectangle into squares", _rectangle_cutting),
    "edit-distance": ("edit distance between two words", _edit_distance),
    "lcs": ("longest common subsequence of two integer lists", _lcs),
    "book-shop": ("most pages buyable within a budget", _book_shop),
    "money-sums": ("all sums formed by subsets of coins", _money_sums),
}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dynprog",
        description="Solve a dynamic-programming problem read from standard input.",
    )
    parser.add_argument(
        "-i",
        "--input",
        type=Path,
        help="read the problem input from this file instead of standard input",
    )
    commands = parser.add_subparsers(dest="command", required=True, metavar="PROBLEM")
    for name, (summary, _) in _COMMANDS.items():
        commands.add_parser(name, help=summary)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run one problem solver; return the process exit status."""
    args = _build_parser().parse_args(argv)
    _, solve = _COMMANDS[args.command]
    try:
        text = args.input.read_text() if args.input else sys.stdin.read()
        lines = list(solve(_Tokens(text)))
    except (OSError, ValueError) as exc:
        print(f"dynprog: error: {exc}", file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())