"""Problems over pairs of sequences and selections from a sequence."""

from __future__ import annotations

from collections.abc import Hashable, Iterable, Sequence
from typing import TypeVar

T = TypeVar("T", bound=Hashable)


def edit_distance(first: Sequence, second: Sequence) -> int:
    """Fewest insertions, deletions and substitutions turning ``first`` into ``second``."""
    previous = list(range(len(second) + 1))
    for i, ch in enumerate(first, 1):
        current = [i]
        for j, other in enumerate(second, 1):
            if ch == other:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(previous[j], current[j - 1], previous[j - 1]))
        previous = current
    return previous[-1]


def longest_common_subsequence(a: Iterable[T], b: Iterable[T]) -> list[T]:
    """One longest subsequence common to ``a`` and ``b``."""
    first, second = list(a), list(b)
    n, m = len(first), len(second)
    table = [[0] * (m + 1) for _ in range(n + 1)]
    for i in reversed(range(n)):
        for j in reversed(range(m)):
            if first[i] == second[j]:
                table[i][j] = 1 + table[i + 1][j + 1]
            else:
                table[i][j] = max(table[i + 1][j], table[i][j + 1])

    result: list[T] = []
    i = j = 0
    while i < n and j < m:
        if first[i] == second[j]:
            result.append(first[i])
            i += 1
            j += 1
        elif table[i + 1][j] >= table[i][j + 1]:
            i += 1
        else:
            j += 1
    return result


def max_pages(prices: Iterable[int], pages: Iterable[int], budget: int) -> int:
    """Most pages obtainable by buying each book at most once within ``budget``."""
    price_list, page_list = list(prices), list(pages)
    if len(price_list) != len(page_list):
        raise ValueError("prices and pages must have the same length")
    if budget < 0:
        raise ValueError(f"budget must be non-negative, got {budget}")
    if any(price < 0 for price in price_list):
        raise ValueError("prices must be non-negative")

    best = [0] * (budget + 1)
    for price, value in zip(price_list, page_list):
        for money in range(budget, price - 1, -1):
            best[money] = max(best[money], best[money - price] + value)
    return best[budget]


def money_sums(coins: Iterable[int]) -> list[int]:
    """All distinct positive sums formed by some subset of ``coins``, ascending."""
    values = list(coins)
    if any(coin < 0 for coin in values):
        raise ValueError("coin values must be non-negative")
    reachable = 1
    for coin in values:
        reachable |= reachable << coin
    return [total for total in range(1, sum(values) + 1) if reachable >> total & 1]