"""Counting and optimisation problems over sums, digits and number sequences."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

MOD = 1_000_000_007
DICE_FACES = 6


def _require_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def _positive_coins(coins: Iterable[int]) -> list[int]:
    values = list(coins)
    if any(coin < 1 for coin in values):
        raise ValueError("coin values must be positive")
    return values


def count_dice_combinations(n: int) -> int:
    """Number of ordered dice-throw sequences summing to ``n``, modulo ``MOD``."""
    _require_non_negative("n", n)
    ways = [1] + [0] * n
    for total in range(1, n + 1):
        ways[total] = sum(ways[max(0, total - DICE_FACES):total]) % MOD
    return ways[n]


def count_coin_combinations_ordered(coins: Iterable[int], target: int) -> int:
    """Number of ordered coin sequences summing to ``target``, modulo ``MOD``."""
    values = _positive_coins(coins)
    _require_non_negative("target", target)
    ways = [1] + [0] * target
    for total in range(1, target + 1):
        ways[total] = sum(ways[total - coin] for coin in values if coin <= total) % MOD
    return ways[target]


def count_coin_combinations_unordered(coins: Iterable[int], target: int) -> int:
    """Number of distinct coin multisets summing to ``target``, modulo ``MOD``.

    With no coins at all there is no way to form any sum.
    """
    values = _positive_coins(coins)
    _require_non_negative("target", target)
    if not values:
        return 0
    ways = [1] + [0] * target
    for coin in values:
        for total in range(coin, target + 1):
            ways[total] = (ways[total] + ways[total - coin]) % MOD
    return ways[target]


def minimize_coins(coins: Iterable[int], target: int) -> int | None:
    """Fewest coins summing to ``target``, or ``None`` when it cannot be formed."""
    values = _positive_coins(coins)
    _require_non_negative("target", target)
    best: list[int | None] = [0] + [None] * target
    for total in range(1, target + 1):
        options = [
            best[total - coin]
            for coin in values
            if coin <= total and best[total - coin] is not None
        ]
        if options:
            best[total] = 1 + min(options)
    return best[target]


def removing_digits_steps(n: int) -> int:
    """Fewest steps to reach zero, each step subtracting one of the number's digits."""
    _require_non_negative("n", n)
    steps = [0] * (n + 1)
    for number in range(1, n + 1):
        digits = {int(ch) for ch in str(number)} - {0}
        steps[number] = 1 + min(steps[number - digit] for digit in digits)
    return steps[n]


def count_towers(n: int) -> int:
    """Number of ways to build a tower of width 2 and height ``n``, modulo ``MOD``."""
    if n < 1:
        raise ValueError(f"tower height must be at least 1, got {n}")
    joined, split = 1, 1
    for _ in range(n - 1):
        joined, split = (2 * joined + split) % MOD, (4 * split + joined) % MOD
    return (joined + split) % MOD


def count_array_descriptions(values: Sequence[int], upper: int) -> int:
    """Number of arrays matching ``values`` whose neighbours differ by at most one.

    A zero in ``values`` is unknown; every entry must lie in ``1..upper``.
    The count is taken modulo ``MOD``.
    """
    values = list(values)
    if not values:
        raise ValueError("values must not be empty")
    if upper < 1:
        raise ValueError(f"upper must be at least 1, got {upper}")
    if any(not 0 <= value <= upper for value in values):
        raise ValueError(f"values must lie between 0 and {upper}")

    def candidates(value: int) -> Iterable[int]:
        return range(1, upper + 1) if value == 0 else (value,)

    # Padded at both ends so that neighbours outside 1..upper read as zero.
    following = [0] * (upper + 2)
    for num in candidates(values[-1]):
        following[num] = 1

    for value in reversed(values[:-1]):
        current = [0] * (upper + 2)
        for num in candidates(value):
            current[num] = sum(following[num - 1:num + 2]) % MOD
        following = current

    return sum(following[num] for num in candidates(values[0])) % MOD