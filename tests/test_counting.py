import pytest

from dynprog.counting import (
    MOD,
    count_array_descriptions,
    count_coin_combinations_ordered,
    count_coin_combinations_unordered,
    count_dice_combinations,
    count_towers,
    minimize_coins,
    removing_digits_steps,
)


@pytest.mark.parametrize("n", range(1, 7))
def test_dice_small_totals_double_each_time(n):
    assert count_dice_combinations(n) == 2 ** (n - 1)


@pytest.mark.parametrize("n", range(7, 40))
def test_dice_follows_six_term_recurrence(n):
    previous = sum(count_dice_combinations(n - k) for k in range(1, 7)) % MOD
    assert count_dice_combinations(n) == previous


@pytest.mark.parametrize("n", [0, 1, 5, 12, 50])
def test_dice_match_ordered_coins_one_to_six(n):
    assert count_dice_combinations(n) == count_coin_combinations_ordered(range(1, 7), n)


def test_dice_large_total_is_reduced():
    result = count_dice_combinations(1000)
    assert 0 <= result < MOD


def test_dice_negative_total_rejected():
    with pytest.raises(ValueError):
        count_dice_combinations(-1)


@pytest.mark.parametrize("target", range(2, 30))
def test_ordered_ones_and_twos_follow_fibonacci(target):
    coins = [1, 2]
    assert count_coin_combinations_ordered(coins, target) == (
        count_coin_combinations_ordered(coins, target - 1)
        + count_coin_combinations_ordered(coins, target - 2)
    )


def test_ordered_ignores_coin_order():
    assert count_coin_combinations_ordered([5, 1, 3], 20) == count_coin_combinations_ordered(
        [1, 3, 5], 20
    )


def test_ordered_rejects_non_positive_coins():
    with pytest.raises(ValueError):
        count_coin_combinations_ordered([0, 2], 4)


@pytest.mark.parametrize("target", range(0, 25))
def test_unordered_ones_and_twos(target):
    assert count_coin_combinations_unordered([1, 2], target) == target // 2 + 1


@pytest.mark.parametrize("target", range(0, 25))
def test_unordered_never_exceeds_ordered(target):
    coins = [2, 3, 5]
    assert count_coin_combinations_unordered(coins, target) <= count_coin_combinations_ordered(
        coins, target
    )


def test_unordered_ignores_coin_order():
    assert count_coin_combinations_unordered([9, 2, 5], 31) == count_coin_combinations_unordered(
        [2, 5, 9], 31
    )


def test_unordered_without_coins_has_no_way():
    assert count_coin_combinations_unordered([], 5) == 0


def test_unordered_rejects_negative_target():
    with pytest.raises(ValueError):
        count_coin_combinations_unordered([1], -3)


def test_minimize_coins_worked_example():
    assert minimize_coins([1, 5, 7], 11) == 3


def test_minimize_coins_impossible_sum():
    assert minimize_coins([2, 4], 7) is None


@pytest.mark.parametrize("target", [0, 1, 9, 40])
def test_minimize_with_unit_coin_only(target):
    assert minimize_coins([1], target) == target


@pytest.mark.parametrize("target", range(0, 20))
def test_minimize_agrees_with_reachability(target):
    coins = [3, 7]
    reachable = count_coin_combinations_ordered(coins, target) > 0
    assert (minimize_coins(coins, target) is not None) == reachable


def test_minimize_rejects_bad_coins():
    with pytest.raises(ValueError):
        minimize_coins([-1, 3], 5)


def test_removing_digits_worked_example():
    assert removing_digits_steps(27) == 5


@pytest.mark.parametrize("n", [1, 9, 10, 55, 99, 100, 1234])
def test_removing_digits_bounds(n):
    steps = removing_digits_steps(n)
    assert -(-n // 9) <= steps <= n


def test_removing_digits_from_zero_takes_no_steps():
    assert removing_digits_steps(0) == 0


def test_removing_digits_rejects_negative():
    with pytest.raises(ValueError):
        removing_digits_steps(-4)


def test_towers_worked_example():
    assert count_towers(6) == 2864


def test_towers_grow_with_height():
    counts = [count_towers(n) for n in range(1, 11)]
    assert counts == sorted(set(counts))


def test_towers_large_height_is_reduced():
    assert 0 <= count_towers(5000) < MOD


def test_towers_reject_zero_height():
    with pytest.raises(ValueError):
        count_towers(0)


@pytest.mark.parametrize("upper", [1, 4, 10])
def test_single_unknown_takes_any_value(upper):
    assert count_array_descriptions([0], upper) == upper


def test_fixing_first_value_partitions_the_count():
    upper = 6
    total = count_array_descriptions([0, 0, 0, 0], upper)
    assert sum(count_array_descriptions([v, 0, 0, 0], upper) for v in range(1, upper + 1)) == total


def test_reversal_preserves_count():
    values = [0, 3, 0, 0, 4, 0]
    assert count_array_descriptions(values, 7) == count_array_descriptions(values[::-1], 7)


def test_mirroring_values_preserves_count():
    upper = 8
    values = [2, 0, 0, 3, 0]
    mirrored = [0 if v == 0 else upper + 1 - v for v in values]
    assert count_array_descriptions(values, upper) == count_array_descriptions(mirrored, upper)


def test_fixed_values_too_far_apart():
    assert count_array_descriptions([1, 3], 5) == 0


@pytest.mark.parametrize("values, upper", [([], 3), ([4], 3), ([-1, 0], 3), ([0], 0)])
def test_array_description_rejects_bad_input(values, upper):
    with pytest.raises(ValueError):
        count_array_descriptions(values, upper)