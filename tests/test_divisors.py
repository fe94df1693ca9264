import math

import pytest

from eulerkit.divisors import (
    amicable_sum,
    factorizations,
    longest_amicable_chain,
    longest_recurring_cycle,
    non_abundant_sum,
    product_sum_numbers_total,
    proper_divisor_sums,
    recurring_cycle_length,
)


def test_proper_divisor_sums_amicable_pair():
    sums = proper_divisor_sums(285)
    assert sums[220] == 284
    assert sums[284] == 220


def test_proper_divisor_sums_small_entries():
    sums = proper_divisor_sums(10)
    assert sums[0] == 0
    assert sums[1] == 0
    assert sums[7] == 1
    assert sums[6] == 6


def test_proper_divisor_sums_rejects_negative():
    with pytest.raises(ValueError):
        proper_divisor_sums(-1)


def test_amicable_sum_first_pair():
    assert amicable_sum(300) == 504


def test_amicable_sum_below_ten_thousand():
    assert amicable_sum(10_000) == 31626


def test_non_abundant_sum_below_first_expressible():
    assert non_abundant_sum(24) == sum(range(1, 24))


def test_non_abundant_sum_skips_twenty_four():
    assert non_abundant_sum(25) == non_abundant_sum(24)
    assert non_abundant_sum(26) == non_abundant_sum(25) + 25


@pytest.mark.parametrize(
    "d, expected",
    [(2, 0), (3, 1), (4, 0), (5, 0), (6, 1), (7, 6), (8, 0), (9, 1), (10, 0)],
)
def test_recurring_cycle_length(d, expected):
    assert recurring_cycle_length(d) == expected


def test_recurring_cycle_length_rejects_zero():
    with pytest.raises(ValueError):
        recurring_cycle_length(0)


def test_longest_recurring_cycle_below_ten():
    assert longest_recurring_cycle(10) == 7


def test_longest_recurring_cycle_below_thousand():
    assert longest_recurring_cycle(1000) == 983


def test_longest_recurring_cycle_rejects_empty_range():
    with pytest.raises(ValueError):
        longest_recurring_cycle(2)


@pytest.mark.parametrize(
    "n, expected",
    [(4, [[2, 2]]), (6, [[2, 3]]), (8, [[2, 4], [2, 2, 2]])],
)
def test_factorizations_cases(n, expected):
    assert factorizations(n) == expected


def test_factorizations_of_prime_is_empty():
    assert factorizations(7) == []


@pytest.mark.parametrize("n", [12, 24, 36, 60, 72, 96])
def test_factorizations_multiply_back(n):
    result = factorizations(n)
    assert result
    for factors in result:
        assert math.prod(factors) == n
        assert factors == sorted(factors)
    assert len({tuple(f) for f in result}) == len(result)


def test_factorizations_rejects_zero():
    with pytest.raises(ValueError):
        factorizations(0)


def test_product_sum_numbers_total_small():
    assert product_sum_numbers_total(6) == 30
    assert product_sum_numbers_total(12) == 61


def test_product_sum_numbers_total_rejects_zero():
    with pytest.raises(ValueError):
        product_sum_numbers_total(0)


def test_longest_amicable_chain_pair():
    assert longest_amicable_chain(300) == 220


def test_longest_amicable_chain_five_members():
    assert longest_amicable_chain(20_000) == 12496


def test_longest_amicable_chain_rejects_zero():
    with pytest.raises(ValueError):
        longest_amicable_chain(0)