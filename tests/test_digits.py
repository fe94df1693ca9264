import math

import pytest

from eulerkit.digits import (
    champernowne_product,
    digit_factorials_sum,
    digit_powers_sum,
    double_base_palindromes_sum,
    largest_pandigital_multiple,
    lychrel_count,
    max_power_digit_sum,
    pandigital_products_sum,
    powerful_digit_count,
    square_digit_chain_89_count,
)


def test_digit_powers_first_power_counts_single_digits():
    assert digit_powers_sum(1, 10) == sum(range(2, 10))
    assert digit_powers_sum(1, 100) == digit_powers_sum(1, 10)


def test_digit_powers_result_has_property():
    result = digit_powers_sum(4, 2000)
    assert result > 1
    assert sum(int(d) ** 4 for d in str(result)) == result


def test_digit_powers_no_more_fourth_powers_beyond_five_digits():
    assert digit_powers_sum(4, 10_000) == digit_powers_sum(4, 100_000)


def test_digit_factorials_small_limit_is_factorion():
    result = digit_factorials_sum(1000)
    assert result > 2
    assert sum(math.factorial(int(d)) for d in str(result)) == result
    assert digit_factorials_sum(1000) == digit_factorials_sum(200)


def test_double_base_palindromes_single_digits():
    assert double_base_palindromes_sum(10) == sum(range(1, 10, 2))


def test_double_base_palindromes_monotonic():
    assert double_base_palindromes_sum(1000) >= double_base_palindromes_sum(100)


def test_pandigital_products_sum():
    assert pandigital_products_sum() == 45228


def test_largest_pandigital_multiple_is_pandigital():
    result = largest_pandigital_multiple()
    assert sorted(str(result)) == list("123456789")
    assert result >= 918273645


def test_champernowne_first_digit():
    assert champernowne_product(0) == champernowne_product(1)


def test_champernowne_product():
    assert champernowne_product(6) == 210


def test_champernowne_rejects_negative():
    with pytest.raises(ValueError):
        champernowne_product(-1)


def test_lychrel_no_iterations_counts_everything():
    assert lychrel_count(50, 0) == 49


def test_lychrel_196_is_counted():
    assert lychrel_count(197, 50) - lychrel_count(196, 50) == 1


def test_lychrel_single_digits_become_palindromes():
    assert lychrel_count(10, 50) == lychrel_count(1, 50)


def test_max_power_digit_sum_smallest():
    assert max_power_digit_sum(3) == 2**2


def test_max_power_digit_sum_bounds():
    result = max_power_digit_sum(100)
    assert result >= sum(int(d) for d in str(99**99))
    assert max_power_digit_sum(20) >= max_power_digit_sum(10)


def test_max_power_digit_sum_rejects_small_limit():
    with pytest.raises(ValueError):
        max_power_digit_sum(2)


def test_powerful_digit_count():
    assert powerful_digit_count() == 49


def test_square_digit_chain_89_itself_counts():
    assert square_digit_chain_89_count(90) - square_digit_chain_89_count(89) == 1


def test_square_digit_chain_one_does_not_count():
    assert square_digit_chain_89_count(2) == square_digit_chain_89_count(1)


def test_square_digit_chain_bounded_by_limit():
    result = square_digit_chain_89_count(2000)
    assert result <= 1999
    assert result >= square_digit_chain_89_count(1000)