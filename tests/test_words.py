import itertools
import math

import pytest

from eulerkit.words import (
    count_triangle_words,
    find_xor_key,
    largest_anagramic_square,
    name_scores_total,
    number_letter_count,
    number_to_words,
    xor_decrypt_sum,
)


def _encrypt(plaintext, key):
    return [ord(ch) ^ ord(k) for ch, k in zip(plaintext, itertools.cycle(key))]


@pytest.mark.parametrize(
    "n, name",
    [(18, "eighteen"), (40, "forty"), (1000, "one thousand"), (15, "fifteen")],
)
def test_fixed_names(n, name):
    assert number_to_words(n) == name


def test_compound_name_with_and():
    assert number_to_words(342) == "three hundred and forty two"


def test_round_hundred_has_no_and():
    assert "and" not in number_to_words(700).split()
    assert number_to_words(700).endswith("hundred")


def test_hundreds_embed_lower_names():
    for n in range(101, 200):
        if n % 100:
            assert number_to_words(n) == "one hundred and " + number_to_words(n % 100)


@pytest.mark.parametrize("n", [-1, 1001])
def test_out_of_range_names(n):
    with pytest.raises(ValueError):
        number_to_words(n)


def test_letter_count_increments_by_each_name():
    for n in (1, 21, 115, 342, 1000):
        step = number_letter_count(n) - number_letter_count(n - 1)
        assert step == len(number_to_words(n).replace(" ", ""))


def test_single_name_score():
    assert name_scores_total('"COLIN"') == 53


def test_name_scores_ignore_input_order():
    assert name_scores_total('"MARY","ANNA","LINDA"') == name_scores_total('"LINDA","MARY","ANNA"')


def test_name_scores_of_repeated_letter():
    assert name_scores_total('"AAA"\n') == 3


def test_triangle_words_counts_sky():
    assert count_triangle_words('"SKY","ZZZZ"') == 1


def test_triangle_words_none_when_no_triangle_values():
    assert count_triangle_words('"B","D","ZZZZ"') == 0


def test_find_xor_key_recovers_key():
    plaintext = "we walked to the river and back"
    assert find_xor_key(_encrypt(plaintext, "abc")) == "abc"


def test_find_xor_key_custom_marker():
    plaintext = "hello there, general"
    assert find_xor_key(_encrypt(plaintext, "zqx"), "there") == "zqx"


def test_find_xor_key_missing_marker():
    with pytest.raises(LookupError):
        find_xor_key([1, 2, 3])


def test_xor_decrypt_sum_sums_plaintext_bytes():
    plaintext = "a test of the cipher"
    text = ",".join(str(code) for code in _encrypt(plaintext, "key")) + "\n"
    assert xor_decrypt_sum(text) == sum(plaintext.encode("utf-8"))


def test_anagramic_square_care_race():
    result = largest_anagramic_square('"CARE","RACE","HELLO"')
    assert result >= 9216
    assert math.isqrt(result) ** 2 == result


def test_anagramic_square_requires_anagrams():
    with pytest.raises(ValueError):
        largest_anagramic_square('"ONE","TWO"')