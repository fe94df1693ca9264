import pytest

from eulerkit.roman import characters_saved, parse_roman, to_roman


@pytest.mark.parametrize(
    "numeral, value",
    [
        ("I", 1),
        ("IV", 4),
        ("IX", 9),
        ("XL", 40),
        ("XC", 90),
        ("CD", 400),
        ("CM", 900),
        ("CMXLVIII", 948),
        ("CMXLIX", 949),
    ],
)
def test_parse_roman(numeral, value):
    assert parse_roman(numeral) == value


@pytest.mark.parametrize(
    "value, numeral",
    [
        (1000, "M"),
        (2000, "MM"),
        (2500, "MMD"),
        (2550, "MMDL"),
        (8, "VIII"),
        (9, "IX"),
    ],
)
def test_to_roman(value, numeral):
    assert to_roman(value) == numeral


def test_round_trip_up_to_one_thousand():
    for i in range(1, 1001):
        assert parse_roman(to_roman(i)) == i


def test_parse_non_minimal_forms():
    assert parse_roman("IIII") == 4
    assert parse_roman("VIIII") == 9


def test_parse_rejects_unknown_symbol():
    with pytest.raises(ValueError):
        parse_roman("XZ")


def test_to_roman_rejects_negative():
    with pytest.raises(ValueError):
        to_roman(-1)


def test_characters_saved():
    assert characters_saved("IIII\nVIIII\n") == 5


def test_minimal_numerals_save_nothing():
    text = "\n".join(to_roman(n) for n in (4, 49, 999, 1994))
    assert characters_saved(text) == 0