import random

import pytest

from recovery.base_decoder import DIGITS, decode_numeral, encode_numeral
from recovery.errors import InvalidNumeral


def positional(value_str, base):
    total = 0
    for char in value_str.lower():
        total = total * base + DIGITS.index(char)
    return total


@pytest.mark.parametrize("base", range(2, 37))
def test_decode_matches_positional_evaluation(base):
    rng = random.Random(base)
    for _ in range(20):
        numeral = "".join(rng.choice(DIGITS[:base]) for _ in range(rng.randint(1, 30)))
        assert decode_numeral(numeral, base) == positional(numeral, base)
        assert decode_numeral(numeral, base) == int(numeral, base)


def test_hex_share_decodes_before_interpolation():
    assert decode_numeral("1E", 16) == 30
    assert decode_numeral("1e", 16) == 30


def test_letters_are_case_insensitive():
    assert decode_numeral("ZZ", 36) == decode_numeral("zz", 36) == 35 * 36 + 35


def test_rejects_digit_outside_base():
    with pytest.raises(InvalidNumeral):
        decode_numeral("102", 2)


@pytest.mark.parametrize("numeral", [" 10", "10 ", "1_0", "+10", "-10", "0x1f", "", "١٢"])
def test_rejects_characters_python_int_would_accept(numeral):
    with pytest.raises(InvalidNumeral):
        decode_numeral(numeral, 16)


@pytest.mark.parametrize("base", [0, 1, 37, 100])
def test_rejects_base_out_of_range(base):
    with pytest.raises(InvalidNumeral):
        decode_numeral("1", base)


def test_large_numeral_stays_exact():
    # más allá de 2**53 un float ya no distingue enteros consecutivos
    assert decode_numeral("18446744073709551617", 10) == 2**64 + 1
    assert decode_numeral("1" + "0" * 64, 2) == 2**64


def test_encode_inverts_decode():
    assert encode_numeral(30, 16) == "1e"
    assert encode_numeral(0, 7) == "0"
    assert decode_numeral(encode_numeral(123456789, 36), 36) == 123456789
