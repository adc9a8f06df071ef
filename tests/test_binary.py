import pytest

from mic1sim.binary import binary_to_string, string_to_binary


def test_string_to_binary_reads_digits_in_order():
    assert string_to_binary("101") == int("101", 2)


def test_string_to_binary_empty_is_zero():
    assert string_to_binary("") == 0


def test_string_to_binary_only_one_sets_bits():
    assert string_to_binary("1x1") == string_to_binary("101")
    assert string_to_binary("2") == string_to_binary("0")


def test_string_to_binary_wraps_to_32_bits():
    assert string_to_binary("1" * 40) == 0xFFFFFFFF


def test_binary_to_string_default_width_is_32():
    text = binary_to_string(1)
    assert len(text) == 32
    assert text == "0" * 31 + "1"


def test_binary_to_string_byte_width():
    assert binary_to_string(0xFF, 8) == "11111111"


def test_binary_to_string_truncates_high_bits():
    assert binary_to_string((1 << 23) | 1, 23) == "0" * 22 + "1"


@pytest.mark.parametrize(
    "text",
    [
        "0" * 32,
        "1" * 32,
        "10101010101010101010101010101010",
        "00110101000001001000100",
        "00000101",
    ],
)
def test_round_trip(text):
    assert binary_to_string(string_to_binary(text), len(text)) == text