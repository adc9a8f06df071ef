"""Conversion between machine words and strings of binary digits."""

WORD_MASK = 0xFFFFFFFF


def string_to_binary(text):
    """Read ``text`` as a 32-bit word, most significant digit first.

    Every character shifts the word left by one; only ``'1'`` sets the new bit.
    """
    result = 0
    for char in text:
        result = ((result << 1) | (char == "1")) & WORD_MASK
    return result


def binary_to_string(value, size=32):
    """Return the ``size`` lowest bits of ``value``, most significant first."""
    return "".join("1" if (value >> bit) & 1 else "0" for bit in reversed(range(size)))