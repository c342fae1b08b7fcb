"""Base-62 encoding of non-negative integers, least significant digit first."""

CODE62 = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
BASE = len(CODE62)

_DIGIT_VALUES = {char: value for value, char in enumerate(CODE62)}


def int_to_base62(number: int) -> str:
    """Encode ``number`` as base-62 text, least significant digit first.

    Zero encodes as ``"0"``; negative numbers encode as an empty string.
    """
    if number == 0:
        return "0"
    digits = []
    while number > 0:
        number, remain = divmod(number, BASE)
        digits.append(CODE62[remain])
    return "".join(digits)


def base62_to_int(text: str) -> int:
    """Decode base-62 text produced by :func:`int_to_base62`.

    Surrounding whitespace is ignored; characters outside the alphabet count
    as zero.
    """
    return sum(
        _DIGIT_VALUES.get(char, 0) * BASE**position
        for position, char in enumerate(text.strip())
    )