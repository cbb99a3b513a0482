# SPDX-FileCopyrightText: 2025 shamir-recover contributors
# SPDX-License-Identifier: MIT

"""Positional digit-string decoding for bases 2 through 36.

Digits ``0-9`` have their face value and ASCII letters (either case) map to
``10-35``. Python integers are unbounded, so values far beyond 64 bits decode
exactly.
"""

from __future__ import annotations

import string

from .errors import DigitOutOfRange, InvalidCharacter

_DIGITS: dict[str, int] = {
    char: value for value, char in enumerate(string.digits + string.ascii_lowercase)
}
_DIGITS.update({char.upper(): value for char, value in _DIGITS.items() if char.isalpha()})


def digit_value(char: str) -> int:
    """Return the numeric value of a single digit character, or raise ``KeyError``."""
    return _DIGITS[char]


def decode(value: str, base: int) -> int:
    """Decode ``value`` as a most-significant-digit-first number in ``base``.

    The caller is responsible for keeping ``base`` within 2..36.
    """
    if not value:
        raise InvalidCharacter(value, 0)
    result = 0
    for position, char in enumerate(value):
        try:
            digit = digit_value(char)
        except KeyError:
            raise InvalidCharacter(value, position) from None
        if digit >= base:
            raise DigitOutOfRange(char, digit, base)
        result = result * base + digit
    return result


__all__ = ["decode", "digit_value"]
