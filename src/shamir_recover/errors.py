# SPDX-FileCopyrightText: 2025 shamir-recover contributors
# SPDX-License-Identifier: MIT

"""Exception hierarchy for share loading, decoding and reconstruction.

Per-record problems (:class:`RecordError`, :class:`DecodeError`) are caught by
the selector and turned into diagnostics. Everything else is fatal for the
share set being processed and propagates to the caller.
"""

from __future__ import annotations

# Integers wider than this are reported by size instead of in decimal.
_MAX_MESSAGE_BITS = 192


def describe_int(value: int) -> str:
    if value.bit_length() <= _MAX_MESSAGE_BITS:
        return str(value)
    sign = "-" if value < 0 else ""
    return f"<{sign}{value.bit_length()}-bit integer>"


class ShamirRecoverError(Exception):
    """Base class for every error raised by this package."""


class LoadError(ShamirRecoverError):
    """The share document is missing, unreadable or malformed."""


class RecordError(ShamirRecoverError):
    """A single share record carries an unusable index or base."""


class DecodeError(ShamirRecoverError):
    """A share value is not a valid digit string for its base."""


class InvalidCharacter(DecodeError):
    def __init__(self, value: str, position: int) -> None:
        self.value = value
        self.position = position
        char = value[position] if position < len(value) else ""
        self.char = char
        if char:
            message = f"invalid character {char!r} at position {position} in {value!r}"
        else:
            message = "empty digit string"
        super().__init__(message)


class DigitOutOfRange(DecodeError):
    def __init__(self, char: str, digit: int, base: int) -> None:
        self.char = char
        self.digit = digit
        self.base = base
        super().__init__(f"digit {char!r} (value {digit}) is out of range for base {base}")


class SelectionError(ShamirRecoverError):
    """The share set as a whole cannot provide k usable points."""


class InsufficientShares(SelectionError):
    def __init__(self, needed: int, got: int) -> None:
        self.needed = needed
        self.got = got
        super().__init__(f"need {needed} valid shares, got {got}")


class DuplicateIndex(SelectionError):
    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(f"share index {describe_int(index)} appears more than once")


class InterpolationError(ShamirRecoverError):
    """The selected points do not describe a single integer polynomial."""


class DuplicatePoint(InterpolationError):
    def __init__(self, x: int) -> None:
        self.x = x
        super().__init__(f"x = {describe_int(x)} appears more than once among interpolation points")


class NonIntegerResult(InterpolationError):
    def __init__(self, numerator: int, denominator: int) -> None:
        self.numerator = numerator
        self.denominator = denominator
        super().__init__(
            f"interpolated constant term {describe_int(numerator)}/{describe_int(denominator)} "
            "is not an integer; shares are corrupted or come from different polynomials"
        )


__all__ = [
    "ShamirRecoverError",
    "LoadError",
    "RecordError",
    "DecodeError",
    "InvalidCharacter",
    "DigitOutOfRange",
    "SelectionError",
    "InsufficientShares",
    "DuplicateIndex",
    "InterpolationError",
    "DuplicatePoint",
    "NonIntegerResult",
]
