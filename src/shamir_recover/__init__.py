# SPDX-FileCopyrightText: 2025 shamir-recover contributors
# SPDX-License-Identifier: MIT

"""Reconstruct Shamir secrets from base-N encoded shares.

``decode``
    Turn a digit string in base 2..36 into an exact integer.

``interpolate_at_zero``
    Recover a polynomial's constant term from k points with exact fractions.

``select``
    Validate, order and decode raw share records into k points.

``reconstruct`` / ``reconstruct_file``
    Run the whole pipeline over records or a share document on disk.
"""

from .decoder import decode
from .errors import (
    DecodeError,
    DigitOutOfRange,
    DuplicateIndex,
    DuplicatePoint,
    InsufficientShares,
    InterpolationError,
    InvalidCharacter,
    LoadError,
    NonIntegerResult,
    RecordError,
    SelectionError,
    ShamirRecoverError,
)
from .interpolation import interpolate_at_zero
from .loader import load_share_set, parse_share_document
from .models import Point, Reconstruction, ShareRecord, ShareSet
from .reconstruct import RunOutcome, reconstruct, reconstruct_file, reconstruct_many
from .selector import select

__version__ = "0.1.0"

__all__ = [
    "decode",
    "interpolate_at_zero",
    "select",
    "reconstruct",
    "reconstruct_file",
    "reconstruct_many",
    "load_share_set",
    "parse_share_document",
    "Point",
    "Reconstruction",
    "RunOutcome",
    "ShareRecord",
    "ShareSet",
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
