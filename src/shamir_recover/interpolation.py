# SPDX-FileCopyrightText: 2025 shamir-recover contributors
# SPDX-License-Identifier: MIT

"""Exact Lagrange interpolation over the rationals.

Each basis term ``y_i * prod(x - x_j) / prod(x_i - x_j)`` is folded into a
:class:`fractions.Fraction` accumulator. ``Fraction`` keeps itself in lowest
terms with a positive denominator after every addition, so numerator and
denominator stay bounded by the true value rather than growing with k!.
"""

from __future__ import annotations

import logging
from fractions import Fraction
from typing import Sequence

from .errors import DuplicatePoint, InterpolationError, NonIntegerResult
from .models import Point

_logger = logging.getLogger(__name__)


def lagrange_at(points: Sequence[Point], x: int) -> Fraction:
    """Evaluate the interpolating polynomial through ``points`` at ``x``."""
    if not points:
        raise InterpolationError("at least one point is required")
    total = Fraction(0)
    for i, pi in enumerate(points):
        num = 1
        den = 1
        for j, pj in enumerate(points):
            if i == j:
                continue
            if pi.x == pj.x:
                raise DuplicatePoint(pi.x)
            num *= x - pj.x
            den *= pi.x - pj.x
        total += Fraction(pi.y * num, den)
    return total


def interpolate_at_zero(points: Sequence[Point]) -> int:
    """Return the constant term of the polynomial through ``points``.

    Raises :class:`NonIntegerResult` when the points cannot come from a single
    integer polynomial, and :class:`DuplicatePoint` on repeated x values.
    """
    value = lagrange_at(points, 0)
    if value.denominator != 1:
        _logger.debug(
            "non-integer constant term over %d points (denominator of %d bits)",
            len(points),
            value.denominator.bit_length(),
        )
        raise NonIntegerResult(value.numerator, value.denominator)
    return value.numerator


def evaluate_polynomial(coefficients: Sequence[int], x: int) -> int:
    """Evaluate ``coefficients[0] + coefficients[1]*x + ...`` exactly (Horner)."""
    result = 0
    for coefficient in reversed(coefficients):
        result = result * x + coefficient
    return result


__all__ = ["lagrange_at", "interpolate_at_zero", "evaluate_polynomial"]
