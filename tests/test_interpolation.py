from fractions import Fraction
from itertools import combinations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from shamir_recover.errors import DuplicatePoint, InterpolationError, NonIntegerResult
from shamir_recover.interpolation import evaluate_polynomial, interpolate_at_zero, lagrange_at
from shamir_recover.models import Point


def _points(coefficients, xs):
    return [Point(x, evaluate_polynomial(coefficients, x)) for x in xs]


def test_quadratic_example():
    points = [Point(1, 4), Point(2, 7), Point(3, 12)]
    assert interpolate_at_zero(points) == 3


def test_single_point_is_constant_polynomial():
    assert interpolate_at_zero([Point(7, 123456789)]) == 123456789


def test_negative_constant_term():
    # y = 2x - 1
    assert interpolate_at_zero([Point(1, 1), Point(2, 3)]) == -1


def test_empty_points_rejected():
    with pytest.raises(InterpolationError):
        interpolate_at_zero([])


def test_duplicate_x_rejected():
    with pytest.raises(DuplicatePoint) as exc:
        interpolate_at_zero([Point(1, 4), Point(2, 7), Point(1, 5)])
    assert exc.value.x == 1


def test_non_integer_result_on_tampered_share():
    genuine = _points([3, 0, 1], [1, 2, 4])
    assert interpolate_at_zero(genuine) == 3

    tampered = genuine[:2] + [Point(4, genuine[2].y + 1)]
    with pytest.raises(NonIntegerResult) as exc:
        interpolate_at_zero(tampered)
    assert (exc.value.numerator, exc.value.denominator) == (10, 3)


def test_non_integer_result_on_mixed_polynomials():
    mixed = _points([3, 0, 1], [1, 2]) + _points([5, 1, 2], [4])
    with pytest.raises(NonIntegerResult):
        interpolate_at_zero(mixed)


def test_consistent_tampering_changes_secret_deterministically():
    # Consecutive indices give integer basis weights, so a flipped value
    # shifts the secret instead of making it fractional.
    genuine = _points([3, 0, 1], [1, 2, 3])
    tampered = genuine[:2] + [Point(3, 17)]
    assert interpolate_at_zero(tampered) == 8
    assert interpolate_at_zero(tampered) == 8


def test_lagrange_at_returns_reduced_fraction():
    points = [Point(1, 0), Point(3, 1)]
    value = lagrange_at(points, 0)
    assert value == Fraction(-1, 2)
    assert value.denominator == 2


def test_lagrange_at_reproduces_polynomial_elsewhere():
    coefficients = [11, -4, 7, 2]
    points = _points(coefficients, [2, 5, 9, 10])
    for x in (0, 1, 3, 50):
        assert lagrange_at(points, x) == evaluate_polynomial(coefficients, x)


def test_exact_for_large_magnitudes():
    coefficients = [2**255 - 19, 3**160, 7**90, 2**600 + 1, 5**120]
    points = _points(coefficients, [3, 17, 29, 41, 97])
    assert max(point.y for point in points) > 2**600
    assert interpolate_at_zero(points) == coefficients[0]


def test_non_integer_result_for_huge_values(int_digit_limit):
    huge = 10**5000 + 1
    with pytest.raises(NonIntegerResult) as exc:
        interpolate_at_zero([Point(1, huge), Point(3, 0)])
    assert exc.value.denominator == 2
    assert exc.value.numerator == 3 * huge
    assert "-bit integer" in str(exc.value)


@settings(max_examples=50, deadline=None)
@given(
    coefficients=st.lists(st.integers(min_value=0, max_value=2**128), min_size=1, max_size=6),
    extra=st.integers(min_value=0, max_value=3),
    data=st.data(),
)
def test_any_k_subset_agrees(coefficients, extra, data):
    k = len(coefficients)
    xs = data.draw(
        st.lists(st.integers(min_value=1, max_value=60), min_size=k + extra, max_size=k + extra, unique=True)
    )
    points = _points(coefficients, xs)
    secrets = {interpolate_at_zero(list(subset)) for subset in combinations(points, k)}
    assert secrets == {coefficients[0]}
