import pytest

from curvekit.core import scalar
from curvekit.core.constants import EPS_DEFAULT


def test_equal_within_tolerance():
    assert scalar.is_equal(1.0, 1.0 + EPS_DEFAULT / 2)
    assert not scalar.is_equal(1.0, 1.0 + 2 * EPS_DEFAULT)
    assert scalar.is_equal(1.0, 1.1, tol=0.2)


def test_strict_comparisons_exclude_the_band():
    assert not scalar.is_less(1.0, 1.0 + EPS_DEFAULT / 2)
    assert scalar.is_less(1.0, 1.1)
    assert not scalar.is_greater(1.0 + EPS_DEFAULT / 2, 1.0)
    assert scalar.is_greater(1.1, 1.0)


def test_non_strict_comparisons_include_the_band():
    assert scalar.is_less_or_equal(1.0 + EPS_DEFAULT / 2, 1.0)
    assert scalar.is_greater_or_equal(1.0 - EPS_DEFAULT / 2, 1.0)
    assert not scalar.is_less_or_equal(1.1, 1.0)
    assert not scalar.is_greater_or_equal(0.9, 1.0)


@pytest.mark.parametrize("value, zero, neg, le0, pos, ge0", [
    (0.0, True, False, True, False, True),
    (EPS_DEFAULT / 2, True, False, True, False, True),
    (-EPS_DEFAULT / 2, True, False, True, False, True),
    (0.5, False, False, False, True, True),
    (-0.5, False, True, True, False, False),
])
def test_zero_predicates(value, zero, neg, le0, pos, ge0):
    assert scalar.is_zero(value) is zero
    assert scalar.is_less_than_zero(value) is neg
    assert scalar.is_less_or_equal_zero(value) is le0
    assert scalar.is_greater_than_zero(value) is pos
    assert scalar.is_greater_or_equal_zero(value) is ge0


def test_optional_equal():
    assert scalar.optional_equal(None, None)
    assert not scalar.optional_equal(None, 1.0)
    assert not scalar.optional_equal(1.0, None)
    assert scalar.optional_equal(-0.8, -0.8 + EPS_DEFAULT / 4)


@pytest.mark.parametrize("a, b", [
    (1.0, 1.0 + EPS_DEFAULT / 2),
    (1.0, 1.0 + 3 * EPS_DEFAULT),
    (0.0, -EPS_DEFAULT / 3),
    (-3.0, -3.000001),
    (2.5, 2.5),
    (1e6, 1e6 + 1.0),
])
def test_equality_is_symmetric(a, b):
    assert scalar.is_equal(a, b) == scalar.is_equal(b, a)
    assert scalar.is_equal(a, b, tol=0.5) == scalar.is_equal(b, a, tol=0.5)
