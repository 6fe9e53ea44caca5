"""Tolerant scalar comparisons.

All geometry decisions in curvekit go through these helpers instead of
native float ``==`` / ``<``. Each takes an absolute tolerance ``tol``
(default ``EPS_DEFAULT``).

The comparisons are not a total order inside the tolerance band: two values
a little under ``2 * tol`` apart can each be "equal" to a value between them
without being equal to each other. Predicates built on top are derived from
exactly these primitives so that they stay consistent with one another.
"""
from __future__ import annotations

from typing import Optional

from .constants import EPS_DEFAULT

__all__ = [
    'is_equal', 'is_less', 'is_less_or_equal', 'is_greater', 'is_greater_or_equal',
    'is_zero', 'is_less_than_zero', 'is_less_or_equal_zero',
    'is_greater_than_zero', 'is_greater_or_equal_zero', 'optional_equal',
]


def is_equal(a: float, b: float, tol: float = EPS_DEFAULT) -> bool:
    return abs(a - b) <= tol


def is_less(a: float, b: float, tol: float = EPS_DEFAULT) -> bool:
    return (b - a) > tol


def is_greater(a: float, b: float, tol: float = EPS_DEFAULT) -> bool:
    return (a - b) > tol


def is_less_or_equal(a: float, b: float, tol: float = EPS_DEFAULT) -> bool:
    return is_equal(a, b, tol) or is_less(a, b, tol)


def is_greater_or_equal(a: float, b: float, tol: float = EPS_DEFAULT) -> bool:
    return is_equal(a, b, tol) or is_greater(a, b, tol)


def is_zero(a: float, tol: float = EPS_DEFAULT) -> bool:
    return is_equal(a, 0.0, tol)


def is_less_than_zero(a: float, tol: float = EPS_DEFAULT) -> bool:
    return is_less(a, 0.0, tol)


def is_less_or_equal_zero(a: float, tol: float = EPS_DEFAULT) -> bool:
    return is_less_or_equal(a, 0.0, tol)


def is_greater_than_zero(a: float, tol: float = EPS_DEFAULT) -> bool:
    return is_greater(a, 0.0, tol)


def is_greater_or_equal_zero(a: float, tol: float = EPS_DEFAULT) -> bool:
    return is_greater_or_equal(a, 0.0, tol)


def optional_equal(a: Optional[float], b: Optional[float], tol: float = EPS_DEFAULT) -> bool:
    """Equality for optional scalars such as gradients (None means vertical)."""
    if a is None or b is None:
        return a is None and b is None
    return is_equal(a, b, tol)
