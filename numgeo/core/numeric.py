"""Numeric kind probe used by mixed-representation comparisons.

Numbers are tagged as native integers, native fractions (binary floating
point) or "other" (anything else convertible with ``float()``, e.g.
``fractions.Fraction``, ``decimal.Decimal`` or an ``Averager``). Arithmetic
between two tagged values follows explicit promotion rules:

    INTEGER  op INTEGER   -> integer arithmetic
    FRACTION op any       -> float arithmetic
    OTHER    op any       -> float arithmetic (fallback, reported by callers)
"""
from __future__ import annotations

import enum
import math
import numbers
from typing import Tuple, Union

import numpy as np

from .constants import INT32_MIN, INT32_MAX

Real = Union[int, float]


class NumberKind(enum.Enum):
    INTEGER = 'integer'
    FRACTION = 'fraction'
    OTHER = 'other'


def kind_of(value) -> NumberKind:
    """Classify ``value``; ``bool`` and numpy integer scalars count as integers."""
    if isinstance(value, numbers.Integral):
        return NumberKind.INTEGER
    if isinstance(value, (float, np.floating)):
        return NumberKind.FRACTION
    return NumberKind.OTHER


def is_native_integer(value) -> bool:
    return kind_of(value) is NumberKind.INTEGER


def is_native_fraction(value) -> bool:
    return kind_of(value) is NumberKind.FRACTION


def integer_value(value) -> int:
    """Return ``value`` as a Python int (truncating fractional values toward zero)."""
    if isinstance(value, numbers.Integral):
        return int(value)
    return int(fraction_value(value))


def fraction_value(value) -> float:
    """Return ``value`` as a Python float.

    Raises
    ------
    TypeError
        If ``value`` does not define a float conversion.
    """
    if not hasattr(type(value), '__float__'):
        raise TypeError(f"cannot interpret {type(value).__name__} as a number")
    return float(value)


def promote(left, right) -> Tuple[NumberKind, Real, Real]:
    """Convert two numbers to a common representation.

    Returns the kind the arithmetic will be carried out in and both operands
    converted to it. ``NumberKind.OTHER`` means at least one operand was not a
    native number and both were converted to float.
    """
    lk = kind_of(left)
    rk = kind_of(right)
    if lk is NumberKind.INTEGER and rk is NumberKind.INTEGER:
        return NumberKind.INTEGER, int(left), int(right)
    if NumberKind.OTHER in (lk, rk):
        return NumberKind.OTHER, fraction_value(left), fraction_value(right)
    return NumberKind.FRACTION, fraction_value(left), fraction_value(right)


def clamped_int32(value: Real) -> Real:
    """Clamp ``value`` into the signed 32-bit range.

    Integers stay integers and floats stay floats (no truncation toward zero,
    so a difference of 0.5 keeps its sign). NaN is returned unchanged.
    """
    if isinstance(value, float) and math.isnan(value):
        return value
    if value < INT32_MIN:
        return INT32_MIN if isinstance(value, int) else float(INT32_MIN)
    if value > INT32_MAX:
        return INT32_MAX if isinstance(value, int) else float(INT32_MAX)
    return value


__all__ = [
    'NumberKind', 'kind_of', 'is_native_integer', 'is_native_fraction',
    'integer_value', 'fraction_value', 'promote', 'clamped_int32',
]
