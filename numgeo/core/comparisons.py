"""Three-way comparison results, tolerance equality and generic min/max/clamp.

Tie-break rules are part of the contract: ``minimum`` resolves ties to its
right operand and ``maximum`` to its left operand. Both only ever use ``<``,
so they work with any totally ordered type.
"""
from __future__ import annotations

import enum
import functools
import heapq
import itertools
from typing import Any, Callable, Iterable, List, Optional, TypeVar

from .config import get_tolerance_config
from .logging_utils import get_logger
from .numeric import NumberKind, kind_of, promote, clamped_int32

logger = get_logger('numgeo.comparisons')

T = TypeVar('T')


class ComparisonResult(enum.Enum):
    """The result of comparing a left-hand value to a right-hand value."""

    ASCENDING = -1   # left is less than right
    SAME = 0
    DESCENDING = 1   # left is greater than right

    # aliases
    LEFT = 1         # the left item is greater
    GREATER_THAN = 1
    RIGHT = -1       # the right item is greater
    LESS_THAN = -1
    EQUAL = 0

    @property
    def native_value(self) -> int:
        return self.value

    int_value = native_value

    def __int__(self) -> int:
        return self.value

    @classmethod
    def of(cls, raw, target=0) -> 'ComparisonResult':
        """Compare ``raw`` to ``target`` (zero by default) through subtraction.

        The difference ``target - raw`` is computed in integer arithmetic when
        both operands are native integers and in float arithmetic otherwise,
        then clamped into the signed 32-bit range before its sign is read.
        Operands that are neither native integers nor native fractions are
        converted to float; the fallback is logged but never fails.

        The clamped difference keeps its fractional part and is never
        truncated to an integer, so ``of(0.5)`` is DESCENDING rather than SAME.
        A NaN difference compares as SAME.
        """
        kind, left, right = promote(raw, target)
        if kind is NumberKind.OTHER:
            logger.info(
                "no native subtraction of %s from %s; comparing as floats",
                type(target).__name__, type(raw).__name__,
            )
        diff = clamped_int32(right - left)
        if diff > 0:
            return cls.ASCENDING
        if diff < 0:
            return cls.DESCENDING
        return cls.SAME

    @classmethod
    def compare(cls, lhs, rhs) -> 'ComparisonResult':
        """Three-way comparison of any two mutually ordered values using ``<``."""
        if lhs < rhs:
            return cls.ASCENDING
        if rhs < lhs:
            return cls.DESCENDING
        return cls.SAME


Comparator = Callable[[Any, Any], ComparisonResult]


# ---------- min / max / clamp ----------

def _min2(lhs, rhs):
    return lhs if lhs < rhs else rhs


def _max2(lhs, rhs):
    return rhs if lhs < rhs else lhs


def minimum(a, b, *rest):
    """Return the smallest argument; on ties the right-most candidate wins."""
    if not rest:
        return _min2(a, b)
    if len(rest) == 1:
        lowest = rest[0]
    elif len(rest) == 2:
        lowest = _min2(rest[0], rest[1])
    else:
        lowest = functools.reduce(_min2, rest)
    return _min2(a, _min2(b, lowest))


def maximum(a, b, *rest):
    """Return the largest argument; ``a`` is kept unless ``b`` is strictly greater."""
    if not rest:
        return _max2(a, b)
    if len(rest) == 1:
        highest = rest[0]
    elif len(rest) == 2:
        highest = _max2(rest[0], rest[1])
    else:
        highest = functools.reduce(_max2, rest)
    return _max2(a, _max2(b, highest))


def clamp(low, value, high):
    """Return ``value`` limited to ``[low, high]``.

    Defined as ``maximum(low, minimum(value, high))``. When ``low > high`` the
    result follows from that composition (``low`` wins); no error is raised.
    """
    return maximum(low, minimum(value, high))


# ---------- tolerance-aware equality ----------

def _default_tolerance(*values):
    if all(kind_of(v) is NumberKind.INTEGER for v in values):
        return get_tolerance_config().for_kind(NumberKind.INTEGER)
    return get_tolerance_config().for_kind(NumberKind.FRACTION)


def equals(lhs, rhs, tolerance=None) -> bool:
    """Return True iff ``lhs`` and ``rhs`` differ by at most ``tolerance``.

    Parameters
    ----------
    lhs, rhs : number
        Values to compare.
    tolerance : number, optional
        Maximum absolute difference. Defaults to the configured integer
        tolerance (0) when both values are integers and to the fractional
        tolerance (DEFAULT_FRACTION_TOLERANCE) otherwise. A negative
        tolerance is meaningless and is not checked.
    """
    if tolerance is None:
        tolerance = _default_tolerance(lhs, rhs)
    return abs(rhs - lhs) <= tolerance


def is_between(value, a, b, tolerance=None) -> bool:
    """Return True if ``value`` lies strictly between ``a`` and ``b`` (in either order).

    The tolerance widens the test by shifting ``value`` itself:
    ``(value + tolerance) > minimum(a, b) and (value - tolerance) < maximum(a, b)``,
    so with a zero tolerance the bounds are excluded.
    """
    if tolerance is None:
        tolerance = _default_tolerance(value, a, b)
    largest = maximum(a, b)
    smallest = minimum(a, b)
    return (value + tolerance) > smallest and (value - tolerance) < largest


# ---------- comparators ----------

def natural_order(lhs, rhs) -> ComparisonResult:
    """Comparator following the values' own ordering."""
    return ComparisonResult.compare(lhs, rhs)


def _null_first(comparator: Comparator) -> Callable[[Any, Any], int]:
    def _cmp(lhs, rhs) -> int:
        if lhs is None and rhs is None:
            return ComparisonResult.SAME.native_value
        if lhs is None:
            return ComparisonResult.RIGHT.native_value
        if rhs is None:
            return ComparisonResult.LEFT.native_value
        return comparator(lhs, rhs).native_value
    return _cmp


def sorted_with(items: Iterable[T], comparator: Comparator) -> List[T]:
    """Return ``items`` sorted by a ComparisonResult comparator; ``None`` sorts first."""
    return sorted(items, key=functools.cmp_to_key(_null_first(comparator)))


class ComparisonQueue:
    """Priority queue ordered by a ComparisonResult comparator (smallest first).

    Items that compare SAME are served in insertion order.
    """

    def __init__(self, comparator: Comparator, items: Optional[Iterable[Any]] = None):
        self._key = functools.cmp_to_key(_null_first(comparator))
        self._counter = itertools.count()
        self._heap = []
        for item in items or ():
            self.push(item)

    def push(self, item) -> None:
        heapq.heappush(self._heap, (self._key(item), next(self._counter), item))

    def pop(self):
        """Remove and return the smallest item; raises IndexError when empty."""
        return heapq.heappop(self._heap)[2]

    def peek(self):
        return self._heap[0][2] if self._heap else None

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)


def sorted_queue(items: Iterable[T], comparator: Comparator) -> ComparisonQueue:
    return ComparisonQueue(comparator, items)


__all__ = [
    'ComparisonResult', 'Comparator',
    'minimum', 'maximum', 'clamp',
    'equals', 'is_between',
    'natural_order', 'sorted_with', 'ComparisonQueue', 'sorted_queue',
]
