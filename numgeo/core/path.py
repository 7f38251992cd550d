"""Immutable polygonal paths with adjacent-segment self-intersection checks.

A path is an ordered tuple of points plus a flag telling whether the last
point connects back to the first. Appending returns a new path; the receiver
is never modified, so paths can be shared freely between readers.

Self-intersection is tested locally: only the two segments meeting at each
interior point are compared. Crossings between segments that are not
neighbours in the sequence are not detected.
"""
from __future__ import annotations

import operator
from typing import Callable, Iterable, List, Optional, Sequence, Tuple, TypeVar

import numpy as np

from .config import get_tolerance_config
from .geometry import IntersectionDescription, LineSegment, Point, as_point, describe_intersection
from .logging_utils import get_logger
from .numeric import NumberKind, fraction_value

logger = get_logger('numgeo.path')

T = TypeVar('T')


def first_comparing_triads(items: Sequence[T], predicate: Callable[[T, T, T], bool]) -> Optional[Tuple[T, T, T]]:
    """Return the first window ``(items[i-1], items[i], items[i+1])`` accepted by ``predicate``.

    Sequences shorter than three items have no window and yield ``None``.
    """
    for i in range(1, len(items) - 1):
        triad = (items[i - 1], items[i], items[i + 1])
        if predicate(*triad):
            return triad
    return None


class Path:
    """An ordered sequence of points, optionally closed."""

    __slots__ = ('_points', '_is_closed')

    def __init__(self, points: Iterable = (), is_closed: bool = False):
        self._points = tuple(self._coerce_point(p) for p in points)
        self._is_closed = bool(is_closed)

    @staticmethod
    def _coerce_point(p) -> Point:
        return as_point(p)

    @property
    def points(self) -> Tuple[Point, ...]:
        return self._points

    @property
    def is_closed(self) -> bool:
        """Whether the last point connects to the first."""
        return self._is_closed

    def segments(self) -> List[LineSegment]:
        """Segments between consecutive points, plus the closing segment for closed paths."""
        pts = self._points
        segs = [LineSegment(pts[i], pts[i + 1]) for i in range(len(pts) - 1)]
        if self._is_closed and len(pts) > 1:
            segs.append(LineSegment(pts[-1], pts[0]))
        return segs

    def to_array(self) -> np.ndarray:
        """Return the points as an (N, 2) array."""
        if not self._points:
            return np.empty((0, 2))
        return np.asarray(self._points)

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self):
        return iter(self._points)

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._points == other._points and self._is_closed == other._is_closed

    def __hash__(self):
        return hash((type(self).__name__, self._points, self._is_closed))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._points)!r}, is_closed={self._is_closed})"


class ComputablePath(Path):
    """Path whose coordinates support the segment intersection oracle.

    Subclasses set ``kind`` and convert incoming coordinates to it.
    """

    __slots__ = ()
    kind: NumberKind = NumberKind.FRACTION

    @property
    def tolerance(self):
        return get_tolerance_config().for_kind(self.kind)

    def _triad_intersects(self, left: Point, current: Point, right: Point) -> bool:
        desc = describe_intersection((left, current), (current, right), self.tolerance)
        if desc is IntersectionDescription.NONE:
            return False
        logger.debug("adjacent segments %s-%s-%s intersect: %s", left, current, right, desc.value)
        return True

    @property
    def intersects_self(self) -> bool:
        """True if any two adjacent segments touch, cross or overlap beyond their shared point."""
        return first_comparing_triads(self._points, self._triad_intersects) is not None

    def self_intersection_indices(self) -> List[int]:
        """Indices of every interior point whose two adjacent segments intersect."""
        pts = self._points
        return [i for i in range(1, len(pts) - 1) if self._triad_intersects(pts[i - 1], pts[i], pts[i + 1])]

    def plus(self, point) -> 'ComputablePath':
        """Return a new path with ``point`` appended; ``is_closed`` is kept."""
        return type(self)(self._points + (point,), is_closed=self._is_closed)

    __add__ = plus


class IntegerPath(ComputablePath):
    __slots__ = ()
    kind = NumberKind.INTEGER

    @staticmethod
    def _coerce_point(p) -> Point:
        x, y = as_point(p)
        try:
            return Point(operator.index(x), operator.index(y))
        except TypeError:
            raise TypeError(f"IntegerPath requires integer coordinates, got ({x!r}, {y!r})") from None


class FractionPath(ComputablePath):
    __slots__ = ()
    kind = NumberKind.FRACTION

    @staticmethod
    def _coerce_point(p) -> Point:
        x, y = as_point(p)
        return Point(fraction_value(x), fraction_value(y))


Int64Path = IntegerPath
IntPath = IntegerPath
Float64Path = FractionPath
FloatPath = FractionPath

__all__ = [
    'Path', 'ComputablePath', 'IntegerPath', 'FractionPath',
    'Int64Path', 'IntPath', 'Float64Path', 'FloatPath',
    'first_comparing_triads',
]
