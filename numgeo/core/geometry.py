"""Points, line segments and the segment intersection oracle.

The oracle classifies how two segments relate. Segments that only meet at a
shared endpoint are treated as adjacent, not intersecting, so consecutive
segments of a polyline report NONE unless they fold back onto each other.
"""
from __future__ import annotations

import enum
import math
from typing import NamedTuple, Optional, Union

from .comparisons import equals, minimum, maximum
from .config import get_tolerance_config
from .numeric import NumberKind, kind_of

Number = Union[int, float]

__all__ = [
	'Point', 'LineSegment', 'IntersectionDescription',
	'as_point', 'orient', 'point_kind', 'describe_intersection',
]


class Point(NamedTuple):
	x: Number
	y: Number


class IntersectionDescription(enum.Enum):
	NONE = 'none'                # disjoint, or adjacent through a shared endpoint
	CROSSING = 'crossing'        # proper crossing at one interior point of both
	TOUCHING = 'touching'        # an endpoint of one lies on the other
	OVERLAPPING = 'overlapping'  # collinear with a shared stretch of positive length


class LineSegment(NamedTuple):
	start: Point
	end: Point

	def describe_intersection(self, other: 'LineSegment', tolerance: Optional[Number] = None) -> IntersectionDescription:
		return describe_intersection(self, other, tolerance)


def as_point(p) -> Point:
	"""Return ``p`` as a Point; accepts Points, 2-tuples and numpy rows."""
	if isinstance(p, Point):
		return p
	x, y = p
	return Point(x, y)


def orient(a, b, c):
	"""2D orientation (signed area * 2) for points a,b,c.

	Returns a positive value when (a,b,c) are counter-clockwise, negative when clockwise,
	and zero when colinear. Integer inputs give an exact integer result.
	"""
	return (b[0]-a[0])*(c[1]-a[1]) - (b[1]-a[1])*(c[0]-a[0])


def point_kind(*points) -> NumberKind:
	"""INTEGER if every coordinate of every point is an integer, else FRACTION."""
	for p in points:
		if kind_of(p[0]) is not NumberKind.INTEGER or kind_of(p[1]) is not NumberKind.INTEGER:
			return NumberKind.FRACTION
	return NumberKind.INTEGER


def _same_point(p, q, tol) -> bool:
	return equals(p[0], q[0], tol) and equals(p[1], q[1], tol)


def _on_line(o, a, b, tol) -> bool:
	# o is twice the triangle area over a-b; dividing by |ab| gives the distance to the line
	if not tol:
		return o == 0
	return abs(o) <= tol * math.hypot(b[0] - a[0], b[1] - a[1])


def _within(p, a, b, tol) -> bool:
	# inclusive bounding-box test of p against segment a-b
	return (minimum(a[0], b[0]) - tol <= p[0] <= maximum(a[0], b[0]) + tol
		and minimum(a[1], b[1]) - tol <= p[1] <= maximum(a[1], b[1]) + tol)


def _shares_endpoint(p1, p2, p3, p4, tol) -> bool:
	return (_same_point(p1, p3, tol) or _same_point(p1, p4, tol)
		or _same_point(p2, p3, tol) or _same_point(p2, p4, tol))


def _describe_collinear(p1, p2, p3, p4, tol) -> IntersectionDescription:
	xs = (p1[0], p2[0], p3[0], p4[0])
	ys = (p1[1], p2[1], p3[1], p4[1])
	# project onto the axis along which the four points spread the most
	axis = 0 if (max(xs) - min(xs)) >= (max(ys) - min(ys)) else 1
	lo = maximum(minimum(p1[axis], p2[axis]), minimum(p3[axis], p4[axis]))
	hi = minimum(maximum(p1[axis], p2[axis]), maximum(p3[axis], p4[axis]))
	if hi - lo > tol:
		return IntersectionDescription.OVERLAPPING
	if lo - hi > tol:
		return IntersectionDescription.NONE
	if _shares_endpoint(p1, p2, p3, p4, tol):
		return IntersectionDescription.NONE
	return IntersectionDescription.TOUCHING


def describe_intersection(first, second, tolerance: Optional[Number] = None) -> IntersectionDescription:
	"""Classify how segment ``first`` relates to segment ``second``.

	Parameters accept LineSegments or any pair of point-likes. ``tolerance``
	is a distance: the largest offset of a point from the other segment's
	line that still counts as collinear, and the snapping distance for endpoint
	comparisons. Orientation values are areas and are never compared to it
	directly. It defaults to the configured tolerance for the coordinates'
	kind (exact for integer segments).
	"""
	p1, p2 = as_point(first[0]), as_point(first[1])
	p3, p4 = as_point(second[0]), as_point(second[1])
	if tolerance is None:
		tolerance = get_tolerance_config().for_kind(point_kind(p1, p2, p3, p4))
	o1 = orient(p1, p2, p3); o2 = orient(p1, p2, p4)
	o3 = orient(p3, p4, p1); o4 = orient(p3, p4, p2)
	z1 = _on_line(o1, p1, p2, tolerance); z2 = _on_line(o2, p1, p2, tolerance)
	z3 = _on_line(o3, p3, p4, tolerance); z4 = _on_line(o4, p3, p4, tolerance)
	if z1 and z2 and z3 and z4:
		return _describe_collinear(p1, p2, p3, p4, tolerance)
	# Non-collinear segments meet in at most one point; a shared endpoint is adjacency
	if _shares_endpoint(p1, p2, p3, p4, tolerance):
		return IntersectionDescription.NONE
	if not (z1 or z2 or z3 or z4) and (o1 > 0) != (o2 > 0) and (o3 > 0) != (o4 > 0):
		return IntersectionDescription.CROSSING
	if ((z1 and _within(p3, p1, p2, tolerance)) or (z2 and _within(p4, p1, p2, tolerance))
			or (z3 and _within(p1, p3, p4, tolerance)) or (z4 and _within(p2, p3, p4, tolerance))):
		return IntersectionDescription.TOUCHING
	return IntersectionDescription.NONE
