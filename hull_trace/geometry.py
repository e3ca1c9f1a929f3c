"""
2D point type and the small numeric helpers shared by both hull builders.

Points are plain immutable tuples, so `x, y = p` keeps working everywhere and
two points are equal exactly when both coordinates are.
"""
import math
import numbers
from fractions import Fraction
from typing import Iterable, List, NamedTuple, Optional, Sequence

from .errors import InvalidPointError, InvalidSlopeDivisionError


class Point(NamedTuple):
    x: float
    y: float

    def __repr__(self):
        return f"({self.x}, {self.y})"


def as_point(obj) -> Point:
    """Coerce an (x, y) pair into a Point, rejecting anything that is not two finite numbers."""
    if isinstance(obj, Point):
        return obj
    try:
        x, y = obj
    except (TypeError, ValueError):
        raise InvalidPointError(f"expected an (x, y) pair, got {obj!r}") from None
    for value in (x, y):
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise InvalidPointError(f"coordinates must be numbers, got {obj!r}")
        if not math.isfinite(value):
            raise InvalidPointError(f"coordinates must be finite, got {obj!r}")
    return Point(x, y)


def as_points(points: Iterable) -> List[Point]:
    return [as_point(p) for p in points]


def turn_angle(prev_o, o, p, back_angle: float = 360.0) -> float:
    """
    Turning angle at `o` when going prev_o -> o -> p, in degrees.

    atan2 of the cross and dot products gives the signed turn in (-180, 180);
    adding 180 maps it to (0, 360) where small values are sharp right turns
    and the value grows counter-clockwise. A point straight back towards
    prev_o turns neither way and gets `back_angle`, whatever the sign of the
    zero cross product.
    """
    d_ax = o[0] - prev_o[0]
    d_ay = o[1] - prev_o[1]
    d_bx = p[0] - o[0]
    d_by = p[1] - o[1]
    cross = d_ax * d_by - d_ay * d_bx
    dot = d_ax * d_bx + d_ay * d_by
    if cross == 0 and dot < 0:
        return back_angle
    return math.degrees(math.atan2(cross, dot)) + 180


def distance(p1, p2) -> float:
    return math.hypot(p2[0] - p1[0], p2[1] - p1[1])


def orientation(p1, p2, p3) -> int:
    # +1 counter-clockwise, -1 clockwise, 0 collinear
    x1, y1 = p1
    x2, y2 = p2
    x3, y3 = p3
    d = (x2 - x1) * (y3 - y1) - (y2 - y1) * (x3 - x1)
    if d > 0:
        return 1
    elif d < 0:
        return -1
    return 0


def all_collinear(points: Sequence) -> bool:
    """True when every point lies on the line through the first two distinct points."""
    distinct = list(dict.fromkeys(points))
    if len(distinct) < 3:
        return True
    a, b = distinct[0], distinct[1]
    return all(orientation(a, b, p) == 0 for p in distinct[2:])


def degenerate_hull(points: Sequence[Point]) -> Optional[List[Point]]:
    """
    Hull of an input with fewer than 3 distinct points or no turn at all.

    Returns the distinct points (at most the two segment extremes, lower y
    first, x breaking ties) or None when the input spans a proper polygon.
    """
    distinct = list(dict.fromkeys(points))
    if len(distinct) >= 3 and not all_collinear(distinct):
        return None
    if len(distinct) <= 1:
        return distinct
    ends = [min(distinct), max(distinct)]
    return sorted(ends, key=lambda p: (p[1], p[0]))


def reflect(point) -> Point:
    """Reflect a point through the origin."""
    return Point(-point[0], -point[1])


def reflect_all(points: Iterable) -> List[Point]:
    return [reflect(p) for p in points]


def integer_division(dividend, divisor) -> int:
    return math.floor(dividend / divisor)


def slope(p1, p2) -> Fraction:
    """Exact slope of the line through two points with different x."""
    if p1[0] == p2[0]:
        raise InvalidSlopeDivisionError(f"vertical pair {p1}, {p2} has no slope")
    return (Fraction(p1[1]) - Fraction(p2[1])) / (Fraction(p1[0]) - Fraction(p2[0]))


def intercept(point, slp) -> Fraction:
    """y-intercept of the line with slope `slp` through `point`, computed exactly."""
    return Fraction(point[1]) - slp * Fraction(point[0])


def signed_area(polygon: Sequence) -> float:
    # shoelace; positive for counter-clockwise polygons in a y-up plane
    n = len(polygon)
    total = 0
    for i in range(n):
        x1, y1 = polygon[i]
        x2, y2 = polygon[(i + 1) % n]
        total += x1 * y2 - x2 * y1
    return total / 2


def orient_counter_clockwise(hull: Sequence, start=None) -> List[Point]:
    """Reverse a clockwise polygon and rotate it to begin at `start` (if it is a vertex)."""
    hull = list(hull)
    if signed_area(hull) < 0:
        hull.reverse()
    if start is not None and start in hull:
        i = hull.index(start)
        hull = hull[i:] + hull[:i]
    return hull
