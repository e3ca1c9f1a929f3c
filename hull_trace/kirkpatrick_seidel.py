"""
Kirkpatrick-Seidel convex hull.

The upper hull is built by recursively finding the bridge, the hull edge that
crosses the median x of the remaining points. The lower hull is the upper
hull of the points reflected through the origin, reflected back. With
`flipped=True` the functions work on reflected points but emit events in the
caller's original coordinates.
"""
import logging
from typing import List, Sequence, Tuple

from .errors import HullCancelledError
from .events import Bucket, EventKind, NullTrace
from .geometry import (Point, as_points, degenerate_hull, intercept, integer_division,
                       reflect, reflect_all, slope)
from .selection import kth_smallest_point, kth_smallest_slope, lower_median_index, pair_up

logger = logging.getLogger(__name__)


def _shown(point, flipped):
    return reflect(point) if flipped else point


def _check_stop(stop_evt):
    if stop_evt is not None and stop_evt.is_set():
        raise HullCancelledError("kirkpatrick-seidel cancelled")


def find_bridge(points: Sequence[Point], median_x: float, flipped: bool = False,
                trace=None, stop_evt=None) -> Tuple[Point, Point]:
    """
    Find the upper-hull edge (left, right) with left.x <= median_x <= right.x.

    Every round pairs the points up, takes the lower median of the pair slopes
    and looks at which points touch the supporting line of that slope. If they
    straddle the median they are the bridge; otherwise one point of every pair
    on the wrong side of the median slope is discarded and the search recurses.
    """
    trace = trace if trace is not None else NullTrace()
    _check_stop(stop_evt)
    if not points:
        raise ValueError("find_bridge() of an empty point set")
    if len(points) <= 2:
        return tuple(sorted(points)) if len(points) == 2 else (points[0], points[0])

    pairs, leftover = pair_up(points)
    for a, b in pairs:
        trace.emit(EventKind.ADD_DASHED_EDGE, _shown(a, flipped), _shown(b, flipped))

    candidates = {}
    if leftover is not None:
        candidates[leftover] = None

    # vertical pairs have no slope: the upper point survives, the lower one is hidden
    sloped, slopes = [], []
    for a, b in pairs:
        if a.x == b.x:
            upper, lower = (a, b) if a.y > b.y else (b, a)
            candidates[upper] = None
            trace.emit(EventKind.HIDE_POINTS, [_shown(lower, flipped)])
        else:
            sloped.append((a, b))
            slopes.append(slope(a, b))

    if not slopes:
        trace.emit(EventKind.CLEAR_TEMPORARY)
        return find_bridge(list(candidates), median_x, flipped, trace, stop_evt)

    med_slope = kth_smallest_slope(slopes, lower_median_index(len(slopes)))
    small, equal, large = [], [], []
    for pair, s in zip(sloped, slopes):
        if s < med_slope:
            small.append(pair)
            bucket = Bucket.LESS
        elif s > med_slope:
            large.append(pair)
            bucket = Bucket.GREATER
        else:
            equal.append(pair)
            bucket = Bucket.EQUAL
        trace.emit(EventKind.HIGHLIGHT_BUCKET, _shown(pair[0], flipped), _shown(pair[1], flipped), bucket)

    # supporting line: the highest line of slope med_slope touching the set
    max_intercept = None
    max_point = None
    for p in points:
        c = intercept(p, med_slope)
        if max_intercept is None or c > max_intercept:
            max_intercept, max_point = c, p
    trace.emit(EventKind.DRAW_SUPPORTING_LINE, _shown(max_point, flipped), float(med_slope))

    max_set = [p for p in points if intercept(p, med_slope) == max_intercept]
    left, right = min(max_set), max(max_set)
    trace.emit(EventKind.MARK_BRIDGE, _shown(left, flipped), _shown(right, flipped))

    if left.x <= median_x <= right.x:
        logger.debug("bridge %s-%s over x=%s", left, right, median_x)
        return left, right

    if right.x <= median_x:
        # bridge lies to the right, so its slope is below med_slope
        for a, b in large + equal:
            candidates[b] = None
            trace.emit(EventKind.HIDE_POINTS, [_shown(a, flipped)])
        for a, b in small:
            candidates[a] = None
            candidates[b] = None
    else:
        for a, b in small + equal:
            candidates[a] = None
            trace.emit(EventKind.HIDE_POINTS, [_shown(b, flipped)])
        for a, b in large:
            candidates[a] = None
            candidates[b] = None

    trace.emit(EventKind.CLEAR_TEMPORARY)
    logger.debug("bridge search keeps %d of %d points", len(candidates), len(points))
    return find_bridge(list(candidates), median_x, flipped, trace, stop_evt)


def connect(p1: Point, p2: Point, points: Sequence[Point], flipped: bool = False,
            trace=None, stop_evt=None) -> List[Point]:
    """Upper-hull chain from p1 to p2, both included."""
    trace = trace if trace is not None else NullTrace()
    _check_stop(stop_evt)
    if p1 == p2:
        trace.emit(EventKind.MARK_HULL, _shown(p1, flipped))
        return [p1]

    points = sorted(points)
    half = integer_division(len(points), 2)
    left_max = kth_smallest_point(points, half - 1)
    right_min = kth_smallest_point(points, half)
    median_x = (left_max.x + right_min.x) / 2
    trace.emit(EventKind.DRAW_MEDIAN_LINE, -median_x if flipped else median_x)

    left, right = find_bridge(points, median_x, flipped, trace, stop_evt)
    trace.emit(EventKind.CLEAR_TEMPORARY)
    trace.emit(EventKind.ADD_SOLID_EDGE, _shown(left, flipped), _shown(right, flipped))

    small = dict.fromkeys([left] + [p for p in points if p.x < left.x])
    large = dict.fromkeys([right] + [p for p in points if p.x > right.x])
    dropped = [_shown(p, flipped) for p in points if p not in small and p not in large]
    trace.emit(EventKind.HIDE_POINTS, dropped)

    chain = connect(p1, left, list(small), flipped, trace, stop_evt)
    rest = connect(right, p2, list(large), flipped, trace, stop_evt)
    if left == right:
        # a single point touched the median line; it closes one chain and opens the other
        rest = rest[1:]
    return chain + rest


def _extremes(points):
    # leftmost and rightmost, x ties going to the larger y
    left_most = right_most = points[0]
    for p in points[1:]:
        if p.x < left_most.x:
            left_most = p
        if p.x > right_most.x:
            right_most = p
    for p in points:
        if p.x == left_most.x and p.y > left_most.y:
            left_most = p
        if p.x == right_most.x and p.y > right_most.y:
            right_most = p
    return left_most, right_most


def upper_hull(points: Sequence[Point], flipped: bool = False, trace=None,
               stop_evt=None) -> List[Point]:
    trace = trace if trace is not None else NullTrace()
    left_most, right_most = _extremes(points)
    trace.emit(EventKind.MARK_CURRENT, _shown(left_most, flipped))
    trace.emit(EventKind.MARK_CURRENT, _shown(right_most, flipped))

    # anything below both extremes can never be on the upper hull
    min_y = min(left_most.y, right_most.y)
    kept = [left_most]
    kept += [p for p in points if left_most.x < p.x < right_most.x and p.y >= min_y]
    kept.append(right_most)
    kept_set = set(kept)
    trace.emit(EventKind.HIDE_POINTS, [_shown(p, flipped) for p in points if p not in kept_set])

    return connect(left_most, right_most, kept, flipped, trace, stop_evt)


def _terminal_run(points, x):
    return sorted((p for p in points if p.x == x), key=lambda p: p.y)


def convex_hull(points: Sequence[Point], trace=None, stop_evt=None) -> List[Point]:
    """
    Upper hull left to right followed by lower hull right to left.

    Shared extreme vertices appear once.
    """
    trace = trace if trace is not None else NullTrace()
    points = as_points(points)
    degenerate = degenerate_hull(points)
    if degenerate is not None:
        for p in degenerate:
            trace.emit(EventKind.MARK_HULL, p)
        return degenerate

    upper = upper_hull(points, False, trace, stop_evt)
    trace.emit(EventKind.REVEAL_ALL)
    trace.emit(EventKind.CLEAR_TEMPORARY)
    lower = reflect_all(upper_hull(reflect_all(points), True, trace, stop_evt))
    trace.emit(EventKind.REVEAL_ALL)
    logger.debug("upper hull %s, lower hull %s", upper, lower)

    xs = [p.x for p in points]
    for x in (min(xs), max(xs)):
        run = _terminal_run(points, x)
        if len(run) >= 2:
            trace.emit(EventKind.FINALIZE_TERMINAL_RUN, run)
    trace.emit(EventKind.CLEAR_TEMPORARY)

    if upper[-1] == lower[0]:
        upper.pop()
    if upper and upper[0] == lower[-1]:
        lower.pop()
    return upper + lower
