import logging
from typing import List, Optional, Sequence

from .config import JARVIS_NUDGE
from .errors import HullCancelledError, HullConstructionError
from .events import EventKind, NullTrace
from .geometry import Point, as_points, degenerate_hull, distance, orientation, turn_angle

logger = logging.getLogger(__name__)


def _same_ray(o, a, b):
    # b lies on the ray from o through a
    dot = (a[0] - o[0]) * (b[0] - o[0]) + (a[1] - o[1]) * (b[1] - o[1])
    return orientation(o, a, b) == 0 and dot > 0


def find_next_origin(prev_o: Point, o: Point, points: Sequence[Point], trace=None,
                     back_angle: float = 360.0) -> Optional[Point]:
    """
    Pick the point with the smallest turning angle at `o`.

    Ties on the angle go to the point farther from `o`, so collinear points
    between two hull vertices are skipped. A point on the ray from `o` through
    the current best is a tie even when rounding separates the two angles.
    Points straight back towards `prev_o` get `back_angle`; the default of 360
    keeps them out. Returns None if no point qualifies.
    """
    trace = trace if trace is not None else NullTrace()
    best_angle = 360
    best_point = None
    for p in points:
        if p == o or p == prev_o:
            continue
        angle = turn_angle(prev_o, o, p, back_angle)
        if best_point is not None and _same_ray(o, best_point, p):
            improves = distance(o, p) > distance(o, best_point)
        else:
            improves = angle < best_angle
        if improves:
            if best_point is None:
                trace.emit(EventKind.ADD_SOLID_EDGE, o, p)
            else:
                # keep the old candidate edge up until the new one replaces it
                trace.emit(EventKind.ADD_DASHED_EDGE, o, p)
                trace.emit(EventKind.REMOVE_SOLID_EDGE, o, best_point)
                trace.emit(EventKind.ADD_SOLID_EDGE, o, p)
                trace.emit(EventKind.REMOVE_DASHED_EDGES)
            best_angle = angle
            best_point = p
        else:
            trace.emit(EventKind.ADD_DASHED_EDGE, o, p)
            trace.emit(EventKind.REMOVE_DASHED_EDGES)
    return best_point


def jarvis_march(points: Sequence[Point], trace=None, nudge: float = JARVIS_NUDGE,
                 stop_evt=None) -> List[Point]:
    """Gift wrapping from the lowest point; returns the hull counter-clockwise."""
    trace = trace if trace is not None else NullTrace()
    points = as_points(points)
    degenerate = degenerate_hull(points)
    if degenerate is not None:
        for p in degenerate:
            trace.emit(EventKind.MARK_HULL, p)
        return degenerate

    # first point with the smallest y
    origin = points[0]
    for p in points:
        if origin.y > p.y:
            origin = p
    logger.debug("jarvis march starts at %s", origin)

    trace.emit(EventKind.MARK_CURRENT, origin)
    prev_o = Point(origin.x + nudge, origin.y)
    # straight back from the virtual origin runs along the bottom edge, the best first turn
    back_angle = 0.0
    hull = [origin]
    while True:
        if stop_evt is not None and stop_evt.is_set():
            raise HullCancelledError("jarvis march cancelled")
        candidate = find_next_origin(prev_o, origin, points, trace, back_angle)
        if candidate is None:
            raise HullConstructionError(f"no point to wrap to from {origin}")
        trace.emit(EventKind.MARK_HULL, origin)
        if candidate in hull:  # Completed the loop
            trace.emit(EventKind.MARK_HULL, candidate)
            break
        trace.emit(EventKind.MARK_CURRENT, candidate)
        hull.append(candidate)
        if len(hull) > len(points):
            raise HullConstructionError("wrapping did not return to the start point")
        prev_o, origin = origin, candidate
        back_angle = 360.0

    logger.debug("jarvis march found %d hull points", len(hull))
    return hull
