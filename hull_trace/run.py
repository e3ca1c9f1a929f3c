"""
Entry points used by renderers: each call builds one hull and returns it
together with the full, ordered event trace of how it was found.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence

from .config import HullConfig
from .errors import DegenerateCollinearInputError, InsufficientPointsError
from .events import Event, EventTrace
from .geometry import Point, as_points, degenerate_hull, orient_counter_clockwise, orientation
from .jarvis_march import jarvis_march
from .kirkpatrick_seidel import convex_hull

logger = logging.getLogger(__name__)


class Degeneracy(Enum):
    INSUFFICIENT_POINTS = "insufficient-points"
    COLLINEAR = "collinear"


@dataclass(frozen=True)
class HullResult:
    hull: List[Point]
    events: List[Event]
    degeneracy: Optional[Degeneracy] = None

    # unpacks as (hull, events)
    def __iter__(self):
        return iter((self.hull, self.events))


def classify(points: Sequence[Point]) -> Optional[Degeneracy]:
    if len(set(points)) < 3:
        return Degeneracy.INSUFFICIENT_POINTS
    if degenerate_hull(points) is not None:
        return Degeneracy.COLLINEAR
    return None


def _prepare(points, config):
    points = as_points(points)
    degeneracy = classify(points)
    if degeneracy is not None and config.strict:
        if degeneracy is Degeneracy.INSUFFICIENT_POINTS:
            raise InsufficientPointsError(len(set(points)))
        raise DegenerateCollinearInputError(tuple(degenerate_hull(points)))
    return points, degeneracy


def _lowest_vertex(hull, points):
    # lowest hull vertex, ties going to the one met first in the input
    first_seen = {}
    for i, p in enumerate(points):
        first_seen.setdefault(p, i)
    return min(hull, key=lambda p: (p.y, first_seen[p]))


def run_jarvis_march(points, config: Optional[HullConfig] = None, stop_evt=None) -> HullResult:
    """Gift-wrapped hull, counter-clockwise from the lowest vertex."""
    config = config or HullConfig()
    points, degeneracy = _prepare(points, config)
    trace = EventTrace()
    hull = jarvis_march(points, trace, nudge=config.nudge, stop_evt=stop_evt)
    if degeneracy is None:
        # the start may sit inside the bottom edge rather than at a corner
        if orientation(hull[-1], hull[0], hull[1]) == 0:
            hull = hull[1:]
        hull = orient_counter_clockwise(hull, start=_lowest_vertex(hull, points))
    logger.info("jarvis march: %d points -> %d hull points, %d events",
                len(points), len(hull), len(trace))
    return HullResult(hull, trace.events, degeneracy)


def run_convex_hull(points, config: Optional[HullConfig] = None, stop_evt=None) -> HullResult:
    """Kirkpatrick-Seidel hull, reoriented counter-clockwise from the lowest point."""
    config = config or HullConfig()
    points, degeneracy = _prepare(points, config)
    trace = EventTrace()
    hull = convex_hull(points, trace, stop_evt=stop_evt)
    if degeneracy is None:
        hull = orient_counter_clockwise(hull, start=_lowest_vertex(hull, points))
    logger.info("kirkpatrick-seidel: %d points -> %d hull points, %d events",
                len(points), len(hull), len(trace))
    return HullResult(hull, trace.events, degeneracy)
