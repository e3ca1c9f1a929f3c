import threading

import pytest

from hull_trace.errors import HullCancelledError
from hull_trace.events import EventKind, EventTrace
from hull_trace.geometry import Point
from hull_trace.jarvis_march import find_next_origin, jarvis_march

SQUARE = [Point(0, 0), Point(4, 0), Point(4, 4), Point(0, 4), Point(2, 2)]


def test_square_with_interior_point():
    assert jarvis_march(SQUARE) == [(0, 0), (4, 0), (4, 4), (0, 4)]


def test_accepts_plain_tuples():
    assert jarvis_march([(0, 0), (4, 0), (4, 4), (0, 4), (2, 2)]) == [(0, 0), (4, 0), (4, 4), (0, 4)]


def test_angle_tie_goes_to_farther_point():
    points = [Point(0, 0), Point(2, 0), Point(2, 2), Point(0, 2), Point(1, 0)]
    nudged = Point(0.001, 0)
    assert find_next_origin(nudged, Point(0, 0), points, back_angle=0) == Point(2, 0)
    assert jarvis_march(points) == [(0, 0), (2, 0), (2, 2), (0, 2)]


def test_angle_tie_farther_point_seen_second():
    points = [Point(0, 0), Point(1, 0), Point(2, 0), Point(2, 2), Point(0, 2)]
    trace = EventTrace()
    assert find_next_origin(Point(0.001, 0), Point(0, 0), points, trace, back_angle=0) == Point(2, 0)
    # the farther point replaces the nearer candidate edge
    assert trace.kinds()[:5] == [
        EventKind.ADD_SOLID_EDGE,
        EventKind.ADD_DASHED_EDGE,
        EventKind.REMOVE_SOLID_EDGE,
        EventKind.ADD_SOLID_EDGE,
        EventKind.REMOVE_DASHED_EDGES,
    ]
    assert trace[2].payload == ((0, 0), (1, 0))
    assert trace[3].payload == ((0, 0), (2, 0))
    assert jarvis_march(points) == [(0, 0), (2, 0), (2, 2), (0, 2)]


def test_start_is_first_lowest_point():
    points = [Point(4, 0), Point(0, 0), Point(4, 4), Point(0, 4)]
    assert jarvis_march(points) == [(4, 0), (4, 4), (0, 4), (0, 0)]


def test_collinear_input_returns_extremes():
    assert jarvis_march([Point(0, 0), Point(1, 1), Point(2, 2)]) == [(0, 0), (2, 2)]
    assert jarvis_march([Point(1, 0), Point(0, 0), Point(2, 0)]) == [(0, 0), (2, 0)]


@pytest.mark.parametrize("points, expected", [
    ([], []),
    ([Point(3, 3)], [(3, 3)]),
    ([Point(3, 3), Point(3, 3)], [(3, 3)]),
    ([Point(5, 1), Point(0, 0)], [(0, 0), (5, 1)]),
])
def test_small_inputs(points, expected):
    assert jarvis_march(points) == expected


def test_empty_input_emits_nothing():
    trace = EventTrace()
    assert jarvis_march([], trace) == []
    assert len(trace) == 0


def test_duplicate_points_do_not_repeat():
    points = SQUARE + [Point(4, 4), Point(0, 0)]
    assert jarvis_march(points) == [(0, 0), (4, 0), (4, 4), (0, 4)]


def test_triangle():
    assert jarvis_march([Point(0, 0), Point(5, 1), Point(2, 6)]) == [(0, 0), (5, 1), (2, 6)]


def test_event_trace_opening_steps():
    trace = EventTrace()
    jarvis_march(SQUARE, trace)
    o = Point(0, 0)
    assert [(e.kind, e.payload) for e in trace.events[:10]] == [
        (EventKind.MARK_CURRENT, (o,)),
        (EventKind.ADD_SOLID_EDGE, (o, (4, 0))),
        (EventKind.ADD_DASHED_EDGE, (o, (4, 4))),
        (EventKind.REMOVE_DASHED_EDGES, ()),
        (EventKind.ADD_DASHED_EDGE, (o, (0, 4))),
        (EventKind.REMOVE_DASHED_EDGES, ()),
        (EventKind.ADD_DASHED_EDGE, (o, (2, 2))),
        (EventKind.REMOVE_DASHED_EDGES, ()),
        (EventKind.MARK_HULL, (o,)),
        (EventKind.MARK_CURRENT, ((4, 0),)),
    ]


def test_event_trace_closes_on_start_point():
    trace = EventTrace()
    jarvis_march(SQUARE, trace)
    assert [(e.kind, e.payload) for e in trace.events[-2:]] == [
        (EventKind.MARK_HULL, ((0, 4),)),
        (EventKind.MARK_HULL, ((0, 0),)),
    ]
    confirmed = [e.payload[0] for e in trace if e.kind is EventKind.MARK_HULL]
    assert confirmed == [(0, 0), (4, 0), (4, 4), (0, 4), (0, 0)]


def test_dashed_edges_always_cleared():
    trace = EventTrace()
    jarvis_march(SQUARE, trace)
    pending = 0
    for kind in trace.kinds():
        if kind is EventKind.ADD_DASHED_EDGE:
            pending += 1
        elif kind is EventKind.REMOVE_DASHED_EDGES:
            pending = 0
    assert pending == 0


def test_runs_are_repeatable():
    first, second = EventTrace(), EventTrace()
    assert jarvis_march(SQUARE, first) == jarvis_march(SQUARE, second)
    assert first.events == second.events


def test_stop_event_cancels():
    stop = threading.Event()
    stop.set()
    with pytest.raises(HullCancelledError):
        jarvis_march(SQUARE, stop_evt=stop)


def test_point_behind_origin_is_not_a_candidate():
    # coming up the right edge, (4, 2) lies straight back towards (4, 0)
    points = [Point(4.0, 0.0), Point(4.0, 2.0), Point(0.0, 4.0)]
    assert find_next_origin(Point(4.0, 0.0), Point(4.0, 4.0), points) == (0.0, 4.0)


@pytest.mark.parametrize("points, expected", [
    ([(0, 0), (4, 0), (4, 2), (4, 4), (0, 4)], [(0, 0), (4, 0), (4, 4), (0, 4)]),
    ([(4, 3), (4, 1), (3, 2), (4, 0)], [(4, 0), (4, 3), (3, 2)]),
    ([(0, 0), (4, 0), (4, 4), (0, 4), (0, 2), (2, 4)], [(0, 0), (4, 0), (4, 4), (0, 4)]),
])
def test_float_and_int_coordinates_give_same_hull(points, expected):
    assert jarvis_march(points) == expected
    floats = [(float(x), float(y)) for x, y in points]
    assert jarvis_march(floats) == expected


def test_collinear_points_on_diagonal_edge_are_skipped():
    points = [Point(0, 0), Point(6, 0), Point(3, 3), Point(2, 4), Point(1, 5), Point(0, 6), Point(1, 1)]
    assert jarvis_march(points) == [(0, 0), (6, 0), (0, 6)]


def test_start_inside_bottom_edge_stays_in_raw_hull():
    points = [Point(2, 0), Point(4, 4), Point(0, 0), Point(4, 0), Point(0, 4)]
    assert jarvis_march(points) == [(2, 0), (4, 0), (4, 4), (0, 4), (0, 0)]
