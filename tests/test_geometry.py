import math
from fractions import Fraction

import pytest

from hull_trace.errors import InvalidPointError, InvalidSlopeDivisionError
from hull_trace.geometry import (Point, all_collinear, as_point, degenerate_hull, integer_division,
                                 intercept, orient_counter_clockwise, orientation, reflect,
                                 reflect_all, signed_area, slope, turn_angle)


def test_point_is_a_plain_tuple():
    p = Point(1, 2)
    x, y = p
    assert (x, y) == (1, 2)
    assert p == (1, 2)
    assert hash(p) == hash((1, 2))
    assert Point(1, 2) < Point(1, 3) < Point(2, 0)


def test_turn_angle_straight_back_is_never_best():
    assert turn_angle(Point(0.001, 0), Point(0, 0), Point(2, 0)) == 360
    assert turn_angle(Point(0.001, 0), Point(0, 0), Point(2, 0), back_angle=0) == 0


@pytest.mark.parametrize("prev_o, o, p", [
    ((4, 0), (4, 4), (4, 2)),
    ((4.0, 0.0), (4.0, 4.0), (4.0, 2.0)),
    ((4.0, 0.0), (4.0, 3.0), (4.0, 1.0)),
    ((0.0, 4.0), (0.0, 0.0), (0.0, 2.0)),
    ((4.0, 4.0), (0.0, 4.0), (2.0, 4.0)),
    ((0.0, 0.0), (3.0, 3.0), (1.0, 1.0)),
])
def test_turn_angle_straight_back_ignores_zero_sign(prev_o, o, p):
    # float products can give -0.0 for the cross product of a vertical edge
    assert turn_angle(prev_o, o, p) == 360


def test_turn_angle_straight_and_quarter_turns():
    assert turn_angle((0, 0), (1, 0), (2, 0)) == pytest.approx(180)
    assert turn_angle((0, 0), (1, 0), (1, 1)) == pytest.approx(270)
    assert turn_angle((0, 0), (1, 0), (1, -1)) == pytest.approx(90)


def test_turn_angle_range():
    for p in [(3, 1), (-2, 5), (0, -4), (-1, -1)]:
        assert 0 <= turn_angle((1, 1), (2, 3), p) < 360


def test_reflect():
    assert reflect((3, -2)) == Point(-3, 2)
    assert reflect_all([(1, 2), (0, -5)]) == [Point(-1, -2), Point(0, 5)]


def test_integer_division_floors():
    assert integer_division(7, 2) == 3
    assert integer_division(-7, 2) == -4
    assert integer_division(6, 3) == 2


def test_slope_is_exact():
    assert slope((0, 0), (2, 1)) == Fraction(1, 2)
    assert slope((2, 1), (0, 0)) == Fraction(1, 2)
    assert slope((0.1, 0.2), (0.3, 0.4)) == (Fraction(0.2) - Fraction(0.4)) / (Fraction(0.1) - Fraction(0.3))


def test_vertical_slope_raises():
    with pytest.raises(InvalidSlopeDivisionError):
        slope((1, 0), (1, 5))
    with pytest.raises(ZeroDivisionError):
        slope((1, 0), (1, 5))


def test_intercept():
    assert intercept((2, 3), Fraction(1, 2)) == 2
    assert intercept((4, 0), Fraction(-1)) == 4


def test_orientation():
    assert orientation((0, 0), (1, 0), (1, 1)) == 1
    assert orientation((0, 0), (1, 0), (1, -1)) == -1
    assert orientation((0, 0), (1, 1), (3, 3)) == 0


def test_all_collinear():
    assert all_collinear([(0, 0), (1, 1), (2, 2), (1, 1)])
    assert all_collinear([(0, 0), (0, 0)])
    assert not all_collinear([(0, 0), (1, 1), (2, 0)])


@pytest.mark.parametrize("points, expected", [
    ([], []),
    ([(1, 1)], [(1, 1)]),
    ([(1, 1), (1, 1), (1, 1)], [(1, 1)]),
    ([(2, 0), (0, 0)], [(0, 0), (2, 0)]),
    ([(3, 1), (0, 5)], [(3, 1), (0, 5)]),
    ([(1, 1), (0, 0), (2, 2)], [(0, 0), (2, 2)]),
    ([(0, 2), (0, 0), (0, 1)], [(0, 0), (0, 2)]),
])
def test_degenerate_hull(points, expected):
    assert degenerate_hull([Point(*p) for p in points]) == expected


def test_degenerate_hull_none_for_polygons():
    assert degenerate_hull([Point(0, 0), Point(4, 0), Point(0, 4)]) is None


def test_signed_area_and_orientation_fix():
    ccw = [(0, 0), (4, 0), (4, 4), (0, 4)]
    assert signed_area(ccw) == 16
    assert signed_area(ccw[::-1]) == -16
    assert orient_counter_clockwise([(0, 4), (4, 4), (4, 0), (0, 0)], start=(0, 0)) == ccw
    assert orient_counter_clockwise(ccw, start=(4, 4)) == [(4, 4), (0, 4), (0, 0), (4, 0)]


def test_as_point_accepts_pairs():
    assert as_point([1, 2.5]) == Point(1, 2.5)
    assert isinstance(as_point((1, 2)), Point)


@pytest.mark.parametrize("bad", [(1,), (1, 2, 3), "ab", (math.nan, 0), (0, math.inf), (True, 1), None])
def test_as_point_rejects_garbage(bad):
    with pytest.raises(InvalidPointError):
        as_point(bad)
