"""Tests for core/intersection.py integer line intersection."""
import pytest
from debug_tools.core import (
    COLINEAR, Colinear, IntersectionPoint, Line, LinearEquation, LineSide, Point, intersect,
)


def seg(x1, y1, x2, y2):
    return Line(Point(x1, y1), Point(x2, y2))


# --- Colinear / parallel ---

def test_colinear_same_line():
    assert intersect(seg(0, 0, 10, 10), seg(0, 0, 20, 20)) == COLINEAR


def test_parallel_offset_is_colinear():
    assert intersect(seg(0, 0, 10, 0), seg(0, 1, 10, 1)) == COLINEAR


def test_parallel_opposite_direction_is_colinear():
    assert intersect(seg(0, 0, 10, 0), seg(10, 5, 0, 5)) == COLINEAR


def test_colinear_is_a_singleton_value():
    result = intersect(seg(0, 0, 3, 6), seg(1, 1, 4, 7))
    assert isinstance(result, Colinear)
    assert result == Colinear()


def test_degenerate_segment_is_colinear():
    assert intersect(seg(4, 4, 4, 4), seg(0, 0, 10, 3)) == COLINEAR


# --- Exact intersections ---

def test_perpendicular_cross():
    result = intersect(seg(0, 0, 10, 0), seg(5, -5, 5, 5))
    assert result == IntersectionPoint(Point(5, 0), LineSide.RIGHT, False)


def test_shared_endpoint_axis_aligned():
    result = intersect(seg(0, 0, 10, 0), seg(10, 0, 10, 10))
    assert isinstance(result, IntersectionPoint)
    assert result.point == Point(10, 0)
    assert result.outer_side is LineSide.RIGHT
    assert not result.is_special_case


def test_shared_endpoint_turning_the_other_way():
    result = intersect(seg(2, 3, 5, 7), seg(5, 7, 9, 4))
    assert result.point == Point(5, 7)
    assert result.outer_side is LineSide.LEFT
    assert not result.is_special_case


def test_threshold_boundary_is_solved_exactly():
    # denominator**2 == dot(delta_a, delta_b) == 1 does not take the fallback
    result = intersect(seg(0, 0, 1, 0), seg(5, 5, 6, 6))
    assert result == IntersectionPoint(Point(0, 0), LineSide.RIGHT, False)


def test_inexact_intersection_rounds_to_nearest():
    a = seg(0, 0, 12, 6)
    b = seg(0, 10, 10, 0)
    result = intersect(a, b)
    # the exact intersection is (20/3, 10/3)
    assert result.point == Point(7, 3)


@pytest.mark.parametrize("a, b", [
    (seg(0, 0, 10, 0), seg(5, -5, 5, 5)),
    (seg(2, 3, 5, 7), seg(5, 7, 9, 4)),
    (seg(-20, 4, 30, -6), seg(-3, -6, 3, 6)),
])
def test_exact_point_satisfies_both_equations(a, b):
    result = intersect(a, b)
    point = result.point
    # exact integer intersections for these inputs
    assert LinearEquation.from_line(a).distance(point) == 0
    assert LinearEquation.from_line(b).distance(point) == 0


def test_intersection_outside_segments():
    a = seg(0, 0, 10, 0)
    b = seg(20, -5, 20, 5)
    result = intersect(a, b)
    assert result.point == Point(20, 0)
    assert not result.is_special_case
    assert not a.contains_bounding_box(result.point)
    assert b.contains_bounding_box(result.point)


# --- Swapping inputs ---

@pytest.mark.parametrize("a, b", [
    (seg(0, 0, 10, 0), seg(5, -5, 5, 5)),
    (seg(2, 3, 5, 7), seg(5, 7, 9, 4)),
    (seg(0, 0, 10, 0), seg(2, -1, 3, 1)),
    (seg(-20, 4, 30, -6), seg(-3, -6, 3, 6)),
])
def test_swapping_inputs_keeps_point_and_flips_side(a, b):
    forward = intersect(a, b)
    backward = intersect(b, a)
    assert not forward.is_special_case
    assert forward.point == backward.point
    assert forward.outer_side is not backward.outer_side


def test_reversing_one_line_flips_side():
    forward = intersect(seg(0, 0, 10, 0), seg(5, -5, 5, 5))
    flipped = intersect(seg(0, 0, 10, 0), seg(5, 5, 5, -5))
    assert forward.point == flipped.point
    assert forward.outer_side is LineSide.RIGHT
    assert flipped.outer_side is LineSide.LEFT


# --- Near-parallel fallback ---

def test_near_parallel_returns_midpoint():
    a = seg(0, 0, 3, 1)
    b = seg(4, 2, 6, 3)
    result = intersect(a, b)
    assert result.is_special_case
    # (a.end + b.start) / 2 == (7, 3) / 2
    assert result.point == Point(3, 1)
    assert result.outer_side is LineSide.RIGHT


def test_near_parallel_midpoint_truncates_toward_zero():
    a = seg(0, 0, -3, -1)
    b = seg(-4, -2, -6, -3)
    result = intersect(a, b)
    assert result.is_special_case
    # (-7, -3) / 2 truncates to (-3, -1), not (-4, -2)
    assert result.point == Point(-3, -1)


# --- Rounding ---

def test_rounds_half_away_from_zero_positive():
    # exact intersection at x = 2.5; truncation would give 2
    result = intersect(seg(0, 0, 10, 0), seg(2, -1, 3, 1))
    assert result == IntersectionPoint(Point(3, 0), LineSide.RIGHT, False)


def test_rounds_half_away_from_zero_negative():
    # exact intersection at x = -2.5; truncation would give -2
    result = intersect(seg(0, 0, 10, 0), seg(-2, -1, -3, 1))
    assert result.point == Point(-3, 0)
    assert not result.is_special_case


def test_rounds_down_below_half():
    # exact intersection at x = 2.4
    result = intersect(seg(0, 0, 10, 0), seg(2, -4, 3, 6))
    assert result.point == Point(2, 0)


def test_rounding_with_negative_denominator():
    result = intersect(seg(2, -1, 3, 1), seg(0, 0, 10, 0))
    assert result.point == Point(3, 0)
    assert result.outer_side is LineSide.LEFT


# --- Large coordinates ---

def test_large_coordinates_do_not_overflow():
    half = 5 * 10**11
    result = intersect(seg(0, 0, 10**12, 0), seg(half, -10**12, half, 10**12))
    assert result == IntersectionPoint(Point(half, 0), LineSide.RIGHT, False)


def test_result_is_immutable():
    result = intersect(seg(0, 0, 10, 0), seg(5, -5, 5, 5))
    with pytest.raises(AttributeError):
        result.point = Point(0, 0)
