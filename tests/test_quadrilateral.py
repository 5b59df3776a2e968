"""Tests for the Quadrilateral model."""

import dataclasses

import pytest

from quadmark.editor.geometry import Corner, Point
from quadmark.editor.quadrilateral import Quadrilateral


def test_degenerate_has_all_corners_equal():
    quad = Quadrilateral.degenerate(Point(7, 9))
    assert quad.corners() == (Point(7, 9),) * 4


def test_from_anchor_builds_axis_aligned_rectangle():
    quad = Quadrilateral.from_anchor(Point(100, 100), Point(200, 150))
    assert quad.top_left == Point(100, 100)
    assert quad.top_right == Point(200, 100)
    assert quad.bottom_left == Point(100, 150)
    assert quad.bottom_right == Point(200, 150)


def test_from_anchor_does_not_accumulate():
    anchor = Point(10, 10)
    first = Quadrilateral.from_anchor(anchor, Point(80, 40))
    again = Quadrilateral.from_anchor(first.top_left, Point(30, 90))
    assert again == Quadrilateral.from_anchor(anchor, Point(30, 90))


def test_from_anchor_allows_pointer_above_left_of_anchor():
    quad = Quadrilateral.from_anchor(Point(100, 100), Point(50, 20))
    assert quad.top_right == Point(50, 100)
    assert quad.bottom_left == Point(100, 20)


def test_with_corner_moved_replaces_only_one_corner():
    quad = Quadrilateral.from_anchor(Point(0, 0), Point(10, 10))
    moved = quad.with_corner_moved(Corner.BOTTOM_RIGHT, Point(30, 5))

    assert moved.bottom_right == Point(30, 5)
    assert moved.top_left == quad.top_left
    assert moved.top_right == quad.top_right
    assert moved.bottom_left == quad.bottom_left
    # Original untouched
    assert quad.bottom_right == Point(10, 10)


def test_with_corner_moved_allows_self_intersection():
    quad = Quadrilateral.from_anchor(Point(0, 0), Point(10, 10))
    crossed = quad.with_corner_moved(Corner.TOP_LEFT, Point(20, 20))
    assert crossed.top_left == Point(20, 20)


def test_corner_lookup_and_order():
    quad = Quadrilateral(Point(1, 1), Point(2, 2), Point(3, 3), Point(4, 4))
    assert [quad.corner(c) for c in Corner] == list(quad.corners())
    assert quad.corners() == (Point(1, 1), Point(2, 2), Point(3, 3), Point(4, 4))


def test_outline_order():
    quad = Quadrilateral.from_anchor(Point(0, 0), Point(10, 10))
    assert quad.outline() == (
        Point(0, 0),
        Point(10, 0),
        Point(10, 10),
        Point(0, 10),
    )


def test_immutable():
    quad = Quadrilateral.degenerate(Point(0, 0))
    with pytest.raises(dataclasses.FrozenInstanceError):
        quad.top_left = Point(1, 1)
