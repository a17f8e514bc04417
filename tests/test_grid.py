"""Tests for grid construction from samples."""

import math

import pytest
from isoclip.contours import build_grid, extract_z_values
from isoclip.geometry import Feature, LineString, Point


def test_z_from_ordinate():
    points = [Point(0, 0, 1.5), Point(1, 0, 2.5), Point(2, 0)]

    z_values = extract_z_values(points)

    assert z_values == {(0, 0): 1.5, (1, 0): 2.5}


def test_z_from_property_with_fallback():
    points = [
        Feature(Point(0, 0, 9.0), {"elevation": 3}),
        Feature(Point(1, 0, 7.0), {"elevation": "high"}),
        Feature(Point(2, 0, math.nan), {}),
        Point(3, 0, 4.0),
    ]

    z_values = extract_z_values(points, z_property="elevation")

    assert z_values == {(0, 0): 3.0, (1, 0): 7.0, (3, 0): 4.0}


def test_property_ignored_without_name():
    z_values = extract_z_values([Feature(Point(0, 0, 1.0), {"elevation": 3})])

    assert z_values == {(0, 0): 1.0}


def test_non_point_samples_are_rejected():
    with pytest.raises(ValueError):
        extract_z_values([Feature(LineString([Point(0, 0), Point(1, 1)]))])


def test_regular_grid_cells():
    z_values = {(x, y): float(x + y) for x in range(3) for y in range(2)}

    cells = build_grid(z_values)

    assert len(cells) == 2
    first = cells[0]
    assert [(c.x, c.y) for c in first.corners] == [(0, 0), (1, 0), (1, 1), (0, 1)]
    assert first.values(z_values) == (0.0, 1.0, 2.0, 1.0)


def test_cells_follow_x_then_y_order():
    z_values = {(x, y): 0.0 for x in range(3) for y in range(3)}

    cells = build_grid(z_values)

    assert [(c.bottom_left.x, c.bottom_left.y) for c in cells] == [
        (0, 0), (0, 1), (1, 0), (1, 1),
    ]


def test_irregular_spacing_and_missing_corners():
    z_values = {
        (0, 0): 1.0, (0.5, 0): 1.0, (3, 0): 1.0,
        (0, 2): 1.0, (0.5, 2): 1.0,
    }

    cells = build_grid(z_values)

    assert len(cells) == 1
    assert (cells[0].top_right.x, cells[0].top_right.y) == (0.5, 2)


def test_empty_grid():
    assert build_grid({}) == []
