"""Tests for isoline extraction."""

import pytest
from isoclip.contours import Cell, cell_crossings, cell_segments, isolines, stitch_segments
from isoclip.geometry import Feature, Point


def flat(pairs):
    return [v for pair in pairs for v in pair]


def grid_points(f, nx, ny):
    """Samples of f on the integer grid [0, nx) x [0, ny)."""
    return [Point(x, y, f(x, y)) for x in range(nx) for y in range(ny)]


def xy(line):
    return [(p.x, p.y) for p in line.coords]


def unit_cell():
    return Cell(Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1))


def test_single_cell_gives_one_chord():
    points = [Point(0, 0, 0), Point(1, 0, 10), Point(1, 1, 10), Point(0, 1, 0)]

    result = isolines(points, [5])

    assert len(result) == 1
    feature = result[0]
    assert feature.properties == {"isoline": 5}
    assert flat(xy(feature.geometry)) == pytest.approx(flat([(0.5, 0), (0.5, 1)]))


def test_constant_field_has_no_crossing():
    points = grid_points(lambda x, y: 3.0, 3, 3)

    assert len(isolines(points, [3.0])) == 0


def test_crossing_order_is_bottom_right_top_left():
    z = {(0, 0): 0, (1, 0): 0, (1, 1): 10, (0, 1): 10}

    crossings = cell_crossings(unit_cell(), z, 5)

    assert flat([(p.x, p.y) for p in crossings]) == pytest.approx(flat([(1, 0.5), (0, 0.5)]))


def test_lines_are_stitched_across_cells():
    points = grid_points(lambda x, y: float(x), 4, 3)

    result = isolines(points, [1.5])

    assert len(result) == 1
    coords = xy(result[0].geometry)
    assert len(coords) == 3
    assert all(x == pytest.approx(1.5) for x, _ in coords)
    assert sorted(y for _, y in coords) == [0, 1, 2]


def test_closed_contour_around_a_peak():
    points = grid_points(lambda x, y: 10.0 if (x, y) == (1, 1) else 0.0, 3, 3)

    result = isolines(points, [5])

    assert len(result) == 1
    coords = xy(result[0].geometry)
    assert len(coords) == 5
    assert coords[0] == pytest.approx(coords[-1])


def test_breaks_are_sorted_and_tagged():
    points = grid_points(lambda x, y: float(x), 4, 2)

    result = isolines(points, [2.5, 0.5])

    assert [f.properties["isoline"] for f in result] == [0.5, 2.5]


def test_values_from_property():
    points = [
        Feature(Point(x, y), {"temp": float(x * 10)})
        for x in range(2) for y in range(2)
    ]

    result = isolines(points, [5], z_property="temp")

    assert len(result) == 1


def test_stitch_reverses_segments_as_needed():
    a, b, c, d = Point(0, 0), Point(1, 0), Point(2, 0), Point(3, 0)

    lines = stitch_segments([(b, c), (b, a), (d, c)])

    assert len(lines) == 1
    assert xy(lines[0]) == [(0, 0), (1, 0), (2, 0), (3, 0)]


def test_stitch_keeps_disjoint_lines_apart():
    lines = stitch_segments([
        (Point(0, 0), Point(1, 0)),
        (Point(5, 5), Point(6, 5)),
    ])

    assert len(lines) == 2


def test_stitch_tolerance():
    segments = [(Point(0, 0), Point(1, 0)), (Point(1.001, 0), Point(2, 0))]

    assert len(stitch_segments(segments)) == 2
    assert len(stitch_segments(segments, tolerance=0.01)) == 1


def test_invalid_arguments():
    points = grid_points(lambda x, y: 0.0, 2, 2)

    with pytest.raises(ValueError):
        isolines(points[:3], [1])
    with pytest.raises(ValueError):
        isolines(points, [])


def test_saddle_cell_gives_two_chords():
    """Four crossings are paired bottom with right and top with left."""
    z = {(0, 0): 0, (1, 0): 10, (1, 1): 0, (0, 1): 10}

    segments = cell_segments(unit_cell(), z, 5)

    assert len(segments) == 2
    assert flat([(p.x, p.y) for p in segments[0]]) == pytest.approx(flat([(0.5, 0), (1, 0.5)]))
    assert flat([(p.x, p.y) for p in segments[1]]) == pytest.approx(flat([(0.5, 1), (0, 0.5)]))


def test_saddle_cell_gives_two_separate_lines():
    points = [Point(0, 0, 0), Point(1, 0, 10), Point(1, 1, 0), Point(0, 1, 10)]

    result = isolines(points, [5])

    assert len(result) == 2
    assert all(len(f.geometry.coords) == 2 for f in result)
    assert all(f.properties == {"isoline": 5} for f in result)
