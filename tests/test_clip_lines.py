"""Tests for line clipping."""

import pytest
from isoclip.clipping import (
    bbox_clip,
    clip_line_parts,
    clip_line_string,
    clip_multi_line_string,
)
from isoclip.geometry import BBox, LineString, MultiLineString, Point


def flat(pairs):
    return [v for pair in pairs for v in pair]


def line(*coords):
    return LineString([Point(x, y) for x, y in coords])


def xy(geometry):
    return [(p.x, p.y) for p in geometry.coords]


def assert_inside(geometry, box):
    for p in geometry.coords:
        assert box.west <= p.x <= box.east
        assert box.south <= p.y <= box.north


ZIGZAG = ((2, 2), (8, 4), (12, 8), (3, 7), (2, 2))


def test_line_leaving_and_reentering():
    """Line that exits east and comes back through the top."""
    box = BBox(0, 0, 5, 5)
    original = line(*ZIGZAG)

    clipped = clip_line_string(original, box)

    assert not clipped.is_empty
    assert_inside(clipped, box)
    assert xy(clipped) != xy(original)
    assert flat(xy(clipped)) == pytest.approx(flat([(2, 2), (5, 3), (2.6, 5), (2, 2)]))


def test_parts_are_kept_apart():
    box = BBox(0, 0, 5, 5)

    parts = clip_line_parts(line(*ZIGZAG), box)

    assert len(parts) == 2
    assert flat(xy(parts[0])) == pytest.approx(flat([(2, 2), (5, 3)]))
    assert flat(xy(parts[1])) == pytest.approx(flat([(2.6, 5), (2, 2)]))


def test_line_inside_is_unchanged():
    box = BBox(0, 0, 10, 10)
    original = line((1, 1), (2, 5), (9, 9), (3, 4))

    assert xy(clip_line_string(original, box)) == xy(original)


def test_line_outside_is_empty():
    box = BBox(0, 0, 1, 1)

    assert clip_line_string(line((5, 5), (6, 8), (9, 5)), box).is_empty
    assert clip_line_parts(line((5, 5), (6, 8)), box) == []


def test_segment_crossing_whole_box():
    """Both endpoints outside on opposite sides."""
    box = BBox(0, 0, 10, 10)

    clipped = clip_line_string(line((-5, 5), (15, 5)), box)

    assert flat(xy(clipped)) == pytest.approx(flat([(0, 5), (10, 5)]))


def test_diagonal_through_corner_region():
    """An endpoint outside two sides is pulled in one side at a time."""
    box = BBox(0, 0, 10, 10)

    clipped = clip_line_string(line((-5, -5), (5, 5)), box)

    assert flat(xy(clipped)) == pytest.approx(flat([(0, 0), (5, 5)]))


def test_short_lines_are_returned_unchanged():
    box = BBox(0, 0, 1, 1)
    single = line((5, 5))

    assert clip_line_string(single, box) is single
    assert clip_line_string(LineString(), box).is_empty


def test_multi_line_string_keeps_components():
    box = BBox(0, 0, 10, 10)
    lines = MultiLineString([line(*ZIGZAG), line(*ZIGZAG)])

    clipped = clip_multi_line_string(lines, box)

    assert len(clipped) == 2
    for component in clipped.lines:
        assert_inside(component, box)
        assert len(component) != 5


def test_multi_line_string_drops_empty_components():
    box = BBox(0, 0, 10, 10)
    lines = MultiLineString([line((20, 20), (30, 30)), line((1, 1), (2, 2))])

    clipped = clip_multi_line_string(lines, box)

    assert len(clipped) == 1
    assert xy(clipped.lines[0]) == [(1, 1), (2, 2)]


def test_bbox_clip_split_lines():
    box = BBox(0, 0, 5, 5)

    joined = bbox_clip(line(*ZIGZAG), box)
    split = bbox_clip(line(*ZIGZAG), box, split_lines=True)

    assert isinstance(joined, LineString)
    assert isinstance(split, MultiLineString)
    assert len(split) == 2
