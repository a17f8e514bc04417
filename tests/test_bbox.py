"""Tests for bounding boxes."""

from isoclip.geometry import (
    BBox,
    Feature,
    FeatureCollection,
    LineString,
    Point,
    Polygon,
    bbox,
    bbox_polygon,
)


def test_add_gives_envelope():
    combined = BBox(0, 0, 1, 1) + BBox(-2, 0.5, 0.5, 3)

    assert combined == BBox(-2, 0, 1, 3)


def test_contains_is_closed_on_every_side():
    box = BBox(0, 0, 10, 5)

    assert box.contains(0, 0)
    assert box.contains(10, 5)
    assert box.contains(3, 2)
    assert not box.contains(10.001, 2)
    assert not box.contains(3, -0.001)


def test_bbox_of_line():
    line = LineString([Point(-74, 40), Point(-78, 42), Point(-82, 35)])

    assert bbox(line) == BBox(-82, 35, -74, 42)


def test_bbox_of_feature_collection():
    collection = FeatureCollection([
        Feature(Point(1, 1)),
        Feature(LineString([Point(-1, 2), Point(0, 5)])),
    ])

    assert bbox(collection) == BBox(-1, 1, 1, 5)


def test_bbox_of_empty_geometry():
    assert bbox(Polygon.empty()) == BBox(0, 0, 0, 0)
    assert bbox(FeatureCollection()) == BBox(0, 0, 0, 0)


def test_bbox_polygon():
    polygon = bbox_polygon(BBox(0, 0, 10, 10))

    assert [(p.x, p.y) for p in polygon.exterior] == [
        (0, 0), (10, 0), (10, 10), (0, 10), (0, 0),
    ]
    assert polygon.area == 100
