"""Axis-aligned bounding boxes."""

import math
from dataclasses import dataclass
from typing import Iterable, Iterator, Union

from .types import (
    Feature,
    FeatureCollection,
    Geometry,
    LineString,
    MultiLineString,
    MultiPolygon,
    Point,
    Polygon,
)


@dataclass(frozen=True)
class BBox:
    """Rectangle as (west, south, east, north).

    ``west <= east`` and ``south <= north`` are expected but not enforced.
    """
    west: float
    south: float
    east: float
    north: float

    def __add__(self, other: "BBox") -> "BBox":
        return BBox(
            west=min(self.west, other.west),
            south=min(self.south, other.south),
            east=max(self.east, other.east),
            north=max(self.north, other.north),
        )

    def contains(self, x: float, y: float) -> bool:
        return self.west <= x <= self.east and self.south <= y <= self.north


def iter_points(geometry: Geometry) -> Iterator[Point]:
    """Yield every coordinate of a geometry, ring closing points included."""
    if isinstance(geometry, Point):
        yield geometry
    elif isinstance(geometry, LineString):
        yield from geometry.coords
    elif isinstance(geometry, Polygon):
        yield from geometry.exterior
        for hole in geometry.holes:
            yield from hole
    elif isinstance(geometry, MultiLineString):
        for line in geometry.lines:
            yield from line.coords
    elif isinstance(geometry, MultiPolygon):
        for polygon in geometry.polygons:
            yield from iter_points(polygon)
    else:
        raise TypeError(f"Geometry type {type(geometry).__name__} is not supported")


def bbox(obj: Union[Geometry, Feature, FeatureCollection, Iterable[Feature]]) -> BBox:
    """Envelope of a geometry, a feature or a collection of features.

    Empty input yields ``BBox(0, 0, 0, 0)``.
    """
    if obj is None:
        raise ValueError("geometry is required")

    if isinstance(obj, Feature):
        return bbox(obj.geometry)

    if isinstance(obj, (FeatureCollection, list, tuple)):
        features = list(obj)
        if not features:
            return BBox(0.0, 0.0, 0.0, 0.0)
        result = bbox(features[0])
        for feature in features[1:]:
            result += bbox(feature)
        return result

    west = south = math.inf
    east = north = -math.inf
    for p in iter_points(obj):
        west = min(west, p.x)
        south = min(south, p.y)
        east = max(east, p.x)
        north = max(north, p.y)

    if west == math.inf:
        return BBox(0.0, 0.0, 0.0, 0.0)
    return BBox(west, south, east, north)


def bbox_polygon(box: BBox) -> Polygon:
    """Counter-clockwise rectangle polygon covering ``box``."""
    return Polygon([
        Point(box.west, box.south),
        Point(box.east, box.south),
        Point(box.east, box.north),
        Point(box.west, box.north),
        Point(box.west, box.south),
    ])
