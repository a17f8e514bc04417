"""Geometry utilities for isoclip."""

from .types import (
    Point,
    LineString,
    Polygon,
    MultiLineString,
    MultiPolygon,
    Geometry,
    Feature,
    FeatureCollection,
    geometry_to_geojson,
)
from .polygon import (
    DEFAULT_TOLERANCE,
    points_close,
    polygon_signed_area,
    ring_area,
    close_ring,
    point_in_ring,
    point_on_ring,
    boolean_point_in_polygon,
)
from .bbox import BBox, bbox, bbox_polygon

__all__ = [
    "Point",
    "LineString",
    "Polygon",
    "MultiLineString",
    "MultiPolygon",
    "Geometry",
    "Feature",
    "FeatureCollection",
    "geometry_to_geojson",
    "DEFAULT_TOLERANCE",
    "points_close",
    "polygon_signed_area",
    "ring_area",
    "close_ring",
    "point_in_ring",
    "point_on_ring",
    "boolean_point_in_polygon",
    "BBox",
    "bbox",
    "bbox_polygon",
]
