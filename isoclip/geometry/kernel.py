"""Bridge between isoclip geometries and the shapely kernel."""

import logging
from typing import List

from shapely.errors import GEOSException
from shapely.geometry import LineString as ShapelyLineString
from shapely.geometry import MultiLineString as ShapelyMultiLineString
from shapely.geometry import MultiPolygon as ShapelyMultiPolygon
from shapely.geometry import Point as ShapelyPoint
from shapely.geometry import Polygon as ShapelyPolygon
from shapely.geometry.base import BaseGeometry

from .types import Geometry, LineString, MultiLineString, MultiPolygon, Point, Polygon

logger = logging.getLogger(__name__)


def _xy(points: List[Point]) -> List[tuple]:
    return [(p.x, p.y) for p in points]


def _points(coords) -> List[Point]:
    return [Point(float(c[0]), float(c[1])) for c in coords]


def to_shapely(geometry: Geometry) -> BaseGeometry:
    """Convert an isoclip geometry to its shapely counterpart."""
    if isinstance(geometry, Point):
        return ShapelyPoint(geometry.x, geometry.y)
    if isinstance(geometry, LineString):
        return ShapelyLineString(_xy(geometry.coords))
    if isinstance(geometry, Polygon):
        if geometry.is_empty:
            return ShapelyPolygon()
        return ShapelyPolygon(_xy(geometry.exterior), [_xy(h) for h in geometry.holes])
    if isinstance(geometry, MultiLineString):
        return ShapelyMultiLineString([_xy(line.coords) for line in geometry.lines])
    if isinstance(geometry, MultiPolygon):
        return ShapelyMultiPolygon([to_shapely(p) for p in geometry.polygons])
    raise TypeError(f"Geometry type {type(geometry).__name__} is not supported")


def from_shapely(shape: BaseGeometry) -> Geometry:
    """Convert a shapely geometry back into isoclip types."""
    if isinstance(shape, ShapelyPoint):
        return Point(shape.x, shape.y)
    if isinstance(shape, ShapelyLineString):
        return LineString(_points(shape.coords))
    if isinstance(shape, ShapelyPolygon):
        if shape.is_empty:
            return Polygon.empty()
        return Polygon(
            _points(shape.exterior.coords),
            [_points(ring.coords) for ring in shape.interiors],
        )
    if isinstance(shape, ShapelyMultiLineString):
        return MultiLineString([from_shapely(g) for g in shape.geoms])
    if isinstance(shape, ShapelyMultiPolygon):
        return MultiPolygon([from_shapely(g) for g in shape.geoms])
    raise TypeError(f"Geometry type {shape.geom_type} is not supported")


def union_polygons(polygons: List[Polygon]) -> List[Polygon]:
    """Merge polygons with the kernel union, left to right.

    Each component of a multi-polygon result is returned as its own polygon.
    If the kernel fails, or returns something that is not polygonal, the
    input polygons are returned unchanged.
    """
    if len(polygons) <= 1:
        return polygons

    try:
        result = to_shapely(polygons[0])
        for polygon in polygons[1:]:
            result = result.union(to_shapely(polygon))
    except (GEOSException, ValueError) as e:
        logger.warning("Union of %d polygons failed, keeping them unmerged: %s", len(polygons), e)
        return polygons

    if isinstance(result, ShapelyPolygon):
        return [from_shapely(result)]
    if isinstance(result, ShapelyMultiPolygon):
        return [from_shapely(g) for g in result.geoms]

    logger.warning("Union produced %s, keeping %d polygons unmerged", result.geom_type, len(polygons))
    return polygons
