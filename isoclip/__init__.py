"""isoclip: rectangle clipping and contouring for planar geometry."""

__version__ = "0.1.0"

from .clipping import bbox_clip, clip_line_parts, clip_line_string, clip_polygon
from .contours import isobands, isolines
from .geometry import (
    BBox,
    Feature,
    FeatureCollection,
    LineString,
    MultiLineString,
    MultiPolygon,
    Point,
    Polygon,
    bbox,
    bbox_polygon,
    boolean_point_in_polygon,
)

__all__ = [
    "bbox_clip",
    "clip_line_parts",
    "clip_line_string",
    "clip_polygon",
    "isobands",
    "isolines",
    "BBox",
    "Feature",
    "FeatureCollection",
    "LineString",
    "MultiLineString",
    "MultiPolygon",
    "Point",
    "Polygon",
    "bbox",
    "bbox_polygon",
    "boolean_point_in_polygon",
]
