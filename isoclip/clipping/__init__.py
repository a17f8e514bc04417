"""Clipping of geometries against an axis-aligned rectangle."""

from typing import Optional

from ..geometry import (
    BBox,
    Geometry,
    LineString,
    MultiLineString,
    MultiPolygon,
    Point,
    Polygon,
)
from .lines import clip_line_parts, clip_line_string, clip_multi_line_string
from .polygons import clip_polygon, clip_multi_polygon, clip_ring


def bbox_clip(geometry: Geometry, box: BBox, split_lines: bool = False) -> Optional[Geometry]:
    """Clip ``geometry`` to ``box``.

    Args:
        geometry: Point, LineString, Polygon, MultiLineString or MultiPolygon.
        box: Clip rectangle.
        split_lines: A LineString that leaves and re-enters the box clips to
            several pieces. By default they are joined into one LineString;
            with ``split_lines`` they come back as a MultiLineString, one
            component per piece (also applied to each MultiLineString
            component).

    Returns:
        The clipped geometry. Points are returned as-is when inside the box
        and as ``None`` otherwise.
    """
    if geometry is None:
        raise ValueError("geometry is required")
    if box is None:
        raise ValueError("bbox is required")

    if isinstance(geometry, Point):
        return geometry if box.contains(geometry.x, geometry.y) else None
    if isinstance(geometry, LineString):
        if split_lines:
            return MultiLineString(clip_line_parts(geometry, box))
        return clip_line_string(geometry, box)
    if isinstance(geometry, MultiLineString):
        if split_lines:
            return MultiLineString([
                part for line in geometry.lines for part in clip_line_parts(line, box)
            ])
        return clip_multi_line_string(geometry, box)
    if isinstance(geometry, Polygon):
        return clip_polygon(geometry, box)
    if isinstance(geometry, MultiPolygon):
        return clip_multi_polygon(geometry, box)

    raise TypeError(f"Geometry type {type(geometry).__name__} is not supported")


__all__ = [
    "bbox_clip",
    "clip_line_parts",
    "clip_line_string",
    "clip_multi_line_string",
    "clip_polygon",
    "clip_multi_polygon",
    "clip_ring",
]
