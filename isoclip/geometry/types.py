"""Type definitions for isoclip geometry."""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Union


@dataclass
class Point:
    """2D point with an optional Z-ordinate carrying a scalar value."""
    x: float
    y: float
    z: Optional[float] = None

    def __iter__(self):
        yield self.x
        yield self.y


@dataclass
class LineString:
    """An ordered sequence of points."""
    coords: List[Point] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.coords)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.coords)

    @property
    def is_empty(self) -> bool:
        return len(self.coords) == 0


@dataclass
class Polygon:
    """A polygon with optional holes.

    Rings are stored closed: the first and last point are equal.
    """
    exterior: List[Point]
    holes: List[List[Point]]

    def __init__(self, exterior: List[Point] = None, holes: List[List[Point]] = None):
        self.exterior = exterior if exterior is not None else []
        self.holes = holes if holes is not None else []

    @classmethod
    def empty(cls) -> "Polygon":
        return cls([], [])

    @property
    def is_empty(self) -> bool:
        return len(self.exterior) == 0

    @property
    def area(self) -> float:
        """Unsigned area of the exterior minus the area of the holes."""
        from .polygon import ring_area

        if self.is_empty:
            return 0.0
        return ring_area(self.exterior) - sum(ring_area(h) for h in self.holes)


@dataclass
class MultiLineString:
    lines: List[LineString] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.lines)

    @property
    def is_empty(self) -> bool:
        return all(line.is_empty for line in self.lines)


@dataclass
class MultiPolygon:
    polygons: List[Polygon] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.polygons)

    @property
    def is_empty(self) -> bool:
        return all(p.is_empty for p in self.polygons)


Geometry = Union[Point, LineString, Polygon, MultiLineString, MultiPolygon]


def _ring_coords(ring: List[Point]) -> List[List[float]]:
    return [[p.x, p.y] for p in ring]


def geometry_to_geojson(geometry: Geometry) -> Dict[str, Any]:
    """Convert a geometry to a GeoJSON-like dict."""
    if isinstance(geometry, Point):
        return {"type": "Point", "coordinates": [geometry.x, geometry.y]}
    if isinstance(geometry, LineString):
        return {"type": "LineString", "coordinates": _ring_coords(geometry.coords)}
    if isinstance(geometry, Polygon):
        rings = [geometry.exterior] + geometry.holes if not geometry.is_empty else []
        return {"type": "Polygon", "coordinates": [_ring_coords(r) for r in rings]}
    if isinstance(geometry, MultiLineString):
        return {
            "type": "MultiLineString",
            "coordinates": [_ring_coords(line.coords) for line in geometry.lines],
        }
    if isinstance(geometry, MultiPolygon):
        return {
            "type": "MultiPolygon",
            "coordinates": [
                [_ring_coords(r) for r in [p.exterior] + p.holes]
                for p in geometry.polygons
            ],
        }
    raise TypeError(f"Geometry type {type(geometry).__name__} is not supported")


@dataclass
class Feature:
    """A geometry with a free-form property table."""
    geometry: Geometry
    properties: Dict[str, Any] = field(default_factory=dict)

    def to_geojson(self) -> Dict[str, Any]:
        return {
            "type": "Feature",
            "geometry": geometry_to_geojson(self.geometry),
            "properties": dict(self.properties),
        }


@dataclass
class FeatureCollection:
    features: List[Feature] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.features)

    def __iter__(self) -> Iterator[Feature]:
        return iter(self.features)

    def __getitem__(self, index: int) -> Feature:
        return self.features[index]

    def to_geojson(self) -> Dict[str, Any]:
        return {
            "type": "FeatureCollection",
            "features": [f.to_geojson() for f in self.features],
        }
