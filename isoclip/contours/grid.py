"""Cell lattice built from scattered grid samples."""

import math
from dataclasses import dataclass
from numbers import Real
from typing import Dict, List, Optional, Sequence, Tuple, Union

import numpy as np

from ..geometry import Feature, Point

ZValues = Dict[Tuple[float, float], float]


@dataclass(frozen=True)
class Cell:
    """Quad between four adjacent grid samples, counter-clockwise from bottom left."""
    bottom_left: Point
    bottom_right: Point
    top_right: Point
    top_left: Point

    @property
    def corners(self) -> Tuple[Point, Point, Point, Point]:
        return (self.bottom_left, self.bottom_right, self.top_right, self.top_left)

    def values(self, z_values: ZValues) -> Tuple[float, float, float, float]:
        return tuple(z_values[(c.x, c.y)] for c in self.corners)


def _point_of(item: Union[Point, Feature]) -> Point:
    if isinstance(item, Feature):
        item = item.geometry
    if not isinstance(item, Point):
        raise ValueError(f"Grid samples must be points, got {type(item).__name__}")
    return item


def extract_z_values(
    points: Sequence[Union[Point, Feature]],
    z_property: Optional[str] = None,
) -> ZValues:
    """Map each sample's (x, y) to its scalar value.

    With ``z_property`` a numeric feature property of that name is used;
    otherwise, or when it is missing, the point's Z-ordinate. Samples
    without either are skipped.
    """
    z_values: ZValues = {}

    for item in points:
        if item is None:
            raise ValueError("Grid samples must not be None")
        point = _point_of(item)
        key = (point.x, point.y)

        if z_property and isinstance(item, Feature):
            value = item.properties.get(z_property)
            if isinstance(value, Real) and not isinstance(value, bool):
                z_values[key] = float(value)
                continue

        if point.z is not None and not math.isnan(point.z):
            z_values[key] = float(point.z)

    return z_values


def build_grid(z_values: ZValues) -> List[Cell]:
    """Cells between adjacent distinct x and y sample positions.

    Cells missing any corner value are skipped, so sparse grids simply
    produce fewer cells. Order is x outer, y inner.
    """
    if not z_values:
        return []

    keys = np.array(list(z_values.keys()), dtype=float)
    xs = np.unique(keys[:, 0]).tolist()
    ys = np.unique(keys[:, 1]).tolist()

    cells: List[Cell] = []
    for x0, x1 in zip(xs, xs[1:]):
        for y0, y1 in zip(ys, ys[1:]):
            if all(k in z_values for k in ((x0, y0), (x1, y0), (x1, y1), (x0, y1))):
                cells.append(Cell(
                    bottom_left=Point(x0, y0),
                    bottom_right=Point(x1, y0),
                    top_right=Point(x1, y1),
                    top_left=Point(x0, y1),
                ))

    return cells
