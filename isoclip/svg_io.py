"""SVG input/output utilities for isoclip."""

import math
import re
import sys
from typing import List, Optional, Sequence, Tuple
from xml.etree import ElementTree as ET

from .geometry import (
    Geometry,
    LineString,
    MultiLineString,
    MultiPolygon,
    Point,
    Polygon,
    close_ring,
)

_NUMBER = r'-?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?'

# Arguments consumed per repetition, and the offset of the end point inside them.
_PATH_ARITY = {
    'L': (2, 0), 'T': (2, 0),
    'C': (6, 4), 'S': (4, 2), 'Q': (4, 2),
    'A': (7, 5),
}

SHAPE_TAGS = ('path', 'polygon', 'polyline', 'line', 'rect', 'circle', 'ellipse')


def parse_path_d(d: str) -> List[Tuple[List[Point], bool]]:
    """Parse an SVG path d attribute into subpaths.

    Returns a list of (points, closed) pairs, one per subpath. Curves are
    approximated by straight lines to their end points.
    """
    if not d or not d.strip():
        return []

    subpaths: List[Tuple[List[Point], bool]] = []
    points: List[Point] = []
    x = y = 0.0
    start_x = start_y = 0.0

    def flush(closed: bool):
        nonlocal points
        if points:
            subpaths.append((points, closed))
        points = []

    for cmd in re.findall(r'[MLHVCSQTAZmlhvcsqtaz][^MLHVCSQTAZmlhvcsqtaz]*', d):
        op = cmd[0]
        upper = op.upper()
        relative = op.islower()
        args = [float(v) for v in re.findall(_NUMBER, cmd[1:])]

        if upper not in ('M', 'Z') and not points:
            # drawing after Z continues from the subpath start
            points.append(Point(x, y))

        if upper == 'M':
            flush(False)
            for i in range(0, len(args) - 1, 2):
                if relative:
                    x, y = x + args[i], y + args[i + 1]
                else:
                    x, y = args[i], args[i + 1]
                if i == 0:
                    start_x, start_y = x, y
                points.append(Point(x, y))

        elif upper == 'H':
            for v in args:
                x = x + v if relative else v
                points.append(Point(x, y))

        elif upper == 'V':
            for v in args:
                y = y + v if relative else v
                points.append(Point(x, y))

        elif upper == 'Z':
            if points:
                close_ring(points)
            x, y = start_x, start_y
            flush(True)

        else:
            step, offset = _PATH_ARITY[upper]
            for i in range(0, len(args) - step + 1, step):
                ex, ey = args[i + offset], args[i + offset + 1]
                if relative:
                    x, y = x + ex, y + ey
                else:
                    x, y = ex, ey
                points.append(Point(x, y))

    flush(False)
    return subpaths


def _parse_points_attr(value: str) -> List[Point]:
    coords = [float(v) for v in re.findall(_NUMBER, value or '')]
    return [Point(coords[i], coords[i + 1]) for i in range(0, len(coords) - 1, 2)]


def _ellipse(cx: float, cy: float, rx: float, ry: float, segments: int = 32) -> List[Point]:
    ring = [
        Point(cx + rx * math.cos(2 * math.pi * i / segments),
              cy + ry * math.sin(2 * math.pi * i / segments))
        for i in range(segments)
    ]
    return close_ring(ring)


def element_to_geometries(element: ET.Element) -> List[Geometry]:
    """Convert an SVG shape element to polygons (closed shapes) and lines (open shapes)."""
    tag = element.tag.split('}')[-1].lower()  # Remove namespace

    def get(name: str) -> float:
        return float(element.get(name, 0))

    rings: List[Tuple[List[Point], bool]] = []

    if tag == 'path':
        rings = parse_path_d(element.get('d', ''))

    elif tag == 'polygon':
        rings = [(close_ring(_parse_points_attr(element.get('points'))), True)]

    elif tag == 'polyline':
        rings = [(_parse_points_attr(element.get('points')), False)]

    elif tag == 'line':
        rings = [([Point(get('x1'), get('y1')), Point(get('x2'), get('y2'))], False)]

    elif tag == 'rect':
        x, y, w, h = get('x'), get('y'), get('width'), get('height')
        rings = [([Point(x, y), Point(x + w, y), Point(x + w, y + h),
                   Point(x, y + h), Point(x, y)], True)]

    elif tag == 'circle':
        r = get('r')
        rings = [(_ellipse(get('cx'), get('cy'), r, r), True)]

    elif tag == 'ellipse':
        rings = [(_ellipse(get('cx'), get('cy'), get('rx'), get('ry')), True)]

    geometries: List[Geometry] = []
    for points, closed in rings:
        if closed and len(points) >= 4:
            geometries.append(Polygon(points))
        elif len(points) >= 2:
            geometries.append(LineString(points))
    return geometries


def extract_geometries_from_svg(svg_content: str) -> Tuple[List[Geometry], dict]:
    """Extract all shapes from SVG content.

    Returns:
        Tuple of (list of geometries, SVG metadata dict with viewBox, width, height)
    """
    root = ET.fromstring(svg_content)

    metadata = {
        'viewBox': root.get('viewBox', ''),
        'width': root.get('width', ''),
        'height': root.get('height', ''),
    }

    geometries: List[Geometry] = []

    def process_element(elem: ET.Element):
        if elem.tag.split('}')[-1].lower() in SHAPE_TAGS:
            geometries.extend(element_to_geometries(elem))
        for child in elem:
            process_element(child)

    process_element(root)

    return geometries, metadata


def _ring_to_path(points: Sequence[Point], closed: bool, precision: int) -> str:
    if not points:
        return ''
    head, *rest = points
    cmds = [f"M{head.x:.{precision}f},{head.y:.{precision}f}"]
    cmds.extend(f"L{p.x:.{precision}f},{p.y:.{precision}f}" for p in rest)
    if closed:
        cmds.append('Z')
    return ' '.join(cmds)


def geometry_to_svg_path(geometry: Geometry, precision: int = 2) -> str:
    """Convert a geometry to an SVG path d attribute."""
    if isinstance(geometry, Point):
        return ''
    if isinstance(geometry, LineString):
        return _ring_to_path(geometry.coords, False, precision)
    if isinstance(geometry, Polygon):
        return ' '.join(
            _ring_to_path(ring, True, precision)
            for ring in [geometry.exterior] + geometry.holes if ring
        )
    if isinstance(geometry, MultiLineString):
        return ' '.join(geometry_to_svg_path(line, precision) for line in geometry.lines)
    if isinstance(geometry, MultiPolygon):
        return ' '.join(geometry_to_svg_path(p, precision) for p in geometry.polygons)
    raise TypeError(f"Geometry type {type(geometry).__name__} is not supported")


def create_svg_from_geometries(
    geometries: Sequence[Geometry],
    viewbox: str = '',
    width: str = '',
    height: str = '',
    stroke: str = 'black',
    stroke_width: str = '1',
    fill: str = 'none',
) -> str:
    """Create a complete SVG document with one path per geometry.

    Args:
        geometries: Geometries to draw; empty ones are skipped
        viewbox: SVG viewBox attribute
        width: SVG width attribute
        height: SVG height attribute
        stroke: Stroke color
        stroke_width: Stroke width
        fill: Fill color for polygonal geometries

    Returns:
        Complete SVG document as string
    """
    attrs = ['xmlns="http://www.w3.org/2000/svg"']
    if viewbox:
        attrs.append(f'viewBox="{viewbox}"')
    if width:
        attrs.append(f'width="{width}"')
    if height:
        attrs.append(f'height="{height}"')

    paths = []
    for geometry in geometries:
        d = geometry_to_svg_path(geometry)
        if not d:
            continue
        polygonal = isinstance(geometry, (Polygon, MultiPolygon))
        paths.append(
            f'  <path d="{d}" fill="{fill if polygonal else "none"}" '
            f'fill-rule="evenodd" stroke="{stroke}" stroke-width="{stroke_width}"/>'
        )

    body = '\n'.join(paths)
    return f'''<?xml version="1.0" encoding="UTF-8"?>
<svg {' '.join(attrs)}>
{body}
</svg>'''


def read_svg(path: Optional[str] = None) -> str:
    """Read SVG content from file or stdin.

    Args:
        path: File path, or None to read from stdin

    Returns:
        SVG content as string
    """
    if path is None or path == '-':
        return sys.stdin.read()
    with open(path, 'r') as f:
        return f.read()


def write_svg(content: str, path: Optional[str] = None):
    """Write SVG content to file or stdout.

    Args:
        content: SVG content
        path: File path, or None to write to stdout
    """
    if path is None or path == '-':
        sys.stdout.write(content)
    else:
        with open(path, 'w') as f:
            f.write(content)
