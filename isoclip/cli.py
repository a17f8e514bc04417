"""Command-line interface for isoclip."""

import json
import logging
import sys
import time
from typing import List

import click

from .clipping import bbox_clip
from .contours import isobands, isolines
from .geometry import BBox, Geometry, bbox
from .grid_io import load_grid
from .svg_io import (
    create_svg_from_geometries,
    extract_geometries_from_svg,
    read_svg,
    write_svg,
)


def parse_breaks(value: str) -> List[float]:
    """Parse a comma separated list of break values."""
    try:
        breaks = [float(v) for v in value.split(',') if v.strip()]
    except ValueError:
        raise click.BadParameter(f"'{value}' is not a comma separated list of numbers")
    if not breaks:
        raise click.BadParameter("at least one break value is required")
    return breaks


def _configure_logging(verbose: bool):
    if verbose:
        logging.basicConfig(level=logging.WARNING, format='%(levelname)s %(name)s: %(message)s')
        logging.getLogger('isoclip').setLevel(logging.DEBUG)


@click.group()
@click.version_option()
def main():
    """isoclip: rectangle clipping and contouring for planar geometry.

    Clip SVG shapes to a bounding box, or turn a grid of sampled values into
    contour lines and filled contour bands.

    Examples:

        isoclip clip input.svg --bbox 0 0 100 100 -o output.svg

        isoclip contour samples.xyz --breaks 0,10,20 --mode bands -f geojson
    """
    pass


@main.command()
@click.argument('input', default='-', required=False)
@click.option('-o', '--output', default='-', help='Output file (default: stdout)')
@click.option('--bbox', 'box', nargs=4, type=float, required=True,
              metavar='WEST SOUTH EAST NORTH', help='Clip rectangle')
@click.option('--split-lines/--join-lines', default=False,
              help='Keep the pieces of a line that leaves and re-enters the box apart '
                   '(default: join them)')
@click.option('--stroke', default='black', help='Stroke color (default: black)')
@click.option('--stroke-width', default='1', help='Stroke width (default: 1)')
@click.option('--verbose', '-v', is_flag=True, help='Print timing and statistics')
def clip(input, output, box, split_lines, stroke, stroke_width, verbose):
    """Clip every shape of an SVG file to a rectangle.

    INPUT: SVG file path, or - for stdin (default)
    """
    _configure_logging(verbose)
    start_time = time.time()

    try:
        svg_content = read_svg(input if input != '-' else None)
    except OSError as e:
        click.echo(f"Error reading input: {e}", err=True)
        sys.exit(1)

    geometries, metadata = extract_geometries_from_svg(svg_content)
    if verbose:
        click.echo(f"Found {len(geometries)} shapes", err=True)

    clip_box = BBox(*box)
    clipped: List[Geometry] = []
    for geometry in geometries:
        result = bbox_clip(geometry, clip_box, split_lines=split_lines)
        if result is not None and not result.is_empty:
            clipped.append(result)

    if verbose:
        click.echo(f"{len(clipped)} shapes intersect the box", err=True)

    output_svg = create_svg_from_geometries(
        clipped,
        viewbox=metadata.get('viewBox', ''),
        width=metadata.get('width', ''),
        height=metadata.get('height', ''),
        stroke=stroke,
        stroke_width=stroke_width,
    )

    try:
        write_svg(output_svg, output if output != '-' else None)
    except OSError as e:
        click.echo(f"Error writing output: {e}", err=True)
        sys.exit(1)

    if verbose:
        click.echo(f"Completed in {time.time() - start_time:.3f}s", err=True)


@main.command()
@click.argument('grid', type=click.Path(exists=True, dir_okay=False))
@click.option('-o', '--output', default='-', help='Output file (default: stdout)')
@click.option('--breaks', '-b', required=True, help='Comma separated break values')
@click.option('--mode', '-m', default='lines', type=click.Choice(['lines', 'bands']),
              help='Contour lines or filled bands (default: lines)')
@click.option('--format', '-f', 'fmt', default='svg', type=click.Choice(['svg', 'geojson']),
              help='Output format (default: svg)')
@click.option('--tolerance', default=1e-8, type=float,
              help='Distance under which contour vertices are joined')
@click.option('--verbose', '-v', is_flag=True, help='Print timing and statistics')
def contour(grid, output, breaks, mode, fmt, tolerance, verbose):
    """Contour a grid of samples.

    GRID: text file with one "x y z" sample per line
    """
    _configure_logging(verbose)
    start_time = time.time()

    break_values = parse_breaks(breaks)
    extract = isolines if mode == 'lines' else isobands

    try:
        points = load_grid(grid)
        if verbose:
            click.echo(f"Read {len(points)} samples", err=True)
        features = extract(points, break_values, tolerance=tolerance)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if verbose:
        click.echo(f"Generated {len(features)} features", err=True)

    if fmt == 'geojson':
        content = json.dumps(features.to_geojson())
    else:
        extent = bbox(points) if points else BBox(0, 0, 0, 0)
        content = create_svg_from_geometries(
            [f.geometry for f in features],
            viewbox=f"{extent.west} {extent.south} "
                    f"{extent.east - extent.west} {extent.north - extent.south}",
            fill='none' if mode == 'lines' else 'gray',
        )

    try:
        write_svg(content, output if output != '-' else None)
    except OSError as e:
        click.echo(f"Error writing output: {e}", err=True)
        sys.exit(1)

    if verbose:
        click.echo(f"Completed in {time.time() - start_time:.3f}s", err=True)


if __name__ == '__main__':
    main()
