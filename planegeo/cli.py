"""Command-line interface for planegeo."""

import logging
import sys
import time
import click

from .svg_io import (
    read_svg,
    write_svg,
    extract_polygons_from_svg,
    create_svg_from_polygons,
)
from .geometry import EdgeInsets, Line, LineSegment, Point


def setup_logging(verbose: bool):
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )


def load_polygons(input, verbose):
    """Read INPUT and return (polygons, metadata), exiting on failure."""
    try:
        svg_content = read_svg(input if input != '-' else None)
    except Exception as e:
        click.echo(f"Error reading input: {e}", err=True)
        sys.exit(1)

    if verbose:
        click.echo(f"Read {len(svg_content)} bytes", err=True)

    try:
        polygons, metadata = extract_polygons_from_svg(svg_content)
    except Exception as e:
        click.echo(f"Error parsing input: {e}", err=True)
        sys.exit(1)

    if verbose:
        click.echo(f"Found {len(polygons)} shapes", err=True)

    if not polygons:
        click.echo("No polygons found in input", err=True)
        sys.exit(1)

    return polygons, metadata


@click.group()
@click.version_option(package_name='planegeo')
def main():
    """planegeo: planar line, segment and polygon geometry.

    Works on the straight-edged shapes (polygons, polylines, rects and
    M/L/H/V/Z paths) found in an SVG file.

    Examples:

        planegeo inset input.svg --all 2 -o output.svg

        cat input.svg | planegeo intersect --line 0 5 10 5
    """
    pass


@main.command()
@click.argument('input', default='-', required=False)
@click.option('-o', '--output', default='-', help='Output file (default: stdout)')
@click.option('--all', 'uniform', type=float, default=None,
              help='Same offset for every side (overrides per-side options)')
@click.option('--top', default=0.0, type=float, help='Top offset (default: 0)')
@click.option('--left', default=0.0, type=float, help='Left offset (default: 0)')
@click.option('--bottom', default=0.0, type=float, help='Bottom offset (default: 0)')
@click.option('--right', default=0.0, type=float, help='Right offset (default: 0)')
@click.option('--stroke', default='black', help='Stroke color (default: black)')
@click.option('--stroke-width', default='1', help='Stroke width (default: 1)')
@click.option('--verbose', '-v', is_flag=True, help='Print timing and statistics')
def inset(input, output, uniform, top, left, bottom, right, stroke, stroke_width, verbose):
    """Offset the edges of every quadrilateral in an SVG file.

    INPUT: SVG file path, or - for stdin (default)

    Offsets apply to the edges in the order left, bottom, right, top, as
    laid out by an SVG <rect>. Shapes that are not quadrilaterals, or whose
    neighbouring edges are parallel, are skipped.
    """
    setup_logging(verbose)
    start_time = time.time()

    polygons, metadata = load_polygons(input, verbose)

    if uniform is not None:
        insets = EdgeInsets.uniform(uniform)
    else:
        insets = EdgeInsets(top=top, left=left, bottom=bottom, right=right)

    results = []
    for i, poly in enumerate(polygons):
        result = poly.inset(insets)
        if result is None:
            if len(poly) != 4:
                reason = f"only quadrilaterals can be inset, got {len(poly)} vertices"
            else:
                reason = "neighbouring edges are parallel, inset has no four corners"
            click.echo(f"Skipping shape {i + 1}: {reason}", err=True)
            continue
        results.append(result)

    if verbose:
        click.echo(f"Inset {len(results)}/{len(polygons)} shapes", err=True)

    output_svg = create_svg_from_polygons(
        results,
        viewbox=metadata.get('viewBox', ''),
        width=metadata.get('width', ''),
        height=metadata.get('height', ''),
        stroke=stroke,
        stroke_width=stroke_width,
    )

    try:
        write_svg(output_svg, output if output != '-' else None)
    except Exception as e:
        click.echo(f"Error writing output: {e}", err=True)
        sys.exit(1)

    elapsed = time.time() - start_time
    if verbose:
        click.echo(f"Completed in {elapsed:.3f}s", err=True)


@main.command()
@click.argument('input', default='-', required=False)
@click.option('--line', 'coords', nargs=4, type=float, required=True,
              metavar='X1 Y1 X2 Y2', help='Two points on the query segment')
@click.option('--infinite', is_flag=True,
              help='Treat the query as the infinite line through both points')
@click.option('--verbose', '-v', is_flag=True, help='Print per-shape statistics')
def intersect(input, coords, infinite, verbose):
    """Print where a segment or line crosses the shapes in an SVG file.

    INPUT: SVG file path, or - for stdin (default)

    Prints one "x,y" line per intersection point.
    """
    setup_logging(verbose)

    polygons, _ = load_polygons(input, verbose)

    x1, y1, x2, y2 = coords
    segment = LineSegment(Point(x1, y1), Point(x2, y2))
    query = Line.from_segment(segment) if infinite else segment

    for i, poly in enumerate(polygons):
        points = poly.intersection(query)
        if verbose:
            click.echo(f"Shape {i + 1}: {len(points)} intersections", err=True)
        for p in points:
            click.echo(f"{p.x:g},{p.y:g}")


if __name__ == '__main__':
    main()
