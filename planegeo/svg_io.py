"""SVG input/output utilities for planegeo."""

import logging
import re
import sys
from typing import List, Optional, Tuple
from xml.etree import ElementTree as ET

from .geometry import Point, Polygon, Rect

logger = logging.getLogger(__name__)

COMMAND_RE = re.compile(r'[MLHVCSQTAZmlhvcsqtaz][^MLHVCSQTAZmlhvcsqtaz]*')
NUMBER_RE = re.compile(r'[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?')

SHAPE_TAGS = ('path', 'polygon', 'polyline', 'rect')


def parse_numbers(text: str) -> List[float]:
    return [float(n) for n in NUMBER_RE.findall(text)]


def parse_path_d(d: str) -> Optional[List[Point]]:
    """Parse the outline of a straight-edged SVG path.

    Handles M, L, H, V, Z and their lowercase variants. Only the first
    subpath is read. Returns None if the path uses curves or arcs.
    """
    if not d or not d.strip():
        return []

    points: List[Point] = []
    x, y = 0.0, 0.0

    for cmd in COMMAND_RE.findall(d):
        cmd_type = cmd[0]
        args = parse_numbers(cmd[1:])
        relative = cmd_type.islower()

        if cmd_type in ('M', 'm'):
            if points:
                break
            for i in range(0, len(args) - 1, 2):
                if relative:
                    x, y = x + args[i], y + args[i + 1]
                else:
                    x, y = args[i], args[i + 1]
                points.append(Point(x, y))

        elif cmd_type in ('L', 'l'):
            for i in range(0, len(args) - 1, 2):
                if relative:
                    x, y = x + args[i], y + args[i + 1]
                else:
                    x, y = args[i], args[i + 1]
                points.append(Point(x, y))

        elif cmd_type in ('H', 'h'):
            for value in args:
                x = x + value if relative else value
                points.append(Point(x, y))

        elif cmd_type in ('V', 'v'):
            for value in args:
                y = y + value if relative else value
                points.append(Point(x, y))

        elif cmd_type in ('Z', 'z'):
            break

        else:
            logger.debug("path command %r is not a straight edge, skipping path", cmd_type)
            return None

    return points


def drop_closing_points(points: List[Point]) -> List[Point]:
    """Remove consecutive duplicates and a trailing copy of the first point."""
    result: List[Point] = []
    for p in points:
        if not result or p != result[-1]:
            result.append(p)
    while len(result) > 1 and result[-1] == result[0]:
        result.pop()
    return result


def element_to_polygon(element: ET.Element) -> Optional[Polygon]:
    """Convert an SVG shape element to a Polygon, or None if it has no area."""
    tag = element.tag.split('}')[-1].lower()  # Remove namespace

    points: Optional[List[Point]] = []

    if tag == 'path':
        points = parse_path_d(element.get('d', ''))

    elif tag in ('polygon', 'polyline'):
        coords = parse_numbers(element.get('points', ''))
        points = [Point(coords[i], coords[i + 1]) for i in range(0, len(coords) - 1, 2)]

    elif tag == 'rect':
        rect = Rect(
            float(element.get('x', 0)),
            float(element.get('y', 0)),
            float(element.get('width', 0)),
            float(element.get('height', 0)),
        )
        if rect.width <= 0 or rect.height <= 0:
            return None
        return Polygon.from_rect(rect)

    if not points:
        return None

    points = drop_closing_points(points)
    if len(points) < 3:
        return None

    return Polygon(points)


def extract_polygons_from_svg(svg_content: str) -> Tuple[List[Polygon], dict]:
    """Extract all straight-edged closed shapes from SVG content.

    Returns:
        Tuple of (list of polygons, SVG metadata dict with viewBox, width, height)
    """
    root = ET.fromstring(svg_content)

    metadata = {
        'viewBox': root.get('viewBox', ''),
        'width': root.get('width', ''),
        'height': root.get('height', ''),
    }

    polygons: List[Polygon] = []

    for elem in root.iter():
        tag = elem.tag.split('}')[-1].lower()
        if tag in SHAPE_TAGS:
            poly = element_to_polygon(elem)
            if poly is not None:
                polygons.append(poly)

    return polygons, metadata


def polygon_to_svg_points(polygon: Polygon, precision: int = 2) -> str:
    """Render polygon vertices as an SVG `points` attribute."""
    return ' '.join(f"{p.x:.{precision}f},{p.y:.{precision}f}" for p in polygon)


def create_svg_from_polygons(
    polygons: List[Polygon],
    viewbox: str = '',
    width: str = '',
    height: str = '',
    stroke: str = 'black',
    stroke_width: str = '1',
    precision: int = 2,
) -> str:
    """Create a complete SVG document with one <polygon> per polygon.

    Args:
        polygons: Polygons to draw
        viewbox: SVG viewBox attribute
        width: SVG width attribute
        height: SVG height attribute
        stroke: Stroke color
        stroke_width: Stroke width
        precision: Decimal places for coordinates

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

    shapes = [
        f'  <polygon points="{polygon_to_svg_points(p, precision)}" '
        f'fill="none" stroke="{stroke}" stroke-width="{stroke_width}"/>'
        for p in polygons
    ]

    return '\n'.join([
        '<?xml version="1.0" encoding="UTF-8"?>',
        f"<svg {' '.join(attrs)}>",
        *shapes,
        '</svg>',
    ]) + '\n'


def read_svg(path: Optional[str] = None) -> str:
    """Read SVG content from file or stdin (path None or '-')."""
    if path is None or path == '-':
        return sys.stdin.read()
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def write_svg(content: str, path: Optional[str] = None):
    """Write SVG content to file or stdout (path None or '-')."""
    if path is None or path == '-':
        sys.stdout.write(content)
    else:
        with open(path, 'w', encoding='utf-8') as f:
            f.write(content)
