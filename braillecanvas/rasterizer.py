from __future__ import annotations

from typing import Iterable, Iterator, Tuple, TYPE_CHECKING

from braillecanvas.base import check_coords

if TYPE_CHECKING:
    from braillecanvas.canvas import Canvas


def _round_ratio(numerator: int, denominator: int) -> int:
    """Rounds numerator / denominator to the nearest integer, ties going up.

    Denominator must be positive. Integer arithmetic keeps this exact for
    arbitrarily large coordinates.
    """
    return (2 * numerator + denominator) // (2 * denominator)


def line_points(
    start_x: int,
    start_y: int,
    end_x: int,
    end_y: int,
    dotting: int = 1,
) -> Iterator[Tuple[int, int]]:
    """Yields all points on the line between the start and end coordinates.

    Both endpoints are included. The number of points is one more than the
    longer of the two axis deltas, and drawing the same segment in the other
    direction yields the same set of points.

    Args:
        start_x: The x coordinate of the start of the line.
        start_y: The y coordinate of the start of the line.
        end_x: The x coordinate of the end of the line.
        end_y: The y coordinate of the end of the line.
        dotting: The spacing between dots on the line.

    Yields:
        All points on the line between the start and end coordinates.
    """
    if dotting < 1:
        raise ValueError(f"dotting must be at least 1, got {dotting}")
    check_coords(start_x, start_y)
    check_coords(end_x, end_y)

    dx = end_x - start_x
    dy = end_y - start_y
    steps = max(abs(dx), abs(dy))

    if steps == 0:
        yield start_x, start_y
        return

    for i in range(0, steps + 1, dotting):
        yield start_x + _round_ratio(i * dx, steps), start_y + _round_ratio(i * dy, steps)


def rectangle_points(x1: int, y1: int, x2: int, y2: int) -> Iterator[Tuple[int, int]]:
    """Yields the outline of the rectangle with corners (x1, y1) and (x2, y2)."""
    yield from line_points(x1, y1, x2, y1)
    yield from line_points(x1, y1, x1, y2)
    yield from line_points(x1, y2, x2, y2)
    yield from line_points(x2, y1, x2, y2)


def polygon_points(vertices: Iterable[Tuple[int, int]]) -> Iterator[Tuple[int, int]]:
    """Yields all points on the perimeter of a polygon with the given vertices."""
    vertices = tuple(vertices)
    for i in range(len(vertices)):
        start = vertices[i]
        end = vertices[(i + 1) % len(vertices)]
        yield from line_points(*start, *end)


def ellipse_points(center_x: int, center_y: int, a: int, b: int) -> Iterator[Tuple[int, int]]:
    """Yields the outline of an axis-aligned ellipse.

    Uses the midpoint algorithm, walking one quadrant and mirroring it. The
    center and radii must be non-negative; outline points that would land on
    negative coordinates, left of or above the origin, are skipped.

    Args:
        center_x: The x coordinate of the center.
        center_y: The y coordinate of the center.
        a: The horizontal radius.
        b: The vertical radius.
    """
    check_coords(center_x, center_y)
    if a < 0 or b < 0:
        raise ValueError(f"Ellipse radii must be non-negative, got ({a}, {b})")

    a2 = a * a
    b2 = b * b
    x, y = -a, 0
    err = x * (2 * b2 + x) + b2

    def _mirrored(dx: int, dy: int) -> Iterator[Tuple[int, int]]:
        for px, py in (
            (center_x - dx, center_y + dy),
            (center_x + dx, center_y + dy),
            (center_x + dx, center_y - dy),
            (center_x - dx, center_y - dy),
        ):
            if px >= 0 and py >= 0:
                yield px, py

    while x <= 0:
        yield from _mirrored(x, y)
        e2 = 2 * err
        if e2 >= (2 * x + 1) * b2:
            x += 1
            err += (2 * x + 1) * b2
        if e2 <= (2 * y + 1) * a2:
            y += 1
            err += (2 * y + 1) * a2

    # Very flat ellipses stop early; finish the tips along the vertical axis
    while y < b:
        y += 1
        yield from _mirrored(0, y)


def ellipse_box_points(x1: int, y1: int, x2: int, y2: int) -> Iterator[Tuple[int, int]]:
    """Yields the outline of the ellipse inscribed in the box from (x1, y1) to (x2, y2)."""
    check_coords(x1, y1)
    check_coords(x2, y2)
    return ellipse_points(
        (x1 + x2) // 2,
        (y1 + y2) // 2,
        abs(x2 - x1) // 2,
        abs(y2 - y1) // 2,
    )


def line(canvas: Canvas, start_x: int, start_y: int, end_x: int, end_y: int) -> Canvas:
    """Draws the segment between two pixels onto the canvas, endpoints included."""
    for x, y in line_points(start_x, start_y, end_x, end_y):
        canvas.set(x, y)
    return canvas


__all__ = (
    "line",
    "line_points",
    "rectangle_points",
    "polygon_points",
    "ellipse_points",
    "ellipse_box_points",
)
