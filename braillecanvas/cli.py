from __future__ import annotations

import argparse
import math
import shutil
import sys
import textwrap
from functools import partial
from typing import Sequence, Tuple

from braillecanvas import Canvas, Turtle
from braillecanvas.base import BRAILLE_COLS, BRAILLE_ROWS

SHAPES = ("line", "box", "ellipse", "triangle", "star", "turtle")


def _terminal_size_dots() -> Tuple[int, int]:
    term_size = shutil.get_terminal_size()
    # Keep the last line free for the shell prompt
    return term_size.columns * BRAILLE_COLS, max(term_size.lines - 1, 1) * BRAILLE_ROWS


def _star_vertices(width: int, height: int) -> list[Tuple[int, int]]:
    center_x, center_y = (width - 1) // 2, (height - 1) // 2
    radius = (min(width, height) - 1) // 2
    vertices = []
    for i in range(5):
        # Start at the top and skip every other point of a pentagon
        angle = math.radians(-90 + i * 144)
        x = round(math.cos(angle) * radius) + center_x
        y = round(math.sin(angle) * radius) + center_y
        vertices.append((max(x, 0), max(y, 0)))
    return vertices


def draw_shape(shape: str, width: int, height: int) -> Canvas:
    """Draws one of the demo shapes scaled to fit width x height dots."""
    if width < 1 or height < 1:
        raise ValueError(f"Invalid size {width}x{height}")
    right, bottom = width - 1, height - 1

    if shape == "line":
        return Canvas().line(0, 0, right, bottom)
    elif shape == "box":
        return Canvas().rectangle(0, 0, right, bottom)
    elif shape == "ellipse":
        return Canvas().ellipse_box(0, 0, right, bottom)
    elif shape == "triangle":
        return Canvas().polygon([(right // 2, 0), (right, bottom), (0, bottom)])
    elif shape == "star":
        return Canvas().polygon(_star_vertices(width, height))
    elif shape == "turtle":
        turtle = Turtle(width / 2, 0)
        for n in range(100):
            turtle.forward(10 - n / 10)
            turtle.right(10)
        return turtle.canvas
    else:
        raise ValueError(f"Unknown shape {shape!r}")


def display_shape(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="braillecanvas",
        description="Draw a shape with braille characters.",
        usage=textwrap.dedent(
            """
            Draw a demo shape as braille text, writing it to the terminal or to a file.
            By default, the shape is scaled to fit the terminal.
            A specific size in dots can be specified with the --size option.

              Examples:

                Draw an ellipse filling the terminal:
                $ braillecanvas ellipse

                # Draw a 40x20 dot star and save it to a file:
                $ braillecanvas star -s 40 20 > star.txt
            """.strip()
        ),
        add_help=True,
    )
    parser.add_argument(
        "shape",
        type=str,
        choices=SHAPES,
        help="The shape to draw.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Output logs verbosely",
    )
    parser.add_argument(
        "-s",
        "--size",
        type=int,
        nargs=2,
        default=None,
        help="size of the drawing in dots (width height)",
    )

    args = parser.parse_args(argv)
    log = partial(print, file=sys.stderr) if args.verbose else lambda message: None

    width, height = args.size if args.size else _terminal_size_dots()
    log(f"Drawing {args.shape} with size {width}x{height}")

    try:
        canvas = draw_shape(args.shape, width, height)
    except ValueError as e:
        print(e, file=sys.stderr)
        sys.exit(1)

    log(f"Drew {len(canvas)} dots in {canvas!r}")
    print(canvas.frame())


def parse_points_line(line: str) -> Tuple[int, ...]:
    """Parses a line of whitespace separated coordinates.

    Two values are a single pixel and four values are a segment.
    """
    try:
        values = tuple(int(value) for value in line.split())
    except ValueError as e:
        raise ValueError(f"Invalid coordinates: {line.strip()!r}") from e
    if len(values) not in (2, 4):
        raise ValueError(f"Expected 2 or 4 coordinates, got {len(values)}: {line.strip()!r}")
    if any(value < 0 for value in values):
        raise ValueError(f"Coordinates must be non-negative: {line.strip()!r}")
    return values


def display_points(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="braillecanvas-points",
        description=(
            "Read pixels ('x y') or segments ('x1 y1 x2 y2') from stdin, one per line, "
            "and draw them with braille characters."
        ),
    )
    parser.add_argument(
        "-d",
        "--dotting",
        type=int,
        default=1,
        help="Draw only every n-th dot of each segment",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action=argparse.BooleanOptionalAction,
        default=False,
        help="Output logs verbosely",
    )

    args = parser.parse_args(argv)
    log = partial(print, file=sys.stderr) if args.verbose else lambda message: None

    if args.dotting < 1:
        print("dotting must be at least 1", file=sys.stderr)
        sys.exit(1)

    canvas = Canvas()
    for line_number, line in enumerate(sys.stdin, start=1):
        if not line.strip() or line.lstrip().startswith("#"):
            continue
        try:
            values = parse_points_line(line)
        except ValueError as e:
            print(f"line {line_number}: {e}", file=sys.stderr)
            sys.exit(1)

        if len(values) == 2:
            canvas.set(*values)
        else:
            canvas.line(*values, dotting=args.dotting)

    log(f"Drew {len(canvas)} dots in {canvas!r}")
    print(canvas.frame())


if __name__ == "__main__":
    display_shape()
