from __future__ import annotations

import operator
from functools import partialmethod
from typing import Callable, Dict, Iterable, Iterator, List, Literal, Tuple

from bitarray import bitarray

from braillecanvas import rasterizer
from braillecanvas.base import (
    BRAILLE_COLS,
    BRAILLE_ROWS,
    PIXEL_MAP,
    braille_table_str,
    cell_of,
    check_coords,
    pixel_bit,
)


class Canvas:
    """A sparse, unbounded grid of pixels drawn with braille characters.

    Each character cell packs a 2x4 block of pixels into a dot mask. Only cells
    with at least one dot set are stored, and the canvas grows to fit whatever
    is drawn on it.
    """

    __slots__ = ("_chars",)

    def __init__(self) -> None:
        # (row, col) -> dot mask, never 0
        self._chars: Dict[Tuple[int, int], int] = {}

    def _update(self, x: int, y: int, operation: Callable[[int, int], int]) -> None:
        check_coords(x, y)
        cell = cell_of(x, y)
        mask = operation(self._chars.get(cell, 0), pixel_bit(x, y))
        if mask:
            self._chars[cell] = mask
        else:
            self._chars.pop(cell, None)

    def set(self, x: int, y: int) -> Canvas:
        """Sets the pixel at the given coordinates."""
        self._update(x, y, operator.or_)
        return self

    def unset(self, x: int, y: int) -> Canvas:
        """Clears the pixel at the given coordinates."""
        self._update(x, y, lambda mask, bit: mask & ~bit)
        return self

    def toggle(self, x: int, y: int) -> Canvas:
        """Flips the pixel at the given coordinates."""
        self._update(x, y, operator.xor)
        return self

    def get(self, x: int, y: int) -> bool:
        """Returns whether the pixel at the given coordinates is set."""
        check_coords(x, y)
        return bool(self._chars.get(cell_of(x, y), 0) & pixel_bit(x, y))

    def clear(self) -> Canvas:
        """Clears the entire canvas."""
        self._chars.clear()
        return self

    def row_range(self) -> Tuple[int, int]:
        """Returns the inclusive (min, max) cell row in use, or (0, 0) for an empty canvas."""
        if not self._chars:
            return 0, 0
        rows = [row for row, _ in self._chars]
        return min(rows), max(rows)

    def col_range(self) -> Tuple[int, int]:
        """Returns the inclusive (min, max) cell column in use, or (0, 0) for an empty canvas."""
        if not self._chars:
            return 0, 0
        cols = [col for _, col in self._chars]
        return min(cols), max(cols)

    def rows(self) -> List[str]:
        """Returns each line of the frame.

        Every line spans the full column range, with blank braille characters
        for empty cells, so all lines have the same length.
        """
        if not self._chars:
            return []
        min_row, max_row = self.row_range()
        min_col, max_col = self.col_range()
        chars = self._chars
        return [
            "".join(braille_table_str[chars.get((row, col), 0)] for col in range(min_col, max_col + 1))
            for row in range(min_row, max_row + 1)
        ]

    def frame(self) -> str:
        """Returns the canvas as a string, joining chars and newlines to form rows."""
        return "\n".join(self.rows())

    def pixels(self) -> Iterator[Tuple[int, int]]:
        """Yields the coordinates of every set pixel."""
        for (row, col), mask in sorted(self._chars.items()):
            for dy, bits in enumerate(PIXEL_MAP):
                for dx, bit in enumerate(bits):
                    if mask & bit:
                        yield col * BRAILLE_COLS + dx, row * BRAILLE_ROWS + dy

    def with_changes(
        self,
        coords: Iterable[Tuple[int, int]],
        mode: Literal["add", "clear", "toggle"] = "add",
    ) -> Canvas:
        """Modify the canvas by setting, clearing or flipping the dots on the coordinates given by coords."""
        if mode == "add":
            change = self.set
        elif mode == "clear":
            change = self.unset
        elif mode == "toggle":
            change = self.toggle
        else:
            raise ValueError(f"Invalid mode {mode}")

        # Nothing is drawn unless every coordinate is valid
        coords = tuple(coords)
        for x, y in coords:
            check_coords(x, y)

        for x, y in coords:
            change(x, y)
        return self

    def line(
        self,
        start_x: int,
        start_y: int,
        end_x: int,
        end_y: int,
        dotting: int = 1,
        mode: Literal["add", "clear", "toggle"] = "add",
    ) -> Canvas:
        if dotting == 1 and mode == "add":
            return rasterizer.line(self, start_x, start_y, end_x, end_y)
        return self.with_changes(
            rasterizer.line_points(start_x, start_y, end_x, end_y, dotting=dotting), mode
        )

    def rectangle(
        self,
        x1: int,
        y1: int,
        x2: int,
        y2: int,
        mode: Literal["add", "clear", "toggle"] = "add",
    ) -> Canvas:
        # Corners are shared by two edges, so toggling needs each point once
        return self.with_changes(set(rasterizer.rectangle_points(x1, y1, x2, y2)), mode)

    def polygon(
        self,
        vertices: Iterable[Tuple[int, int]],
        mode: Literal["add", "clear", "toggle"] = "add",
    ) -> Canvas:
        return self.with_changes(set(rasterizer.polygon_points(vertices)), mode)

    def ellipse_center(
        self,
        center_x: int,
        center_y: int,
        a: int,
        b: int,
        mode: Literal["add", "clear", "toggle"] = "add",
    ) -> Canvas:
        """Draws an ellipse around the given center with horizontal radius a and vertical radius b."""
        return self.with_changes(set(rasterizer.ellipse_points(center_x, center_y, a, b)), mode)

    def ellipse_box(
        self,
        x1: int,
        y1: int,
        x2: int,
        y2: int,
        mode: Literal["add", "clear", "toggle"] = "add",
    ) -> Canvas:
        """Draws the ellipse inscribed in the box with corners (x1, y1) and (x2, y2)."""
        return self.with_changes(set(rasterizer.ellipse_box_points(x1, y1, x2, y2)), mode)

    def to_bitarray(self, width: int, height: int) -> bitarray:
        """Returns a row-major bitmap of the pixels in the window from the origin.

        Pixel (x, y) is bit ``y * width + x``; pixels outside the window are left out.
        """
        if width < 0 or height < 0:
            raise ValueError(f"Invalid bitmap size {width}x{height}")
        bits = bitarray(width * height)
        bits.setall(0)
        for x, y in self.pixels():
            if x < width and y < height:
                bits[y * width + x] = 1
        return bits

    @classmethod
    def from_bitarray(cls, bits: bitarray, width: int) -> Canvas:
        """Creates a new canvas from a row-major bitmap with the given width in pixels."""
        if width < 1:
            raise ValueError(f"width must be at least 1, got {width}")
        canvas = cls()
        for i in bits.search(bitarray("1")):
            canvas.set(i % width, i // width)
        return canvas

    def apply_other(self, other: Canvas, operation: Callable[[int, int], int]) -> Canvas:
        """Apply a binary operation to the dot masks of this canvas and another canvas, and
        return a new canvas with the result.
        """
        result = Canvas()
        for cell in self._chars.keys() | other._chars.keys():
            mask = operation(self._chars.get(cell, 0), other._chars.get(cell, 0))
            if mask:
                result._chars[cell] = mask
        return result

    __or__ = partialmethod(apply_other, operation=operator.or_)
    __and__ = partialmethod(apply_other, operation=operator.and_)
    __xor__ = partialmethod(apply_other, operation=operator.xor)

    def copy(self) -> Canvas:
        canvas = Canvas()
        canvas._chars = self._chars.copy()
        return canvas

    def __contains__(self, xy: Tuple[int, int]) -> bool:
        return self.get(*xy)

    def __len__(self) -> int:
        """Returns the number of set pixels."""
        return sum(mask.bit_count() for mask in self._chars.values())

    def __str__(self) -> str:
        return self.frame()

    def __repr__(self) -> str:
        min_row, max_row = self.row_range()
        min_col, max_col = self.col_range()
        return f"Canvas(rows={min_row}..{max_row}, cols={min_col}..{max_col}, cells={len(self._chars)})"

    def __eq__(self, other):
        if isinstance(other, Canvas) and self._chars == other._chars:
            return True
        return False
