from braillecanvas.base import (
    BRAILLE_COLS,
    BRAILLE_RANGE_START,
    BRAILLE_ROWS,
    PIXEL_MAP,
    braille_table_str,
    cell_of,
    char_to_mask,
    coords_to_braille,
    mask_to_char,
    pixel_bit,
)
from braillecanvas.canvas import Canvas
from braillecanvas.rasterizer import line, line_points
from braillecanvas.turtle import Turtle

__all__ = (
    "BRAILLE_COLS",
    "BRAILLE_RANGE_START",
    "BRAILLE_ROWS",
    "PIXEL_MAP",
    "Canvas",
    "Turtle",
    "braille_table_str",
    "cell_of",
    "char_to_mask",
    "coords_to_braille",
    "line",
    "line_points",
    "mask_to_char",
    "pixel_bit",
)
