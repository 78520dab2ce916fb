from __future__ import annotations

from typing import Final, Tuple

BRAILLE_COLS: Final[int] = 2
BRAILLE_ROWS: Final[int] = 4

BRAILLE_RANGE_START: Final[int] = 0x2800

# Indexed as PIXEL_MAP[y % BRAILLE_ROWS][x % BRAILLE_COLS]
PIXEL_MAP: Final[Tuple[Tuple[int, int], ...]] = (
    (1 << 0, 1 << 3),  # ⠁ ⠈
    (1 << 1, 1 << 4),  # ⠂ ⠐
    (1 << 2, 1 << 5),  # ⠄ ⠠
    (1 << 6, 1 << 7),  # ⡀ ⢀
)

# All 256 glyphs, indexed by dot mask
braille_table_str: Final[str] = "".join(chr(BRAILLE_RANGE_START + i) for i in range(256))


def cell_of(x: int, y: int) -> Tuple[int, int]:
    """Returns the (row, col) of the character cell containing pixel (x, y)."""
    return y // BRAILLE_ROWS, x // BRAILLE_COLS


def pixel_bit(x: int, y: int) -> int:
    """Returns the dot mask bit for pixel (x, y) within its cell."""
    return PIXEL_MAP[y % BRAILLE_ROWS][x % BRAILLE_COLS]


def check_coords(x: int, y: int) -> None:
    """Raises ValueError unless (x, y) is a valid, non-negative pixel coordinate."""
    if x < 0 or y < 0:
        raise ValueError(f"Pixel coordinates must be non-negative, got ({x}, {y})")


def mask_to_char(mask: int) -> str:
    """Returns the braille character for a dot mask."""
    if not 0 <= mask <= 0xFF:
        raise ValueError(f"Dot mask must be in [0, 255], got {mask}")
    return braille_table_str[mask]


def char_to_mask(char: str) -> int:
    """Returns the dot mask of a single braille character."""
    mask = ord(char) - BRAILLE_RANGE_START
    if not 0 <= mask <= 0xFF:
        raise ValueError(f"{char!r} is not a braille character")
    return mask


def coords_to_braille(*coords: Tuple[int, int]) -> str:
    """Returns the braille character with the dots at the given in-cell coordinates set.

    Coordinates are (column, row) with (0, 0) the top left dot; columns go up to 1
    and rows up to 3.

    Examples:
        >>> coords_to_braille((0, 0))
        '⠁'

        >>> coords_to_braille((0, 3), (1, 3))
        '⣀'
    """
    mask = 0
    for x, y in coords:
        if not (0 <= x < BRAILLE_COLS and 0 <= y < BRAILLE_ROWS):
            raise KeyError((x, y))
        mask |= PIXEL_MAP[y][x]
    return braille_table_str[mask]
