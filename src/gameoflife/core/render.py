"""Text rendering of a cell buffer."""

from typing import Tuple
import numpy as np

DEAD_GLYPH = "\u25fb"  # ◻
ALIVE_GLYPH = "\u25fc"  # ◼


def render_text(cells: np.ndarray, width: int, height: int) -> str:
    """Render a row-major cell buffer as text.

    Args:
        cells: Flat buffer of 0/1 values, length width * height
        width: Number of columns
        height: Number of rows

    Returns:
        One line per row, each holding ``width`` glyphs and a trailing newline
    """
    rows = np.asarray(cells).reshape(height, width)
    lines = []
    for row in rows:
        lines.append("".join(ALIVE_GLYPH if cell else DEAD_GLYPH for cell in row))
        lines.append("\n")
    return "".join(lines)


def parse_text(text: str) -> Tuple[int, int, np.ndarray]:
    """Decode a rendering produced by :func:`render_text`.

    Args:
        text: Rendered grid

    Returns:
        Tuple of (width, height, cells) where cells is a flat uint8 buffer

    Raises:
        ValueError: If the text does not end with a newline, or rows have
            different lengths or contain unknown glyphs
    """
    if text and not text.endswith("\n"):
        raise ValueError("Rendered grid must end with a newline")

    # Every row is newline-terminated, so the final element is empty
    lines = text.split("\n")[:-1]
    height = len(lines)
    width = len(lines[0]) if lines else 0

    cells = np.zeros(width * height, dtype=np.uint8)
    for row, line in enumerate(lines):
        if len(line) != width:
            raise ValueError(f"Row {row} has {len(line)} glyphs, expected {width}")
        for col, glyph in enumerate(line):
            if glyph == ALIVE_GLYPH:
                cells[row * width + col] = 1
            elif glyph != DEAD_GLYPH:
                raise ValueError(f"Unknown glyph {glyph!r} at ({row}, {col})")

    return width, height, cells
