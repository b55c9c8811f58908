"""Tests for text rendering."""

import numpy as np
import pytest
from gameoflife.core.render import ALIVE_GLYPH, DEAD_GLYPH, parse_text, render_text
from gameoflife.core.universe import Universe


class TestRender:
    """Test cases for rendering and decoding grids."""

    def test_glyphs(self):
        """Test dead and alive glyphs are the hollow and solid squares."""
        assert DEAD_GLYPH == "◻"
        assert ALIVE_GLYPH == "◼"

    def test_render_small_grid(self):
        """Test row-major rendering with a trailing newline per row."""
        universe = Universe.blank(3, 2)
        universe.set_cells([(0, 0), (1, 2)])

        assert universe.render() == "◼◻◻\n◻◻◼\n"
        assert str(universe) == universe.render()

    def test_render_shape(self):
        """Test rendering has height lines of width glyphs."""
        universe = Universe(7, 4)
        lines = universe.render().split("\n")

        # Trailing newline leaves an empty final element
        assert lines[-1] == ""
        assert len(lines[:-1]) == 4
        assert all(len(line) == 7 for line in lines[:-1])

    def test_round_trip(self):
        """Test decoding a rendering reconstructs the buffer."""
        universe = Universe(12, 5)
        universe.tick()

        width, height, cells = parse_text(universe.render())

        assert (width, height) == (12, 5)
        assert np.array_equal(cells, universe.get_cells())

    def test_render_text_accepts_views(self):
        """Test rendering straight from a read-only view."""
        universe = Universe.blank(2, 2)
        universe.set_cells([(1, 1)])

        assert render_text(universe.get_cells(), 2, 2) == "◻◻\n◻◼\n"

    def test_parse_ragged_rows(self):
        """Test rows of different lengths are rejected."""
        with pytest.raises(ValueError):
            parse_text("◻◻\n◻\n")

    def test_parse_unknown_glyph(self):
        """Test glyphs other than the two squares are rejected."""
        with pytest.raises(ValueError):
            parse_text("◻*\n")

    def test_parse_empty(self):
        """Test empty text decodes to an empty grid."""
        width, height, cells = parse_text("")
        assert (width, height) == (0, 0)
        assert len(cells) == 0

    def test_parse_requires_trailing_newline(self):
        """Test the last row must be newline-terminated like every rendered row."""
        with pytest.raises(ValueError):
            parse_text("◻◼\n◼◻")

    def test_parse_splits_only_on_newline(self):
        """Test carriage returns and unicode line separators are not row breaks."""
        with pytest.raises(ValueError):
            parse_text("◻◼\r◼◻\n")
        with pytest.raises(ValueError):
            parse_text("◻◼ ◼◻\n")

    def test_parse_zero_width_rows(self):
        """Test a zero-width rendering keeps its row count."""
        universe = Universe.blank(0, 3)

        width, height, cells = parse_text(universe.render())

        assert (width, height) == (0, 3)
        assert len(cells) == 0
