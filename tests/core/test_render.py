"""Tests for text rendering."""

from sparselife.core.cells import EMPTY, seed
from sparselife.core.render import ALIVE_GLYPH, DEAD_GLYPH, render, render_cell


class TestRender:
    """Test cases for render() and render_cell()."""

    def test_glyphs(self):
        """Test the documented glyphs."""
        assert ALIVE_GLYPH == "▣"
        assert DEAD_GLYPH == "▢"

    def test_render_cell(self):
        """Test single-cell glyph lookup."""
        cells = seed((0, 0))
        assert render_cell((0, 0), cells) == ALIVE_GLYPH
        assert render_cell((1, 0), cells) == DEAD_GLYPH

    def test_single_cell(self):
        """Test a single cell renders as one glyph on one line."""
        text = render(seed((0, 0)))

        assert text == ALIVE_GLYPH
        assert text.count(ALIVE_GLYPH) == 1
        assert "\n" not in text

    def test_empty(self):
        """Test the empty set renders one dead cell."""
        assert render(EMPTY) == DEAD_GLYPH

    def test_square(self):
        """Test a full 2x2 block."""
        assert render(seed((1, 1), (2, 1), (1, 2), (2, 2))) == "▣ ▣\n▣ ▣"

    def test_rows_top_down(self):
        """Test the highest row is printed first."""
        glider = seed((1, 1), (2, 1), (3, 1), (3, 2), (2, 3))

        assert render(glider).split("\n") == [
            "▢ ▣ ▢",
            "▢ ▢ ▣",
            "▣ ▣ ▣",
        ]

    def test_negative_coordinates(self):
        """Test rendering a set left of and below the origin."""
        text = render(seed((-3, -1), (-1, -2)))
        assert text == "▣ ▢ ▢\n▢ ▢ ▣"
