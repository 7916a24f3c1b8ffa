"""Text rendering of live sets."""

from .cells import Coordinate, LiveSet, contains, corners

ALIVE_GLYPH = "▣"
DEAD_GLYPH = "▢"


def render_cell(cell: Coordinate, live_set: LiveSet) -> str:
    """Get the glyph for a single cell."""
    return ALIVE_GLYPH if contains(live_set, cell) else DEAD_GLYPH


def render(live_set: LiveSet) -> str:
    """Render a live set as text.

    One line per row of the bounding box, top row (highest y) first, with
    cells separated by a single space. An empty set renders as a single dead
    cell at the origin.

    Args:
        live_set: Live cells to render

    Returns:
        Multi-line string
    """
    lines = []
    for row in corners(live_set).rows():
        lines.append(" ".join(render_cell(cell, live_set) for cell in row))
    return "\n".join(lines)
