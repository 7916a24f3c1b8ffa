"""Sparse live-cell representation for an unbounded grid."""

from typing import FrozenSet, Iterable, Iterator, List, NamedTuple, Sequence, Tuple

Coordinate = Tuple[int, int]
LiveSet = FrozenSet[Coordinate]

EMPTY: LiveSet = frozenset()


class BoundingBox(NamedTuple):
    """Axis-aligned rectangle enclosing a live set.

    Both corners are inclusive. ``bottom_left`` holds the minimum x and y,
    ``top_right`` the maximum x and y.
    """

    bottom_left: Coordinate
    top_right: Coordinate

    @property
    def width(self) -> int:
        """Number of columns covered by the box."""
        return self.top_right[0] - self.bottom_left[0] + 1

    @property
    def height(self) -> int:
        """Number of rows covered by the box."""
        return self.top_right[1] - self.bottom_left[1] + 1

    @property
    def area(self) -> int:
        """Number of cells covered by the box."""
        return self.width * self.height

    def expand(self, pad: int = 1) -> "BoundingBox":
        """Return a new box padded by ``pad`` cells in every direction.

        Args:
            pad: Number of cells to add on each side

        Returns:
            Padded bounding box
        """
        (min_x, min_y), (max_x, max_y) = self
        return BoundingBox((min_x - pad, min_y - pad), (max_x + pad, max_y + pad))

    def contains(self, cell: Coordinate) -> bool:
        """Check whether a cell lies inside the box (edges included)."""
        x, y = cell
        return (
            self.bottom_left[0] <= x <= self.top_right[0]
            and self.bottom_left[1] <= y <= self.top_right[1]
        )

    def rows(self) -> Iterator[List[Coordinate]]:
        """Iterate over the rows of the box from the top row down.

        Yields:
            Lists of coordinates for one row, ordered left to right
        """
        (min_x, min_y), (max_x, max_y) = self
        for y in range(max_y, min_y - 1, -1):
            yield [(x, y) for x in range(min_x, max_x + 1)]

    def cells(self) -> Iterator[Coordinate]:
        """Iterate over every coordinate in the box, row by row from the top."""
        for row in self.rows():
            yield from row


def seed(*cells: Sequence[int]) -> LiveSet:
    """Build a live set from coordinate pairs.

    Args:
        *cells: (x, y) pairs, as tuples or lists

    Returns:
        Immutable set of live coordinates
    """
    return frozenset((int(x), int(y)) for x, y in cells)


def contains(live_set: LiveSet, cell: Coordinate) -> bool:
    """Return True if ``cell`` is alive in ``live_set``."""
    return cell in live_set


def corners(live_set: Iterable[Coordinate]) -> BoundingBox:
    """Compute the minimal bounding box of a live set.

    An empty set maps to the single-cell box at the origin.

    Args:
        live_set: Live coordinates

    Returns:
        Bounding box with inclusive corners
    """
    cells = list(live_set)
    if not cells:
        return BoundingBox((0, 0), (0, 0))

    xs, ys = zip(*cells)
    return BoundingBox((min(xs), min(ys)), (max(xs), max(ys)))


def neighbors_of(cell: Coordinate) -> Tuple[Coordinate, ...]:
    """Get the 8 Moore-neighborhood coordinates around a cell.

    Neighbors are ordered by row (y - 1 first), then by column.

    Args:
        cell: Center coordinate

    Returns:
        Tuple of the 8 surrounding coordinates
    """
    x, y = cell
    return tuple(
        (x + dx, y + dy)
        for dy in (-1, 0, 1)
        for dx in (-1, 0, 1)
        if dx != 0 or dy != 0
    )


def living_neighbors(cell: Coordinate, live_set: LiveSet) -> List[Coordinate]:
    """Get the neighbors of ``cell`` that are alive in ``live_set``."""
    return [neighbor for neighbor in neighbors_of(cell) if neighbor in live_set]


def translate(live_set: Iterable[Coordinate], offset: Coordinate) -> LiveSet:
    """Shift every cell of a live set by ``offset``."""
    dx, dy = offset
    return frozenset((x + dx, y + dy) for x, y in live_set)


def normalize(live_set: Iterable[Coordinate]) -> LiveSet:
    """Translate a live set so its bounding box starts at the origin.

    Two sets with the same shape normalize to the same value regardless of
    where they sit on the grid.
    """
    cells = frozenset(live_set)
    if not cells:
        return EMPTY

    min_x, min_y = corners(cells).bottom_left
    return translate(cells, (-min_x, -min_y))
