"""Dense evaluation of a generation step using PyTorch convolution.

The live set is rasterized over its expanded bounding box, neighbor counts
are computed for the whole region in one ``conv2d`` call and the B3/S23 rule
is applied as numpy masks. The region is rebuilt every generation, so the
grid stays unbounded.
"""

import logging
from typing import Optional, Tuple

import numpy as np
import torch
import torch.nn.functional as F

from .cells import BoundingBox, LiveSet, corners

logger = logging.getLogger(__name__)

# Avoid oversubscribing cores for the small tensors used here
torch.set_num_threads(1)

_KERNEL = torch.tensor([[1, 1, 1], [1, 0, 1], [1, 1, 1]], dtype=torch.float32).unsqueeze(0).unsqueeze(0)


def to_array(live_set: LiveSet, bounds: Optional[BoundingBox] = None) -> np.ndarray:
    """Rasterize a live set into a 2D array.

    Row ``r`` of the array holds ``y = bounds.bottom_left.y + r`` and column
    ``c`` holds ``x = bounds.bottom_left.x + c``.

    Args:
        live_set: Live coordinates
        bounds: Region to rasterize (defaults to the set's bounding box)

    Returns:
        Array of shape (height, width) with 1 for live cells and 0 otherwise

    Raises:
        ValueError: If a live cell falls outside ``bounds``
    """
    if bounds is None:
        bounds = corners(live_set)

    min_x, min_y = bounds.bottom_left
    cells = np.zeros((bounds.height, bounds.width), dtype=np.int8)
    for x, y in live_set:
        if not bounds.contains((x, y)):
            raise ValueError(f"Cell ({x}, {y}) outside bounds {tuple(bounds)}")
        cells[y - min_y, x - min_x] = 1

    return cells


def from_array(cells: np.ndarray, origin: Tuple[int, int]) -> LiveSet:
    """Read live coordinates back from an array produced by ``to_array``.

    Args:
        cells: 2D array indexed as [row, column]
        origin: Coordinate of element [0, 0]

    Returns:
        Live set of all non-zero cells
    """
    min_x, min_y = origin
    rows, cols = np.nonzero(cells)
    return frozenset((int(c) + min_x, int(r) + min_y) for r, c in zip(rows, cols))


def count_neighbors(cells: np.ndarray) -> np.ndarray:
    """Count live Moore neighbors for every cell of a dense region.

    Cells outside the array are treated as dead.

    Args:
        cells: 2D array indexed as [row, column]

    Returns:
        Array of the same shape with neighbor counts (0-8)
    """
    torch_input = torch.from_numpy((cells > 0).astype(np.float32)).unsqueeze(0).unsqueeze(0)
    neighbors = F.conv2d(torch_input, _KERNEL, padding=1)
    return neighbors[0, 0].numpy().astype(np.int8)


def step_tensor(live_set: LiveSet) -> LiveSet:
    """Compute the next generation with the dense tensor backend.

    Produces exactly the same result as ``game.step``.

    Args:
        live_set: Current live cells

    Returns:
        Next generation's live cells
    """
    bounds = corners(live_set).expand(1)
    cells = to_array(live_set, bounds)
    neighbor_counts = count_neighbors(cells)

    # Birth on 3, survival on 2 or 3
    alive = cells > 0
    next_cells = (neighbor_counts == 3) | (alive & (neighbor_counts == 2))

    logger.debug("Tensor step over %dx%d region", bounds.width, bounds.height)
    return from_array(next_cells, bounds.bottom_left)
