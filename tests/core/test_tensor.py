"""Tests for the dense tensor backend."""

import numpy as np
import pytest
from sparselife.core.cells import EMPTY, BoundingBox, seed
from sparselife.core.game import iterate, step
from sparselife.core.patterns import PatternLibrary
from sparselife.core.tensor import count_neighbors, from_array, step_tensor, to_array


class TestArrayConversion:
    """Test cases for to_array() and from_array()."""

    def test_to_array_layout(self):
        """Test rows map to y and columns to x."""
        cells = to_array(seed((-1, 0), (1, 2)))

        assert cells.shape == (3, 3)
        assert cells[0, 0] == 1  # (-1, 0)
        assert cells[2, 2] == 1  # (1, 2)
        assert cells.sum() == 2

    def test_to_array_with_bounds(self):
        """Test rasterizing into a larger region."""
        bounds = BoundingBox((0, 0), (3, 2))
        cells = to_array(seed((1, 1)), bounds)

        assert cells.shape == (3, 4)
        assert cells[1, 1] == 1
        assert cells.sum() == 1

    def test_to_array_out_of_bounds(self):
        """Test a cell outside the region is rejected."""
        with pytest.raises(ValueError, match="outside bounds"):
            to_array(seed((5, 5)), BoundingBox((0, 0), (1, 1)))

    def test_from_array_origin(self):
        """Test reading cells back relative to an origin."""
        cells = np.zeros((2, 3), dtype=np.int8)
        cells[0, 2] = 1
        cells[1, 0] = 1

        assert from_array(cells, (-4, 10)) == seed((-2, 10), (-4, 11))

    def test_round_trip_negative_coordinates(self):
        """Test a set with negative coordinates survives conversion."""
        live = seed((-2, -2), (-1, -2), (3, 1), (2, 3))
        bounds = BoundingBox((-3, -3), (4, 4))
        assert from_array(to_array(live, bounds), bounds.bottom_left) == live


class TestCountNeighbors:
    """Test cases for the convolution neighbor count."""

    def test_vertical_line(self):
        """Test vectorized neighbor counting."""
        cells = np.zeros((5, 5), dtype=np.int8)
        cells[1:4, 2] = 1

        counts = count_neighbors(cells)

        assert counts[2, 2] == 2
        assert counts[2, 1] == 3
        assert counts[2, 3] == 3
        assert counts[0, 0] == 0

    def test_edges_are_dead(self):
        """Test there is no wraparound at the array edges."""
        cells = np.zeros((3, 3), dtype=np.int8)
        cells[0, 0] = 1

        counts = count_neighbors(cells)

        assert counts[2, 2] == 0
        assert counts[1, 1] == 1


class TestStepTensor:
    """Test cases for step_tensor()."""

    def test_empty(self):
        """Test the empty set stays empty."""
        assert step_tensor(EMPTY) == EMPTY

    def test_blinker(self):
        """Test the blinker flips orientation."""
        assert step_tensor(seed((0, 1), (1, 1), (2, 1))) == seed((1, 0), (1, 1), (1, 2))

    @pytest.mark.parametrize("name", PatternLibrary().list_patterns())
    def test_matches_set_backend(self, name):
        """Test both backends agree on every built-in pattern."""
        start = PatternLibrary().get_pattern(name).to_live_set()
        assert iterate(start, 30, step_tensor) == iterate(start, 30, step)
