"""Named starting patterns for Game of Life simulations."""

from typing import Any, Dict, List, Optional, Tuple

from .cells import Coordinate, LiveSet, corners, seed


class Pattern:
    """Represents a Game of Life pattern."""

    def __init__(
        self,
        name: str,
        cells: List[Coordinate],
        description: str = "",
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Initialize a pattern.

        Args:
            name: Pattern name
            cells: List of (x, y) coordinates for living cells
            description: Optional description
            metadata: Optional metadata dictionary
        """
        self.name = name
        self.cells = [(int(x), int(y)) for x, y in cells]
        self.description = description
        self.metadata = metadata or {}

    def to_live_set(self) -> LiveSet:
        """Get the pattern's cells as a live set."""
        return seed(*self.cells)

    def get_bounding_box(self) -> Tuple[int, int, int, int]:
        """Get bounding box of the pattern.

        Returns:
            Tuple of (min_x, min_y, max_x, max_y)
        """
        (min_x, min_y), (max_x, max_y) = corners(self.cells)
        return (min_x, min_y, max_x, max_y)

    def get_size(self) -> Tuple[int, int]:
        """Get pattern size.

        Returns:
            Tuple of (width, height)
        """
        min_x, min_y, max_x, max_y = self.get_bounding_box()
        return (max_x - min_x + 1, max_y - min_y + 1)

    def normalize(self) -> "Pattern":
        """Return a new pattern with coordinates normalized to start at (0, 0).

        Returns:
            New Pattern instance with normalized coordinates
        """
        if not self.cells:
            return Pattern(self.name, [], self.description, self.metadata.copy())

        min_x, min_y, _, _ = self.get_bounding_box()
        normalized_cells = [(x - min_x, y - min_y) for x, y in self.cells]

        return Pattern(self.name, normalized_cells, self.description, self.metadata.copy())

    def to_dict(self) -> Dict[str, Any]:
        """Convert pattern to dictionary for serialization.

        Returns:
            Dictionary representation
        """
        return {
            "name": self.name,
            "cells": self.cells,
            "description": self.description,
            "metadata": self.metadata,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Pattern":
        """Create pattern from dictionary.

        Args:
            data: Dictionary with pattern data

        Returns:
            New Pattern instance
        """
        # Cells may arrive as lists (e.g. decoded JSON)
        cells = [tuple(cell) for cell in data["cells"]]

        return cls(
            name=data["name"],
            cells=cells,
            description=data.get("description", ""),
            metadata=data.get("metadata", {}),
        )


class PatternLibrary:
    """Table of named starting patterns."""

    def __init__(self) -> None:
        self._patterns: Dict[str, Pattern] = {}
        self._load_builtin_patterns()

    def _load_builtin_patterns(self) -> None:
        """Load built-in common patterns."""
        self.add_pattern(
            Pattern(
                "rpentomino",
                [(3, 2), (2, 3), (3, 3), (3, 4), (4, 4)],
                "Famous methuselah that stabilizes after 1103 generations",
            )
        )

        # A glider heading towards +x/-y, next to a block
        self.add_pattern(
            Pattern(
                "glider",
                [
                    (-2, -2),
                    (-1, -2),
                    (-2, -1),
                    (-1, -1),
                    (1, 1),
                    (2, 1),
                    (3, 1),
                    (3, 2),
                    (2, 3),
                ],
                "Glider travelling away from a 2x2 block",
            )
        )

        self.add_pattern(
            Pattern("square", [(1, 1), (2, 1), (1, 2), (2, 2)], "2x2 still life block")
        )

        self.add_pattern(
            Pattern(
                "beehive",
                [(1, 0), (2, 0), (0, 1), (3, 1), (1, 2), (2, 2)],
                "Beehive still life",
            )
        )

        # Oscillators
        self.add_pattern(Pattern("blinker", [(0, 1), (1, 1), (2, 1)], "Period-2 oscillator"))

        self.add_pattern(
            Pattern(
                "toad",
                [(1, 0), (2, 0), (3, 0), (0, 1), (1, 1), (2, 1)],
                "Period-2 oscillator",
            )
        )

        self.add_pattern(
            Pattern(
                "beacon",
                [(0, 0), (1, 0), (0, 1), (3, 2), (2, 3), (3, 3)],
                "Period-2 oscillator",
            )
        )

        # Methuselahs
        self.add_pattern(
            Pattern(
                "diehard",
                [(6, 0), (0, 1), (1, 1), (1, 2), (5, 2), (6, 2), (7, 2)],
                "Dies after exactly 130 generations",
            )
        )

        self.add_pattern(
            Pattern(
                "acorn",
                [(1, 0), (3, 1), (0, 2), (1, 2), (4, 2), (5, 2), (6, 2)],
                "Takes 5206 generations to stabilize",
            )
        )

    def add_pattern(self, pattern: Pattern) -> None:
        """Add a pattern to the library.

        Args:
            pattern: Pattern to add
        """
        self._patterns[pattern.name] = pattern

    def get_pattern(self, name: str) -> Optional[Pattern]:
        """Get a pattern by name.

        Args:
            name: Pattern name

        Returns:
            Pattern instance or None if not found
        """
        return self._patterns.get(name)

    def list_patterns(self) -> List[str]:
        """Get list of all pattern names.

        Returns:
            List of pattern names
        """
        return list(self._patterns.keys())

    def get_patterns_by_category(self) -> Dict[str, List[str]]:
        """Get patterns organized by category.

        Returns:
            Dictionary mapping categories to pattern name lists
        """
        categories: Dict[str, List[str]] = {
            "Still Life": ["square", "beehive"],
            "Oscillators": ["blinker", "toad", "beacon"],
            "Spaceships": ["glider"],
            "Methuselahs": ["rpentomino", "diehard", "acorn"],
            "Custom": [],
        }

        all_builtin = set()
        for cat_patterns in categories.values():
            all_builtin.update(cat_patterns)

        for name in self._patterns:
            if name not in all_builtin:
                categories["Custom"].append(name)

        # Remove empty categories
        return {cat: patterns for cat, patterns in categories.items() if patterns}
