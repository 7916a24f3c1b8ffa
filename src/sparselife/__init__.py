"""Conway's Game of Life on an unbounded, sparse grid."""

__version__ = "0.1.0"

from .core.cells import BoundingBox, contains, corners, neighbors_of
from .core.game import GameOfLife, iterate, step, will_be_alive
from .core.patterns import Pattern, PatternLibrary
from .core.render import render
from .core.runner import run

__all__ = [
    "BoundingBox",
    "contains",
    "corners",
    "neighbors_of",
    "GameOfLife",
    "iterate",
    "step",
    "will_be_alive",
    "Pattern",
    "PatternLibrary",
    "render",
    "run",
]
