"""Core simulation engine."""

from .cells import BoundingBox, contains, corners, neighbors_of, seed
from .errors import InvalidIterationCountError, InvalidPatternError, SimulationError
from .game import GameOfLife, generations, iterate, step, will_be_alive
from .patterns import Pattern, PatternLibrary
from .render import render
from .runner import run, stream

__all__ = [
    "BoundingBox",
    "contains",
    "corners",
    "neighbors_of",
    "seed",
    "InvalidIterationCountError",
    "InvalidPatternError",
    "SimulationError",
    "GameOfLife",
    "generations",
    "iterate",
    "step",
    "will_be_alive",
    "Pattern",
    "PatternLibrary",
    "render",
    "run",
    "stream",
]
