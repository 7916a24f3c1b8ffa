"""Errors raised when a simulation request is rejected."""

from typing import Any, Iterable


class SimulationError(ValueError):
    """Base class for invalid simulation requests."""


class InvalidPatternError(SimulationError):
    """Raised when a start pattern name is not in the pattern library."""

    def __init__(self, name: str, valid_names: Iterable[str]) -> None:
        self.name = name
        self.valid_names = list(valid_names)
        super().__init__(
            f"Invalid pattern name: {name} (valid values are: {', '.join(self.valid_names)})"
        )


class InvalidIterationCountError(SimulationError):
    """Raised when an iteration count is not a non-negative integer."""

    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"Iteration count must be a non-negative integer, got {value!r}")
