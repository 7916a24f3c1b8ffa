"""Conway's Game of Life on an unbounded grid."""

import logging
from collections import deque
from typing import Callable, Deque, Dict, Iterable, Iterator, List, Optional, Tuple

import numpy as np

from .cells import EMPTY, Coordinate, LiveSet, contains, corners, living_neighbors
from .tensor import step_tensor

logger = logging.getLogger(__name__)

Stepper = Callable[[LiveSet], LiveSet]


def will_be_alive(cell: Coordinate, live_set: LiveSet) -> bool:
    """Decide whether a cell is alive in the next generation.

    Implements the classic rules:
    - Live cell with exactly 2 neighbors survives
    - Any cell with exactly 3 neighbors is alive (survival or birth)
    - All other cells die or stay dead

    Args:
        cell: Coordinate to evaluate
        live_set: Current live cells

    Returns:
        True if the cell is alive in the next generation
    """
    count = len(living_neighbors(cell, live_set))
    if count == 3:
        return True
    return count == 2 and contains(live_set, cell)


def step(live_set: LiveSet) -> LiveSet:
    """Compute the next generation.

    Every cell of the bounding box padded by one is evaluated, since life
    can only spread to adjacent cells.

    Args:
        live_set: Current live cells

    Returns:
        Next generation's live cells
    """
    expanded = corners(live_set).expand(1)
    return frozenset(cell for cell in expanded.cells() if will_be_alive(cell, live_set))


BACKENDS: Dict[str, Stepper] = {
    "set": step,
    "tensor": step_tensor,
}

DEFAULT_BACKEND = "set"


def get_stepper(backend: str) -> Stepper:
    """Resolve a backend name to its step function.

    Args:
        backend: One of the names in ``BACKENDS``

    Returns:
        Step function for the backend

    Raises:
        ValueError: If the backend is unknown
    """
    try:
        return BACKENDS[backend]
    except KeyError:
        raise ValueError(
            f"Unknown backend '{backend}' (valid values are: {', '.join(BACKENDS)})"
        ) from None


def generations(initial: Iterable[Coordinate], iterations: int, stepper: Stepper = step) -> Iterator[LiveSet]:
    """Lazily produce generations 0 through ``iterations``.

    Args:
        initial: Live cells of generation 0
        iterations: Number of steps to apply
        stepper: Step function to apply

    Yields:
        Live sets in generation order, starting with the initial state
    """
    state = frozenset(initial)
    yield state
    for generation in range(1, iterations + 1):
        state = stepper(state)
        logger.debug("Generation %d: %d live cells", generation, len(state))
        yield state


def iterate(initial: Iterable[Coordinate], iterations: int, stepper: Stepper = step) -> List[LiveSet]:
    """Compute the full generation sequence.

    Returns:
        List of ``iterations + 1`` live sets, element 0 being the initial state
    """
    return list(generations(initial, iterations, stepper))


class GameOfLife:
    """Game of Life simulation engine over a sparse live set.

    Tracks the generation counter, population history and exact-state cycle
    detection while delegating each step to a pure step function.
    """

    def __init__(
        self,
        cells: Iterable[Coordinate] = (),
        backend: str = DEFAULT_BACKEND,
        max_history: int = 1000,
    ) -> None:
        """Initialize the game.

        Args:
            cells: Initial live cells
            backend: Step backend name ("set" or "tensor")
            max_history: Number of past states remembered for cycle detection
        """
        self.backend = backend
        self._stepper = get_stepper(backend)
        self.max_history = max_history
        self._cells: LiveSet = frozenset(cells)
        self._generation = 0
        self._population_history: Deque[int] = deque(maxlen=100)
        self._state_history: Deque[LiveSet] = deque()
        self._seen_states: Dict[LiveSet, int] = {}
        self._cycle_detected = False
        self._cycle_length = 0
        self._cycle_start_generation = 0

        self._update_population_history()
        self._remember_state()

    @property
    def cells(self) -> LiveSet:
        """Current live cells."""
        return self._cells

    @property
    def generation(self) -> int:
        """Current generation number."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return len(self._cells)

    @property
    def population_history(self) -> list:
        """History of population counts."""
        return list(self._population_history)

    @property
    def cycle_detected(self) -> bool:
        """Whether a cycle has been detected."""
        return self._cycle_detected

    @property
    def cycle_length(self) -> int:
        """Length of detected cycle (0 if no cycle)."""
        return self._cycle_length

    @property
    def cycle_start_generation(self) -> int:
        """Generation where cycle started (0 if no cycle)."""
        return self._cycle_start_generation

    def step(self) -> LiveSet:
        """Advance the simulation by one generation.

        Returns:
            The new live set
        """
        self._cells = self._stepper(self._cells)
        self._generation += 1
        self._update_population_history()
        self._check_for_cycles()
        return self._cells

    def _update_population_history(self) -> None:
        self._population_history.append(self.population)

    def _remember_state(self) -> None:
        """Record the current state for cycle detection."""
        self._seen_states[self._cells] = self._generation
        self._state_history.append(self._cells)

        # Drop the oldest states to bound memory use
        while len(self._state_history) > self.max_history:
            old_state = self._state_history.popleft()
            self._seen_states.pop(old_state, None)

    def _check_for_cycles(self) -> None:
        """Check if the current state has been seen before."""
        if self._cycle_detected:
            return

        first_occurrence = self._seen_states.get(self._cells)
        if first_occurrence is not None:
            self._cycle_detected = True
            self._cycle_length = self._generation - first_occurrence
            self._cycle_start_generation = first_occurrence
            logger.debug(
                "Cycle of length %d detected at generation %d",
                self._cycle_length,
                self._generation,
            )
            return

        self._remember_state()

    def reset(self, cells: Optional[Iterable[Coordinate]] = None) -> None:
        """Reset the simulation.

        Args:
            cells: New initial cells (defaults to an empty board)
        """
        self._cells = frozenset(cells) if cells is not None else EMPTY
        self._generation = 0
        self._population_history.clear()
        self._state_history.clear()
        self._seen_states.clear()
        self._cycle_detected = False
        self._cycle_length = 0
        self._cycle_start_generation = 0

        self._update_population_history()
        self._remember_state()

    def run_until_stable(self, max_generations: int = 10000) -> Tuple[int, str]:
        """Run simulation until it becomes stable or cycles.

        Args:
            max_generations: Maximum generations to run

        Returns:
            Tuple of (final_generation, reason) where reason is one of:
            'cycle', 'extinction', 'max_generations'
        """
        for _ in range(max_generations):
            self.step()

            if self._cycle_detected:
                return self._generation, "cycle"

            if self.population == 0:
                return self._generation, "extinction"

        return self._generation, "max_generations"

    def get_population_change_rate(self, window_size: int = 10) -> float:
        """Calculate recent population change rate.

        Args:
            window_size: Number of recent generations to consider

        Returns:
            Average population change per generation
        """
        recent_history = list(self._population_history)[-window_size:]
        if len(recent_history) < 2:
            return 0.0

        changes = np.diff(recent_history)
        return float(np.mean(changes))

    def get_statistics(self) -> Dict:
        """Get simulation statistics.

        Returns:
            Dictionary with various statistics
        """
        stats = {
            "generation": self._generation,
            "population": self.population,
            "population_change_rate": self.get_population_change_rate(),
            "population_history": list(self._population_history),
            "cycle_detected": self._cycle_detected,
            "cycle_length": self._cycle_length,
            "cycle_start_generation": self._cycle_start_generation,
            "backend": self.backend,
        }

        if self._cells:
            bbox = corners(self._cells)
            stats["bounding_box"] = bbox
            stats["bounding_box_size"] = (bbox.width, bbox.height)
            stats["bounding_box_area"] = bbox.area
        else:
            stats["bounding_box"] = None
            stats["bounding_box_size"] = (0, 0)
            stats["bounding_box_area"] = 0

        return stats
