"""Metrics collection for simulation runs."""

import time
import numpy as np
from typing import Dict, List, Any, Optional, Callable
from dataclasses import dataclass, field, asdict
from collections import defaultdict

from .cells import corners
from .game import GameOfLife

HOOK_EVENTS = ("start", "update", "end")


@dataclass
class SimulationMetrics:
    """Metrics for a single simulation run."""

    # Run identification
    pattern: Optional[str]
    backend: str
    start_time: float
    end_time: float = 0.0
    duration: float = 0.0

    # Initial conditions
    iterations: int = 0
    initial_population: int = 0

    # Simulation outcome
    final_generation: int = 0
    termination_reason: str = ""  # 'cycle', 'extinction', 'max_generations'
    final_population: int = 0

    # Cycle information
    cycle_detected: bool = False
    cycle_length: int = 0
    cycle_start_generation: int = 0

    # Population dynamics
    population_history: List[int] = field(default_factory=list)
    min_population: int = 0
    max_population: int = 0
    avg_population: float = 0.0
    population_std_dev: float = 0.0

    # Spatial metrics
    bounding_box_area: int = 0
    max_bounding_box_area: int = 0

    # Performance metrics
    generations_per_second: float = 0.0
    total_cell_updates: int = 0

    custom_metrics: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert metrics to dictionary."""
        return asdict(self)

    def calculate_derived_metrics(self) -> None:
        """Calculate derived metrics from collected data."""
        if self.population_history:
            self.min_population = int(min(self.population_history))
            self.max_population = int(max(self.population_history))
            self.avg_population = float(np.mean(self.population_history))
            self.population_std_dev = float(np.std(self.population_history))


class MetricsCollector:
    """Collects metrics while a GameOfLife instance is stepped.

    ``update`` is expected once per generation step; cell updates are counted
    as the area of the expanded bounding box each step evaluates.
    """

    def __init__(self) -> None:
        self.current_metrics: Optional[SimulationMetrics] = None
        self.hooks: Dict[str, List[Callable]] = defaultdict(list)
        self._pending_area = 0

    def start_run(self, game: GameOfLife, pattern: Optional[str] = None, iterations: int = 0) -> SimulationMetrics:
        """Start collecting metrics for a new run."""
        self.current_metrics = SimulationMetrics(
            pattern=pattern,
            backend=game.backend,
            start_time=time.time(),
            iterations=iterations,
            initial_population=game.population,
        )
        self._record_state(game)

        for hook in self.hooks["start"]:
            hook(self.current_metrics, game)

        return self.current_metrics

    def _record_state(self, game: GameOfLife) -> None:
        metrics = self.current_metrics
        metrics.population_history.append(game.population)

        bbox = corners(game.cells)
        metrics.bounding_box_area = bbox.area if game.cells else 0
        metrics.max_bounding_box_area = max(metrics.max_bounding_box_area, metrics.bounding_box_area)

        # Area the next step will evaluate
        self._pending_area = bbox.expand(1).area

    def update(self, game: GameOfLife) -> None:
        """Update metrics after the game advanced one generation."""
        if not self.current_metrics:
            return

        self.current_metrics.total_cell_updates += self._pending_area
        self._record_state(game)

        for hook in self.hooks["update"]:
            hook(self.current_metrics, game)

    def end_run(self, game: GameOfLife, termination_reason: str) -> Optional[SimulationMetrics]:
        """Finalize metrics for the current run."""
        if not self.current_metrics:
            return None

        metrics = self.current_metrics
        metrics.end_time = time.time()
        metrics.duration = metrics.end_time - metrics.start_time
        metrics.final_generation = game.generation
        metrics.termination_reason = termination_reason
        metrics.final_population = game.population

        metrics.cycle_detected = game.cycle_detected
        metrics.cycle_length = game.cycle_length
        metrics.cycle_start_generation = game.cycle_start_generation

        if metrics.duration > 0:
            metrics.generations_per_second = game.generation / metrics.duration

        metrics.calculate_derived_metrics()

        for hook in self.hooks["end"]:
            hook(metrics, game)

        return metrics

    def register_hook(self, event: str, hook: Callable) -> None:
        """Register a custom hook for metrics collection.

        Args:
            event: 'start', 'update', or 'end'
            hook: Callable that takes (metrics, game) as arguments

        Raises:
            ValueError: If the event name is unknown
        """
        if event not in HOOK_EVENTS:
            raise ValueError(f"Unknown hook event '{event}' (valid values are: {', '.join(HOOK_EVENTS)})")
        self.hooks[event].append(hook)
