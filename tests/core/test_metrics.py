"""Tests for the metrics collection framework."""

from unittest.mock import Mock

import pytest
from sparselife.core.cells import seed
from sparselife.core.game import GameOfLife
from sparselife.core.metrics import MetricsCollector, SimulationMetrics

SQUARE = seed((1, 1), (2, 1), (1, 2), (2, 2))
BLINKER = seed((0, 1), (1, 1), (2, 1))


def run_collected(cells, steps, backend="set"):
    game = GameOfLife(cells, backend=backend)
    collector = MetricsCollector()
    collector.start_run(game, pattern="test", iterations=steps)
    for _ in range(steps):
        game.step()
        collector.update(game)
    return game, collector.end_run(game, "max_generations")


class TestSimulationMetrics:
    """Test cases for the SimulationMetrics dataclass."""

    def test_derived_metrics(self):
        """Test min/max/mean/std are derived from the history."""
        metrics = SimulationMetrics(pattern=None, backend="set", start_time=0.0)
        metrics.population_history = [2, 4, 6]
        metrics.calculate_derived_metrics()

        assert metrics.min_population == 2
        assert metrics.max_population == 6
        assert metrics.avg_population == pytest.approx(4.0)
        assert metrics.population_std_dev == pytest.approx((8 / 3) ** 0.5)

    def test_to_dict(self):
        """Test conversion to a plain dictionary."""
        metrics = SimulationMetrics(pattern="square", backend="tensor", start_time=1.0)
        data = metrics.to_dict()

        assert data["pattern"] == "square"
        assert data["backend"] == "tensor"
        assert data["population_history"] == []


class TestMetricsCollector:
    """Test cases for the MetricsCollector class."""

    def test_still_life(self):
        """Test metrics for a stable block."""
        game, metrics = run_collected(SQUARE, 3)

        assert metrics.pattern == "test"
        assert metrics.iterations == 3
        assert metrics.initial_population == 4
        assert metrics.final_population == 4
        assert metrics.final_generation == 3
        assert metrics.population_history == [4, 4, 4, 4]
        assert metrics.bounding_box_area == 4
        assert metrics.max_bounding_box_area == 4
        # Each step scans the 4x4 padded box
        assert metrics.total_cell_updates == 3 * 16
        assert metrics.cycle_detected is True
        assert metrics.cycle_length == 1
        assert metrics.termination_reason == "max_generations"

    def test_oscillator_area(self):
        """Test cell updates follow the changing bounding box."""
        _, metrics = run_collected(BLINKER, 2)

        # 3x1 and 1x3 boxes both pad to 15 cells
        assert metrics.total_cell_updates == 30
        assert metrics.max_bounding_box_area == 3
        assert metrics.cycle_length == 2

    def test_extinction(self):
        """Test metrics once all cells have died."""
        _, metrics = run_collected(seed((0, 0)), 2)

        assert metrics.final_population == 0
        assert metrics.bounding_box_area == 0
        assert metrics.min_population == 0
        assert metrics.max_population == 1

    def test_backend_recorded(self):
        """Test the backend name is copied from the game."""
        _, metrics = run_collected(BLINKER, 1, backend="tensor")
        assert metrics.backend == "tensor"

    def test_end_without_start(self):
        """Test ending a run that never started."""
        collector = MetricsCollector()
        collector.update(GameOfLife(SQUARE))
        assert collector.end_run(GameOfLife(SQUARE), "cycle") is None

    def test_hooks(self):
        """Test hooks are called for every event."""
        collector = MetricsCollector()
        start_hook, update_hook, end_hook = Mock(), Mock(), Mock()
        collector.register_hook("start", start_hook)
        collector.register_hook("update", update_hook)
        collector.register_hook("end", end_hook)

        game = GameOfLife(BLINKER)
        collector.start_run(game)
        game.step()
        collector.update(game)
        game.step()
        collector.update(game)
        collector.end_run(game, "cycle")

        assert start_hook.call_count == 1
        assert update_hook.call_count == 2
        assert end_hook.call_count == 1
        metrics, hooked_game = end_hook.call_args[0]
        assert hooked_game is game
        assert metrics.termination_reason == "cycle"

    def test_unknown_hook_event(self):
        """Test registering an unknown event fails."""
        with pytest.raises(ValueError, match="Unknown hook event"):
            MetricsCollector().register_hook("step", Mock())
