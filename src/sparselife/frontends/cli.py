"""Command-line interface for Conway's Game of Life."""

import argparse
import logging
import sys
from typing import List, Optional, Tuple

from ..core.errors import InvalidIterationCountError, InvalidPatternError, SimulationError
from ..core.game import BACKENDS, DEFAULT_BACKEND, GameOfLife
from ..core.metrics import MetricsCollector, SimulationMetrics
from ..core.patterns import PatternLibrary
from ..core.render import render
from ..core.runner import resolve_pattern, validate_iterations
from ..logging_config import setup_logging

logger = logging.getLogger(__name__)


class CLILife:
    """Command-line interface for running Game of Life simulations."""

    def __init__(self, pattern_library: Optional[PatternLibrary] = None) -> None:
        self.pattern_library = pattern_library or PatternLibrary()

    def run_simulation(
        self,
        pattern: str,
        iterations: int,
        backend: str = DEFAULT_BACKEND,
        stop_on_cycle: bool = False,
    ) -> Tuple[int, str, SimulationMetrics]:
        """Run a simulation, printing every generation.

        Args:
            pattern: Name of the start pattern
            iterations: Number of generations after the initial one
            backend: Step backend name
            stop_on_cycle: Stop once a cycle or extinction is detected

        Returns:
            Tuple of (final_generation, reason, metrics)

        Raises:
            InvalidPatternError: If the pattern is not in the library
            InvalidIterationCountError: If the iteration count is invalid
        """
        cells = resolve_pattern(pattern, self.pattern_library)
        iterations = validate_iterations(iterations)

        game = GameOfLife(cells, backend=backend)
        collector = MetricsCollector()
        collector.start_run(game, pattern=pattern, iterations=iterations)
        logger.info("Running '%s' for %d generations", pattern, iterations)

        print(render(game.cells) + "\n")

        reason = "max_generations"
        for _ in range(iterations):
            game.step()
            collector.update(game)
            print(render(game.cells) + "\n")

            if stop_on_cycle:
                if game.cycle_detected:
                    reason = "cycle"
                    break
                if game.population == 0:
                    reason = "extinction"
                    break

        metrics = collector.end_run(game, reason)
        return game.generation, reason, metrics

    def list_patterns(self) -> None:
        """List available patterns by category."""
        categories = self.pattern_library.get_patterns_by_category()

        print("Available patterns:")
        for category, pattern_names in categories.items():
            print(f"\n{category}:")
            for pattern_name in pattern_names:
                pattern = self.pattern_library.get_pattern(pattern_name)
                if pattern:
                    size = pattern.get_size()
                    print(f"  {pattern_name}: {size[0]}x{size[1]}, {len(pattern.cells)} cells")
                    if pattern.description:
                        print(f"    {pattern.description}")


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="sparselife-cli",
        description="Run Conway's Game of Life on an unbounded grid",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run the R-pentomino for 50 generations
  sparselife-cli rpentomino 50

  # Run the glider with the tensor backend and print run statistics
  sparselife-cli glider 20 --backend tensor --stats

  # Stop as soon as the pattern repeats or dies out
  sparselife-cli blinker 100 --stop-on-cycle

  # List available patterns
  sparselife-cli --list-patterns
        """,
    )

    parser.add_argument("pattern", nargs="?", help="Name of the start pattern")

    parser.add_argument("iterations", nargs="?", help="Number of generations to compute")

    parser.add_argument(
        "-b",
        "--backend",
        choices=sorted(BACKENDS),
        default=DEFAULT_BACKEND,
        help=f"Step backend (default: {DEFAULT_BACKEND})",
    )

    parser.add_argument(
        "--stop-on-cycle",
        action="store_true",
        help="Stop once the pattern cycles or dies out",
    )

    parser.add_argument("--stats", action="store_true", help="Print run statistics at the end")

    parser.add_argument("--list-patterns", action="store_true", help="List available patterns and exit")

    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    parser.add_argument("--log-file", type=str, help="Also write log messages to this file")

    return parser


def parse_iterations(text: str) -> int:
    """Parse an iteration count given on the command line.

    Raises:
        InvalidIterationCountError: If the text is not a plain decimal integer
    """
    stripped = text.strip()
    if not stripped.isdecimal():
        raise InvalidIterationCountError(text)
    return validate_iterations(int(stripped))


def validate_args(args: argparse.Namespace, library: PatternLibrary) -> bool:
    """Validate command-line arguments.

    On success ``args.iterations`` is replaced by its integer value.

    Args:
        args: Parsed arguments
        library: Library the pattern name must belong to

    Returns:
        True if arguments are valid
    """
    errors = []

    if args.pattern is None:
        errors.append("Pattern name is required")
    elif library.get_pattern(args.pattern) is None:
        errors.append(str(InvalidPatternError(args.pattern, library.list_patterns())))

    if args.iterations is None:
        errors.append("Iteration count is required")
    else:
        try:
            args.iterations = parse_iterations(args.iterations)
        except InvalidIterationCountError as e:
            errors.append(str(e))

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def format_finish_reason(reason: str, metrics: SimulationMetrics) -> str:
    """Format the simulation finish reason for display.

    Args:
        reason: Finish reason
        metrics: Metrics of the run

    Returns:
        Human-readable reason string
    """
    if reason == "cycle":
        return f"Cycle detected (length {metrics.cycle_length}, starting at generation {metrics.cycle_start_generation})"
    if reason == "extinction":
        return "Extinction (all cells died)"
    if reason == "max_generations":
        return "Reached requested number of generations"
    return reason


def print_results(final_generation: int, reason: str, metrics: SimulationMetrics, verbose: bool) -> None:
    """Print simulation results.

    Args:
        final_generation: Final generation number
        reason: Finish reason
        metrics: Metrics of the run
        verbose: Whether to print detailed statistics
    """
    print(f"Simulation completed after {final_generation} generations")
    print(f"Finish reason: {format_finish_reason(reason, metrics)}")
    print(f"  Backend: {metrics.backend}")
    print(f"  Initial population: {metrics.initial_population}")
    print(f"  Final population: {metrics.final_population}")
    print(f"  Population range: {metrics.min_population}-{metrics.max_population}")
    print(f"  Max bounding box area: {metrics.max_bounding_box_area}")
    print(f"  Cells evaluated: {metrics.total_cell_updates}")

    if verbose:
        print(f"  Mean population: {metrics.avg_population:.2f} (std {metrics.population_std_dev:.2f})")
        print(f"  Duration: {metrics.duration:.3f} seconds")
        if metrics.generations_per_second > 0:
            print(f"  Speed: {metrics.generations_per_second:.0f} generations/second")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI interface.

    Args:
        argv: Arguments to parse (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.WARNING, args.log_file)

    cli = CLILife()

    if args.list_patterns:
        cli.list_patterns()
        return 0

    if not validate_args(args, cli.pattern_library):
        parser.print_usage()
        return 1

    try:
        final_generation, reason, metrics = cli.run_simulation(
            args.pattern,
            args.iterations,
            backend=args.backend,
            stop_on_cycle=args.stop_on_cycle,
        )
    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 1
    except SimulationError as e:
        print(f"Error: {e}")
        parser.print_usage()
        return 1

    if args.stats:
        print_results(final_generation, reason, metrics, args.verbose)

    return 0


if __name__ == "__main__":
    sys.exit(main())
