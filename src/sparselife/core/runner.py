"""Entry points that turn a pattern name and an iteration count into output."""

import logging
from typing import Any, Iterator, List, Optional

from .cells import LiveSet
from .errors import InvalidIterationCountError, InvalidPatternError
from .game import DEFAULT_BACKEND, generations, get_stepper
from .patterns import PatternLibrary
from .render import render

logger = logging.getLogger(__name__)


def validate_iterations(iterations: Any) -> int:
    """Check that an iteration count is a non-negative integer.

    Args:
        iterations: Candidate count

    Returns:
        The count as an int

    Raises:
        InvalidIterationCountError: If the value is not an int, is a bool, or
            is negative
    """
    if isinstance(iterations, bool) or not isinstance(iterations, int) or iterations < 0:
        raise InvalidIterationCountError(iterations)
    return int(iterations)


def resolve_pattern(pattern_name: str, library: Optional[PatternLibrary] = None) -> LiveSet:
    """Look up the live set of a named start pattern.

    Raises:
        InvalidPatternError: If the library has no pattern with that name
    """
    library = library or PatternLibrary()
    pattern = library.get_pattern(pattern_name)
    if pattern is None:
        raise InvalidPatternError(pattern_name, library.list_patterns())
    return pattern.to_live_set()


def simulate(
    pattern_name: str,
    iterations: Any,
    backend: str = DEFAULT_BACKEND,
    library: Optional[PatternLibrary] = None,
) -> Iterator[LiveSet]:
    """Validate a request and return the lazy generation sequence.

    All validation happens before the first generation is produced.

    Raises:
        InvalidPatternError: If the pattern name is unknown
        InvalidIterationCountError: If the iteration count is invalid
        ValueError: If the backend is unknown
    """
    initial = resolve_pattern(pattern_name, library)
    count = validate_iterations(iterations)
    stepper = get_stepper(backend)

    logger.debug(
        "Simulating '%s' for %d generations (backend: %s)", pattern_name, count, backend
    )
    return generations(initial, count, stepper)


def stream(
    pattern_name: str,
    iterations: Any,
    backend: str = DEFAULT_BACKEND,
    library: Optional[PatternLibrary] = None,
) -> Iterator[str]:
    """Validate a request, then lazily yield the rendering of each generation."""
    states = simulate(pattern_name, iterations, backend, library)
    return (render(state) for state in states)


def run(
    pattern_name: str,
    iterations: Any,
    backend: str = DEFAULT_BACKEND,
    library: Optional[PatternLibrary] = None,
) -> List[str]:
    """Render every generation of a named pattern.

    Args:
        pattern_name: Name of a start pattern in the library
        iterations: Number of generations to compute after the initial one
        backend: Step backend name
        library: Pattern library to resolve the name against

    Returns:
        ``iterations + 1`` renderings, generation 0 first
    """
    return list(stream(pattern_name, iterations, backend, library))
