"""Frontend interfaces for the simulation engine."""

from .cli import CLILife

__all__ = ["CLILife"]
