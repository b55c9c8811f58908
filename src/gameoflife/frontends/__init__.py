"""Frontend interfaces for the Game of Life engine."""

from .cli import CLIRunner, main

__all__ = ["CLIRunner", "main"]
