"""Common Conway's Game of Life patterns and pattern management."""

from typing import Dict, List, Tuple, Optional, Any
import json
from pathlib import Path
import numpy as np

from .universe import Universe


class Pattern:
    """Represents a Game of Life pattern."""

    def __init__(
        self,
        name: str,
        cells: List[Tuple[int, int]],
        description: str = "",
        metadata: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Initialize a pattern.

        Args:
            name: Pattern name
            cells: List of (row, col) coordinates for living cells
            description: Optional description
            metadata: Optional metadata dictionary
        """
        self.name = name
        self.cells = cells
        self.description = description
        self.metadata = metadata or {}

    def apply_to_universe(self, universe: Universe, row_offset: int = 0, col_offset: int = 0) -> int:
        """Seed this pattern into a universe.

        Existing living cells are kept. Cells that would land outside the
        grid are skipped.

        Args:
            universe: Target universe
            row_offset: Vertical offset
            col_offset: Horizontal offset

        Returns:
            Number of cells that were placed
        """
        placed = [
            (row + row_offset, col + col_offset)
            for row, col in self.cells
            if 0 <= row + row_offset < universe.height and 0 <= col + col_offset < universe.width
        ]
        universe.set_cells(placed)
        return len(placed)

    def get_bounding_box(self) -> Tuple[int, int, int, int]:
        """Get bounding box of the pattern.

        Returns:
            Tuple of (min_row, min_col, max_row, max_col)
        """
        if not self.cells:
            return (0, 0, 0, 0)

        rows, cols = zip(*self.cells)
        return (min(rows), min(cols), max(rows), max(cols))

    def get_size(self) -> Tuple[int, int]:
        """Get pattern size.

        Returns:
            Tuple of (height, width)
        """
        min_row, min_col, max_row, max_col = self.get_bounding_box()
        return (max_row - min_row + 1, max_col - min_col + 1)

    def to_dict(self) -> Dict[str, Any]:
        """Convert pattern to dictionary for serialization."""
        return {
            "name": self.name,
            "cells": [list(cell) for cell in self.cells],
            "description": self.description,
            "metadata": self.metadata,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Pattern":
        """Create pattern from dictionary.

        Args:
            data: Dictionary with pattern data

        Returns:
            New Pattern instance
        """
        # JSON stores cells as lists
        cells = [tuple(cell) for cell in data["cells"]]

        return cls(
            name=data["name"],
            cells=cells,
            description=data.get("description", ""),
            metadata=data.get("metadata", {}),
        )

    @classmethod
    def from_universe(cls, universe: Universe, name: str, description: str = "") -> "Pattern":
        """Create pattern from the living cells of a universe.

        Args:
            universe: Source universe
            name: Pattern name
            description: Optional description

        Returns:
            New Pattern instance
        """
        grid = universe.get_cells().reshape(universe.height, universe.width)
        rows, cols = np.nonzero(grid)
        cells = [(int(row), int(col)) for row, col in zip(rows, cols)]

        metadata = {"source_size": [universe.width, universe.height], "population": len(cells)}

        return cls(name, cells, description, metadata)


class PatternLibrary:
    """Manages a collection of patterns."""

    CATEGORIES = {
        "Still Life": ["Block", "Beehive", "Loaf"],
        "Oscillators": ["Blinker", "Toad", "Beacon", "Pulsar"],
        "Spaceships": ["Glider", "Lightweight Spaceship"],
        "Methuselahs": ["R-pentomino", "Diehard", "Acorn"],
    }

    def __init__(self) -> None:
        self._patterns: Dict[str, Pattern] = {}
        self._load_builtin_patterns()

    def _load_builtin_patterns(self) -> None:
        """Load built-in common patterns."""
        # Still life patterns
        self.add_pattern(Pattern("Block", [(0, 0), (0, 1), (1, 0), (1, 1)], "2x2 still life block"))
        self.add_pattern(
            Pattern("Beehive", [(0, 1), (0, 2), (1, 0), (1, 3), (2, 1), (2, 2)], "Beehive still life")
        )
        self.add_pattern(
            Pattern("Loaf", [(0, 1), (0, 2), (1, 0), (1, 3), (2, 1), (2, 3), (3, 2)], "Loaf still life")
        )

        # Oscillators
        self.add_pattern(Pattern("Blinker", [(1, 0), (1, 1), (1, 2)], "Period-2 oscillator"))
        self.add_pattern(
            Pattern("Toad", [(0, 1), (0, 2), (0, 3), (1, 0), (1, 1), (1, 2)], "Period-2 oscillator")
        )
        self.add_pattern(
            Pattern("Beacon", [(0, 0), (0, 1), (1, 0), (2, 3), (3, 2), (3, 3)], "Period-2 oscillator")
        )
        self.add_pattern(
            Pattern(
                "Pulsar",
                [
                    # Top half
                    (0, 2), (0, 3), (0, 4), (0, 8), (0, 9), (0, 10),
                    (2, 0), (2, 5), (2, 7), (2, 12),
                    (3, 0), (3, 5), (3, 7), (3, 12),
                    (4, 0), (4, 5), (4, 7), (4, 12),
                    (5, 2), (5, 3), (5, 4), (5, 8), (5, 9), (5, 10),
                    # Bottom half (mirrored)
                    (7, 2), (7, 3), (7, 4), (7, 8), (7, 9), (7, 10),
                    (8, 0), (8, 5), (8, 7), (8, 12),
                    (9, 0), (9, 5), (9, 7), (9, 12),
                    (10, 0), (10, 5), (10, 7), (10, 12),
                    (12, 2), (12, 3), (12, 4), (12, 8), (12, 9), (12, 10),
                ],
                "Period-3 oscillator",
            )
        )

        # Spaceships
        self.add_pattern(
            Pattern("Glider", [(0, 1), (1, 2), (2, 0), (2, 1), (2, 2)], "Smallest spaceship, period-4")
        )
        self.add_pattern(
            Pattern(
                "Lightweight Spaceship",
                [(0, 0), (0, 3), (1, 4), (2, 0), (2, 4), (3, 1), (3, 2), (3, 3), (3, 4)],
                "LWSS - Period-4 spaceship",
            )
        )

        # Methuselahs
        self.add_pattern(
            Pattern(
                "R-pentomino",
                [(0, 1), (0, 2), (1, 0), (1, 1), (2, 1)],
                "Famous methuselah that stabilizes after 1103 generations",
            )
        )
        self.add_pattern(
            Pattern(
                "Diehard",
                [(0, 6), (1, 0), (1, 1), (2, 1), (2, 5), (2, 6), (2, 7)],
                "Dies after exactly 130 generations",
            )
        )
        self.add_pattern(
            Pattern(
                "Acorn",
                [(0, 1), (1, 3), (2, 0), (2, 1), (2, 4), (2, 5), (2, 6)],
                "Takes 5206 generations to stabilize",
            )
        )

    def add_pattern(self, pattern: Pattern) -> None:
        """Add a pattern to the library, replacing any with the same name."""
        self._patterns[pattern.name] = pattern

    def get_pattern(self, name: str) -> Optional[Pattern]:
        """Get a pattern by name.

        Returns:
            Pattern instance or None if not found
        """
        return self._patterns.get(name)

    def list_patterns(self) -> List[str]:
        """Get list of all pattern names."""
        return list(self._patterns.keys())

    def get_patterns_by_category(self) -> Dict[str, List[str]]:
        """Get patterns organized by category.

        Patterns that are not built in are listed under "Custom". Empty
        categories are omitted.
        """
        categories = {cat: list(names) for cat, names in self.CATEGORIES.items()}
        categories["Custom"] = []

        builtin = {name for names in self.CATEGORIES.values() for name in names}
        for name in self._patterns:
            if name not in builtin:
                categories["Custom"].append(name)

        return {cat: names for cat, names in categories.items() if names}

    def save_pattern(self, pattern: Pattern, path: str) -> Path:
        """Save a pattern to a JSON file.

        Args:
            pattern: Pattern to save
            path: Destination file

        Returns:
            Path that was written
        """
        filepath = Path(path)
        with open(filepath, "w") as f:
            json.dump(pattern.to_dict(), f, indent=2)
        return filepath

    def load_pattern(self, path: str) -> Pattern:
        """Load a pattern from a JSON file and add it to the library.

        Raises:
            FileNotFoundError: If file doesn't exist
            KeyError: If required fields are missing
        """
        with open(Path(path), "r") as f:
            data = json.load(f)

        pattern = Pattern.from_dict(data)
        self.add_pattern(pattern)
        return pattern
