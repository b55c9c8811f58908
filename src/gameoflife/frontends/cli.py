"""Command-line host driver for the toroidal Game of Life engine."""

import argparse
import logging
import sys
import time
from typing import List, Optional, Tuple

from ..core.universe import DEFAULT_HEIGHT, DEFAULT_WIDTH, Universe
from ..core.patterns import PatternLibrary


class CLIRunner:
    """Command-line interface for stepping a universe and printing it."""

    def __init__(self) -> None:
        """Initialize CLI interface."""
        self.pattern_library = PatternLibrary()

    def build_universe(
        self,
        width: int,
        height: int,
        blank: bool = False,
        pattern: Optional[str] = None,
        pattern_row: int = 0,
        pattern_col: int = 0,
        cells: Optional[List[Tuple[int, int]]] = None,
        verbose: bool = False,
    ) -> Universe:
        """Create and seed a universe.

        Without ``blank`` or a pattern the default seed is used. Patterns and
        explicit cells are both placed on an all-dead grid.

        Raises:
            ValueError: If the pattern name is unknown
            IndexError: If an explicit cell is outside the grid
        """
        if blank or pattern or cells:
            universe = Universe.blank(width, height)
        else:
            universe = Universe(width, height)

        if verbose:
            print(f"Initializing {width}x{height} toroidal universe")

        if pattern:
            loaded = self.pattern_library.get_pattern(pattern)
            if loaded is None:
                available = ", ".join(self.pattern_library.list_patterns())
                raise ValueError(f"Pattern '{pattern}' not found. Available: {available}")
            placed = loaded.apply_to_universe(universe, pattern_row, pattern_col)
            if verbose:
                print(f"Loaded pattern '{pattern}' at ({pattern_row}, {pattern_col}), {placed} cells placed")

        if cells:
            universe.set_cells(cells)
            if verbose:
                print(f"Seeded {len(cells)} cells")

        return universe

    def run(self, universe: Universe, generations: int, show_grid: bool = False, verbose: bool = False) -> dict:
        """Tick a universe a fixed number of times.

        Args:
            universe: Universe to advance
            generations: Number of ticks
            show_grid: Print the grid before and after
            verbose: Print population after every tick

        Returns:
            Statistics dictionary
        """
        initial_population = universe.population

        if show_grid:
            print("\nInitial grid:")
            print(self._format_grid(universe))

        start_time = time.time()
        for _ in range(generations):
            universe.tick()
            if verbose:
                print(f"Generation {universe.generation}: population {universe.population}")
        duration = time.time() - start_time

        if show_grid:
            print(f"\nFinal grid (generation {universe.generation}):")
            print(self._format_grid(universe))

        cell_count = universe.width * universe.height
        return {
            "generation": universe.generation,
            "grid_size": (universe.width, universe.height),
            "initial_population": initial_population,
            "population": universe.population,
            "population_density": universe.population / cell_count if cell_count else 0.0,
            "duration_seconds": duration,
            "generations_per_second": generations / duration if duration > 0 else 0,
        }

    def _format_grid(self, universe: Universe, max_size: int = 64) -> str:
        """Format grid for display, refusing grids that are too large."""
        if universe.width > max_size or universe.height > max_size:
            return f"Grid too large to display ({universe.width}x{universe.height})"

        return universe.render().rstrip("\n")

    def list_patterns(self) -> None:
        """List available patterns by category."""
        categories = self.pattern_library.get_patterns_by_category()

        print("Available patterns:")
        for category, patterns in categories.items():
            print(f"\n{category}:")
            for pattern_name in patterns:
                pattern = self.pattern_library.get_pattern(pattern_name)
                if pattern:
                    height, width = pattern.get_size()
                    print(f"  {pattern_name}: {width}x{height}, {len(pattern.cells)} cells")
                    if pattern.description:
                        print(f"    {pattern.description}")


def parse_cell(value: str) -> Tuple[int, int]:
    """Parse a ``ROW,COL`` argument.

    Raises:
        argparse.ArgumentTypeError: If the value is not two integers
    """
    try:
        row, col = (int(part.strip()) for part in value.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid cell '{value}', expected ROW,COL")
    return row, col


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        description="Step a toroidal Conway's Game of Life universe from the command line",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Run the default 128x128 seed for 100 generations
  gameoflife-cli --generations 100

  # Watch a glider wrap around a small universe
  gameoflife-cli -W 8 -H 8 --pattern Glider -n 32 --show-grid

  # Seed explicit cells on a blank grid
  gameoflife-cli -W 5 -H 5 --cell 2,1 --cell 2,2 --cell 2,3 -n 1 -g

  # Print timer markers for every tick
  gameoflife-cli -n 5 --verbose
        """,
    )

    # Grid configuration
    parser.add_argument("-W", "--width", type=int, default=DEFAULT_WIDTH, help=f"Grid width (default: {DEFAULT_WIDTH})")

    parser.add_argument(
        "-H", "--height", type=int, default=DEFAULT_HEIGHT, help=f"Grid height (default: {DEFAULT_HEIGHT})"
    )

    parser.add_argument(
        "--blank",
        action="store_true",
        help="Start from an all-dead grid instead of the default seed",
    )

    # Seeding
    parser.add_argument(
        "--pattern",
        type=str,
        help="Place a named pattern on a blank grid",
    )

    parser.add_argument(
        "--pattern-row",
        type=int,
        default=0,
        help="Row offset for pattern placement (default: 0)",
    )

    parser.add_argument(
        "--pattern-col",
        type=int,
        default=0,
        help="Column offset for pattern placement (default: 0)",
    )

    parser.add_argument(
        "--cell",
        dest="cells",
        type=parse_cell,
        action="append",
        metavar="ROW,COL",
        help="Bring a cell to life (repeatable)",
    )

    # Simulation configuration
    parser.add_argument(
        "-n",
        "--generations",
        type=int,
        default=10,
        help="Number of generations to simulate (default: 10)",
    )

    # Output configuration
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Print per-generation progress and tick timings",
    )

    parser.add_argument(
        "-g",
        "--show-grid",
        action="store_true",
        help="Display initial and final grid states (small grids only)",
    )

    parser.add_argument(
        "--list-patterns",
        action="store_true",
        help="List available patterns and exit",
    )

    return parser


def validate_args(args: argparse.Namespace) -> bool:
    """Validate command-line arguments.

    Args:
        args: Parsed arguments

    Returns:
        True if arguments are valid
    """
    errors = []

    if args.width < 0:
        errors.append("Width must be non-negative")

    if args.height < 0:
        errors.append("Height must be non-negative")

    if args.generations < 0:
        errors.append("Generations must be non-negative")

    if args.pattern_row < 0:
        errors.append("Pattern row offset must be non-negative")

    if args.pattern_col < 0:
        errors.append("Pattern column offset must be non-negative")

    if errors:
        print("Error: Invalid arguments:")
        for error in errors:
            print(f"  - {error}")
        return False

    return True


def print_results(stats: dict, verbose: bool) -> None:
    """Print simulation results.

    Args:
        stats: Statistics dictionary from CLIRunner.run
        verbose: Whether to show detailed statistics
    """
    print(f"\nSimulation completed after {stats['generation']} generations")

    if verbose:
        print("\nDetailed Statistics:")
        print(f"  Grid size: {stats['grid_size'][0]}x{stats['grid_size'][1]}")
        print(f"  Initial population: {stats['initial_population']}")
        print(f"  Final population: {stats['population']}")
        print(f"  Population density: {stats['population_density']:.2%}")
        print(f"  Duration: {stats['duration_seconds']:.3f} seconds")
        print(f"  Speed: {stats['generations_per_second']:.0f} generations/second")
    else:
        print(f"Population: {stats['initial_population']} -> {stats['population']}")


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI interface.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    cli = CLIRunner()

    if args.list_patterns:
        cli.list_patterns()
        return 0

    if not validate_args(args):
        return 1

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        universe = cli.build_universe(
            width=args.width,
            height=args.height,
            blank=args.blank,
            pattern=args.pattern,
            pattern_row=args.pattern_row,
            pattern_col=args.pattern_col,
            cells=args.cells,
            verbose=args.verbose,
        )
        stats = cli.run(universe, args.generations, show_grid=args.show_grid, verbose=args.verbose)
        print_results(stats, args.verbose)
        return 0

    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
        return 1
    except (ValueError, IndexError) as e:
        print(f"Error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
