#!/usr/bin/env python3
"""
Example usage of the gameoflife package as a host driver.
"""

from gameoflife import Universe, PatternLibrary


def main():
    """Seed a glider on a small torus and watch it wrap around."""
    universe = Universe.blank(10, 10)

    library = PatternLibrary()
    glider = library.get_pattern("Glider")
    glider.apply_to_universe(universe, row_offset=6, col_offset=6)

    print("Initial state:")
    print(universe.render())

    for _ in range(8):
        universe.tick()
        print(f"Generation {universe.generation}:")
        print(universe.render())

    # Hosts that draw the grid themselves read the raw bytes instead.
    # The view must be fetched again after every tick or resize.
    raw = universe.cells_view()
    print(f"{universe.width}x{universe.height} grid, {raw.nbytes} bytes, population {universe.population}")


if __name__ == "__main__":
    main()
