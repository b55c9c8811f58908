"""Basic tests for the gameoflife package."""

from gameoflife import Cell, Universe, PatternLibrary


def test_universe_creation():
    """Test default universe creation and cell access."""
    universe = Universe()
    assert universe.width == 128
    assert universe.height == 128
    assert len(universe.get_cells()) == 128 * 128
    assert universe.get_cell(0, 0) is Cell.ALIVE
    assert universe.get_cell(0, 1) is Cell.DEAD


def test_seeding_blank_universe():
    """Test seeding cells on an all-dead universe."""
    universe = Universe.blank(5, 5)
    assert universe.population == 0

    universe.set_cells([(2, 2)])
    assert universe.population == 1
    assert universe.get_cell(2, 2) is Cell.ALIVE


def test_pattern_library():
    """Test pattern library has some patterns."""
    library = PatternLibrary()
    patterns = library.list_patterns()
    assert len(patterns) > 0
    assert "Glider" in patterns


def test_blinker_pattern():
    """Test the blinker pattern oscillates correctly."""
    universe = Universe.blank(5, 5)

    # Horizontal line through the centre
    universe.set_cells([(2, 1), (2, 2), (2, 3)])

    universe.tick()
    assert universe.population == 3
    assert universe.get_cell(1, 2)
    assert universe.get_cell(2, 2)
    assert universe.get_cell(3, 2)

    universe.tick()
    assert universe.population == 3
    assert universe.get_cell(2, 1)
    assert universe.get_cell(2, 2)
    assert universe.get_cell(2, 3)
