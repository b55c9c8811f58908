"""Conway's Game of Life on a toroidal grid."""

__version__ = "0.1.0"

from .core.universe import Cell, Universe
from .core.timer import Timer
from .core.patterns import Pattern, PatternLibrary

__all__ = ["Cell", "Universe", "Timer", "Pattern", "PatternLibrary"]
