"""Core simulation engine."""

from .universe import Cell, Universe
from .timer import Timer
from .render import render_text, parse_text
from .patterns import Pattern, PatternLibrary

__all__ = ["Cell", "Universe", "Timer", "render_text", "parse_text", "Pattern", "PatternLibrary"]
