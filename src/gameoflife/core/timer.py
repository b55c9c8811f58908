"""Scoped timer used to bracket engine calls for profiling."""

import logging
import time
from typing import Optional

logger = logging.getLogger(__name__)


class Timer:
    """Context manager that records a start and an end marker under a label.

    The end marker is recorded on every exit path, including exceptions.
    Markers are emitted at DEBUG level, so they only show up when the host
    enables debug logging.

    Example:
        with Timer("Universe.tick"):
            universe.tick()
    """

    def __init__(self, name: str) -> None:
        """Create a timer.

        Args:
            name: Label shared by the start and end markers
        """
        self.name = name
        self.start_time: Optional[float] = None
        self.elapsed: Optional[float] = None

    def __enter__(self) -> "Timer":
        self.start_time = time.perf_counter()
        self.elapsed = None
        logger.debug("%s: start", self.name)
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> bool:
        self.elapsed = time.perf_counter() - self.start_time
        logger.debug("%s: end (%.3f ms)", self.name, self.elapsed * 1000)
        return False
