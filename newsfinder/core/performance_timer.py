"""
Performance measurement utilities for timing search stages.
"""

import time
from typing import Optional
from contextlib import contextmanager

import structlog


logger = structlog.get_logger(__name__)


class PerformanceTimer:
    """Simple performance timer for measuring processing stages."""

    def __init__(self, stage_name: str):
        self.stage_name = stage_name
        self.start_time: Optional[float] = None
        self.end_time: Optional[float] = None

    def start(self) -> None:
        """Start timing the stage."""
        self.start_time = time.perf_counter()
        logger.debug("stage_started", stage=self.stage_name)

    def stop(self) -> float:
        """Stop timing and return duration in seconds."""
        if self.start_time is None:
            raise ValueError("Timer not started")

        self.end_time = time.perf_counter()
        duration = self.end_time - self.start_time
        logger.debug("stage_completed", stage=self.stage_name, duration_ms=round(duration * 1000, 1))
        return duration

    @property
    def duration(self) -> float:
        """Get duration if timing is complete."""
        if self.start_time is None or self.end_time is None:
            raise ValueError("Timing not complete")
        return self.end_time - self.start_time

    @property
    def duration_ms(self) -> float:
        return round(self.duration * 1000, 1)


@contextmanager
def time_stage(stage_name: str):
    """Context manager for timing a code block."""
    timer = PerformanceTimer(stage_name)
    timer.start()
    try:
        yield timer
    finally:
        timer.stop()
