"""
RunStats - Statistics for a resize run.
"""

import time
from dataclasses import dataclass, field
from typing import List

from .resize_job import ResizeResult


@dataclass
class RunStats:
    """
    Statistics for a resize run.

    Attributes:
        total_images: Images scheduled for this run
        images_processed: Images with every tier written
        outputs_written: Tier files written
        bytes_written: Total bytes of tier files written
        start_time: Start timestamp
        results: Every ResizeResult, in processing order
    """
    total_images: int = 0
    images_processed: int = 0
    outputs_written: int = 0
    bytes_written: int = 0
    start_time: float = field(default_factory=time.time)
    results: List[ResizeResult] = field(default_factory=list)

    def record(self, results: List[ResizeResult]) -> None:
        """Add the results of one fully processed image."""
        self.images_processed += 1
        self.outputs_written += len(results)
        self.bytes_written += sum(r.bytes_written for r in results)
        self.results.extend(results)

    @property
    def elapsed_seconds(self) -> float:
        """Elapsed time in seconds."""
        return time.time() - self.start_time

    @property
    def resize_seconds(self) -> float:
        """Time spent inside tier resize+save operations."""
        return sum(r.elapsed_seconds for r in self.results)

    @property
    def average_output_ms(self) -> float:
        """Mean time per tier output in milliseconds."""
        if self.outputs_written > 0:
            return self.resize_seconds / self.outputs_written * 1000
        return 0.0

    @property
    def remaining_images(self) -> int:
        return self.total_images - self.images_processed
