"""
ResizeProgress - Console output for a resize run.
"""

import logging
from typing import Optional

from .classification import ClassificationResult
from .resize_job import ResizeResult
from .run_stats import RunStats
from .size_tier import SizeTier


class ResizeProgress:
    """
    Prints per-image classification and per-tier timing lines.
    """

    def __init__(
        self,
        quiet: bool = False,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize progress output.

        Args:
            quiet: If True, only the per-image classification line is printed
            logger: Optional logger instance
        """
        self.quiet = quiet
        self.logger = logger or logging.getLogger(__name__)

    def on_image_classified(self, image_path: str, classification: ClassificationResult) -> None:
        print(f"Image: {classification}")
        self.logger.debug(f"Classified {image_path} as {classification}")

    def on_tier_started(self, tier: SizeTier) -> None:
        if not self.quiet:
            print(f"Image Size: {tier.label}")

    def on_tier_saved(self, result: ResizeResult) -> None:
        if not self.quiet:
            print(f"Resized image ({result.output_path}) in {self.format_duration(result.elapsed_seconds)}")

    def on_dry_run(self, result: ResizeResult) -> None:
        if not self.quiet:
            print(f"  [DRY RUN] {result.output_path} -> would write {result.dimensions}")

    def on_run_complete(self, stats: RunStats) -> None:
        self.logger.info(
            f"Run complete: {stats.images_processed} images, "
            f"{stats.outputs_written} files, {self._format_bytes(stats.bytes_written)} "
            f"({stats.elapsed_seconds:.1f}s, {stats.average_output_ms:.1f}ms/file)"
        )

    @staticmethod
    def format_duration(seconds: float) -> str:
        """Format a duration with a unit suited to its size."""
        if seconds < 1e-3:
            return f"{seconds * 1e6:.1f}µs"
        if seconds < 1:
            return f"{seconds * 1e3:.2f}ms"
        return f"{seconds:.3f}s"

    @staticmethod
    def _format_bytes(bytes_val: Optional[int]) -> str:
        """Format bytes as human-readable string."""
        if bytes_val is None:
            return "unknown"
        for unit in ['B', 'KB', 'MB', 'GB']:
            if bytes_val < 1024:
                return f"{bytes_val:.1f} {unit}"
            bytes_val /= 1024
        return f"{bytes_val:.1f} TB"
