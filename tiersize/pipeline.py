"""
ResizePipeline - Decodes each image once and writes one JPEG per size tier.
"""

import logging
import os
import time
from typing import List, Optional, Sequence

from .classification import classify
from .dimensions import Dimensions
from .errors import TiersizeError
from .resize_config import ResizeConfig, output_path_for
from .resize_job import ResizeJob, ResizeResult
from .resize_progress import ResizeProgress
from .run_stats import RunStats
from .size_tier import SizeClassifier, SizeTier
from .tier_resizer import TierResizer


class ResizePipeline:
    """
    Writes every size tier of each input image.

    Images are processed one at a time and tiers in fixed order, largest
    first. The first error aborts the run; nothing is retried.
    """

    def __init__(
        self,
        resizer: Optional[TierResizer] = None,
        tiers: Optional[Sequence[SizeTier]] = None,
        dry_run: bool = False,
        progress: Optional[ResizeProgress] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize pipeline.

        Args:
            resizer: Tier resizer instance (default: TierResizer())
            tiers: Tiers to write (default: all six, largest first)
            dry_run: If True, compute outputs without writing anything
            progress: Optional console progress output
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self.resizer = resizer or TierResizer(logger=self.logger)
        all_tiers = SizeClassifier.all_tiers()
        # Keep declared order whatever order the caller passed
        self.tiers = [t for t in all_tiers if tiers is None or t in tiers]
        self.dry_run = dry_run
        self.progress = progress

    def run(self, config: ResizeConfig) -> RunStats:
        """
        Process every configured image.

        Args:
            config: Run configuration

        Returns:
            RunStats for the completed run

        Raises:
            TiersizeError: On the first image or tier that fails
        """
        stats = RunStats(total_images=len(config.base_filenames))
        output_dir = config.resolved_output_dir

        mode_str = " [DRY RUN]" if self.dry_run else ""
        self.logger.info(
            f"Starting run: {stats.total_images} images x {len(self.tiers)} tiers "
            f"-> {output_dir}{mode_str}"
        )

        for base_filename in config.base_filenames:
            image_path = config.input_path(base_filename)
            try:
                results = self.process(image_path, output_dir)
            except TiersizeError as e:
                self.logger.error(
                    f"Aborting after {stats.images_processed}/{stats.total_images} images: {e}"
                )
                raise
            stats.record(results)

        if self.progress:
            self.progress.on_run_complete(stats)
        else:
            self.logger.info(
                f"Run complete: {stats.images_processed} images, {stats.outputs_written} files "
                f"({stats.elapsed_seconds:.1f}s)"
            )
        return stats

    def process(self, image_path: str, output_dir: str) -> List[ResizeResult]:
        """
        Write one resized JPEG per tier for a single image.

        Args:
            image_path: Source image path
            output_dir: Directory for outputs, created if missing

        Returns:
            One ResizeResult per tier, in tier order

        Raises:
            DecodeError: If the source cannot be decoded (nothing is written)
            OutputError: If the directory or an output file cannot be written
        """
        source = self.resizer.decode(image_path)

        classification = classify(Dimensions.from_image(source))
        if self.progress:
            self.progress.on_image_classified(image_path, classification)
        else:
            self.logger.info(f"Image: {image_path} {classification}")

        base_filename = os.path.splitext(os.path.basename(image_path))[0]
        results = []
        for tier in self.tiers:
            job = ResizeJob(
                source=source,
                tier=tier,
                output_path=output_path_for(output_dir, base_filename, tier),
            )
            results.append(self._run_job(job, output_dir))
        return results

    def _run_job(self, job: ResizeJob, output_dir: str) -> ResizeResult:
        """Resize, create the output directory and save, timing all three."""
        if self.progress:
            self.progress.on_tier_started(job.tier)

        if self.dry_run:
            result = ResizeResult(
                tier=job.tier,
                output_path=job.output_path,
                elapsed_seconds=0.0,
                dimensions=self.resizer.target_dimensions(job.source, job.tier),
            )
            if self.progress:
                self.progress.on_dry_run(result)
            return result

        start = time.perf_counter()
        resized = self.resizer.resize(job.source, job.tier)
        self.resizer.ensure_directory(output_dir)
        bytes_written = self.resizer.save(resized, job.output_path)
        elapsed = time.perf_counter() - start

        result = ResizeResult(
            tier=job.tier,
            output_path=job.output_path,
            elapsed_seconds=elapsed,
            dimensions=Dimensions.from_image(resized),
            bytes_written=bytes_written,
        )

        if self.progress:
            self.progress.on_tier_saved(result)
        else:
            self.logger.debug(
                f"Resized image ({job.output_path}) to {result.dimensions} "
                f"in {result.elapsed_ms:.2f}ms"
            )
        return result
