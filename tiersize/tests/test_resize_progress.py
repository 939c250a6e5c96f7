"""Tests for ResizeProgress class."""

from tiersize.classification import classify
from tiersize.dimensions import Dimensions
from tiersize.resize_job import ResizeResult
from tiersize.resize_progress import ResizeProgress
from tiersize.run_stats import RunStats
from tiersize.size_tier import SizeTier


def make_result():
    return ResizeResult(
        tier=SizeTier.MEDIUM,
        output_path='/out/kitchen.md.jpg',
        elapsed_seconds=0.0125,
        dimensions=Dimensions(640, 480),
        bytes_written=2048,
    )


class TestResizeProgress:
    """Tests for ResizeProgress class."""

    def test_init_defaults(self, logger):
        """Test default initialization."""
        progress = ResizeProgress(logger=logger)

        assert progress.quiet is False

    def test_on_image_classified(self, logger, capsys):
        """Test the classification line."""
        progress = ResizeProgress(logger=logger)

        progress.on_image_classified('/in/kitchen.jpg', classify(Dimensions(2000, 1000)))

        assert capsys.readouterr().out == 'Image: Landscape Large\n'

    def test_tier_lines(self, logger, capsys):
        """Test the per-tier lines."""
        progress = ResizeProgress(logger=logger)

        progress.on_tier_started(SizeTier.MEDIUM)
        progress.on_tier_saved(make_result())

        out = capsys.readouterr().out
        assert 'Image Size: Medium' in out
        assert 'Resized image (/out/kitchen.md.jpg) in 12.50ms' in out

    def test_quiet_suppresses_tier_lines(self, logger, capsys):
        """Test quiet mode keeps only the classification line."""
        progress = ResizeProgress(quiet=True, logger=logger)

        progress.on_image_classified('/in/a.jpg', classify(Dimensions(10, 20)))
        progress.on_tier_started(SizeTier.MEDIUM)
        progress.on_tier_saved(make_result())

        assert capsys.readouterr().out == 'Image: Portrait Avatar\n'

    def test_on_dry_run(self, logger, capsys):
        """Test dry run output."""
        ResizeProgress(logger=logger).on_dry_run(make_result())

        out = capsys.readouterr().out
        assert 'DRY RUN' in out
        assert '640x480' in out

    def test_on_run_complete(self, logger, caplog):
        """Test the run summary is logged."""
        stats = RunStats(total_images=1)
        stats.record([make_result()])

        with caplog.at_level('INFO', logger='test'):
            ResizeProgress(logger=logger).on_run_complete(stats)

        assert 'Run complete: 1 images, 1 files, 2.0 KB' in caplog.text

    def test_format_duration(self):
        """Test duration formatting."""
        assert ResizeProgress.format_duration(0.0000005) == '0.5µs'
        assert ResizeProgress.format_duration(0.25) == '250.00ms'
        assert ResizeProgress.format_duration(2.5) == '2.500s'
