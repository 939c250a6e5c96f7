"""
ResizeJob and ResizeResult - One tier's unit of work and its outcome.
"""

from dataclasses import dataclass

from PIL import Image

from .dimensions import Dimensions
from .size_tier import SizeTier


@dataclass
class ResizeJob:
    """
    A single tier resize of an already decoded source image.

    Attributes:
        source: Decoded source image (read-only, shared by all tiers)
        tier: Target size tier
        output_path: Where the resized JPEG is written
    """
    source: Image.Image
    tier: SizeTier
    output_path: str


@dataclass(frozen=True)
class ResizeResult:
    """
    Outcome of one ResizeJob.

    Attributes:
        tier: Size tier written
        output_path: Path of the written file
        elapsed_seconds: Wall-clock time for resize, directory creation and save
        dimensions: Dimensions of the written image
        bytes_written: Size of the written file (0 in dry-run mode)
    """
    tier: SizeTier
    output_path: str
    elapsed_seconds: float
    dimensions: Dimensions
    bytes_written: int = 0

    @property
    def elapsed_ms(self) -> float:
        return self.elapsed_seconds * 1000
