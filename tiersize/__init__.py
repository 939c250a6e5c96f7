"""
Multi-tier photo resizing.

Each input image is decoded once, classified by orientation and size,
then written as one JPEG per size tier (lg, md, sm, xs, thumb, avatar).
"""

__version__ = "1.0.0"

from .errors import TiersizeError, DecodeError, OutputError
from .dimensions import Dimensions
from .orientation import Orientation, OrientationClassifier, classify_orientation
from .size_tier import SizeTier, SizeClassifier
from .classification import ClassificationResult, classify
from .resize_job import ResizeJob, ResizeResult
from .resize_config import ResizeConfig
from .tier_resizer import TierResizer
from .run_stats import RunStats
from .resize_progress import ResizeProgress
from .pipeline import ResizePipeline

__all__ = [
    "TiersizeError",
    "DecodeError",
    "OutputError",
    "Dimensions",
    "Orientation",
    "OrientationClassifier",
    "classify_orientation",
    "SizeTier",
    "SizeClassifier",
    "ClassificationResult",
    "classify",
    "ResizeJob",
    "ResizeResult",
    "ResizeConfig",
    "TierResizer",
    "RunStats",
    "ResizeProgress",
    "ResizePipeline",
]
