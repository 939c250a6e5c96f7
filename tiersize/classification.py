"""
ClassificationResult - Orientation and size tier of one image.
"""

from dataclasses import dataclass

from .dimensions import Dimensions
from .orientation import Orientation, OrientationClassifier
from .size_tier import SizeClassifier, SizeTier


@dataclass(frozen=True)
class ClassificationResult:
    orientation: Orientation
    size_tier: SizeTier

    def __str__(self) -> str:
        return f"{self.orientation.label} {self.size_tier.label}"


def classify(dimensions: Dimensions) -> ClassificationResult:
    """Classify dimensions by orientation and size tier."""
    return ClassificationResult(
        orientation=OrientationClassifier.classify(dimensions),
        size_tier=SizeClassifier.classify(dimensions),
    )
