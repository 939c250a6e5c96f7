"""
Orientation classification from image dimensions.
"""

from enum import Enum

from .dimensions import Dimensions


class Orientation(Enum):
    LANDSCAPE = 'landscape'
    PORTRAIT = 'portrait'
    SQUARE = 'square'

    @property
    def label(self) -> str:
        return self.name.capitalize()

    def __str__(self) -> str:
        return self.label


class OrientationClassifier:
    """Labels dimensions as landscape, portrait or square."""

    @staticmethod
    def classify(dimensions: Dimensions) -> Orientation:
        if dimensions.width > dimensions.height:
            return Orientation.LANDSCAPE
        elif dimensions.height > dimensions.width:
            return Orientation.PORTRAIT
        return Orientation.SQUARE


def classify_orientation(dimensions: Dimensions) -> Orientation:
    """Shortcut for OrientationClassifier.classify."""
    return OrientationClassifier.classify(dimensions)
