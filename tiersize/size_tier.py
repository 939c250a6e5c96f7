"""
SizeTier - The six standard output sizes and classification into them.

    Tier        Max side   Tag      Selected when largest side is
    Large       1024       lg       > 1024
    Medium      640        md       > 640
    Small       320        sm       > 320
    XSmall      240        xs       > 240
    Thumbnail   128        thumb    > 128
    Avatar      64         avatar   anything else
"""

from enum import Enum
from typing import List

from .dimensions import Dimensions


class SizeTier(Enum):
    """
    Output size tier.

    Members are declared in strictly descending max_dimension order and
    iterate in that order.
    """
    LARGE = (1024, 'lg')
    MEDIUM = (640, 'md')
    SMALL = (320, 'sm')
    XSMALL = (240, 'xs')
    THUMBNAIL = (128, 'thumb')
    AVATAR = (64, 'avatar')

    def __init__(self, max_dimension: int, tag: str):
        self.max_dimension = max_dimension
        self.tag = tag

    @property
    def label(self) -> str:
        if self is SizeTier.XSMALL:
            return 'XSmall'
        return self.name.capitalize()

    @classmethod
    def from_tag(cls, tag: str) -> 'SizeTier':
        for tier in cls:
            if tier.tag == tag.lower():
                return tier
        raise ValueError(f"Unknown size tier tag: {tag!r}")

    def __str__(self) -> str:
        return self.tag


class SizeClassifier:
    """Places dimensions into a SizeTier by their largest side."""

    @staticmethod
    def all_tiers() -> List[SizeTier]:
        """All tiers, largest first."""
        return list(SizeTier)

    @staticmethod
    def classify(dimensions: Dimensions) -> SizeTier:
        largest = dimensions.largest
        # Avatar is the catch-all, so its threshold is never compared
        for tier in SizeClassifier.all_tiers()[:-1]:
            if largest > tier.max_dimension:
                return tier
        return SizeTier.AVATAR
