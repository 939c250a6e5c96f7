"""
Dimensions - Width and height of a decoded image.
"""

from dataclasses import dataclass

from PIL import Image


@dataclass(frozen=True)
class Dimensions:
    """
    Pixel dimensions of an image.

    Attributes:
        width: Width in pixels
        height: Height in pixels
    """
    width: int
    height: int

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Dimensions must be non-negative: {self.width}x{self.height}")

    @classmethod
    def from_image(cls, img: Image.Image) -> 'Dimensions':
        width, height = img.size
        return cls(width=width, height=height)

    @property
    def largest(self) -> int:
        """Largest side in pixels."""
        return max(self.width, self.height)

    @property
    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    @property
    def aspect_ratio(self) -> float:
        """Width divided by height (0.0 for empty dimensions)."""
        if self.is_empty:
            return 0.0
        return self.width / self.height

    def fit_within(self, max_dimension: int) -> 'Dimensions':
        """
        Scale down so neither side exceeds max_dimension.

        Aspect ratio is kept and dimensions that already fit are returned
        unchanged, so the result is never larger than the original.

        Args:
            max_dimension: Bound for both width and height

        Returns:
            Scaled Dimensions
        """
        if max_dimension <= 0:
            raise ValueError(f"max_dimension must be positive: {max_dimension}")

        if self.largest <= max_dimension:
            return self

        scale = max_dimension / self.largest
        width = min(max_dimension, max(1, round(self.width * scale)))
        height = min(max_dimension, max(1, round(self.height * scale)))
        return Dimensions(width=width, height=height)

    def as_tuple(self):
        return (self.width, self.height)

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"
