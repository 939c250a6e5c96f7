"""
TierResizer - Decodes, resizes and writes images for a size tier.
"""

import logging
import os
from typing import Optional

from PIL import Image, UnidentifiedImageError

from .dimensions import Dimensions
from .errors import DecodeError, OutputError
from .size_tier import SizeTier


class TierResizer:
    """
    Resizes images to size tiers using Pillow.

    Outputs are always JPEG, whatever the source format.
    """

    OUTPUT_EXTENSION = '.jpg'
    RESAMPLE = Image.Resampling.BILINEAR

    def __init__(
        self,
        quality: int = 85,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize tier resizer.

        Args:
            quality: JPEG quality for output (default: 85)
            logger: Optional logger instance
        """
        self.quality = quality
        self.logger = logger or logging.getLogger(__name__)

    def decode(self, path: str) -> Image.Image:
        """
        Open and fully load an image.

        Args:
            path: Path of the image file

        Returns:
            Loaded PIL image

        Raises:
            DecodeError: If the file is missing, unreadable, empty or not an image
        """
        try:
            with Image.open(path) as img:
                img.load()
                # Detach from the file handle so the image outlives the with-block
                loaded = img.copy()
        except Image.DecompressionBombError as e:
            raise DecodeError(f"Image exceeds the decoder pixel limit: {path}: {e}", path=path) from e
        except FileNotFoundError as e:
            raise DecodeError(f"Image not found: {path}", path=path) from e
        except UnidentifiedImageError as e:
            raise DecodeError(f"Unsupported image format: {path}", path=path) from e
        except (OSError, ValueError) as e:
            raise DecodeError(f"Cannot decode {path}: {e}", path=path) from e

        if Dimensions.from_image(loaded).is_empty:
            raise DecodeError(f"Image has no pixels: {path}", path=path)

        self.logger.debug(f"Decoded {path}: {loaded.size[0]}x{loaded.size[1]} {loaded.mode}")
        return loaded

    def target_dimensions(self, img: Image.Image, tier: SizeTier) -> Dimensions:
        """Dimensions img will have after resizing to tier."""
        return Dimensions.from_image(img).fit_within(tier.max_dimension)

    def resize(self, img: Image.Image, tier: SizeTier) -> Image.Image:
        """
        Resize to fit within the tier's max dimension.

        Never upscales. Always returns a new image; img is left untouched.
        """
        # Pillow resizes palette and bilevel images with NEAREST whatever
        # filter is asked for, so convert first
        img = self._convert_color_mode(img)
        target = self.target_dimensions(img, tier)
        if target.as_tuple() == img.size:
            return img.copy()
        return img.resize(target.as_tuple(), self.RESAMPLE)

    def save(self, img: Image.Image, output_path: str) -> int:
        """
        Write img as JPEG.

        Args:
            img: Image to write
            output_path: Destination file path

        Returns:
            Number of bytes written

        Raises:
            OutputError: If the file cannot be written
        """
        img = self._convert_color_mode(img)
        try:
            img.save(output_path, format='JPEG', quality=self.quality, optimize=True)
            return os.path.getsize(output_path)
        except OSError as e:
            raise OutputError(f"Cannot write {output_path}: {e}", path=output_path) from e

    @staticmethod
    def ensure_directory(directory: str) -> None:
        """Create directory and any missing parents."""
        try:
            os.makedirs(directory, exist_ok=True)
        except OSError as e:
            raise OutputError(f"Cannot create output directory {directory}: {e}", path=directory) from e

    def _convert_color_mode(self, img: Image.Image) -> Image.Image:
        """Convert image to a colour mode JPEG can store."""
        if img.mode in ('RGBA', 'LA'):
            background = Image.new('RGB', img.size, (255, 255, 255))
            if img.mode == 'LA':
                img = img.convert('RGBA')
            background.paste(img, mask=img.split()[-1])
            return background
        elif img.mode == 'P':
            img = img.convert('RGBA')
            background = Image.new('RGB', img.size, (255, 255, 255))
            background.paste(img, mask=img.split()[-1])
            return background
        elif img.mode not in ('RGB', 'L'):
            return img.convert('RGB')
        return img
