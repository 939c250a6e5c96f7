"""
ResizeConfig - Input/output locations and options for a resize run.
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional

from .size_tier import SizeTier
from .tier_resizer import TierResizer


DEFAULT_INPUT_DIR = '/home/will/Pictures/inspections'
DEFAULT_BASE_FILENAMES = ['sliding_door_issue', 'bathroom', 'kitchen', 'living']


@dataclass
class ResizeConfig:
    """
    Configuration for a resize run.

    Attributes:
        input_dir: Directory holding the source images
        base_filenames: Source names without extension, processed in order
        output_dir: Directory for tier outputs (default: <input_dir>/output)
        quality: JPEG quality for outputs
        input_extension: Extension appended to each base filename
        env_errors: Problems found while reading the environment, reported by validate()
    """
    input_dir: str = DEFAULT_INPUT_DIR
    base_filenames: List[str] = field(default_factory=lambda: list(DEFAULT_BASE_FILENAMES))
    output_dir: Optional[str] = None
    quality: int = 85
    input_extension: str = '.jpg'
    env_errors: List[str] = field(default_factory=list, repr=False, compare=False)

    ENV_INPUT_DIR = 'TIERSIZE_INPUT_DIR'
    ENV_OUTPUT_DIR = 'TIERSIZE_OUTPUT_DIR'
    ENV_QUALITY = 'TIERSIZE_QUALITY'

    @classmethod
    def from_env(cls) -> 'ResizeConfig':
        """Create configuration from environment variables, falling back to defaults."""
        config = cls()
        config.input_dir = os.environ.get(cls.ENV_INPUT_DIR, config.input_dir)
        config.output_dir = os.environ.get(cls.ENV_OUTPUT_DIR) or None

        quality = os.environ.get(cls.ENV_QUALITY)
        if quality:
            try:
                config.quality = int(quality)
            except ValueError:
                config.env_errors.append(
                    f"JPEG quality in {cls.ENV_QUALITY} must be an integer (got {quality!r})"
                )
        return config

    @property
    def resolved_output_dir(self) -> str:
        return self.output_dir or os.path.join(self.input_dir, 'output')

    def input_path(self, base_filename: str) -> str:
        return os.path.join(self.input_dir, f"{base_filename}{self.input_extension}")

    def output_path(self, base_filename: str, tier: SizeTier) -> str:
        return output_path_for(self.resolved_output_dir, base_filename, tier)

    def validate(self) -> List[str]:
        """
        Check configuration values.

        Returns:
            List of error messages (empty if valid)
        """
        errors = list(self.env_errors)

        if not self.input_dir:
            errors.append("Input directory is required")
        if not self.base_filenames:
            errors.append("At least one base filename is required")
        for name in self.base_filenames:
            if not name or os.sep in name:
                errors.append(f"Invalid base filename: {name!r}")
        if not 1 <= self.quality <= 95:
            errors.append(f"JPEG quality must be between 1 and 95 (got {self.quality})")
        if self.input_extension and not self.input_extension.startswith('.'):
            errors.append(f"Input extension must start with '.': {self.input_extension!r}")

        return errors


def output_path_for(output_dir: str, base_filename: str, tier: SizeTier) -> str:
    """Path of the tier output: <output_dir>/<base_filename>.<tag>.jpg"""
    return os.path.join(output_dir, f"{base_filename}.{tier.tag}{TierResizer.OUTPUT_EXTENSION}")
