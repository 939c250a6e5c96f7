"""
Command Line Interface for tier resizing.
"""

import argparse
import logging
from typing import List, Optional

from .classification import classify
from .dimensions import Dimensions
from .errors import TiersizeError
from .pipeline import ResizePipeline
from .resize_config import ResizeConfig
from .resize_progress import ResizeProgress
from .size_tier import SizeClassifier, SizeTier
from .tier_resizer import TierResizer


def setup_logging(verbose: bool) -> logging.Logger:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO

    logging.basicConfig(
        level=level,
        format='%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    logging.getLogger('PIL').setLevel(logging.WARNING)

    return logging.getLogger('tiersize')


def get_resize_config(args: argparse.Namespace) -> ResizeConfig:
    """Get resize configuration from environment and CLI overrides."""
    config = ResizeConfig.from_env()

    if args.input_dir:
        config.input_dir = args.input_dir
    if args.output_dir:
        config.output_dir = args.output_dir
    if args.quality is not None:
        config.quality = args.quality
    if args.extension is not None:
        config.input_extension = args.extension
    if args.names:
        config.base_filenames = list(args.names)

    return config


def parse_tiers(tags: Optional[List[str]]) -> Optional[List[SizeTier]]:
    """Map --tier tags to SizeTiers (None means all tiers)."""
    if not tags:
        return None
    return [SizeTier.from_tag(tag) for tag in tags]


def cmd_resize(args: argparse.Namespace) -> int:
    """Execute resize command."""
    logger = setup_logging(args.verbose)

    config = get_resize_config(args)
    errors = config.validate()
    if errors:
        for error in errors:
            logger.error(error)
        return 1

    try:
        tiers = parse_tiers(args.tier)
    except ValueError as e:
        logger.error(str(e))
        return 1

    logger.info(f"Input: {config.input_dir}")
    logger.info(f"Output: {config.resolved_output_dir}")
    logger.info(f"Images: {', '.join(config.base_filenames)}")

    try:
        pipeline = ResizePipeline(
            resizer=TierResizer(quality=config.quality, logger=logger),
            tiers=tiers,
            dry_run=args.dry_run,
            progress=ResizeProgress(quiet=args.quiet, logger=logger),
            logger=logger
        )
        pipeline.run(config)
        return 0

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 130
    except TiersizeError as e:
        logger.error(f"Resize failed: {e}")
        return 1


def cmd_classify(args: argparse.Namespace) -> int:
    """Execute classify command."""
    logger = setup_logging(args.verbose)
    resizer = TierResizer(logger=logger)

    for path in args.paths:
        try:
            img = resizer.decode(path)
        except TiersizeError as e:
            logger.error(str(e))
            return 1
        dimensions = Dimensions.from_image(img)
        print(f"{path}: {dimensions} {classify(dimensions)}")

    return 0


def cmd_tiers(args: argparse.Namespace) -> int:
    """Execute tiers command."""
    print(f"{'TAG':<8}{'TIER':<12}{'MAX':>6}")
    for tier in SizeClassifier.all_tiers():
        print(f"{tier.tag:<8}{tier.label:<12}{tier.max_dimension:>6}")
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog='tiersize',
        description='Resize photos into standard size tiers',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Each input <input-dir>/<name>.jpg is written as six JPEGs:
  <output-dir>/<name>.lg.jpg      (max side 1024)
  <output-dir>/<name>.md.jpg      (max side 640)
  <output-dir>/<name>.sm.jpg      (max side 320)
  <output-dir>/<name>.xs.jpg      (max side 240)
  <output-dir>/<name>.thumb.jpg   (max side 128)
  <output-dir>/<name>.avatar.jpg  (max side 64)

Environment:
  TIERSIZE_INPUT_DIR, TIERSIZE_OUTPUT_DIR, TIERSIZE_QUALITY
"""
    )

    parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose logging')

    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    # Resize command
    resize_parser = subparsers.add_parser('resize', help='Write every size tier of each image')
    resize_parser.add_argument('names', nargs='*', metavar='NAME',
                               help='Base filenames without extension (default: built-in list)')
    resize_parser.add_argument('-i', '--input-dir', help='Directory holding the source images')
    resize_parser.add_argument('-o', '--output-dir', help='Output directory (default: <input-dir>/output)')
    resize_parser.add_argument('--quality', type=int, help='JPEG quality 1-95 (default: 85)')
    resize_parser.add_argument('--extension', help='Source file extension (default: .jpg)')
    resize_parser.add_argument('--tier', action='append', metavar='TAG',
                               help='Only write this tier (lg, md, sm, xs, thumb, avatar); repeatable')
    resize_parser.add_argument('-n', '--dry-run', action='store_true', help='Show what would be done')
    resize_parser.add_argument('-q', '--quiet', action='store_true', help='Suppress per-tier output')
    resize_parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose logging')

    # Classify command
    classify_parser = subparsers.add_parser('classify', help='Print orientation and size tier of images')
    classify_parser.add_argument('paths', nargs='+', metavar='PATH', help='Image files')
    classify_parser.add_argument('-v', '--verbose', action='store_true', help='Enable verbose logging')

    # Tiers command
    subparsers.add_parser('tiers', help='List the size tiers')

    return parser


def main(args: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    if not parsed_args.command:
        parser.print_help()
        return 1

    if parsed_args.command == 'resize':
        return cmd_resize(parsed_args)
    elif parsed_args.command == 'classify':
        return cmd_classify(parsed_args)
    elif parsed_args.command == 'tiers':
        return cmd_tiers(parsed_args)

    return 1
