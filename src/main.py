"""Command-line entry point: contour map image -> relative heightmap."""

import argparse
import logging
import sys
from pathlib import Path

from domain.settings import load_settings
from heightmap import (
    HeightmapError,
    build_elevation_model,
    mask_to_image,
    render_heightmap,
)
from image_io import ImageDecodeError, load_rgba, save_gray_png
from shared.constants import (
    HEIGHTMAP_FILENAME,
    LOG_FORMAT,
    MASK_FILENAME,
    RAW_MASK_FILENAME,
    REGIONS_FILENAME,
)
from shared.diagnostics import log_memory_usage

logger = logging.getLogger(__name__)

EXIT_INPUT_ERROR = 1
EXIT_INTEGRITY_ERROR = 2


def setup_logging(*, debug: bool = False) -> None:
    """Configure application logging to stdout."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description='map2heightmap - relative heightmap from a contour map image'
    )
    parser.add_argument('imgpath', type=Path, help='Path to the map image')
    parser.add_argument(
        '-d',
        '--debug',
        action='store_true',
        help='Write intermediate images and print region/height maps',
    )
    return parser.parse_args(argv)


def run(imgpath: Path, *, debug: bool = False, out_dir: Path | None = None) -> int:
    """Process one image; debug artifacts go to ``out_dir`` (cwd by default)."""
    out_dir = out_dir or Path.cwd()
    logger.info('Using image: %s', imgpath)
    if debug:
        logger.info('Debug mode enabled')

    try:
        settings = load_settings()
        image = load_rgba(imgpath)
    except (ImageDecodeError, ValueError) as e:
        logger.error('%s', e)
        return EXIT_INPUT_ERROR

    if debug:
        log_memory_usage('after decoding')

    try:
        model = build_elevation_model(image, settings)
    except HeightmapError as e:
        logger.error('Integrity violation: %s', e)
        return EXIT_INTEGRITY_ERROR

    if debug:
        log_memory_usage('after inference')
        logger.info('Saving raw mask at %s', RAW_MASK_FILENAME)
        save_gray_png(model.mask, out_dir / RAW_MASK_FILENAME)
        logger.info('Saving mask at %s', MASK_FILENAME)
        save_gray_png(mask_to_image(model.mask), out_dir / MASK_FILENAME)
        logger.info('Saving regions at %s', REGIONS_FILENAME)
        save_gray_png(model.labels, out_dir / REGIONS_FILENAME)
        logger.info('Saving heightmap at %s', HEIGHTMAP_FILENAME)
        save_gray_png(render_heightmap(model), out_dir / HEIGHTMAP_FILENAME)
        for label, region in sorted(model.regions.items()):
            logger.info(
                'Region %d: height=%s lines=%s',
                label,
                model.region_heights.get(label),
                region.relief_lines,
            )
        for label, line in sorted(model.lines.items()):
            logger.info(
                'Line %d: up=%s down=%s height=%s',
                label,
                line.up_region,
                line.down_region,
                line.height,
            )

    logger.info(
        'Done: %d relief lines, %d regions, %d islands, %d warnings',
        len(model.lines),
        len(model.regions),
        model.islands,
        model.warning_count,
    )
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main application entry point."""
    args = parse_args(argv)
    setup_logging(debug=args.debug)
    return run(args.imgpath, debug=args.debug)


if __name__ == '__main__':
    sys.exit(main())
