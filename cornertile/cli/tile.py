#!/usr/bin/env python3
"""
corner-tile: crop marker-framed screenshots and tile them into one JPEG collage.

    corner-tile shot1.png shot2.png shot3.png shot4.png
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from ..config import TileConfig, load_config
from ..errors import TileError
from ..models.tiling import TileReport
from ..pipeline.detect_and_crop import detect_and_crop, surviving_crops
from ..pipeline.save_composite import open_with_default_viewer, prepare_output_dir, save_composite
from ..pipeline.tile_builder import tile_images
from ..repositories.template_repository import TemplateRepository
from ..services.image_service import ImageService
from ..services.layout_service import LayoutService
from ..services.matching_service import MatchingService

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
# Collage written, but some inputs were skipped
EXIT_PARTIAL = 3


def configure_logging(verbose: bool = False) -> None:
    # --- Centralized Logging Configuration ---
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(name)-25s - %(levelname)-8s - %(message)s',
        datefmt='%H:%M:%S'
    )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="corner-tile",
        description="Crop images to their corner markers and tile them into one collage.",
    )
    p.add_argument("images", nargs="+", type=Path, help="Source image paths (in collage order).")
    p.add_argument("--templates", type=Path, default=None,
                   help="Directory holding tl.png, tr.png, bl.png and br.png.")
    p.add_argument("--output-dir", type=Path, default=None,
                   help="Where to write the collage (default: your pictures directory).")
    p.add_argument("--no-open", action="store_true", help="Do not open the result in a viewer.")
    p.add_argument("--strict", action="store_true", help="Abort on the first image that fails.")
    p.add_argument("--verbose", "-v", action="store_true", help="Log every match and crop.")
    return p.parse_args(argv)


def run(images: List[Path], config: TileConfig) -> TileReport:
    """
    Whole pipeline for one run. Templates and the output directory are checked
    before any source image is decoded.

    The column count comes from how many images were asked for, so a skipped
    image leaves the layout unchanged.

    Returns:
        TileReport: Where the collage was written and what happened to each input.
    """
    templates = TemplateRepository(config.template_dir).load_all()
    prepare_output_dir(config.output_dir)

    layout_service = LayoutService()
    columns = layout_service.column_count(len(images))

    image_service = ImageService()
    outcomes = detect_and_crop(
        images,
        templates,
        matching_service=MatchingService(config.min_confidence),
        image_service=image_service,
        strict=config.strict,
    )
    composite = tile_images(
        surviving_crops(outcomes),
        columns=columns,
        layout_service=layout_service,
        image_service=image_service,
    )
    path = save_composite(composite, config, image_service=image_service)
    return TileReport(path=path, outcomes=tuple(outcomes))


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(args.verbose)

    try:
        config = load_config(
            template_dir=args.templates,
            output_dir=args.output_dir,
            open_viewer=False if args.no_open else None,
            strict=True if args.strict else None,
        )
        report = run(args.images, config)
    except TileError as err:
        logger.error(f"{type(err).__name__}: {err}")
        return EXIT_FAILURE

    print(report.path)
    if config.open_viewer:
        open_with_default_viewer(report.path)

    if report.skipped:
        names = ", ".join(o.source.name for o in report.skipped)
        logger.error(f"Collage is missing {len(report.skipped)} of {len(report.outcomes)} image(s): {names}")
        return EXIT_PARTIAL
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
