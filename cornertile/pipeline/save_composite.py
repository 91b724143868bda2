"""
Final pipeline step: name, encode and show the collage.
"""

import os
import subprocess
import sys
import logging
from pathlib import Path

from ..config import OUTPUT_EXT, OUTPUT_PREFIX, TIMESTAMP_FORMAT, TileConfig
from ..models.image import Image
from ..services.image_service import ImageService
from ..errors import ConfigurationError

logger = logging.getLogger(__name__)


def prepare_output_dir(output_dir: Path) -> Path:
    """
    Make sure the output directory exists and is writable.

    Raises:
        ConfigurationError: If it cannot be created or written to.
    """
    output_dir = Path(output_dir)
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as err:
        raise ConfigurationError(f"Cannot create output directory {output_dir}: {err}") from err

    if not output_dir.is_dir() or not os.access(output_dir, os.W_OK):
        raise ConfigurationError(f"Output directory is not writable: {output_dir}")
    return output_dir


def output_path(config: TileConfig) -> Path:
    """tile-<YYYY-MM-DD-HH-MM-SS>.jpg inside the configured output directory."""
    stamp = config.timestamp_provider().strftime(TIMESTAMP_FORMAT)
    return Path(config.output_dir) / f"{OUTPUT_PREFIX}{stamp}{OUTPUT_EXT}"


def save_composite(
    composite: Image,
    config: TileConfig,
    *,
    image_service: ImageService = None,
) -> Path:
    image_service = image_service or ImageService()
    path = output_path(config)
    image_service.save(composite, path, quality=config.jpeg_quality)
    logger.info(f"Saved {composite.width}x{composite.height} collage to {path}")
    return path


def open_with_default_viewer(path: Path) -> bool:
    """
    Hand the file to the platform's default viewer. Returns False if that failed.
    """
    try:
        if sys.platform.startswith("win"):
            os.startfile(str(path))  # Windows only
        elif sys.platform == "darwin":
            subprocess.Popen(["open", str(path)])
        else:
            subprocess.Popen(["xdg-open", str(path)])
    except OSError as err:
        logger.warning(f"Could not open {path} in a viewer: {err}")
        return False
    return True
