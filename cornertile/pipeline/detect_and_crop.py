from pathlib import Path
from typing import Dict, Iterable, List, Union
import logging

from ..models.image import Image
from ..models.tiling import CropOutcome
from ..services.cropping_service import CroppingService
from ..services.image_service import ImageService
from ..services.matching_service import MatchingService
from ..errors import GeometryError, TileError

logger = logging.getLogger(__name__)


def crop_one(
    path: Union[str, Path],
    templates: Dict[str, Image],
    *,
    matching_service: MatchingService,
    cropping_service: CroppingService,
    image_service: ImageService,
) -> Image:
    """Decode one source image, find its four corners and crop to them."""
    source = image_service.load(path)
    corners = matching_service.locate_corners(source, templates)
    return cropping_service.crop(source, corners)


def detect_and_crop(
    paths: Iterable[Union[str, Path]],
    templates: Dict[str, Image],
    *,
    matching_service: MatchingService = None,
    cropping_service: CroppingService = None,
    image_service: ImageService = None,
    strict: bool = False,
) -> List[CropOutcome]:
    """
    Crop every source image to its marker frame, in argument order.

    Each image is an independent unit: a failure is recorded in its CropOutcome
    and the next image is processed anyway.

    Args:
        paths: Source image paths, in collage order.
        templates: Corner templates keyed by corner name.
        matching_service: Matcher to use (defaults to no confidence threshold).
        cropping_service: Cropper to use.
        image_service: Service used to decode sources.
        strict: Re-raise the first failure instead of recording it.

    Returns:
        List[CropOutcome]: One outcome per input path, same order.
    """
    matching_service = matching_service or MatchingService()
    cropping_service = cropping_service or CroppingService()
    image_service = image_service or ImageService()

    outcomes = []
    for path in paths:
        path = Path(path)
        try:
            cropped = crop_one(
                path,
                templates,
                matching_service=matching_service,
                cropping_service=cropping_service,
                image_service=image_service,
            )
        except TileError as err:
            if strict:
                raise
            logger.warning(f"Skipping {path.name}: {err}")
            outcomes.append(CropOutcome(source=path, error=err))
            continue

        logger.info(f"Cropped {path.name} to {cropped.width}x{cropped.height}")
        outcomes.append(CropOutcome(source=path, image=cropped))

    return outcomes


def surviving_crops(outcomes: List[CropOutcome]) -> List[Image]:
    """
    Cropped images of every successful outcome.

    Raises:
        GeometryError: If no image survived; the first recorded error is chained.
    """
    crops = [o.image for o in outcomes if o.ok]
    failed = [o for o in outcomes if not o.ok]
    if failed:
        logger.warning(f"{len(failed)} of {len(outcomes)} image(s) skipped")
    if not crops:
        first_error = failed[0].error if failed else None
        raise GeometryError("No image could be cropped") from first_error
    return crops
