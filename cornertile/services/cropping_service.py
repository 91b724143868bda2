from typing import Sequence
import logging

from ..models.image import Image
from ..models.match_result import CropRegion, MatchResult
from ..config import CORNER_NAMES
from .image_service import ImageService

logger = logging.getLogger(__name__)


class CroppingService:
    def __init__(self):
        self.image_service = ImageService()

    @staticmethod
    def region_for(corners: Sequence[MatchResult]) -> CropRegion:
        """
        Smallest rectangle enclosing all four corner matches.

        The frame is not checked for consistency: a tl match that lands bottom-right
        still only widens the box.
        """
        if len(corners) != len(CORNER_NAMES):
            raise ValueError(f"Expected {len(CORNER_NAMES)} corner matches, got {len(corners)}")
        return CropRegion.enclosing(corners)

    def crop(self, source: Image, corners: Sequence[MatchResult]) -> Image:
        region = self.region_for(corners)
        logger.debug(
            f"Crop region ({region.x},{region.y}) {region.width}x{region.height} "
            f"of {source.width}x{source.height}"
        )
        return self.image_service.crop_pixels(source, region)
