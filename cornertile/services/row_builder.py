from __future__ import annotations
from typing import List
import logging

from ..models.image import Image
from ..models.tiling import Row
from .image_service import ImageService

logger = logging.getLogger(__name__)


class RowBuilder:
    """
    Collects crops for a single row, then scales them to a common height and joins them.

    Build a fresh RowBuilder for every row; a finished builder is not reused.
    """

    def __init__(self, capacity: int, image_service: ImageService | None = None):
        if capacity < 1:
            raise ValueError(f"Row capacity must be positive, got {capacity}")
        self.capacity = capacity
        self.image_service = image_service or ImageService()
        self._images: List[Image] = []
        self._height = 0

    def __len__(self) -> int:
        return len(self._images)

    @property
    def height(self) -> int:
        """Tallest image added so far."""
        return self._height

    @property
    def is_full(self) -> bool:
        return len(self._images) >= self.capacity

    def add(self, image: Image) -> None:
        if self.is_full:
            raise ValueError(f"Row already holds {self.capacity} image(s)")
        self._images.append(image)
        self._height = max(self._height, image.height)

    def build(self) -> Row:
        """
        Rescale every image to the row height (aspect preserved) and concatenate left to right.

        Returns:
            Row: The joined strip, its height and how many tiles it holds.
        """
        if not self._images:
            raise ValueError("Cannot build an empty row")

        tiles = [self.image_service.resize_to_height(img, self._height) for img in self._images]
        row_image = self.image_service.hconcat(tiles)
        logger.debug(f"Built row of {len(tiles)} tile(s): {row_image.width}x{row_image.height}")
        return Row(image=row_image, height=self._height, tile_count=len(tiles))
