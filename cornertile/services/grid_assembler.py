from __future__ import annotations
from typing import List
import logging

from ..models.image import Image
from ..models.tiling import Row
from ..errors import GeometryError
from .image_service import ImageService

logger = logging.getLogger(__name__)


class GridAssembler:
    """
    Stacks finished rows top to bottom, padding narrow rows on the right with black.
    """

    def __init__(self, image_service: ImageService | None = None):
        self.image_service = image_service or ImageService()
        self.rows: List[Row] = []
        self.max_width = 0

    def add_row(self, row: Row) -> None:
        self.rows.append(row)
        self.max_width = max(self.max_width, row.width)

    def padded_rows(self) -> List[Image]:
        """Row images, each right-padded to the widest row."""
        return [self.image_service.pad_right(row.image, self.max_width) for row in self.rows]

    def assemble(self) -> Image:
        if not self.rows:
            raise GeometryError("No rows to assemble")

        composite = self.image_service.vconcat(self.padded_rows())
        logger.info(f"Assembled {len(self.rows)} row(s) into {composite.width}x{composite.height} collage")
        return composite
