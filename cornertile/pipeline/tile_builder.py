from typing import Sequence
import logging

from ..models.image import Image
from ..services.grid_assembler import GridAssembler
from ..services.image_service import ImageService
from ..services.layout_service import LayoutService
from ..services.row_builder import RowBuilder

logger = logging.getLogger(__name__)


def tile_images(
    images: Sequence[Image],
    *,
    columns: int = None,
    layout_service: LayoutService = None,
    image_service: ImageService = None,
) -> Image:
    """
    Lay the crops out row by row and return the finished collage.

    Args:
        images: Cropped images, in collage order.
        columns: Images per row; derived from len(images) when omitted.
        layout_service: Supplies the column count.
        image_service: Shared by every row builder and the grid assembler.

    Returns:
        Image: The composite.
    """
    layout_service = layout_service or LayoutService()
    image_service = image_service or ImageService()
    columns = columns or layout_service.column_count(len(images))
    logger.info(
        f"Tiling {len(images)} image(s) into {layout_service.row_count(len(images), columns)} "
        f"row(s) of up to {columns}"
    )

    grid = GridAssembler(image_service)
    row = RowBuilder(columns, image_service)
    for img in images:
        row.add(img)
        if row.is_full:
            grid.add_row(row.build())
            row = RowBuilder(columns, image_service)

    # Short last row
    if len(row):
        grid.add_row(row.build())

    return grid.assemble()
