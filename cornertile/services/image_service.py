from pathlib import Path
from typing import List, Sequence, Union
import logging

import cv2
import numpy as np

from ..models.image import Image
from ..models.match_result import CropRegion
from ..repositories.image_repository import ImageRepository
from ..errors import GeometryError

logger = logging.getLogger(__name__)


class ImageService:
    """Pixel-level helpers. Every method returns a new Image; inputs are never touched."""

    def __init__(self):
        self.image_repository = ImageRepository()

    def create_image(self, pixels: np.ndarray, path: Union[str, Path] = None) -> Image:
        return self.image_repository.create_image(pixels, path)

    def load(self, path: Union[str, Path]) -> Image:
        """Load a single image from disk into an Image object."""
        return self.image_repository.load(path)

    def save(self, image: Image, path: Union[str, Path], quality: int = 95) -> Path:
        return self.image_repository.save(image, path, quality=quality)

    def get_image_dimensions(self, img: Image):
        return self.image_repository.retrieve_image_dimensions(img)

    def crop_pixels(self, img: Image, region: CropRegion) -> Image:
        """
        Copy the pixels inside `region` into a new Image.

        Raises:
            GeometryError: If the region is empty or leaves the image bounds.
        """
        img_h, img_w = self.get_image_dimensions(img)
        if region.is_empty:
            raise GeometryError(
                f"Invalid crop bounds would create {region.width}x{region.height} image"
            )
        if not region.fits_within(img_w, img_h):
            raise GeometryError(
                f"Crop region ({region.x},{region.y},{region.width}x{region.height}) "
                f"exceeds {img_w}x{img_h} image"
            )

        bound_l, bound_t = region.x, region.y
        bound_r, bound_b = region.x + region.width, region.y + region.height
        new_pixels = img.pixels[bound_t:bound_b, bound_l:bound_r].copy()
        return self.create_image(new_pixels, img.path)

    def resize_to_height(self, img: Image, height: int) -> Image:
        """
        Scale uniformly so the result is exactly `height` pixels tall.
        Width becomes round(width * height / img.height).
        """
        if img.height == height:
            return self.create_image(img.pixels.copy(), img.path)

        scale = height / img.height
        width_scaled = max(1, round(img.width * scale))
        resized = cv2.resize(img.pixels, (width_scaled, height), interpolation=cv2.INTER_LINEAR)
        return self.create_image(resized, img.path)

    def hconcat(self, images: Sequence[Image]) -> Image:
        return self.create_image(cv2.hconcat([np.ascontiguousarray(i.pixels) for i in images]))

    def vconcat(self, images: Sequence[Image]) -> Image:
        return self.create_image(cv2.vconcat([np.ascontiguousarray(i.pixels) for i in images]))

    def pad_right(self, img: Image, width: int) -> Image:
        """
        Extend the image to `width` with zero pixels on the right.
        Images already that wide come back unchanged.
        """
        missing = width - img.width
        if missing <= 0:
            return img

        padding_shape: List[int] = list(img.pixels.shape)
        padding_shape[1] = missing
        padding = np.zeros(padding_shape, dtype=img.pixels.dtype)
        return self.hconcat([img, self.create_image(padding)])
