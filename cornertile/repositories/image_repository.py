from pathlib import Path
from typing import Union
import logging

import numpy as np
import cv2
from PIL import Image as PILImage

from ..models.image import Image
from ..errors import DecodeError, EncodeError

logger = logging.getLogger(__name__)


class ImageRepository:
    """
    Handles file I/O for Image entities.
    Pixels are held in RGB order; OpenCV's BGR never leaves this class.
    """

    @staticmethod
    def create_image(pixels: np.ndarray, path: Union[str, Path] = None) -> Image:
        if path is None:
            return Image(pixels)
        return Image(pixels=pixels, path=Path(path))

    @staticmethod
    def retrieve_image_dimensions(img: Image):
        return img.pixels.shape[:2]

    @staticmethod
    def load(path: Union[str, Path], rgb: bool = True) -> Image:
        path = Path(path)
        arr_bgr = cv2.imread(str(path), cv2.IMREAD_COLOR)

        if arr_bgr is None:
            raise DecodeError(f"Image not found or unreadable: {path}")

        arr = np.ascontiguousarray(arr_bgr[:, :, ::-1]) if rgb else arr_bgr
        logger.debug(f"Decoded {path.name}: {arr.shape[1]}x{arr.shape[0]}")
        return Image(pixels=arr, path=path)

    @staticmethod
    def save(image: Image, path: Union[str, Path], quality: int = 95) -> Path:
        """
        Encode the image as JPEG at `path`.

        Raises:
            EncodeError: If Pillow cannot build or write the file.
        """
        path = Path(path)
        try:
            PILImage.fromarray(np.ascontiguousarray(image.pixels)).save(
                path, format="JPEG", quality=quality
            )
        except (OSError, ValueError, TypeError) as err:
            raise EncodeError(f"Could not write {path}: {err}") from err
        return path
