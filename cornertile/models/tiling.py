from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple

from .image import Image
from ..errors import TileError


@dataclass(frozen=True)
class Row:
    """
    One finished horizontal strip of the collage.
    """
    image: Image  # rescaled members concatenated left to right
    height: int   # tallest member before rescaling
    tile_count: int

    @property
    def width(self) -> int:
        return self.image.width


@dataclass(frozen=True)
class CropOutcome:
    """
    Result of cropping one source image: either the crop or the error that stopped it.
    """
    source: Path
    image: Image | None = None
    error: TileError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.image is not None


@dataclass(frozen=True)
class TileReport:
    """
    What a finished run produced: the collage path and every per-image outcome.
    """
    path: Path
    outcomes: Tuple[CropOutcome, ...]

    @property
    def skipped(self) -> List[CropOutcome]:
        return [o for o in self.outcomes if not o.ok]
