from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class MatchResult:
    """
    Best-scoring placement of a template inside a source image.
    Coordinates are source-image pixels; size is the template's own size.
    """
    x: int
    y: int
    width: int
    height: int
    score: float = 0.0  # normalized cross-correlation at (x, y)

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height


@dataclass(frozen=True)
class CropRegion:
    x: int
    y: int
    width: int
    height: int

    @classmethod
    def enclosing(cls, matches: Sequence[MatchResult]) -> "CropRegion":
        """
        Union bounding box of all matches, whichever corner produced which coordinate.
        """
        min_x = min(m.x for m in matches)
        min_y = min(m.y for m in matches)
        max_x = max(m.right for m in matches)
        max_y = max(m.bottom for m in matches)
        return cls(x=min_x, y=min_y, width=max_x - min_x, height=max_y - min_y)

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def fits_within(self, width: int, height: int) -> bool:
        return (
            self.x >= 0 and self.y >= 0
            and self.x + self.width <= width
            and self.y + self.height <= height
        )
