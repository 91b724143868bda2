from typing import Dict, List
import logging

import cv2

from ..models.image import Image
from ..models.match_result import MatchResult
from ..config import CORNER_NAMES
from ..errors import GeometryError, LowConfidenceMatch

logger = logging.getLogger(__name__)


class MatchingService:
    """
    Locates corner markers with normalized cross-correlation.

    The single global maximum of the response surface wins. Scores below
    `min_confidence` raise LowConfidenceMatch; a threshold of 0 accepts any match.
    """

    def __init__(self, min_confidence: float = 0.0):
        self.min_confidence = min_confidence

    @staticmethod
    def _response(source: Image, template: Image):
        if template.channels != source.channels:
            raise GeometryError(
                f"Template has {template.channels} channel(s), source has {source.channels}"
            )
        if template.width > source.width or template.height > source.height:
            raise GeometryError(
                f"Template {template.width}x{template.height} does not fit in "
                f"{source.width}x{source.height} source"
            )
        return cv2.matchTemplate(source.pixels, template.pixels, cv2.TM_CCORR_NORMED)

    def locate(self, source: Image, template: Image, name: str = "template") -> MatchResult:
        """
        Find the best placement of `template` inside `source`.

        Args:
            source (Image): Image to search.
            template (Image): Marker to look for.
            name (str): Template name, used in logs and errors.

        Returns:
            MatchResult: Max-score location with the template's own size.
        """
        response = self._response(source, template)
        _, max_val, _, max_loc = cv2.minMaxLoc(response)

        result = MatchResult(
            x=int(max_loc[0]),
            y=int(max_loc[1]),
            width=template.width,
            height=template.height,
            score=float(max_val),
        )
        logger.debug(f"Matched {name} at ({result.x},{result.y}) score={result.score:.4f}")

        if result.score < self.min_confidence:
            raise LowConfidenceMatch(name, result.score, self.min_confidence)
        return result

    def locate_corners(self, source: Image, templates: Dict[str, Image]) -> List[MatchResult]:
        """Match every corner template, always in tl, tr, bl, br order."""
        return [self.locate(source, templates[name], name) for name in CORNER_NAMES]
