"""
Unit tests for corner marker matching.
"""

import numpy as np
import pytest

from conftest import MARKER_SIZE, framed_pixels
from cornertile.errors import GeometryError, LowConfidenceMatch
from cornertile.models.image import Image
from cornertile.services.matching_service import MatchingService


class TestLocate:
    """Tests for MatchingService.locate."""

    def test_finds_each_marker_at_its_placement(self, templates):
        """Every template should land exactly on the marker it was drawn from."""
        source = Image(framed_pixels(100, 100, (20, 20, 60, 60)))
        matcher = MatchingService()

        expected = {"tl": (20, 20), "tr": (70, 20), "bl": (20, 70), "br": (70, 70)}
        for name, (x, y) in expected.items():
            result = matcher.locate(source, templates[name], name)
            assert (result.x, result.y) == (x, y)
            assert (result.width, result.height) == (MARKER_SIZE, MARKER_SIZE)
            assert result.score == pytest.approx(1.0, abs=1e-3)

    def test_accepts_any_match_without_threshold(self, templates):
        """With a zero threshold even a blank image yields a match."""
        blank = Image(np.zeros((50, 50, 3), dtype=np.uint8))
        result = MatchingService(min_confidence=0.0).locate(blank, templates["tl"], "tl")

        assert result.width == MARKER_SIZE
        assert 0 <= result.x <= 50 - MARKER_SIZE

    def test_rejects_low_confidence(self, templates):
        """A blank image has no marker; the threshold should catch it."""
        blank = Image(np.zeros((50, 50, 3), dtype=np.uint8))

        with pytest.raises(LowConfidenceMatch) as exc_info:
            MatchingService(min_confidence=0.8).locate(blank, templates["br"], "br")

        assert exc_info.value.template_name == "br"
        assert exc_info.value.score < 0.8

    def test_low_confidence_is_a_geometry_error(self):
        assert issubclass(LowConfidenceMatch, GeometryError)

    def test_template_larger_than_source(self, templates):
        tiny = Image(np.zeros((5, 5, 3), dtype=np.uint8))
        with pytest.raises(GeometryError):
            MatchingService().locate(tiny, templates["tl"], "tl")

    def test_channel_mismatch(self, templates):
        gray = Image(np.zeros((50, 50), dtype=np.uint8))
        with pytest.raises(GeometryError):
            MatchingService().locate(gray, templates["tl"], "tl")


class TestLocateCorners:
    """Tests for MatchingService.locate_corners."""

    def test_returns_corners_in_fixed_order(self, templates):
        source = Image(framed_pixels(120, 90, (10, 5, 80, 60)))
        corners = MatchingService(min_confidence=0.9).locate_corners(source, templates)

        assert [(c.x, c.y) for c in corners] == [(10, 5), (80, 5), (10, 55), (80, 55)]
