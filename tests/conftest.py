"""
Pytest configuration and shared fixtures for corner-tile tests.

Corner templates and framed screenshots are generated on the fly so the
tests never depend on assets checked into the repository.
"""

from pathlib import Path

import cv2
import numpy as np
import pytest

MARKER_SIZE = 10
MARKER_THICKNESS = 2

# One colour per corner so no template matches another corner's marker
MARKER_COLORS = {
    "tl": (255, 0, 0),
    "tr": (0, 255, 0),
    "bl": (0, 0, 255),
    "br": (255, 255, 0),
}


def marker_pixels(name: str, size: int = MARKER_SIZE) -> np.ndarray:
    """
    An L-shaped marker hugging the corner it names, on black.
    """
    pixels = np.zeros((size, size, 3), dtype=np.uint8)
    color = MARKER_COLORS[name]
    t = MARKER_THICKNESS
    rows = slice(0, t) if name[0] == "t" else slice(size - t, size)
    cols = slice(0, t) if name[1] == "l" else slice(size - t, size)
    pixels[rows, :] = color
    pixels[:, cols] = color
    return pixels


def write_rgb(path: Path, pixels: np.ndarray) -> Path:
    """Write RGB pixels to disk (OpenCV expects BGR)."""
    cv2.imwrite(str(path), np.ascontiguousarray(pixels[:, :, ::-1]))
    return path


def framed_pixels(width: int, height: int, box, size: int = MARKER_SIZE) -> np.ndarray:
    """
    A black screenshot with the four markers framing `box` = (x, y, w, h)
    and a flat grey patch inside the frame.
    """
    x, y, w, h = box
    pixels = np.zeros((height, width, 3), dtype=np.uint8)
    inner = size + 2
    pixels[y + inner:y + h - inner, x + inner:x + w - inner] = (128, 128, 128)
    placements = {
        "tl": (x, y),
        "tr": (x + w - size, y),
        "bl": (x, y + h - size),
        "br": (x + w - size, y + h - size),
    }
    for name, (mx, my) in placements.items():
        pixels[my:my + size, mx:mx + size] = marker_pixels(name, size)
    return pixels


@pytest.fixture
def template_dir(tmp_path):
    """
    Directory holding tl.png, tr.png, bl.png and br.png.
    """
    directory = tmp_path / "corner_templates"
    directory.mkdir()
    for name in MARKER_COLORS:
        write_rgb(directory / f"{name}.png", marker_pixels(name))
    return directory


@pytest.fixture
def output_dir(tmp_path):
    directory = tmp_path / "Pictures"
    directory.mkdir()
    return directory


@pytest.fixture
def make_screenshot(tmp_path):
    """
    Factory writing a framed screenshot PNG and returning its path.

    Usage: make_screenshot("a.png", width=100, height=100, box=(20, 20, 60, 60))
    """
    def _make(name, width=100, height=100, box=(20, 20, 60, 60)):
        return write_rgb(tmp_path / name, framed_pixels(width, height, box))
    return _make


@pytest.fixture
def templates(template_dir):
    """Loaded corner templates keyed by name."""
    from cornertile.repositories.template_repository import TemplateRepository
    return TemplateRepository(template_dir).load_all()
