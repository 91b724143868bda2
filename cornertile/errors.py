class TileError(Exception):
    """Base class for every failure that stops a tiling run."""


class ConfigurationError(TileError):
    """Missing template asset or unusable output directory."""


class DecodeError(TileError):
    """A source image could not be read."""


class GeometryError(TileError):
    """Degenerate or out-of-bounds region, or nothing left to tile."""


class LowConfidenceMatch(GeometryError):
    """The best match for a corner template scored below the threshold."""

    def __init__(self, template_name: str, score: float, threshold: float):
        self.template_name = template_name
        self.score = score
        self.threshold = threshold
        super().__init__(
            f"Best match for template '{template_name}' scored {score:.3f}, "
            f"below threshold {threshold:.3f}"
        )


class EncodeError(TileError):
    """The composite could not be written."""
