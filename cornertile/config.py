from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from datetime import datetime
from pathlib import Path
from typing import Callable

from dotenv import dotenv_values, load_dotenv

from .errors import ConfigurationError

# Load environment variables
load_dotenv()

# Corner templates are always matched in this order
CORNER_NAMES = ("tl", "tr", "bl", "br")
TEMPLATE_EXT = ".png"

# Total image count -> columns per row; anything else gets DEFAULT_COLUMNS
COLUMN_TABLE = {4: 2, 5: 3, 6: 3, 7: 4}
DEFAULT_COLUMNS = 6

OUTPUT_PREFIX = "tile-"
OUTPUT_EXT = ".jpg"
TIMESTAMP_FORMAT = "%Y-%m-%d-%H-%M-%S"

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in _TRUTHY


def _env_number(name: str, default: str, cast):
    raw = os.getenv(name, default)
    try:
        return cast(raw)
    except ValueError as err:
        raise ConfigurationError(f"{name} must be a {cast.__name__}, got {raw!r}") from err


def _user_dirs_file() -> Path:
    config_home = os.getenv("XDG_CONFIG_HOME")
    base = Path(config_home).expanduser() if config_home else Path.home() / ".config"
    return base / "user-dirs.dirs"


def default_pictures_dir() -> Path:
    """
    The user's pictures directory.

    Checks XDG_PICTURES_DIR in the environment, then the entry written by
    xdg-user-dirs (~/.config/user-dirs.dirs), then falls back to ~/Pictures.
    """
    xdg = os.getenv("XDG_PICTURES_DIR")
    if not xdg:
        user_dirs = _user_dirs_file()
        if user_dirs.is_file():
            # Shell syntax: XDG_PICTURES_DIR="$HOME/Pictures"
            xdg = dotenv_values(user_dirs, interpolate=False).get("XDG_PICTURES_DIR")
    if xdg:
        return Path(os.path.expandvars(xdg)).expanduser()
    return Path.home() / "Pictures"


@dataclass(frozen=True)
class TileConfig:
    """
    Everything a run needs from the outside world.
    The clock and the output location are injected so the pipeline stays deterministic.
    """
    template_dir: Path
    output_dir: Path
    timestamp_provider: Callable[[], datetime] = field(default=datetime.now, compare=False)
    min_confidence: float = 0.8  # 0 disables the threshold
    jpeg_quality: int = 95
    open_viewer: bool = True
    strict: bool = False  # abort on the first image that fails

    def with_overrides(self, **overrides) -> "TileConfig":
        """Return a copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


def load_config(**overrides) -> TileConfig:
    """
    Build a TileConfig from environment variables (and .env), then apply overrides.

    Args:
        **overrides: TileConfig field values that win over the environment.
            None values are ignored so CLI flags can be passed straight through.

    Returns:
        TileConfig: The frozen run configuration.

    Raises:
        ConfigurationError: If a numeric setting does not parse.
    """
    output_dir = os.getenv("OUTPUT_DIR_PATH")
    config = TileConfig(
        template_dir=Path(os.getenv("TEMPLATE_DIR_PATH", "corner_templates")),
        output_dir=Path(output_dir).expanduser() if output_dir else default_pictures_dir(),
        min_confidence=_env_number("MIN_MATCH_CONFIDENCE", "0.8", float),
        jpeg_quality=_env_number("JPEG_QUALITY", "95", int),
        open_viewer=_env_flag("OPEN_VIEWER", "true"),
        strict=_env_flag("STRICT_MODE", "false"),
    )
    return config.with_overrides(**overrides)
