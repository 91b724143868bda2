from __future__ import annotations
from pathlib import Path
from typing import Dict, Iterable, Union
import logging

from ..models.image import Image
from ..config import CORNER_NAMES, TEMPLATE_EXT
from ..errors import ConfigurationError, DecodeError
from .image_repository import ImageRepository

logger = logging.getLogger(__name__)


class TemplateRepository:
    """
    Loads the corner marker templates once and keeps them for the process lifetime.
    """

    def __init__(self, template_dir: Union[str, Path], names: Iterable[str] = CORNER_NAMES):
        self.template_dir = Path(template_dir)
        self.names = tuple(names)
        self.image_repository = ImageRepository()
        self._templates: Dict[str, Image] | None = None

    def template_path(self, name: str) -> Path:
        return self.template_dir / f"{name}{TEMPLATE_EXT}"

    def load_all(self) -> Dict[str, Image]:
        """
        Load every template, in corner order.

        Raises:
            ConfigurationError: If any template is missing or unreadable.
                All missing names are reported together.
        """
        if self._templates is not None:
            return self._templates

        missing = [n for n in self.names if not self.template_path(n).is_file()]
        if missing:
            raise ConfigurationError(
                f"Missing corner template(s) {', '.join(missing)} in {self.template_dir}"
            )

        templates = {}
        for name in self.names:
            try:
                templates[name] = self.image_repository.load(self.template_path(name))
            except DecodeError as err:
                raise ConfigurationError(f"Corner template '{name}' is unreadable: {err}") from err
            logger.debug(f"Loaded template {name}: {templates[name].width}x{templates[name].height}")

        self._templates = templates
        return templates
