"""Контроллер конвертации: оркестрация загрузки, сохранения и просмотра.

SOLID:
- SRP: класс связывает командную строку с сервисами (без разбора байтов).
- DIP: зависит от сервисов как от ролей; конкретные реализации инкапсулированы.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from ppmrw.models.image_model import ImageData, Variant
from ppmrw.services.image_service import ImageService

logger = logging.getLogger(__name__)


def describe(image_data: ImageData) -> str:
    header = image_data.header
    return f"P{int(header.variant)} {header.width}x{header.height} maxval={header.max_channel_value}"


@dataclass
class ConvertController:
    """Связывает драйвер командной строки с прикладной логикой.

    Ответственности:
    - Чтение исходного файла через `ImageService`.
    - Перекодирование в вариант P3 или P6.
    - Передача декодированного изображения просмотрщику.
    """
    _image_service: ImageService = field(default_factory=ImageService)

    def inspect(self, infile: str | Path) -> ImageData:
        return self._image_service.load_image(infile)

    def convert(self, infile: str | Path, outfile: str | Path, variant: Variant) -> ImageData:
        """Читает `infile` (P3 или P6) и записывает его в `outfile` в варианте `variant`."""
        image_data = self._image_service.load_image(infile)
        self._image_service.save_image(image_data.image, outfile, variant)
        logger.info("Converted %s (%s) -> %s as P%d", infile, describe(image_data), outfile, variant)
        return image_data

    def show(self, image_data: ImageData) -> None:
        # Viewer is Pillow's default external viewer
        image_data.image.to_pil().show(title=image_data.path.name)
