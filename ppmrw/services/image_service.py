"""Загрузка и сохранение PPM-файлов с диска.

Принципы:
- SRP: класс отвечает только за работу с путями; разбор байтов делегирован кодеку.
- OCP: новые источники (стрим, URL) можно добавить отдельными методами.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from ppmrw import codec
from ppmrw.models.image_model import Header, Image, ImageData, Variant

logger = logging.getLogger(__name__)


class ImageService:
    def load_image(self, file_path: str | Path) -> ImageData:
        """Загружает PPM-файл с диска и возвращает его вместе с метаданными.

        Args:
            file_path: Путь до файла изображения.

        Returns:
            `ImageData` с заголовком, декодированным `Image` и размером файла.

        Raises:
            FileNotFoundError: если путь не существует или не указывает на файл.
            DecodeError: если файл не является корректным PPM.
        """
        path = Path(file_path)
        if not path.exists() or not path.is_file():
            raise FileNotFoundError(f"Файл не найден: {path}")

        with path.open("rb") as fh:
            header, image = codec.decode_with_header(fh)

        try:
            size_bytes: Optional[int] = path.stat().st_size
        except OSError:
            size_bytes = None

        logger.debug("Loaded %s (%s bytes)", path, size_bytes)
        return ImageData(path=path, header=header, image=image, size_bytes=size_bytes)

    def save_image(self, image: Image, file_path: str | Path, variant: Variant) -> Path:
        """Сохраняет изображение в файл в указанном варианте (P3 или P6)."""
        path = Path(file_path)
        header = Header.for_image(image, variant)
        with path.open("wb") as fh:
            codec.encode(header, image, fh)
        logger.debug("Saved %s as P%d", path, header.variant)
        return path
