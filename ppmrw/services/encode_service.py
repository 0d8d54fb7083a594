"""Сериализация заголовка и пикселей в P3/P6.

Кодировщики не перепроверяют каналы: `Image` считается корректным
по построению. Любая ошибка записи поднимается как `WriteFailureError`.
"""
from __future__ import annotations

import logging
from typing import BinaryIO

from ppmrw.models.errors import WriteFailureError
from ppmrw.models.image_model import Header, Image, Variant

logger = logging.getLogger(__name__)


class EncodeService:
    def _write(self, stream: BinaryIO, data: bytes) -> None:
        try:
            stream.write(data)
        except OSError as exc:
            raise WriteFailureError(str(exc)) from exc

    def write_header(self, stream: BinaryIO, header: Header) -> None:
        dims = f"\n{header.width} {header.height}\n{header.max_channel_value}\n"
        self._write(stream, Variant(header.variant).magic + dims.encode("ascii"))

    def write_p6_data(self, stream: BinaryIO, image: Image) -> None:
        # r, g, b per pixel, row-major, no separators
        data = image.to_array().tobytes()
        self._write(stream, data)
        logger.debug("Wrote P6 raster: %d bytes", len(data))

    def write_p3_data(self, stream: BinaryIO, image: Image) -> None:
        lines = "".join(f"{px.r} {px.g} {px.b}\n" for px in image.pixels)
        data = lines.encode("ascii")
        self._write(stream, data)
        logger.debug("Wrote P3 raster: %d pixels", len(image.pixels))
