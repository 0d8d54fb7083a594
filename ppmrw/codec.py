"""Публичные операции кодека: `decode` и `encode`.

Внешние потребители (просмотрщик, конвертер) работают только с этими
двумя функциями и моделью `Image`.
"""
from __future__ import annotations

import io
import logging
from typing import BinaryIO, Tuple

from ppmrw.models.errors import HeaderMismatchError, ReadFailureError
from ppmrw.models.image_model import Header, Image, Variant
from ppmrw.services.encode_service import EncodeService
from ppmrw.services.header_service import HeaderService
from ppmrw.services.pixel_service import PixelService

logger = logging.getLogger(__name__)

_header_service = HeaderService()
_pixel_service = PixelService()
_encode_service = EncodeService()


def _seekable(stream: BinaryIO) -> BinaryIO:
    try:
        if stream.seekable():
            return stream
        return io.BytesIO(stream.read())
    except OSError as exc:
        raise ReadFailureError(str(exc)) from exc


def decode_with_header(stream: BinaryIO) -> Tuple[Header, Image]:
    """Декодирует поток и возвращает заголовок вместе с изображением."""
    stream = _seekable(stream)
    header = _header_service.read_header(stream)
    if header.variant == Variant.BINARY:
        image = _pixel_service.read_p6_data(stream, header)
    else:
        image = _pixel_service.read_p3_data(stream, header)
    logger.debug("Decoded %dx%d image", image.width, image.height)
    return header, image


def decode(stream: BinaryIO) -> Image:
    """Декодирует PPM (P3 или P6) из двоичного потока.

    Args:
        stream: Двоичный поток, позиционированный на 'P'. Поток без `seek`
            предварительно читается в память целиком.

    Returns:
        Полностью проверенный `Image`.

    Raises:
        DecodeError: при любой ошибке формата или чтения.
    """
    return decode_with_header(stream)[1]


def encode(header: Header, image: Image, stream: BinaryIO) -> None:
    """Записывает заголовок и пиксели в поток в варианте `header.variant`.

    Raises:
        HeaderMismatchError: размеры или maxval заголовка не совпадают с изображением.
        WriteFailureError: ошибка записи в поток.
    """
    if (header.width, header.height, header.max_channel_value) != (
        image.width,
        image.height,
        image.max_channel_value,
    ):
        raise HeaderMismatchError(
            f"Заголовок {header.width}x{header.height} maxval={header.max_channel_value} "
            f"не соответствует изображению {image.width}x{image.height} maxval={image.max_channel_value}"
        )

    _encode_service.write_header(stream, header)
    if header.variant == Variant.BINARY:
        _encode_service.write_p6_data(stream, image)
    else:
        _encode_service.write_p3_data(stream, image)
