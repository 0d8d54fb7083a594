"""Декодирование пиксельных данных P6 (бинарные) и P3 (ASCII).

Оба декодера сначала читают весь остаток потока одним вызовом, а затем
проверяют его целиком. `Image` создаётся только после успешной проверки,
поэтому частично заполненное изображение вызывающему никогда не попадает.
"""
from __future__ import annotations

import logging
import re
from typing import BinaryIO, List

import numpy as np

from ppmrw.models.errors import (
    EmptyPayloadError,
    MalformedTokenError,
    MissingTokenError,
    PayloadTooShortError,
    ReadFailureError,
    TrailingDataError,
)
from ppmrw.models.image_model import Header, Image, Pixel
from ppmrw.services.validation import WHITESPACE, require_channel

logger = logging.getLogger(__name__)

MAX_P3_TOKEN_LENGTH = 3
_CHANNEL_RE = re.compile(rb"[+-]?[0-9]+")


class PixelService:
    def _read_payload(self, stream: BinaryIO) -> bytes:
        try:
            payload = stream.read()
        except OSError as exc:
            raise ReadFailureError(str(exc)) from exc
        if not payload:
            raise EmptyPayloadError("После заголовка нет пиксельных данных")
        return payload

    def read_p6_data(self, stream: BinaryIO, header: Header) -> Image:
        """Читает бинарный растр: ровно `width * height * 3` байт r, g, b.

        Raises:
            EmptyPayloadError: данных после заголовка нет.
            PayloadTooShortError: байт меньше, чем требует заголовок.
            TrailingDataError: после последнего пикселя остались байты.
            ChannelOutOfRangeError: байт больше maxval.
        """
        payload = self._read_payload(stream)
        expected = header.pixel_count * 3
        logger.debug("P6 payload: %d bytes, expected %d", len(payload), expected)

        if len(payload) < expected:
            raise PayloadTooShortError(
                f"Пиксельных данных меньше, чем указано в заголовке: {len(payload)} из {expected} байт"
            )
        if len(payload) > expected:
            raise TrailingDataError(f"Лишние данные после растра: {len(payload) - expected} байт")

        channels = np.frombuffer(payload, dtype=np.uint8)
        over = channels > header.max_channel_value
        if over.any():
            offset = int(np.argmax(over))
            require_channel(int(channels[offset]), header.max_channel_value, offset // 3)

        raster = channels.reshape(header.height, header.width, 3)
        return Image.from_array(raster, max_channel_value=header.max_channel_value)

    def read_p3_data(self, stream: BinaryIO, header: Header) -> Image:
        """Читает ASCII-растр: десятичные значения каналов через пробелы.

        Raises:
            EmptyPayloadError: данных после заголовка нет.
            MissingTokenError: данные закончились раньше, чем заполнены все пиксели.
            MalformedTokenError: токен не число или длиннее трёх символов.
            TrailingDataError: после последнего пикселя есть непробельные данные.
            ChannelOutOfRangeError: значение вне [0, maxval].
        """
        payload = self._read_payload(stream)
        size = len(payload)
        pos = 0
        channels: List[int] = []

        for slot in range(header.pixel_count * 3):
            while pos < size and payload[pos] in WHITESPACE:
                pos += 1
            if pos >= size:
                raise MissingTokenError(
                    f"Пиксельные данные закончились: прочитано {slot} из {header.pixel_count * 3} значений"
                )

            start = pos
            while pos < size and payload[pos] not in WHITESPACE:
                pos += 1
            token = payload[start:pos]
            if len(token) > MAX_P3_TOKEN_LENGTH or not _CHANNEL_RE.fullmatch(token):
                raise MalformedTokenError(f"Некорректное значение канала: {token[:16]!r}")

            channels.append(require_channel(int(token), header.max_channel_value, slot // 3))

        if payload[pos:].strip(bytes(WHITESPACE)):
            raise TrailingDataError("Лишние данные после последнего пикселя")

        logger.debug("P3 payload: %d bytes, %d channel values", size, len(channels))
        pixels = tuple(Pixel(*channels[i:i + 3]) for i in range(0, len(channels), 3))
        return Image(
            width=header.width,
            height=header.height,
            max_channel_value=header.max_channel_value,
            pixels=pixels,
        )
