"""Разбор заголовка PPM из байтового потока.

Принципы:
- SRP: сервис читает только заголовок и оставляет курсор на первом байте пикселей.
- Разделитель после токена и пропуск комментариев выполняются отдельными проходами:
  комментарий допустим только после обязательного пробельного символа.
"""
from __future__ import annotations

import io
import logging
import re
from typing import BinaryIO

from ppmrw.models.errors import (
    InvalidMagicError,
    MalformedTokenError,
    MissingSeparatorError,
    ReadFailureError,
    TruncatedInputError,
    UnsupportedVariantError,
)
from ppmrw.models.image_model import Header, Variant
from ppmrw.services.validation import is_whitespace, require_dimension, require_max_value

logger = logging.getLogger(__name__)

MAX_HEADER_TOKEN_LENGTH = 10
_INTEGER_RE = re.compile(rb"[+-]?[0-9]+")


def read_byte(stream: BinaryIO) -> bytes:
    """Читает один байт; пустая строка означает конец потока."""
    try:
        return stream.read(1)
    except OSError as exc:
        raise ReadFailureError(str(exc)) from exc


def unread_byte(stream: BinaryIO) -> None:
    try:
        stream.seek(-1, io.SEEK_CUR)
    except OSError as exc:
        raise ReadFailureError(str(exc)) from exc


def bytes_left(stream: BinaryIO) -> int:
    """Количество байт от курсора до конца потока; курсор не сдвигается."""
    try:
        pos = stream.tell()
        end = stream.seek(0, io.SEEK_END)
        stream.seek(pos, io.SEEK_SET)
    except OSError as exc:
        raise ReadFailureError(str(exc)) from exc
    return end - pos


class HeaderService:
    def skip_comments(self, stream: BinaryIO) -> None:
        """Пропускает пробелы и строки-комментарии `#...\\n` перед токеном.

        После возврата следующий `read` отдаёт первый байт, который не является
        ни пробелом, ни частью комментария.

        Raises:
            TruncatedInputError: если поток закончился внутри комментария.
        """
        while True:
            byte = read_byte(stream)
            while byte and is_whitespace(byte):
                byte = read_byte(stream)

            if byte != b"#":
                if byte:
                    unread_byte(stream)
                return

            while byte and byte != b"\n":
                byte = read_byte(stream)
            if not byte:
                raise TruncatedInputError("Поток закончился внутри комментария")

    def check_separator(self, stream: BinaryIO, after: str) -> None:
        byte = read_byte(stream)
        if not byte:
            raise TruncatedInputError(f"Поток закончился, ожидался разделитель после {after}")
        if not is_whitespace(byte):
            raise MissingSeparatorError(f"Нет пробела или перевода строки после {after}")

    def read_integer(self, stream: BinaryIO, field: str) -> int:
        """Читает десятичное целое до первого пробельного байта (не включая его)."""
        token = bytearray()
        while True:
            byte = read_byte(stream)
            if not byte:
                break
            if is_whitespace(byte):
                unread_byte(stream)
                break
            token += byte
            if len(token) > MAX_HEADER_TOKEN_LENGTH:
                raise MalformedTokenError(f"Слишком длинный токен для {field}: {bytes(token)!r}...")

        if not token:
            raise TruncatedInputError(f"Поток закончился, не найдено значение {field}")
        if not _INTEGER_RE.fullmatch(token):
            raise MalformedTokenError(f"Значение {field} не является целым числом: {bytes(token)!r}")
        return int(token)

    def read_header(self, stream: BinaryIO) -> Header:
        """Читает заголовок PPM и оставляет поток на первом байте пикселей.

        Args:
            stream: Двоичный поток с поддержкой `seek`/`tell`.

        Returns:
            Проверенный `Header`.

        Raises:
            DecodeError: любая структурная ошибка или ошибка диапазона.
        """
        if read_byte(stream) != b"P":
            raise InvalidMagicError("Неверный файл PPM: первый символ не 'P'")

        digit = read_byte(stream)
        variant = Variant.from_magic(digit)
        if variant is None:
            raise UnsupportedVariantError(f"Неподдерживаемое магическое число: P{digit.decode('latin-1')}")

        self.check_separator(stream, "магического числа")
        self.skip_comments(stream)

        width = require_dimension("width", self.read_integer(stream, "width"))
        self.check_separator(stream, "ширины")
        self.skip_comments(stream)

        height = require_dimension("height", self.read_integer(stream, "height"))
        self.check_separator(stream, "высоты")
        self.skip_comments(stream)

        max_channel_value = require_max_value(self.read_integer(stream, "maxval"))
        self.check_separator(stream, "максимального значения")

        header = Header(variant=variant, width=width, height=height, max_channel_value=max_channel_value)

        # A P6 raster that exactly fills the rest of the stream starts right here,
        # even if its first bytes look like whitespace or '#'.
        raster_size = header.pixel_count * 3
        if variant is Variant.BINARY and bytes_left(stream) == raster_size:
            logger.debug("P6 raster starts immediately after maxval separator")
        else:
            self.skip_comments(stream)

        logger.debug("Parsed header: P%d %dx%d maxval=%d", variant, width, height, max_channel_value)
        return header
