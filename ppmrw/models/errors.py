"""Типизированные ошибки чтения и записи PPM.

Все ошибки наследуются от `PPMError` (а через него от `ValueError`), поэтому
вызывающий код может ловить их как обычные ошибки значения.
"""
from __future__ import annotations

from typing import Optional


class PPMError(ValueError):
    """Базовая ошибка кодека PPM."""


class DecodeError(PPMError):
    """Ошибка разбора входного потока."""


class EncodeError(PPMError):
    """Ошибка сериализации изображения."""


# ---- Структурные ----
class InvalidMagicError(DecodeError):
    pass


class UnsupportedVariantError(DecodeError):
    pass


class MissingSeparatorError(DecodeError):
    pass


class TruncatedInputError(DecodeError):
    """Поток закончился внутри комментария или на месте токена."""


class MalformedTokenError(DecodeError):
    """Токен не является десятичным числом или слишком длинный."""


# ---- Диапазоны значений ----
class InvalidDimensionError(DecodeError):
    def __init__(self, field: str, value: int) -> None:
        super().__init__(f"Недопустимое значение {field}: {value} (должно быть > 0)")
        self.field = field
        self.value = value


class InvalidMaxValueError(DecodeError):
    def __init__(self, value: int) -> None:
        super().__init__(f"Максимальное значение канала вне диапазона [0, 255]: {value}")
        self.value = value


class ChannelOutOfRangeError(DecodeError):
    def __init__(self, value: int, max_channel_value: int, index: Optional[int] = None) -> None:
        where = f" (пиксель {index})" if index is not None else ""
        super().__init__(
            f"Значение канала {value} вне диапазона [0, {max_channel_value}]{where}"
        )
        self.value = value
        self.max_channel_value = max_channel_value
        self.index = index


# ---- Размер полезной нагрузки ----
class EmptyPayloadError(DecodeError):
    pass


class PayloadTooShortError(DecodeError):
    pass


class MissingTokenError(DecodeError):
    pass


class TrailingDataError(DecodeError):
    pass


# ---- Ввод-вывод ----
class ReadFailureError(DecodeError):
    pass


class WriteFailureError(EncodeError):
    pass


class HeaderMismatchError(EncodeError):
    """Заголовок не соответствует размерам или maxval изображения."""
