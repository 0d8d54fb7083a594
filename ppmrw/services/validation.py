"""Общие проверки границ для декодеров P3 и P6.

Предикаты чистые и без состояния; `require_*` поднимают типизированную ошибку.
"""
from __future__ import annotations

from typing import Optional

from ppmrw.models.errors import (
    ChannelOutOfRangeError,
    InvalidDimensionError,
    InvalidMaxValueError,
)

MAX_CHANNEL_CEILING = 255
WHITESPACE = frozenset(b" \t\n\r\x0b\x0c")


def is_whitespace(byte: bytes) -> bool:
    return len(byte) == 1 and byte[0] in WHITESPACE


def is_valid_dimension(value: int) -> bool:
    return value > 0


def is_valid_max_value(value: int) -> bool:
    return 0 <= value <= MAX_CHANNEL_CEILING


def is_valid_channel(value: int, max_channel_value: int) -> bool:
    return 0 <= value <= max_channel_value


def require_dimension(field: str, value: int) -> int:
    if not is_valid_dimension(value):
        raise InvalidDimensionError(field, value)
    return value


def require_max_value(value: int) -> int:
    if not is_valid_max_value(value):
        raise InvalidMaxValueError(value)
    return value


def require_channel(value: int, max_channel_value: int, index: Optional[int] = None) -> int:
    if not is_valid_channel(value, max_channel_value):
        raise ChannelOutOfRangeError(value, max_channel_value, index)
    return value
