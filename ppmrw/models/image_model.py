"""Модели данных PPM: заголовок, пиксель, изображение.

Принципы:
- SRP: только структура данных и тривиальные преобразования, без разбора байтов.
- Чистый код: неизменяемость (`frozen=True`) для предсказуемости.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import NamedTuple, Optional, Tuple

import numpy as np
from PIL import Image as PILImage

from ppmrw.services.validation import require_channel, require_dimension, require_max_value


class Variant(IntEnum):
    """Вариант кодирования пикселей (цифра после 'P')."""
    ASCII = 3
    BINARY = 6

    @classmethod
    def from_magic(cls, digit: bytes) -> Optional["Variant"]:
        if digit == b"3":
            return cls.ASCII
        if digit == b"6":
            return cls.BINARY
        return None

    @property
    def magic(self) -> bytes:
        return b"P%d" % self.value


@dataclass(frozen=True)
class Header:
    """Заголовок PPM.

    Fields:
        variant: P3 (ASCII) или P6 (бинарный).
        width: Ширина, px (> 0).
        height: Высота, px (> 0).
        max_channel_value: Максимальное значение канала, [0, 255].
    """
    variant: Variant
    width: int
    height: int
    max_channel_value: int

    @property
    def pixel_count(self) -> int:
        return self.width * self.height

    @classmethod
    def for_image(cls, image: "Image", variant: Variant) -> "Header":
        return cls(
            variant=Variant(variant),
            width=image.width,
            height=image.height,
            max_channel_value=image.max_channel_value,
        )


class Pixel(NamedTuple):
    r: int
    g: int
    b: int


@dataclass(frozen=True)
class Image:
    """Декодированное изображение.

    Пиксели хранятся построчно (row-major): пиксель `(row, col)` лежит
    по смещению `row * width + col`, строка 0 сверху.
    """
    width: int
    height: int
    max_channel_value: int
    pixels: Tuple[Pixel, ...]

    def __post_init__(self) -> None:
        require_dimension("width", self.width)
        require_dimension("height", self.height)
        require_max_value(self.max_channel_value)

        expected = self.width * self.height
        if len(self.pixels) != expected:
            raise ValueError(
                f"Буфер пикселей содержит {len(self.pixels)} элементов, ожидалось {expected}"
            )

        channels = np.array(self.pixels, dtype=np.int64).reshape(-1)
        bad = (channels < 0) | (channels > self.max_channel_value)
        if bad.any():
            offset = int(np.argmax(bad))
            require_channel(int(channels[offset]), self.max_channel_value, offset // 3)

    def pixel_at(self, row: int, col: int) -> Pixel:
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise IndexError(f"Пиксель ({row}, {col}) вне изображения {self.width}x{self.height}")
        return self.pixels[row * self.width + col]

    def to_array(self) -> np.ndarray:
        """Возвращает массив uint8 формы (height, width, 3)."""
        arr = np.array(self.pixels, dtype=np.uint8)
        return arr.reshape(self.height, self.width, 3)

    @classmethod
    def from_array(cls, arr: np.ndarray, max_channel_value: int = 255) -> "Image":
        """Строит изображение из массива формы (height, width, 3)."""
        if arr.ndim != 3 or arr.shape[2] != 3:
            raise ValueError(f"Ожидался массив формы (h, w, 3), получено {arr.shape}")
        height, width = arr.shape[:2]
        flat = np.asarray(arr, dtype=np.uint8).reshape(-1, 3)
        pixels = tuple(Pixel(*px) for px in flat.tolist())
        return cls(width=width, height=height, max_channel_value=max_channel_value, pixels=pixels)

    def to_pil(self) -> PILImage.Image:
        """Конвертирует в `PIL.Image.Image` режима "RGB" для отображения.

        Если maxval меньше 255, каналы растягиваются до 0..255.
        """
        arr = self.to_array()
        if self.max_channel_value != 255:
            if self.max_channel_value == 0:
                arr = np.zeros_like(arr)
            else:
                scaled = np.rint(arr.astype(np.float32) * (255.0 / self.max_channel_value))
                arr = np.clip(scaled, 0, 255).astype(np.uint8)
        return PILImage.fromarray(arr)


@dataclass(frozen=True)
class ImageData:
    """Изображение, загруженное из файла, и его метаданные.

    Fields:
        path: Путь к исходному файлу.
        header: Заголовок, прочитанный из файла.
        image: Декодированное изображение.
        size_bytes: Размер файла, если доступен.
    """
    path: Path
    header: Header
    image: Image
    size_bytes: Optional[int]
