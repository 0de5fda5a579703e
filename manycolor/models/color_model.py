"""Модели цвета и размера изображения.

Принципы:
- SRP: только структура данных, разбор строк живёт в сервисах.
- Чистый код: неизменяемость (`frozen=True`), значения сравниваются по полям.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

OPAQUE = 255


@dataclass(frozen=True)
class HexColor:
    """Нормализованный цвет.

    Fields:
        red, green, blue: Каналы 0..255.
        hex: Каноническая строка из 6 строчных hex-цифр (без `#`).
        alpha: Всегда полностью непрозрачный.
    """
    red: int
    green: int
    blue: int
    hex: str
    alpha: int = OPAQUE

    @property
    def rgba(self) -> Tuple[int, int, int, int]:
        return (self.red, self.green, self.blue, self.alpha)

    @property
    def filename(self) -> str:
        """Имя выходного файла: `<hex>.png`."""
        return f"{self.hex}.png"


@dataclass(frozen=True)
class ImageSize:
    """Размеры выходного изображения, px."""
    width: int
    height: int

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"
