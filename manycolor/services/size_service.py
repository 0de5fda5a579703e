"""Разбор строки размера вида `<ширина>x<высота>`."""
from __future__ import annotations

import re

from manycolor.models.color_model import ImageSize
from manycolor.models.errors import ConfigError

DEFAULT_SIZE = "800x600"
# Верхняя граница: знаковый 32-битный int
MAX_DIMENSION = 2**31 - 1

SIZE_PATTERN = re.compile(r"([1-9][0-9]*)x([1-9][0-9]*)")


def parse_size(text: str) -> ImageSize:
    """Преобразует `"800x600"` в `ImageSize(800, 600)`.

    Шаблон привязан ко всей строке: ведущие нули, ноль, пропущенная
    высота и посторонние символы отвергаются.

    Raises:
        ConfigError: если строка не соответствует шаблону или число вне диапазона.
    """
    match = SIZE_PATTERN.fullmatch(text)
    if match is None:
        raise ConfigError(f"Не удалось разобрать размер {text!r}")

    width, height = (int(group) for group in match.groups())
    if width > MAX_DIMENSION:
        raise ConfigError(f"Не удалось разобрать ширину {match.group(1)}")
    if height > MAX_DIMENSION:
        raise ConfigError(f"Не удалось разобрать высоту {match.group(2)}")
    return ImageSize(width=width, height=height)
