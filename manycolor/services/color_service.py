"""Разбор и нормализация hex-цветов.

Принципы:
- SRP: модуль только проверяет строку и строит `HexColor`.
- Шаблоны компилируются один раз при импорте и проверяются по порядку:
  сначала полная форма `rrggbb`, затем короткая `rgb`.
"""
from __future__ import annotations

import re
from typing import List, Tuple

from manycolor.models.color_model import HexColor
from manycolor.models.errors import LineValidationError

COLOR_PATTERNS: Tuple[re.Pattern, ...] = (
    re.compile(r"([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})"),
    re.compile(r"([0-9a-f])([0-9a-f])([0-9a-f])"),
)


def strip_hash(raw: str) -> str:
    """Убирает перевод строки в конце и все ведущие `#`."""
    return raw.rstrip("\r\n").lstrip("#")


def parse_hex(text: str) -> HexColor:
    """Разбирает hex-цвет без ведущего `#`.

    Каждая цифра короткой формы удваивается (`abc` -> `aabbcc`), пары
    декодируются по основанию 16. Допускаются только строчные буквы.

    Raises:
        LineValidationError: если строка не подходит ни под один шаблон.
    """
    for pattern in COLOR_PATTERNS:
        match = pattern.fullmatch(text)
        if match is not None:
            break
    else:
        raise LineValidationError("не является hex-цветом")

    pairs: List[str] = [part * 2 if len(part) == 1 else part for part in match.groups()]
    red, green, blue = (int(pair, 16) for pair in pairs)
    return HexColor(red=red, green=green, blue=blue, hex="".join(pairs))
