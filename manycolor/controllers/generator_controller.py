"""Контроллер генерации: построчная оркестрация сервисов.

SOLID:
- SRP: класс связывает разбор цвета и запись изображения, сам ни то ни другое не делает.
- DIP: сервис изображений передаётся снаружи, по умолчанию пишет в текущий каталог.
Clean Code:
- Строки обрабатываются строго по порядку; ошибка одной строки не прерывает остальные.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

from manycolor.models.color_model import ImageSize
from manycolor.models.errors import LineValidationError, OutputIOError
from manycolor.services.color_service import parse_hex, strip_hash
from manycolor.services.image_service import ImageService

logger = logging.getLogger(__name__)


@dataclass
class GeneratorController:
    """Превращает поток строк с hex-цветами в PNG-файлы.

    Ответственности:
    - Нормализация строки и разбор цвета через `color_service`.
    - Запись изображения через `ImageService`.
    - Подсчёт успешно созданных изображений.
    """
    size: ImageSize
    image_service: ImageService = field(default_factory=ImageService)
    generated: int = 0

    def run(self, lines: Iterable[str]) -> int:
        """Обрабатывает все строки и печатает итог. Возвращает число созданных файлов."""
        for raw in lines:
            self.process_line(raw)
        print(f"Создано изображений: {self.generated}")
        return self.generated

    def process_line(self, raw: str) -> bool:
        raw = raw.rstrip("\r\n")
        hex_text = strip_hash(raw)
        try:
            color = parse_hex(hex_text)
            path = self.image_service.generate(color, self.size)
        except (LineValidationError, OutputIOError) as exc:
            logger.warning("Пропуск %r: %s", hex_text, exc)
            return False

        self.generated += 1
        print(f"{raw:>7} > {path.name}")
        return True
