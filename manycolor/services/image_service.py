"""Генерация однотонных PNG-изображений.

Принципы:
- SRP: класс отвечает только за растр и запись файла.
- ISP: наружу отдаётся только путь записанного файла.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import numpy as np
from PIL import Image

from manycolor.models.color_model import HexColor, ImageSize
from manycolor.models.errors import OutputIOError


@dataclass
class ImageService:
    output_dir: Path = field(default_factory=Path)

    def render(self, color: HexColor, size: ImageSize) -> Image.Image:
        """Создаёт растр `size`, каждый пиксель которого равен `color` (RGBA)."""
        raster = np.full((size.height, size.width, 4), color.rgba, dtype=np.uint8)
        return Image.fromarray(raster)

    def generate(self, color: HexColor, size: ImageSize) -> Path:
        """Рисует изображение и записывает его в `<hex>.png`.

        Существующий файл с тем же именем перезаписывается. Если PNG не
        закодировался, недописанный файл удаляется.

        Returns:
            Путь к записанному файлу.

        Raises:
            OutputIOError: растр не помещается в память, файл не открылся
                или PNG не закодировался.
        """
        path = self.output_dir / color.filename
        try:
            image = self.render(color, size)
        except (ValueError, MemoryError) as exc:
            raise OutputIOError(f"не удалось создать растр {size}: {exc}") from exc

        with image:
            try:
                fh = path.open("wb")
            except OSError as exc:
                raise OutputIOError(f"не удалось открыть {path}: {exc}") from exc
            try:
                with fh:
                    image.save(fh, format="PNG")
            except (OSError, ValueError) as exc:
                path.unlink(missing_ok=True)
                raise OutputIOError(f"не удалось записать {path}: {exc}") from exc
        return path
