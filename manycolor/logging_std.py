"""Настройка логирования.

Импорт модуля ничего не настраивает; нужно вызвать `configure_logging()`.
"""
from __future__ import annotations

import logging

_DEFAULT_FMT = "%(levelname)s %(name)s | %(message)s"


def configure_logging(*, level: str = "INFO", fmt: str = _DEFAULT_FMT) -> None:
    """Идемпотентная настройка корневого логгера (вывод в stderr)."""
    root = logging.getLogger()
    if root.handlers:
        # уже настроен приложением или тестовым раннером
        return
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=fmt)
