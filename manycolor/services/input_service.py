"""Источник входных строк: файл или стандартный ввод.

Принципы:
- SRP: модуль только выбирает и проверяет источник, строки не разбирает.
- Поток закрывается ровно один раз при выходе из `open_input`; ошибка
  закрытия фатальна (`ResourceCloseError`).
"""
from __future__ import annotations

import logging
import os
import stat
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional, TextIO

from manycolor.models.errors import InputSourceError, ResourceCloseError

logger = logging.getLogger(__name__)


@contextmanager
def open_input(file_path: Optional[str | Path] = None, stdin: Optional[TextIO] = None) -> Iterator[TextIO]:
    """Открывает источник строк и гарантирует его закрытие.

    Args:
        file_path: Путь к входному файлу; если не задан, читается stdin.
        stdin: Поток, подменяющий `sys.stdin` (для тестов).

    Raises:
        InputSourceError: файл не найден/не читается, stdin терминал или пуст.
        ResourceCloseError: поток не удалось закрыть.
    """
    if file_path:
        stream = _open_file(Path(file_path))
    else:
        stream = _open_stdin(sys.stdin if stdin is None else stdin)
    try:
        yield stream
    finally:
        close_input(stream)


def close_input(stream: TextIO) -> None:
    try:
        stream.close()
    except (OSError, ValueError) as exc:
        raise ResourceCloseError(f"Не удалось закрыть входной поток: {exc}") from exc


def _open_file(path: Path) -> TextIO:
    if not path.exists() or not path.is_file():
        raise InputSourceError(f"Файл не найден: {path}")
    try:
        stream = path.open("r", encoding="utf-8", errors="replace")
    except OSError as exc:
        raise InputSourceError(f"Не удалось открыть файл {path}: {exc}") from exc
    logger.info("Чтение из файла %s", path)
    return stream


def _open_stdin(stream: Optional[TextIO]) -> TextIO:
    """Проверяет, что stdin перенаправлен и не пуст.

    Эвристика защищает от зависания в ожидании ввода с терминала:
    терминал отвергается сразу, перенаправленный пустой файл по размеру,
    канал (pipe) по первому байту, прочитанному без извлечения из буфера.
    """
    if stream is None:
        raise InputSourceError("Некорректный ввод: stdin закрыт")
    if stream.isatty():
        raise InputSourceError("Некорректный ввод: stdin является терминалом")

    try:
        info: Optional[os.stat_result] = os.fstat(stream.fileno())
    except (OSError, ValueError):
        # нет файлового дескриптора (поток в памяти)
        info = None
    if info is not None and stat.S_ISREG(info.st_mode) and info.st_size <= 0:
        raise InputSourceError("Некорректный ввод: stdin пуст")

    buffer = getattr(stream, "buffer", None)
    if buffer is not None and hasattr(buffer, "peek") and not buffer.peek(1):
        raise InputSourceError("Некорректный ввод: stdin пуст")

    if hasattr(stream, "reconfigure"):
        stream.reconfigure(encoding="utf-8", errors="replace")
    logger.info("Чтение из stdin")
    return stream
