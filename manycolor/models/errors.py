"""Иерархия ошибок утилиты.

Фатальные (процесс завершается с кодом 1):
- `ConfigError`: неверный `-size`.
- `InputSourceError`: нет файла, stdin является терминалом или пуст.
- `ResourceCloseError`: не удалось закрыть входной поток.

Восстановимые (строка пропускается, обработка продолжается):
- `LineValidationError`: строка не является hex-цветом.
- `OutputIOError`: PNG не удалось создать или записать.
"""
from __future__ import annotations


class ManyColorError(Exception):
    """Базовая ошибка приложения."""


class ConfigError(ManyColorError, ValueError):
    pass


class InputSourceError(ManyColorError, OSError):
    pass


class LineValidationError(ManyColorError, ValueError):
    pass


class OutputIOError(ManyColorError, OSError):
    pass


class ResourceCloseError(ManyColorError, OSError):
    pass
