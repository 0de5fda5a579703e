"""Точка входа: разбор флагов и запуск генерации."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from manycolor.controllers.generator_controller import GeneratorController
from manycolor.logging_std import configure_logging
from manycolor.models.errors import ConfigError, InputSourceError, ResourceCloseError
from manycolor.services.input_service import open_input
from manycolor.services.size_service import DEFAULT_SIZE, parse_size

logger = logging.getLogger("manycolor")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="many-color",
        description="Создаёт однотонный PNG для каждого hex-цвета из входного списка.",
    )
    parser.add_argument("-size", "--size", default=DEFAULT_SIZE, help="Размер изображения WxH (по умолчанию %(default)s).")
    parser.add_argument("-file", "--file", default=None, help="Входной файл (необязательно, иначе stdin).")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Запускает утилиту и возвращает код выхода."""
    configure_logging()
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        size = parse_size(args.size)
    except ConfigError as exc:
        parser.print_usage(sys.stderr)
        logger.error("%s", exc)
        return 1
    logger.info("Ширина: %dpx", size.width)
    logger.info("Высота: %dpx", size.height)

    controller = GeneratorController(size=size)
    try:
        with open_input(args.file) as stream:
            controller.run(stream)
    except InputSourceError as exc:
        parser.print_usage(sys.stderr)
        logger.error("%s", exc)
        return 1
    except ResourceCloseError as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
