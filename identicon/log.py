"""Настройка логирования пакета.

Все модули пишут в дочерние логгеры `identicon.*`; обработчик вешается
один раз на корневой логгер пакета из точки входа.
"""
from __future__ import annotations

import logging
import sys

ROOT_LOGGER_NAME = "identicon"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: int = logging.WARNING) -> logging.Logger:
    """Настраивает логгер `identicon` (stderr) и возвращает его.

    Повторный вызов только меняет уровень, не добавляя обработчиков.
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
    return root
