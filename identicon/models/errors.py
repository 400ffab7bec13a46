"""Исключения конвейера генерации."""
from __future__ import annotations


class IdenticonError(Exception):
    """Базовая ошибка генерации идентикона."""


class InvalidInputError(IdenticonError, ValueError):
    """Нарушено предусловие этапа (некорректный сид или состояние дескриптора)."""


class EncodingError(IdenticonError, RuntimeError):
    """Не удалось закодировать холст в PNG."""
