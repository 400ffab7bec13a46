"""Хеширование сида и выбор цвета.

Принципы:
- SRP: только превращение входа в байты дайджеста и цвет.
- Дескриптор не мутируется: каждый метод возвращает новую копию.
"""
from __future__ import annotations

import hashlib
import logging
from dataclasses import replace
from typing import Union

from identicon.models.errors import InvalidInputError
from identicon.models.image_model import ImageDescriptor

logger = logging.getLogger("identicon.hash")


class HashService:
    def hash_input(self, seed: Union[str, bytes]) -> ImageDescriptor:
        """Строит дескриптор с MD5-дайджестом сида.

        Args:
            seed: Строка (кодируется в UTF-8) или байты. Пустой вход допустим.

        Returns:
            `ImageDescriptor` с заполненным `hex` из 16 байт.

        Raises:
            InvalidInputError: если сид не строка и не байты или строку нельзя закодировать.
        """
        if isinstance(seed, str):
            # surrogateescape возвращает исходные байты argv, не декодированные из UTF-8
            try:
                data = seed.encode("utf-8", "surrogateescape")
            except UnicodeEncodeError as exc:
                raise InvalidInputError(f"Сид нельзя закодировать в UTF-8: {seed!r}") from exc
        elif isinstance(seed, (bytes, bytearray, memoryview)):
            data = bytes(seed)
        else:
            raise InvalidInputError(f"Сид должен быть str или bytes, получено: {type(seed).__name__}")

        digest = hashlib.md5(data).digest()
        logger.debug("md5(%r) = %s", data, digest.hex())
        return ImageDescriptor(hex=tuple(digest))

    def pick_color(self, image: ImageDescriptor) -> ImageDescriptor:
        """Берёт первые три байта дайджеста как (R, G, B)."""
        if len(image.hex) < 3:
            raise InvalidInputError(f"Для выбора цвета нужно минимум 3 байта, есть {len(image.hex)}")
        r, g, b = image.hex[:3]
        return replace(image, color=(r, g, b))
