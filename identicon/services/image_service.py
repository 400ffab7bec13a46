"""Сохранение готовых идентиконов на диск.

Принципы:
- SRP: класс отвечает только за запись байт в файл `<каталог>/<сид>.png`.
- Ядро генерации ничего не знает о путях и именах файлов.
"""
from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger("identicon.storage")

DEFAULT_OUTPUT_DIR = "images"


class ImageService:
    def output_path(self, seed: str, directory: str | Path = DEFAULT_OUTPUT_DIR) -> Path:
        """Путь файла для сида.

        Raises:
            ValueError: если сид пустой или выводит путь за пределы каталога.
        """
        if not seed or seed in (".", "..") or "/" in seed or "\\" in seed or "\x00" in seed:
            raise ValueError(f"Сид нельзя использовать как имя файла: {seed!r}")
        return Path(directory) / f"{seed}.png"

    def save_image(self, data: bytes, seed: str, directory: str | Path = DEFAULT_OUTPUT_DIR) -> Path:
        """Записывает PNG-байты в `<directory>/<seed>.png`, создавая каталог при необходимости.

        Args:
            data: Закодированное изображение.
            seed: Исходная строка, она же имя файла.
            directory: Каталог для сохранения.

        Returns:
            Путь к записанному файлу.

        Raises:
            ValueError: если сид не годится как имя файла.
            OSError: если запись не удалась.
        """
        path = self.output_path(seed, directory)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        logger.info("Сохранено: %s (%d байт)", path, len(data))
        return path
