from __future__ import annotations

import logging
from dataclasses import replace
from typing import List, Sequence

import numpy as np

from identicon.models.errors import InvalidInputError
from identicon.models.image_model import CHUNK_SIZE, GRID_SIZE, GridCell, ImageDescriptor

logger = logging.getLogger("identicon.grid")


class GridService:
    def build_grid(self, image: ImageDescriptor) -> ImageDescriptor:
        """
        Собирает сетку 5x5 из байт дайджеста:
        - режем на тройки, неполный хвост отбрасываем (16 байт -> 5 троек)
        - каждую тройку [a, b, c] зеркалим в [a, b, c, b, a]
        - склеиваем построчно и нумеруем клетки 0..24 (row-major)
        """
        needed = GRID_SIZE * CHUNK_SIZE
        if len(image.hex) < needed:
            raise InvalidInputError(f"Для сетки нужно минимум {needed} байт, есть {len(image.hex)}")
        if any(not 0 <= v <= 255 for v in image.hex):
            raise InvalidInputError("Байты дайджеста должны быть в диапазоне 0..255")

        arr = np.asarray(image.hex[:needed], dtype=np.uint8)
        rows = arr.reshape(GRID_SIZE, CHUNK_SIZE)
        values: List[int] = []
        for row in rows.tolist():
            values.extend(self.mirror_row(row))

        grid = tuple(GridCell(value, index) for index, value in enumerate(values))
        return replace(image, grid=grid)

    def mirror_row(self, row: Sequence[int]) -> List[int]:
        """
        Дописывает первые два элемента строки в обратном порядке: [1, 2, 3] -> [1, 2, 3, 2, 1].
        """
        if len(row) < 2:
            raise InvalidInputError(f"Строка для отражения слишком короткая: {list(row)}")
        first, second = row[0], row[1]
        return [*row, second, first]

    def filter_odd_squares(self, image: ImageDescriptor) -> ImageDescriptor:
        """
        Оставляет только клетки с чётным значением; индексы и порядок не меняются.
        """
        if image.grid is None:
            raise InvalidInputError("Сетка не построена")
        grid = tuple(cell for cell in image.grid if cell.value % 2 == 0)
        logger.debug("Закрашиваемых клеток: %d из %d", len(grid), len(image.grid))
        return replace(image, grid=grid)
