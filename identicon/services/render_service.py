from __future__ import annotations

import io
import logging
from dataclasses import replace

import numpy as np
from PIL import Image

from identicon.models.errors import EncodingError, InvalidInputError
from identicon.models.image_model import (
    BACKGROUND_COLOR,
    CANVAS_SIZE,
    CELL_SIZE,
    GRID_SIZE,
    ImageDescriptor,
)

logger = logging.getLogger("identicon.render")


class RenderService:
    def build_pixel_map(self, image: ImageDescriptor) -> ImageDescriptor:
        """
        Переводит индекс клетки в прямоугольник 50x50:
        column = index % 5, row = index // 5, top_left = (column*50, row*50).
        """
        if image.grid is None:
            raise InvalidInputError("Сетка не построена")
        pixel_map = []
        for _value, index in image.grid:
            if not 0 <= index < GRID_SIZE * GRID_SIZE:
                raise InvalidInputError(f"Индекс клетки вне сетки: {index}")
            row, column = divmod(index, GRID_SIZE)
            horizontal = column * CELL_SIZE
            vertical = row * CELL_SIZE
            top_left = (horizontal, vertical)
            bottom_right = (horizontal + CELL_SIZE, vertical + CELL_SIZE)
            pixel_map.append((top_left, bottom_right))
        return replace(image, pixel_map=tuple(pixel_map))

    def draw_image(self, image: ImageDescriptor) -> Image.Image:
        """
        Рисует холст 250x250 (RGB): фон BACKGROUND_COLOR, каждый прямоугольник
        [top_left, bottom_right) заливается цветом идентикона.
        """
        if image.color is None:
            raise InvalidInputError("Цвет не выбран")
        if image.pixel_map is None:
            raise InvalidInputError("Карта пикселей не построена")

        canvas = np.empty((CANVAS_SIZE, CANVAS_SIZE, 3), dtype=np.uint8)
        canvas[:, :] = BACKGROUND_COLOR
        fill = np.asarray(image.color, dtype=np.uint8)
        for (x0, y0), (x1, y1) in image.pixel_map:
            # numpy: сначала строки (y), потом столбцы (x)
            canvas[y0:y1, x0:x1] = fill
        return Image.fromarray(canvas)

    def encode_png(self, canvas: Image.Image) -> bytes:
        """
        Кодирует холст в PNG. Ошибки кодировщика оборачиваются в `EncodingError`.
        """
        buffer = io.BytesIO()
        try:
            canvas.save(buffer, format="PNG")
        except (OSError, ValueError, KeyError) as exc:
            raise EncodingError(f"Не удалось закодировать изображение в PNG: {exc}") from exc
        data = buffer.getvalue()
        logger.debug("PNG: %d байт", len(data))
        return data
