"""Конвейер генерации идентикона: сид -> MD5 -> сетка -> фильтр -> PNG.

Принципы:
- SRP: только оркестрация этапов, вычисления в отдельных сервисах.
- Без состояния: один экземпляр можно переиспользовать для любых сидов.
"""
from __future__ import annotations

from typing import Optional, Tuple, Union

from PIL import Image

from identicon.models.image_model import ImageDescriptor
from identicon.services.grid_service import GridService
from identicon.services.hash_service import HashService
from identicon.services.render_service import RenderService


class IdenticonService:
    def __init__(
        self,
        hash_service: Optional[HashService] = None,
        grid_service: Optional[GridService] = None,
        render_service: Optional[RenderService] = None,
    ) -> None:
        self._hash = hash_service or HashService()
        self._grid = grid_service or GridService()
        self._render = render_service or RenderService()

    def describe(self, seed: Union[str, bytes]) -> ImageDescriptor:
        """Прогоняет все этапы до карты пикселей включительно."""
        image = self._hash.hash_input(seed)
        image = self._hash.pick_color(image)
        image = self._grid.build_grid(image)
        image = self._grid.filter_odd_squares(image)
        return self._render.build_pixel_map(image)

    def render(self, seed: Union[str, bytes]) -> Tuple[ImageDescriptor, Image.Image]:
        """Возвращает итоговый дескриптор и нарисованный холст (для предпросмотра)."""
        image = self.describe(seed)
        return image, self._render.draw_image(image)

    def generate(self, seed: Union[str, bytes]) -> bytes:
        """Генерирует идентикон и возвращает PNG-байты.

        Raises:
            InvalidInputError: если сид не строка и не байты.
            EncodingError: если PNG не удалось закодировать.
        """
        _image, canvas = self.render(seed)
        return self._render.encode_png(canvas)


def generate(seed: Union[str, bytes]) -> bytes:
    """Короткая форма `IdenticonService().generate(seed)`."""
    return IdenticonService().generate(seed)
