"""Контроллер приложения: оркестрация UI и сервисов.

SOLID:
- SRP: класс управляет связями между UI и сервисами (без логики генерации).
- DIP: зависит от сервисов как от ролей; конкретные реализации инкапсулированы.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import customtkinter as ctk

from identicon.models.errors import IdenticonError
from identicon.models.image_model import ImageDescriptor
from identicon.services.identicon_service import IdenticonService
from identicon.services.image_service import DEFAULT_OUTPUT_DIR, ImageService
from identicon.ui.image_viewer import ImageViewer
from identicon.ui.sidebar import Sidebar

logger = logging.getLogger("identicon.controller")


@dataclass
class AppController:
    """Связывает элементы UI с прикладной логикой.

    Ответственности:
    - Бинд событий (UI -> контроллер).
    - Генерация идентикона через `IdenticonService` и показ в `ImageViewer`.
    - Сохранение PNG через `ImageService`.
    """
    viewer: ImageViewer
    sidebar: Sidebar
    window: ctk.CTk
    output_dir: Path = Path(DEFAULT_OUTPUT_DIR)

    _identicon_service: IdenticonService = field(default_factory=IdenticonService)
    _image_service: ImageService = field(default_factory=ImageService)
    _current_seed: Optional[str] = None
    _current_image: Optional[ImageDescriptor] = None

    def bind_events(self) -> None:
        """Регистрирует обработчики событий между UI-компонентами."""
        self.sidebar.on_generate = self._handle_generate
        self.sidebar.on_save = self._handle_save

    def show_seed(self, seed: str) -> None:
        """Подставляет сид в поле ввода и сразу генерирует изображение."""
        self.sidebar.set_seed(seed)
        self._handle_generate()

    # ---- Handlers ----
    def _handle_generate(self) -> None:
        seed = self.sidebar.get_seed()
        try:
            image, canvas = self._identicon_service.render(seed)
        except IdenticonError as exc:
            logger.error("Генерация для %r не удалась: %s", seed, exc)
            self.sidebar.set_status(f"Ошибка: {exc}")
            return

        self._current_seed = seed
        self._current_image = image
        self.viewer.set_image(canvas)
        self.sidebar.set_image_info(image)
        self.sidebar.set_status("")
        self.window.title(f"Identicon: {seed}" if seed else "Identicon")

    def _handle_save(self) -> None:
        if self._current_seed is None:
            return
        try:
            data = self._identicon_service.generate(self._current_seed)
            path = self._image_service.save_image(data, self._current_seed, self.output_dir)
        except (IdenticonError, ValueError, OSError) as exc:
            logger.error("Сохранение %r не удалось: %s", self._current_seed, exc)
            self.sidebar.set_status(f"Ошибка сохранения: {exc}")
            return
        self.sidebar.set_status(f"Сохранено: {path}")
