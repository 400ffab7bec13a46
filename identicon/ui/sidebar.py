"""Боковая панель: ввод сида, генерация, сохранение, информация об идентиконе.

Принципы:
- SRP: управляет только UI, не содержит алгоритмов.
- ISP: выдаёт значения через `get_*`, события через `on_*`.
"""
from __future__ import annotations

from typing import Callable, Optional

import customtkinter as ctk

from identicon.models.image_model import GRID_SIZE, Color, ImageDescriptor


def _rgb_to_hex(rgb: Color) -> str:
    """Преобразует RGB в HEX."""
    r, g, b = rgb
    return f"#{r:02X}{g:02X}{b:02X}"


class Sidebar(ctk.CTkFrame):
    """Панель инструментов с блоками: сид, информация, статус."""
    def __init__(self, master: ctk.CTk, **kwargs) -> None:
        super().__init__(master, width=280, **kwargs)

        self.grid_columnconfigure(0, weight=1)

        # Callbacks
        self.on_generate: Optional[Callable[[], None]] = None
        self.on_save: Optional[Callable[[], None]] = None

        # Seed
        self._title = ctk.CTkLabel(self, text="Сид", font=ctk.CTkFont(size=16, weight="bold"))
        self._title.grid(row=0, column=0, padx=8, pady=(8, 4), sticky="w")

        self._seed_val = ctk.StringVar(value="")
        self._seed_entry = ctk.CTkEntry(self, textvariable=self._seed_val, placeholder_text="например, pjw")
        self._seed_entry.grid(row=1, column=0, padx=8, pady=(0, 6), sticky="ew")
        self._seed_entry.bind("<Return>", lambda _e: self._emit_generate())

        self._generate_btn = ctk.CTkButton(self, text="Сгенерировать", command=self._emit_generate)
        self._generate_btn.grid(row=2, column=0, padx=8, pady=(0, 6), sticky="ew")

        self._save_btn = ctk.CTkButton(self, text="Сохранить PNG", command=self._emit_save, state="disabled")
        self._save_btn.grid(row=3, column=0, padx=8, pady=(0, 12), sticky="ew")

        # Info section
        self._info_title = ctk.CTkLabel(self, text="Информация", font=ctk.CTkFont(size=16, weight="bold"))
        self._info_title.grid(row=4, column=0, padx=8, pady=(8, 4), sticky="w")

        self._color_val = ctk.StringVar(value="—")
        self._digest_val = ctk.StringVar(value="—")
        self._cells_val = ctk.StringVar(value="—")

        self._info_color = ctk.CTkLabel(self, textvariable=self._color_val, anchor="w", justify="left")
        self._info_digest = ctk.CTkLabel(self, textvariable=self._digest_val, wraplength=250, anchor="w", justify="left")
        self._info_cells = ctk.CTkLabel(self, textvariable=self._cells_val, anchor="w", justify="left")

        self._info_color.grid(row=5, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._info_digest.grid(row=6, column=0, padx=8, pady=(0, 2), sticky="ew")
        self._info_cells.grid(row=7, column=0, padx=8, pady=(0, 10), sticky="ew")

        # filler
        self.grid_rowconfigure(99, weight=1)

        self._status_val = ctk.StringVar(value="")
        self._status = ctk.CTkLabel(self, textvariable=self._status_val, wraplength=250, anchor="w", justify="left")
        self._status.grid(row=100, column=0, padx=8, pady=(0, 8), sticky="ew")

    # public API (sync from controller)
    def get_seed(self) -> str:
        return self._seed_val.get()

    def set_seed(self, seed: str) -> None:
        self._seed_val.set(seed)

    def set_image_info(self, image: Optional[ImageDescriptor]) -> None:
        """Показывает цвет, дайджест и число закрашенных клеток (None сбрасывает)."""
        if image is None or image.color is None:
            self._color_val.set("—")
            self._digest_val.set("—")
            self._cells_val.set("—")
            self._save_btn.configure(state="disabled")
            return
        self._color_val.set(f"Цвет: {_rgb_to_hex(image.color)}  {image.color}")
        self._digest_val.set(f"MD5: {bytes(image.hex).hex()}")
        filled = len(image.pixel_map) if image.pixel_map is not None else 0
        self._cells_val.set(f"Клеток закрашено: {filled} из {GRID_SIZE * GRID_SIZE}")
        self._save_btn.configure(state="normal")

    def set_status(self, text: str) -> None:
        self._status_val.set(text)

    # events
    def _emit_generate(self) -> None:
        if self.on_generate:
            self.on_generate()

    def _emit_save(self) -> None:
        if self.on_save:
            self.on_save()
