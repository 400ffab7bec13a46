from __future__ import annotations

from pathlib import Path
from typing import Optional

import customtkinter as ctk

from identicon.controllers.app_controller import AppController
from identicon.services.image_service import DEFAULT_OUTPUT_DIR
from identicon.ui.image_viewer import ImageViewer
from identicon.ui.sidebar import Sidebar


class IdenticonApp(ctk.CTk):
    def __init__(self, seed: Optional[str] = None, output_dir: Path = Path(DEFAULT_OUTPUT_DIR)) -> None:
        super().__init__()
        ctk.set_appearance_mode("system")
        ctk.set_default_color_theme("blue")

        self.title("Identicon")
        self.minsize(640, 420)

        # root layout: left viewer, right sidebar
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(0, weight=1)

        self._viewer = ImageViewer(self)
        self._viewer.grid(row=0, column=0, sticky="nsew", padx=(12, 6), pady=12)

        self._sidebar = Sidebar(self)
        self._sidebar.grid(row=0, column=1, sticky="ns", padx=(6, 12), pady=12)

        self._controller = AppController(viewer=self._viewer, sidebar=self._sidebar, window=self, output_dir=output_dir)
        self._controller.bind_events()
        if seed is not None:
            self._controller.show_seed(seed)
