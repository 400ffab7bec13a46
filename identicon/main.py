"""Точка входа: `identicon <сид>` пишет `images/<сид>.png`, без сида открывает окно."""
from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import Optional, Sequence

from identicon.log import setup_logging
from identicon.models.errors import IdenticonError
from identicon.services.identicon_service import IdenticonService
from identicon.services.image_service import DEFAULT_OUTPUT_DIR, ImageService

logger = logging.getLogger("identicon.main")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="identicon",
        description="Генератор идентиконов 250x250 по строке (MD5, сетка 5x5 с зеркальной симметрией).",
    )
    parser.add_argument("seed", nargs="?", help="Строка-сид; без неё открывается окно предпросмотра")
    parser.add_argument(
        "--out-dir",
        default=os.environ.get("IDENTICON_OUT_DIR", DEFAULT_OUTPUT_DIR),
        help="Каталог для PNG (по умолчанию $IDENTICON_OUT_DIR или images)",
    )
    parser.add_argument("--show", action="store_true", help="Открыть окно предпросмотра после сохранения")
    parser.add_argument("--verbose", "-v", action="store_true", help="Подробный лог (DEBUG)")
    return parser


def run_gui(seed: Optional[str], output_dir: Path) -> None:
    """Создаёт и запускает окно предпросмотра."""
    # Импорт здесь: без дисплея CLI должен работать и без Tk
    from identicon.app import IdenticonApp

    app = IdenticonApp(seed=seed, output_dir=output_dir)
    app.mainloop()


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING)
    output_dir = Path(args.out_dir)

    if args.seed is None:
        run_gui(None, output_dir)
        return 0

    try:
        data = IdenticonService().generate(args.seed)
        path = ImageService().save_image(data, args.seed, output_dir)
    except (IdenticonError, ValueError, OSError) as exc:
        logger.error("Не удалось создать идентикон для %r: %s", args.seed, exc)
        print(f"Ошибка: {exc}", file=sys.stderr)
        return 1

    # путь может содержать surrogateescape-символы из argv, печатаем с заменой
    print(os.fsencode(path).decode("utf-8", "replace"))
    if args.show:
        run_gui(args.seed, output_dir)
    return 0


if __name__ == "__main__":
    sys.exit(main())
