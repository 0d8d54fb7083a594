"""Точка входа: конвертер PPM `ppmrw 3|6 <infile> <outfile>`."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from ppmrw.controllers.convert_controller import ConvertController, describe
from ppmrw.models.errors import PPMError
from ppmrw.models.image_model import Variant

logger = logging.getLogger("ppmrw")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ppmrw",
        description="Читает изображение PPM (P3/P6) и записывает его в варианте P3 или P6.",
    )
    parser.add_argument("format", type=int, choices=[3, 6], help="Вариант результата: 3 (ASCII) или 6 (бинарный)")
    parser.add_argument("infile", type=str, help="Входной файл PPM")
    parser.add_argument("outfile", type=str, nargs="?", help="Выходной файл PPM")
    parser.add_argument("-i", "--info", action="store_true", help="Вывести заголовок входного файла и выйти")
    parser.add_argument("--show", action="store_true", help="Открыть декодированное изображение в системном просмотрщике")
    parser.add_argument("-v", "--verbose", action="store_true", help="Включить отладочное логирование")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Разбирает аргументы, выполняет конвертацию и возвращает код выхода."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(name)s: %(message)s",
    )

    if not args.info and args.outfile is None:
        parser.error("outfile обязателен, если не указан --info")

    controller = ConvertController()
    try:
        if args.info:
            image_data = controller.inspect(args.infile)
            print(describe(image_data))
        else:
            image_data = controller.convert(args.infile, args.outfile, Variant(args.format))
        if args.show:
            controller.show(image_data)
    except (PPMError, OSError) as exc:
        logger.error("%s: %s", args.infile, exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
