"""
Адаптер pdf2image (poppler), реализующий интерфейс IPageRasterizer (домен Extraction).

Рендерит ровно одну страницу за вызов, чтобы на диске
одновременно лежал не больше чем один растр.
"""

from pathlib import Path
from typing import Optional

from loguru import logger
from pdf2image import convert_from_path

from config.settings import OCR_DPI, OCR_PAGE_FORMAT
from contracts.d1_extraction_dto import PageImage
from ...domain.interfaces import IPageRasterizer
from ...domain.exceptions import RasterizationError


class Pdf2ImageRasterizer(IPageRasterizer):
    """Растеризация страницы PDF через pdf2image."""

    def __init__(self, dpi: Optional[int] = None, fmt: str = OCR_PAGE_FORMAT):
        """
        Args:
            dpi: Разрешение рендеринга (по умолчанию из settings)
            fmt: Формат файла изображения
        """
        self.dpi = dpi or OCR_DPI
        self.fmt = fmt

    def rasterize(self, document: Path, page_number: int, output_dir: Path) -> PageImage:
        """
        Конвертирует страницу page_number (с 1) в файл изображения.

        Raises:
            RasterizationError: Если poppler не смог отрендерить страницу
        """
        try:
            paths = convert_from_path(
                str(document),
                dpi=self.dpi,
                first_page=page_number,
                last_page=page_number,
                fmt=self.fmt,
                output_folder=str(output_dir),
                output_file=f"page_{page_number}",
                paths_only=True,
            )
        except Exception as e:
            raise RasterizationError(
                message=f"Не удалось растеризовать страницу {page_number}: {document}",
                component="Pdf2ImageRasterizer",
                original_error=e
            )

        if not paths:
            raise RasterizationError(
                message=f"pdf2image не вернул изображение для страницы {page_number}: {document}",
                component="Pdf2ImageRasterizer"
            )

        image_path = Path(paths[0])
        logger.debug(f"[Extraction] Страница {page_number} -> {image_path.name} ({self.dpi} dpi)")
        return PageImage(page_number=page_number, path=image_path)
