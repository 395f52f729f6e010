"""
Адаптер pdfplumber, реализующий интерфейс INativeTextExtractor (домен Extraction).

Читает текстовый слой PDF без рендеринга страниц.
Количество страниц для OCR-пути берётся отсюда же.
"""

from pathlib import Path

import pdfplumber
from loguru import logger

from ...domain.interfaces import INativeTextExtractor
from ...domain.exceptions import NativeExtractionError


class PdfPlumberTextExtractor(INativeTextExtractor):
    """Native extraction через pdfplumber."""

    def extract_text(self, document: Path) -> str:
        """
        Извлекает текст всех страниц, страницы разделены переводом строки.

        Raises:
            NativeExtractionError: Если PDF не удалось прочитать
        """
        try:
            with pdfplumber.open(document) as pdf:
                pages_text = [page.extract_text() or "" for page in pdf.pages]

            logger.debug(
                f"[Extraction] pdfplumber: {len(pages_text)} стр., "
                f"{sum(len(t) for t in pages_text)} символов"
            )
            return "\n".join(pages_text)

        except Exception as e:
            logger.error(f"[Extraction] Ошибка чтения PDF '{document}': {e}")
            raise NativeExtractionError(
                message=f"Не удалось прочитать текстовый слой: {document}",
                component="PdfPlumberTextExtractor",
                original_error=e
            )

    def page_count(self, document: Path) -> int:
        try:
            with pdfplumber.open(document) as pdf:
                return len(pdf.pages)
        except Exception as e:
            raise NativeExtractionError(
                message=f"Не удалось определить количество страниц: {document}",
                component="PdfPlumberTextExtractor",
                original_error=e
            )
