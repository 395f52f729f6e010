"""
Инфраструктурный слой домена Extraction.

Содержит адаптеры для сторонних библиотек и менеджер временных файлов.
"""

from .adapters.pdfplumber_adapter import PdfPlumberTextExtractor
from .adapters.pdf2image_adapter import Pdf2ImageRasterizer
from .adapters.tesseract_adapter import TesseractOCRProvider
from .file_manager import ExtractionFileManager

__all__ = [
    # Адаптеры
    "PdfPlumberTextExtractor",
    "Pdf2ImageRasterizer",
    "TesseractOCRProvider",

    # Менеджеры
    "ExtractionFileManager",
]
