"""
Адаптеры домена Extraction.

Обёртки над сторонними библиотеками, реализующие интерфейсы домена.
"""

from .pdfplumber_adapter import PdfPlumberTextExtractor
from .pdf2image_adapter import Pdf2ImageRasterizer
from .tesseract_adapter import TesseractOCRProvider

__all__ = [
    "PdfPlumberTextExtractor",
    "Pdf2ImageRasterizer",
    "TesseractOCRProvider",
]
