"""
Домен Extraction: получение текста из PDF.

Этот домен отвечает за:
1. Native extraction текстового слоя (pdfplumber)
2. OCR fallback для сканов (pdf2image + Tesseract)
3. Удаление временных растров страниц

Граница домена: строка текста (AcquiredText) или AcquisitionError
"""

from .application.factory import ExtractionComponentFactory
from .application.text_acquisition import TextAcquisitionService
from .domain.exceptions import AcquisitionError

__all__ = [
    "ExtractionComponentFactory",
    "TextAcquisitionService",
    "AcquisitionError",
]
