"""Pre-OCR: подготовка растра страницы перед Tesseract."""

from .page_preprocessor import PageImagePreprocessor, PagePreprocessResult

__all__ = ["PageImagePreprocessor", "PagePreprocessResult"]
