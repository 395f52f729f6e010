"""
Исключения для домена Extraction.

Ошибки получения текста из PDF: native extraction, растеризация, OCR.
"""

from typing import Optional


class ExtractionError(Exception):
    """Базовое исключение для ошибок домена Extraction."""

    def __init__(
        self,
        message: str,
        component: Optional[str] = None,
        original_error: Optional[Exception] = None
    ):
        self.message = message
        self.component = component
        self.original_error = original_error
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        msg = f"Extraction Error: {self.message}"
        if self.component:
            msg += f" (Component: {self.component})"
        if self.original_error:
            msg += f" [Original: {type(self.original_error).__name__}: {str(self.original_error)}]"
        return msg


class AcquisitionError(ExtractionError):
    """Не удалось получить текст документа (ни native, ни OCR)."""
    pass


class NativeExtractionError(AcquisitionError):
    """Ошибка чтения текстового слоя PDF."""
    pass


class RasterizationError(AcquisitionError):
    """Ошибка конвертации страницы PDF в изображение."""
    pass


class OCRProcessingError(AcquisitionError):
    """Ошибка распознавания текста на изображении."""
    pass


class ImageProcessingError(OCRProcessingError):
    """Ошибка preprocessing растра страницы."""
    pass


class ExtractionFileSystemError(ExtractionError):
    """Ошибка файловой системы в домене Extraction."""
    pass
