"""
Domain слой домена Extraction.

Содержит интерфейсы (абстрактные классы) и исключения для Extraction домена.
"""

from .interfaces import (
    INativeTextExtractor,
    IPageRasterizer,
    IOCRProvider,
    IImagePreprocessor,
    ITextAcquisitionService,
)

from .exceptions import (
    ExtractionError,
    AcquisitionError,
    NativeExtractionError,
    RasterizationError,
    OCRProcessingError,
    ImageProcessingError,
    ExtractionFileSystemError,
)

__all__ = [
    # Интерфейсы
    "INativeTextExtractor",
    "IPageRasterizer",
    "IOCRProvider",
    "IImagePreprocessor",
    "ITextAcquisitionService",

    # Исключения
    "ExtractionError",
    "AcquisitionError",
    "NativeExtractionError",
    "RasterizationError",
    "OCRProcessingError",
    "ImageProcessingError",
    "ExtractionFileSystemError",
]
