"""
Page Preprocessor для OCR-пути.

Подготовка растра страницы перед Tesseract:
- Grayscale: OCR работает с яркостью, не с цветом
- Растяжение контраста: бледный скан -> полный диапазон [0, 255]
- Бинаризация по порогу: убирает фон и шум бумаги

Растр перезаписывается на месте, чтобы на диске оставался один файл на страницу.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import cv2
import numpy as np
from loguru import logger

from config.settings import OCR_BINARY_THRESHOLD
from ..domain.interfaces import IImagePreprocessor
from ..domain.exceptions import ImageProcessingError


@dataclass
class PagePreprocessResult:
    """Результат обработки растра страницы."""

    image: np.ndarray
    original_channels: int  # 1, 3 или 4
    original_size: tuple[int, int]  # (width, height)


class PageImagePreprocessor(IImagePreprocessor):
    """
    Grayscale + контраст + бинаризация растра страницы.
    """

    def __init__(self, threshold: Optional[int] = None):
        """
        Args:
            threshold: Порог бинаризации [0-255] (по умолчанию из settings)
        """
        self.threshold = OCR_BINARY_THRESHOLD if threshold is None else threshold
        if not 0 <= self.threshold <= 255:
            raise ValueError(f"Порог бинаризации вне диапазона [0, 255]: {self.threshold}")

    def process(self, image_path: Path) -> Path:
        """
        Обрабатывает файл изображения на месте.

        Raises:
            ImageProcessingError: Если файл не читается или не записывается
        """
        if not image_path.exists():
            raise ImageProcessingError(
                message=f"Изображение не найдено: {image_path}",
                component="PageImagePreprocessor"
            )

        raw_bytes = image_path.read_bytes()
        image = cv2.imdecode(np.frombuffer(raw_bytes, np.uint8), cv2.IMREAD_UNCHANGED)
        if image is None:
            raise ImageProcessingError(
                message=f"Ошибка декодирования изображения: {image_path}",
                component="PageImagePreprocessor"
            )

        result = self.transform(image)

        ok, encoded = cv2.imencode(image_path.suffix or ".png", result.image)
        if not ok:
            raise ImageProcessingError(
                message=f"Ошибка кодирования изображения: {image_path}",
                component="PageImagePreprocessor"
            )
        image_path.write_bytes(encoded.tobytes())

        w, h = result.original_size
        logger.debug(
            f"[Extraction] Растр обработан: {image_path.name} "
            f"({w}x{h}, {result.original_channels} -> 1 канал)"
        )
        return image_path

    def transform(self, image: np.ndarray) -> PagePreprocessResult:
        """Чистое преобразование: изображение -> бинарное изображение."""
        h, w = image.shape[:2]
        channels = 1 if image.ndim == 2 else image.shape[2]

        if channels == 4:
            gray = cv2.cvtColor(image, cv2.COLOR_BGRA2GRAY)
        elif channels == 3:
            gray = cv2.cvtColor(image, cv2.COLOR_BGR2GRAY)
        else:
            gray = image

        # Однотонная страница: растягивать нечего
        if gray.dtype == np.uint8 and int(gray.min()) == int(gray.max()):
            stretched = gray
        else:
            stretched = cv2.normalize(gray, None, 0, 255, cv2.NORM_MINMAX, dtype=cv2.CV_8U)
        _, binary = cv2.threshold(stretched, self.threshold, 255, cv2.THRESH_BINARY)

        return PagePreprocessResult(
            image=binary,
            original_channels=channels,
            original_size=(w, h),
        )
