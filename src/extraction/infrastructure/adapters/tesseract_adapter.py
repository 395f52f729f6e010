"""
Адаптер Tesseract (pytesseract), реализующий интерфейс IOCRProvider (домен Extraction).
"""

from pathlib import Path
from typing import Optional

import pytesseract
from loguru import logger
from PIL import Image

from config.settings import OCR_LANGUAGE, OCR_TESSERACT_CONFIG
from ...domain.interfaces import IOCRProvider
from ...domain.exceptions import OCRProcessingError


class TesseractOCRProvider(IOCRProvider):
    """
    OCR через локальный Tesseract.

    Язык по умолчанию - английская модель (eng), можно передать
    другой код на каждый вызов.
    """

    def __init__(self, language_code: Optional[str] = None, config: Optional[str] = None):
        self.language_code = language_code or OCR_LANGUAGE
        self.config = OCR_TESSERACT_CONFIG if config is None else config

    def recognize(self, image_path: Path, language_code: Optional[str] = None) -> str:
        """
        Распознаёт текст из файла изображения.

        Raises:
            OCRProcessingError: Если Tesseract недоступен или упал
        """
        lang = language_code or self.language_code
        try:
            with Image.open(image_path) as image:
                text = pytesseract.image_to_string(image, lang=lang, config=self.config)
        except Exception as e:
            raise OCRProcessingError(
                message=f"Ошибка при распознавании файла: {image_path}",
                component="TesseractOCRProvider",
                original_error=e
            )

        logger.debug(f"[Extraction] Tesseract ({lang}): {image_path.name}, {len(text)} символов")
        return text
