"""
Фабрика для создания компонентов домена Extraction.

Предоставляет удобные методы для создания и конфигурации
всех компонентов домена Extraction через единый интерфейс.
"""

from pathlib import Path
from typing import Optional
from loguru import logger

from config.settings import OCR_PREPROCESS
from ..domain.interfaces import (
    INativeTextExtractor,
    IPageRasterizer,
    IOCRProvider,
    IImagePreprocessor,
    ITextAcquisitionService,
)
from ..infrastructure.adapters.pdfplumber_adapter import PdfPlumberTextExtractor
from ..infrastructure.adapters.pdf2image_adapter import Pdf2ImageRasterizer
from ..infrastructure.adapters.tesseract_adapter import TesseractOCRProvider
from ..infrastructure.file_manager import ExtractionFileManager
from ..pre_ocr.page_preprocessor import PageImagePreprocessor
from .text_acquisition import TextAcquisitionService


class ExtractionComponentFactory:
    """
    Фабрика для создания компонентов домена Extraction.

    Домен Extraction отвечает за:
    - Native extraction текстового слоя PDF
    - Растеризацию страниц и OCR распознавание
    - Удаление временных растров
    """

    @staticmethod
    def create_native_extractor() -> INativeTextExtractor:
        logger.debug("[Extraction] Создание native extractor")
        return PdfPlumberTextExtractor()

    @staticmethod
    def create_rasterizer(dpi: Optional[int] = None) -> IPageRasterizer:
        logger.debug("[Extraction] Создание растеризатора")
        return Pdf2ImageRasterizer(dpi=dpi)

    @staticmethod
    def create_ocr_provider(language_code: Optional[str] = None) -> IOCRProvider:
        """
        Создает провайдер OCR для домена Extraction.

        Args:
            language_code: Языковая модель Tesseract

        Returns:
            Провайдер OCR, реализующий интерфейс IOCRProvider
        """
        logger.debug("[Extraction] Создание OCR провайдера")
        return TesseractOCRProvider(language_code)

    @staticmethod
    def create_image_preprocessor() -> IImagePreprocessor:
        logger.debug("[Extraction] Создание препроцессора растров")
        return PageImagePreprocessor()

    @staticmethod
    def create_file_manager() -> ExtractionFileManager:
        logger.debug("[Extraction] Создание менеджера файлов")
        return ExtractionFileManager()

    @staticmethod
    def create_text_acquisition_service(
        native_extractor: Optional[INativeTextExtractor] = None,
        rasterizer: Optional[IPageRasterizer] = None,
        ocr_provider: Optional[IOCRProvider] = None,
        image_preprocessor: Optional[IImagePreprocessor] = None,
        file_manager: Optional[ExtractionFileManager] = None,
        language_code: Optional[str] = None,
        work_dir: Optional[Path] = None,
        preprocess: bool = OCR_PREPROCESS
    ) -> ITextAcquisitionService:
        """
        Создает сервис получения текста.

        Недостающие компоненты создаются с настройками по умолчанию.
        """
        logger.debug("[Extraction] Создание TextAcquisitionService")

        if native_extractor is None:
            native_extractor = ExtractionComponentFactory.create_native_extractor()

        if rasterizer is None:
            rasterizer = ExtractionComponentFactory.create_rasterizer()

        if ocr_provider is None:
            ocr_provider = ExtractionComponentFactory.create_ocr_provider(language_code)

        if image_preprocessor is None and preprocess:
            image_preprocessor = ExtractionComponentFactory.create_image_preprocessor()

        if file_manager is None:
            file_manager = ExtractionComponentFactory.create_file_manager()

        return TextAcquisitionService(
            native_extractor=native_extractor,
            rasterizer=rasterizer,
            ocr_provider=ocr_provider,
            image_preprocessor=image_preprocessor,
            file_manager=file_manager,
            language_code=language_code,
            work_dir=work_dir
        )
