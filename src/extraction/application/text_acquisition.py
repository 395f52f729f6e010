"""
Сервис получения текста документа (домен Extraction).

1. Native extraction текстового слоя (pdfplumber)
2. Если текста нет или вернулся сырой заголовок контейнера (%PDF) -
   OCR по всем страницам: растр -> (preprocessing) -> Tesseract -> удаление растра

ЦКП: одна строка текста (AcquiredText). Откуда она взялась, видно только в логах.
"""

from pathlib import Path
from typing import List, Optional

from loguru import logger

from config.settings import NATIVE_TEXT_RAW_MARKER, OCR_LANGUAGE, TMP_DIR
from contracts.d1_extraction_dto import PageOCRResult
from ..domain.interfaces import (
    INativeTextExtractor,
    IPageRasterizer,
    IOCRProvider,
    IImagePreprocessor,
    ITextAcquisitionService,
)
from ..domain.exceptions import AcquisitionError, NativeExtractionError
from ..infrastructure.file_manager import ExtractionFileManager


class TextAcquisitionService(ITextAcquisitionService):
    """
    Выбор между native extraction и OCR.

    Переход на OCR - штатный деградированный путь, не ошибка.
    Ошибка любого из путей (чтение, растеризация, распознавание) -
    AcquisitionError для всего запроса, частичный текст не возвращается.
    """

    def __init__(
        self,
        native_extractor: INativeTextExtractor,
        rasterizer: IPageRasterizer,
        ocr_provider: IOCRProvider,
        image_preprocessor: Optional[IImagePreprocessor] = None,
        file_manager: Optional[ExtractionFileManager] = None,
        language_code: Optional[str] = None,
        work_dir: Optional[Path] = None
    ):
        """
        Args:
            native_extractor: Извлечение текстового слоя + количество страниц
            rasterizer: Растеризация одной страницы
            ocr_provider: OCR провайдер
            image_preprocessor: Preprocessing растра (опционально)
            file_manager: Менеджер временных файлов
            language_code: Языковая модель OCR по умолчанию
            work_dir: Где создавать временные растры страниц
        """
        self.native_extractor = native_extractor
        self.rasterizer = rasterizer
        self.ocr_provider = ocr_provider
        self.image_preprocessor = image_preprocessor
        self.file_manager = file_manager or ExtractionFileManager()
        self.language_code = language_code or OCR_LANGUAGE
        self.work_dir = work_dir or TMP_DIR

        logger.info("[Extraction] TextAcquisitionService инициализирован")

    @staticmethod
    def needs_ocr(native_text: str) -> bool:
        """Native текст непригоден: пустой или это сырой заголовок PDF."""
        stripped = native_text.strip()
        return not stripped or stripped.startswith(NATIVE_TEXT_RAW_MARKER)

    def acquire(self, document: Path, language_code: Optional[str] = None) -> str:
        """
        Возвращает лучший доступный текст документа.

        Args:
            document: Путь к PDF
            language_code: Языковая модель OCR (по умолчанию из конструктора)

        Returns:
            Текст документа

        Raises:
            AcquisitionError: Если ни native, ни OCR не дали текста
        """
        if not document.exists():
            raise NativeExtractionError(
                message=f"Документ не найден: {document}",
                component="TextAcquisitionService"
            )

        try:
            logger.info(f"[Extraction] Получение текста: {document.name}")

            native_text = self.native_extractor.extract_text(document)
            if not self.needs_ocr(native_text):
                logger.info(f"[Extraction] Native текст: {len(native_text)} символов")
                return native_text

            logger.warning(
                f"[Extraction] Native текст непригоден ({len(native_text.strip())} символов), "
                f"переход на OCR: {document.name}"
            )
            ocr_text = self._extract_with_ocr(document, language_code or self.language_code)

            if not ocr_text.strip():
                raise AcquisitionError(
                    message=f"OCR не вернул текст: {document}",
                    component="TextAcquisitionService"
                )

            logger.info(f"[Extraction] OCR текст: {len(ocr_text)} символов")
            return ocr_text

        except AcquisitionError:
            raise
        except Exception as e:
            logger.error(f"[Extraction] Ошибка: {e}")
            raise AcquisitionError(
                message=f"Ошибка при получении текста: {document}",
                component="TextAcquisitionService",
                original_error=e
            )

    def _extract_with_ocr(self, document: Path, language_code: str) -> str:
        """OCR всех страниц по порядку, текст каждой страницы + перевод строки."""
        page_count = self.native_extractor.page_count(document)
        logger.info(f"[Extraction] OCR: {page_count} стр., язык '{language_code}'")

        work_dir = self.file_manager.create_work_dir(self.work_dir)
        pages: List[PageOCRResult] = []
        try:
            for page_number in range(1, page_count + 1):
                pages.append(self._recognize_page(document, page_number, work_dir, language_code))
        finally:
            self.file_manager.remove_dir(work_dir)

        empty = [p.page_number for p in pages if not p.has_content()]
        if empty:
            logger.debug(f"[Extraction] Страницы без текста: {empty}")

        return "".join(page.text + "\n" for page in pages)

    def _recognize_page(
        self,
        document: Path,
        page_number: int,
        work_dir: Path,
        language_code: str
    ) -> PageOCRResult:
        """Растр -> OCR -> удаление растра (до перехода к следующей странице)."""
        page_image = self.rasterizer.rasterize(document, page_number, work_dir)
        image_path = page_image.path
        try:
            if self.image_preprocessor:
                image_path = self.image_preprocessor.process(image_path)
            text = self.ocr_provider.recognize(image_path, language_code)
        finally:
            self.file_manager.remove_file(page_image.path)
            if image_path != page_image.path:
                self.file_manager.remove_file(image_path)

        logger.debug(f"[Extraction] Страница {page_number}: {len(text)} символов")
        return PageOCRResult(page_number=page_number, text=text)
