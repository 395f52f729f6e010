"""
Основной пайплайн: PDF силлабуса -> секции политик.

Объединяет два домена:
1. Extraction: текст документа (native или OCR)
2. Parsing: поиск секций по каталогу + post-фильтры

Владеет временным документом: удаляет его ровно один раз после обоих
этапов, и при успехе, и при ошибке.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from contracts.d2_sections_dto import ExtractionResult
from src.extraction.application.factory import ExtractionComponentFactory
from src.extraction.domain.exceptions import AcquisitionError
from src.extraction.domain.interfaces import ITextAcquisitionService
from src.extraction.infrastructure.file_manager import ExtractionFileManager
from src.parsing.application.factory import ParsingComponentFactory
from src.parsing.domain.interfaces import ISectionParsingPipeline


class ExtractionOrchestrator:
    """
    Оркестратор извлечения секций.

    Создаётся один раз на процесс, состояния запроса не хранит.
    """

    def __init__(
        self,
        text_acquisition: Optional[ITextAcquisitionService] = None,
        section_pipeline: Optional[ISectionParsingPipeline] = None,
        file_manager: Optional[ExtractionFileManager] = None
    ):
        self.text_acquisition = (
            text_acquisition or ExtractionComponentFactory.create_text_acquisition_service()
        )
        self.section_pipeline = (
            section_pipeline or ParsingComponentFactory.create_section_pipeline()
        )
        self.file_manager = file_manager or ExtractionFileManager()

        logger.info("[Pipeline] ExtractionOrchestrator инициализирован")

    def extract(self, document: Path, language_code: Optional[str] = None) -> ExtractionResult:
        """
        Извлекает секции из временного PDF и удаляет его.

        Args:
            document: Путь к временному PDF (файл переходит во владение оркестратора)
            language_code: Языковая модель OCR (опционально)

        Returns:
            ExtractionResult в порядке каталога

        Raises:
            AcquisitionError: Если текст документа получить не удалось
        """
        document = Path(document)
        logger.info(f"[Pipeline] Обработка: {document.name}")

        with self.file_manager.document_scope(document):
            try:
                text = self.text_acquisition.acquire(document, language_code)
            except AcquisitionError as e:
                logger.error(f"[Pipeline] Не удалось получить текст: {e}")
                raise

            result = self.extract_text(text)

        logger.info(f"[Pipeline] Готово: {document.name} ({len(result.found_sections())} секций)")
        return result

    def extract_text(self, text: str) -> ExtractionResult:
        """Только поиск секций, без получения текста."""
        return self.section_pipeline.parse(text)
