"""
Интерфейсы (абстрактные классы) для домена Extraction.

Домен Extraction отвечает за:
1. Native extraction текстового слоя PDF
2. Растеризацию страниц и OCR (fallback для сканов)
3. Выбор между ними: на выходе всегда одна строка текста
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from contracts.d1_extraction_dto import PageImage


class INativeTextExtractor(ABC):
    """Интерфейс извлечения текстового слоя PDF (без рендеринга)."""

    @abstractmethod
    def extract_text(self, document: Path) -> str:
        """
        Извлекает текст всех страниц документа.

        Args:
            document: Путь к PDF

        Returns:
            Текст (может быть пустым для сканов)
        """
        pass

    @abstractmethod
    def page_count(self, document: Path) -> int:
        """Возвращает количество страниц по метаданным документа."""
        pass


class IPageRasterizer(ABC):
    """Интерфейс растеризации одной страницы PDF."""

    @abstractmethod
    def rasterize(self, document: Path, page_number: int, output_dir: Path) -> PageImage:
        """
        Конвертирует страницу в изображение.

        Args:
            document: Путь к PDF
            page_number: Номер страницы (с 1)
            output_dir: Куда положить временный растр

        Returns:
            PageImage с путём к файлу изображения
        """
        pass


class IOCRProvider(ABC):
    """Интерфейс для провайдеров OCR (домен Extraction)."""

    @abstractmethod
    def recognize(self, image_path: Path, language_code: Optional[str] = None) -> str:
        """
        Распознаёт текст из файла изображения.

        Args:
            image_path: Путь к файлу изображения
            language_code: Код языковой модели (eng, deu, ...)

        Returns:
            Распознанный текст
        """
        pass


class IImagePreprocessor(ABC):
    """Интерфейс для препроцессоров растра страницы."""

    @abstractmethod
    def process(self, image_path: Path) -> Path:
        """
        Обрабатывает изображение перед OCR (на месте).

        Returns:
            Путь к обработанному изображению
        """
        pass


class ITextAcquisitionService(ABC):
    """Интерфейс сервиса получения текста документа."""

    @abstractmethod
    def acquire(self, document: Path, language_code: Optional[str] = None) -> str:
        """
        Возвращает лучший доступный текст документа.

        Raises:
            AcquisitionError: Если текст получить не удалось
        """
        pass
