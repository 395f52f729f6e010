"""
Интерфейсы (абстрактные классы) для домена Parsing.

Домен Parsing отвечает за:
1. Поиск секций по заголовкам и границам
2. Post-фильтры секций
3. Сборку ExtractionResult в порядке каталога
"""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from contracts.d2_sections_dto import ExtractionResult, SectionSpec


class ISectionLocator(ABC):
    """Интерфейс поиска одной секции в тексте (домен Parsing)."""

    @abstractmethod
    def locate(
        self,
        text: str,
        headings: Sequence[str],
        boundaries: Optional[Sequence[str]] = None
    ) -> Optional[str]:
        """
        Возвращает текст секции или None.

        Args:
            text: Полный текст документа
            headings: Варианты заголовка по приоритету
            boundaries: Границы секции (опционально)
        """
        pass

    @abstractmethod
    def locate_section(self, text: str, spec: SectionSpec) -> Optional[str]:
        """То же, что locate(), по описанию секции из каталога."""
        pass


class ISectionParsingPipeline(ABC):
    """Интерфейс пайплайна parsing (домен Parsing)."""

    @abstractmethod
    def parse(self, text: str) -> ExtractionResult:
        """
        Прогоняет весь каталог секций по тексту.

        Returns:
            ExtractionResult: ключ на каждую секцию каталога
        """
        pass
