"""
Пайплайн для домена Parsing.

Прогоняет статический каталог секций по тексту документа:
1. Section Locator (заголовки + границы / эвристика)
2. Post-фильтр секции (если задан и секция найдена)

ЦКП: ExtractionResult - ключ на каждую секцию каталога, значение str или None.
"""

from typing import List, Optional, Tuple

from loguru import logger

from contracts.d2_sections_dto import ExtractionResult, SectionSpec
from ..domain.interfaces import ISectionLocator, ISectionParsingPipeline
from ..sections.post_filters import get_filter
from ..sections.section_catalog import SectionCatalog
from ..sections.section_locator import SectionLocator


class SectionParsingPipeline(ISectionParsingPipeline):
    """
    Пайплайн домена Parsing.

    Без состояния между запросами: каталог передаётся при создании
    и дальше не меняется.
    """

    def __init__(self, catalog: SectionCatalog, locator: Optional[ISectionLocator] = None):
        """
        Args:
            catalog: Каталог секций (порядок = порядок ключей результата)
            locator: Section Locator (по умолчанию SectionLocator)
        """
        self.catalog = tuple(catalog)
        self.locator = locator or SectionLocator()

        # Фильтры резолвятся сразу: неизвестное имя - ошибка конфигурации, не запроса
        self._filters = {spec.name: get_filter(spec.filter) for spec in self.catalog if spec.filter}

        if isinstance(self.locator, SectionLocator):
            for spec in self.catalog:
                self.locator.precompile(spec)

        logger.info(f"[Parsing] SectionParsingPipeline инициализирован ({len(self.catalog)} секций)")

    def parse(self, text: str) -> ExtractionResult:
        pairs: List[Tuple[str, Optional[str]]] = []
        for spec in self.catalog:
            pairs.append((spec.name, self._extract_section(text, spec)))

        result = ExtractionResult.from_pairs(pairs)
        missing = [name for name in result.names() if result[name] is None]
        if missing:
            logger.warning(f"[Parsing] Секции не найдены: {missing}")
        logger.info(f"[Parsing] Найдено секций: {len(result.found_sections())}/{len(self.catalog)}")
        return result

    def _extract_section(self, text: str, spec: SectionSpec) -> Optional[str]:
        section_text = self.locator.locate_section(text, spec)
        if section_text is None:
            return None

        post_filter = self._filters.get(spec.name)
        if post_filter:
            section_text = post_filter(section_text)

        # После фильтра могло ничего не остаться - это "не найдено", а не ""
        section_text = section_text.strip()
        return section_text or None
