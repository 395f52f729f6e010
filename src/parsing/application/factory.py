"""
Фабрика для создания компонентов домена Parsing.
"""

from pathlib import Path
from typing import Optional

from loguru import logger

from ..domain.interfaces import ISectionLocator, ISectionParsingPipeline
from ..sections.section_catalog import SectionCatalog, load_section_catalog
from ..sections.section_locator import SectionLocator
from .section_pipeline import SectionParsingPipeline


class ParsingComponentFactory:
    """Фабрика для создания компонентов домена Parsing."""

    @staticmethod
    def create_section_catalog(config_path: Optional[Path] = None) -> SectionCatalog:
        logger.debug("[Parsing] Загрузка каталога секций")
        return load_section_catalog(config_path)

    @staticmethod
    def create_section_locator() -> ISectionLocator:
        return SectionLocator()

    @staticmethod
    def create_section_pipeline(
        catalog: Optional[SectionCatalog] = None,
        locator: Optional[ISectionLocator] = None,
        config_path: Optional[Path] = None
    ) -> ISectionParsingPipeline:
        """
        Создает пайплайн parsing.

        Args:
            catalog: Готовый каталог (если не указан - загружается из YAML)
            locator: Section Locator (опционально)
            config_path: Путь к YAML каталога
        """
        if catalog is None:
            catalog = ParsingComponentFactory.create_section_catalog(config_path)

        if locator is None:
            locator = ParsingComponentFactory.create_section_locator()

        return SectionParsingPipeline(catalog=catalog, locator=locator)
