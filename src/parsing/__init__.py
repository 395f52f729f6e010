"""
Домен Parsing (D2): поиск секций в тексте силлабуса.

- Каталог секций (config/sections.yaml)
- Section Locator: заголовок + границы / эвристика следующего заголовка
- Post-фильтры (late_policy)

Вход: текст документа (от D1)
Выход: contracts.ExtractionResult
"""

from src.parsing.application.factory import ParsingComponentFactory
from src.parsing.application.section_pipeline import SectionParsingPipeline
from src.parsing.sections.section_locator import SectionLocator
from src.parsing.sections.section_catalog import SectionCatalogLoader, load_section_catalog

__all__ = [
    "ParsingComponentFactory",
    "SectionParsingPipeline",
    "SectionLocator",
    "SectionCatalogLoader",
    "load_section_catalog",
]
