"""Секции силлабуса: каталог, поиск, post-фильтры."""

from .section_catalog import SectionCatalog, SectionCatalogLoader, load_section_catalog
from .section_locator import SectionLocator, build_section_pattern
from .post_filters import POST_FILTERS, apply_filter, filter_late_policy, get_filter

__all__ = [
    "SectionCatalog",
    "SectionCatalogLoader",
    "load_section_catalog",
    "SectionLocator",
    "build_section_pattern",
    "POST_FILTERS",
    "apply_filter",
    "filter_late_policy",
    "get_filter",
]
