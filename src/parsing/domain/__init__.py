"""
Domain слой домена Parsing.

Содержит интерфейсы (абстрактные классы) и исключения для Parsing домена.
"""

from .interfaces import (
    ISectionLocator,
    ISectionParsingPipeline,
)

from .exceptions import (
    ParsingError,
    SectionConfigurationError,
    SectionCatalogNotFoundError,
)

__all__ = [
    # Интерфейсы
    "ISectionLocator",
    "ISectionParsingPipeline",

    # Исключения
    "ParsingError",
    "SectionConfigurationError",
    "SectionCatalogNotFoundError",
]
