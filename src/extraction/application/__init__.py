"""
Application слой домена Extraction.

Содержит фабрики и сервисы для использования компонентов.
"""

from .factory import ExtractionComponentFactory
from .text_acquisition import TextAcquisitionService

__all__ = [
    "ExtractionComponentFactory",
    "TextAcquisitionService",
]
