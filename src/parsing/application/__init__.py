"""
Application слой домена Parsing.

Содержит фабрики и пайплайн секций.
"""

from .factory import ParsingComponentFactory
from .section_pipeline import SectionParsingPipeline

__all__ = [
    "ParsingComponentFactory",
    "SectionParsingPipeline",
]
