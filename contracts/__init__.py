"""
Контракты DTO между доменами проекта Syllabus OCR.

Контракты:
- D1 (OCR-путь): PageImage, PageOCRResult (d1_extraction_dto.py)
- D2 -> API: SectionSpec, ExtractionResult (d2_sections_dto.py)
"""

# D1 (Extraction)
from .d1_extraction_dto import PageImage, PageOCRResult

# D2 (Parsing) -> API
from .d2_sections_dto import SectionSpec, ExtractionResult

__all__ = [
    # D1
    "PageImage",
    "PageOCRResult",
    # D2 -> API
    "SectionSpec",
    "ExtractionResult",
]
