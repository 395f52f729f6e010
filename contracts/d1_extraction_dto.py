"""
DTO контракт: D1 (Extraction), OCR-путь.

Растр страницы и результат распознавания одной страницы.
Сам результат D1 - обычная строка (AcquiredText): источник текста
(native или OCR) виден только в логах, в контракт не попадает.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class PageImage:
    """
    Временный растр одной страницы PDF.

    Живёт ровно до конца распознавания этой страницы.
    """
    page_number: int    # Номер страницы (с 1)
    path: Path          # Путь к файлу изображения


@dataclass(frozen=True)
class PageOCRResult:
    """Текст, распознанный на одной странице."""
    page_number: int
    text: str = ""

    def has_content(self) -> bool:
        return bool(self.text.strip())
