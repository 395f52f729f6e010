"""
Unit тесты для контракта D1 (Extraction).

ВАЖНО: Эти тесты проверяют КОНТРАКТ, не реальный OCR.
"""

from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

from contracts.d1_extraction_dto import PageImage, PageOCRResult


class TestPageOCRResult:
    """Тесты результата распознавания страницы."""

    @pytest.mark.parametrize("text, expected", [
        ("Grading Scale: A=90", True),
        ("", False),
        ("  \n\t", False),
    ])
    def test_has_content(self, text, expected):
        assert PageOCRResult(page_number=1, text=text).has_content() is expected

    def test_default_text_is_empty(self):
        assert PageOCRResult(page_number=3).text == ""


class TestPageImage:

    def test_is_frozen(self):
        """PageImage неизменяем."""
        image = PageImage(page_number=1, path=Path("page_1.png"))

        with pytest.raises(FrozenInstanceError):
            image.page_number = 2
