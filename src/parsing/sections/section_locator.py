"""
Section Locator: поиск секции по заголовку и границам.

Паттерн: <заголовок> <разделители : или \\n> <тело>, где тело заканчивается:
- на строке, начинающейся с одной из границ (если границы заданы),
- иначе на следующей строке вида "Слово с заглавной" (эвристика "следующий заголовок"),
- или в конце текста.

Заголовки и границы ищутся без учёта регистра, эвристика - с учётом.
Паттерны строятся один раз на набор (заголовок, границы, эвристика) и кешируются.
"""

import re
from functools import lru_cache
from typing import Optional, Pattern, Sequence, Tuple

from loguru import logger

from contracts.d2_sections_dto import SectionSpec
from ..domain.interfaces import ISectionLocator

# Следующая строка начинается со слова с заглавной буквы
DEFAULT_BOUNDARY = r"\n[A-Z][a-z]"

# Разделитель между заголовком и телом
SEPARATOR = r"\s*[:\n]+\s*"


def _heading_literal(heading: str) -> str:
    """
    Экранирует заголовок.

    Двоеточие в конце заголовка ("Homework:") входит в разделитель,
    иначе "Homework: текст" не матчится, т.к. после него нужен ещё один ':' или '\\n'.
    """
    return re.escape(heading.strip().rstrip(":").rstrip())


def _boundary_literal(boundary: str) -> str:
    """
    Граница - начало строки.

    Проверяется через lookbehind: перевод строки перед границей мог уже
    уйти в разделитель, если граница стоит сразу под заголовком.
    """
    return rf"(?<=\n)(?i:{re.escape(boundary)})"


@lru_cache(maxsize=256)
def build_section_pattern(
    heading: str,
    boundaries: Optional[Tuple[str, ...]] = None,
    heuristic: bool = False
) -> Pattern:
    """
    Компилирует паттерн секции.

    Args:
        heading: Заголовок секции (литерал)
        boundaries: Границы секции
        heuristic: Добавить эвристику "следующий заголовок" (без границ - всегда)

    Returns:
        Скомпилированный паттерн, группа 1 = тело секции
    """
    ends = [_boundary_literal(b) for b in boundaries or ()]
    if heuristic or not ends:
        ends.append(DEFAULT_BOUNDARY)

    pattern = rf"(?i:{_heading_literal(heading)}){SEPARATOR}(.*?)(?={'|'.join(ends)}|\Z)"
    return re.compile(pattern, re.DOTALL)


def match_section(
    text: str,
    heading: str,
    boundaries: Optional[Tuple[str, ...]] = None,
    heuristic: bool = False
) -> Optional[str]:
    """Первое вхождение заголовка -> обрезанное тело или None (пустое тело = нет секции)."""
    match = build_section_pattern(heading, boundaries, heuristic).search(text)
    if not match:
        return None
    body = match.group(1).strip()
    return body or None


class SectionLocator(ISectionLocator):
    """
    Поиск секции по списку вариантов заголовка.

    Порядок:
    1. Если есть границы - все заголовки по очереди с границами
    2. Если ни один не сработал (или границ нет) - все заголовки с эвристикой
    Первый непустой результат выигрывает.

    Границы действуют и во втором проходе: строка границы и всё после неё
    в секцию не попадают никогда.
    """

    def precompile(self, spec: SectionSpec) -> None:
        """Строит паттерны секции заранее (каталог статичен)."""
        for heading in spec.headings:
            if spec.boundaries:
                build_section_pattern(heading, spec.boundaries, False)
            build_section_pattern(heading, spec.boundaries, True)

    def locate(
        self,
        text: str,
        headings: Sequence[str],
        boundaries: Optional[Sequence[str]] = None
    ) -> Optional[str]:
        if not text or not headings:
            return None

        bounds = tuple(boundaries) if boundaries else None

        if bounds:
            for heading in headings:
                body = match_section(text, heading, bounds, False)
                if body is not None:
                    logger.debug(f"[Parsing] '{heading}' найден (границы: {list(bounds)})")
                    return body
            logger.debug(f"[Parsing] Заголовки {list(headings)} не найдены с границами, пробуем эвристику")

        for heading in headings:
            body = match_section(text, heading, bounds, True)
            if body is not None:
                logger.debug(f"[Parsing] '{heading}' найден (эвристика)")
                return body

        return None

    def locate_section(self, text: str, spec: SectionSpec) -> Optional[str]:
        return self.locate(text, spec.headings, spec.boundaries)
