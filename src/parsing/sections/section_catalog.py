"""
Загрузчик каталога секций из YAML.

Структура файла:
sections:
  - name: "Late Policy"
    headings: ["Homework:"]
    boundaries: [...]      # опционально
    filter: late_policy    # опционально

Использует Pydantic для валидации структуры. Каталог неизменяемый,
загружается один раз на путь и кешируется.
"""

from functools import lru_cache
from pathlib import Path
from typing import Optional, Tuple

import yaml
from loguru import logger
from pydantic import ValidationError

from config.settings import SECTIONS_CONFIG_PATH
from contracts.d2_sections_dto import SectionSpec
from ..domain.exceptions import SectionCatalogNotFoundError, SectionConfigurationError
from .post_filters import get_filter

SectionCatalog = Tuple[SectionSpec, ...]


class SectionCatalogLoader:
    """Загружает и валидирует каталог секций."""

    def __init__(self, config_path: Optional[Path] = None):
        """
        Args:
            config_path: Путь к YAML (по умолчанию config/sections.yaml)
        """
        self.config_path = Path(config_path) if config_path else SECTIONS_CONFIG_PATH

    def load(self) -> SectionCatalog:
        """
        Returns:
            Кортеж SectionSpec в порядке файла

        Raises:
            SectionCatalogNotFoundError: Если файл не найден
            SectionConfigurationError: Если каталог невалиден
        """
        if not self.config_path.exists():
            raise SectionCatalogNotFoundError(
                message=f"Каталог секций не найден: {self.config_path}",
                component="SectionCatalogLoader"
            )

        logger.debug(f"[SectionCatalogLoader] Загрузка каталога: {self.config_path}")

        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise SectionConfigurationError(
                message=f"Невалидный YAML: {self.config_path}",
                component="SectionCatalogLoader",
                original_error=e
            )

        return self.parse(data)

    def parse(self, data: dict) -> SectionCatalog:
        """Валидирует уже прочитанный YAML."""
        if not isinstance(data, dict) or not data.get("sections"):
            raise SectionConfigurationError(
                message=f"Раздел 'sections' обязателен в каталоге: {self.config_path}",
                component="SectionCatalogLoader"
            )

        try:
            catalog = tuple(SectionSpec(**entry) for entry in data["sections"])
        except (ValidationError, TypeError) as e:
            logger.error(f"[SectionCatalogLoader] Ошибки валидации каталога:\n{e}")
            raise SectionConfigurationError(
                message=f"Каталог секций невалиден: {self.config_path}",
                component="SectionCatalogLoader",
                original_error=e
            )

        names = [spec.name for spec in catalog]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise SectionConfigurationError(
                message=f"Повторяющиеся секции: {duplicates}",
                component="SectionCatalogLoader"
            )

        for spec in catalog:
            if spec.filter:
                get_filter(spec.filter)

        logger.info(f"[SectionCatalogLoader] Каталог загружен: {names}")
        return catalog


@lru_cache(maxsize=8)
def load_section_catalog(config_path: Optional[Path] = None) -> SectionCatalog:
    """Кешированная загрузка каталога (один раз на процесс и путь)."""
    return SectionCatalogLoader(config_path).load()
