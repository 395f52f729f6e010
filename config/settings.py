"""
Настройки проекта Syllabus OCR.

Все значения можно переопределить через переменные окружения
(удобно для контейнера и тестов).
"""

import os
import sys
from pathlib import Path

from loguru import logger

# =============================================================================
# ПУТИ ПРОЕКТА
# =============================================================================
PROJECT_ROOT = Path(__file__).parent.parent

# Временные файлы: загруженные PDF и растры страниц для OCR
TMP_DIR = Path(os.getenv("SYLLABUS_TMP_DIR", str(PROJECT_ROOT / "tmp")))
UPLOAD_DIR = Path(os.getenv("SYLLABUS_UPLOAD_DIR", str(TMP_DIR / "uploads")))

# Каталог секций (заголовки, границы, фильтры)
SECTIONS_CONFIG_PATH = Path(
    os.getenv("SYLLABUS_SECTIONS_CONFIG", str(PROJECT_ROOT / "config" / "sections.yaml"))
)

# =============================================================================
# НАСТРОЙКИ NATIVE EXTRACTION
# =============================================================================
# Если pdfplumber вернул заголовок контейнера вместо текста - извлечение не удалось
NATIVE_TEXT_RAW_MARKER = "%PDF"

# =============================================================================
# НАСТРОЙКИ OCR (pdf2image + Tesseract)
# =============================================================================
# Языковая модель Tesseract
OCR_LANGUAGE = os.getenv("SYLLABUS_OCR_LANGUAGE", "eng")

# Разрешение растеризации страницы
OCR_DPI = int(os.getenv("SYLLABUS_OCR_DPI", "400"))

# Формат растра страницы
OCR_PAGE_FORMAT = "png"

# Дополнительные параметры Tesseract (например "--oem 3 --psm 4")
OCR_TESSERACT_CONFIG = os.getenv("SYLLABUS_OCR_TESSERACT_CONFIG", "")

# Preprocessing страницы перед OCR (grayscale + контраст + порог)
OCR_PREPROCESS = os.getenv("SYLLABUS_OCR_PREPROCESS", "1") not in ("0", "false", "False")
OCR_BINARY_THRESHOLD = 140  # Порог бинаризации [0-255]

# =============================================================================
# ЛОГИРОВАНИЕ
# =============================================================================
LOG_LEVEL = os.getenv("SYLLABUS_LOG_LEVEL", "INFO")


def configure_logging(level: str = None) -> None:
    """Перенастраивает loguru sink на stderr с нужным уровнем."""
    logger.remove()
    logger.add(sys.stderr, level=level or LOG_LEVEL)


# =============================================================================
# ПРОВЕРКА КОНФИГУРАЦИИ
# =============================================================================
def validate_config():
    """Проверяет корректность конфигурации."""
    errors = []

    if not SECTIONS_CONFIG_PATH.exists():
        errors.append(f"Каталог секций не найден: {SECTIONS_CONFIG_PATH}")

    if OCR_DPI <= 0:
        errors.append(f"SYLLABUS_OCR_DPI должен быть > 0, получено: {OCR_DPI}")

    if not OCR_LANGUAGE:
        errors.append("SYLLABUS_OCR_LANGUAGE не указан!")

    if errors:
        raise ValueError("\n".join(errors))

    # Создаём директории если не существуют
    TMP_DIR.mkdir(parents=True, exist_ok=True)
    UPLOAD_DIR.mkdir(parents=True, exist_ok=True)

    return True
