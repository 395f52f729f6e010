#!/usr/bin/env python3
"""
Точка входа: извлечение секций политик из PDF силлабуса.

Использование:
    # PDF (native текст или OCR)
    python scripts/extract_syllabus.py path/to/syllabus.pdf

    # Уже готовый текст (только поиск секций)
    python scripts/extract_syllabus.py --text path/to/syllabus.txt

    # Сохранить результат в JSON
    python scripts/extract_syllabus.py syllabus.pdf --output result.json

Исходный PDF не удаляется: оркестратор получает временную копию.
"""

import sys
import argparse
import json
import shutil
import tempfile
from pathlib import Path

# Добавляем корень проекта в путь
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config.settings import validate_config, configure_logging, TMP_DIR
from src.extraction.domain.exceptions import AcquisitionError
from src.pipeline import ExtractionOrchestrator


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Syllabus OCR: извлечение секций политик")
    parser.add_argument("path", help="Путь к PDF (или к .txt с флагом --text)")
    parser.add_argument("--text", action="store_true", help="Вход - текстовый файл, без OCR")
    parser.add_argument("--lang", default=None, help="Языковая модель Tesseract (по умолчанию eng)")
    parser.add_argument("--output", default=None, help="Сохранить результат в JSON файл")
    parser.add_argument("--log-level", default=None, help="Уровень логов (DEBUG, INFO, ...)")
    return parser


def run(args: argparse.Namespace, orchestrator: ExtractionOrchestrator) -> dict:
    """Запускает оркестратор и возвращает результат как dict."""
    source = Path(args.path)

    if args.text:
        text = source.read_text(encoding="utf-8")
        return orchestrator.extract_text(text).to_dict()

    # Оркестратор удаляет документ - отдаём ему копию
    TMP_DIR.mkdir(parents=True, exist_ok=True)
    with tempfile.NamedTemporaryFile(suffix=source.suffix, dir=str(TMP_DIR), delete=False) as tmp:
        document = Path(tmp.name)
    shutil.copyfile(source, document)

    return orchestrator.extract(document, language_code=args.lang).to_dict()


def main():
    """Главная функция CLI."""
    args = build_parser().parse_args()
    configure_logging(args.log_level)

    try:
        validate_config()
    except ValueError as e:
        print(f"[ERROR] {e}")
        sys.exit(1)

    source = Path(args.path)
    if not source.exists():
        print(f"[ERROR] Файл не найден: {source}")
        sys.exit(1)

    try:
        result = run(args, ExtractionOrchestrator())
    except AcquisitionError as e:
        print(f"[ERROR] Не удалось получить текст документа: {e}")
        sys.exit(1)

    output = json.dumps(result, ensure_ascii=False, indent=2)
    print(output)

    if args.output:
        Path(args.output).write_text(output, encoding="utf-8")
        print(f"[SAVED] Результат сохранен: {args.output}")


if __name__ == "__main__":
    main()
