"""
Flask приложение: POST /extract

Принимает multipart загрузку PDF (поле "file"), сохраняет во временный
файл и передаёт оркестратору. Удаление файла - ответственность оркестратора.

Ответ: плоский JSON {"Late Policy": str|null, "Grading Policy": ..., "Grading Weights": ...}
"""

import uuid
from pathlib import Path
from typing import Optional

from flask import Flask, jsonify, request
from loguru import logger
from werkzeug.utils import secure_filename

from config.settings import UPLOAD_DIR
from src.extraction.domain.exceptions import AcquisitionError
from src.pipeline import ExtractionOrchestrator


def _upload_path(upload_dir: Path, filename: str) -> Path:
    """Уникальное безопасное имя для загруженного файла."""
    safe_name = secure_filename(filename) or "document.pdf"
    return upload_dir / f"{uuid.uuid4().hex}_{safe_name}"


def create_app(
    orchestrator: Optional[ExtractionOrchestrator] = None,
    upload_dir: Optional[Path] = None
) -> Flask:
    """
    Создает Flask приложение.

    Args:
        orchestrator: Оркестратор (по умолчанию создаётся с настройками по умолчанию)
        upload_dir: Куда сохранять загрузки (по умолчанию UPLOAD_DIR)
    """
    app = Flask(__name__)
    # Порядок ключей ответа = порядок каталога
    app.json.sort_keys = False
    pipeline = orchestrator or ExtractionOrchestrator()
    uploads = Path(upload_dir) if upload_dir else UPLOAD_DIR

    @app.route("/health", methods=["GET"])
    def health():
        return jsonify({"status": "ok"})

    @app.route("/extract", methods=["POST"])
    def extract_pdf_sections():
        if "file" not in request.files:
            return jsonify({"error": "No file provided."}), 400
        file = request.files["file"]
        if not file.filename:
            return jsonify({"error": "No file selected."}), 400

        uploads.mkdir(parents=True, exist_ok=True)
        file_path = _upload_path(uploads, file.filename)
        file.save(str(file_path))
        logger.info(f"[API] Загружен файл: {file.filename} -> {file_path.name}")

        try:
            result = pipeline.extract(file_path)
        except AcquisitionError as e:
            logger.error(f"[API] Ошибка обработки PDF: {e}")
            return jsonify({"error": "Internal Server Error"}), 500

        return jsonify(result.to_dict())

    @app.errorhandler(500)
    def internal_error(e):
        logger.error(f"[API] Необработанная ошибка: {e}")
        return jsonify({"error": "Internal Server Error"}), 500

    return app
