"""Тесты контейнера: системные зависимости OCR и WSGI точка входа."""

from pathlib import Path

import pytest

import api.app

DOCKERFILE = Path(__file__).parent.parent.parent / "Dockerfile"


@pytest.fixture(scope="module")
def dockerfile():
    return DOCKERFILE.read_text(encoding="utf-8")


@pytest.mark.parametrize("package", ["poppler-utils", "tesseract-ocr", "tesseract-ocr-eng"])
def test_ocr_binaries_installed(dockerfile, package):
    """Тест: образ ставит бинарники для pdf2image и pytesseract."""
    assert package in dockerfile.split()


def test_wsgi_target_exists(dockerfile):
    """Тест: gunicorn запускает существующую фабрику приложения."""
    cmd = next(line for line in dockerfile.splitlines() if line.startswith("CMD"))
    target = cmd.split()[-1].strip('"')

    module_name, factory_call = target.split(":")
    assert module_name == "api.app"
    assert factory_call == "create_app()"
    assert callable(getattr(api.app, "create_app"))
