"""HTTP слой Syllabus OCR (Flask)."""

from .app import create_app

__all__ = ["create_app"]
