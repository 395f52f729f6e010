"""Общие fixtures для тестов."""

import pytest


@pytest.fixture
def pdf_document(tmp_path):
    """Fixture: временный "PDF" (содержимое не важно, адаптеры подменены)."""
    document = tmp_path / "syllabus.pdf"
    document.write_bytes(b"%PDF-1.4 fake")
    return document


@pytest.fixture
def work_dir(tmp_path):
    """Fixture: директория для растров страниц."""
    path = tmp_path / "work"
    path.mkdir()
    return path


SAMPLE_SYLLABUS = (
    "CS 341 Syllabus\n"
    "Instructor: Dr. Smith\n"
    "Homework: Late submissions incur a 10% penalty per day.\n"
    "Attendance: mandatory for labs\n"
    "Graded Work:\n"
    "Homework 40%\n"
    "Exams 60%\n"
    "Grading Scale: A=90-100, B=80-89\n"
    "Attendance: mandatory\n"
    "Course Policies\n"
    "Be kind.\n"
)


@pytest.fixture
def sample_syllabus_text():
    return SAMPLE_SYLLABUS
