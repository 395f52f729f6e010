"""
Интеграционные тесты оркестратора: документ -> текст -> секции.

Реальные SectionParsingPipeline и TextAcquisitionService, вместо
poppler/tesseract - fakes из tests/fakes.py.
"""

import pytest

from src.extraction.application.text_acquisition import TextAcquisitionService
from src.extraction.domain.exceptions import (
    AcquisitionError,
    ExtractionFileSystemError,
    OCRProcessingError,
)
from src.extraction.infrastructure.file_manager import ExtractionFileManager
from src.pipeline import ExtractionOrchestrator
from tests.fakes import (
    FakeNativeExtractor,
    FakeOCRProvider,
    FakeRasterizer,
    FakeTextAcquisition,
)


def make_orchestrator(native, ocr=None, work_dir=None):
    service = TextAcquisitionService(
        native_extractor=native,
        rasterizer=FakeRasterizer(),
        ocr_provider=ocr or FakeOCRProvider(),
        work_dir=work_dir,
    )
    return ExtractionOrchestrator(text_acquisition=service)


def test_native_syllabus(pdf_document, work_dir, sample_syllabus_text):
    """Тест: текстовый PDF -> все три секции, документ удалён."""
    orchestrator = make_orchestrator(FakeNativeExtractor(text=sample_syllabus_text), work_dir=work_dir)

    result = orchestrator.extract(pdf_document)

    assert result.to_dict() == {
        "Late Policy": "Late submissions incur a 10% penalty per day.",
        "Grading Policy": "A=90-100, B=80-89",
        "Grading Weights": "Homework 40%\nExams 60%",
    }
    assert not pdf_document.exists()


def test_scanned_syllabus_goes_through_ocr(pdf_document, work_dir):
    """Тест: скан (native пустой) -> OCR по страницам -> секции."""
    ocr = FakeOCRProvider(texts={
        1: "Homework: no late work accepted",
        2: "Grading Scale: A=90\nAttendance: required",
    })
    orchestrator = make_orchestrator(FakeNativeExtractor(text="", pages=2), ocr=ocr, work_dir=work_dir)

    result = orchestrator.extract(pdf_document)

    assert result["Late Policy"] == "no late work accepted"
    assert result["Grading Policy"] == "A=90"
    assert result["Grading Weights"] is None
    assert not pdf_document.exists()
    assert list(work_dir.iterdir()) == []


def test_no_sections_found(pdf_document, work_dir):
    """Тест: текст без заголовков -> все ключи None, не ошибка."""
    orchestrator = make_orchestrator(FakeNativeExtractor(text="Welcome to the course."), work_dir=work_dir)

    result = orchestrator.extract(pdf_document)

    assert result.to_dict() == {"Late Policy": None, "Grading Policy": None, "Grading Weights": None}


def test_document_deleted_on_failure(pdf_document, work_dir):
    """Тест: ошибка получения текста -> AcquisitionError, документ всё равно удалён."""
    ocr = FakeOCRProvider(fail_on_page=1)
    orchestrator = make_orchestrator(FakeNativeExtractor(text="", pages=2), ocr=ocr, work_dir=work_dir)

    with pytest.raises(AcquisitionError):
        orchestrator.extract(pdf_document)

    assert not pdf_document.exists()


def test_cleanup_failure_keeps_acquisition_error(pdf_document, monkeypatch):
    """Тест: документ не удалился - наружу всё равно уходит исходный AcquisitionError."""
    error = OCRProcessingError(message="tesseract недоступен", component="FakeOCRProvider")
    file_manager = ExtractionFileManager()

    def failing_remove(file_path):
        raise ExtractionFileSystemError(message=f"Не удалось удалить файл: {file_path}", component="test")

    monkeypatch.setattr(file_manager, "remove_file", failing_remove)
    orchestrator = ExtractionOrchestrator(
        text_acquisition=FakeTextAcquisition(error=error),
        file_manager=file_manager,
    )

    with pytest.raises(AcquisitionError) as exc_info:
        orchestrator.extract(pdf_document)

    assert exc_info.value is error


def test_document_exists_during_acquisition(pdf_document):
    """Тест: документ удаляется только после получения текста."""
    acquisition = FakeTextAcquisition(text="Grading Scale: A=90")
    orchestrator = ExtractionOrchestrator(text_acquisition=acquisition)

    orchestrator.extract(pdf_document)

    assert acquisition.document_existed == [True]
    assert not pdf_document.exists()


def test_acquisition_error_is_reraised_unchanged(pdf_document):
    error = OCRProcessingError(message="tesseract недоступен", component="FakeOCRProvider")
    orchestrator = ExtractionOrchestrator(text_acquisition=FakeTextAcquisition(error=error))

    with pytest.raises(AcquisitionError) as exc_info:
        orchestrator.extract(pdf_document)

    assert exc_info.value is error
    assert not pdf_document.exists()


def test_orchestrator_reusable(tmp_path, sample_syllabus_text):
    """Тест: один оркестратор обслуживает несколько документов подряд."""
    orchestrator = ExtractionOrchestrator(text_acquisition=FakeTextAcquisition(text=sample_syllabus_text))

    results = []
    for i in range(3):
        document = tmp_path / f"doc_{i}.pdf"
        document.write_bytes(b"%PDF-1.4")
        results.append(orchestrator.extract(document))

    assert results[0] == results[1] == results[2]
    assert list(tmp_path.glob("*.pdf")) == []


def test_extract_text_only(sample_syllabus_text):
    """Тест: extract_text не трогает файловую систему и OCR."""
    acquisition = FakeTextAcquisition()
    orchestrator = ExtractionOrchestrator(text_acquisition=acquisition)

    result = orchestrator.extract_text(sample_syllabus_text)

    assert result["Grading Policy"] == "A=90-100, B=80-89"
    assert acquisition.seen_documents == []
