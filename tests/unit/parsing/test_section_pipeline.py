import pytest

from contracts.d2_sections_dto import SectionSpec
from src.parsing.application.factory import ParsingComponentFactory
from src.parsing.application.section_pipeline import SectionParsingPipeline
from src.parsing.domain.exceptions import SectionConfigurationError


@pytest.fixture
def pipeline():
    """Fixture: пайплайн с каталогом по умолчанию."""
    return ParsingComponentFactory.create_section_pipeline()


def test_all_catalog_keys_in_order(pipeline):
    """Тест: каждая секция каталога ровно один раз, в порядке каталога."""
    result = pipeline.parse("no headings here")

    assert list(result.to_dict()) == ["Late Policy", "Grading Policy", "Grading Weights"]
    assert result.to_dict() == {"Late Policy": None, "Grading Policy": None, "Grading Weights": None}


def test_full_syllabus(pipeline, sample_syllabus_text):
    """Тест: все три секции из типичного силлабуса."""
    result = pipeline.parse(sample_syllabus_text)

    assert result["Late Policy"] == "Late submissions incur a 10% penalty per day."
    assert result["Grading Policy"] == "A=90-100, B=80-89"
    assert result["Grading Weights"] == "Homework 40%\nExams 60%"


def test_late_policy_filter_applied(pipeline):
    """Тест: в Late Policy остаются только строки про late/penalty."""
    text = (
        "Homework: Submit on Canvas by Friday.\n"
        "late work: 10% off per day\n"
        "no penalty for excused absences\n"
        "Exams\n"
    )

    result = pipeline.parse(text)

    assert result["Late Policy"] == "late work: 10% off per day\nno penalty for excused absences"


def test_filter_leaving_nothing_is_none(pipeline):
    """Тест: если фильтр убрал все строки - секция None, не пустая строка."""
    result = pipeline.parse("Homework: Submit on Canvas by Friday.\nExams: two")

    assert result["Late Policy"] is None


def test_section_runs_to_end_when_boundary_absent():
    """Тест: границы нет в тексте - секция идёт до конца текста."""
    catalog = (
        SectionSpec(name="Weights", headings=("Graded Work",), boundaries=("Grading Scale",)),
    )
    pipeline = SectionParsingPipeline(catalog)

    result = pipeline.parse("Graded Work:\nexams 60%\nhomework 40%")

    assert result["Weights"] == "exams 60%\nhomework 40%"


def test_empty_grading_weights_does_not_take_grading_scale(pipeline):
    """Тест: пустой "Graded Work:" перед "Grading Scale" - Grading Weights None, шкала не теряется."""
    text = "Graded Work:\nGrading Scale: A=90-100\nAttendance: mandatory"

    result = pipeline.parse(text)

    assert result["Grading Weights"] is None
    assert result["Grading Policy"] == "A=90-100"


def test_unknown_filter_fails_at_construction():
    """Тест: неизвестный фильтр - ошибка при создании пайплайна, не при запросе."""
    catalog = (SectionSpec(name="A", headings=("A:",), filter="missing"),)

    with pytest.raises(SectionConfigurationError):
        SectionParsingPipeline(catalog)


def test_pipeline_is_stateless(pipeline, sample_syllabus_text):
    """Тест: повторные вызовы не влияют друг на друга."""
    first = pipeline.parse(sample_syllabus_text)
    pipeline.parse("nothing")
    second = pipeline.parse(sample_syllabus_text)

    assert first == second
