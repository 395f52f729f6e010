import pytest

from src.parsing.domain.exceptions import SectionConfigurationError
from src.parsing.sections.post_filters import apply_filter, filter_late_policy, get_filter


LATE_TEXT = (
    "Submit via Canvas.\n"
    "Late submissions lose 10% per day.\n"
    "Collaboration is allowed.\n"
    "A PENALTY applies after 3 days.\n"
    "Plates of food are not allowed in lab."
)


def test_keeps_only_late_or_penalty_lines():
    """Тест: остаются строки с 'late' / 'penalty' в исходном порядке."""
    result = filter_late_policy(LATE_TEXT)

    assert result.split("\n") == [
        "Late submissions lose 10% per day.",
        "A PENALTY applies after 3 days.",
        "Plates of food are not allowed in lab.",  # 'late' как подстрока
    ]


def test_output_lines_come_from_input():
    """Тест: каждая строка результата есть во входе и содержит ключевое слово."""
    result = filter_late_policy(LATE_TEXT)
    input_lines = LATE_TEXT.split("\n")

    for line in result.split("\n"):
        assert line in input_lines
        assert "late" in line.lower() or "penalty" in line.lower()


@pytest.mark.parametrize("text", [LATE_TEXT, "", "nothing relevant", "late\n\npenalty\n", "Late\r\nok\r\n"])
def test_filter_is_idempotent(text):
    """Тест: повторное применение фильтра ничего не меняет."""
    once = filter_late_policy(text)

    assert filter_late_policy(once) == once


def test_no_matching_lines():
    assert filter_late_policy("Submit via Canvas.\nBe on time.") == ""


def test_filter_lookup_by_name():
    """Тест: фильтр ищется по имени из каталога."""
    assert get_filter("late_policy") is filter_late_policy
    assert apply_filter("late_policy", "late\nearly") == "late"


def test_unknown_filter_is_configuration_error():
    """Тест: неизвестное имя фильтра -> SectionConfigurationError."""
    with pytest.raises(SectionConfigurationError, match="Неизвестный post-фильтр"):
        get_filter("early_policy")
