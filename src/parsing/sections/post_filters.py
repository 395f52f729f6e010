"""
Post-фильтры секций.

Чистые функции str -> str, ищутся по имени из каталога секций.
Неизвестное имя - ошибка конфигурации, проверяется при загрузке каталога.
"""

from typing import Callable, Dict

from ..domain.exceptions import SectionConfigurationError

LATE_POLICY_KEYWORDS = ("late", "penalty")


def filter_late_policy(text: str) -> str:
    """Оставляет только строки, где упоминается 'late' или 'penalty' (без учёта регистра)."""
    lines = text.split("\n")
    kept = [line for line in lines if any(kw in line.lower() for kw in LATE_POLICY_KEYWORDS)]
    return "\n".join(kept)


POST_FILTERS: Dict[str, Callable[[str], str]] = {
    "late_policy": filter_late_policy,
}


def get_filter(name: str) -> Callable[[str], str]:
    """
    Raises:
        SectionConfigurationError: Если фильтр с таким именем не зарегистрирован
    """
    try:
        return POST_FILTERS[name]
    except KeyError:
        raise SectionConfigurationError(
            message=f"Неизвестный post-фильтр: '{name}'. Доступные: {sorted(POST_FILTERS)}",
            component="post_filters"
        )


def apply_filter(name: str, text: str) -> str:
    return get_filter(name)(text)
