"""
DTO контракт: D2 (Parsing) -> API

SectionSpec - статическое описание секции из каталога.
ExtractionResult - итог извлечения: имя секции -> текст или None.

Все модели используют Pydantic v2.
"""

from typing import Any, Dict, List, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class SectionSpec(BaseModel):
    """
    Описание одной секции силлабуса.

    headings пробуются по порядку, первый матч выигрывает.
    boundaries - строки, с которых начинается следующая секция.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., min_length=1, description="Имя секции (ключ в ответе)")
    headings: Tuple[str, ...] = Field(..., min_length=1, description="Варианты заголовка")
    boundaries: Optional[Tuple[str, ...]] = Field(None, description="Границы секции")
    filter: Optional[str] = Field(None, description="Имя post-фильтра")

    @field_validator("headings")
    @classmethod
    def headings_not_blank(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        if any(not h.strip() for h in v):
            raise ValueError("Заголовок секции не может быть пустым")
        return v

    @field_validator("boundaries")
    @classmethod
    def boundaries_not_empty(cls, v: Optional[Tuple[str, ...]]) -> Optional[Tuple[str, ...]]:
        # Пустой список границ = границ нет
        if v is not None and len(v) == 0:
            return None
        if v is not None and any(not b.strip() for b in v):
            raise ValueError("Граница секции не может быть пустой")
        return v


class ExtractionResult(BaseModel):
    """
    Результат извлечения секций.

    Порядок ключей = порядок каталога. Значение - непустая обрезанная
    строка или None, пустая строка не допускается.

    Секции хранятся кортежем пар (имя, текст), поэтому результат нельзя
    изменить после валидации. На вход принимается и обычный dict.
    """

    model_config = ConfigDict(frozen=True)

    sections: Tuple[Tuple[str, Optional[str]], ...] = Field(default_factory=tuple)

    @field_validator("sections", mode="before")
    @classmethod
    def sections_as_pairs(cls, v: Any) -> Any:
        if isinstance(v, Mapping):
            return tuple(v.items())
        if isinstance(v, list):
            return tuple(dict(v).items())
        return v

    @model_validator(mode="after")
    def no_empty_strings(self) -> "ExtractionResult":
        for name, value in self.sections:
            if value is not None and (not value.strip() or value != value.strip()):
                raise ValueError(f"Секция '{name}': ожидалась непустая обрезанная строка или None")
        return self

    @classmethod
    def from_pairs(cls, pairs: List[Tuple[str, Optional[str]]]) -> "ExtractionResult":
        return cls(sections=dict(pairs))

    def __getitem__(self, name: str) -> Optional[str]:
        for section_name, value in self.sections:
            if section_name == name:
                return value
        raise KeyError(name)

    def __contains__(self, name: str) -> bool:
        return any(section_name == name for section_name, _ in self.sections)

    def names(self) -> List[str]:
        """Имена секций в порядке каталога."""
        return [name for name, _ in self.sections]

    def found_sections(self) -> List[str]:
        """Имена секций, для которых нашёлся текст."""
        return [name for name, value in self.sections if value is not None]

    def to_dict(self) -> Dict[str, Optional[str]]:
        """Плоский dict для JSON ответа (новая копия на каждый вызов)."""
        return dict(self.sections)
