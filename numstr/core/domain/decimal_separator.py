"""
Decimal Separator Spec — спецификация десятичного разделителя

Один или несколько символов, обозначающих разделитель целой и дробной
части для конкретной конвенции ("." для US, "," для French/German).
Неизменяемый объект; равенство — посимвольное, без нормализации.

Пустой разделитель или разделитель с цифрами отвергается с
MalformedNumberStringError при конструировании.
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from numstr.core.errors import MalformedNumberStringError


def _check_separator_chars(chars: str) -> None:
    if not chars:
        raise MalformedNumberStringError("decimal separator must contain at least one character")
    if any("0" <= ch <= "9" for ch in chars):
        raise MalformedNumberStringError(f"decimal separator must not contain digits, got '{chars}'")


class DecimalSeparatorSpec(BaseModel):
    """Десятичный разделитель (например, '.' или ',')"""

    separator_chars: str = Field(..., description="Символы десятичного разделителя")

    model_config = {"frozen": True}

    def __init__(self, **data: Any):
        chars = data.get("separator_chars")
        if isinstance(chars, str):
            _check_separator_chars(chars)
        super().__init__(**data)

    @field_validator("separator_chars")
    @classmethod
    def validate_separator_chars(cls, v: str) -> str:
        """Разделитель непустой и не содержит цифр (путь model_validate)."""
        _check_separator_chars(v)
        return v

    @classmethod
    def new(cls, chars: str) -> "DecimalSeparatorSpec":
        """Конструирование из строки символов разделителя."""
        return cls(separator_chars=chars)

    @classmethod
    def from_chars(cls, chars: list[str]) -> "DecimalSeparatorSpec":
        """Конструирование из списка символов."""
        return cls.new("".join(chars))

    def get_chars(self) -> list[str]:
        """Копия символов разделителя."""
        return list(self.separator_chars)

    def equal(self, other: "DecimalSeparatorSpec") -> bool:
        """
        Посимвольное сравнение (сначала длина, затем элементы).

        Точка никогда не равна запятой.
        """
        if not isinstance(other, DecimalSeparatorSpec):
            return False
        if len(self.separator_chars) != len(other.separator_chars):
            return False
        return all(a == b for a, b in zip(self.separator_chars, other.separator_chars))

    def matches_at(self, text: str, index: int) -> bool:
        """Начинается ли разделитель в позиции index строки text."""
        return text.startswith(self.separator_chars, index)

    def __len__(self) -> int:
        return len(self.separator_chars)

    def __str__(self) -> str:
        return self.separator_chars
