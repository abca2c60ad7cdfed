"""
Conventions — национальные конвенции числовых строк

Каждая конвенция — параметризация одного и того же сканера:
- US: разделитель '.', отрицательный знак — ведущий '-', затем пара "()"
- French: разделитель ',', отрицательный знак — ведущий '-'
- German: разделитель ',', отрицательный знак — завершающий '-'
"""

from dataclasses import dataclass

from numstr.core.domain.decimal_separator import DecimalSeparatorSpec
from numstr.core.domain.enums import NumSignSymbolPosition
from numstr.core.domain.negative_sign import NegNumSearchSpecCollection


@dataclass(frozen=True)
class NumStrConvention:
    """Параметры разбора для одной конвенции."""

    name: str
    decimal_separator: str
    # (позиция, ведущие символы, завершающие символы) в порядке проверки
    negative_patterns: tuple[tuple[NumSignSymbolPosition, str, str], ...]

    def decimal_separator_spec(self) -> DecimalSeparatorSpec:
        return DecimalSeparatorSpec.new(self.decimal_separator)

    def neg_num_specs(self) -> NegNumSearchSpecCollection:
        """Новая коллекция шаблонов отрицательного знака."""
        collection = NegNumSearchSpecCollection()
        for position, leading, trailing in self.negative_patterns:
            if position == NumSignSymbolPosition.BEFORE:
                collection.add_leading_neg_num_search_str(leading)
            elif position == NumSignSymbolPosition.AFTER:
                collection.add_trailing_neg_num_search_str(trailing)
            else:
                collection.add_leading_and_trailing_neg_num_search_str(leading, trailing)
        return collection


US_CONVENTION = NumStrConvention(
    name="US",
    decimal_separator=".",
    negative_patterns=(
        (NumSignSymbolPosition.BEFORE, "-", ""),
        (NumSignSymbolPosition.BEFORE_AND_AFTER, "(", ")"),
    ),
)

FRENCH_CONVENTION = NumStrConvention(
    name="French",
    decimal_separator=",",
    negative_patterns=((NumSignSymbolPosition.BEFORE, "-", ""),),
)

GERMAN_CONVENTION = NumStrConvention(
    name="German",
    decimal_separator=",",
    negative_patterns=((NumSignSymbolPosition.AFTER, "", "-"),),
)
