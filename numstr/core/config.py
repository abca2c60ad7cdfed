"""
Config — параметры конверсии и сканирования по умолчанию

Конфигурации — неизменяемые dataclass'ы. Потребители принимают
`config: X | None = None` и используют `config or X()`.
"""

from dataclasses import dataclass, field
from typing import Final

from numstr.core.domain.enums import NumberRoundingType

# Количество дробных цифр при конверсии Fraction → строка по умолчанию
DEFAULT_BIG_RAT_FRACTIONAL_DIGITS: Final[int] = 20


@dataclass(frozen=True)
class ConversionConfig:
    """Параметры MathHelper."""

    # Политика округления, когда вызывающий код её не задал
    default_rounding_type: NumberRoundingType = NumberRoundingType.HALF_AWAY_FROM_ZERO

    # Точность Fraction → native number string
    big_rat_fractional_digits: int = DEFAULT_BIG_RAT_FRACTIONAL_DIGITS

    def __post_init__(self):
        if self.big_rat_fractional_digits < 0:
            raise ValueError(
                f"big_rat_fractional_digits must be >= 0, "
                f"got {self.big_rat_fractional_digits}"
            )


@dataclass(frozen=True)
class ScannerConfig:
    """Параметры сканера числовых строк по умолчанию."""

    # Подстроки, прекращающие разбор после первой найденной цифры
    parsing_terminators: tuple[str, ...] = field(default_factory=tuple)

    # Возвращать ли нераспознанный остаток строки
    request_remainder: bool = False

    def __post_init__(self):
        for terminator in self.parsing_terminators:
            if not terminator:
                raise ValueError("parsing_terminators must not contain empty strings")
