"""
Number String Stats — статистика числового значения

Immutable Pydantic модель, описывающая состав цифр значения: общее и
значащее количество целых и дробных цифр, тип значения и знак.
"""

from pydantic import BaseModel, Field, model_validator

from numstr.core.domain.enums import NumericSignValue, NumericValueType


class NumberStrStatsDto(BaseModel):
    """
    Статистика числового значения.

    Значащие целые цифры не включают ведущие нули, значащие дробные цифры
    не включают завершающие нули.
    """

    num_of_integer_digits: int = Field(..., ge=0)
    num_of_significant_integer_digits: int = Field(..., ge=0)
    num_of_fractional_digits: int = Field(..., ge=0)
    num_of_significant_fractional_digits: int = Field(..., ge=0)
    number_value_type: NumericValueType
    number_sign: NumericSignValue
    is_zero_value: bool

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_consistency(self) -> "NumberStrStatsDto":
        """Значащих цифр не больше общего числа цифр, нулевое значение без знака."""
        if self.num_of_significant_integer_digits > self.num_of_integer_digits:
            raise ValueError(
                f"significant integer digits {self.num_of_significant_integer_digits} "
                f"exceed integer digits {self.num_of_integer_digits}"
            )
        if self.num_of_significant_fractional_digits > self.num_of_fractional_digits:
            raise ValueError(
                f"significant fractional digits {self.num_of_significant_fractional_digits} "
                f"exceed fractional digits {self.num_of_fractional_digits}"
            )
        if self.is_zero_value != (self.number_sign == NumericSignValue.ZERO):
            raise ValueError(
                f"is_zero_value={self.is_zero_value} inconsistent with "
                f"number_sign={self.number_sign.name}"
            )
        return self


def compute_digit_stats(
    integer_digits: str,
    fractional_digits: str,
    number_sign: NumericSignValue,
) -> NumberStrStatsDto:
    """
    Расчёт статистики по строкам целых и дробных цифр.

    Args:
        integer_digits: Целые цифры (только '0'-'9')
        fractional_digits: Дробные цифры (только '0'-'9')
        number_sign: Знак значения

    Returns:
        NumberStrStatsDto

    Examples:
        >>> compute_digit_stats("0012", "500", NumericSignValue.POSITIVE).num_of_significant_integer_digits
        2
    """
    significant_int = len(integer_digits.lstrip("0"))
    significant_frac = len(fractional_digits.rstrip("0"))

    if fractional_digits:
        value_type = NumericValueType.FLOATING_POINT
    elif integer_digits:
        value_type = NumericValueType.INTEGER
    else:
        value_type = NumericValueType.NONE

    is_zero = significant_int == 0 and significant_frac == 0
    if is_zero:
        number_sign = NumericSignValue.ZERO

    return NumberStrStatsDto(
        num_of_integer_digits=len(integer_digits),
        num_of_significant_integer_digits=significant_int,
        num_of_fractional_digits=len(fractional_digits),
        num_of_significant_fractional_digits=significant_frac,
        number_value_type=value_type,
        number_sign=number_sign,
        is_zero_value=is_zero,
    )
