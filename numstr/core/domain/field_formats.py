"""
Field Formats — DTO числовых значений для текстовых полей

- BigFloatDto: Decimal произвольной точности с исходной строкой
- FloatFieldFormat: float64 значение с параметрами текстового поля
- BigFloatFieldFormat: Decimal значение с параметрами текстового поля

Поле: left_margin + значение (округлённое, выровненное в field_length) +
right_margin. field_length = -1 — ширина поля равна длине значения.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from enum import Enum

from pydantic import BaseModel, Field, field_validator

from numstr.core.domain.enums import NumberRoundingType
from numstr.core.domain.number_str_kernel import NumberStrKernel
from numstr.core.math.native_num_str import (
    decimal_to_native_num_str,
    float_to_native_num_str,
    split_native_num_str,
)


# =============================================================================
# ENUMS
# =============================================================================


class TextJustify(str, Enum):
    """Выравнивание текста в поле"""

    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


# =============================================================================
# BIG FLOAT DTO
# =============================================================================


class BigFloatDto(BaseModel):
    """Decimal значение произвольной точности."""

    value: Decimal = Field(..., description="Значение")
    num_str: str = Field(default="", description="Исходная строка, из которой получено значение")

    model_config = {"frozen": True}

    @field_validator("value")
    @classmethod
    def validate_finite(cls, v: Decimal) -> Decimal:
        if not v.is_finite():
            raise ValueError(f"value must be finite, got {v}")
        return v

    def fmt_num_str_native(self) -> str:
        return decimal_to_native_num_str(self.value)


# =============================================================================
# TEXT FIELD FORMATS
# =============================================================================


class _NumericFieldFormat(BaseModel, ABC):
    """Общие параметры текстового поля числа."""

    left_margin_str: str = ""
    rounding_type: NumberRoundingType = NumberRoundingType.HALF_AWAY_FROM_ZERO
    num_of_fractional_digits: int = Field(default=-1, ge=-1, description="-1: без округления")
    field_length: int = Field(default=-1, ge=-1, description="-1: по длине значения")
    field_justify: TextJustify = TextJustify.RIGHT
    right_margin_str: str = ""

    model_config = {"frozen": True}

    @abstractmethod
    def _raw_native_num_str(self) -> str:
        """Значение поля как Native Number String без округления."""

    def fmt_num_str_native(self) -> str:
        """
        Значение как Native Number String после округления.

        При num_of_fractional_digits = -1 значение не округляется.
        """
        native = self._raw_native_num_str()
        if self.num_of_fractional_digits < 0 or self.rounding_type == NumberRoundingType.NO_ROUNDING:
            return native

        int_part, frac_part, sign = split_native_num_str(native)
        kernel = NumberStrKernel.from_string_digits(int_part, frac_part, sign)
        kernel.round(self.rounding_type, self.num_of_fractional_digits)
        return kernel.to_native_num_str()

    def get_formatted_text_field_str(self) -> str:
        """
        Текстовое поле: левый отступ, выровненное значение, правый отступ.

        Examples:
            float_num=-1234.567, 2 цифры, field_length=10, RIGHT →
            "  -1234.57"
        """
        value = self.fmt_num_str_native()
        width = max(self.field_length, len(value))

        if self.field_justify == TextJustify.LEFT:
            field = value.ljust(width)
        elif self.field_justify == TextJustify.CENTER:
            field = value.center(width)
        else:
            field = value.rjust(width)

        return f"{self.left_margin_str}{field}{self.right_margin_str}"

    def __str__(self) -> str:
        return self.get_formatted_text_field_str()


class FloatFieldFormat(_NumericFieldFormat):
    """Текстовое поле для float64 значения."""

    float_num: float = Field(..., description="Значение float64")

    @field_validator("float_num")
    @classmethod
    def validate_finite(cls, v: float) -> float:
        if v != v or v in (float("inf"), float("-inf")):
            raise ValueError(f"float_num must be finite, got {v}")
        return v

    def _raw_native_num_str(self) -> str:
        return float_to_native_num_str(self.float_num)


class BigFloatFieldFormat(_NumericFieldFormat):
    """Текстовое поле для Decimal значения."""

    big_float_num: Decimal = Field(..., description="Значение произвольной точности")

    @field_validator("big_float_num")
    @classmethod
    def validate_finite(cls, v: Decimal) -> Decimal:
        if not v.is_finite():
            raise ValueError(f"big_float_num must be finite, got {v}")
        return v

    def _raw_native_num_str(self) -> str:
        return decimal_to_native_num_str(self.big_float_num)
