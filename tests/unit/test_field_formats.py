"""
Тесты для Field Formats (BigFloatDto, FloatFieldFormat, BigFloatFieldFormat)

Проверяет:
1. Валидацию конечности значения
2. Округление значения поля
3. Выравнивание и отступы текстового поля
"""

from decimal import Decimal

import pytest
from pydantic import ValidationError

from numstr.core.domain.enums import NumberRoundingType
from numstr.core.domain.field_formats import (
    BigFloatDto,
    BigFloatFieldFormat,
    FloatFieldFormat,
    TextJustify,
    _NumericFieldFormat,
)


class TestBigFloatDto:
    """Тесты для BigFloatDto"""

    def test_native(self):
        dto = BigFloatDto(value=Decimal("-0012.3400"), num_str="-0012.3400")
        assert dto.fmt_num_str_native() == "-12.34"

    def test_non_finite_rejected(self):
        with pytest.raises(ValidationError, match="finite"):
            BigFloatDto(value=Decimal("Infinity"))

    def test_immutable(self):
        dto = BigFloatDto(value=Decimal("1"))
        with pytest.raises(ValidationError):
            dto.value = Decimal("2")


class TestFloatFieldFormat:
    """Тесты для FloatFieldFormat"""

    def test_unrounded(self):
        assert FloatFieldFormat(float_num=-1234.567).fmt_num_str_native() == "-1234.567"

    def test_right_justified(self):
        field = FloatFieldFormat(float_num=-1234.567, num_of_fractional_digits=2, field_length=10)
        assert field.get_formatted_text_field_str() == "  -1234.57"

    def test_left_justified_with_margins(self):
        field = FloatFieldFormat(
            float_num=1.5,
            left_margin_str="[",
            right_margin_str="]",
            field_length=6,
            field_justify=TextJustify.LEFT,
        )
        assert str(field) == "[1.5   ]"

    def test_centered(self):
        field = FloatFieldFormat(float_num=7.0, field_length=5, field_justify=TextJustify.CENTER)
        assert field.get_formatted_text_field_str() == "  7  "

    def test_field_shorter_than_value(self):
        field = FloatFieldFormat(float_num=123456.0, field_length=3)
        assert field.get_formatted_text_field_str() == "123456"

    def test_rounding_policy(self):
        field = FloatFieldFormat(
            float_num=2.5, rounding_type=NumberRoundingType.HALF_TO_EVEN, num_of_fractional_digits=0
        )
        assert field.fmt_num_str_native() == "2"

    def test_nan_rejected(self):
        with pytest.raises(ValidationError, match="finite"):
            FloatFieldFormat(float_num=float("nan"))

    def test_invalid_field_length(self):
        with pytest.raises(ValidationError):
            FloatFieldFormat(float_num=1.0, field_length=-2)


class TestBigFloatFieldFormat:
    """Тесты для BigFloatFieldFormat"""

    def test_high_precision_rounding(self):
        field = BigFloatFieldFormat(
            big_float_num=Decimal("12345678901234567890.125"),
            rounding_type=NumberRoundingType.HALF_AWAY_FROM_ZERO,
            num_of_fractional_digits=2,
        )
        assert field.fmt_num_str_native() == "12345678901234567890.13"

    def test_padding_to_fractional_digits(self):
        field = BigFloatFieldFormat(big_float_num=Decimal("3"), num_of_fractional_digits=2, field_length=8)
        assert str(field) == "    3.00"


class TestNumericFieldFormatBase:
    """Тесты базового класса текстового поля"""

    def test_base_is_abstract(self):
        with pytest.raises(TypeError):
            _NumericFieldFormat()

    def test_subclass_without_value_is_abstract(self):
        class NoValueFieldFormat(_NumericFieldFormat):
            pass

        with pytest.raises(TypeError):
            NoValueFieldFormat(field_length=4)
