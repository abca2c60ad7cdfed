"""
Тесты для MathHelper (Numeric Dispatch)

Проверяет:
1. Каждый поддерживаемый тип даёт корректную Native Number String
2. Отказ для неподдерживаемых типов с именем типа в сообщении
3. Проверку диапазона fixed-width типов
4. Fraction с заданной точностью и политикой округления
5. Kernel → значение без изменения исходного kernel
"""

from decimal import Decimal
from fractions import Fraction

import numpy as np
import pytest

from numstr.core.config import ConversionConfig
from numstr.core.domain.enums import NumberRoundingType, NumericSignValue
from numstr.core.domain.field_formats import BigFloatDto, BigFloatFieldFormat, FloatFieldFormat
from numstr.core.domain.number_str_kernel import NumberStrKernel
from numstr.core.errors import (
    MalformedNumberStringError,
    MissingValueError,
    NumericRangeError,
    UnsupportedTypeError,
)
from numstr.core.math.native_num_str import is_valid_native_num_str
from numstr.core.math.numeric_dispatch import (
    NUMPY_INTEGER_TYPES,
    MathHelper,
    big_rat_to_native_num_str,
)


@pytest.fixture
def helper():
    """MathHelper с конфигурацией по умолчанию"""
    return MathHelper()


# =============================================================================
# VALUE → NATIVE
# =============================================================================


SUPPORTED_VALUES = [
    (123, "123"),
    (-10**30, "-1" + "0" * 30),
    (-12.5, "-12.5"),
    (3.0, "3"),
    (Decimal("-0.1250"), "-0.125"),
    (Fraction(1, 4), "0.25"),
    (Fraction(1, 3), "0." + "3" * 20),
    (np.int8(-128), "-128"),
    (np.int16(300), "300"),
    (np.int32(-70000), "-70000"),
    (np.int64(2**40), str(2**40)),
    (np.uint8(255), "255"),
    (np.uint16(65535), "65535"),
    (np.uint32(4000000000), "4000000000"),
    (np.uint64(2**63), str(2**63)),
    (np.float32(0.1), "0.1"),
    (np.float64(-2.75), "-2.75"),
    (BigFloatDto(value=Decimal("1.50")), "1.5"),
    (FloatFieldFormat(float_num=-1234.567, num_of_fractional_digits=2), "-1234.57"),
    (BigFloatFieldFormat(big_float_num=Decimal("2.5")), "2.5"),
    (NumberStrKernel.from_string_digits("7", "25", -1), "-7.25"),
]


class TestValueToNative:
    """Тесты numeric_value_to_native_num_str"""

    @pytest.mark.parametrize("value,expected", SUPPORTED_VALUES)
    def test_supported_types(self, helper, value, expected):
        native = helper.numeric_value_to_native_num_str(value)
        assert native == expected
        assert is_valid_native_num_str(native)

    @pytest.mark.parametrize(
        "value,type_name",
        [([1, 2], "list"), ({"a": 1}, "dict"), ("12", "str"), (1 + 2j, "complex"), (True, "bool")],
    )
    def test_unsupported_types(self, helper, value, type_name):
        with pytest.raises(UnsupportedTypeError, match=f"'{type_name}'"):
            helper.numeric_value_to_native_num_str(value)

    def test_numpy_bool_rejected(self, helper):
        with pytest.raises(UnsupportedTypeError):
            helper.numeric_value_to_native_num_str(np.bool_(True))

    def test_none(self, helper):
        with pytest.raises(MissingValueError):
            helper.numeric_value_to_native_num_str(None)

    def test_nan(self, helper):
        with pytest.raises(MalformedNumberStringError):
            helper.numeric_value_to_native_num_str(float("nan"))

    def test_fraction_precision_from_config(self):
        helper = MathHelper(ConversionConfig(big_rat_fractional_digits=4))
        assert helper.numeric_value_to_native_num_str(Fraction(2, 3)) == "0.6667"

    def test_pure(self, helper):
        assert helper.numeric_value_to_pure_num_str(-1234.5, ",", False) == "1234,5-"
        assert helper.numeric_value_to_pure_num_str(np.int32(-7), ".", True) == "-7"


# =============================================================================
# FRACTION
# =============================================================================


class TestFraction:
    """Тесты конверсии Fraction"""

    def test_one_third_ten_digits(self, helper):
        assert str(helper.big_rat_to_kernel(Fraction(1, 3), 10)) == "0.3333333333"

    def test_keeps_requested_digits(self, helper):
        assert str(helper.big_rat_to_kernel(Fraction(1, 2), 3)) == "0.500"

    def test_half_away_from_zero(self):
        assert big_rat_to_native_num_str(Fraction(-5, 8), 2) == "-0.63"
        assert big_rat_to_native_num_str(Fraction(5, 8), 2) == "0.63"

    def test_policy(self):
        assert big_rat_to_native_num_str(Fraction(-1, 3), 2, NumberRoundingType.FLOOR) == "-0.34"
        assert big_rat_to_native_num_str(Fraction(5, 8), 2, NumberRoundingType.HALF_TO_EVEN) == "0.62"
        assert big_rat_to_native_num_str(Fraction(2, 3), 2, NumberRoundingType.NO_ROUNDING) == "0.66"

    def test_zero_digits(self):
        assert big_rat_to_native_num_str(Fraction(7, 2), 0) == "4"

    def test_negative_digits_rejected(self):
        with pytest.raises(MalformedNumberStringError, match=">= 0"):
            big_rat_to_native_num_str(Fraction(1, 3), -1)

    def test_tiny_negative_rounds_to_zero(self):
        assert big_rat_to_native_num_str(Fraction(-1, 1000), 2) == "0.00"

    def test_config_policy(self):
        helper = MathHelper(ConversionConfig(default_rounding_type=NumberRoundingType.TRUNCATE))
        assert str(helper.big_rat_to_kernel(Fraction(2, 3), 2)) == "0.66"

    def test_numeric_value_to_kernel_explicit_policy(self, helper):
        kernel = helper.numeric_value_to_kernel(Fraction(-1, 3), NumberRoundingType.FLOOR, 2)
        assert str(kernel) == "-0.34"

    def test_not_a_fraction(self, helper):
        with pytest.raises(UnsupportedTypeError, match="'float'"):
            helper.big_rat_to_kernel(0.5, 2)


# =============================================================================
# NATIVE → VALUE
# =============================================================================


class TestNativeToValue:
    """Тесты native_num_str_to_numeric_value"""

    @pytest.mark.parametrize(
        "native,target_type,expected",
        [
            ("-123", int, -123),
            ("127", np.int8, np.int8(127)),
            ("255", np.uint8, np.uint8(255)),
            ("-1.5", float, -1.5),
            ("0.1", np.float32, np.float32(0.1)),
            ("1.25", Decimal, Decimal("1.25")),
            ("0.75", Fraction, Fraction(3, 4)),
        ],
    )
    def test_convert(self, helper, native, target_type, expected):
        value = helper.native_num_str_to_numeric_value(native, target_type)
        assert type(value) is target_type
        assert value == expected

    @pytest.mark.parametrize(
        "native,target_type",
        [
            ("128", np.int8),
            ("-129", np.int8),
            ("-1", np.uint8),
            ("65536", np.uint16),
            ("18446744073709551616", np.uint64),
            ("9" * 40, np.float32),
            ("1" + "0" * 400, float),
        ],
    )
    def test_out_of_range(self, helper, native, target_type):
        with pytest.raises(NumericRangeError, match="out of range"):
            helper.native_num_str_to_numeric_value(native, target_type)

    def test_fraction_for_integer_target(self, helper):
        with pytest.raises(MalformedNumberStringError, match="not an integer"):
            helper.native_num_str_to_numeric_value("1.5", int)

    def test_field_format_targets(self, helper):
        dto = helper.native_num_str_to_numeric_value("-2.50", BigFloatDto)
        assert dto.value == Decimal("-2.50")
        assert dto.num_str == "-2.50"

        field = helper.native_num_str_to_numeric_value("1.5", FloatFieldFormat)
        assert field.float_num == 1.5

    def test_kernel_target(self, helper):
        kernel = helper.native_num_str_to_numeric_value("-0.5", NumberStrKernel)
        assert kernel.get_number_sign() == NumericSignValue.NEGATIVE

    @pytest.mark.parametrize("target_type", [str, list, bool, complex])
    def test_unsupported_target(self, helper, target_type):
        with pytest.raises(UnsupportedTypeError, match=target_type.__name__):
            helper.native_num_str_to_numeric_value("1", target_type)

    def test_malformed(self, helper):
        with pytest.raises(MalformedNumberStringError):
            helper.native_num_str_to_numeric_value("1,000", int)

    def test_pure_to_value(self, helper):
        assert helper.pure_num_str_to_numeric_value("1234,5-", Decimal, ",", False) == Decimal("-1234.5")


# =============================================================================
# KERNEL ↔ VALUE
# =============================================================================


class TestKernelToValue:
    """Тесты kernel_to_numeric_value и numeric_value_to_kernel"""

    def test_integer_target_truncates_by_default(self, helper):
        kernel = NumberStrKernel.from_string_digits("7", "9", -1)
        assert helper.kernel_to_int(kernel) == -7

    def test_integer_target_rounds_to_zero_digits(self, helper):
        kernel = NumberStrKernel.from_string_digits("7", "5", -1)
        value, stats = helper.kernel_to_numeric_value(
            kernel, np.int16, NumberRoundingType.HALF_AWAY_FROM_ZERO, 3
        )
        assert value == np.int16(-8)
        assert stats.num_of_fractional_digits == 0

    def test_source_kernel_unchanged(self, helper):
        kernel = NumberStrKernel.from_string_digits("1", "2345", 1)
        helper.kernel_to_decimal(kernel, NumberRoundingType.HALF_AWAY_FROM_ZERO, 2)
        assert str(kernel) == "1.2345"

    def test_float_with_rounding(self, helper):
        kernel = NumberStrKernel.from_string_digits("2", "675", 1)
        assert helper.kernel_to_float(kernel, NumberRoundingType.HALF_TO_EVEN, 2) == 2.68

    def test_leading_fraction_kernel(self, helper):
        kernel = NumberStrKernel.from_string_digits("", "25", 1)
        assert helper.kernel_to_decimal(kernel) == Decimal("0.25")

    def test_range_error(self, helper):
        kernel = NumberStrKernel.from_string_digits("300")
        with pytest.raises(NumericRangeError):
            helper.kernel_to_numeric_value(kernel, np.uint8)

    def test_empty_kernel(self, helper):
        with pytest.raises(MalformedNumberStringError, match="no digits"):
            helper.kernel_to_numeric_value(NumberStrKernel(), int)

    def test_none_kernel(self, helper):
        with pytest.raises(MissingValueError):
            helper.kernel_to_numeric_value(None, int)

    @pytest.mark.parametrize("numpy_type", NUMPY_INTEGER_TYPES)
    def test_numpy_integers_round_trip(self, helper, numpy_type):
        kernel = helper.numeric_value_to_kernel(numpy_type(100))
        value, _ = helper.kernel_to_numeric_value(kernel, numpy_type)
        assert type(value) is numpy_type
        assert value == 100

    def test_value_to_kernel_with_rounding(self, helper):
        kernel = helper.numeric_value_to_kernel(Decimal("-2.345"), NumberRoundingType.HALF_TO_EVEN, 2)
        assert str(kernel) == "-2.34"

    def test_value_to_kernel_copies_kernel(self, helper):
        source = NumberStrKernel.from_string_digits("1", "5")
        result = helper.numeric_value_to_kernel(source, NumberRoundingType.HALF_AWAY_FROM_ZERO, 0)
        assert str(result) == "2"
        assert str(source) == "1.5"
