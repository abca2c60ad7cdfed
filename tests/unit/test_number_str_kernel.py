"""
Тесты для NumberStrKernel

Проверяет:
1. Инвариант знака и флага ненулевого значения
2. Валидацию цифр
3. Ведущие нули и рационализацию дробных цифр
4. Сравнение и равенство
5. Научную нотацию
6. Вывод native / pure строк и JSON-форму
"""

import pytest

from numstr.core.domain.enums import (
    NumberRoundingType,
    NumericSignValue,
    NumericValueType,
    SciNotationFormat,
)
from numstr.core.domain.number_str_kernel import NumberStrKernel
from numstr.core.errors import InvalidDigitError, InvalidEnumValueError


def _kernel(native: str) -> NumberStrKernel:
    is_negative = native.startswith("-")
    int_part, _, frac_part = native.lstrip("-").partition(".")
    return NumberStrKernel.from_string_digits(int_part, frac_part, -1 if is_negative else 1)


# =============================================================================
# CONSTRUCTION / SIGN INVARIANT
# =============================================================================


class TestKernelConstruction:
    """Тесты создания kernel"""

    def test_new_kernel_is_empty_zero(self):
        kernel = NumberStrKernel()
        assert kernel.get_number_of_numeric_digits() == 0
        assert kernel.get_number_sign() == NumericSignValue.ZERO
        assert kernel.is_zero_value()
        assert kernel.get_numeric_value_type() == NumericValueType.NONE

    def test_add_digits(self):
        kernel = NumberStrKernel()
        kernel.add_integer_digit("0")
        assert kernel.get_number_sign() == NumericSignValue.ZERO

        kernel.add_integer_digit("5")
        kernel.add_fractional_digit("2")
        assert kernel.is_non_zero_value()
        assert kernel.get_number_sign() == NumericSignValue.POSITIVE
        assert str(kernel) == "5.2"

    @pytest.mark.parametrize("digit", ["a", "-", ".", "12", ""])
    def test_add_invalid_digit(self, digit):
        kernel = NumberStrKernel()
        with pytest.raises(InvalidDigitError):
            kernel.add_integer_digit(digit)
        assert kernel.get_number_of_integer_digits() == 0

    def test_from_string_digits_rejects_separator(self):
        with pytest.raises(InvalidDigitError):
            NumberStrKernel.from_string_digits("1,234")

    def test_zero_value_forces_zero_sign(self):
        kernel = NumberStrKernel.from_string_digits("000", "00", NumericSignValue.NEGATIVE)
        assert kernel.get_number_sign() == NumericSignValue.ZERO
        assert kernel.is_valid_instance()

    def test_zero_sign_for_non_zero_rejected(self):
        with pytest.raises(InvalidEnumValueError):
            NumberStrKernel.from_string_digits("12", "", NumericSignValue.ZERO)

    def test_set_rune_digits_failure_leaves_kernel_unchanged(self):
        kernel = _kernel("-12.5")
        with pytest.raises(InvalidDigitError):
            kernel.set_rune_digits(["1", "x"], [])
        assert str(kernel) == "-12.5"


class TestKernelSign:
    """Тесты установки знака"""

    def test_set_negative(self):
        kernel = _kernel("12")
        kernel.set_number_sign(NumericSignValue.NEGATIVE)
        assert kernel.get_number_sign_as_int() == -1

    def test_set_zero_on_non_zero_rejected(self):
        kernel = _kernel("12")
        with pytest.raises(InvalidEnumValueError):
            kernel.set_number_sign(NumericSignValue.ZERO)
        assert kernel.get_number_sign() == NumericSignValue.POSITIVE

    def test_sign_on_zero_value_coerced(self):
        kernel = _kernel("0.000")
        kernel.set_number_sign(NumericSignValue.NEGATIVE)
        assert kernel.get_number_sign() == NumericSignValue.ZERO

    @pytest.mark.parametrize("value", [-2, 2, 5])
    def test_set_sign_int_out_of_range(self, value):
        kernel = _kernel("1")
        with pytest.raises(InvalidEnumValueError):
            kernel.set_number_sign_int(value)

    def test_getters_return_copies(self):
        kernel = _kernel("12.5")
        digits = kernel.get_integer_digits()
        digits.append("9")
        assert kernel.get_integer_string() == "12"


class TestKernelMutation:
    """Тесты замены и очистки цифр"""

    def test_from_rune_digits(self):
        kernel = NumberStrKernel.from_rune_digits(["4", "2"], ["0", "5"], -1)
        assert str(kernel) == "-42.05"
        assert kernel.get_number_of_fractional_digits() == 2
        assert kernel.is_floating_point_value()

    def test_set_string_digits_replaces_contents(self):
        kernel = _kernel("-12.5")
        kernel.set_string_digits("7")
        assert str(kernel) == "7"
        assert not kernel.is_floating_point_value()

    def test_copy_in_is_deep(self):
        source = _kernel("-3.25")
        target = NumberStrKernel()
        target.copy_in(source)
        source.add_fractional_digit("9")

        assert str(target) == "-3.25"
        assert target == _kernel("-3.25")

    def test_empty_integer_digits_keeps_sign_for_non_zero(self):
        kernel = _kernel("-12.5")
        kernel.empty_integer_digits()
        assert kernel.get_integer_string() == ""
        assert kernel.get_number_sign() == NumericSignValue.NEGATIVE

    def test_empty_fractional_digits_to_zero(self):
        kernel = _kernel("-0.5")
        kernel.empty_fractional_digits()
        assert kernel.is_zero_value()
        assert kernel.get_number_sign() == NumericSignValue.ZERO


# =============================================================================
# LEADING ZEROS / RATIONALIZATION
# =============================================================================


class TestLeadingZeros:
    """Тесты подсчёта ведущих нулей"""

    @pytest.mark.parametrize(
        "int_digits,leading,excess",
        [("0001", 3, 3), ("000", 3, 2), ("050", 1, 1), ("0", 1, 0), ("123", 0, 0)],
    )
    def test_counts(self, int_digits, leading, excess):
        kernel = NumberStrKernel.from_string_digits(int_digits)
        assert kernel.get_integer_leading_zeros_count() == leading
        assert kernel.get_excess_integer_leading_zeros_count() == excess

    def test_native_output_compresses_leading_zeros(self):
        assert str(NumberStrKernel.from_string_digits("000", "5")) == "0.5"
        assert str(NumberStrKernel.from_string_digits("0012")) == "12"


class TestRationalize:
    """Тесты rationalize_fractional_integer_digits"""

    def test_adds_zero_integer_digit(self):
        kernel = NumberStrKernel.from_string_digits("", "752")
        kernel.rationalize_fractional_integer_digits()
        assert kernel.get_integer_string() == "0"
        assert str(kernel) == "0.752"

    def test_idempotent(self):
        kernel = NumberStrKernel.from_string_digits("", "752")
        kernel.rationalize_fractional_integer_digits()
        kernel.rationalize_fractional_integer_digits()
        assert kernel.get_integer_digits() == ["0"]

    def test_no_change_for_integer(self):
        kernel = NumberStrKernel.from_string_digits("5")
        kernel.rationalize_fractional_integer_digits()
        assert kernel.get_integer_string() == "5"
        assert kernel.get_fractional_string() == ""


# =============================================================================
# COMPARISON
# =============================================================================


class TestKernelComparison:
    """Тесты сравнения"""

    @pytest.mark.parametrize(
        "a,b,expected",
        [
            ("1.5", "1.50", 0),
            ("001.5", "1.5", 0),
            ("2", "10", -1),
            ("-2", "-10", 1),
            ("-0.1", "0", -1),
            ("0.0", "0", 0),
            ("1.25", "1.3", -1),
        ],
    )
    def test_compare(self, a, b, expected):
        assert _kernel(a).compare(_kernel(b)) == expected

    def test_equal_is_structural(self):
        assert _kernel("1.5") == _kernel("1.5")
        assert _kernel("1.5") != _kernel("1.50")
        assert _kernel("1.5") != _kernel("-1.5")

    def test_equal_digit_helpers(self):
        a, b = _kernel("12.5"), _kernel("-12.5")
        assert a.equal_numeric_digits(b)
        assert not a.equal(b)

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(_kernel("1"))

    def test_copy_is_deep(self):
        original = _kernel("12.5")
        clone = original.copy()
        clone.add_fractional_digit("7")
        assert str(original) == "12.5"
        assert str(clone) == "12.57"


# =============================================================================
# INT FRAC / SCIENTIFIC NOTATION
# =============================================================================


class TestIntFracDigitsKernel:
    """Тесты get_int_frac_digits_kernel"""

    def test_combined(self):
        result = _kernel("1234.5678").get_int_frac_digits_kernel()
        assert result.kernel.get_integer_string() == "12345678"
        assert result.exponent == -4

    def test_leading_zeros_removed(self):
        result = _kernel("-0.05").get_int_frac_digits_kernel()
        assert str(result.kernel) == "-5"
        assert result.exponent == -2


class TestScientificNotation:
    """Тесты get_scientific_notation"""

    def test_large_integer(self):
        sci = _kernel("265200000").get_scientific_notation()
        assert sci.exponent == 8
        assert str(sci) == "2.652 x 10^8"

    def test_small_fraction(self):
        sci = _kernel("0.0000000051").get_scientific_notation()
        assert str(sci) == "5.1 x 10^-9"

    def test_trailing_zeros_stripped(self):
        sci = _kernel("1234567.890").get_scientific_notation()
        assert str(sci) == "1.23456789 x 10^6"

    def test_single_digit(self):
        assert str(_kernel("5").get_scientific_notation()) == "5.0 x 10^0"

    def test_negative(self):
        assert str(_kernel("-42").get_scientific_notation()) == "-4.2 x 10^1"

    def test_zero(self):
        sci = _kernel("0.000").get_scientific_notation()
        assert sci.exponent == 0
        assert sci.significand.to_native_num_str() == "0.0"

    def test_rounded_significand(self):
        sci = _kernel("123456").get_scientific_notation(NumberRoundingType.HALF_AWAY_FROM_ZERO, 2)
        assert str(sci) == "1.23 x 10^5"

    def test_rounding_carry_renormalizes(self):
        sci = _kernel("99600").get_scientific_notation(NumberRoundingType.HALF_AWAY_FROM_ZERO, 1)
        assert str(sci) == "1.0 x 10^5"

    @pytest.mark.parametrize(
        "native,expected",
        [
            ("265200000", "3.0 x 10^8"),
            ("9.6", "1.0 x 10^1"),
            ("-0.0042", "-4.0 x 10^-3"),
        ],
    )
    def test_zero_digit_rounding_keeps_fractional_digit(self, native, expected):
        sci = _kernel(native).get_scientific_notation(NumberRoundingType.HALF_AWAY_FROM_ZERO, 0)
        assert str(sci) == expected

    @pytest.mark.parametrize(
        "fmt,expected",
        [
            (SciNotationFormat.EXPONENTIAL, "2.652 x 10^8"),
            (SciNotationFormat.E_NOT_UPPER_LEAD_PLUS, "2.652E+8"),
            (SciNotationFormat.E_NOT_UPPER_NO_LEAD_PLUS, "2.652E8"),
            (SciNotationFormat.E_NOT_LOWER_LEAD_PLUS, "2.652e+8"),
            (SciNotationFormat.E_NOT_LOWER_NO_LEAD_PLUS, "2.652e8"),
        ],
    )
    def test_formats(self, fmt, expected):
        assert _kernel("265200000").get_scientific_notation().format(fmt) == expected

    def test_negative_exponent_has_no_plus(self):
        sci = _kernel("0.025").get_scientific_notation()
        assert sci.format(SciNotationFormat.E_NOT_UPPER_LEAD_PLUS) == "2.5E-2"


# =============================================================================
# OUTPUT
# =============================================================================


class TestKernelOutput:
    """Тесты вывода"""

    def test_pure_trailing_minus(self):
        assert _kernel("-1234.56").to_pure_num_str(",", False) == "1234,56-"

    def test_pure_leading_minus(self):
        assert _kernel("-1234.56").to_pure_num_str(",", True) == "-1234,56"

    def test_zero_has_no_minus(self):
        assert _kernel("-0.0").to_native_num_str() == "0.0"

    def test_to_dict_round_trip(self):
        kernel = _kernel("-0012.50")
        data = kernel.to_dict()

        assert data == {
            "integer_digits": "0012",
            "fractional_digits": "50",
            "number_sign": -1,
            "is_non_zero_value": True,
            "native_num_str": "-12.50",
        }
        assert NumberStrKernel.from_dict(data) == kernel

    def test_stats(self):
        stats = _kernel("-0012.50").get_numeric_value_stats()
        assert stats.num_of_integer_digits == 4
        assert stats.num_of_significant_integer_digits == 2
        assert stats.num_of_significant_fractional_digits == 1
        assert stats.number_value_type == NumericValueType.FLOATING_POINT

    def test_parameter_listing(self):
        listing = _kernel("-1.5").get_parameter_text_listing()
        assert "NEGATIVE" in listing
        assert "-1.5" in listing

    def test_empty_resets(self):
        kernel = _kernel("-1.5")
        kernel.empty()
        assert kernel.get_number_of_numeric_digits() == 0
        assert kernel.get_number_sign() == NumericSignValue.ZERO

    def test_empty_fractional_recomputes_zero(self):
        kernel = _kernel("-0.5")
        kernel.empty_fractional_digits()
        assert kernel.is_zero_value()
        assert kernel.get_number_sign() == NumericSignValue.ZERO
