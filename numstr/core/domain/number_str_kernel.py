"""
NumberStrKernel — каноническое представление числового значения

Значение хранится как:
- последовательность целых цифр (старшая первая), возможно пустая
- последовательность дробных цифр (в порядке чтения после точки)
- знак {NEGATIVE, ZERO, POSITIVE}
- флаг ненулевого значения

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Цифровые последовательности содержат только '0'-'9': ни знаков, ни
   десятичной точки, ни разделителей групп
2. is_non_zero_value == False  ⇔  number_sign == ZERO
3. Все get-методы возвращают копии, set-методы не разделяют ссылки
   с вызывающим кодом
4. Ошибка не оставляет частично изменённого экземпляра

Экземпляр не синхронизирован: один владелец, без конкурентной мутации.
"""

import random
from dataclasses import dataclass
from typing import Any, Iterable

from numstr.core.domain.enums import (
    NumberRoundingType,
    NumericSignValue,
    NumericValueType,
    SciNotationFormat,
)
from numstr.core.domain.stats import NumberStrStatsDto, compute_digit_stats
from numstr.core.errors import InvalidDigitError, InvalidEnumValueError
from numstr.core.math.rounding import round_digits


# =============================================================================
# HELPERS
# =============================================================================


def _validate_digit(digit: str, context: str) -> str:
    if not isinstance(digit, str) or len(digit) != 1 or not ("0" <= digit <= "9"):
        raise InvalidDigitError(f"{context}: digit must be a single character '0'-'9', got {digit!r}")
    return digit


def _validate_digit_run(digits: Iterable[str], context: str) -> list[str]:
    return [_validate_digit(d, context) for d in digits]


def _coerce_sign(sign: NumericSignValue | int) -> NumericSignValue:
    if isinstance(sign, NumericSignValue):
        return sign
    return NumericSignValue.from_int(sign)


# =============================================================================
# NUMBER STR KERNEL
# =============================================================================


class NumberStrKernel:
    """
    Каноническое числовое значение: целые цифры, дробные цифры, знак.

    Создаётся пустым и заполняется по одной цифре (add_integer_digit,
    add_fractional_digit), целиком (from_string_digits, from_rune_digits)
    или парсерами numstr.parsing.
    """

    def __init__(self):
        self._integer_digits: list[str] = []
        self._fractional_digits: list[str] = []
        self._number_sign: NumericSignValue = NumericSignValue.ZERO
        self._is_non_zero_value: bool = False

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def from_rune_digits(
        cls,
        integer_digits: Iterable[str],
        fractional_digits: Iterable[str],
        number_sign: NumericSignValue | int = NumericSignValue.POSITIVE,
    ) -> "NumberStrKernel":
        """
        Создание kernel из последовательностей символов-цифр.

        Для нулевого значения знак всегда ZERO. Знак ZERO для ненулевого
        значения недопустим.

        Raises:
            InvalidDigitError: Символ вне '0'-'9'
            InvalidEnumValueError: Недопустимый знак
        """
        kernel = cls()
        kernel.set_rune_digits(integer_digits, fractional_digits, number_sign)
        return kernel

    @classmethod
    def from_string_digits(
        cls,
        integer_digits: str,
        fractional_digits: str = "",
        number_sign: NumericSignValue | int = NumericSignValue.POSITIVE,
    ) -> "NumberStrKernel":
        """
        Создание kernel из строк цифр.

        Examples:
            >>> str(NumberStrKernel.from_string_digits("1234", "56", -1))
            '-1234.56'
        """
        return cls.from_rune_digits(list(integer_digits), list(fractional_digits), number_sign)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "NumberStrKernel":
        """Восстановление kernel из JSON-формы (см. to_dict)."""
        return cls.from_string_digits(
            data["integer_digits"],
            data["fractional_digits"],
            data["number_sign"],
        )

    # -------------------------------------------------------------------------
    # Building
    # -------------------------------------------------------------------------

    def add_integer_digit(self, digit: str) -> None:
        """
        Добавить целую цифру в конец целой части.

        Raises:
            InvalidDigitError: Если digit вне '0'-'9'
        """
        self._integer_digits.append(_validate_digit(digit, "add_integer_digit"))
        self._mark_digit(digit)

    def add_fractional_digit(self, digit: str) -> None:
        """
        Добавить дробную цифру в конец дробной части.

        Raises:
            InvalidDigitError: Если digit вне '0'-'9'
        """
        self._fractional_digits.append(_validate_digit(digit, "add_fractional_digit"))
        self._mark_digit(digit)

    def _mark_digit(self, digit: str) -> None:
        if digit != "0" and not self._is_non_zero_value:
            self._is_non_zero_value = True
            if self._number_sign == NumericSignValue.ZERO:
                self._number_sign = NumericSignValue.POSITIVE

    def set_rune_digits(
        self,
        integer_digits: Iterable[str],
        fractional_digits: Iterable[str],
        number_sign: NumericSignValue | int = NumericSignValue.POSITIVE,
    ) -> None:
        """Заменить содержимое kernel новыми цифрами и знаком."""
        int_run = _validate_digit_run(integer_digits, "set_rune_digits integer_digits")
        frac_run = _validate_digit_run(fractional_digits, "set_rune_digits fractional_digits")
        sign = _coerce_sign(number_sign)

        is_non_zero = any(d != "0" for d in int_run) or any(d != "0" for d in frac_run)

        if not is_non_zero:
            sign = NumericSignValue.ZERO
        elif sign == NumericSignValue.ZERO:
            raise InvalidEnumValueError(
                "set_rune_digits: number sign ZERO is invalid for non-zero value "
                f"'{''.join(int_run)}.{''.join(frac_run)}'"
            )

        self._integer_digits = int_run
        self._fractional_digits = frac_run
        self._number_sign = sign
        self._is_non_zero_value = is_non_zero

    def set_string_digits(
        self,
        integer_digits: str,
        fractional_digits: str = "",
        number_sign: NumericSignValue | int = NumericSignValue.POSITIVE,
    ) -> None:
        """Заменить содержимое kernel цифрами из строк."""
        self.set_rune_digits(list(integer_digits), list(fractional_digits), number_sign)

    def copy_in(self, other: "NumberStrKernel") -> None:
        """Глубокое копирование other в self."""
        self._integer_digits = list(other._integer_digits)
        self._fractional_digits = list(other._fractional_digits)
        self._number_sign = other._number_sign
        self._is_non_zero_value = other._is_non_zero_value

    def copy(self) -> "NumberStrKernel":
        """Глубокая копия kernel."""
        new_kernel = NumberStrKernel()
        new_kernel.copy_in(self)
        return new_kernel

    def empty(self) -> None:
        """Сброс в пустое состояние."""
        self._integer_digits = []
        self._fractional_digits = []
        self._number_sign = NumericSignValue.ZERO
        self._is_non_zero_value = False

    def empty_integer_digits(self) -> None:
        self._integer_digits = []
        self._recompute_non_zero()

    def empty_fractional_digits(self) -> None:
        self._fractional_digits = []
        self._recompute_non_zero()

    def _recompute_non_zero(self) -> None:
        self._is_non_zero_value = any(d != "0" for d in self._integer_digits) or any(
            d != "0" for d in self._fractional_digits
        )
        if not self._is_non_zero_value:
            self._number_sign = NumericSignValue.ZERO
        elif self._number_sign == NumericSignValue.ZERO:
            self._number_sign = NumericSignValue.POSITIVE

    # -------------------------------------------------------------------------
    # Getters
    # -------------------------------------------------------------------------

    def get_integer_digits(self) -> list[str]:
        return list(self._integer_digits)

    def get_fractional_digits(self) -> list[str]:
        return list(self._fractional_digits)

    def get_integer_string(self) -> str:
        return "".join(self._integer_digits)

    def get_fractional_string(self) -> str:
        return "".join(self._fractional_digits)

    def get_number_of_integer_digits(self) -> int:
        return len(self._integer_digits)

    def get_number_of_fractional_digits(self) -> int:
        return len(self._fractional_digits)

    def get_number_of_numeric_digits(self) -> int:
        return len(self._integer_digits) + len(self._fractional_digits)

    def get_number_sign(self) -> NumericSignValue:
        return self._number_sign

    def get_number_sign_as_int(self) -> int:
        return int(self._number_sign.value)

    def get_numeric_value_type(self) -> NumericValueType:
        if self._fractional_digits:
            return NumericValueType.FLOATING_POINT
        if self._integer_digits:
            return NumericValueType.INTEGER
        return NumericValueType.NONE

    def get_integer_leading_zeros_count(self) -> int:
        """
        Количество ведущих '0' в целой части.

        Examples:
            "0001" → 3, "000" → 3, "050" → 1
        """
        count = 0
        for digit in self._integer_digits:
            if digit != "0":
                break
            count += 1
        return count

    def get_excess_integer_leading_zeros_count(self) -> int:
        """
        Количество лишних ведущих нулей.

        Единственный ноль, представляющий нулевую целую часть, не считается:
        "000" → 2, "0001" → 3, "050" → 1.
        """
        count = self.get_integer_leading_zeros_count()
        if count > 0 and count == len(self._integer_digits):
            return count - 1
        return count

    def get_numeric_value_stats(self) -> NumberStrStatsDto:
        return compute_digit_stats(
            self.get_integer_string(),
            self.get_fractional_string(),
            self._number_sign,
        )

    def get_int_frac_digits_kernel(self) -> "IntFracDigitsResult":
        """
        Представление значения как целое × 10^exponent.

        Целые и дробные цифры объединяются в одну целую последовательность
        без ведущих нулей, exponent = -(количество дробных цифр).

        Examples:
            1234.5678 → integer "12345678", exponent -4
        """
        combined = (self.get_integer_string() + self.get_fractional_string()).lstrip("0") or "0"
        kernel = NumberStrKernel.from_string_digits(combined, "", self._sign_or_positive())
        return IntFracDigitsResult(kernel=kernel, exponent=-len(self._fractional_digits))

    def _sign_or_positive(self) -> NumericSignValue:
        if self._number_sign == NumericSignValue.ZERO:
            return NumericSignValue.POSITIVE
        return self._number_sign

    # -------------------------------------------------------------------------
    # Setters
    # -------------------------------------------------------------------------

    def set_number_sign(self, number_sign: NumericSignValue | int) -> None:
        """
        Установка знака.

        Для нулевого значения знак всегда ZERO. ZERO для ненулевого значения
        отвергается, а не сбрасывает флаг ненулевого значения: иначе флаг
        разошёлся бы с цифрами, которые остаются ненулевыми.

        Raises:
            InvalidEnumValueError: Недопустимое значение или ZERO при ненулевом значении
        """
        sign = _coerce_sign(number_sign)

        if not self._is_non_zero_value:
            self._number_sign = NumericSignValue.ZERO
            return

        if sign == NumericSignValue.ZERO:
            raise InvalidEnumValueError(
                f"set_number_sign: sign ZERO is invalid for non-zero value '{self}'"
            )
        self._number_sign = sign

    def set_number_sign_int(self, number_sign: int) -> None:
        self.set_number_sign(NumericSignValue.from_int(number_sign))

    # -------------------------------------------------------------------------
    # Predicates
    # -------------------------------------------------------------------------

    def is_non_zero_value(self) -> bool:
        return self._is_non_zero_value

    def is_zero_value(self) -> bool:
        return not self._is_non_zero_value

    def is_floating_point_value(self) -> bool:
        return self.get_numeric_value_type() == NumericValueType.FLOATING_POINT

    def is_valid_instance(self) -> bool:
        try:
            self.is_valid_instance_error()
        except (InvalidDigitError, InvalidEnumValueError):
            return False
        return True

    def is_valid_instance_error(self) -> None:
        """
        Проверка инвариантов экземпляра.

        Raises:
            InvalidEnumValueError: Недопустимый знак или знак не согласован с флагом
            InvalidDigitError: Недопустимый символ в цифрах
        """
        if not isinstance(self._number_sign, NumericSignValue):
            raise InvalidEnumValueError(f"number sign {self._number_sign!r} is invalid")
        _validate_digit_run(self._integer_digits, "integer digits")
        _validate_digit_run(self._fractional_digits, "fractional digits")

        if self._is_non_zero_value != (self._number_sign != NumericSignValue.ZERO):
            raise InvalidEnumValueError(
                f"number sign {self._number_sign.name} inconsistent with "
                f"is_non_zero_value={self._is_non_zero_value}"
            )

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def equal_integer_digits(self, other: "NumberStrKernel") -> bool:
        return self._integer_digits == other._integer_digits

    def equal_fractional_digits(self, other: "NumberStrKernel") -> bool:
        return self._fractional_digits == other._fractional_digits

    def equal_numeric_digits(self, other: "NumberStrKernel") -> bool:
        return self.equal_integer_digits(other) and self.equal_fractional_digits(other)

    def equal(self, other: "NumberStrKernel") -> bool:
        """Структурное равенство: цифры и знак совпадают."""
        return self.equal_numeric_digits(other) and self._number_sign == other._number_sign

    def compare(self, other: "NumberStrKernel") -> int:
        """
        Числовое сравнение.

        Ведущие нули целой части и завершающие нули дробной части не влияют
        на результат.

        Returns:
            -1 если self < other, 0 если равны, 1 если self > other
        """
        self_sign = int(self._number_sign.value)
        other_sign = int(other._number_sign.value)
        if self_sign != other_sign:
            return 1 if self_sign > other_sign else -1
        if self_sign == 0:
            return 0

        magnitude = _compare_magnitudes(
            self.get_integer_string(),
            self.get_fractional_string(),
            other.get_integer_string(),
            other.get_fractional_string(),
        )
        return magnitude * self_sign

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NumberStrKernel):
            return NotImplemented
        return self.equal(other)

    __hash__ = None  # Mutable

    # -------------------------------------------------------------------------
    # Transforms
    # -------------------------------------------------------------------------

    def rationalize_fractional_integer_digits(self) -> None:
        """
        Если есть дробные цифры и нет целых — добавить целую цифру '0'.

        ".752" хранится как "0.752". Идемпотентно.
        """
        if self._fractional_digits and not self._integer_digits:
            self._integer_digits = ["0"]

    def round(
        self,
        rounding_type: NumberRoundingType | str,
        round_to_fractional_digits: int,
        rng: random.Random | None = None,
    ) -> None:
        """
        Округление на месте.

        NoRounding ничего не меняет. Если дробных цифр меньше целевого
        количества, дробная часть дополняется нулями. Значение, округлённое
        до нуля, получает знак ZERO.

        Args:
            rounding_type: Политика округления
            round_to_fractional_digits: Целевое количество дробных цифр (>= 0)
            rng: Источник случайности для политики Randomly

        Raises:
            MalformedNumberStringError: Если round_to_fractional_digits < 0
            InvalidEnumValueError: Неизвестная политика
        """
        rounding_type = NumberRoundingType.coerce(rounding_type)
        if rounding_type == NumberRoundingType.NO_ROUNDING:
            return

        int_str = self.get_integer_string()
        frac_str = self.get_fractional_string()
        if frac_str and not int_str:
            int_str = "0"

        new_int, new_frac = round_digits(
            int_str,
            frac_str,
            self._number_sign == NumericSignValue.NEGATIVE,
            rounding_type,
            round_to_fractional_digits,
            rng=rng,
        )

        self._integer_digits = list(new_int)
        self._fractional_digits = list(new_frac)
        self.rationalize_fractional_integer_digits()
        self._recompute_non_zero()

    def get_scientific_notation(
        self,
        rounding_type: NumberRoundingType | str = NumberRoundingType.NO_ROUNDING,
        round_to_fractional_digits: int = 0,
    ) -> "SciNotationKernel":
        """
        Научная нотация: significand (d.ddd) × 10^exponent.

        Нулевое значение даёт significand "0.0" и exponent 0. Significand
        всегда содержит хотя бы одну дробную цифру, с округлением и без:
        5 → 5.0, 9.6 при 0 цифрах → 1.0 x 10^1.

        Args:
            rounding_type: Округление significand
            round_to_fractional_digits: Дробных цифр в significand после округления

        Examples:
            265200000 → 2.652 x 10^8
            0.0000000051 → 5.1 x 10^-9
        """
        int_str = self.get_integer_string().lstrip("0")
        frac_str = self.get_fractional_string()

        if not self._is_non_zero_value:
            return SciNotationKernel(
                significand=NumberStrKernel.from_string_digits("0", "0", NumericSignValue.ZERO),
                exponent=0,
            )

        if int_str:
            exponent = len(int_str) - 1
            digits = int_str + frac_str
        else:
            leading_frac_zeros = len(frac_str) - len(frac_str.lstrip("0"))
            exponent = -(leading_frac_zeros + 1)
            digits = frac_str[leading_frac_zeros:]

        digits = digits.rstrip("0")
        significand = NumberStrKernel.from_string_digits(digits[0], digits[1:] or "0", self._number_sign)

        rounding_type = NumberRoundingType.coerce(rounding_type)
        if rounding_type != NumberRoundingType.NO_ROUNDING:
            significand.round(rounding_type, round_to_fractional_digits)
            # 9.96 → 10.0: нормализация significand
            if significand.get_number_of_integer_digits() > 1:
                sig_int = significand.get_integer_string()
                sig_frac = (sig_int[1:] + significand.get_fractional_string())
                sig_frac = sig_frac[:max(round_to_fractional_digits, 0)]
                significand = NumberStrKernel.from_string_digits(
                    sig_int[0], sig_frac, self._number_sign
                )
                exponent += 1

            if significand.get_number_of_fractional_digits() == 0:
                significand.add_fractional_digit("0")

        return SciNotationKernel(significand=significand, exponent=exponent)

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def to_native_num_str(self) -> str:
        """
        Native Number String: [-]digits[.digits].

        Ведущие нули целой части сокращаются до одного, дробная часть
        выводится как хранится.
        """
        return self.to_pure_num_str(decimal_separator=".", leading_minus_sign=True)

    def to_pure_num_str(self, decimal_separator: str = ".", leading_minus_sign: bool = True) -> str:
        """
        Pure Number String: цифры, произвольный десятичный разделитель и
        минус перед или после числа.

        Examples:
            -1234.56, "," , False → "1234,56-"
        """
        int_str = self.get_integer_string().lstrip("0") or "0"
        frac_str = self.get_fractional_string()

        num_str = int_str
        if frac_str:
            num_str += decimal_separator + frac_str

        if self._number_sign == NumericSignValue.NEGATIVE:
            if leading_minus_sign:
                return "-" + num_str
            return num_str + "-"
        return num_str

    def to_dict(self) -> dict[str, Any]:
        """JSON-форма kernel (контракт number_str_kernel)."""
        return {
            "integer_digits": self.get_integer_string(),
            "fractional_digits": self.get_fractional_string(),
            "number_sign": self.get_number_sign_as_int(),
            "is_non_zero_value": self._is_non_zero_value,
            "native_num_str": self.to_native_num_str(),
        }

    def get_parameter_text_listing(self) -> str:
        """Диагностический листинг внутреннего состояния."""
        stats = self.get_numeric_value_stats()
        lines = [
            "NumberStrKernel",
            f"  Integer Digits:        '{self.get_integer_string()}'",
            f"  Fractional Digits:     '{self.get_fractional_string()}'",
            f"  Number Sign:           {self._number_sign.name}",
            f"  Is Non-Zero Value:     {self._is_non_zero_value}",
            f"  Numeric Value Type:    {stats.number_value_type.value}",
            f"  Native Number String:  {self.to_native_num_str()}",
        ]
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.to_native_num_str()

    def __repr__(self) -> str:
        return f"NumberStrKernel('{self.to_native_num_str()}')"


def _compare_magnitudes(int_a: str, frac_a: str, int_b: str, frac_b: str) -> int:
    int_a = int_a.lstrip("0")
    int_b = int_b.lstrip("0")
    if len(int_a) != len(int_b):
        return 1 if len(int_a) > len(int_b) else -1
    if int_a != int_b:
        return 1 if int_a > int_b else -1

    frac_a = frac_a.rstrip("0")
    frac_b = frac_b.rstrip("0")
    width = max(len(frac_a), len(frac_b))
    frac_a = frac_a.ljust(width, "0")
    frac_b = frac_b.ljust(width, "0")
    if frac_a == frac_b:
        return 0
    return 1 if frac_a > frac_b else -1


# =============================================================================
# RESULTS
# =============================================================================


@dataclass(frozen=True)
class IntFracDigitsResult:
    """Значение как целое kernel × 10^exponent."""

    kernel: NumberStrKernel
    exponent: int  # <= 0


@dataclass(frozen=True)
class SciNotationKernel:
    """Научная нотация: significand × 10^exponent."""

    significand: NumberStrKernel
    exponent: int

    def format(self, sci_notation_format: SciNotationFormat = SciNotationFormat.EXPONENTIAL) -> str:
        """
        Форматирование научной нотации.

        Examples:
            EXPONENTIAL              → "2.652 x 10^8"
            E_NOT_UPPER_LEAD_PLUS    → "2.652E+8"
            E_NOT_UPPER_NO_LEAD_PLUS → "2.652E8"
            E_NOT_LOWER_LEAD_PLUS    → "2.652e+8"
            E_NOT_LOWER_NO_LEAD_PLUS → "2.652e8"
        """
        significand = self.significand.to_native_num_str()

        if sci_notation_format == SciNotationFormat.EXPONENTIAL:
            return f"{significand} x 10^{self.exponent}"

        letter = "E" if sci_notation_format in (
            SciNotationFormat.E_NOT_UPPER_LEAD_PLUS,
            SciNotationFormat.E_NOT_UPPER_NO_LEAD_PLUS,
        ) else "e"
        lead_plus = sci_notation_format in (
            SciNotationFormat.E_NOT_UPPER_LEAD_PLUS,
            SciNotationFormat.E_NOT_LOWER_LEAD_PLUS,
        )

        if self.exponent >= 0 and lead_plus:
            return f"{significand}{letter}+{self.exponent}"
        return f"{significand}{letter}{self.exponent}"

    def get_num_str_exponent_fmt(self) -> str:
        return self.format(SciNotationFormat.EXPONENTIAL)

    def __str__(self) -> str:
        return self.get_num_str_exponent_fmt()
