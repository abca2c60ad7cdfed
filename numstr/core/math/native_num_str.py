"""
Native Number String — канонический формат числовой строки

Native Number String: необязательный ведущий '-', одна или более цифр,
необязательная '.' с одной или более цифрами. Без разделителей групп,
символов валют и ведущего '+'.

    ^-?[0-9]+(\\.[0-9]+)?$

Модуль содержит:
- проверку формата
- нормализацию (лишние ведущие/завершающие нули)
- очистку "dirty" строк до native формата
- статистику native строки
- конверсию float и Decimal в native строку
- разбор Pure Number String
"""

import re
from decimal import Decimal
from typing import Final

import numpy as np

from numstr.core.domain.enums import NumericSignValue
from numstr.core.domain.stats import NumberStrStatsDto, compute_digit_stats
from numstr.core.errors import MalformedNumberStringError, MissingValueError

NATIVE_NUM_STR_PATTERN: Final[re.Pattern[str]] = re.compile(r"^-?[0-9]+(\.[0-9]+)?$")

# Символы, которые не могут входить в десятичный разделитель dirty строки
_DIRTY_RESERVED_CHARS: Final[str] = "-()"


# =============================================================================
# VALIDATION
# =============================================================================


def is_valid_native_num_str(num_str: str) -> bool:
    """
    Проверка соответствия Native Number String формату.

    Examples:
        >>> is_valid_native_num_str("-1234.56")
        True
        >>> is_valid_native_num_str("+12")
        False
        >>> is_valid_native_num_str("1,234")
        False
    """
    if not isinstance(num_str, str):
        return False
    return NATIVE_NUM_STR_PATTERN.fullmatch(num_str) is not None


def validate_native_num_str(num_str: str) -> None:
    """
    Проверка формата с исключением.

    Raises:
        MissingValueError: Если num_str is None
        MalformedNumberStringError: Если строка не соответствует формату
    """
    if num_str is None:
        raise MissingValueError("native number string is None")
    if not isinstance(num_str, str):
        raise MalformedNumberStringError(
            f"native number string must be str, got {type(num_str).__name__}"
        )
    if not num_str:
        raise MalformedNumberStringError("native number string is empty")
    if not is_valid_native_num_str(num_str):
        raise MalformedNumberStringError(f"invalid native number string '{num_str}'")


def split_native_num_str(num_str: str) -> tuple[str, str, NumericSignValue]:
    """
    Разбор native строки на (целые цифры, дробные цифры, знак).

    Знак нулевого значения — ZERO.

    Raises:
        MalformedNumberStringError: Если строка не соответствует формату
    """
    validate_native_num_str(num_str)

    is_negative = num_str.startswith("-")
    body = num_str[1:] if is_negative else num_str
    int_part, _, frac_part = body.partition(".")

    if not (int_part.strip("0") or frac_part.strip("0")):
        sign = NumericSignValue.ZERO
    elif is_negative:
        sign = NumericSignValue.NEGATIVE
    else:
        sign = NumericSignValue.POSITIVE

    return int_part, frac_part, sign


# =============================================================================
# NORMALIZATION
# =============================================================================


def normalize_native_num_str(num_str: str) -> tuple[str, NumberStrStatsDto]:
    """
    Нормализация native строки.

    Удаляются лишние ведущие нули целой части (остаётся хотя бы "0"),
    завершающие нули дробной части; дробная часть из одних нулей
    удаляется вместе с точкой; "-0" становится "0".

    Returns:
        (нормализованная строка, статистика исходного значения)

    Examples:
        >>> normalize_native_num_str("-000123.4500")[0]
        '-123.45'
        >>> normalize_native_num_str("-0.000")[0]
        '0'
    """
    int_part, frac_part, sign = split_native_num_str(num_str)
    stats = compute_digit_stats(int_part, frac_part, sign)

    int_part = int_part.lstrip("0") or "0"
    frac_part = frac_part.rstrip("0")

    normalized = int_part
    if frac_part:
        normalized += "." + frac_part
    if sign == NumericSignValue.NEGATIVE:
        normalized = "-" + normalized

    return normalized, stats


def native_num_str_stats(num_str: str) -> NumberStrStatsDto:
    """Статистика native строки."""
    int_part, frac_part, sign = split_native_num_str(num_str)
    return compute_digit_stats(int_part, frac_part, sign)


# =============================================================================
# DIRTY → NATIVE
# =============================================================================


def dirty_to_native_num_str(dirty_num_str: str, decimal_separator: str = ".") -> str:
    """
    Очистка "dirty" строки до Native Number String.

    Извлекаются цифры и первое вхождение десятичного разделителя. Любой '-'
    или пара "(" до цифр и ")" после цифр делают число отрицательным.
    Остальные символы (валюты, разделители групп, пробелы) игнорируются.

    Args:
        dirty_num_str: Исходная строка (например, "$(1,254.65)")
        decimal_separator: Десятичный разделитель (не содержит '-', '(' и ')')

    Returns:
        Native Number String (например, "-1254.65")

    Raises:
        MalformedNumberStringError: Пустая строка, некорректный разделитель
            или отсутствие цифр

    Examples:
        >>> dirty_to_native_num_str("$1,254.65")
        '1254.65'
        >>> dirty_to_native_num_str("1.254,65 €-", ",")
        '-1254.65'
    """
    if dirty_num_str is None:
        raise MissingValueError("dirty number string is None")
    if not dirty_num_str:
        raise MalformedNumberStringError("dirty number string is empty")
    if not decimal_separator:
        raise MalformedNumberStringError("decimal separator is empty")
    if any(ch in _DIRTY_RESERVED_CHARS for ch in decimal_separator):
        raise MalformedNumberStringError(
            f"decimal separator '{decimal_separator}' must not contain '-', '(' or ')'"
        )
    if any("0" <= ch <= "9" for ch in decimal_separator):
        raise MalformedNumberStringError(
            f"decimal separator '{decimal_separator}' must not contain digits"
        )

    int_digits: list[str] = []
    frac_digits: list[str] = []
    found_separator = False
    found_minus = False
    found_open_paren = False
    found_close_paren = False

    i = 0
    length = len(dirty_num_str)
    while i < length:
        ch = dirty_num_str[i]
        found_digit = bool(int_digits or frac_digits)

        if "0" <= ch <= "9":
            if found_separator:
                frac_digits.append(ch)
            else:
                int_digits.append(ch)
            i += 1
            continue

        if ch == "-":
            found_minus = True
        elif ch == "(" and not found_digit:
            found_open_paren = True
        elif ch == ")" and found_digit:
            found_close_paren = True
        elif not found_separator and dirty_num_str.startswith(decimal_separator, i):
            found_separator = True
            i += len(decimal_separator)
            continue

        i += 1

    if not int_digits and not frac_digits:
        raise MalformedNumberStringError(
            f"dirty number string '{dirty_num_str}' contains no numeric digits"
        )

    is_negative = found_minus or (found_open_paren and found_close_paren)

    native = "".join(int_digits) or "0"
    if frac_digits:
        native += "." + "".join(frac_digits)

    if is_negative and (native.strip("0.") != ""):
        native = "-" + native

    return native


# =============================================================================
# FLOAT / DECIMAL → NATIVE
# =============================================================================


def _trim_native(num_str: str) -> str:
    if "." in num_str:
        num_str = num_str.rstrip("0").rstrip(".")
    if num_str in ("-0", ""):
        return "0"
    return num_str


def float_to_native_num_str(value: float | np.floating) -> str:
    """
    Кратчайшее десятичное представление float без экспоненты.

    Для numpy.float32 используется кратчайшее представление float32.

    Raises:
        MalformedNumberStringError: NaN или бесконечность

    Examples:
        >>> float_to_native_num_str(3.0)
        '3'
        >>> float_to_native_num_str(1e-7)
        '0.0000001'
        >>> float_to_native_num_str(np.float32(0.1))
        '0.1'
    """
    if not np.isfinite(value):
        raise MalformedNumberStringError(f"non-finite float {value!r} has no native number string")
    return _trim_native(np.format_float_positional(value, unique=True, trim="-"))


def decimal_to_native_num_str(value: Decimal) -> str:
    """
    Десятичное представление Decimal без экспоненты и лишних нулей.

    Examples:
        >>> decimal_to_native_num_str(Decimal("1.2500"))
        '1.25'
        >>> decimal_to_native_num_str(Decimal("1E+3"))
        '1000'
    """
    if not value.is_finite():
        raise MalformedNumberStringError(f"non-finite Decimal {value!r} has no native number string")
    return _trim_native(format(value, "f"))


# =============================================================================
# PURE → NATIVE
# =============================================================================


def pure_to_native_num_str(
    pure_num_str: str,
    decimal_separator: str = ".",
    leading_minus_sign: bool = True,
) -> str:
    """
    Pure Number String → Native Number String.

    Значимы только цифры, первое вхождение десятичного разделителя и '-'
    (перед цифрами при leading_minus_sign, иначе после цифр). Прочие
    символы пропускаются.

    Raises:
        MalformedNumberStringError: Пустая строка, пустой разделитель,
            отсутствие цифр

    Examples:
        >>> pure_to_native_num_str("1234,56-", ",", False)
        '-1234.56'
    """
    if pure_num_str is None:
        raise MissingValueError("pure number string is None")
    if not pure_num_str:
        raise MalformedNumberStringError("pure number string is empty")
    if not decimal_separator:
        raise MalformedNumberStringError("decimal separator is empty")

    int_digits: list[str] = []
    frac_digits: list[str] = []
    found_separator = False
    is_negative = False

    i = 0
    while i < len(pure_num_str):
        ch = pure_num_str[i]
        found_digit = bool(int_digits or frac_digits)

        if "0" <= ch <= "9":
            (frac_digits if found_separator else int_digits).append(ch)
        elif not found_separator and pure_num_str.startswith(decimal_separator, i):
            found_separator = True
            i += len(decimal_separator)
            continue
        elif ch == "-" and leading_minus_sign != found_digit:
            is_negative = True

        i += 1

    if not int_digits and not frac_digits:
        raise MalformedNumberStringError(
            f"pure number string '{pure_num_str}' contains no numeric digits"
        )

    native = "".join(int_digits) or "0"
    if frac_digits:
        native += "." + "".join(frac_digits)
    if is_negative and native.strip("0.") != "":
        native = "-" + native
    return native
