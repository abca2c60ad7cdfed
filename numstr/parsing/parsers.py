"""
Parsers — разбор числовых строк в NumberStrKernel

Режимы разбора:
- custom: произвольные шаблоны отрицательного знака и разделитель
- US / French / German: фиксированные конвенции (см. conventions)
- native: строгий канонический формат [-]digits[.digits]
- dirty: любой национальный формат (валюты, группы, "()" и '-')
- pure: цифры, один разделитель, один минус в заданной позиции

Все режимы, кроме custom/US/French/German, требуют хотя бы одну цифру.
Результат создаётся заново; при ошибке kernel вызывающего кода не меняется.
"""

import logging
from typing import Sequence

from numstr.core.config import ScannerConfig
from numstr.core.domain.decimal_separator import DecimalSeparatorSpec
from numstr.core.domain.enums import NumberRoundingType
from numstr.core.domain.negative_sign import NegNumSearchSpecCollection
from numstr.core.domain.number_str_kernel import NumberStrKernel
from numstr.core.domain.stats import NumberStrStatsDto
from numstr.core.errors import MissingValueError
from numstr.core.math.native_num_str import (
    dirty_to_native_num_str,
    pure_to_native_num_str,
    split_native_num_str,
)
from numstr.parsing.conventions import (
    FRENCH_CONVENTION,
    GERMAN_CONVENTION,
    US_CONVENTION,
    NumStrConvention,
)
from numstr.parsing.scanner import SEARCH_TO_END, NumberStrParseResults, extract_number_runes

logger = logging.getLogger(__name__)


# =============================================================================
# SCANNER-BASED PARSERS
# =============================================================================


def parse_custom_number_str(
    raw_num_str: str,
    neg_num_specs: NegNumSearchSpecCollection,
    decimal_separator: DecimalSeparatorSpec,
    start_index: int = 0,
    search_length: int = SEARCH_TO_END,
    terminators: Sequence[str] | None = None,
    request_remainder: bool | None = None,
    config: ScannerConfig | None = None,
) -> tuple[NumberStrParseResults, NumberStrKernel]:
    """
    Разбор строки с пользовательскими шаблонами знака и разделителем.

    Args:
        raw_num_str: Исходная строка
        neg_num_specs: Шаблоны отрицательного знака
        decimal_separator: Десятичный разделитель
        start_index: Начальная позиция поиска
        search_length: Количество просматриваемых символов (-1 — до конца)
        terminators: Терминаторы разбора (default: из config)
        request_remainder: Вернуть остаток строки (default: из config)
        config: Параметры сканера по умолчанию

    Returns:
        (отчёт сканера, копия найденного kernel)
    """
    config = config or ScannerConfig()
    if terminators is None:
        terminators = config.parsing_terminators
    if request_remainder is None:
        request_remainder = config.request_remainder

    results = extract_number_runes(
        raw_num_str,
        neg_num_specs,
        decimal_separator,
        start_index=start_index,
        search_length=search_length,
        terminators=tuple(terminators),
        request_remainder=request_remainder,
    )
    return results, results.kernel.copy()


def _parse_with_convention(
    convention: NumStrConvention,
    raw_num_str: str,
    start_index: int,
    search_length: int,
    terminators: Sequence[str] | None,
    request_remainder: bool | None,
    config: ScannerConfig | None,
) -> tuple[NumberStrParseResults, NumberStrKernel]:
    results, kernel = parse_custom_number_str(
        raw_num_str,
        convention.neg_num_specs(),
        convention.decimal_separator_spec(),
        start_index=start_index,
        search_length=search_length,
        terminators=terminators,
        request_remainder=request_remainder,
        config=config,
    )
    logger.debug("%s parse of '%s' → '%s'", convention.name, raw_num_str, kernel)
    return results, kernel


def parse_us_number_str(
    raw_num_str: str,
    start_index: int = 0,
    search_length: int = SEARCH_TO_END,
    terminators: Sequence[str] | None = None,
    request_remainder: bool | None = None,
    config: ScannerConfig | None = None,
) -> tuple[NumberStrParseResults, NumberStrKernel]:
    """
    Разбор по US конвенции: "(1,234.56)" → -1234.56.
    """
    return _parse_with_convention(
        US_CONVENTION, raw_num_str, start_index, search_length, terminators, request_remainder, config
    )


def parse_french_number_str(
    raw_num_str: str,
    start_index: int = 0,
    search_length: int = SEARCH_TO_END,
    terminators: Sequence[str] | None = None,
    request_remainder: bool | None = None,
    config: ScannerConfig | None = None,
) -> tuple[NumberStrParseResults, NumberStrKernel]:
    """
    Разбор по French конвенции: "-1 234,56" → -1234.56.
    """
    return _parse_with_convention(
        FRENCH_CONVENTION, raw_num_str, start_index, search_length, terminators, request_remainder, config
    )


def parse_german_number_str(
    raw_num_str: str,
    start_index: int = 0,
    search_length: int = SEARCH_TO_END,
    terminators: Sequence[str] | None = None,
    request_remainder: bool | None = None,
    config: ScannerConfig | None = None,
) -> tuple[NumberStrParseResults, NumberStrKernel]:
    """
    Разбор по German конвенции: "1.234,56-" → -1234.56.
    """
    return _parse_with_convention(
        GERMAN_CONVENTION, raw_num_str, start_index, search_length, terminators, request_remainder, config
    )


# =============================================================================
# NATIVE / DIRTY / PURE
# =============================================================================


def _finish(
    kernel: NumberStrKernel,
    rounding_type: NumberRoundingType | str,
    round_to_fractional_digits: int,
) -> tuple[NumberStrKernel, NumberStrStatsDto]:
    kernel.rationalize_fractional_integer_digits()
    kernel.round(rounding_type, round_to_fractional_digits)
    return kernel, kernel.get_numeric_value_stats()


def parse_native_number_str(
    native_num_str: str,
    rounding_type: NumberRoundingType | str = NumberRoundingType.NO_ROUNDING,
    round_to_fractional_digits: int = 0,
) -> tuple[NumberStrKernel, NumberStrStatsDto]:
    """
    Разбор Native Number String с необязательным округлением.

    Raises:
        MalformedNumberStringError: Строка не соответствует native формату

    Examples:
        >>> str(parse_native_number_str("-123.456", "HalfAwayFromZero", 2)[0])
        '-123.46'
    """
    int_part, frac_part, sign = split_native_num_str(native_num_str)
    kernel = NumberStrKernel.from_string_digits(int_part, frac_part, sign)
    return _finish(kernel, rounding_type, round_to_fractional_digits)


def parse_dirty_number_str(
    dirty_num_str: str,
    decimal_separator: str = ".",
    rounding_type: NumberRoundingType | str = NumberRoundingType.NO_ROUNDING,
    round_to_fractional_digits: int = 0,
) -> tuple[NumberStrKernel, NumberStrStatsDto]:
    """
    Разбор "dirty" строки: "$(1,254.65)" → -1254.65.

    Raises:
        MalformedNumberStringError: Пустая строка, некорректный разделитель
            или отсутствие цифр
    """
    native = dirty_to_native_num_str(dirty_num_str, decimal_separator)
    logger.debug("Dirty number string '%s' cleaned to '%s'", dirty_num_str, native)
    return parse_native_number_str(native, rounding_type, round_to_fractional_digits)


def set_from_dirty_number_str(
    kernel: NumberStrKernel,
    dirty_num_str: str,
    decimal_separator: str = ".",
    rounding_type: NumberRoundingType | str = NumberRoundingType.NO_ROUNDING,
    round_to_fractional_digits: int = 0,
) -> NumberStrStatsDto:
    """Заменить содержимое kernel результатом разбора dirty строки."""
    if kernel is None:
        raise MissingValueError("target kernel is None")
    parsed, stats = parse_dirty_number_str(
        dirty_num_str, decimal_separator, rounding_type, round_to_fractional_digits
    )
    kernel.copy_in(parsed)
    return stats


def parse_pure_number_str(
    pure_num_str: str,
    decimal_separator: str = ".",
    leading_minus_sign: bool = True,
    rounding_type: NumberRoundingType | str = NumberRoundingType.NO_ROUNDING,
    round_to_fractional_digits: int = 0,
) -> tuple[NumberStrKernel, NumberStrStatsDto]:
    """
    Разбор Pure Number String.

    Значимы только цифры, первое вхождение десятичного разделителя и '-'
    (перед цифрами при leading_minus_sign, иначе после цифр). Прочие
    символы пропускаются.

    Args:
        pure_num_str: Исходная строка ("1234,56-")
        decimal_separator: Десятичный разделитель
        leading_minus_sign: Минус перед числом (True) или после (False)
        rounding_type: Политика округления результата
        round_to_fractional_digits: Целевое количество дробных цифр

    Raises:
        MalformedNumberStringError: Пустая строка, пустой разделитель,
            отсутствие цифр
    """
    native = pure_to_native_num_str(pure_num_str, decimal_separator, leading_minus_sign)
    return parse_native_number_str(native, rounding_type, round_to_fractional_digits)
