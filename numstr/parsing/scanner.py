"""
Number String Scanner — извлечение числа из строки

Сканер проходит целевую строку от начальной позиции и собирает целые и
дробные цифры, определяя знак по шаблонам отрицательного знака и
переключаясь на дробную часть на первом десятичном разделителе.

Порядок проверок в каждой позиции:
1. Терминаторы разбора (только после первой найденной цифры) —
   остановка, терминатор не поглощается
2. Десятичный разделитель (только первое вхождение; до первой цифры —
   только если за ним сразу следует цифра, тогда добавляется целая '0')
3. Шаблоны отрицательного знака (пока знак не найден); завершающий
   шаблон (AFTER, BEFORE_AND_AFTER) останавливает сканирование
4. Цифра '0'-'9' — в текущую (целую или дробную) последовательность
5. Любой другой символ пропускается ("$1,254.65" → 1254.65)

Сканирование останавливается на лимите длины поиска, терминаторе,
завершающем отрицательном знаке или в конце строки.
"""

import logging
from dataclasses import dataclass
from typing import Final, Sequence

from numstr.core.domain.decimal_separator import DecimalSeparatorSpec
from numstr.core.domain.enums import (
    NumericSignValue,
    NumericValueType,
    NumSignSymbolPosition,
    SearchTerminationType,
)
from numstr.core.domain.negative_sign import NegNumSearchSpecCollection
from numstr.core.domain.number_str_kernel import NumberStrKernel
from numstr.core.errors import MalformedNumberStringError, MissingValueError

logger = logging.getLogger(__name__)

# Длина поиска "до конца строки"
SEARCH_TO_END: Final[int] = -1


# =============================================================================
# RESULTS
# =============================================================================


@dataclass(frozen=True)
class NumberStrParseResults:
    """Отчёт одного прохода сканера."""

    found_numeric_digits: bool
    found_non_zero_value: bool
    found_decimal_separator: bool
    found_integer_digits: bool
    found_fractional_digits: bool
    found_negative_sign: bool

    number_sign: NumericSignValue
    value_type: NumericValueType

    # Цифры в том виде, в каком найдены (до рационализации)
    identified_integer_digits: str
    identified_fractional_digits: str

    starting_search_index: int
    last_search_index: int
    next_search_index: int  # -1: строка просмотрена до конца
    termination_reason: SearchTerminationType

    remainder_string: str
    kernel: NumberStrKernel

    def to_dict(self) -> dict:
        """JSON-форма отчёта (контракт number_str_parse_results)."""
        return {
            "found_numeric_digits": self.found_numeric_digits,
            "found_non_zero_value": self.found_non_zero_value,
            "found_decimal_separator": self.found_decimal_separator,
            "found_integer_digits": self.found_integer_digits,
            "found_fractional_digits": self.found_fractional_digits,
            "found_negative_sign": self.found_negative_sign,
            "number_sign": int(self.number_sign.value),
            "value_type": self.value_type.value,
            "identified_integer_digits": self.identified_integer_digits,
            "identified_fractional_digits": self.identified_fractional_digits,
            "starting_search_index": self.starting_search_index,
            "last_search_index": self.last_search_index,
            "next_search_index": self.next_search_index,
            "termination_reason": self.termination_reason.value,
            "remainder_string": self.remainder_string,
            "kernel": self.kernel.to_dict(),
        }


# =============================================================================
# VALIDATION
# =============================================================================


def _validate_scan_inputs(
    target: str,
    start_index: int,
    search_length: int,
    neg_num_specs: NegNumSearchSpecCollection,
    decimal_separator: DecimalSeparatorSpec,
    terminators: Sequence[str],
) -> int:
    """Проверка параметров сканирования. Возвращает конец окна поиска."""
    if target is None:
        raise MissingValueError("target number string is None")
    if not isinstance(target, str):
        raise MalformedNumberStringError(
            f"target number string must be str, got {type(target).__name__}"
        )
    if not target:
        raise MalformedNumberStringError("target number string is empty")

    if start_index < 0 or start_index >= len(target):
        raise MalformedNumberStringError(
            f"start index {start_index} out of range for target length {len(target)}"
        )

    if search_length == SEARCH_TO_END:
        end = len(target)
    elif search_length < 1:
        raise MalformedNumberStringError(
            f"search length must be -1 (to end) or >= 1, got {search_length}"
        )
    else:
        end = min(start_index + search_length, len(target))

    if neg_num_specs is None:
        raise MissingValueError("negative number search specs are None")
    if decimal_separator is None:
        raise MissingValueError("decimal separator spec is None")

    for terminator in terminators:
        if not terminator:
            raise MalformedNumberStringError("parsing terminators must not contain empty strings")

    return end


# =============================================================================
# SCANNER
# =============================================================================


def extract_number_runes(
    target: str,
    neg_num_specs: NegNumSearchSpecCollection,
    decimal_separator: DecimalSeparatorSpec,
    start_index: int = 0,
    search_length: int = SEARCH_TO_END,
    terminators: Sequence[str] = (),
    request_remainder: bool = False,
) -> NumberStrParseResults:
    """
    Извлечение числа из строки.

    Args:
        target: Целевая строка
        neg_num_specs: Шаблоны отрицательного знака (порядок важен)
        decimal_separator: Десятичный разделитель
        start_index: Начальная позиция поиска
        search_length: Количество просматриваемых символов (-1 — до конца)
        terminators: Подстроки, прекращающие разбор после первой цифры
        request_remainder: Вернуть непросмотренный остаток строки

    Returns:
        NumberStrParseResults; если цифры не найдены — found_numeric_digits
        False, пустой kernel и остаток, равный всей строке

    Raises:
        MissingValueError: target, спецификации знака или разделителя — None
        MalformedNumberStringError: Пустая строка, позиция или длина поиска
            вне диапазона, пустой терминатор

    Examples:
        >>> from numstr.parsing.conventions import US_CONVENTION
        >>> res = extract_number_runes("$(1,254.65)", US_CONVENTION.neg_num_specs(),
        ...                            US_CONVENTION.decimal_separator_spec())
        >>> str(res.kernel)
        '-1254.65'
    """
    end = _validate_scan_inputs(
        target, start_index, search_length, neg_num_specs, decimal_separator, terminators
    )

    window = target[:end]
    searcher = neg_num_specs.new_searcher()
    kernel = NumberStrKernel()

    found_numeric = False
    found_non_zero = False
    found_separator = False
    found_integer = False
    found_fractional = False
    found_negative = False

    termination: SearchTerminationType | None = None
    next_index = end

    i = start_index
    while i < end:
        ch = window[i]

        # 1. Терминаторы
        if found_numeric and terminators:
            matched_terminator = next((t for t in terminators if window.startswith(t, i)), None)
            if matched_terminator is not None:
                termination = SearchTerminationType.TERMINATION_DELIMITERS
                next_index = i
                logger.debug("Scan of '%s' stopped by terminator '%s' at %d", target, matched_terminator, i)
                break

        # 2. Десятичный разделитель
        if not found_separator and decimal_separator.matches_at(window, i):
            after = i + len(decimal_separator)
            if found_numeric:
                found_separator = True
                i = after
                continue
            if after < end and "0" <= window[after] <= "9":
                found_separator = True
                kernel.add_integer_digit("0")
                found_numeric = True
                found_integer = True
                i = after
                continue

        # 3. Отрицательный знак
        if not found_negative:
            match = searcher.search(window, i, found_numeric)
            if match.matched:
                i += match.consumed_chars
                if match.is_negative:
                    found_negative = True
                    if match.position in (
                        NumSignSymbolPosition.AFTER,
                        NumSignSymbolPosition.BEFORE_AND_AFTER,
                    ):
                        termination = SearchTerminationType.NEGATIVE_SIGN_FOUND
                        next_index = i
                        logger.debug("Scan of '%s' stopped by trailing negative sign at %d", target, i)
                        break
                continue

        # 4. Цифры
        if "0" <= ch <= "9":
            found_numeric = True
            if ch != "0":
                found_non_zero = True
            if found_separator:
                kernel.add_fractional_digit(ch)
                found_fractional = True
            else:
                kernel.add_integer_digit(ch)
                found_integer = True

        # 5. Прочие символы пропускаются
        i += 1

    if termination is None:
        if end < len(target):
            termination = SearchTerminationType.SEARCH_LENGTH_LIMIT
        else:
            termination = SearchTerminationType.END_OF_TARGET_STRING
        next_index = end

    if next_index >= len(target):
        next_index = -1
        last_index = len(target) - 1
    else:
        last_index = next_index - 1

    identified_int = kernel.get_integer_string()
    identified_frac = kernel.get_fractional_string()

    if not found_numeric:
        kernel.empty()
        logger.debug("No numeric digits found in '%s'", target)
        return NumberStrParseResults(
            found_numeric_digits=False,
            found_non_zero_value=False,
            found_decimal_separator=found_separator,
            found_integer_digits=False,
            found_fractional_digits=False,
            found_negative_sign=found_negative,
            number_sign=NumericSignValue.ZERO,
            value_type=NumericValueType.NONE,
            identified_integer_digits="",
            identified_fractional_digits="",
            starting_search_index=start_index,
            last_search_index=last_index,
            next_search_index=next_index,
            termination_reason=termination,
            remainder_string=target,
            kernel=kernel,
        )

    kernel.rationalize_fractional_integer_digits()

    if not found_non_zero:
        number_sign = NumericSignValue.ZERO
    elif found_negative:
        number_sign = NumericSignValue.NEGATIVE
    else:
        number_sign = NumericSignValue.POSITIVE
    kernel.set_number_sign(number_sign)

    remainder = ""
    if request_remainder and next_index != -1:
        remainder = target[next_index:]

    value_type = (
        NumericValueType.FLOATING_POINT if found_fractional else NumericValueType.INTEGER
    )

    logger.debug(
        "Scanned '%s' → '%s' (%s, %s)",
        target,
        kernel.to_native_num_str(),
        value_type.value,
        termination.value,
    )

    return NumberStrParseResults(
        found_numeric_digits=True,
        found_non_zero_value=found_non_zero,
        found_decimal_separator=found_separator,
        found_integer_digits=found_integer,
        found_fractional_digits=found_fractional,
        found_negative_sign=found_negative,
        number_sign=number_sign,
        value_type=value_type,
        identified_integer_digits=identified_int,
        identified_fractional_digits=identified_frac,
        starting_search_index=start_index,
        last_search_index=last_index,
        next_search_index=next_index,
        termination_reason=termination,
        remainder_string=remainder,
        kernel=kernel,
    )
