"""
Rounding Engine — округление цифровых последовательностей

Округление значения, заданного строками целых и дробных цифр и знаком,
до заданного количества дробных цифр.

Политики (пример: округление до 0 дробных цифр):

    Policy               7.6  7.5  7.4  -7.4  -7.5  -7.6
    HalfUpWithNegNums     8    8    7    -7    -7    -8
    HalfDownWithNegNums   8    7    7    -7    -8    -8
    HalfAwayFromZero      8    8    7    -7    -8    -8
    HalfTowardsZero       8    7    7    -7    -7    -8

    HalfToEven: 7.5 → 8, 6.5 → 6     HalfToOdd: 7.5 → 7, 6.5 → 7
    Floor: 2.4 → 2, -2.5 → -3        Ceiling: 2.4 → 3, -2.5 → -2
    Truncate: 23.14567 → 23.14 (2 цифры), -23.14 → -23.14
    Randomly: только ровно на половине, честная монетка

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. "Ровно половина" — round-from цифра '5', за которой только нули;
   больше/меньше половины решается по всему отбрасываемому хвосту
2. Инкремент всегда по модулю (от нуля) с переносом через дробную часть
   в целую; целая часть может удлиниться на одну цифру (9.95 → 10.0)
3. Если дробных цифр не больше n — только дополнение нулями до n
4. NoRounding ничего не меняет
"""

import logging
import random
from typing import Final

from numstr.core.domain.enums import NumberRoundingType
from numstr.core.errors import InvalidEnumValueError, MalformedNumberStringError

logger = logging.getLogger(__name__)

# Сравнение отбрасываемого хвоста с половиной
_BELOW_HALF: Final[int] = -1
_EXACT_HALF: Final[int] = 0
_ABOVE_HALF: Final[int] = 1


# =============================================================================
# HELPERS
# =============================================================================


def compare_tail_to_half(tail: str) -> int:
    """
    Сравнение отбрасываемого хвоста дробных цифр с половиной единицы
    последнего сохраняемого разряда.

    Args:
        tail: Отбрасываемые цифры, начиная с round-from цифры (непустые)

    Returns:
        -1 (меньше половины), 0 (ровно половина), 1 (больше половины)

    Examples:
        >>> compare_tail_to_half("5")
        0
        >>> compare_tail_to_half("500")
        0
        >>> compare_tail_to_half("501")
        1
        >>> compare_tail_to_half("49")
        -1
    """
    if not tail:
        raise MalformedNumberStringError("tail must contain at least one digit")

    round_from = tail[0]
    if round_from > "5":
        return _ABOVE_HALF
    if round_from < "5":
        return _BELOW_HALF
    if tail[1:].strip("0"):
        return _ABOVE_HALF
    return _EXACT_HALF


def increment_digits(digits: str) -> str:
    """
    Прибавление единицы к младшему разряду десятичной строки с переносом.

    Examples:
        >>> increment_digits("199")
        '200'
        >>> increment_digits("999")
        '1000'
        >>> increment_digits("")
        '1'
    """
    chars = list(digits)
    pos = len(chars) - 1

    while pos >= 0:
        if chars[pos] == "9":
            chars[pos] = "0"
            pos -= 1
            continue
        chars[pos] = chr(ord(chars[pos]) + 1)
        return "".join(chars)

    return "1" + "".join(chars)


def _should_increment(
    rounding_type: NumberRoundingType,
    half_cmp: int,
    tail_is_non_zero: bool,
    is_negative: bool,
    last_kept_digit: str,
    rng: random.Random | None,
) -> bool:
    """Нужно ли увеличить модуль значения на единицу последнего разряда."""
    if rounding_type == NumberRoundingType.TRUNCATE:
        return False

    if rounding_type == NumberRoundingType.FLOOR:
        # К -∞: для отрицательных увеличиваем модуль
        return is_negative and tail_is_non_zero

    if rounding_type == NumberRoundingType.CEILING:
        # К +∞: для положительных увеличиваем модуль
        return not is_negative and tail_is_non_zero

    if half_cmp == _ABOVE_HALF:
        return True
    if half_cmp == _BELOW_HALF:
        return False

    # Ровно половина
    if rounding_type == NumberRoundingType.HALF_AWAY_FROM_ZERO:
        return True
    if rounding_type == NumberRoundingType.HALF_TOWARDS_ZERO:
        return False
    if rounding_type == NumberRoundingType.HALF_UP_WITH_NEG_NUMS:
        return not is_negative
    if rounding_type == NumberRoundingType.HALF_DOWN_WITH_NEG_NUMS:
        return is_negative
    if rounding_type == NumberRoundingType.HALF_TO_EVEN:
        return int(last_kept_digit) % 2 == 1
    if rounding_type == NumberRoundingType.HALF_TO_ODD:
        return int(last_kept_digit) % 2 == 0
    if rounding_type == NumberRoundingType.RANDOMLY:
        return (rng or random).randint(0, 1) == 1

    raise InvalidEnumValueError(f"unhandled rounding type {rounding_type!r}")


# =============================================================================
# ROUNDING
# =============================================================================


def round_digits(
    integer_digits: str,
    fractional_digits: str,
    is_negative: bool,
    rounding_type: NumberRoundingType,
    round_to_fractional_digits: int,
    rng: random.Random | None = None,
) -> tuple[str, str]:
    """
    Округление значения до round_to_fractional_digits дробных цифр.

    Args:
        integer_digits: Целые цифры (только '0'-'9', могут быть пустыми)
        fractional_digits: Дробные цифры (только '0'-'9', могут быть пустыми)
        is_negative: Отрицательное ли значение
        rounding_type: Политика округления
        round_to_fractional_digits: Целевое количество дробных цифр (>= 0)
        rng: Источник случайности для Randomly (default: модуль random)

    Returns:
        (integer_digits, fractional_digits) после округления

    Raises:
        MalformedNumberStringError: Если round_to_fractional_digits < 0

    Examples:
        >>> round_digits("9", "95", False, NumberRoundingType.HALF_AWAY_FROM_ZERO, 1)
        ('10', '0')
        >>> round_digits("7", "5", True, NumberRoundingType.HALF_UP_WITH_NEG_NUMS, 0)
        ('7', '')
    """
    if rounding_type == NumberRoundingType.NO_ROUNDING:
        return integer_digits, fractional_digits

    if round_to_fractional_digits < 0:
        raise MalformedNumberStringError(
            f"round_to_fractional_digits must be >= 0, got {round_to_fractional_digits}"
        )

    n = round_to_fractional_digits
    if len(fractional_digits) <= n:
        return integer_digits, fractional_digits + "0" * (n - len(fractional_digits))

    kept = fractional_digits[:n]
    tail = fractional_digits[n:]

    if kept:
        last_kept_digit = kept[-1]
    elif integer_digits:
        last_kept_digit = integer_digits[-1]
    else:
        last_kept_digit = "0"

    increment = _should_increment(
        rounding_type=rounding_type,
        half_cmp=compare_tail_to_half(tail),
        tail_is_non_zero=bool(tail.strip("0")),
        is_negative=is_negative,
        last_kept_digit=last_kept_digit,
        rng=rng,
    )

    logger.debug(
        "Rounding %s%s.%s to %d digits with %s: increment=%s",
        "-" if is_negative else "",
        integer_digits,
        fractional_digits,
        n,
        rounding_type.value,
        increment,
    )

    if not increment:
        return integer_digits, kept

    combined = increment_digits(integer_digits + kept)
    if n == 0:
        return combined, ""
    return combined[:-n], combined[-n:]
