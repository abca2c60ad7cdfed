"""
Enums — перечисления домена числовых строк

Перечисления не содержат "невалидных" sentinel-значений: недопустимый ввод
отвергается с InvalidEnumValueError при конструировании.
"""

from enum import Enum

from numstr.core.errors import InvalidEnumValueError


# =============================================================================
# NUMBER SIGN
# =============================================================================


class NumericSignValue(int, Enum):
    """Знак числа: -1, 0, +1"""

    NEGATIVE = -1
    ZERO = 0
    POSITIVE = 1

    @classmethod
    def from_int(cls, value: int) -> "NumericSignValue":
        """
        Конструирование знака из целого числа.

        Raises:
            InvalidEnumValueError: Если value не равно -1, 0 или 1
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidEnumValueError(
                f"number sign must be an int in (-1, 0, 1), got {value!r}"
            )
        try:
            return cls(value)
        except ValueError as err:
            raise InvalidEnumValueError(
                f"number sign must be one of -1, 0, 1, got {value}"
            ) from err


# =============================================================================
# NUMERIC VALUE TYPE
# =============================================================================


class NumericValueType(str, Enum):
    """Классификация значения: целое или с плавающей точкой"""

    NONE = "none"  # Цифры не найдены
    INTEGER = "integer"
    FLOATING_POINT = "floating_point"


# =============================================================================
# ROUNDING TYPE
# =============================================================================


class NumberRoundingType(str, Enum):
    """
    Политика округления.

    Значения совпадают с каноническими именами политик, что позволяет
    разбирать их из конфигурации и пользовательского ввода.
    """

    NO_ROUNDING = "NoRounding"
    HALF_UP_WITH_NEG_NUMS = "HalfUpWithNegNums"
    HALF_DOWN_WITH_NEG_NUMS = "HalfDownWithNegNums"
    HALF_AWAY_FROM_ZERO = "HalfAwayFromZero"
    HALF_TOWARDS_ZERO = "HalfTowardsZero"
    HALF_TO_EVEN = "HalfToEven"
    HALF_TO_ODD = "HalfToOdd"
    RANDOMLY = "Randomly"
    FLOOR = "Floor"
    CEILING = "Ceiling"
    TRUNCATE = "Truncate"

    @classmethod
    def default(cls) -> "NumberRoundingType":
        """Политика по умолчанию: HalfAwayFromZero"""
        return cls.HALF_AWAY_FROM_ZERO

    @classmethod
    def parse(cls, name: str, case_sensitive: bool = True) -> "NumberRoundingType":
        """
        Разбор политики округления по имени.

        Принимаются как канонические имена ("HalfAwayFromZero"), так и имена
        членов перечисления ("HALF_AWAY_FROM_ZERO").

        Args:
            name: Имя политики
            case_sensitive: Учитывать ли регистр

        Returns:
            Член перечисления

        Raises:
            InvalidEnumValueError: Если имя не распознано

        Examples:
            >>> NumberRoundingType.parse("halfToEven", case_sensitive=False)
            <NumberRoundingType.HALF_TO_EVEN: 'HalfToEven'>
        """
        if not isinstance(name, str) or not name:
            raise InvalidEnumValueError(
                f"rounding type name must be a non-empty str, got {name!r}"
            )

        for member in cls:
            if case_sensitive:
                if name in (member.value, member.name):
                    return member
            elif name.lower() in (member.value.lower(), member.name.lower()):
                return member

        raise InvalidEnumValueError(f"unknown rounding type name '{name}'")

    @classmethod
    def coerce(cls, value: "NumberRoundingType | str") -> "NumberRoundingType":
        """Приведение члена перечисления или имени политики к NumberRoundingType."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls.parse(value)
        raise InvalidEnumValueError(f"invalid rounding type {value!r}")


# =============================================================================
# NEGATIVE SIGN POSITION
# =============================================================================


class NumSignSymbolPosition(str, Enum):
    """Положение символов отрицательного знака относительно цифр"""

    BEFORE = "before"  # "-123"
    AFTER = "after"  # "123-"
    BEFORE_AND_AFTER = "before_and_after"  # "(123)"


# =============================================================================
# SCIENTIFIC NOTATION FORMAT
# =============================================================================


class SciNotationFormat(str, Enum):
    """Формат вывода научной нотации"""

    EXPONENTIAL = "exponential"  # 2.652 x 10^8
    E_NOT_UPPER_LEAD_PLUS = "e_not_upper_lead_plus"  # 2.652E+8
    E_NOT_UPPER_NO_LEAD_PLUS = "e_not_upper_no_lead_plus"  # 2.652E8
    E_NOT_LOWER_LEAD_PLUS = "e_not_lower_lead_plus"  # 2.652e+8
    E_NOT_LOWER_NO_LEAD_PLUS = "e_not_lower_no_lead_plus"  # 2.652e8


# =============================================================================
# SEARCH TERMINATION
# =============================================================================


class SearchTerminationType(str, Enum):
    """Причина остановки сканера"""

    END_OF_TARGET_STRING = "end_of_target_string"
    SEARCH_LENGTH_LIMIT = "search_length_limit"
    TERMINATION_DELIMITERS = "termination_delimiters"
    NEGATIVE_SIGN_FOUND = "negative_sign_found"
