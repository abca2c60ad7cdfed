"""
Numeric Dispatch — конверсия числовых значений в/из числовых строк

MathHelper переводит значения из закрытого списка поддерживаемых типов в
Native/Pure Number String, NumberStrKernel и обратно.

Поддерживаемые типы:
- int (произвольной точности)
- float (float64)
- decimal.Decimal (число с плавающей точкой произвольной точности)
- fractions.Fraction (рациональное число произвольной точности)
- numpy: int8, int16, int32, int64, uint8, uint16, uint32, uint64,
  float32, float64
- BigFloatDto, FloatFieldFormat, BigFloatFieldFormat
- NumberStrKernel

bool и любые другие типы отвергаются с UnsupportedTypeError,
None — с MissingValueError.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат *_to_native_num_str всегда соответствует native формату
2. Fixed-width целевые типы проверяются на диапазон (NumericRangeError)
3. Fraction округляется политикой config.default_rounding_type
   (default: half-away-from-zero) до заданного числа дробных цифр
4. Kernel вызывающего кода никогда не изменяется (работа с копией)
"""

import logging
from decimal import Decimal
from fractions import Fraction
from typing import Any, Final

import numpy as np

from numstr.core.config import ConversionConfig
from numstr.core.domain.enums import NumberRoundingType
from numstr.core.domain.field_formats import BigFloatDto, BigFloatFieldFormat, FloatFieldFormat
from numstr.core.domain.number_str_kernel import NumberStrKernel
from numstr.core.domain.stats import NumberStrStatsDto
from numstr.core.errors import (
    MalformedNumberStringError,
    MissingValueError,
    NumericRangeError,
    UnsupportedTypeError,
)
from numstr.core.math.native_num_str import (
    decimal_to_native_num_str,
    float_to_native_num_str,
    pure_to_native_num_str,
    split_native_num_str,
    validate_native_num_str,
)
from numstr.core.math.rounding import round_digits

logger = logging.getLogger(__name__)


# =============================================================================
# SUPPORTED TYPES
# =============================================================================

NUMPY_INTEGER_TYPES: Final[tuple[type, ...]] = (
    np.int8,
    np.int16,
    np.int32,
    np.int64,
    np.uint8,
    np.uint16,
    np.uint32,
    np.uint64,
)

NUMPY_FLOAT_TYPES: Final[tuple[type, ...]] = (np.float32, np.float64)

FIELD_FORMAT_TYPES: Final[tuple[type, ...]] = (BigFloatDto, FloatFieldFormat, BigFloatFieldFormat)

SUPPORTED_NUMERIC_TYPES: Final[tuple[type, ...]] = (
    int,
    float,
    Decimal,
    Fraction,
    *NUMPY_INTEGER_TYPES,
    *NUMPY_FLOAT_TYPES,
    *FIELD_FORMAT_TYPES,
    NumberStrKernel,
)

INTEGER_TARGET_TYPES: Final[tuple[type, ...]] = (int, *NUMPY_INTEGER_TYPES)


def _is_rejected_type(value_type: type) -> bool:
    return issubclass(value_type, (bool, np.bool_))


# =============================================================================
# FRACTION HELPERS
# =============================================================================


def big_rat_to_native_num_str(
    value: Fraction,
    round_to_fractional_digits: int,
    rounding_type: NumberRoundingType = NumberRoundingType.HALF_AWAY_FROM_ZERO,
) -> str:
    """
    Fraction → Native Number String ровно с round_to_fractional_digits
    дробными цифрами.

    Бесконечное десятичное разложение обрезается до n + 1 цифр; ненулевой
    остаток деления отмечается лишней цифрой '1' в отбрасываемом хвосте,
    поэтому "ровно половина" определяется точно. NoRounding для Fraction
    означает отбрасывание хвоста.

    Examples:
        >>> big_rat_to_native_num_str(Fraction(1, 3), 10)
        '0.3333333333'
        >>> big_rat_to_native_num_str(Fraction(-5, 8), 2)
        '-0.63'
        >>> big_rat_to_native_num_str(Fraction(-1, 3), 2, NumberRoundingType.FLOOR)
        '-0.34'
    """
    if round_to_fractional_digits < 0:
        raise MalformedNumberStringError(
            f"round_to_fractional_digits must be >= 0, got {round_to_fractional_digits}"
        )

    n = round_to_fractional_digits
    quotient, remainder = divmod(abs(value.numerator) * 10 ** (n + 1), value.denominator)
    digits = str(quotient).rjust(n + 2, "0")
    int_part, frac_part = digits[: -(n + 1)], digits[-(n + 1):]
    if remainder:
        frac_part += "1"

    rounding_type = NumberRoundingType.coerce(rounding_type)
    if rounding_type == NumberRoundingType.NO_ROUNDING:
        rounding_type = NumberRoundingType.TRUNCATE

    int_part, frac_part = round_digits(int_part, frac_part, value < 0, rounding_type, n)

    native = int_part.lstrip("0") or "0"
    if frac_part:
        native += "." + frac_part
    if value < 0 and (int_part + frac_part).strip("0"):
        native = "-" + native
    return native


# =============================================================================
# MATH HELPER
# =============================================================================


class MathHelper:
    """
    Диспетчер конверсий числовых значений.

    Один код на каждый поддерживаемый тип; неподдерживаемый тип —
    UnsupportedTypeError с именем типа.
    """

    def __init__(self, config: ConversionConfig | None = None):
        """
        Инициализация.

        Args:
            config: Параметры конверсии (default: ConversionConfig())
        """
        self.config = config or ConversionConfig()

    # -------------------------------------------------------------------------
    # Value → string
    # -------------------------------------------------------------------------

    def numeric_value_to_native_num_str(self, value: Any) -> str:
        """
        Числовое значение → Native Number String.

        Float выводится в кратчайшем десятичном виде без экспоненты,
        Fraction — с config.big_rat_fractional_digits дробными цифрами без
        завершающих нулей.

        Raises:
            MissingValueError: value is None
            UnsupportedTypeError: Тип вне списка поддерживаемых
            MalformedNumberStringError: NaN или бесконечность

        Examples:
            >>> MathHelper().numeric_value_to_native_num_str(np.uint8(255))
            '255'
            >>> MathHelper().numeric_value_to_native_num_str(-12.5)
            '-12.5'
        """
        context = "numeric_value_to_native_num_str"
        if value is None:
            raise MissingValueError(f"{context}: numeric value is None")

        value_type = type(value)
        if _is_rejected_type(value_type):
            raise UnsupportedTypeError(context, value_type.__name__)

        if value_type in NUMPY_INTEGER_TYPES:
            return str(int(value))
        if value_type in NUMPY_FLOAT_TYPES:
            return float_to_native_num_str(value)
        if isinstance(value, int):
            return str(value)
        if isinstance(value, float):
            return float_to_native_num_str(value)
        if isinstance(value, Decimal):
            return decimal_to_native_num_str(value)
        if isinstance(value, Fraction):
            native = big_rat_to_native_num_str(
                value, self.config.big_rat_fractional_digits, self.config.default_rounding_type
            )
            int_part, frac_part, sign = split_native_num_str(native)
            return NumberStrKernel.from_string_digits(
                int_part, frac_part.rstrip("0"), sign
            ).to_native_num_str()
        if isinstance(value, FIELD_FORMAT_TYPES):
            return value.fmt_num_str_native()
        if isinstance(value, NumberStrKernel):
            return value.to_native_num_str()

        raise UnsupportedTypeError(context, value_type.__name__)

    def numeric_value_to_pure_num_str(
        self,
        value: Any,
        decimal_separator: str = ".",
        leading_minus_sign: bool = True,
    ) -> str:
        """
        Числовое значение → Pure Number String.

        Examples:
            >>> MathHelper().numeric_value_to_pure_num_str(-1234.5, ",", False)
            '1234,5-'
        """
        if not decimal_separator:
            raise MalformedNumberStringError("decimal separator is empty")
        kernel = self._native_to_kernel(self.numeric_value_to_native_num_str(value))
        return kernel.to_pure_num_str(decimal_separator, leading_minus_sign)

    # -------------------------------------------------------------------------
    # String → value
    # -------------------------------------------------------------------------

    def native_num_str_to_numeric_value(self, native_num_str: str, target_type: type) -> Any:
        """
        Native Number String → значение типа target_type.

        Args:
            native_num_str: Строка в native формате
            target_type: Тип результата из списка поддерживаемых

        Returns:
            Значение типа target_type

        Raises:
            MissingValueError: Строка или target_type — None
            MalformedNumberStringError: Строка не в native формате или содержит
                дробную часть при целочисленном target_type
            NumericRangeError: Значение вне диапазона fixed-width типа
            UnsupportedTypeError: target_type вне списка поддерживаемых
        """
        context = "native_num_str_to_numeric_value"
        if target_type is None:
            raise MissingValueError(f"{context}: target type is None")
        if not isinstance(target_type, type) or _is_rejected_type(target_type) or target_type not in SUPPORTED_NUMERIC_TYPES:
            raise UnsupportedTypeError(context, getattr(target_type, "__name__", repr(target_type)))

        validate_native_num_str(native_num_str)
        logger.debug("Converting '%s' to %s", native_num_str, target_type.__name__)

        if target_type in INTEGER_TARGET_TYPES:
            if "." in native_num_str:
                raise MalformedNumberStringError(
                    f"{context}: '{native_num_str}' is not an integer number string "
                    f"for target type {target_type.__name__}"
                )
            int_value = int(native_num_str)
            if target_type is int:
                return int_value
            info = np.iinfo(target_type)
            if int_value < info.min or int_value > info.max:
                raise NumericRangeError(
                    f"{context}: value {native_num_str} out of range for "
                    f"{target_type.__name__} [{info.min}, {info.max}]"
                )
            return target_type(int_value)

        if target_type in (float, np.float64, np.float32):
            limit = Decimal(str(np.finfo(np.float32 if target_type is np.float32 else np.float64).max))
            if abs(Decimal(native_num_str)) > limit:
                raise NumericRangeError(
                    f"{context}: value {native_num_str} out of range for {target_type.__name__}"
                )
            if target_type is float:
                return float(native_num_str)
            return target_type(native_num_str)

        if target_type is Decimal:
            return Decimal(native_num_str)
        if target_type is Fraction:
            return Fraction(native_num_str)
        if target_type is BigFloatDto:
            return BigFloatDto(value=Decimal(native_num_str), num_str=native_num_str)
        if target_type is FloatFieldFormat:
            return FloatFieldFormat(
                float_num=self.native_num_str_to_numeric_value(native_num_str, float)
            )
        if target_type is BigFloatFieldFormat:
            return BigFloatFieldFormat(big_float_num=Decimal(native_num_str))

        # NumberStrKernel
        return self._native_to_kernel(native_num_str)

    def pure_num_str_to_numeric_value(
        self,
        pure_num_str: str,
        target_type: type,
        decimal_separator: str = ".",
        leading_minus_sign: bool = True,
    ) -> Any:
        """Pure Number String → значение типа target_type."""
        native = pure_to_native_num_str(pure_num_str, decimal_separator, leading_minus_sign)
        return self.native_num_str_to_numeric_value(native, target_type)

    # -------------------------------------------------------------------------
    # Kernel
    # -------------------------------------------------------------------------

    @staticmethod
    def _native_to_kernel(native_num_str: str) -> NumberStrKernel:
        int_part, frac_part, sign = split_native_num_str(native_num_str)
        return NumberStrKernel.from_string_digits(int_part, frac_part, sign)

    def big_rat_to_kernel(
        self,
        value: Fraction,
        round_to_fractional_digits: int | None = None,
    ) -> NumberStrKernel:
        """
        Fraction → NumberStrKernel с round_to_fractional_digits дробными
        цифрами (политика config.default_rounding_type).

        Examples:
            >>> str(MathHelper().big_rat_to_kernel(Fraction(1, 3), 10))
            '0.3333333333'
        """
        if value is None:
            raise MissingValueError("big_rat_to_kernel: value is None")
        if not isinstance(value, Fraction):
            raise UnsupportedTypeError("big_rat_to_kernel", type(value).__name__)
        if round_to_fractional_digits is None:
            round_to_fractional_digits = self.config.big_rat_fractional_digits
        return self._native_to_kernel(
            big_rat_to_native_num_str(
                value, round_to_fractional_digits, self.config.default_rounding_type
            )
        )

    def numeric_value_to_kernel(
        self,
        value: Any,
        rounding_type: NumberRoundingType | str = NumberRoundingType.NO_ROUNDING,
        round_to_fractional_digits: int = 0,
    ) -> NumberStrKernel:
        """
        Числовое значение → NumberStrKernel с необязательным округлением.

        Fraction без явного округления приводится к
        config.big_rat_fractional_digits политикой config.default_rounding_type;
        при явном округлении разложение округляется сразу заданной политикой
        до round_to_fractional_digits.
        """
        rounding_type = NumberRoundingType.coerce(rounding_type)

        if isinstance(value, NumberStrKernel):
            kernel = value.copy()
        elif isinstance(value, Fraction):
            if rounding_type == NumberRoundingType.NO_ROUNDING:
                return self.big_rat_to_kernel(value)
            return self._native_to_kernel(
                big_rat_to_native_num_str(value, round_to_fractional_digits, rounding_type)
            )
        else:
            kernel = self._native_to_kernel(self.numeric_value_to_native_num_str(value))

        kernel.round(rounding_type, round_to_fractional_digits)
        return kernel

    def kernel_to_numeric_value(
        self,
        kernel: NumberStrKernel,
        target_type: type,
        rounding_type: NumberRoundingType | str = NumberRoundingType.NO_ROUNDING,
        round_to_fractional_digits: int = 0,
    ) -> tuple[Any, NumberStrStatsDto]:
        """
        NumberStrKernel → значение типа target_type.

        Kernel копируется и округляется; для целочисленных типов округление
        всегда до 0 дробных цифр (NoRounding означает отбрасывание дробной
        части). Исходный kernel не изменяется.

        Returns:
            (значение, статистика округлённой копии)

        Raises:
            MissingValueError: kernel is None
            MalformedNumberStringError: kernel не содержит цифр
            NumericRangeError: Значение вне диапазона target_type
            UnsupportedTypeError: target_type вне списка поддерживаемых
        """
        if kernel is None:
            raise MissingValueError("kernel_to_numeric_value: kernel is None")
        if kernel.get_number_of_numeric_digits() == 0:
            raise MalformedNumberStringError("kernel_to_numeric_value: kernel contains no digits")

        rounding_type = NumberRoundingType.coerce(rounding_type)
        working = kernel.copy()
        working.rationalize_fractional_integer_digits()

        if target_type in INTEGER_TARGET_TYPES:
            if rounding_type == NumberRoundingType.NO_ROUNDING:
                rounding_type = NumberRoundingType.TRUNCATE
            round_to_fractional_digits = 0

        working.round(rounding_type, round_to_fractional_digits)
        value = self.native_num_str_to_numeric_value(working.to_native_num_str(), target_type)
        return value, working.get_numeric_value_stats()

    # -------------------------------------------------------------------------
    # Convenience accessors
    # -------------------------------------------------------------------------

    def kernel_to_int(
        self,
        kernel: NumberStrKernel,
        rounding_type: NumberRoundingType | str = NumberRoundingType.NO_ROUNDING,
    ) -> int:
        return self.kernel_to_numeric_value(kernel, int, rounding_type, 0)[0]

    def kernel_to_float(
        self,
        kernel: NumberStrKernel,
        rounding_type: NumberRoundingType | str = NumberRoundingType.NO_ROUNDING,
        round_to_fractional_digits: int = 0,
    ) -> float:
        return self.kernel_to_numeric_value(kernel, float, rounding_type, round_to_fractional_digits)[0]

    def kernel_to_decimal(
        self,
        kernel: NumberStrKernel,
        rounding_type: NumberRoundingType | str = NumberRoundingType.NO_ROUNDING,
        round_to_fractional_digits: int = 0,
    ) -> Decimal:
        return self.kernel_to_numeric_value(kernel, Decimal, rounding_type, round_to_fractional_digits)[0]

