"""
numstr — number string parsing, rounding and numeric type conversion.

Пакет разбирает числовые строки разных национальных форматов (US, French,
German, custom, "dirty"), хранит значение в каноническом виде
(NumberStrKernel), округляет его и конвертирует в/из конкретных числовых
типов Python и numpy.
"""

from numstr.core.config import ConversionConfig, ScannerConfig
from numstr.core.domain import (
    DecimalSeparatorSpec,
    NegativeNumberSearchSpec,
    NegNumSearchSpecCollection,
    NumberRoundingType,
    NumberStrStatsDto,
    NumericSignValue,
    NumericValueType,
    NumSignSymbolPosition,
    SciNotationFormat,
    SearchTerminationType,
)
from numstr.core.domain.field_formats import (
    BigFloatDto,
    BigFloatFieldFormat,
    FloatFieldFormat,
    TextJustify,
)
from numstr.core.domain.number_str_kernel import (
    IntFracDigitsResult,
    NumberStrKernel,
    SciNotationKernel,
)
from numstr.core.errors import (
    InvalidDigitError,
    InvalidEnumValueError,
    MalformedNumberStringError,
    MissingValueError,
    NumericRangeError,
    NumStrError,
    UnsupportedTypeError,
)
from numstr.core.math.numeric_dispatch import SUPPORTED_NUMERIC_TYPES, MathHelper
from numstr.parsing import (
    FRENCH_CONVENTION,
    GERMAN_CONVENTION,
    US_CONVENTION,
    NumberStrParseResults,
    extract_number_runes,
    parse_custom_number_str,
    parse_dirty_number_str,
    parse_french_number_str,
    parse_german_number_str,
    parse_native_number_str,
    parse_pure_number_str,
    parse_us_number_str,
    set_from_dirty_number_str,
)

__version__ = "0.1.0"

__all__ = [
    # Config
    "ConversionConfig",
    "ScannerConfig",
    # Errors
    "NumStrError",
    "MalformedNumberStringError",
    "UnsupportedTypeError",
    "InvalidDigitError",
    "InvalidEnumValueError",
    "MissingValueError",
    "NumericRangeError",
    # Enums
    "NumericSignValue",
    "NumericValueType",
    "NumberRoundingType",
    "NumSignSymbolPosition",
    "SciNotationFormat",
    "SearchTerminationType",
    # Specs
    "DecimalSeparatorSpec",
    "NegativeNumberSearchSpec",
    "NegNumSearchSpecCollection",
    # Kernel
    "NumberStrKernel",
    "NumberStrStatsDto",
    "IntFracDigitsResult",
    "SciNotationKernel",
    # Field formats
    "BigFloatDto",
    "FloatFieldFormat",
    "BigFloatFieldFormat",
    "TextJustify",
    # Numeric dispatch
    "MathHelper",
    "SUPPORTED_NUMERIC_TYPES",
    # Parsing
    "US_CONVENTION",
    "FRENCH_CONVENTION",
    "GERMAN_CONVENTION",
    "NumberStrParseResults",
    "extract_number_runes",
    "parse_custom_number_str",
    "parse_us_number_str",
    "parse_french_number_str",
    "parse_german_number_str",
    "parse_native_number_str",
    "parse_dirty_number_str",
    "set_from_dirty_number_str",
    "parse_pure_number_str",
]
