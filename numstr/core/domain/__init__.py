"""
Domain value objects and enumerations.

Contains the leaf building blocks: enumerations, decimal separator spec,
negative number sign search specs and numeric value stats. The kernel and
field format DTOs live in their own modules (number_str_kernel,
field_formats) because they depend on numstr.core.math.
"""

from numstr.core.domain.decimal_separator import DecimalSeparatorSpec
from numstr.core.domain.enums import (
    NumberRoundingType,
    NumericSignValue,
    NumericValueType,
    NumSignSymbolPosition,
    SciNotationFormat,
    SearchTerminationType,
)
from numstr.core.domain.negative_sign import (
    NegativeNumberSearchSpec,
    NegNumSearchSpecCollection,
    NegNumSignMatch,
    NegNumSignSearcher,
)
from numstr.core.domain.stats import NumberStrStatsDto, compute_digit_stats

__all__ = [
    # Enums
    "NumericSignValue",
    "NumericValueType",
    "NumberRoundingType",
    "NumSignSymbolPosition",
    "SciNotationFormat",
    "SearchTerminationType",
    # Decimal separator
    "DecimalSeparatorSpec",
    # Negative sign search
    "NegativeNumberSearchSpec",
    "NegNumSearchSpecCollection",
    "NegNumSignMatch",
    "NegNumSignSearcher",
    # Stats
    "NumberStrStatsDto",
    "compute_digit_stats",
]
