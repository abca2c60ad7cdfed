"""
Rounding engine and native number string primitives.

MathHelper (numeric type dispatch) is imported from
numstr.core.math.numeric_dispatch directly.
"""

from numstr.core.math.native_num_str import (
    NATIVE_NUM_STR_PATTERN,
    decimal_to_native_num_str,
    dirty_to_native_num_str,
    float_to_native_num_str,
    is_valid_native_num_str,
    native_num_str_stats,
    normalize_native_num_str,
    pure_to_native_num_str,
    split_native_num_str,
    validate_native_num_str,
)
from numstr.core.math.rounding import compare_tail_to_half, increment_digits, round_digits

__all__ = [
    # Rounding
    "round_digits",
    "compare_tail_to_half",
    "increment_digits",
    # Native number strings
    "NATIVE_NUM_STR_PATTERN",
    "is_valid_native_num_str",
    "validate_native_num_str",
    "split_native_num_str",
    "normalize_native_num_str",
    "native_num_str_stats",
    "dirty_to_native_num_str",
    "pure_to_native_num_str",
    "float_to_native_num_str",
    "decimal_to_native_num_str",
]
