"""
Number string scanner and convention parsers (US, French, German, custom,
native, dirty, pure).
"""

from numstr.parsing.conventions import (
    FRENCH_CONVENTION,
    GERMAN_CONVENTION,
    US_CONVENTION,
    NumStrConvention,
)
from numstr.parsing.parsers import (
    parse_custom_number_str,
    parse_dirty_number_str,
    parse_french_number_str,
    parse_german_number_str,
    parse_native_number_str,
    parse_pure_number_str,
    parse_us_number_str,
    set_from_dirty_number_str,
)
from numstr.parsing.scanner import SEARCH_TO_END, NumberStrParseResults, extract_number_runes

__all__ = [
    # Conventions
    "NumStrConvention",
    "US_CONVENTION",
    "FRENCH_CONVENTION",
    "GERMAN_CONVENTION",
    # Scanner
    "SEARCH_TO_END",
    "NumberStrParseResults",
    "extract_number_runes",
    # Parsers
    "parse_custom_number_str",
    "parse_us_number_str",
    "parse_french_number_str",
    "parse_german_number_str",
    "parse_native_number_str",
    "parse_dirty_number_str",
    "set_from_dirty_number_str",
    "parse_pure_number_str",
]
