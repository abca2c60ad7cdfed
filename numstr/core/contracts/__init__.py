"""
JSON Schema contracts for numstr interchange forms.
"""

from numstr.core.contracts.validators import (
    ContractValidator,
    NumberStrKernelValidator,
    NumberStrParseResultsValidator,
    SchemaLoader,
    load_number_str_kernel,
    validate_number_str_kernel,
    validate_number_str_parse_results,
)

__all__ = [
    "SchemaLoader",
    "ContractValidator",
    "NumberStrKernelValidator",
    "NumberStrParseResultsValidator",
    "validate_number_str_kernel",
    "validate_number_str_parse_results",
    "load_number_str_kernel",
]
