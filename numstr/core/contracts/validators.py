"""
JSON Schema Contract Validators

Валидация JSON-форм объектов numstr согласно формальным JSON Schema
контрактам. Использует библиотеку jsonschema (Draft 2020-12).

Схемы:
- number_str_kernel.json (NumberStrKernel.to_dict)
- number_str_parse_results.json (NumberStrParseResults.to_dict)
"""

import json
from pathlib import Path
from typing import Any, Dict

import jsonschema
from jsonschema import Draft202012Validator

from numstr.core.domain.number_str_kernel import NumberStrKernel
from numstr.core.errors import MalformedNumberStringError


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы поставляются вместе с пакетом в каталоге schema/ рядом с модулем.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Кэш загруженных схем
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка JSON Schema файла.

        Args:
            schema_name: Имя схемы без расширения (например, 'number_str_kernel')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если схема не проходит meta-validation
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}") from e

        self._schemas[schema_name] = schema
        return schema


# Глобальный экземпляр загрузчика
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Базовый класс для валидаторов контрактов.

    Инкапсулирует логику валидации данных против JSON Schema.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]):
        return self.validator.iter_errors(data)


class NumberStrKernelValidator(ContractValidator):
    """Валидатор JSON-формы NumberStrKernel."""

    def __init__(self):
        super().__init__("number_str_kernel")


class NumberStrParseResultsValidator(ContractValidator):
    """Валидатор JSON-формы NumberStrParseResults."""

    def __init__(self):
        super().__init__("number_str_parse_results")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_number_str_kernel(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    NumberStrKernelValidator().validate(data)


def validate_number_str_parse_results(data: Dict[str, Any]) -> None:
    """
    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    NumberStrParseResultsValidator().validate(data)


def load_number_str_kernel(data: Dict[str, Any]) -> NumberStrKernel:
    """
    Валидация JSON-формы и восстановление NumberStrKernel.

    native_num_str в данных должен совпадать с восстановленным значением.

    Raises:
        ValidationError: Если данные не соответствуют схеме
        MalformedNumberStringError: Если native_num_str не согласован с цифрами
    """
    validate_number_str_kernel(data)
    kernel = NumberStrKernel.from_dict(data)
    if kernel.to_native_num_str() != data["native_num_str"]:
        raise MalformedNumberStringError(
            f"native_num_str '{data['native_num_str']}' inconsistent with digits "
            f"'{kernel.to_native_num_str()}'"
        )
    return kernel
