"""
JSON Schema Contract Validators

Модуль для валидации JSON-представления BigInteger согласно формальной
JSON Schema. Использует библиотеку jsonschema (Draft 2020-12).

Схемы (в schema/ рядом с модулем):
- big_integer.json

JSON-форма значения:
    {"schema_version": "1", "value": "-1000000000", "negative": true, "limbs": [0, 1]}

Поле value — каноническая десятичная запись и единственный источник
значения. Поля negative и limbs необязательны на входе, но если заданы,
обязаны с ним совпадать.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError

from shamir_bigint.core.domain.big_integer import BigInteger
from shamir_bigint.core.errors import InvalidFormat

CONTRACT_SCHEMA_VERSION = "1"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик JSON Schema файлов.

    Схемы ищутся в каталоге schema/ внутри пакета contracts.
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
            schema_name: Имя схемы без расширения (например, 'big_integer')

        Returns:
            Загруженная схема как dict

        Raises:
            FileNotFoundError: Если файл схемы не найден
            ValueError: Если файл не является валидной JSON Schema
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

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self.schema = (loader or _SCHEMA_LOADER).load_schema(schema_name)
        self.validator = Draft202012Validator(self.schema)

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если данные не соответствуют схеме
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        return self.validator.iter_errors(data)


class BigIntegerValidator(ContractValidator):
    """Валидатор для big_integer контракта."""

    def __init__(self, loader: SchemaLoader | None = None):
        super().__init__("big_integer", loader)


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_big_integer(data: Dict[str, Any]) -> None:
    """
    Валидация JSON-формы BigInteger.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    BigIntegerValidator().validate(data)


def to_contract(value: BigInteger) -> Dict[str, Any]:
    """JSON-форма значения (все поля)."""
    return {
        "schema_version": CONTRACT_SCHEMA_VERSION,
        "value": value.to_string(),
        "negative": value.negative,
        "limbs": list(value.magnitude),
    }


def from_contract(data: Dict[str, Any]) -> BigInteger:
    """
    Восстановление BigInteger из JSON-формы.

    Raises:
        ValidationError: Если данные не соответствуют схеме
        InvalidFormat: Если negative или limbs противоречат value
    """
    validate_big_integer(data)
    value = BigInteger.parse(data["value"])

    if "negative" in data and data["negative"] != value.negative:
        raise InvalidFormat(
            f"contract sign mismatch: negative={data['negative']} for value {data['value']}"
        )
    if "limbs" in data and tuple(data["limbs"]) != value.magnitude:
        raise InvalidFormat(
            f"contract limbs {data['limbs']} do not match value {data['value']}"
        )

    return value
