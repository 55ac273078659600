"""
JSON Schema Contract Validators

Валидация JSON-представлений домена для presentation-слоя хоста
библиотекой jsonschema (Draft 2020-12).

Схемы (src/core/contracts/schema/):
- order_summary.json — снимок заказа, Order.summary()
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Iterator

from jsonschema import Draft202012Validator, SchemaError, ValidationError


SCHEMA_DIR = Path(__file__).parent / "schema"


@lru_cache(maxsize=None)
def load_schema(schema_name: str, schema_dir: Path = SCHEMA_DIR) -> Dict[str, Any]:
    """
    Загрузка и meta-валидация схемы, результат кэшируется.

    Raises:
        FileNotFoundError: Если файл схемы не найден
        ValueError: Если файл не является валидной JSON Schema
    """
    schema_path = schema_dir / f"{schema_name}.json"
    schema = json.loads(schema_path.read_text(encoding="utf-8"))
    try:
        Draft202012Validator.check_schema(schema)
    except SchemaError as e:
        raise ValueError(f"Invalid JSON Schema in {schema_path.name}: {e.message}") from e
    return schema


class ContractValidator:
    """Данные против именованной JSON Schema."""

    def __init__(self, schema_name: str, schema_dir: Path = SCHEMA_DIR):
        self.schema_name = schema_name
        self.validator = Draft202012Validator(load_schema(schema_name, schema_dir))

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


class OrderSummaryValidator(ContractValidator):
    """Валидатор для order_summary контракта."""

    def __init__(self):
        super().__init__("order_summary")


def validate_order_summary(data: Dict[str, Any]) -> None:
    """
    Валидация снимка заказа.

    Raises:
        ValidationError: Если данные не соответствуют схеме
    """
    OrderSummaryValidator().validate(data)
