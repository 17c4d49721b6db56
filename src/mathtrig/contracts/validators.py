"""
Reference Table Contracts — JSON Schema проверка эталонных таблиц

Файл таблицы проходит два уровня проверки:
1. Структура — JSON Schema (Draft 2020-12), этот модуль
2. Семантика (арность домена, декодирование NaN/Infinity) — pydantic модели

Схемы хранятся в каталоге schema/ пакета и проверяются meta-схемой
при первой загрузке.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator, List

import jsonschema
from jsonschema import Draft202012Validator

REFERENCE_TABLE_SCHEMA = "reference_table"


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    Загрузчик и кэш JSON Schema контрактов.

    Args:
        schema_dir: Каталог со схемами (по умолчанию schema/ пакета contracts)
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = Path(schema_dir) if schema_dir else Path(__file__).parent / "schema"
        if not self._schema_dir.is_dir():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        self._cache: Dict[str, Dict[str, Any]] = {}

    @property
    def schema_dir(self) -> Path:
        return self._schema_dir

    def available_schemas(self) -> List[str]:
        """Имена схем каталога без расширения."""
        return sorted(path.stem for path in self._schema_dir.glob("*.json"))

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Загрузка схемы по имени с кэшированием.

        Raises:
            FileNotFoundError: Файл {schema_name}.json отсутствует
            ValueError: Файл не проходит meta-validation
        """
        cached = self._cache.get(schema_name)
        if cached is not None:
            return cached

        path = self._schema_dir / f"{schema_name}.json"
        if not path.is_file():
            raise FileNotFoundError(f"Schema not found: {path}")

        schema = json.loads(path.read_text(encoding="utf-8"))
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {path.name}: {e.message}") from e

        self._cache[schema_name] = schema
        return schema


_DEFAULT_LOADER = SchemaLoader()


# =============================================================================
# VALIDATORS
# =============================================================================


def _error_location(error: jsonschema.ValidationError) -> str:
    return "/".join(str(part) for part in error.absolute_path) or "<root>"


class ContractValidator:
    """
    Проверка документа против одной именованной схемы.

    Args:
        schema_name: Имя схемы (файл schema/{schema_name}.json)
        loader: Загрузчик схем (по умолчанию общий для модуля)
    """

    def __init__(self, schema_name: str, loader: SchemaLoader | None = None):
        self.schema_name = schema_name
        self.schema = (loader or _DEFAULT_LOADER).load_schema(schema_name)
        self._validator = Draft202012Validator(self.schema)

    def validate(self, data: Any) -> None:
        """
        Raises:
            jsonschema.ValidationError: Первое найденное нарушение
        """
        self._validator.validate(data)

    def is_valid(self, data: Any) -> bool:
        return self._validator.is_valid(data)

    def iter_errors(self, data: Any) -> Iterator[jsonschema.ValidationError]:
        return self._validator.iter_errors(data)

    def describe_errors(self, data: Any) -> List[str]:
        """
        Все нарушения в виде "путь: сообщение", отсортированные по пути.

        Examples:
            >>> ReferenceTableValidator().describe_errors({"name": "t", "domain": "real"})
            ["<root>: 'cases' is a required property"]
        """
        errors = sorted(self.iter_errors(data), key=lambda e: list(map(str, e.absolute_path)))
        return [f"{_error_location(e)}: {e.message}" for e in errors]


class ReferenceTableValidator(ContractValidator):
    """Проверка контракта reference_table."""

    def __init__(self, loader: SchemaLoader | None = None):
        super().__init__(REFERENCE_TABLE_SCHEMA, loader)


def validate_reference_table(data: Any) -> None:
    """
    Проверка структуры таблицы эталонных значений.

    Raises:
        jsonschema.ValidationError: Если данные не соответствуют контракту
    """
    ReferenceTableValidator().validate(data)
