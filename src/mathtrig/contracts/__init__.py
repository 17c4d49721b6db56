"""
Contracts — JSON Schema контракты файлов эталонных таблиц.
"""

from .validators import (
    REFERENCE_TABLE_SCHEMA,
    ContractValidator,
    ReferenceTableValidator,
    SchemaLoader,
    validate_reference_table,
)

__all__ = [
    "REFERENCE_TABLE_SCHEMA",
    "SchemaLoader",
    "ContractValidator",
    "ReferenceTableValidator",
    "validate_reference_table",
]
