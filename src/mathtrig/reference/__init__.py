"""
Reference vectors — эталонные таблицы, их загрузка и сверка.
"""

from src.mathtrig.reference.loader import (
    BUILTIN_DATA_DIR,
    available_builtin_tables,
    load_builtin_table,
    load_reference_table,
)
from src.mathtrig.reference.models import (
    SPECIAL_VALUES,
    ReferenceCase,
    ReferenceDomain,
    ReferenceTable,
)
from src.mathtrig.reference.verify import (
    CaseOutcome,
    VerificationConfig,
    VerificationReport,
    evaluate_case,
    verify_case,
    verify_table,
)

__all__ = [
    # Models
    "SPECIAL_VALUES",
    "ReferenceDomain",
    "ReferenceCase",
    "ReferenceTable",
    # Loader
    "BUILTIN_DATA_DIR",
    "load_reference_table",
    "load_builtin_table",
    "available_builtin_tables",
    # Verification
    "VerificationConfig",
    "CaseOutcome",
    "VerificationReport",
    "evaluate_case",
    "verify_case",
    "verify_table",
]
