"""
Reference Loader — чтение таблиц эталонных значений

Порядок загрузки:
1. json.load
2. Валидация по JSON Schema контракту reference_table
3. Парсинг в ReferenceTable (pydantic)

Встроенные таблицы лежат в data/ рядом с модулем.
"""

import json
from pathlib import Path
from typing import Final

from src.mathtrig.contracts.validators import validate_reference_table
from src.mathtrig.reference.models import ReferenceTable

BUILTIN_DATA_DIR: Final[Path] = Path(__file__).parent / "data"


def load_reference_table(path: str | Path) -> ReferenceTable:
    """
    Загрузка таблицы из JSON файла.

    Args:
        path: Путь к JSON файлу

    Returns:
        ReferenceTable

    Raises:
        FileNotFoundError: Если файл не найден
        jsonschema.ValidationError: Если данные нарушают контракт
        pydantic.ValidationError: Если данные нарушают модель
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Reference table not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    validate_reference_table(data)
    return ReferenceTable.model_validate(data)


def load_builtin_table(name: str) -> ReferenceTable:
    """
    Загрузка встроенной таблицы по имени.

    Examples:
        >>> load_builtin_table("complex_reference").domain
        <ReferenceDomain.COMPLEX: 'complex'>
    """
    return load_reference_table(BUILTIN_DATA_DIR / f"{name}.json")


def available_builtin_tables() -> list[str]:
    """Имена встроенных таблиц (без расширения), отсортированные."""
    return sorted(p.stem for p in BUILTIN_DATA_DIR.glob("*.json"))
