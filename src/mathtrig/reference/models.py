"""
Reference Models — эталонные векторы функций

Immutable Pydantic модели для таблиц эталонных значений.
Соответствуют схеме reference_table.

Специальные значения IEEE-754 в JSON записываются строками:
"NaN", "Infinity", "-Infinity", "-0.0".
"""

import math
from enum import Enum
from typing import Any, Final

from pydantic import BaseModel, Field, field_validator

from src.mathtrig.registry import FUNCTIONS


# =============================================================================
# CONSTANTS
# =============================================================================

SPECIAL_VALUES: Final[dict[str, float]] = {
    "NaN": math.nan,
    "Infinity": math.inf,
    "-Infinity": -math.inf,
    "-0.0": -0.0,
}


# =============================================================================
# ENUMS
# =============================================================================


class ReferenceDomain(str, Enum):
    """Область определения таблицы: вещественная или комплексная."""

    REAL = "real"
    COMPLEX = "complex"

    @property
    def arity(self) -> int:
        """Число компонент значения: 1 для real, 2 для complex."""
        return 1 if self is ReferenceDomain.REAL else 2


# =============================================================================
# MODELS
# =============================================================================


def _decode_value(v: Any) -> Any:
    if isinstance(v, (list, tuple)):
        return [SPECIAL_VALUES.get(item, item) if isinstance(item, str) else item for item in v]
    return v


class ReferenceCase(BaseModel):
    """
    Один эталонный вектор: function(argument) == expected.

    argument/expected: (x,) для real, (re, im) для complex.
    """

    function: str = Field(..., min_length=1, description="Имя функции ('sin', ...)")
    argument: tuple[float, ...] = Field(..., min_length=1, max_length=2)
    expected: tuple[float, ...] = Field(..., min_length=1, max_length=2)
    note: str | None = Field(None, description="Комментарий к вектору")

    model_config = {"frozen": True}

    @field_validator("function")
    @classmethod
    def validate_function_name(cls, v: str) -> str:
        """Проверка, что функция зарегистрирована"""
        if v not in FUNCTIONS:
            raise ValueError(f"unknown function {v!r}")
        return v

    @field_validator("argument", "expected", mode="before")
    @classmethod
    def decode_special_values(cls, v: Any) -> Any:
        """Замена строковых маркеров NaN/Infinity/-0.0 на float"""
        return _decode_value(v)

    def argument_value(self) -> complex:
        """Аргумент как complex (мнимая часть 0 для real)."""
        return _as_complex(self.argument)

    def expected_value(self) -> complex:
        """Ожидаемое значение как complex (мнимая часть 0 для real)."""
        return _as_complex(self.expected)


def _as_complex(components: tuple[float, ...]) -> complex:
    if len(components) == 1:
        return complex(components[0], 0.0)
    return complex(components[0], components[1])


class ReferenceTable(BaseModel):
    """
    Таблица эталонных векторов одной области определения.

    Все векторы должны иметь арность домена: 1 для real, 2 для complex.
    """

    name: str = Field(..., min_length=1, description="Имя таблицы")
    domain: ReferenceDomain = Field(..., description="real/complex")
    description: str | None = Field(None, description="Описание таблицы")
    cases: tuple[ReferenceCase, ...] = Field(..., min_length=1)

    model_config = {"frozen": True}

    @field_validator("cases")
    @classmethod
    def validate_cases_arity(
        cls, v: tuple[ReferenceCase, ...], info
    ) -> tuple[ReferenceCase, ...]:
        """Проверка арности argument/expected относительно домена"""
        if "domain" not in info.data:
            return v

        arity = info.data["domain"].arity
        for index, case in enumerate(v):
            if len(case.argument) != arity or len(case.expected) != arity:
                raise ValueError(
                    f"case {index} ({case.function}) must have {arity} component(s) "
                    f"for {info.data['domain'].value} domain"
                )
        return v

    def functions(self) -> list[str]:
        """Уникальные имена функций таблицы в порядке появления."""
        return list(dict.fromkeys(case.function for case in self.cases))
