"""
Function Registry — lookup of real/complex implementations by name

Реестр связывает имя функции ("sin", ..., "acoth") с парой реализаций
(вещественной и комплексной) и её семейством. Используется слоем
эталонных таблиц для поиска функции по имени из JSON.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Callable, Mapping

from src.mathtrig.functions import circular, hyperbolic
from src.mathtrig.functions import inverse_circular, inverse_hyperbolic

# =============================================================================
# ENUMS
# =============================================================================


class FunctionFamily(str, Enum):
    """Семейство тригонометрической функции."""

    CIRCULAR = "CIRCULAR"
    HYPERBOLIC = "HYPERBOLIC"
    INVERSE_CIRCULAR = "INVERSE_CIRCULAR"
    INVERSE_HYPERBOLIC = "INVERSE_HYPERBOLIC"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class UnknownFunctionError(KeyError):
    """Имя функции отсутствует в реестре."""

    pass


# =============================================================================
# REGISTRY
# =============================================================================


@dataclass(frozen=True)
class TrigFunction:
    """Описание функции: имя, семейство, вещественная и комплексная реализации."""

    name: str
    family: FunctionFamily
    real: Callable[[float], float]
    complex: Callable[[complex], complex]


def _entry(family: FunctionFamily, module: object, name: str) -> TrigFunction:
    return TrigFunction(
        name=name,
        family=family,
        real=getattr(module, name),
        complex=getattr(module, f"c{name}"),
    )


_FAMILIES: tuple[tuple[FunctionFamily, object, tuple[str, ...]], ...] = (
    (FunctionFamily.CIRCULAR, circular, ("sin", "cos", "tan", "csc", "sec", "cot")),
    (
        FunctionFamily.HYPERBOLIC,
        hyperbolic,
        ("sinh", "cosh", "tanh", "csch", "sech", "coth"),
    ),
    (
        FunctionFamily.INVERSE_CIRCULAR,
        inverse_circular,
        ("asin", "acos", "atan", "acsc", "asec", "acot"),
    ),
    (
        FunctionFamily.INVERSE_HYPERBOLIC,
        inverse_hyperbolic,
        ("asinh", "acosh", "atanh", "acsch", "asech", "acoth"),
    ),
)

FUNCTIONS: Mapping[str, TrigFunction] = MappingProxyType(
    {
        name: _entry(family, module, name)
        for family, module, names in _FAMILIES
        for name in names
    }
)


def get_function(name: str) -> TrigFunction:
    """
    Поиск функции по имени.

    Args:
        name: Имя функции ("sin", "acoth", ...)

    Returns:
        TrigFunction

    Raises:
        UnknownFunctionError: Если имя не зарегистрировано

    Examples:
        >>> get_function("sin").family
        <FunctionFamily.CIRCULAR: 'CIRCULAR'>
    """
    try:
        return FUNCTIONS[name]
    except KeyError:
        raise UnknownFunctionError(f"Unknown function: {name!r}") from None


def function_names(family: FunctionFamily | None = None) -> list[str]:
    """Имена зарегистрированных функций (опционально — одного семейства)."""
    return [
        fn.name for fn in FUNCTIONS.values() if family is None or fn.family == family
    ]
