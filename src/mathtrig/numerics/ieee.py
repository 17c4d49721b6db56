"""
IEEE-754 Primitives — Sign Bits, Classification, Quiet Scalar Math

Модуль обеспечивает численный фундамент для всех тригонометрических функций:
- Битовое определение знака (различает -0.0 и +0.0)
- Классификация NaN/Inf для комплексных значений
- Скалярные трансцендентные функции с IEEE-семантикой (без исключений)
- Безопасное деление: x/0 → ±inf или NaN, никогда ZeroDivisionError
- Epsilon-сравнения float и complex с учётом NaN/Inf

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни одна функция модуля не бросает исключений на числовых входах
2. Переполнение даёт ±inf, выход из области определения даёт NaN
3. Знак нуля определяется только по битовому представлению
4. Все операции детерминированы и воспроизводимы

Стандартный `math` бросает ValueError/OverflowError на inf и переполнении,
а деление float на 0.0 бросает ZeroDivisionError. Поэтому все вычисления
выполняются через numpy ufunc под np.errstate(all="ignore") и возвращаются
как обычный Python float.
"""

import math
from typing import Final

import numpy as np

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для сравнения float (относительная толерантность)
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# БИТОВЫЙ ЗНАК И КЛАССИФИКАЦИЯ
# =============================================================================


def is_negative(value: float) -> bool:
    """
    Проверка знакового бита IEEE-754 представления.

    В отличие от `value < 0`, различает -0.0 и +0.0: 64-битный паттерн
    переинтерпретируется как int64, и отрицательное целое означает
    установленный знаковый бит.

    Args:
        value: Проверяемое значение (включая ±0.0, ±inf, NaN)

    Returns:
        True если знаковый бит установлен

    Examples:
        >>> is_negative(-0.0)
        True
        >>> is_negative(0.0)
        False
        >>> is_negative(float('-inf'))
        True
    """
    return bool(np.float64(value).view(np.int64) < 0)


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float конечным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


def is_nan(z: complex) -> bool:
    """True если хотя бы одна компонента комплексного числа — NaN."""
    return math.isnan(z.real) or math.isnan(z.imag)


def is_infinity(z: complex) -> bool:
    """True если хотя бы одна компонента комплексного числа бесконечна."""
    return math.isinf(z.real) or math.isinf(z.imag)


def is_both_infinite(z: complex) -> bool:
    """True если обе компоненты комплексного числа бесконечны."""
    return math.isinf(z.real) and math.isinf(z.imag)


def is_one_sided_infinite(z: complex) -> bool:
    """
    Ровно одна компонента бесконечна, другая конечна.

    Такие входы лежат "на бесконечности вдоль одной оси"; большинство
    обратных функций требуют для них явного значения.
    """
    return (math.isinf(z.real) and math.isfinite(z.imag)) or (
        math.isinf(z.imag) and math.isfinite(z.real)
    )


# =============================================================================
# СКАЛЯРНЫЕ ФУНКЦИИ С IEEE-СЕМАНТИКОЙ
# =============================================================================


def _quiet(ufunc: np.ufunc, *args: float) -> float:
    """Вычисление ufunc без предупреждений и исключений, результат — float."""
    with np.errstate(all="ignore"):
        return float(ufunc(*args))


def divide(numerator: float, denominator: float) -> float:
    """
    Деление по IEEE-754.

    Returns:
        numerator / denominator; при делении на ±0.0 — ±inf (знак по
        правилам IEEE) или NaN для 0/0

    Examples:
        >>> divide(1.0, 0.0)
        inf
        >>> divide(1.0, -0.0)
        -inf
        >>> divide(0.0, 0.0)
        nan
    """
    return _quiet(np.divide, numerator, denominator)


def sin(x: float) -> float:
    return _quiet(np.sin, x)


def cos(x: float) -> float:
    return _quiet(np.cos, x)


def sinh(x: float) -> float:
    return _quiet(np.sinh, x)


def cosh(x: float) -> float:
    return _quiet(np.cosh, x)


def tanh(x: float) -> float:
    return _quiet(np.tanh, x)


def log(x: float) -> float:
    """Натуральный логарифм: log(0) = -inf, log(x<0) = NaN."""
    return _quiet(np.log, x)


def log1p(x: float) -> float:
    return _quiet(np.log1p, x)


def sqrt(x: float) -> float:
    """Квадратный корень: sqrt(x<0) = NaN, sqrt(-0.0) = -0.0."""
    return _quiet(np.sqrt, x)


def asin(x: float) -> float:
    return _quiet(np.arcsin, x)


def acos(x: float) -> float:
    return _quiet(np.arccos, x)


def atan(x: float) -> float:
    return _quiet(np.arctan, x)


def atan2(y: float, x: float) -> float:
    """Аргумент точки (x, y); учитывает знак нуля: atan2(±0, -1) = ±π."""
    return _quiet(np.arctan2, y, x)


# =============================================================================
# EPSILON-СРАВНЕНИЯ
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки с учётом толерантности
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


def is_close_component(
    actual: float,
    expected: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
    signed_zero: bool = False,
) -> bool:
    """
    Сравнение одной компоненты с поддержкой специальных значений.

    Правила:
    - NaN совпадает только с NaN
    - ±inf совпадает только с тем же ±inf
    - При signed_zero=True ноль сравнивается ещё и по знаковому биту
    - Конечные значения сравниваются через is_close
    """
    if math.isnan(actual) or math.isnan(expected):
        return math.isnan(actual) and math.isnan(expected)

    if math.isinf(actual) or math.isinf(expected):
        return actual == expected

    if signed_zero and actual == 0.0 and expected == 0.0:
        return is_negative(actual) == is_negative(expected)

    return is_close(actual, expected, rel_tol=rel_tol, abs_tol=abs_tol)


def is_close_complex(
    actual: complex,
    expected: complex,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
    signed_zero: bool = False,
) -> bool:
    """
    Покомпонентное сравнение комплексных значений.

    Examples:
        >>> is_close_complex(complex(float('nan'), 1.0), complex(float('nan'), 1.0))
        True
        >>> is_close_complex(complex(1.0, 0.0), complex(1.0, -0.0))
        True
        >>> is_close_complex(complex(1.0, 0.0), complex(1.0, -0.0), signed_zero=True)
        False
    """
    return is_close_component(
        actual.real, expected.real, rel_tol, abs_tol, signed_zero
    ) and is_close_component(actual.imag, expected.imag, rel_tol, abs_tol, signed_zero)


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_positive(value: float, name: str) -> None:
    """
    Валидация, что значение конечное и строго положительное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value <= 0 или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
