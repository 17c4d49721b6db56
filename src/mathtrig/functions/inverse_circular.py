"""
Inverse Circular Functions — asin, acos, atan, acsc, asec, acot

Главные значения обратных круговых функций.

Ветвления (branch cuts) комплексных версий:
- asin, acos: (−inf, −1] и [1, +inf) на действительной оси
- atan: (−i·inf, −i] и [i, +i·inf) на мнимой оси
- acsc, asec: (−1, 1) на действительной оси
- acot: [−i, i] на мнимой оси

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. acot(0) = π/2 (вещественный и комплексный случаи)
2. Для отрицательного знакового бита Re z acot использует симметрию
   acot(−z) = π − acot(z), так что вещественный acot лежит в (0, π)
3. catan на бесконечности вдоль одной оси даёт (±π/2, 0)
"""

import math

from src.mathtrig.functions.angles import HALF_PI, PI
from src.mathtrig.numerics import complex_arith as ca
from src.mathtrig.numerics import ieee

# =============================================================================
# ВЕЩЕСТВЕННЫЕ ФУНКЦИИ
# =============================================================================


def asin(x: float) -> float:
    return ieee.asin(x)


def acos(x: float) -> float:
    return ieee.acos(x)


def atan(x: float) -> float:
    return ieee.atan(x)


def acsc(x: float) -> float:
    """acsc(x) = asin(1/x); NaN при x == 0 и |x| < 1."""
    if x == 0.0:
        return math.nan
    return ieee.asin(ieee.divide(1.0, x))


def asec(x: float) -> float:
    """asec(x) = acos(1/x); NaN при x == 0 и |x| < 1."""
    if x == 0.0:
        return math.nan
    return ieee.acos(ieee.divide(1.0, x))


def acot(x: float) -> float:
    """
    Арккотангенс со значениями в (0, π).

    Examples:
        >>> acot(0.0)
        1.5707963267948966
        >>> acot(float('-inf'))
        3.141592653589793
    """
    if x == 0.0:
        return HALF_PI

    if ieee.is_negative(x):
        return PI - ieee.atan(ieee.divide(1.0, -x))

    return ieee.atan(ieee.divide(1.0, x))


# =============================================================================
# КОМПЛЕКСНЫЕ ФУНКЦИИ
# =============================================================================


def casin(z: complex) -> complex:
    return ca.asin(z)


def cacos(z: complex) -> complex:
    return ca.acos(z)


def catan(z: complex) -> complex:
    """
    Комплексный арктангенс: (i/2)·(log(1 − iz) − log(1 + iz)).

    Если ровно одна компонента бесконечна, а другая конечна, результат
    (±π/2, 0): минус, если знаковый бит любой из компонент установлен.
    """
    if ieee.is_one_sided_infinite(z):
        if ieee.is_negative(z.real) or ieee.is_negative(z.imag):
            return complex(-HALF_PI, 0.0)
        return complex(HALF_PI, 0.0)

    iz = ca.mul(ca.I, z)
    return ca.mul(
        ca.HALF_I,
        ca.sub(ca.log(ca.sub(ca.ONE, iz)), ca.log(ca.add(ca.ONE, iz))),
    )


def cacsc(z: complex) -> complex:
    """acsc(z) = asin(1/z); cacsc(0) = NaN+NaNi."""
    return ca.asin(ca.reciprocal(z))


def casec(z: complex) -> complex:
    """asec(z) = acos(1/z); casec(0) = NaN+NaNi."""
    return ca.acos(ca.reciprocal(z))


def cacot(z: complex) -> complex:
    """
    Комплексный арккотангенс.

    Порядок проверок:
        z == 0 или 1/z бесконечно → (π/2, 0)
        знаковый бит Re z          → π − atan(1/(−z))
        иначе                      → atan(1/z)
    """
    if ca.is_zero(z):
        return complex(HALF_PI, 0.0)

    inverse = ca.reciprocal(z)
    if ieee.is_infinity(inverse):
        return complex(HALF_PI, 0.0)

    if ieee.is_negative(z.real):
        return ca.rsub_real(PI, catan(ca.reciprocal(ca.neg(z))))

    return catan(inverse)
