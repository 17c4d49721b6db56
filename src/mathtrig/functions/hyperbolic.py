"""
Hyperbolic Functions — sinh, cosh, tanh, csch, sech, coth

Комплексные версии выражаются через круговые функции поворотом аргумента:
    sinh(z) = −i·sin(iz),  cosh(z) = cos(iz),  tanh(z) = −i·tan(iz)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. csinh/ccosh от (±inf, 0) дают (±inf, 0) / (+inf, 0) точно, без NaN
   из произведения inf·0
2. ccsch/csech схлопываются в 0+0i только если основание бесконечно
   в обеих компонентах
3. Вещественные csch/coth дают NaN в точном нуле
"""

import math

from src.mathtrig.functions.circular import ccos, csin, ctan
from src.mathtrig.numerics import complex_arith as ca
from src.mathtrig.numerics import ieee

# =============================================================================
# ВЕЩЕСТВЕННЫЕ ФУНКЦИИ
# =============================================================================


def sinh(x: float) -> float:
    return ieee.sinh(x)


def cosh(x: float) -> float:
    return ieee.cosh(x)


def tanh(x: float) -> float:
    return ieee.tanh(x)


def csch(x: float) -> float:
    """csch = 1/sinh; NaN если sinh(x) == 0."""
    sinh_x = ieee.sinh(x)
    if sinh_x == 0.0:
        return math.nan
    return ieee.divide(1.0, sinh_x)


def sech(x: float) -> float:
    """sech = 1/cosh; cosh никогда не обращается в ноль."""
    cosh_x = ieee.cosh(x)
    if cosh_x == 0.0:
        return math.nan
    return ieee.divide(1.0, cosh_x)


def coth(x: float) -> float:
    """coth = 1/tanh; NaN при x == 0."""
    if x == 0.0:
        return math.nan
    return ieee.divide(1.0, ieee.tanh(x))


# =============================================================================
# КОМПЛЕКСНЫЕ ФУНКЦИИ
# =============================================================================


def csinh(z: complex) -> complex:
    """
    Комплексный гиперболический синус.

    Examples:
        >>> csinh(complex(float('inf'), 0.0))
        (inf+0j)
    """
    if z.imag == 0.0 and math.isinf(z.real):
        return complex(z.real, 0.0)
    return ca.unrotate(csin(ca.rotate(z)))


def ccosh(z: complex) -> complex:
    """Комплексный гиперболический косинус; ccosh(±inf + 0i) = +inf."""
    if z.imag == 0.0 and math.isinf(z.real):
        return complex(math.inf, 0.0)
    return ccos(ca.rotate(z))


def ctanh(z: complex) -> complex:
    """Комплексный гиперболический тангенс; ctanh(±inf + iy) → ±1."""
    return ca.unrotate(ctan(ca.rotate(z)))


def ccsch(z: complex) -> complex:
    sinh_z = csinh(z)
    if ieee.is_both_infinite(sinh_z):
        return ca.ZERO
    return ca.reciprocal(sinh_z)


def csech(z: complex) -> complex:
    cosh_z = ccosh(z)
    if ieee.is_both_infinite(cosh_z):
        return ca.ZERO
    return ca.reciprocal(cosh_z)


def ccoth(z: complex) -> complex:
    """Комплексный гиперболический котангенс: 1/tanh(z); ccoth(0) = NaN+NaNi."""
    return ca.reciprocal(ctanh(z))
