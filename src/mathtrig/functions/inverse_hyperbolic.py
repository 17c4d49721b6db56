"""
Inverse Hyperbolic Functions — asinh, acosh, atanh, acsch, asech, acoth

Главные значения через логарифмические формулы:
    asinh(z) = log(z + sqrt(z² + 1))
    acosh(z) = log(z + sqrt(z² − 1))
    atanh(z) = log((1 + z)/(1 − z)) / 2
    acsch(z) = log(1/z + sqrt(1/z² + 1))
    asech(z) = log(1/z + sqrt(1/z² − 1))
    acoth(z) = log((z + 1)/(z − 1)) / 2

Каждая функция:
- сначала обрабатывает бесконечность вдоль оси;
- затем, если функция нечётная, сводит отрицательный знаковый бит Re z
  к положительному: f(−z) = −f(z) (asinh, atanh, acsch, acoth);
- только после этого проверяет полюса и исчезновение порядка z²;
- иначе вычисляет формулу.

acosh и asech не сводятся по знаку: их главное значение в левой
полуплоскости не симметрично правой.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Функции тотальны, результат NaN обозначает неопределённость
2. Полюса: atanh(1) = acoth(1) = (+inf, 0), atanh(−1) = acoth(−1) = (−inf, −0)
3. z² == 0 без z == 0 (исчезновение порядка) даёт бесконечность
   с корректным знаком, а не NaN
4. Для нечётных функций f(−z) == −f(z) побитно при конечном z, включая знак нуля
"""

import math

from src.mathtrig.functions.angles import HALF_PI, PI
from src.mathtrig.numerics import complex_arith as ca
from src.mathtrig.numerics import ieee

# =============================================================================
# ВЕЩЕСТВЕННЫЕ ФУНКЦИИ
# =============================================================================


def asinh(x: float) -> float:
    """
    Ареасинус.

    Examples:
        >>> asinh(float('-inf'))
        -inf
    """
    if x == -math.inf:
        return -math.inf

    if ieee.is_negative(x):
        return -ieee.log(-x + ieee.sqrt(x * x + 1.0))

    return ieee.log(x + ieee.sqrt(x * x + 1.0))


def acosh(x: float) -> float:
    """Ареакосинус; NaN при x < 1."""
    if x < 1.0:
        return math.nan
    return ieee.log(x + ieee.sqrt(x * x - 1.0))


def atanh(x: float) -> float:
    """Ареатангенс; ±inf при x = ±1, NaN при |x| > 1."""
    if x == -1.0:
        return -math.inf
    if x == 1.0:
        return math.inf
    if abs(x) > 1.0:
        return math.nan
    return ieee.log(ieee.divide(1.0 + x, 1.0 - x)) / 2.0


def acsch(x: float) -> float:
    """Ареакосеканс; NaN при x == 0."""
    if x == 0.0:
        return math.nan

    inverse_square = ieee.divide(1.0, x * x)

    if ieee.is_negative(x):
        return -ieee.log(ieee.divide(1.0, -x) + ieee.sqrt(inverse_square + 1.0))

    return ieee.log(ieee.divide(1.0, x) + ieee.sqrt(inverse_square + 1.0))


def asech(x: float) -> float:
    """Ареасеканс; определён на (0, 1]."""
    if x == 0.0:
        return math.nan
    if x < 0.0 or x > 1.0:
        return math.nan
    return ieee.log(
        ieee.divide(1.0, x) + ieee.sqrt(ieee.divide(1.0, x * x) - 1.0)
    )


def acoth(x: float) -> float:
    """Ареакотангенс; 0 на ±inf, NaN при |x| <= 1."""
    if math.isinf(x):
        return 0.0
    if abs(x) <= 1.0:
        return math.nan
    return ieee.log(ieee.divide(x + 1.0, x - 1.0)) / 2.0


# =============================================================================
# КОМПЛЕКСНЫЕ ФУНКЦИИ
# =============================================================================


def casinh(z: complex) -> complex:
    """
    Комплексный ареасинус.

    Examples:
        >>> casinh(complex(float('inf'), 0.0))
        (inf+0j)
    """
    if math.isinf(z.real) and math.isfinite(z.imag):
        return complex(z.real, 0.0)

    if ieee.is_negative(z.real):
        return ca.neg(casinh(ca.neg(z)))

    root = ca.sqrt(ca.add_real(ca.square(z), 1.0))
    return ca.log(ca.add(z, root))


def cacosh(z: complex) -> complex:
    """
    Комплексный ареакосинус.

    acosh(+inf) = (+inf, 0), acosh(−inf) = (+inf, NaN).
    """
    if ca.equals(z, math.inf, 0.0):
        return complex(math.inf, 0.0)
    if ca.equals(z, -math.inf, 0.0):
        return complex(math.inf, math.nan)

    root = ca.sqrt(ca.sub_real(ca.square(z), 1.0))
    return ca.log(ca.add(z, root))


def catanh(z: complex) -> complex:
    """
    Комплексный ареатангенс.

    Специальные значения:
        z = 1               → (+inf, 0)
        z = −1              → (−inf, −0)
        Re z = ±inf, Im конечна → (0, ∓π/2)
        Im z = ±inf, Re конечна → (0, ±π/2)
    """
    re, im = z.real, z.imag

    if math.isinf(re) and math.isfinite(im):
        return complex(0.0, -HALF_PI if re > 0.0 else HALF_PI)
    if math.isinf(im) and math.isfinite(re):
        return complex(0.0, HALF_PI if im > 0.0 else -HALF_PI)

    if ieee.is_negative(re):
        return ca.neg(catanh(ca.neg(z)))

    # z = −1 приходит сюда как neg(z) = 1
    if ca.equals(z, 1.0, 0.0):
        return complex(math.inf, 0.0)

    ratio = ca.div(ca.add_real(z, 1.0), ca.rsub_real(1.0, z))
    return ca.scale(ca.log(ratio), 0.5)


def cacsch(z: complex) -> complex:
    """
    Комплексный ареакосеканс.

    Специальные значения:
        z = 0                → NaN+NaNi
        любая компонента inf → 0
        z² == 0 (underflow)  → (+inf, 0), при Re z < 0 (−inf, −0)
    """
    if ca.is_zero(z):
        return ca.NAN

    if ieee.is_infinity(z):
        return ca.ZERO

    if ieee.is_negative(z.real):
        return ca.neg(cacsch(ca.neg(z)))

    z_squared = ca.square(z)
    if ca.is_zero(z_squared):
        return complex(math.inf, 0.0)

    root = ca.sqrt(ca.add_real(ca.reciprocal(z_squared), 1.0))
    return ca.log(ca.add(ca.reciprocal(z), root))


def casech(z: complex) -> complex:
    """
    Комплексный ареасеканс.

    Специальные значения:
        z = 0                   → NaN+NaNi
        Re z = ±inf, Im конечна → (0, π/2)
        Im z = ±inf, Re конечна → (0, ∓π/2)
        z² == 0 (underflow)     → (+inf, 0) или (+inf, π) при Re z < 0
    """
    re, im = z.real, z.imag

    if ca.is_zero(z):
        return ca.NAN

    if math.isinf(re) and math.isfinite(im):
        return complex(0.0, HALF_PI)
    if math.isinf(im) and math.isfinite(re):
        return complex(0.0, -HALF_PI if im > 0.0 else HALF_PI)

    z_squared = ca.square(z)
    if ca.is_zero(z_squared):
        return complex(math.inf, PI if ieee.is_negative(re) else 0.0)

    root = ca.sqrt(ca.sub_real(ca.reciprocal(z_squared), 1.0))
    return ca.log(ca.add(ca.reciprocal(z), root))


def cacoth(z: complex) -> complex:
    """
    Комплексный ареакотангенс.

    Специальные значения:
        z = ±1                               → (+inf, 0) и (−inf, −0)
        ровно одна компонента inf, другая конечна → 0
        обе компоненты inf                   → NaN+NaNi (по формуле)
    """
    if ieee.is_one_sided_infinite(z):
        return ca.ZERO

    if ieee.is_negative(z.real):
        return ca.neg(cacoth(ca.neg(z)))

    if ca.equals(z, 1.0, 0.0):
        return complex(math.inf, 0.0)

    ratio = ca.div(ca.add_real(z, 1.0), ca.sub_real(z, 1.0))
    return ca.scale(ca.log(ratio), 0.5)
