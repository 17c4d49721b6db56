"""
Circular Functions — sin, cos, tan, csc, sec, cot

Вещественные (sin, ...) и комплексные (csin, ...) версии круговых функций.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Функции тотальны: ни один вход не приводит к исключению
2. Полюса вещественных функций определяются точным сравнением с нулём
   и дают NaN
3. Комплексные csc/sec схлопываются в 0+0i, если знаменатель бесконечен
   хотя бы в одной компоненте
4. ctan сохраняет две ветви вычисления: прямое отношение при |Im z| <= 4
   и форму через tanh при больших |Im z|
"""

import math
from typing import Final

from src.mathtrig.numerics import complex_arith as ca
from src.mathtrig.numerics import ieee

# =============================================================================
# ПОРОГИ
# =============================================================================

# Выше этого |Im z| прямое отношение sinh(2y)/(cos(2x) + cosh(2y)) теряет
# относительную точность, и ctan переходит на форму с tanh(2y)
TAN_DIRECT_RATIO_LIMIT: Final[float] = 4.0


# =============================================================================
# ВЕЩЕСТВЕННЫЕ ФУНКЦИИ
# =============================================================================


def sin(x: float) -> float:
    return ieee.sin(x)


def cos(x: float) -> float:
    return ieee.cos(x)


def tan(x: float) -> float:
    """tan = sin/cos; NaN если cos(x) == 0."""
    cos_x = ieee.cos(x)
    if cos_x == 0.0:
        return math.nan
    return ieee.divide(ieee.sin(x), cos_x)


def csc(x: float) -> float:
    """csc = 1/sin; NaN если sin(x) == 0."""
    sin_x = ieee.sin(x)
    if sin_x == 0.0:
        return math.nan
    return ieee.divide(1.0, sin_x)


def sec(x: float) -> float:
    """sec = 1/cos; NaN если cos(x) == 0."""
    cos_x = ieee.cos(x)
    if cos_x == 0.0:
        return math.nan
    return ieee.divide(1.0, cos_x)


def cot(x: float) -> float:
    """cot = cos/sin; NaN если sin(x) == 0."""
    sin_x = ieee.sin(x)
    if sin_x == 0.0:
        return math.nan
    return ieee.divide(ieee.cos(x), sin_x)


# =============================================================================
# КОМПЛЕКСНЫЕ ФУНКЦИИ
# =============================================================================


def csin(z: complex) -> complex:
    """
    Комплексный синус: sin(x)·cosh(y) + i·cos(x)·sinh(y).

    Examples:
        >>> csin(complex(0.0, 0.0))
        0j
    """
    x, y = z.real, z.imag
    return complex(
        ieee.sin(x) * ieee.cosh(y),
        ieee.cos(x) * ieee.sinh(y),
    )


def ccos(z: complex) -> complex:
    """Комплексный косинус: cos(x)·cosh(y) − i·sin(x)·sinh(y)."""
    x, y = z.real, z.imag
    return complex(
        ieee.cos(x) * ieee.cosh(y),
        -(ieee.sin(x) * ieee.sinh(y)),
    )


def ctan(z: complex) -> complex:
    """
    Комплексный тангенс через удвоенный угол.

    При x2 = 2x, y2 = 2y:
        |y| <= 4: (sin x2, sinh y2) / (cos x2 + cosh y2)
        |y| > 4:  (sin x2 / cosh y2, tanh y2) / (1 + cos x2 / cosh y2)

    Вторая ветвь не переполняется при больших |y| и даёт предел ±i.
    """
    x2 = 2.0 * z.real
    y2 = 2.0 * z.imag

    sin_x2 = ieee.sin(x2)
    cos_x2 = ieee.cos(x2)
    cosh_y2 = ieee.cosh(y2)

    if abs(z.imag) <= TAN_DIRECT_RATIO_LIMIT:
        denom = cos_x2 + cosh_y2
        return complex(
            ieee.divide(sin_x2, denom),
            ieee.divide(ieee.sinh(y2), denom),
        )

    denom = 1.0 + ieee.divide(cos_x2, cosh_y2)
    return complex(
        ieee.divide(ieee.divide(sin_x2, cosh_y2), denom),
        ieee.divide(ieee.tanh(y2), denom),
    )


def ccsc(z: complex) -> complex:
    """Комплексный косеканс: 1/sin(z); 0 если sin(z) бесконечен."""
    sin_z = csin(z)
    if ieee.is_infinity(sin_z):
        return ca.ZERO
    return ca.reciprocal(sin_z)


def csec(z: complex) -> complex:
    """Комплексный секанс: 1/cos(z); 0 если cos(z) бесконечен."""
    cos_z = ccos(z)
    if ieee.is_infinity(cos_z):
        return ca.ZERO
    return ca.reciprocal(cos_z)


def ccot(z: complex) -> complex:
    """
    Комплексный котангенс одним комплексным делением cos(z)/sin(z).

    Специальные значения:
        Re z = ±inf или NaN → NaN+NaNi
        Im z = −inf         → 0 + i
        Im z = +inf         → 0 − i
    """
    x, y = z.real, z.imag

    if math.isinf(x) or math.isnan(x):
        return ca.NAN

    if y == -math.inf:
        return complex(0.0, 1.0)
    if y == math.inf:
        return complex(0.0, -1.0)

    sin_x = ieee.sin(x)
    cos_x = ieee.cos(x)
    sinh_y = ieee.sinh(y)
    cosh_y = ieee.cosh(y)

    return ca.div(
        complex(cos_x * cosh_y, -(sin_x * sinh_y)),
        complex(sin_x * cosh_y, cos_x * sinh_y),
    )
