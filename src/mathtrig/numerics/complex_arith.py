"""
Complex Arithmetic — Deterministic Componentwise Operations

Модуль реализует комплексную арифметику поверх built-in `complex`, но без
операторов Python: каждая операция выписана покомпонентно через IEEE-safe
примитивы из ieee.py. Так результат на специальных значениях (±0, ±inf, NaN)
не зависит от версии интерпретатора.

Соглашения:
- mul: (ac − bd, ad + bc), без восстановления бесконечностей
- div: алгоритм Смита; деление на 0+0i даёт NaN+NaNi
- Смешанные real/complex add/sub меняют только действительную часть,
  мнимая часть (включая знак нуля) проходит без изменений
- abs: hypot с масштабированием по большей компоненте
- sqrt: полуугловые формулы без катастрофической потери точности
- asin/acos: алгоритм Hull, Fairgrieve & Tang (1997)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни одна операция не бросает исключений
2. Результат всегда строится через complex(re, im)
3. Знак нуля мнимой части сохраняется в смешанных операциях
"""

import math
import sys
from typing import Final

from src.mathtrig.numerics import ieee

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

ZERO: Final[complex] = complex(0.0, 0.0)
ONE: Final[complex] = complex(1.0, 0.0)
I: Final[complex] = complex(0.0, 1.0)
HALF_I: Final[complex] = complex(0.0, 0.5)
NAN: Final[complex] = complex(math.nan, math.nan)

# Порог масштабирования в sqrt: выше него hypot(re, im) + |re| переполняется
SQRT_RESCALE_THRESHOLD: Final[float] = sys.float_info.max / (math.sqrt(2.0) + 1.0)

# Порог перехода asin/acos на асимптотическую форму
ASIN_OVERFLOW_THRESHOLD: Final[float] = math.sqrt(sys.float_info.max) / 2.0

# Пороги ветвей ядра asin/acos
ASIN_B_THRESHOLD: Final[float] = 0.75
ASIN_A_THRESHOLD: Final[float] = 1.5

LOG_2: Final[float] = math.log(2.0)


# =============================================================================
# БАЗОВЫЕ ОПЕРАЦИИ
# =============================================================================


def add(a: complex, b: complex) -> complex:
    return complex(a.real + b.real, a.imag + b.imag)


def sub(a: complex, b: complex) -> complex:
    return complex(a.real - b.real, a.imag - b.imag)


def add_real(z: complex, x: float) -> complex:
    """z + x для вещественного x: мнимая часть не затрагивается."""
    return complex(z.real + x, z.imag)


def sub_real(z: complex, x: float) -> complex:
    """z − x для вещественного x: мнимая часть не затрагивается."""
    return complex(z.real - x, z.imag)


def rsub_real(x: float, z: complex) -> complex:
    """x − z для вещественного x."""
    return complex(x - z.real, -z.imag)


def neg(z: complex) -> complex:
    return complex(-z.real, -z.imag)


def scale(z: complex, k: float) -> complex:
    """Умножение на вещественный скаляр (используется вместо деления на 2)."""
    return complex(z.real * k, z.imag * k)


def mul(a: complex, b: complex) -> complex:
    """
    Произведение по школьной формуле.

    Examples:
        >>> mul(complex(2.0, 3.0), complex(2.0, 3.0))
        (-5+12j)
    """
    return complex(
        a.real * b.real - a.imag * b.imag,
        a.real * b.imag + a.imag * b.real,
    )


def div(a: complex, b: complex) -> complex:
    """
    Деление по алгоритму Смита.

    Отношение d/c (или c/d) берётся по меньшей компоненте делителя, что
    исключает переполнение промежуточного c² + d².

    Args:
        a: Делимое
        b: Делитель

    Returns:
        a / b; для b == 0+0i — NaN+NaNi (0/0 внутри отношения)
    """
    re_a, im_a = a.real, a.imag
    c, d = b.real, b.imag

    if abs(d) < abs(c):
        doc = ieee.divide(d, c)
        denom = c + d * doc
        return complex(
            ieee.divide(re_a + im_a * doc, denom),
            ieee.divide(im_a - re_a * doc, denom),
        )

    cod = ieee.divide(c, d)
    denom = d + c * cod
    return complex(
        ieee.divide(im_a + re_a * cod, denom),
        ieee.divide(-re_a + im_a * cod, denom),
    )


def rdiv_real(x: float, z: complex) -> complex:
    """
    x / z для вещественного x (алгоритм Смита с нулевой мнимой частью делимого).

    Отличается от div(complex(x, 0), z) знаком нуля мнимой части:
    1 / (c + 0i) даёт мнимую часть −0/c, а не 0/c.
    """
    c, d = z.real, z.imag

    if abs(d) < abs(c):
        doc = ieee.divide(d, c)
        denom = c + d * doc
        return complex(ieee.divide(x, denom), ieee.divide(-x * doc, denom))

    cod = ieee.divide(c, d)
    denom = d + c * cod
    return complex(ieee.divide(x * cod, denom), ieee.divide(-x, denom))


def reciprocal(z: complex) -> complex:
    """1 / z; reciprocal(0+0i) = NaN+NaNi."""
    return rdiv_real(1.0, z)


def square(z: complex) -> complex:
    return mul(z, z)


def rotate(z: complex) -> complex:
    """Поворот на +90°: (x, y) → (−y, x), т.е. умножение на i."""
    return complex(-z.imag, z.real)


def unrotate(z: complex) -> complex:
    """Поворот на −90°: (x, y) → (y, −x), т.е. умножение на −i."""
    return complex(z.imag, -z.real)


def is_zero(z: complex) -> bool:
    """Обе компоненты равны нулю (любого знака)."""
    return z.real == 0.0 and z.imag == 0.0


def equals(z: complex, re: float, im: float) -> bool:
    return z.real == re and z.imag == im


# =============================================================================
# МОДУЛЬ, ЛОГАРИФМ, КОРЕНЬ
# =============================================================================


def hypot(a: float, b: float) -> float:
    """
    Длина вектора (a, b) без переполнения промежуточного квадрата.

    Returns:
        - большая компонента, если меньшая равна 0
        - +inf, если большая бесконечна, а меньшая не NaN
        - иначе large·sqrt(1 + (small/large)²)
    """
    a = abs(a)
    b = abs(b)

    if a < b:
        small, large = a, b
    else:
        small, large = b, a

    if small == 0.0:
        return large

    if math.isinf(large) and not math.isnan(small):
        return math.inf

    ratio = ieee.divide(small, large)
    return large * ieee.sqrt(1.0 + ratio * ratio)


def magnitude(z: complex) -> float:
    return hypot(z.real, z.imag)


def log(z: complex) -> complex:
    """Главное значение логарифма: (log|z|, arg z)."""
    return complex(ieee.log(magnitude(z)), ieee.atan2(z.imag, z.real))


def sqrt(z: complex) -> complex:
    """
    Главное значение квадратного корня.

    Для вещественной оси результат точный: sqrt(−4+0i) = 0+2i.
    Вблизи переполнения аргумент масштабируется на ¼, результат — на 2.
    """
    re, im = z.real, z.imag

    if im == 0.0:
        if re < 0.0:
            return complex(0.0, ieee.sqrt(-re))
        return complex(ieee.sqrt(re), 0.0)

    rescaled = False
    if abs(re) >= SQRT_RESCALE_THRESHOLD or abs(im) >= SQRT_RESCALE_THRESHOLD:
        if math.isinf(im) and not math.isnan(re):
            return complex(math.inf, im)
        re *= 0.25
        im *= 0.25
        rescaled = True

    if re >= 0.0:
        x = ieee.sqrt((hypot(re, im) + re) * 0.5)
        y = ieee.divide(im, 2.0 * x)
    else:
        y = ieee.sqrt((hypot(re, im) - re) * 0.5)
        if im < 0.0:
            y = -y
        x = ieee.divide(im, 2.0 * y)

    if rescaled:
        x *= 2.0
        y *= 2.0

    return complex(x, y)


# =============================================================================
# ASIN / ACOS
# =============================================================================


def _asin_kernel(x: float, y: float) -> tuple[float, float, float]:
    """
    Ядро asin/acos для первого квадранта (x = |Re z|, y = |Im z|).

    Returns:
        (b, b_prime, v): действительная часть результата равна asin(b),
        если b_prime < 0, иначе atan(b_prime); v — модуль мнимой части.
    """
    if x > ASIN_OVERFLOW_THRESHOLD or y > ASIN_OVERFLOW_THRESHOLD:
        b = -1.0
        b_prime = ieee.divide(x, y)

        if x < y:
            small, big = x, y
        else:
            small, big = y, x
        ratio = ieee.divide(small, big)
        v = LOG_2 + ieee.log(big) + 0.5 * ieee.log1p(ratio * ratio)
        return b, b_prime, v

    r = hypot(x + 1.0, y)
    s = hypot(x - 1.0, y)

    a = (r + s) * 0.5
    b = ieee.divide(x, a)

    if b > ASIN_B_THRESHOLD:
        if x <= 1.0:
            amx = (ieee.divide(y * y, r + (x + 1.0)) + (s + (1.0 - x))) * 0.5
            b_prime = ieee.divide(x, ieee.sqrt((a + x) * amx))
        else:
            t = (
                ieee.divide(1.0, r + (x + 1.0)) + ieee.divide(1.0, s + (x - 1.0))
            ) * 0.5
            b_prime = ieee.divide(ieee.divide(x, y), ieee.sqrt((a + x) * t))
    else:
        b_prime = -1.0

    if a < ASIN_A_THRESHOLD:
        if x < 1.0:
            t = (
                ieee.divide(1.0, r + (x + 1.0)) + ieee.divide(1.0, s + (1.0 - x))
            ) * 0.5
            am1 = y * y * t
            v = ieee.log1p(am1 + y * ieee.sqrt(t * (a + 1.0)))
        else:
            am1 = (ieee.divide(y * y, r + (x + 1.0)) + (s + (x - 1.0))) * 0.5
            v = ieee.log1p(am1 + ieee.sqrt(am1 * (a + 1.0)))
    else:
        v = ieee.log(a + ieee.sqrt((a - 1.0) * (a + 1.0)))

    return b, b_prime, v


def asin(z: complex) -> complex:
    """Главное значение арксинуса."""
    re, im = z.real, z.imag
    b, b_prime, v = _asin_kernel(abs(re), abs(im))

    if b_prime < 0.0:
        u = ieee.asin(b)
    else:
        u = ieee.atan(b_prime)

    if re < 0.0:
        u = -u
    if im < 0.0:
        v = -v

    return complex(u, v)


def acos(z: complex) -> complex:
    """Главное значение арккосинуса."""
    re, im = z.real, z.imag
    b, b_prime, v = _asin_kernel(abs(re), abs(im))

    if b_prime < 0.0:
        u = ieee.acos(b)
    else:
        u = ieee.atan(ieee.divide(1.0, b_prime))

    if re < 0.0:
        u = math.pi - u
    if im > 0.0:
        v = -v

    return complex(u, v)
