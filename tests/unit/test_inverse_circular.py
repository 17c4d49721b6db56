"""
Тесты для модуля Inverse Circular Functions

Проверяет:
1. Конечные значения casin/cacos/catan/cacsc/casec/cacot
2. Бесконечность вдоль одной оси для catan
3. Знак нуля и симметрию cacot
4. Вещественные функции (acot в (0, π), полюса acsc/asec)
"""

import math

import pytest

from src.mathtrig.functions.inverse_circular import (
    acos,
    acot,
    acsc,
    asec,
    asin,
    atan,
    cacos,
    cacot,
    cacsc,
    casec,
    casin,
    catan,
)
from src.mathtrig.numerics.ieee import is_close_complex

INF = math.inf
NAN = math.nan
PI = math.pi
HALF_PI = math.pi / 2.0
ACOSH_2 = 1.3169578969248166
EPSILON = 5e-324

Z = complex(2.0, 3.0)


def assert_complex(actual: complex, re: float, im: float) -> None:
    expected = complex(re, im)
    assert is_close_complex(actual, expected), f"{actual!r} != {expected!r}"


def assert_nan(actual: complex) -> None:
    assert math.isnan(actual.real) and math.isnan(actual.imag), f"{actual!r} is not NaN+NaNi"


# =============================================================================
# ТЕСТЫ ASIN / ACOS
# =============================================================================


class TestCasinCacos:
    """Тесты для casin/cacos"""

    def test_finite(self) -> None:
        """asin(2+3i), acos(2+3i)"""
        assert_complex(casin(Z), 0.5706527843210994, 1.9833870299165355)
        assert_complex(cacos(Z), 1.0001435424737972, -1.9833870299165355)

    def test_real_infinity(self) -> None:
        """asin(inf) = (π/2, inf), acos(−inf) = (π, inf)"""
        assert casin(complex(INF, 0.0)) == complex(HALF_PI, INF)
        assert cacos(complex(-INF, 0.0)) == complex(PI, INF)

    def test_imaginary_infinity(self) -> None:
        """asin(2 + i·inf) = (0, inf), acos(2 + i·inf) = (π/2, −inf)"""
        assert casin(complex(2.0, INF)) == complex(0.0, INF)
        assert cacos(complex(2.0, INF)) == complex(HALF_PI, -INF)

    def test_both_infinite_is_nan(self) -> None:
        """Обе компоненты бесконечны → NaN"""
        assert_nan(casin(complex(INF, -INF)))

    def test_sum_is_half_pi(self) -> None:
        """asin(z) + acos(z) = π/2"""
        total = casin(Z) + cacos(Z)
        assert_complex(total, HALF_PI, 0.0)


# =============================================================================
# ТЕСТЫ ATAN
# =============================================================================


class TestCatan:
    """Тесты для catan"""

    def test_finite(self) -> None:
        """atan(2+3i)"""
        assert_complex(catan(Z), 1.4099210495965755, 0.22907268296853878)

    def test_one_sided_infinity(self) -> None:
        """Ровно одна компонента inf → (±π/2, 0)"""
        assert catan(complex(INF, 2.0)) == complex(HALF_PI, 0.0)
        assert catan(complex(2.0, INF)) == complex(HALF_PI, 0.0)
        assert catan(complex(-INF, 2.0)) == complex(-HALF_PI, 0.0)
        assert catan(complex(2.0, -INF)) == complex(-HALF_PI, 0.0)

    def test_one_sided_infinity_negative_finite_component(self) -> None:
        """Знак конечной компоненты тоже учитывается (включая −0)"""
        assert catan(complex(INF, -2.0)) == complex(-HALF_PI, 0.0)
        assert catan(complex(INF, -0.0)) == complex(-HALF_PI, 0.0)

    def test_both_infinite_is_nan(self) -> None:
        """(inf, −inf) → NaN"""
        assert_nan(catan(complex(INF, -INF)))

    def test_zero(self) -> None:
        """atan(0) = 0"""
        assert_complex(catan(complex(0.0, 0.0)), 0.0, 0.0)


# =============================================================================
# ТЕСТЫ ACSC / ASEC
# =============================================================================


class TestCacscCasec:
    """Тесты для cacsc/casec"""

    def test_finite(self) -> None:
        """acsc(2+3i), asec(2+3i)"""
        assert_complex(cacsc(Z), 0.150385604327862, -0.23133469857397337)
        assert_complex(casec(Z), 1.4204107224670346, 0.23133469857397337)

    def test_zero_is_nan(self) -> None:
        """1/0 = NaN+NaNi"""
        assert_nan(cacsc(complex(0.0, 0.0)))
        assert_nan(casec(complex(0.0, 0.0)))

    def test_tiny_arguments(self) -> None:
        """acsc(±ε) = (±π/2, inf), asec(ε) = (0, inf)"""
        assert cacsc(complex(EPSILON, 0.0)) == complex(HALF_PI, INF)
        assert cacsc(complex(-EPSILON, 0.0)) == complex(-HALF_PI, INF)
        assert casec(complex(EPSILON, 0.0)) == complex(0.0, INF)

    def test_infinity(self) -> None:
        """acsc(inf) = 0, asec(±inf) = π/2"""
        assert_complex(cacsc(complex(INF, 0.0)), 0.0, 0.0)
        assert_complex(casec(complex(INF, 0.0)), HALF_PI, 0.0)
        assert_complex(casec(complex(-INF, 0.0)), HALF_PI, 0.0)

    def test_inside_unit_interval(self) -> None:
        """asec(−0.5) = (π, acosh 2)"""
        assert_complex(casec(complex(-0.5, 0.0)), PI, ACOSH_2)


# =============================================================================
# ТЕСТЫ ACOT
# =============================================================================


class TestCacot:
    """Тесты для cacot"""

    def test_finite(self) -> None:
        """acot(2+3i), acot(−2+3i)"""
        assert_complex(cacot(Z), 0.16087527719832112, -0.22907268296853883)
        assert_complex(cacot(complex(-2.0, 3.0)), 2.980717376391472, -0.22907268296853883)

    def test_zero(self) -> None:
        """acot(±0) = π/2"""
        assert cacot(complex(0.0, 0.0)) == complex(HALF_PI, 0.0)
        assert cacot(complex(-0.0, 0.0)) == complex(HALF_PI, 0.0)

    def test_tiny_argument(self) -> None:
        """1/ε бесконечно → π/2"""
        assert cacot(complex(EPSILON, 0.0)) == complex(HALF_PI, 0.0)

    def test_infinity(self) -> None:
        """acot(inf) = 0, acot(−inf) = π"""
        assert_complex(cacot(complex(INF, 0.0)), 0.0, 0.0)
        assert_complex(cacot(complex(-INF, 0.0)), PI, 0.0)

    def test_negative_real_axis(self) -> None:
        """acot(−0.5) = π − atan(2)"""
        assert_complex(cacot(complex(-0.5, 0.0)), PI - math.atan(2.0), 0.0)


# =============================================================================
# ТЕСТЫ ВЕЩЕСТВЕННЫХ ФУНКЦИЙ
# =============================================================================


class TestRealInverseCircular:
    """Тесты вещественных asin/acos/atan/acsc/asec/acot"""

    def test_primary(self) -> None:
        """asin, acos, atan"""
        assert asin(1.0) == HALF_PI
        assert acos(-1.0) == PI
        assert atan(INF) == HALF_PI
        assert math.isnan(asin(2.0))
        assert math.isnan(acos(NAN))

    def test_acsc_asec(self) -> None:
        """acsc(x) = asin(1/x), asec(x) = acos(1/x)"""
        assert acsc(2.0) == pytest.approx(PI / 6.0)
        assert asec(2.0) == pytest.approx(PI / 3.0)
        assert acsc(INF) == 0.0
        assert asec(INF) == HALF_PI

    def test_acsc_asec_poles(self) -> None:
        """x == 0 и |x| < 1 → NaN"""
        assert math.isnan(acsc(0.0))
        assert math.isnan(asec(0.0))
        assert math.isnan(acsc(0.5))
        assert math.isnan(asec(-0.5))

    def test_acot_range(self) -> None:
        """acot лежит в (0, π)"""
        assert acot(0.0) == HALF_PI
        assert acot(-0.0) == HALF_PI
        assert acot(1.0) == pytest.approx(PI / 4.0)
        assert acot(-1.0) == pytest.approx(3.0 * PI / 4.0)
        assert acot(INF) == 0.0
        assert acot(-INF) == PI
        assert acot(2.0) == pytest.approx(0.4636476090008061)
