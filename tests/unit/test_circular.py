"""
Тесты для модуля Circular Functions

Проверяет:
1. Конечные значения csin/ccos/ctan/ccsc/csec/ccot
2. Специальные значения (inf, NaN, полюса)
3. Обе ветви ctan
4. Вещественные функции и полюса в точном нуле
"""

import math

import pytest

from src.mathtrig.functions.circular import (
    TAN_DIRECT_RATIO_LIMIT,
    ccos,
    ccot,
    ccsc,
    cos,
    cot,
    csc,
    csec,
    csin,
    ctan,
    sec,
    sin,
    tan,
)
from src.mathtrig.numerics.ieee import is_close_complex, is_nan

INF = math.inf
NAN = math.nan
HALF_PI = math.pi / 2.0

Z = complex(2.0, 3.0)


def assert_complex(actual: complex, re: float, im: float) -> None:
    expected = complex(re, im)
    assert is_close_complex(actual, expected), f"{actual!r} != {expected!r}"


def assert_nan(actual: complex) -> None:
    assert math.isnan(actual.real) and math.isnan(actual.imag), f"{actual!r} is not NaN+NaNi"


# =============================================================================
# ТЕСТЫ SIN / COS / TAN
# =============================================================================


class TestCsin:
    """Тесты для csin"""

    def test_finite(self) -> None:
        """sin(2+3i)"""
        assert_complex(csin(Z), 9.15449914691143, -4.168906959966565)

    def test_zero(self) -> None:
        """sin(0) = 0"""
        assert csin(complex(0.0, 0.0)) == 0j

    def test_infinite_real_part_is_nan(self) -> None:
        """sin(inf + 0i) = NaN"""
        assert_nan(csin(complex(INF, 0.0)))

    def test_infinite_imaginary_part(self) -> None:
        """sin(2 ± i·inf) = (±inf по знаку sin 2, ...)"""
        assert csin(complex(2.0, INF)) == complex(INF, -INF)
        assert csin(complex(2.0, -INF)) == complex(INF, INF)

    def test_tiny_argument(self) -> None:
        """sin(ε) = ε"""
        assert csin(complex(5e-324, 0.0)) == complex(5e-324, 0.0)

    def test_nan_propagates(self) -> None:
        """NaN распространяется"""
        assert is_nan(csin(complex(NAN, 0.0)))


class TestCcos:
    """Тесты для ccos"""

    def test_finite(self) -> None:
        """cos(2+3i)"""
        assert_complex(ccos(Z), -4.189625690968807, -9.109227893755337)

    def test_zero(self) -> None:
        """cos(0) = 1"""
        assert ccos(complex(0.0, 0.0)) == complex(1.0, 0.0)

    def test_infinite_imaginary_part(self) -> None:
        """cos(2 − i·inf)"""
        assert ccos(complex(2.0, -INF)) == complex(-INF, INF)


class TestCtan:
    """Тесты для ctan"""

    def test_finite(self) -> None:
        """tan(2+3i)"""
        assert_complex(ctan(Z), -0.0037640256415042484, 1.0032386273536098)

    def test_pole_on_real_axis(self) -> None:
        """tan(π/2): cos(π) + cosh(0) = 0 точно → (inf, NaN)"""
        result = ctan(complex(HALF_PI, 0.0))
        assert result.real == INF
        assert math.isnan(result.imag)

    def test_large_imaginary_branch(self) -> None:
        """При |Im z| > 4 используется ветвь с tanh"""
        assert ctan(complex(2.0, INF)) == complex(0.0, 1.0)
        assert ctan(complex(2.0, -INF)) == complex(0.0, -1.0)
        assert_complex(ctan(complex(1.0, 20.0)), 0.0, 1.0)

    def test_branches_agree_at_threshold(self) -> None:
        """Обе ветви совпадают по обе стороны от порога"""
        below = ctan(complex(1.0, TAN_DIRECT_RATIO_LIMIT))
        above = ctan(complex(1.0, math.nextafter(TAN_DIRECT_RATIO_LIMIT, INF)))
        assert is_close_complex(below, above, rel_tol=1e-12)


# =============================================================================
# ТЕСТЫ CSC / SEC / COT
# =============================================================================


class TestCcscCsec:
    """Тесты для ccsc/csec"""

    def test_finite(self) -> None:
        """csc(2+3i), sec(2+3i)"""
        assert_complex(ccsc(Z), 0.09047320975320743, 0.041200986288574125)
        assert_complex(csec(Z), -0.041674964411144266, 0.0906111371962376)

    def test_reciprocal_of_zero_is_nan(self) -> None:
        """csc(0) = 1/0 = NaN+NaNi"""
        assert_nan(ccsc(complex(0.0, 0.0)))

    def test_sec_of_zero(self) -> None:
        """sec(0) = 1"""
        assert csec(complex(0.0, 0.0)) == complex(1.0, 0.0)

    def test_infinite_denominator_collapses_to_zero(self) -> None:
        """Бесконечный sin/cos → 0"""
        assert ccsc(complex(2.0, INF)) == 0j
        assert csec(complex(2.0, -INF)) == 0j

    def test_real_axis(self) -> None:
        """csc(−π/2) = −1, csc(ε) = inf"""
        assert_complex(ccsc(complex(-HALF_PI, 0.0)), -1.0, 0.0)
        assert ccsc(complex(5e-324, 0.0)).real == INF


class TestCcot:
    """Тесты для ccot"""

    def test_finite(self) -> None:
        """cot(2+3i)"""
        assert_complex(ccot(Z), -0.003739710376336932, -0.9967577965693583)

    def test_zero_is_nan(self) -> None:
        """cot(0) = NaN+NaNi"""
        assert_nan(ccot(complex(0.0, 0.0)))

    def test_tiny_argument(self) -> None:
        """cot(ε) = inf"""
        result = ccot(complex(5e-324, 0.0))
        assert result.real == INF
        assert result.imag == 0.0

    def test_infinite_imaginary_part(self) -> None:
        """cot(x ∓ i·inf) = ±i"""
        assert ccot(complex(2.0, -INF)) == complex(0.0, 1.0)
        assert ccot(complex(2.0, INF)) == complex(0.0, -1.0)

    def test_infinite_or_nan_real_part(self) -> None:
        """Re = inf или NaN → NaN+NaNi"""
        assert_nan(ccot(complex(INF, 0.0)))
        assert_nan(ccot(complex(-INF, -INF)))
        assert_nan(ccot(complex(NAN, 1.0)))

    def test_real_axis(self) -> None:
        """cot(−π/2) ≈ 0"""
        assert_complex(ccot(complex(-HALF_PI, 0.0)), -6.123233995736766e-17, 0.0)


# =============================================================================
# ТЕСТЫ ВЕЩЕСТВЕННЫХ ФУНКЦИЙ
# =============================================================================


class TestRealCircular:
    """Тесты вещественных sin/cos/tan/csc/sec/cot"""

    def test_primary(self) -> None:
        """Обычные значения"""
        assert sin(HALF_PI) == 1.0
        assert cos(0.0) == 1.0
        assert tan(1.0) == pytest.approx(1.5574077246549023)
        assert math.isnan(sin(INF))

    def test_exact_zero_poles(self) -> None:
        """sin == 0 → csc/cot NaN"""
        assert math.isnan(csc(0.0))
        assert math.isnan(cot(0.0))
        assert math.isnan(cot(-0.0))

    def test_near_pole_is_large_not_nan(self) -> None:
        """cos(π/2) ≠ 0 в float, поэтому tan/sec конечны"""
        assert tan(HALF_PI) == pytest.approx(1.633123935319537e16)
        assert sec(HALF_PI) == pytest.approx(1.633123935319537e16)

    def test_reciprocals(self) -> None:
        """csc, sec, cot"""
        assert csc(HALF_PI) == 1.0
        assert sec(0.0) == 1.0
        assert cot(math.pi / 4.0) == pytest.approx(1.0)
        assert sec(math.pi) == -1.0
