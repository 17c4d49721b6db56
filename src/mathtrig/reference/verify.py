"""
Reference Verification — сверка реализаций с эталонными таблицами

Каждый вектор таблицы вычисляется через реестр функций и сравнивается
покомпонентно:
- NaN совпадает только с NaN
- ±inf должны совпадать точно
- конечные значения — через is_close (rel_tol, abs_tol)
- при signed_zero=True дополнительно сравнивается знак нуля

Результаты возвращаются значениями (CaseOutcome, VerificationReport),
а не бросаются исключениями.
"""

from dataclasses import dataclass

from src.mathtrig.numerics.ieee import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    is_close_complex,
    validate_positive,
)
from src.mathtrig.reference.models import ReferenceCase, ReferenceDomain, ReferenceTable
from src.mathtrig.registry import get_function


# =============================================================================
# CONFIGURATION
# =============================================================================


@dataclass(frozen=True)
class VerificationConfig:
    """Параметры сравнения фактических и эталонных значений."""

    rel_tol: float = EPS_FLOAT_COMPARE_REL
    abs_tol: float = EPS_FLOAT_COMPARE_ABS
    signed_zero: bool = False

    def __post_init__(self) -> None:
        validate_positive(self.rel_tol, "rel_tol")
        validate_positive(self.abs_tol, "abs_tol")


# =============================================================================
# RESULTS
# =============================================================================


@dataclass(frozen=True)
class CaseOutcome:
    """Результат сверки одного вектора."""

    case: ReferenceCase
    passed: bool
    actual: complex
    expected: complex
    details: str


@dataclass(frozen=True)
class VerificationReport:
    """Результат сверки таблицы."""

    table_name: str
    domain: ReferenceDomain
    outcomes: tuple[CaseOutcome, ...]

    @property
    def passed(self) -> int:
        return sum(1 for outcome in self.outcomes if outcome.passed)

    @property
    def failed(self) -> int:
        return len(self.outcomes) - self.passed

    @property
    def all_passed(self) -> bool:
        return self.failed == 0

    def failures(self) -> list[CaseOutcome]:
        return [outcome for outcome in self.outcomes if not outcome.passed]


# =============================================================================
# VERIFICATION
# =============================================================================


def evaluate_case(case: ReferenceCase, domain: ReferenceDomain) -> complex:
    """
    Вычисление функции вектора в его домене.

    Для real результат возвращается как complex(value, 0.0).
    """
    function = get_function(case.function)
    argument = case.argument_value()

    if domain == ReferenceDomain.REAL:
        return complex(function.real(argument.real), 0.0)

    return function.complex(argument)


def verify_case(
    case: ReferenceCase,
    domain: ReferenceDomain,
    config: VerificationConfig | None = None,
) -> CaseOutcome:
    """
    Сверка одного вектора.

    Args:
        case: Эталонный вектор
        domain: Домен таблицы (real/complex)
        config: Параметры сравнения (по умолчанию VerificationConfig())

    Returns:
        CaseOutcome с фактическим значением и описанием расхождения
    """
    config = config or VerificationConfig()

    actual = evaluate_case(case, domain)
    expected = case.expected_value()
    passed = is_close_complex(
        actual,
        expected,
        rel_tol=config.rel_tol,
        abs_tol=config.abs_tol,
        signed_zero=config.signed_zero,
    )

    if passed:
        details = ""
    elif domain == ReferenceDomain.REAL:
        details = (
            f"{case.function}({case.argument[0]!r}) = {actual.real!r}, "
            f"expected {expected.real!r}"
        )
    else:
        details = (
            f"c{case.function}({case.argument_value()!r}) = {actual!r}, "
            f"expected {expected!r}"
        )

    return CaseOutcome(
        case=case,
        passed=passed,
        actual=actual,
        expected=expected,
        details=details,
    )


def verify_table(
    table: ReferenceTable, config: VerificationConfig | None = None
) -> VerificationReport:
    """
    Сверка всех векторов таблицы.

    Examples:
        >>> from src.mathtrig.reference.loader import load_builtin_table
        >>> verify_table(load_builtin_table("real_reference")).all_passed
        True
    """
    config = config or VerificationConfig()
    outcomes = tuple(verify_case(case, table.domain, config) for case in table.cases)
    return VerificationReport(
        table_name=table.name,
        domain=table.domain,
        outcomes=outcomes,
    )
