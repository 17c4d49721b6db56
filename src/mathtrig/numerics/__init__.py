"""
Numerics module — IEEE-754 primitives and complex arithmetic.
"""

from src.mathtrig.numerics import complex_arith
from src.mathtrig.numerics.ieee import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    is_both_infinite,
    is_close,
    is_close_complex,
    is_close_component,
    is_infinity,
    is_nan,
    is_negative,
    is_one_sided_infinite,
    is_valid_float,
    validate_positive,
)

__all__ = [
    # Constants
    "EPS_FLOAT_COMPARE_REL",
    "EPS_FLOAT_COMPARE_ABS",
    # Sign and classification
    "is_negative",
    "is_valid_float",
    "is_nan",
    "is_infinity",
    "is_both_infinite",
    "is_one_sided_infinite",
    # Comparison
    "is_close",
    "is_close_component",
    "is_close_complex",
    # Validation
    "validate_positive",
    # Complex arithmetic
    "complex_arith",
]
