"""
mathtrig — circular, hyperbolic and inverse trigonometric functions

Вещественные (sin, ..., acoth) и комплексные (csin, ..., cacoth) версии
24 функций с IEEE-754 семантикой: функции тотальны, не бросают исключений,
NaN обозначает неопределённость, знак нуля учитывается по знаковому биту.
"""

# Function families
from src.mathtrig.functions import (
    HALF_PI,
    PI,
    QUARTER_PI,
    TAN_DIRECT_RATIO_LIMIT,
    acos,
    acosh,
    acot,
    acoth,
    acsc,
    acsch,
    asec,
    asech,
    asin,
    asinh,
    atan,
    atanh,
    cacos,
    cacosh,
    cacot,
    cacoth,
    cacsc,
    cacsch,
    casec,
    casech,
    casin,
    casinh,
    catan,
    catanh,
    ccos,
    ccosh,
    ccot,
    ccoth,
    ccsc,
    ccsch,
    cos,
    cosh,
    cot,
    coth,
    csc,
    csch,
    csec,
    csech,
    csin,
    csinh,
    ctan,
    ctanh,
    degrees_to_radians,
    radians_to_degrees,
    sec,
    sech,
    sin,
    sinh,
    tan,
    tanh,
)

# Numerics
from src.mathtrig.numerics.ieee import (
    is_close,
    is_close_complex,
    is_negative,
)

# Registry
from src.mathtrig.registry import (
    FUNCTIONS,
    FunctionFamily,
    TrigFunction,
    UnknownFunctionError,
    function_names,
    get_function,
)

__all__ = [
    # Angles
    "PI",
    "HALF_PI",
    "QUARTER_PI",
    "degrees_to_radians",
    "radians_to_degrees",
    # Circular
    "TAN_DIRECT_RATIO_LIMIT",
    "sin",
    "cos",
    "tan",
    "csc",
    "sec",
    "cot",
    "csin",
    "ccos",
    "ctan",
    "ccsc",
    "csec",
    "ccot",
    # Hyperbolic
    "sinh",
    "cosh",
    "tanh",
    "csch",
    "sech",
    "coth",
    "csinh",
    "ccosh",
    "ctanh",
    "ccsch",
    "csech",
    "ccoth",
    # Inverse circular
    "asin",
    "acos",
    "atan",
    "acsc",
    "asec",
    "acot",
    "casin",
    "cacos",
    "catan",
    "cacsc",
    "casec",
    "cacot",
    # Inverse hyperbolic
    "asinh",
    "acosh",
    "atanh",
    "acsch",
    "asech",
    "acoth",
    "casinh",
    "cacosh",
    "catanh",
    "cacsch",
    "casech",
    "cacoth",
    # Numerics
    "is_negative",
    "is_close",
    "is_close_complex",
    # Registry
    "FunctionFamily",
    "TrigFunction",
    "FUNCTIONS",
    "UnknownFunctionError",
    "get_function",
    "function_names",
]
