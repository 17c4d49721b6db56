"""
Function families — real and complex circular, hyperbolic and inverse functions.
"""

# Angles
from src.mathtrig.functions.angles import (
    HALF_PI,
    PI,
    QUARTER_PI,
    degrees_to_radians,
    radians_to_degrees,
)

# Circular
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

# Hyperbolic
from src.mathtrig.functions.hyperbolic import (
    ccosh,
    ccoth,
    ccsch,
    cosh,
    coth,
    csch,
    csech,
    csinh,
    ctanh,
    sech,
    sinh,
    tanh,
)

# Inverse circular
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

# Inverse hyperbolic
from src.mathtrig.functions.inverse_hyperbolic import (
    acosh,
    acoth,
    acsch,
    asech,
    asinh,
    atanh,
    cacosh,
    cacoth,
    cacsch,
    casech,
    casinh,
    catanh,
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
]
