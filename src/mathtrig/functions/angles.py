"""
Angles — π Fractions and Degree/Radian Conversion
"""

import math
from typing import Final

# =============================================================================
# ДОЛИ π
# =============================================================================

PI: Final[float] = math.pi
HALF_PI: Final[float] = math.pi / 2.0
QUARTER_PI: Final[float] = math.pi / 4.0


def degrees_to_radians(degrees: float) -> float:
    """
    Перевод градусов в радианы.

    Examples:
        >>> round(degrees_to_radians(180.0), 10)
        3.1415926536
    """
    return degrees * math.pi / 180.0


def radians_to_degrees(radians: float) -> float:
    """
    Перевод радиан в градусы.

    Examples:
        >>> round(radians_to_degrees(math.pi), 10)
        180.0
    """
    return radians * 180.0 / math.pi
