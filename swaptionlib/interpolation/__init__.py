"""
Interpolation methods for discount curves.
"""

from .base import Interpolator
from .factory import (
    create_interpolator,
    discount_factor_to_zero_rate,
    zero_rate_to_discount_factor,
)
from .linear import (
    LinearDiscountFactorInterpolator,
    LogLinearDiscountFactorInterpolator,
)

__all__ = [
    "Interpolator",
    "LinearDiscountFactorInterpolator",
    "LogLinearDiscountFactorInterpolator",
    "create_interpolator",
    "discount_factor_to_zero_rate",
    "zero_rate_to_discount_factor",
]
