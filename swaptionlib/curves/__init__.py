"""
Discount curves.
"""

from .base import YieldCurve
from .discount import FlatForwardCurve, InterpolatedDiscountCurve

__all__ = [
    "YieldCurve",
    "FlatForwardCurve",
    "InterpolatedDiscountCurve",
]
