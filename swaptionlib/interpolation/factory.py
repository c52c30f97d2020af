"""
Factory functions and utilities for creating interpolators.
"""
import math
from typing import List

from .base import Interpolator
from .linear import (
    LinearDiscountFactorInterpolator,
    LogLinearDiscountFactorInterpolator,
)

INTERPOLATORS = {
    "LINEAR_DF": LinearDiscountFactorInterpolator,
    "LOGLINEAR_DF": LogLinearDiscountFactorInterpolator,
}


def create_interpolator(method: str,
                        pillars: List[float],
                        values: List[float]) -> Interpolator:
    """
    Create an interpolator based on method name.

    Args:
        method: Interpolation method name
        pillars: Time points
        values: Discount factors to interpolate

    Returns:
        Configured interpolator
    """
    try:
        cls = INTERPOLATORS[method.upper()]
    except KeyError:
        raise ValueError(f"Unknown interpolation method: {method}. "
                         f"Available: {', '.join(INTERPOLATORS)}") from None
    return cls(pillars, values)


def discount_factor_to_zero_rate(df: float, time: float) -> float:
    """Convert discount factor to continuously compounded zero rate."""
    if df <= 0:
        raise ValueError("Discount factor must be positive")
    if time <= 0:
        raise ValueError("Time must be positive")

    return -math.log(df) / time


def zero_rate_to_discount_factor(rate: float, time: float) -> float:
    """Convert zero rate to discount factor."""
    return math.exp(-rate * time)
