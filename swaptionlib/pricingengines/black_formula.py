"""
Black (shifted lognormal) and Bachelier (normal) option formulas.
"""

import math
from enum import Enum

from scipy.stats import norm


class OptionType(Enum):
    CALL = 1
    PUT = -1


def black_formula(
    option_type: OptionType,
    strike: float,
    forward: float,
    std_dev: float,
    discount: float = 1.0,
    displacement: float = 0.0,
) -> float:
    """
    Black price of an option on a (displaced) lognormal forward.

    Args:
        option_type: CALL or PUT
        strike: Option strike
        forward: Forward value of the underlying
        std_dev: Total standard deviation, sigma * sqrt(T)
        discount: Discount factor or annuity scaling the price
        displacement: Shift added to forward and strike

    Returns:
        Option value
    """
    if std_dev < 0.0:
        raise ValueError(f"Standard deviation must be non-negative: {std_dev}")
    forward = forward + displacement
    strike = strike + displacement
    if forward <= 0.0:
        raise ValueError(
            f"Displaced forward must be positive: {forward} (displacement {displacement})"
        )

    w = option_type.value
    if std_dev == 0.0 or strike <= 0.0:
        return discount * max(w * (forward - strike), 0.0)

    d1 = math.log(forward / strike) / std_dev + 0.5 * std_dev
    d2 = d1 - std_dev
    return discount * w * (forward * norm.cdf(w * d1) - strike * norm.cdf(w * d2))


def black_formula_std_dev_derivative(
    strike: float,
    forward: float,
    std_dev: float,
    discount: float = 1.0,
    displacement: float = 0.0,
) -> float:
    """Derivative of the Black price with respect to the standard deviation."""
    forward = forward + displacement
    strike = strike + displacement
    if std_dev <= 0.0 or strike <= 0.0 or forward <= 0.0:
        return 0.0
    d1 = math.log(forward / strike) / std_dev + 0.5 * std_dev
    return discount * forward * norm.pdf(d1)


def bachelier_formula(
    option_type: OptionType,
    strike: float,
    forward: float,
    std_dev: float,
    discount: float = 1.0,
) -> float:
    """
    Bachelier price of an option on a normally distributed forward.

    Args:
        option_type: CALL or PUT
        strike: Option strike
        forward: Forward value of the underlying
        std_dev: Total standard deviation, sigma * sqrt(T)
        discount: Discount factor or annuity scaling the price

    Returns:
        Option value
    """
    if std_dev < 0.0:
        raise ValueError(f"Standard deviation must be non-negative: {std_dev}")
    d = option_type.value * (forward - strike)
    if std_dev == 0.0:
        return discount * max(d, 0.0)
    h = d / std_dev
    return discount * (d * norm.cdf(h) + std_dev * norm.pdf(h))


def bachelier_formula_std_dev_derivative(
    strike: float,
    forward: float,
    std_dev: float,
    discount: float = 1.0,
) -> float:
    """Derivative of the Bachelier price with respect to the standard deviation."""
    if std_dev <= 0.0:
        return 0.0
    return discount * norm.pdf((forward - strike) / std_dev)
