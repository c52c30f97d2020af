"""
Instruments: coupons, swaps and swaptions.
"""

from .base import Instrument, MissingPricingEngineError
from .cashflows import (
    Coupon,
    FixedRateCoupon,
    IborCoupon,
    OvernightIndexedCoupon,
    fixed_rate_leg,
    ibor_leg,
    overnight_leg,
)
from .swap import (
    FixedVsFloatingSwap,
    OvernightIndexedSwap,
    SwapResults,
    SwapType,
    VanillaSwap,
)
from .swaption import EuropeanExercise, SettlementType, Swaption, SwaptionResults

__all__ = [
    "Instrument",
    "MissingPricingEngineError",
    "Coupon",
    "FixedRateCoupon",
    "IborCoupon",
    "OvernightIndexedCoupon",
    "fixed_rate_leg",
    "ibor_leg",
    "overnight_leg",
    "FixedVsFloatingSwap",
    "VanillaSwap",
    "OvernightIndexedSwap",
    "SwapType",
    "SwapResults",
    "EuropeanExercise",
    "SettlementType",
    "Swaption",
    "SwaptionResults",
]
