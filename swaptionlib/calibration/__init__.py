"""
Calibration helpers turning swaption volatility quotes into model targets.
"""

from .helper import (
    BlackCalibrationHelper,
    CalibrationErrorType,
    HelperState,
    ImpliedVolatilityError,
    UnsupportedVolatilityTypeError,
    VolatilityType,
)
from .swaption_helper import (
    FixedVsFloatingSwaptionHelper,
    IborSwapBuilder,
    InvalidDateOrderError,
    OvernightIndexedSwapBuilder,
    OvernightIndexedSwaptionHelper,
    ResolvedDates,
    SwapBuilder,
    SwaptionHelper,
    SwaptionHelperConfig,
    resolve_dates_from_end_date,
    resolve_dates_from_exercise,
    resolve_dates_from_tenor,
    resolve_start_date,
)

__all__ = [
    "BlackCalibrationHelper",
    "CalibrationErrorType",
    "HelperState",
    "ImpliedVolatilityError",
    "UnsupportedVolatilityTypeError",
    "VolatilityType",
    "FixedVsFloatingSwaptionHelper",
    "SwaptionHelper",
    "OvernightIndexedSwaptionHelper",
    "SwapBuilder",
    "IborSwapBuilder",
    "OvernightIndexedSwapBuilder",
    "SwaptionHelperConfig",
    "ResolvedDates",
    "InvalidDateOrderError",
    "resolve_start_date",
    "resolve_dates_from_tenor",
    "resolve_dates_from_exercise",
    "resolve_dates_from_end_date",
]
