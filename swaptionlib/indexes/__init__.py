"""
Rate indexes: term-fixing and overnight.

Swap-rate indexes live in ``swaptionlib.indexes.swap_index``; they build
instruments, which themselves depend on the indexes here.
"""

from .base import InterestRateIndex, MissingForwardingCurveError
from .ibor import Euribor, Euribor3M, Euribor6M, IborIndex
from .overnight import Estr, OvernightIndex, Sofr, Sonia

__all__ = [
    "InterestRateIndex",
    "MissingForwardingCurveError",
    "IborIndex",
    "Euribor",
    "Euribor3M",
    "Euribor6M",
    "OvernightIndex",
    "Estr",
    "Sofr",
    "Sonia",
]
