"""
Pricing engines for swaps and swaptions.
"""

from .black_formula import OptionType, bachelier_formula, black_formula
from .discretized import swaption_mandatory_times
from .jamshidian import JamshidianSwaptionEngine
from .swap import BASIS_POINT, DiscountingSwapEngine
from .swaption import BachelierSwaptionEngine, BlackSwaptionEngine

__all__ = [
    "OptionType",
    "black_formula",
    "bachelier_formula",
    "swaption_mandatory_times",
    "DiscountingSwapEngine",
    "BASIS_POINT",
    "BlackSwaptionEngine",
    "BachelierSwaptionEngine",
    "JamshidianSwaptionEngine",
]
