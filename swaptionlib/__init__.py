"""Swaption Calibration Helpers.

This package turns market-quoted swaption volatilities into prices that can be
compared with a short-rate model's implied prices, as needed by a model
calibration loop.

Key modules:
- calibration: Swaption calibration helpers (term-fixing and overnight legs)
- instruments: Fixed-vs-floating swaps, overnight indexed swaps and swaptions
- pricingengines: Discounting swap engine, Black/Bachelier and Jamshidian swaption engines
- curves: Flat-forward and interpolated discount curves
- indexes: IBOR, overnight and overnight-indexed swap indexes
- schedule: Payment schedule generation
- conventions: Calendars, day counts, tenors and business day rules
"""

__version__ = "1.0.0"

__all__ = [
    "__version__",
    # Main modules are imported via subpackages
    "calibration",
    "instruments",
    "pricingengines",
    "models",
    "curves",
    "indexes",
    "schedule",
    "conventions",
    "interpolation",
]
