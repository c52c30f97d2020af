"""
Swaption engines quoting volatility as shifted lognormal (Black) or normal
(Bachelier).
"""

import logging
import math
from abc import ABC, abstractmethod
from typing import Union

from swaptionlib.conventions.daycount import ACT_365F, DayCountConvention
from swaptionlib.curves.base import YieldCurve
from swaptionlib.instruments.swap import SwapType
from swaptionlib.instruments.swaption import SettlementType, Swaption, SwaptionResults
from swaptionlib.quotes import SimpleQuote

from .black_formula import (
    OptionType,
    bachelier_formula,
    bachelier_formula_std_dev_derivative,
    black_formula,
    black_formula_std_dev_derivative,
)
from .swap import BASIS_POINT, DiscountingSwapEngine

logger = logging.getLogger(__name__)


class BlackStyleSwaptionEngine(ABC):
    """
    Shared annuity and forward calculation for volatility-quoted swaptions.

    The underlying swap is repriced on the discount curve; the option is
    then valued as ``annuity * formula(forward, strike, sigma * sqrt(t))``.
    A payer swaption is a call on the swap rate.

    Args:
        curve: Discount curve
        volatility: Quote or flat volatility number
        day_count: Day count for the time to exercise
    """

    def __init__(
        self,
        curve: YieldCurve,
        volatility: Union[SimpleQuote, float],
        day_count: DayCountConvention = ACT_365F,
    ):
        self.curve = curve
        if not isinstance(volatility, SimpleQuote):
            volatility = SimpleQuote(volatility)
        self.volatility = volatility
        self.day_count = day_count

    @abstractmethod
    def _price(self, option_type: OptionType, strike: float, forward: float,
               std_dev: float, annuity: float) -> float:
        pass

    @abstractmethod
    def _vega(self, strike: float, forward: float, std_dev: float,
              annuity: float) -> float:
        pass

    def calculate(self, swaption: Swaption) -> SwaptionResults:
        if swaption.settlement_type != SettlementType.PHYSICAL:
            raise ValueError(
                f"{self.__class__.__name__} prices physically settled swaptions only"
            )
        exercise_date = swaption.exercise.date
        reference_date = self.curve.reference_date
        if exercise_date < reference_date:
            return SwaptionResults(value=0.0)

        swap = swaption.underlying_swap
        swap_results = DiscountingSwapEngine(self.curve).calculate(swap)
        fixed_bps, floating_bps = swap_results.leg_bps
        annuity = abs(fixed_bps) / BASIS_POINT
        forward = swap_results.fair_rate
        strike = swap.fixed_rate

        if swap.spread != 0.0:
            correction = swap.spread * abs(floating_bps / fixed_bps)
            strike -= correction
            forward -= correction

        t = self.day_count.year_fraction(reference_date, exercise_date)
        std_dev = self.volatility.value * math.sqrt(t)
        option_type = (
            OptionType.CALL if swaption.swap_type == SwapType.PAYER else OptionType.PUT
        )
        value = self._price(option_type, strike, forward, std_dev, annuity)
        vega = self._vega(strike, forward, std_dev, annuity) * math.sqrt(t)

        logger.debug(
            "%s: forward %.6f strike %.6f annuity %.6f std dev %.6f -> %.6f",
            self.__class__.__name__, forward, strike, annuity, std_dev, value,
        )
        return SwaptionResults(value=value, forward=forward, annuity=annuity, vega=vega)


class BlackSwaptionEngine(BlackStyleSwaptionEngine):
    """Shifted lognormal swaption engine; ``displacement`` is the shift."""

    def __init__(
        self,
        curve: YieldCurve,
        volatility: Union[SimpleQuote, float],
        day_count: DayCountConvention = ACT_365F,
        displacement: float = 0.0,
    ):
        super().__init__(curve, volatility, day_count)
        self.displacement = displacement

    def _price(self, option_type, strike, forward, std_dev, annuity):
        return black_formula(
            option_type, strike, forward, std_dev, annuity, self.displacement
        )

    def _vega(self, strike, forward, std_dev, annuity):
        return black_formula_std_dev_derivative(
            strike, forward, std_dev, annuity, self.displacement
        )


class BachelierSwaptionEngine(BlackStyleSwaptionEngine):
    """Normal volatility swaption engine."""

    def _price(self, option_type, strike, forward, std_dev, annuity):
        return bachelier_formula(option_type, strike, forward, std_dev, annuity)

    def _vega(self, strike, forward, std_dev, annuity):
        return bachelier_formula_std_dev_derivative(strike, forward, std_dev, annuity)
