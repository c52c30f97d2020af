"""
Jamshidian decomposition of a European swaption under Hull-White.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from scipy.optimize import brentq

from swaptionlib.instruments.swap import SwapType
from swaptionlib.instruments.swaption import SettlementType, Swaption, SwaptionResults

from .black_formula import OptionType

if TYPE_CHECKING:
    from swaptionlib.models.hull_white import HullWhite

logger = logging.getLogger(__name__)


class JamshidianSwaptionEngine:
    """
    Prices a swaption as a portfolio of zero-coupon bond options.

    The underlying is treated as a coupon bond paying the fixed coupons plus
    the nominal at maturity, struck at the nominal on the exercise date. The
    short rate r* at which the bond is worth the strike splits the option
    into one bond option per cash flow.

    A payer swaption is a put on the coupon bond.
    """

    def __init__(self, model: HullWhite):
        self.model = model

    def _critical_rate(self, maturity, times, amounts, strike) -> float:
        def objective(r: float) -> float:
            value = sum(
                c * self.model.discount_bond(maturity, t, r)
                for t, c in zip(times, amounts)
            )
            return value - strike

        lower, upper = -0.1, 0.1
        # Bond value falls as r rises; widen until the strike is bracketed
        for _ in range(50):
            if objective(lower) > 0.0 > objective(upper):
                break
            lower, upper = 2.0 * lower - 0.01, 2.0 * upper + 0.01
        else:
            raise RuntimeError("Could not bracket Jamshidian critical rate")

        r_star = brentq(objective, lower, upper, xtol=1e-14, maxiter=200)
        logger.debug("Jamshidian critical rate %.8f", r_star)
        return r_star

    def calculate(self, swaption: Swaption) -> SwaptionResults:
        if swaption.settlement_type != SettlementType.PHYSICAL:
            raise ValueError(
                f"{self.__class__.__name__} prices physically settled swaptions only"
            )
        curve = self.model.curve
        exercise_date = swaption.exercise.date
        if exercise_date < curve.reference_date:
            return SwaptionResults(value=0.0)

        swap = swaption.underlying_swap
        if swap.spread != 0.0:
            raise ValueError("Jamshidian engine does not support a floating spread")

        maturity = curve.time_from_reference(exercise_date)
        coupons = [c for c in swap.fixed_leg if c.payment_date > exercise_date]
        if not coupons:
            return SwaptionResults(value=0.0)

        times = [curve.time_from_reference(c.payment_date) for c in coupons]
        amounts = [c.amount() for c in coupons]
        amounts[-1] += swap.nominal
        strike = swap.nominal

        r_star = self._critical_rate(maturity, times, amounts, strike)

        option_type = OptionType.PUT if swap.swap_type == SwapType.PAYER else OptionType.CALL
        value = 0.0
        for t, c in zip(times, amounts):
            k = self.model.discount_bond(maturity, t, r_star)
            value += c * self.model.discount_bond_option(option_type, k, maturity, t)
        return SwaptionResults(value=value, additional={"critical_rate": r_star})
