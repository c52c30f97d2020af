"""
Discounting engine for fixed-vs-floating swaps.
"""

from datetime import date

from swaptionlib.curves.base import YieldCurve
from swaptionlib.instruments.swap import FixedVsFloatingSwap, SwapResults

BASIS_POINT = 1.0e-4


class DiscountingSwapEngine:
    """
    Values each leg by discounting its coupon amounts on a single curve.

    Args:
        curve: Discount curve
        include_settlement_date_flows: Whether cash flows paid on the curve
            reference date still count
    """

    def __init__(self, curve: YieldCurve, include_settlement_date_flows: bool = False):
        self.curve = curve
        self.include_settlement_date_flows = include_settlement_date_flows

    def has_occurred(self, payment_date: date) -> bool:
        ref = self.curve.reference_date
        if payment_date < ref:
            return True
        return payment_date == ref and not self.include_settlement_date_flows

    def calculate(self, swap: FixedVsFloatingSwap) -> SwapResults:
        leg_npv = []
        leg_bps = []
        for leg, sign in swap.legs():
            npv = 0.0
            bps = 0.0
            for coupon in leg:
                if self.has_occurred(coupon.payment_date):
                    continue
                df = self.curve.discount(coupon.payment_date)
                npv += coupon.amount() * df
                bps += coupon.nominal * coupon.accrual_period * df
            leg_npv.append(sign * npv)
            leg_bps.append(sign * bps * BASIS_POINT)

        value = sum(leg_npv)
        fixed_bps, floating_bps = leg_bps

        fair_rate = None
        if fixed_bps != 0.0:
            fair_rate = swap.fixed_rate - value / (fixed_bps / BASIS_POINT)
        fair_spread = None
        if floating_bps != 0.0:
            fair_spread = swap.spread - value / (floating_bps / BASIS_POINT)

        return SwapResults(
            value=value,
            leg_npv=leg_npv,
            leg_bps=leg_bps,
            fair_rate=fair_rate,
            fair_spread=fair_spread,
        )
