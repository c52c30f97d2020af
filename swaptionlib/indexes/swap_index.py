"""
Swap-rate indexes fixed on overnight-indexed swaps.
"""

from datetime import date, datetime
from typing import Optional, Union

from swaptionlib.conventions.calendars import SOFR, Calendar
from swaptionlib.conventions.daycount import ACT_360, DayCountConvention
from swaptionlib.conventions.tenor import Tenor
from swaptionlib.conventions.types import (
    BusinessDayAdjustment,
    DateGeneration,
    RateAveraging,
)
from swaptionlib.curves.base import YieldCurve
from swaptionlib.instruments.swap import OvernightIndexedSwap, SwapType
from swaptionlib.pricingengines.swap import DiscountingSwapEngine
from swaptionlib.schedule.generator import make_schedule

from .base import InterestRateIndex
from .overnight import OvernightIndex, Sofr


class OvernightIndexedSwapIndex(InterestRateIndex):
    """
    Par rate of a standard fixed-vs-overnight swap starting on the value date.

    Both legs roll on the fixed leg tenor. The fixing is the fair fixed rate of
    the underlying swap, discounted on ``discount_curve`` or, when none is
    given, on the overnight index's forwarding curve.
    """

    def __init__(
        self,
        family_name: str,
        tenor: Union[str, Tenor],
        settlement_days: int,
        fixing_calendar: Calendar,
        fixed_leg_tenor: Union[str, Tenor],
        fixed_leg_day_count: DayCountConvention,
        overnight_index: OvernightIndex,
        averaging_method: RateAveraging = RateAveraging.COMPOUND,
        discount_curve: Optional[YieldCurve] = None,
    ):
        tenor = Tenor.coerce(tenor)
        super().__init__(
            name=f"{family_name}{tenor} {fixed_leg_day_count}",
            tenor=tenor,
            fixing_days=settlement_days,
            fixing_calendar=fixing_calendar,
            business_day_convention=BusinessDayAdjustment.MODIFIED_FOLLOWING,
            end_of_month=False,
            day_count=fixed_leg_day_count,
        )
        self.family_name = family_name
        self.fixed_leg_tenor = Tenor.coerce(fixed_leg_tenor)
        self.overnight_index = overnight_index
        self.averaging_method = averaging_method
        self.discount_curve = discount_curve

    @property
    def version(self) -> int:
        stamps = [self._version, self.overnight_index.version]
        if self.discount_curve is not None:
            stamps.append(self.discount_curve.version)
        return max(stamps)

    def _require_curve(self) -> YieldCurve:
        return self.overnight_index._require_curve()

    def underlying_swap(self, fixing_date: Union[date, datetime]) -> OvernightIndexedSwap:
        """Zero-rate payer swap whose fair rate is the fixing for the date."""
        start = self.value_date(fixing_date)
        # Unadjusted end; the schedule applies the termination convention
        end = self.tenor.add_to(start)
        schedule = make_schedule(
            start,
            end,
            self.fixed_leg_tenor,
            self.fixing_calendar,
            self.business_day_convention,
            self.business_day_convention,
            DateGeneration.BACKWARD,
        )
        swap = OvernightIndexedSwap(
            SwapType.PAYER,
            1.0,
            schedule,
            0.0,
            self.day_count,
            schedule,
            self.overnight_index,
            averaging_method=self.averaging_method,
        )
        curve = self.discount_curve or self._require_curve()
        swap.set_pricing_engine(DiscountingSwapEngine(curve))
        return swap

    def forecast_fixing(self, fixing_date: date) -> float:
        return self.underlying_swap(fixing_date).fair_rate()


class UsdSofrSwapIceFix(OvernightIndexedSwapIndex):
    """
    USD SOFR swap rate fixed by ICE Benchmark Administration at 11am New York.

    Annual ACT/360 fixed leg against annual compounded SOFR, T+2 settlement
    on the SOFR calendar.
    """

    def __init__(
        self,
        tenor: Union[str, Tenor],
        forwarding_curve: Optional[YieldCurve] = None,
        discount_curve: Optional[YieldCurve] = None,
    ):
        super().__init__(
            family_name="UsdSofrSwapIceFix",
            tenor=tenor,
            settlement_days=2,
            fixing_calendar=SOFR,
            fixed_leg_tenor="1Y",
            fixed_leg_day_count=ACT_360,
            overnight_index=Sofr(forwarding_curve),
            discount_curve=discount_curve,
        )
