"""
Term-fixing (IBOR-style) indexes.
"""

from datetime import date
from typing import Optional, Union

from swaptionlib.conventions.calendars import TARGET
from swaptionlib.conventions.daycount import ACT_360
from swaptionlib.conventions.tenor import Tenor
from swaptionlib.conventions.types import BusinessDayAdjustment
from swaptionlib.curves.base import YieldCurve

from .base import InterestRateIndex


class IborIndex(InterestRateIndex):
    """Index fixed for a term deposit, forecast from the forwarding curve."""

    def forecast_fixing(self, fixing_date: date) -> float:
        """Simply compounded forward over the deposit period of the fixing."""
        curve = self._require_curve()
        start = self.value_date(fixing_date)
        end = self.maturity_date(start)
        tau = self.day_count.year_fraction(start, end)
        return (curve.discount(start) / curve.discount(end) - 1.0) / tau


class Euribor(IborIndex):
    """Euribor: T+2 on TARGET, modified following, end of month, ACT/360."""

    def __init__(
        self,
        tenor: Union[str, Tenor],
        forwarding_curve: Optional[YieldCurve] = None,
    ):
        tenor = Tenor.coerce(tenor)
        super().__init__(
            name=f"Euribor{tenor}",
            tenor=tenor,
            fixing_days=2,
            fixing_calendar=TARGET,
            business_day_convention=BusinessDayAdjustment.MODIFIED_FOLLOWING,
            end_of_month=True,
            day_count=ACT_360,
            forwarding_curve=forwarding_curve,
        )


class Euribor3M(Euribor):
    def __init__(self, forwarding_curve: Optional[YieldCurve] = None):
        super().__init__("3M", forwarding_curve)


class Euribor6M(Euribor):
    def __init__(self, forwarding_curve: Optional[YieldCurve] = None):
        super().__init__("6M", forwarding_curve)
