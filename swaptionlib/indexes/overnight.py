"""
Overnight indexes and period rates built from daily fixings.
"""

from datetime import date
from typing import List, Optional

from swaptionlib.conventions.calendars import SOFR, TARGET, UK, Calendar
from swaptionlib.conventions.daycount import ACT_360, ACT_365F, DayCountConvention
from swaptionlib.conventions.types import BusinessDayAdjustment
from swaptionlib.curves.base import YieldCurve

from .ibor import IborIndex


class OvernightIndex(IborIndex):
    """Index fixed daily for one business day."""

    def __init__(
        self,
        name: str,
        fixing_days: int,
        fixing_calendar: Calendar,
        day_count: DayCountConvention,
        forwarding_curve: Optional[YieldCurve] = None,
    ):
        super().__init__(
            name=name,
            tenor="1D",
            fixing_days=fixing_days,
            fixing_calendar=fixing_calendar,
            business_day_convention=BusinessDayAdjustment.FOLLOWING,
            end_of_month=False,
            day_count=day_count,
            forwarding_curve=forwarding_curve,
        )

    def value_dates(self, start: date, end: date) -> List[date]:
        """Business days in [start, end) followed by end itself."""
        dates = [start]
        current = start
        while True:
            current = self.fixing_calendar.advance(current, 1)
            if current >= end:
                break
            dates.append(current)
        dates.append(end)
        return dates

    def _daily_rate(self, start: date, end: date) -> float:
        """Overnight rate for one value period, stored or forecast."""
        curve = self._forwarding_curve
        fixing_date = self.fixing_date(start)
        if curve is None or fixing_date < curve.reference_date:
            return self.fixing(fixing_date)
        tau = self.day_count.year_fraction(start, end)
        return (curve.discount(start) / curve.discount(end) - 1.0) / tau

    def compounded_rate(self, start: date, end: date) -> float:
        """
        Daily compounded rate over [start, end).

        Known fixings are compounded day by day. The forecast part telescopes
        into a ratio of discount factors.

        Args:
            start: Accrual start date
            end: Accrual end date

        Returns:
            Simply compounded equivalent rate with the index day count
        """
        curve = self._forwarding_curve
        tau = self.day_count.year_fraction(start, end)
        if curve is not None and self.fixing_date(start) >= curve.reference_date:
            return (curve.discount(start) / curve.discount(end) - 1.0) / tau

        dates = self.value_dates(start, end)
        growth = 1.0
        i = 0
        while i < len(dates) - 1 and (
            curve is None or self.fixing_date(dates[i]) < curve.reference_date
        ):
            rate = self.fixing(self.fixing_date(dates[i]))
            growth *= 1.0 + rate * self.day_count.year_fraction(dates[i], dates[i + 1])
            i += 1
        if i < len(dates) - 1:
            growth *= curve.discount(dates[i]) / curve.discount(dates[-1])
        return (growth - 1.0) / tau

    def averaged_rate(self, start: date, end: date) -> float:
        """Arithmetic average of daily rates over [start, end), weighted by accrual."""
        dates = self.value_dates(start, end)
        accrued = 0.0
        for d1, d2 in zip(dates[:-1], dates[1:]):
            accrued += self._daily_rate(d1, d2) * self.day_count.year_fraction(d1, d2)
        return accrued / self.day_count.year_fraction(start, end)


class Estr(OvernightIndex):
    def __init__(self, forwarding_curve: Optional[YieldCurve] = None):
        super().__init__("ESTR", 0, TARGET, ACT_360, forwarding_curve)


class Sofr(OvernightIndex):
    def __init__(self, forwarding_curve: Optional[YieldCurve] = None):
        super().__init__("SOFR", 0, SOFR, ACT_360, forwarding_curve)


class Sonia(OvernightIndex):
    def __init__(self, forwarding_curve: Optional[YieldCurve] = None):
        super().__init__("SONIA", 0, UK, ACT_365F, forwarding_curve)
