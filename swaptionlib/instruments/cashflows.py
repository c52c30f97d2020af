"""
Coupons and leg builders for fixed, term-fixing and overnight legs.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date
from typing import List, Optional

from swaptionlib.conventions.calendars import Calendar
from swaptionlib.conventions.daycount import DayCountConvention
from swaptionlib.conventions.types import BusinessDayAdjustment, RateAveraging
from swaptionlib.indexes.ibor import IborIndex
from swaptionlib.indexes.overnight import OvernightIndex
from swaptionlib.schedule.core import Schedule


@dataclass
class Coupon(ABC):
    """Accruing coupon paid on a single date.

    Attributes:
        payment_date: Date the amount is paid
        nominal: Notional the rate accrues on
        accrual_start: Start of the accrual period
        accrual_end: End of the accrual period
        day_count: Day count for the accrual period
    """

    payment_date: date
    nominal: float
    accrual_start: date
    accrual_end: date
    day_count: DayCountConvention

    @property
    def accrual_period(self) -> float:
        return self.day_count.year_fraction(self.accrual_start, self.accrual_end)

    @abstractmethod
    def rate(self) -> float:
        pass

    def amount(self) -> float:
        return self.nominal * self.rate() * self.accrual_period


@dataclass
class FixedRateCoupon(Coupon):
    fixed_rate: float = 0.0

    def rate(self) -> float:
        return self.fixed_rate


@dataclass
class IborCoupon(Coupon):
    index: Optional[IborIndex] = None
    spread: float = 0.0

    @property
    def fixing_date(self) -> date:
        return self.index.fixing_date(self.accrual_start)

    def rate(self) -> float:
        return self.index.fixing(self.fixing_date) + self.spread


@dataclass
class OvernightIndexedCoupon(Coupon):
    index: Optional[OvernightIndex] = None
    spread: float = 0.0
    averaging_method: RateAveraging = RateAveraging.COMPOUND

    def rate(self) -> float:
        if self.averaging_method == RateAveraging.COMPOUND:
            base = self.index.compounded_rate(self.accrual_start, self.accrual_end)
        else:
            base = self.index.averaged_rate(self.accrual_start, self.accrual_end)
        return base + self.spread


def fixed_rate_leg(
    schedule: Schedule,
    nominal: float,
    rate: float,
    day_count: DayCountConvention,
) -> List[FixedRateCoupon]:
    """One fixed coupon per schedule period, paid at period end."""
    return [
        FixedRateCoupon(
            payment_date=period.end_date,
            nominal=nominal,
            accrual_start=period.start_date,
            accrual_end=period.end_date,
            day_count=day_count,
            fixed_rate=rate,
        )
        for period in schedule.periods()
    ]


def ibor_leg(
    schedule: Schedule,
    nominal: float,
    index: IborIndex,
    day_count: DayCountConvention,
    spread: float = 0.0,
) -> List[IborCoupon]:
    """One coupon per schedule period fixing in advance on the index."""
    return [
        IborCoupon(
            payment_date=period.end_date,
            nominal=nominal,
            accrual_start=period.start_date,
            accrual_end=period.end_date,
            day_count=day_count,
            index=index,
            spread=spread,
        )
        for period in schedule.periods()
    ]


def overnight_leg(
    schedule: Schedule,
    nominal: float,
    index: OvernightIndex,
    spread: float = 0.0,
    payment_lag: int = 0,
    payment_convention: BusinessDayAdjustment = BusinessDayAdjustment.FOLLOWING,
    payment_calendar: Optional[Calendar] = None,
    averaging_method: RateAveraging = RateAveraging.COMPOUND,
) -> List[OvernightIndexedCoupon]:
    """
    One overnight coupon per schedule period.

    Coupons accrue with the index day count. Payment is ``payment_lag``
    business days after the adjusted period end on the payment calendar,
    which defaults to the index fixing calendar.
    """
    calendar = payment_calendar or index.fixing_calendar
    coupons = []
    for period in schedule.periods():
        payment_date = calendar.adjust(period.end_date, payment_convention)
        if payment_lag:
            payment_date = calendar.add_business_days(payment_date, payment_lag)
        coupons.append(
            OvernightIndexedCoupon(
                payment_date=payment_date,
                nominal=nominal,
                accrual_start=period.start_date,
                accrual_end=period.end_date,
                day_count=index.day_count,
                index=index,
                spread=spread,
                averaging_method=averaging_method,
            )
        )
    return coupons
