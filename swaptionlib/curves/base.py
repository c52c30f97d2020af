"""
Base yield curve with date-to-time conversion and derived rates.
"""

import math
from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import Optional, Union

from swaptionlib.conventions.daycount import (
    ACT_365F,
    DayCountConvention,
    get_day_count_convention,
)
from swaptionlib.observable import Observable

TimeLike = Union[datetime, date, float]


class YieldCurve(Observable, ABC):
    """Base implementation for discount curves.

    Curves are observable: any change to their data bumps ``version`` so that
    cached prices built on them can tell they are out of date.
    """

    def __init__(
        self,
        reference_date: date,
        day_count: Union[str, DayCountConvention] = ACT_365F,
        name: str = "",
    ):
        """
        Initialize base curve.

        Args:
            reference_date: Curve reference/valuation date
            day_count: Day-count convention to convert dates to curve times
            name: Optional curve name for identification
        """
        super().__init__()
        if isinstance(reference_date, datetime):
            reference_date = reference_date.date()
        self.reference_date = reference_date
        self.name = name
        if isinstance(day_count, DayCountConvention):
            self.day_count = day_count
        else:
            self.day_count = get_day_count_convention(day_count)

    def time_from_reference(self, dt: TimeLike) -> float:
        """Convert a date to the curve's year fraction basis."""
        if isinstance(dt, (int, float)):
            return float(dt)
        if isinstance(dt, datetime):
            dt = dt.date()
        return self.day_count.year_fraction(self.reference_date, dt)

    @abstractmethod
    def _discount(self, t: float) -> float:
        """Discount factor at curve time t."""
        pass

    def discount(self, t: TimeLike) -> float:
        """Get discount factor at a date or curve time."""
        time_frac = self.time_from_reference(t)
        if time_frac == 0.0:
            return 1.0
        return self._discount(time_frac)

    def zero_rate(self, t: TimeLike) -> float:
        """Get continuously compounded zero rate at time t."""
        time_frac = self.time_from_reference(t)
        if time_frac <= 0:
            return self.instantaneous_forward(0.0)

        df_val = self.discount(time_frac)
        if df_val <= 0:
            raise ValueError(f"Non-positive discount factor: {df_val}")

        return -math.log(df_val) / time_frac

    def forward_rate(
        self,
        start: date,
        end: date,
        day_count: Optional[DayCountConvention] = None,
    ) -> float:
        """Simply compounded forward rate between two dates."""
        dc = day_count or self.day_count
        alpha = dc.year_fraction(start, end)
        if alpha <= 0:
            raise ValueError(f"Forward period must be positive: {start} -> {end}")
        return (self.discount(start) / self.discount(end) - 1.0) / alpha

    def instantaneous_forward(self, t: float, dt: float = 1e-4) -> float:
        """Instantaneous forward rate f(0, t) by finite differences of log DF."""
        if t > dt:
            t1, t2 = t - dt, t + dt
        else:
            t1, t2 = max(t, 0.0), max(t, 0.0) + dt
        return (math.log(self.discount(t1)) - math.log(self.discount(t2))) / (t2 - t1)

    def __str__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.name}, "
            f"ref={self.reference_date.isoformat()})"
        )
