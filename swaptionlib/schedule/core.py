"""
Core data structures for schedule generation.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Iterator, List

from swaptionlib.conventions.calendars import Calendar
from swaptionlib.conventions.tenor import Tenor
from swaptionlib.conventions.types import BusinessDayAdjustment, DateGeneration


@dataclass
class SchedulePeriod:
    """Represents a single period in a payment schedule."""

    start_date: date
    end_date: date
    is_regular: bool = True

    @property
    def accrual_days(self) -> int:
        """Number of calendar days in the period."""
        return (self.end_date - self.start_date).days


@dataclass
class Schedule:
    """Adjusted schedule dates together with the rules that produced them.

    Attributes:
        dates: Adjusted schedule dates, first is the effective date and last
            the termination date
        tenor: Regular period length
        calendar: Calendar used for business day adjustments
        convention: Adjustment for all dates but the last
        termination_convention: Adjustment for the termination date
        rule: Generation direction
        end_of_month: Whether the end-of-month rule was applied
        is_regular: Per-period flag, False for stub periods
    """

    dates: List[date]
    tenor: Tenor
    calendar: Calendar
    convention: BusinessDayAdjustment
    termination_convention: BusinessDayAdjustment
    rule: DateGeneration
    end_of_month: bool = False
    is_regular: List[bool] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.dates)

    def __iter__(self) -> Iterator[date]:
        return iter(self.dates)

    def __getitem__(self, i: int) -> date:
        return self.dates[i]

    @property
    def start_date(self) -> date:
        return self.dates[0]

    @property
    def end_date(self) -> date:
        return self.dates[-1]

    def periods(self) -> List[SchedulePeriod]:
        """Consecutive (start, end) periods of the schedule."""
        regular = self.is_regular or [True] * (len(self.dates) - 1)
        return [
            SchedulePeriod(self.dates[i], self.dates[i + 1], regular[i])
            for i in range(len(self.dates) - 1)
        ]
