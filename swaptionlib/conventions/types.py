"""
Basic types and enums used across the scheduling and pricing system.
"""

from enum import Enum


class Frequency(Enum):
    """Payment frequencies."""

    ANNUAL = 12
    SEMIANNUAL = 6
    QUARTERLY = 3
    MONTHLY = 1

    def months(self) -> int:
        return self.value


class TimeUnit(Enum):
    """Units for tenors such as 3M or 10Y."""

    DAYS = "D"
    WEEKS = "W"
    MONTHS = "M"
    YEARS = "Y"


class BusinessDayAdjustment(Enum):
    """Business day adjustment rules."""

    NO_ADJUSTMENT = "NO_ADJUSTMENT"
    FOLLOWING = "FOLLOWING"
    MODIFIED_FOLLOWING = "MODIFIED_FOLLOWING"
    PRECEDING = "PRECEDING"
    MODIFIED_PRECEDING = "MODIFIED_PRECEDING"


class DateGeneration(Enum):
    """Direction in which schedule dates are generated."""

    FORWARD = "FORWARD"
    BACKWARD = "BACKWARD"


class CalendarType(Enum):
    """Predefined calendars."""

    TARGET = "TARGET"
    USNY = "USNY"
    SOFR = "SOFR"
    UK = "UK"
    WEEKEND = "WEEKEND"
    NULL = "NULL"


class RateAveraging(Enum):
    """How daily overnight fixings are combined into a coupon rate."""

    COMPOUND = "COMPOUND"
    SIMPLE = "SIMPLE"
