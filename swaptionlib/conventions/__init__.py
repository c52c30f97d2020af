"""Market conventions: calendars, day counts, tenors and business day rules."""

from .calendars import (
    NULL_CALENDAR,
    SOFR,
    TARGET,
    UK,
    USNY,
    WEEKEND_ONLY,
    Calendar,
    get_calendar,
)
from .daycount import (
    ACT_360,
    ACT_365F,
    ACT_ACT,
    THIRTY_360E,
    THIRTY_360U,
    DayCountConvention,
    get_day_count_convention,
)
from .tenor import Tenor
from .types import (
    BusinessDayAdjustment,
    CalendarType,
    DateGeneration,
    Frequency,
    RateAveraging,
    TimeUnit,
)

__all__ = [
    # Calendars
    "Calendar",
    "TARGET",
    "USNY",
    "SOFR",
    "UK",
    "WEEKEND_ONLY",
    "NULL_CALENDAR",
    "get_calendar",
    # Day counts
    "DayCountConvention",
    "ACT_360",
    "ACT_365F",
    "ACT_ACT",
    "THIRTY_360E",
    "THIRTY_360U",
    "get_day_count_convention",
    # Types
    "Tenor",
    "TimeUnit",
    "Frequency",
    "BusinessDayAdjustment",
    "CalendarType",
    "DateGeneration",
    "RateAveraging",
]
