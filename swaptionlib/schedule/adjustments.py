"""
Date adjustment functions for schedule generation.
"""

from datetime import date, datetime
from typing import Union

from swaptionlib.conventions.calendars import Calendar
from swaptionlib.conventions.types import BusinessDayAdjustment


def adjust_date(
    dt: Union[date, datetime], adjustment: BusinessDayAdjustment, calendar: Calendar
) -> date:
    """Apply business day adjustment to a date."""
    if isinstance(dt, datetime):
        dt = dt.date()
    if adjustment == BusinessDayAdjustment.NO_ADJUSTMENT:
        return dt
    return calendar.adjust(dt, adjustment)

