"""
QuantLib-backed calendar implementations.

Holiday rules come from QuantLib; this module wraps them with the business day
operations used by schedules, indexes and the swaption helpers.
"""

from datetime import date, datetime
from typing import Union

import QuantLib as ql

from .dates import to_ql_date, to_py_date
from .tenor import Tenor
from .types import BusinessDayAdjustment, TimeUnit

_QL_ADJUSTMENTS = {
    BusinessDayAdjustment.NO_ADJUSTMENT: ql.Unadjusted,
    BusinessDayAdjustment.FOLLOWING: ql.Following,
    BusinessDayAdjustment.MODIFIED_FOLLOWING: ql.ModifiedFollowing,
    BusinessDayAdjustment.PRECEDING: ql.Preceding,
    BusinessDayAdjustment.MODIFIED_PRECEDING: ql.ModifiedPreceding,
}

_QL_TIME_UNITS = {
    TimeUnit.DAYS: ql.Days,
    TimeUnit.WEEKS: ql.Weeks,
    TimeUnit.MONTHS: ql.Months,
    TimeUnit.YEARS: ql.Years,
}


class Calendar:
    """Base calendar class for QuantLib-backed business day calculations."""

    def __init__(self, name: str, ql_calendar: ql.Calendar):
        self.name = name
        self._ql_calendar = ql_calendar

    def is_business_day(self, dt: Union[date, datetime]) -> bool:
        """Check if date is a business day (not weekend or holiday)."""
        return self._ql_calendar.isBusinessDay(to_ql_date(dt))

    def is_holiday(self, dt: Union[date, datetime]) -> bool:
        """Check if date is a holiday."""
        return self._ql_calendar.isHoliday(to_ql_date(dt))

    def is_end_of_month(self, dt: Union[date, datetime]) -> bool:
        """Check if date is the last business day of its month."""
        return self._ql_calendar.isEndOfMonth(to_ql_date(dt))

    def adjust(
        self,
        dt: Union[date, datetime],
        adjustment: BusinessDayAdjustment = BusinessDayAdjustment.FOLLOWING,
    ) -> date:
        """Roll a date onto a business day using the given adjustment rule."""
        ql_result = self._ql_calendar.adjust(to_ql_date(dt), _QL_ADJUSTMENTS[adjustment])
        return to_py_date(ql_result)

    def add_business_days(self, start_date: Union[date, datetime], days: int) -> date:
        """Add business days to a date."""
        ql_result = self._ql_calendar.advance(to_ql_date(start_date), days, ql.Days)
        return to_py_date(ql_result)

    def advance(
        self,
        start_date: Union[date, datetime],
        period: Union[int, str, Tenor],
        adjustment: BusinessDayAdjustment = BusinessDayAdjustment.FOLLOWING,
        end_of_month: bool = False,
    ) -> date:
        """Advance a date by a number of business days or by a tenor.

        Integers are business days. Day tenors also count business days;
        week, month and year tenors move in calendar time and the result is
        adjusted with ``adjustment`` (honouring the end-of-month rule).
        """
        if isinstance(period, int):
            return self.add_business_days(start_date, period)

        tenor = Tenor.coerce(period)
        ql_period = ql.Period(tenor.length, _QL_TIME_UNITS[tenor.unit])
        ql_result = self._ql_calendar.advance(
            to_ql_date(start_date),
            ql_period,
            _QL_ADJUSTMENTS[adjustment],
            end_of_month,
        )
        return to_py_date(ql_result)

    def business_days_between(
        self, start: Union[date, datetime], end: Union[date, datetime]
    ) -> int:
        """Count business days in [start, end)."""
        return self._ql_calendar.businessDaysBetween(
            to_ql_date(start), to_ql_date(end), True, False
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Calendar):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Calendar({self.name!r})"


class TargetCalendar(Calendar):
    """TARGET (Trans-European Automated Real-time Gross settlement Express Transfer) calendar."""

    def __init__(self):
        super().__init__("TARGET", ql.TARGET())


class UnitedStatesCalendar(Calendar):
    """US settlement calendar (New York)."""

    def __init__(self):
        super().__init__("USNY", ql.UnitedStates(ql.UnitedStates.Settlement))


class SofrCalendar(Calendar):
    """US calendar used for SOFR fixings (SIFMA recommendations)."""

    def __init__(self):
        super().__init__("SOFR", ql.UnitedStates(ql.UnitedStates.SOFR))


class UnitedKingdomCalendar(Calendar):
    """UK settlement calendar used for SONIA."""

    def __init__(self):
        super().__init__("UK", ql.UnitedKingdom(ql.UnitedKingdom.Settlement))


class WeekendCalendar(Calendar):
    """Simple calendar that only considers weekends as non-business days."""

    def __init__(self):
        super().__init__("WEEKEND", ql.WeekendsOnly())


class NullCalendar(Calendar):
    """Calendar in which every day is a business day."""

    def __init__(self):
        super().__init__("NULL", ql.NullCalendar())


# Pre-defined calendar instances
TARGET = TargetCalendar()
USNY = UnitedStatesCalendar()
SOFR = SofrCalendar()
UK = UnitedKingdomCalendar()
WEEKEND_ONLY = WeekendCalendar()
NULL_CALENDAR = NullCalendar()

# Calendar registry
CALENDARS = {
    "TARGET": TARGET,
    "EUR": TARGET,  # Alias
    "USNY": USNY,
    "SOFR": SOFR,
    "UK": UK,
    "WEEKEND": WEEKEND_ONLY,
    "NULL": NULL_CALENDAR,
}


def get_calendar(name: str) -> Calendar:
    """Get a calendar by name (a string or a ``CalendarType`` value)."""
    key = name.value if hasattr(name, "value") else name
    if key not in CALENDARS:
        raise ValueError(
            f"Unknown calendar: {name}. Available: {list(CALENDARS.keys())}"
        )
    return CALENDARS[key]
