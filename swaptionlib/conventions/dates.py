"""
Conversions between Python dates and QuantLib dates.
"""

from datetime import date, datetime, timedelta
from typing import Union

import QuantLib as ql


def to_date(dt: Union[date, datetime]) -> date:
    """Convert datetime to date if needed."""
    return dt.date() if isinstance(dt, datetime) else dt


def to_ql_date(dt: Union[date, datetime]) -> ql.Date:
    """Convert Python date/datetime to QuantLib Date."""
    py_date = to_date(dt)
    return ql.Date(py_date.day, py_date.month, py_date.year)


def to_py_date(ql_date: ql.Date) -> date:
    """Convert QuantLib Date to Python date."""
    return date(ql_date.year(), ql_date.month(), ql_date.dayOfMonth())


def is_end_of_month(dt: Union[date, datetime]) -> bool:
    """Check if date is the last calendar day of its month."""
    dt = to_date(dt)
    return (dt + timedelta(days=1)).month != dt.month
