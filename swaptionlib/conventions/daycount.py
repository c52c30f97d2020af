"""
QuantLib-backed day count convention implementations.

The year fractions used for coupon accruals, curve times and option expiries
all come from QuantLib's industry-standard day counters.
"""

from datetime import date, datetime
from typing import Union

import QuantLib as ql

from .dates import to_ql_date


class DayCountConvention:
    """Base class for QuantLib-backed day count conventions."""

    def __init__(self, name: str, ql_daycount: ql.DayCounter):
        self.name = name
        self._ql_daycount = ql_daycount

    def year_fraction(
        self, start: Union[date, datetime], end: Union[date, datetime]
    ) -> float:
        """Calculate year fraction between two dates using QuantLib."""
        return self._ql_daycount.yearFraction(to_ql_date(start), to_ql_date(end))

    def day_count(
        self, start: Union[date, datetime], end: Union[date, datetime]
    ) -> int:
        """Calculate number of days between two dates."""
        return self._ql_daycount.dayCount(to_ql_date(start), to_ql_date(end))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DayCountConvention):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"DayCountConvention({self.name!r})"


class Actual360(DayCountConvention):
    """ACT/360 day count convention.

    Used for:
    - IBOR floating legs
    - Overnight legs (ESTR, SOFR)
    - SOFR swap fixed legs
    """

    def __init__(self):
        super().__init__("ACT/360", ql.Actual360())


class Actual365Fixed(DayCountConvention):
    """ACT/365F day count convention.

    Used for:
    - Curve and option expiry times
    - SONIA legs
    """

    def __init__(self):
        super().__init__("ACT/365F", ql.Actual365Fixed())


class Thirty360European(DayCountConvention):
    """30E/360 day count convention, the usual EUR fixed leg basis."""

    def __init__(self):
        super().__init__("30E/360", ql.Thirty360(ql.Thirty360.European))


class Thirty360US(DayCountConvention):
    """30U/360 (bond basis) day count convention."""

    def __init__(self):
        super().__init__("30U/360", ql.Thirty360(ql.Thirty360.BondBasis))


class ActualActualISDA(DayCountConvention):
    """ACT/ACT ISDA day count convention."""

    def __init__(self):
        super().__init__("ACT/ACT", ql.ActualActual(ql.ActualActual.ISDA))


# Pre-defined day count convention instances
ACT_360 = Actual360()
ACT_365F = Actual365Fixed()
THIRTY_360E = Thirty360European()
THIRTY_360U = Thirty360US()
ACT_ACT = ActualActualISDA()

# Registry
DAY_COUNT_CONVENTIONS = {
    "ACT/360": ACT_360,
    "ACTUAL/360": ACT_360,
    "ACT/365F": ACT_365F,
    "ACT/365": ACT_365F,
    "ACTUAL/365F": ACT_365F,
    "30E/360": THIRTY_360E,
    "30/360E": THIRTY_360E,
    "30/360 EUROPEAN": THIRTY_360E,
    "30U/360": THIRTY_360U,
    "30/360": THIRTY_360U,
    "30/360 US": THIRTY_360U,
    "ACT/ACT": ACT_ACT,
    "ACTUAL/ACTUAL": ACT_ACT,
    "ACT/ACT ISDA": ACT_ACT,
}


def get_day_count_convention(name: str) -> DayCountConvention:
    """Get a day count convention by name."""
    name_upper = name.upper()
    if name_upper not in DAY_COUNT_CONVENTIONS:
        raise ValueError(
            f"Unknown day count convention: {name}. "
            f"Available: {list(DAY_COUNT_CONVENTIONS.keys())}"
        )
    return DAY_COUNT_CONVENTIONS[name_upper]
