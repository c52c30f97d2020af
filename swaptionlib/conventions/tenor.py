"""
Tenor arithmetic for market periods such as 2D, 1W, 6M or 10Y.
"""

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Union

from dateutil.relativedelta import relativedelta

from .dates import is_end_of_month, to_date
from .types import Frequency, TimeUnit


@dataclass(frozen=True)
class Tenor:
    """A length of time expressed in days, weeks, months or years."""

    length: int
    unit: TimeUnit

    @classmethod
    def parse(cls, text: str) -> "Tenor":
        """Parse a tenor string (e.g., '3M', '2Y', '1W', '0D')."""
        t = text.upper().strip()
        if len(t) < 2:
            raise ValueError(f"Unsupported tenor: {text}")
        try:
            unit = TimeUnit(t[-1])
            length = int(t[:-1])
        except ValueError as exc:
            raise ValueError(f"Unsupported tenor: {text}") from exc
        return cls(length, unit)

    @classmethod
    def coerce(cls, value: Union[str, "Tenor"]) -> "Tenor":
        """Accept either a Tenor or its string form."""
        if isinstance(value, Tenor):
            return value
        return cls.parse(value)

    @classmethod
    def from_frequency(cls, frequency: Frequency) -> "Tenor":
        """Tenor of one period at the given payment frequency."""
        if frequency == Frequency.ANNUAL:
            return cls(1, TimeUnit.YEARS)
        return cls(frequency.months(), TimeUnit.MONTHS)

    def __mul__(self, n: int) -> "Tenor":
        return Tenor(self.length * n, self.unit)

    __rmul__ = __mul__

    def __neg__(self) -> "Tenor":
        return Tenor(-self.length, self.unit)

    def months(self) -> int:
        """Number of months for month/year tenors."""
        if self.unit == TimeUnit.MONTHS:
            return self.length
        if self.unit == TimeUnit.YEARS:
            return self.length * 12
        raise ValueError(f"Tenor {self} cannot be expressed in months")

    def add_to(self, dt: Union[date, datetime], end_of_month: bool = False) -> date:
        """Add the tenor to a date without any business day adjustment.

        Month and year arithmetic clips to the last day of the target month
        (Jan 31 + 1M = Feb 28/29). With ``end_of_month`` set, a start date on
        the last day of its month maps to the last day of the target month.
        """
        dt = to_date(dt)

        if self.unit == TimeUnit.DAYS:
            return dt + timedelta(days=self.length)
        if self.unit == TimeUnit.WEEKS:
            return dt + timedelta(weeks=self.length)

        result = dt + relativedelta(months=self.months())
        if end_of_month and is_end_of_month(dt):
            result = result + relativedelta(day=31)
        return result

    def __str__(self) -> str:
        return f"{self.length}{self.unit.value}"
