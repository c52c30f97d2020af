"""
Interest rate index base: fixing dates, value dates and stored fixings.
"""

from datetime import date, datetime
from typing import Dict, Optional, Union

from swaptionlib.conventions.calendars import Calendar
from swaptionlib.conventions.daycount import DayCountConvention
from swaptionlib.conventions.tenor import Tenor
from swaptionlib.conventions.types import BusinessDayAdjustment
from swaptionlib.curves.base import YieldCurve
from swaptionlib.observable import Observable


class MissingForwardingCurveError(RuntimeError):
    """Raised when an index must forecast a fixing but has no forwarding curve."""


class InterestRateIndex(Observable):
    """
    Rate index conventions plus an optional forwarding curve.

    The index version reflects both the index's own changes (new fixings, a
    new forwarding curve) and changes to the forwarding curve it holds.
    """

    def __init__(
        self,
        name: str,
        tenor: Union[str, Tenor],
        fixing_days: int,
        fixing_calendar: Calendar,
        business_day_convention: BusinessDayAdjustment,
        end_of_month: bool,
        day_count: DayCountConvention,
        forwarding_curve: Optional[YieldCurve] = None,
    ):
        super().__init__()
        self.name = name
        self.tenor = Tenor.coerce(tenor)
        self.fixing_days = fixing_days
        self.fixing_calendar = fixing_calendar
        self.business_day_convention = business_day_convention
        self.end_of_month = end_of_month
        self.day_count = day_count
        self._forwarding_curve = forwarding_curve
        self._fixings: Dict[date, float] = {}

    @property
    def version(self) -> int:
        if self._forwarding_curve is None:
            return self._version
        return max(self._version, self._forwarding_curve.version)

    @property
    def forwarding_curve(self) -> Optional[YieldCurve]:
        return self._forwarding_curve

    @forwarding_curve.setter
    def forwarding_curve(self, curve: Optional[YieldCurve]) -> None:
        self._forwarding_curve = curve
        self.notify_observers()

    def value_date(self, fixing_date: Union[date, datetime]) -> date:
        """Start of the deposit period for a fixing.

        Raises:
            ValueError: If the fixing date is not a business day of the
                fixing calendar
        """
        if not self.fixing_calendar.is_business_day(fixing_date):
            raise ValueError(f"{fixing_date} is not a valid {self.name} fixing date")
        return self.fixing_calendar.advance(fixing_date, self.fixing_days)

    def fixing_date(self, value_date: Union[date, datetime]) -> date:
        """Fixing date whose value date is the given date."""
        return self.fixing_calendar.advance(value_date, -self.fixing_days)

    def maturity_date(self, value_date: Union[date, datetime]) -> date:
        """End of the deposit period starting on the value date."""
        return self.fixing_calendar.advance(
            value_date,
            self.tenor,
            self.business_day_convention,
            self.end_of_month,
        )

    def add_fixing(self, fixing_date: date, value: float) -> None:
        """Store a published fixing."""
        self._fixings[fixing_date] = value
        self.notify_observers()

    def clear_fixings(self) -> None:
        self._fixings.clear()
        self.notify_observers()

    def past_fixing(self, fixing_date: date) -> float:
        """Published fixing for a date, raising if it was never stored."""
        try:
            return self._fixings[fixing_date]
        except KeyError:
            raise ValueError(f"Missing {self.name} fixing for {fixing_date}") from None

    def fixing(self, fixing_date: Union[date, datetime]) -> float:
        """Stored fixing for past dates, forecast otherwise."""
        if isinstance(fixing_date, datetime):
            fixing_date = fixing_date.date()
        if fixing_date in self._fixings:
            return self._fixings[fixing_date]
        curve = self._require_curve()
        if fixing_date < curve.reference_date:
            return self.past_fixing(fixing_date)
        return self.forecast_fixing(fixing_date)

    def forecast_fixing(self, fixing_date: date) -> float:
        raise NotImplementedError

    def _require_curve(self) -> YieldCurve:
        if self._forwarding_curve is None:
            raise MissingForwardingCurveError(
                f"{self.name} index has no forwarding curve"
            )
        return self._forwarding_curve

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r})"
