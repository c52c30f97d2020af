"""
Main schedule generation logic.
"""

from datetime import date, datetime
from typing import List, Union

from swaptionlib.conventions.calendars import Calendar
from swaptionlib.conventions.tenor import Tenor
from swaptionlib.conventions.types import BusinessDayAdjustment, DateGeneration

from .adjustments import adjust_date
from .core import Schedule


def make_schedule(
    effective_date: Union[date, datetime],
    termination_date: Union[date, datetime],
    tenor: Union[str, Tenor],
    calendar: Calendar,
    convention: BusinessDayAdjustment,
    termination_convention: BusinessDayAdjustment,
    rule: DateGeneration = DateGeneration.FORWARD,
    end_of_month: bool = False,
) -> Schedule:
    """
    Generate an adjusted schedule between two dates.

    Regular dates are rolled from the effective date (FORWARD) or from the
    termination date (BACKWARD) in multiples of the tenor; any remainder
    becomes a short stub at the far end. Unadjusted dates that would land on
    the same business day as their neighbour are skipped.

    Args:
        effective_date: First schedule date (unadjusted)
        termination_date: Last schedule date (unadjusted)
        tenor: Regular period length
        calendar: Calendar for business day adjustments
        convention: Adjustment applied to all dates but the termination date
        termination_convention: Adjustment applied to the termination date
        rule: Generation direction
        end_of_month: Keep month-end dates on month ends when rolling

    Returns:
        Schedule with adjusted dates

    Raises:
        ValueError: If the effective date is not before the termination date
    """
    if isinstance(effective_date, datetime):
        effective_date = effective_date.date()
    if isinstance(termination_date, datetime):
        termination_date = termination_date.date()
    tenor = Tenor.coerce(tenor)

    if effective_date >= termination_date:
        raise ValueError(
            f"Effective date {effective_date} must be before "
            f"termination date {termination_date}"
        )
    if tenor.length <= 0:
        raise ValueError(f"Schedule tenor must be positive: {tenor}")

    if rule == DateGeneration.FORWARD:
        unadjusted, regular = _forward_dates(
            effective_date, termination_date, tenor, calendar,
            convention, termination_convention, end_of_month,
        )
    elif rule == DateGeneration.BACKWARD:
        unadjusted, regular = _backward_dates(
            effective_date, termination_date, tenor, calendar,
            convention, end_of_month,
        )
    else:
        raise ValueError(f"Unsupported date generation rule: {rule}")

    dates = [adjust_date(d, convention, calendar) for d in unadjusted[:-1]]
    dates.append(adjust_date(unadjusted[-1], termination_convention, calendar))

    # Adjustment can push the next-to-last date onto or past the last one
    if len(dates) > 2 and dates[-2] >= dates[-1]:
        del dates[-2]
        regular[-2:] = [False]

    return Schedule(
        dates=dates,
        tenor=tenor,
        calendar=calendar,
        convention=convention,
        termination_convention=termination_convention,
        rule=rule,
        end_of_month=end_of_month,
        is_regular=regular,
    )


def _forward_dates(
    effective_date: date,
    termination_date: date,
    tenor: Tenor,
    calendar: Calendar,
    convention: BusinessDayAdjustment,
    termination_convention: BusinessDayAdjustment,
    end_of_month: bool,
) -> tuple[List[date], List[bool]]:
    """Roll regular dates forward from the effective date."""
    dates = [effective_date]
    regular: List[bool] = []

    periods = 1
    while True:
        candidate = (tenor * periods).add_to(effective_date, end_of_month)
        if candidate > termination_date:
            break
        if adjust_date(dates[-1], convention, calendar) != adjust_date(
            candidate, convention, calendar
        ):
            dates.append(candidate)
            regular.append(True)
        periods += 1

    if adjust_date(dates[-1], termination_convention, calendar) != adjust_date(
        termination_date, termination_convention, calendar
    ):
        # Short final stub
        dates.append(termination_date)
        regular.append(False)
    else:
        dates[-1] = termination_date

    return dates, regular


def _backward_dates(
    effective_date: date,
    termination_date: date,
    tenor: Tenor,
    calendar: Calendar,
    convention: BusinessDayAdjustment,
    end_of_month: bool,
) -> tuple[List[date], List[bool]]:
    """Roll regular dates backward from the termination date."""
    dates = [termination_date]
    regular: List[bool] = []

    periods = 1
    while True:
        candidate = (tenor * -periods).add_to(termination_date, end_of_month)
        if candidate < effective_date:
            break
        if adjust_date(dates[-1], convention, calendar) != adjust_date(
            candidate, convention, calendar
        ):
            dates.append(candidate)
            regular.append(True)
        periods += 1

    if adjust_date(dates[-1], convention, calendar) != adjust_date(
        effective_date, convention, calendar
    ):
        # Short initial stub
        dates.append(effective_date)
        regular.append(False)
    else:
        dates[-1] = effective_date

    dates.reverse()
    regular.reverse()
    return dates, regular
