"""
Time points a lattice must contain to represent a swaption exactly.
"""

from datetime import date, timedelta
from typing import List

from swaptionlib.conventions.daycount import DayCountConvention
from swaptionlib.instruments.swaption import Swaption

_WEEK = timedelta(days=7)


def swaption_mandatory_times(
    swaption: Swaption,
    reference_date: date,
    day_count: DayCountConvention,
) -> List[float]:
    """
    Reset, payment and exercise times of a swaption, as lattice nodes.

    Resets falling in the week after an exercise date are moved onto it, and
    so are fixed payments of already-started coupons paid in that week; a
    tree then sees them on the exercise node instead of a few days apart.

    Args:
        swaption: Swaption whose dates are converted
        reference_date: Date of time zero
        day_count: Day count converting dates to times

    Returns:
        Non-negative times: fixed resets, fixed payments, floating resets,
        floating payments, then exercise times
    """
    swap = swaption.underlying_swap
    fixed_resets = [c.accrual_start for c in swap.fixed_leg]
    fixed_pays = [c.payment_date for c in swap.fixed_leg]
    floating_resets = [c.accrual_start for c in swap.floating_leg]
    floating_pays = [c.payment_date for c in swap.floating_leg]

    for exercise_date in swaption.exercise.dates:
        for j, pay in enumerate(fixed_pays):
            if (exercise_date <= pay <= exercise_date + _WEEK
                    and fixed_resets[j] < reference_date):
                fixed_pays[j] = exercise_date
        for j, reset in enumerate(fixed_resets):
            if exercise_date <= reset <= exercise_date + _WEEK:
                fixed_resets[j] = exercise_date
        for j, reset in enumerate(floating_resets):
            if exercise_date <= reset <= exercise_date + _WEEK:
                floating_resets[j] = exercise_date

    times = []
    for dates in (fixed_resets, fixed_pays, floating_resets, floating_pays,
                  swaption.exercise.dates):
        for d in dates:
            t = day_count.year_fraction(reference_date, d)
            if t >= 0.0:
                times.append(t)
    return times
