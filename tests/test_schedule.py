from datetime import date

import pytest

from swaptionlib.conventions import TARGET, BusinessDayAdjustment, DateGeneration
from swaptionlib.schedule import make_schedule

MF = BusinessDayAdjustment.MODIFIED_FOLLOWING


def test_forward_annual_schedule():
    schedule = make_schedule(date(2024, 3, 19), date(2029, 3, 19), "1Y", TARGET, MF, MF)

    assert len(schedule) == 6
    assert schedule.start_date == date(2024, 3, 19)
    assert schedule.end_date == date(2029, 3, 19)
    # 19 March 2028 is a Sunday
    assert schedule[4] == date(2028, 3, 20)
    assert all(TARGET.is_business_day(d) for d in schedule)
    assert all(p.is_regular for p in schedule.periods())


def test_forward_schedule_short_final_stub():
    schedule = make_schedule(date(2024, 3, 19), date(2025, 9, 19), "1Y", TARGET, MF, MF)

    assert schedule.dates == [date(2024, 3, 19), date(2025, 3, 19), date(2025, 9, 19)]
    periods = schedule.periods()
    assert periods[0].is_regular
    assert not periods[1].is_regular


def test_backward_schedule_short_initial_stub():
    schedule = make_schedule(
        date(2024, 3, 19), date(2025, 9, 19), "1Y", TARGET, MF, MF,
        rule=DateGeneration.BACKWARD,
    )

    assert schedule.dates == [date(2024, 3, 19), date(2024, 9, 19), date(2025, 9, 19)]
    assert not schedule.periods()[0].is_regular


def test_month_end_schedule_has_no_duplicates():
    schedule = make_schedule(
        date(2024, 1, 31), date(2024, 7, 31), "1M", TARGET, MF, MF, end_of_month=True
    )

    assert len(schedule) == 7
    assert all(a < b for a, b in zip(schedule.dates, schedule.dates[1:]))
    assert len({d.month for d in schedule}) == 7


def test_semiannual_periods_cover_the_schedule():
    schedule = make_schedule(date(2024, 3, 19), date(2034, 3, 20), "6M", TARGET, MF, MF)
    periods = schedule.periods()

    assert len(periods) == 20
    assert periods[0].start_date == schedule.start_date
    assert periods[-1].end_date == schedule.end_date
    assert all(p.end_date == q.start_date for p, q in zip(periods, periods[1:]))
    assert all(p.accrual_days > 0 for p in periods)


def test_rejects_inverted_dates():
    with pytest.raises(ValueError):
        make_schedule(date(2025, 3, 19), date(2024, 3, 19), "1Y", TARGET, MF, MF)
