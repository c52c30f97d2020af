from datetime import date

import pytest

from swaptionlib.conventions import (
    ACT_360,
    ACT_365F,
    TARGET,
    THIRTY_360E,
    BusinessDayAdjustment,
    Frequency,
    Tenor,
    TimeUnit,
    get_calendar,
    get_day_count_convention,
)
from swaptionlib.conventions.dates import is_end_of_month


def test_tenor_parse():
    assert Tenor.parse("6M") == Tenor(6, TimeUnit.MONTHS)
    assert Tenor.parse(" 10y ") == Tenor(10, TimeUnit.YEARS)
    assert str(Tenor.parse("2W")) == "2W"


@pytest.mark.parametrize("text", ["M", "5Q", "XYZ", ""])
def test_tenor_parse_rejects_bad_strings(text):
    with pytest.raises(ValueError):
        Tenor.parse(text)


def test_tenor_from_frequency():
    assert Tenor.from_frequency(Frequency.ANNUAL) == Tenor(1, TimeUnit.YEARS)
    assert Tenor.from_frequency(Frequency.QUARTERLY) == Tenor(3, TimeUnit.MONTHS)


def test_tenor_month_arithmetic_clips_to_month_end():
    assert Tenor(1, TimeUnit.MONTHS).add_to(date(2024, 1, 31)) == date(2024, 2, 29)
    assert Tenor(1, TimeUnit.YEARS).add_to(date(2024, 2, 29)) == date(2025, 2, 28)


def test_tenor_end_of_month_rule():
    one_month = Tenor(1, TimeUnit.MONTHS)
    assert one_month.add_to(date(2024, 2, 29)) == date(2024, 3, 29)
    result = one_month.add_to(date(2024, 2, 29), end_of_month=True)
    assert result == date(2024, 3, 31)
    assert is_end_of_month(result)


def test_target_holidays():
    assert TARGET.is_business_day(date(2024, 3, 15))
    assert not TARGET.is_business_day(date(2024, 12, 25))
    assert not TARGET.is_business_day(date(2024, 5, 1))
    assert not TARGET.is_business_day(date(2024, 3, 16))


def test_calendar_adjust_around_easter():
    # Good Friday 29 March and Easter Monday 1 April 2024
    saturday = date(2024, 3, 30)
    assert TARGET.adjust(saturday, BusinessDayAdjustment.FOLLOWING) == date(2024, 4, 2)
    assert TARGET.adjust(saturday, BusinessDayAdjustment.MODIFIED_FOLLOWING) == date(2024, 3, 28)
    assert TARGET.adjust(saturday, BusinessDayAdjustment.PRECEDING) == date(2024, 3, 28)


def test_calendar_advance():
    assert TARGET.advance(date(2024, 3, 15), 2) == date(2024, 3, 19)
    assert TARGET.advance(date(2024, 3, 19), -2) == date(2024, 3, 15)
    assert TARGET.advance(date(2024, 3, 15), "1M") == date(2024, 4, 15)


def test_day_counts():
    assert ACT_360.year_fraction(date(2024, 1, 1), date(2024, 7, 1)) == pytest.approx(182 / 360)
    assert ACT_365F.year_fraction(date(2024, 1, 1), date(2025, 1, 1)) == pytest.approx(366 / 365)
    assert THIRTY_360E.year_fraction(date(2024, 1, 31), date(2024, 7, 31)) == pytest.approx(0.5)


def test_registries():
    assert get_day_count_convention("act/360") is ACT_360
    assert get_calendar("TARGET") is TARGET
    with pytest.raises(ValueError, match="Unknown day count"):
        get_day_count_convention("BUS/252X")
    with pytest.raises(ValueError, match="Unknown calendar"):
        get_calendar("MARS")
