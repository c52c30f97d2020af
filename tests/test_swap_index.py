from datetime import date

import pytest

from swaptionlib.conventions import ACT_360, SOFR
from swaptionlib.indexes import MissingForwardingCurveError
from swaptionlib.indexes.overnight import Sofr
from swaptionlib.indexes.swap_index import UsdSofrSwapIceFix
from swaptionlib.instruments import OvernightIndexedSwap


def test_sofr_swap_index_conventions(flat_curve, reference_date):
    index = UsdSofrSwapIceFix("10Y", flat_curve)

    assert index.name == "UsdSofrSwapIceFix10Y ACT/360"
    assert index.fixing_calendar is SOFR
    assert index.day_count == ACT_360
    assert isinstance(index.overnight_index, Sofr)
    assert index.value_date(reference_date) == date(2024, 3, 19)
    # 19 March 2034 is a Sunday
    assert index.maturity_date(date(2024, 3, 19)) == date(2034, 3, 20)


def test_fixing_is_fair_rate_of_underlying(flat_curve, reference_date):
    index = UsdSofrSwapIceFix("10Y", flat_curve)
    swap = index.underlying_swap(reference_date)

    assert isinstance(swap, OvernightIndexedSwap)
    assert len(swap.fixed_leg) == 10
    assert len(swap.floating_leg) == 10
    fixing = index.fixing(reference_date)
    assert fixing == pytest.approx(swap.fair_rate(), rel=1e-14)
    assert 0.028 < fixing < 0.032


def test_separate_discount_curve(flat_curve, interpolated_curve, reference_date):
    index = UsdSofrSwapIceFix("5Y", flat_curve, interpolated_curve)
    swap = index.underlying_swap(reference_date)
    assert swap.pricing_engine.curve is interpolated_curve
    assert swap.overnight_index.forwarding_curve is flat_curve


def test_version_follows_curves(flat_curve, interpolated_curve):
    index = UsdSofrSwapIceFix("2Y", flat_curve, interpolated_curve)
    before = index.version
    flat_curve.rate = 0.025
    assert index.version > before

    before = index.version
    interpolated_curve.update(interpolated_curve.discount_factors)
    assert index.version > before


def test_fixing_without_curve_fails(reference_date):
    with pytest.raises(MissingForwardingCurveError):
        UsdSofrSwapIceFix("2Y").fixing(reference_date)
