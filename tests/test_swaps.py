from datetime import date

import pytest

from swaptionlib.conventions import ACT_360, TARGET, THIRTY_360E, BusinessDayAdjustment
from swaptionlib.instruments import (
    MissingPricingEngineError,
    OvernightIndexedSwap,
    SwapType,
    VanillaSwap,
)
from swaptionlib.pricingengines import DiscountingSwapEngine
from swaptionlib.schedule import make_schedule

MF = BusinessDayAdjustment.MODIFIED_FOLLOWING
START = date(2024, 3, 19)
END = date(2029, 3, 19)


def _vanilla(index, swap_type, fixed_rate, spread=0.0, nominal=1_000_000.0):
    fixed = make_schedule(START, END, "1Y", TARGET, MF, MF)
    floating = make_schedule(START, END, index.tenor, TARGET, MF, MF)
    return VanillaSwap(
        swap_type, nominal, fixed, fixed_rate, THIRTY_360E, floating, index, spread, ACT_360
    )


def test_fair_rate_swap_has_zero_value(euribor6m, flat_curve):
    engine = DiscountingSwapEngine(flat_curve)
    swap = _vanilla(euribor6m, SwapType.PAYER, 0.05)
    swap.set_pricing_engine(engine)
    fair = swap.fair_rate()

    at_par = _vanilla(euribor6m, SwapType.PAYER, fair)
    at_par.set_pricing_engine(engine)
    assert at_par.npv() == pytest.approx(0.0, abs=1e-6)
    assert 0.025 < fair < 0.035


def test_payer_is_minus_receiver(euribor6m, flat_curve):
    engine = DiscountingSwapEngine(flat_curve)
    payer = _vanilla(euribor6m, SwapType.PAYER, 0.04)
    receiver = _vanilla(euribor6m, SwapType.RECEIVER, 0.04)
    payer.set_pricing_engine(engine)
    receiver.set_pricing_engine(engine)

    assert payer.npv() == pytest.approx(-receiver.npv())
    assert payer.npv() < 0.0
    assert payer.fixed_leg_bps() < 0.0 < receiver.fixed_leg_bps()
    assert payer.fixed_leg_npv() + payer.floating_leg_npv() == pytest.approx(payer.npv())


def test_fair_spread(euribor6m, flat_curve):
    engine = DiscountingSwapEngine(flat_curve)
    swap = _vanilla(euribor6m, SwapType.RECEIVER, 0.04)
    swap.set_pricing_engine(engine)
    spread = swap.fair_spread()

    at_par = _vanilla(euribor6m, SwapType.RECEIVER, 0.04, spread=spread)
    at_par.set_pricing_engine(engine)
    assert at_par.npv() == pytest.approx(0.0, abs=1e-6)


def test_settlement_date_flows(flat_curve, reference_date):
    assert DiscountingSwapEngine(flat_curve).has_occurred(reference_date)
    assert not DiscountingSwapEngine(flat_curve, True).has_occurred(reference_date)
    assert DiscountingSwapEngine(flat_curve, True).has_occurred(date(2024, 3, 14))


def test_swap_without_engine(euribor6m):
    with pytest.raises(MissingPricingEngineError):
        _vanilla(euribor6m, SwapType.PAYER, 0.03).npv()


def test_overnight_leg_values_to_discount_difference(estr, flat_curve):
    schedule = make_schedule(START, END, "1Y", TARGET, MF, MF)
    swap = OvernightIndexedSwap(
        SwapType.PAYER, 1_000_000.0, schedule, 0.03, ACT_360, schedule, estr
    )
    swap.set_pricing_engine(DiscountingSwapEngine(flat_curve))

    expected = 1_000_000.0 * (flat_curve.discount(START) - flat_curve.discount(END))
    assert swap.floating_leg_npv() == pytest.approx(expected, rel=1e-10)
    assert len(swap.floating_leg) == 5
    assert all(c.day_count == ACT_360 for c in swap.floating_leg)


def test_overnight_payment_lag(estr):
    schedule = make_schedule(START, END, "1Y", TARGET, MF, MF)
    swap = OvernightIndexedSwap(
        SwapType.RECEIVER, 1.0, schedule, 0.03, ACT_360, schedule, estr, payment_lag=2
    )
    last = swap.floating_leg[-1]
    assert last.accrual_end == END
    assert last.payment_date == TARGET.advance(END, 2)
