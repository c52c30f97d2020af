from datetime import date

import pytest

from swaptionlib.calibration import (
    CalibrationErrorType,
    FixedVsFloatingSwaptionHelper,
    HelperState,
    IborSwapBuilder,
    ImpliedVolatilityError,
    InvalidDateOrderError,
    OvernightIndexedSwaptionHelper,
    SwaptionHelper,
    UnsupportedVolatilityTypeError,
    VolatilityType,
    resolve_dates_from_tenor,
)
from swaptionlib.conventions import (
    ACT_360,
    ACT_365F,
    TARGET,
    THIRTY_360E,
    BusinessDayAdjustment,
    RateAveraging,
    Tenor,
    TimeUnit,
)
from swaptionlib.curves import FlatForwardCurve
from swaptionlib.instruments import (
    MissingPricingEngineError,
    OvernightIndexedSwap,
    SwapType,
    VanillaSwap,
)
from swaptionlib.models import HullWhite
from swaptionlib.pricingengines import (
    BlackSwaptionEngine,
    DiscountingSwapEngine,
    JamshidianSwaptionEngine,
)
from swaptionlib.quotes import SimpleQuote

MF = BusinessDayAdjustment.MODIFIED_FOLLOWING


def _helper(curve, index, quote, maturity="5Y", length="10Y", **kwargs):
    return SwaptionHelper.from_tenor(
        maturity, length, quote, index, "1Y", THIRTY_360E, ACT_360, curve, **kwargs
    )


def _ois_helper(curve, index, quote, **kwargs):
    return OvernightIndexedSwaptionHelper.from_tenor(
        "1Y", "5Y", quote, index, "1Y", ACT_360, ACT_360, curve, **kwargs
    )


def _cashflows(swap):
    return [
        (c.payment_date, c.accrual_start, c.accrual_end, c.amount())
        for leg in (swap.fixed_leg, swap.floating_leg)
        for c in leg
    ]


@pytest.fixture
def hull_white_engine(flat_curve):
    return JamshidianSwaptionEngine(HullWhite(flat_curve, a=0.05, sigma=0.01))


# Date resolution


def test_tenor_dates_follow_index_conventions(flat_curve, euribor6m, vol_quote):
    helper = _helper(flat_curve, euribor6m, vol_quote)

    assert helper.exercise_date == date(2029, 3, 15)
    assert helper.start_date == euribor6m.value_date(helper.exercise_date)
    assert helper.start_date == date(2029, 3, 19)
    assert helper.end_date == TARGET.advance(helper.start_date, "10Y", MF)


def test_explicit_settlement_days(flat_curve, euribor6m, vol_quote):
    same_day = _helper(flat_curve, euribor6m, vol_quote, settlement_days=0)
    next_day = _helper(flat_curve, euribor6m, vol_quote, settlement_days=1)

    assert same_day.start_date == same_day.exercise_date
    assert next_day.start_date == date(2029, 3, 16)


def test_construction_routes_agree(flat_curve, euribor6m, vol_quote):
    by_tenor = _helper(flat_curve, euribor6m, vol_quote, maturity="2Y", length="5Y")
    exercise = TARGET.advance(flat_curve.reference_date, "2Y", MF)
    by_exercise = SwaptionHelper.from_exercise_date(
        exercise, "5Y", vol_quote, euribor6m, "1Y", THIRTY_360E, ACT_360, flat_curve
    )
    by_dates = SwaptionHelper.from_dates(
        exercise, by_tenor.end_date, vol_quote, euribor6m, "1Y", THIRTY_360E, ACT_360,
        flat_curve,
    )

    expected = _cashflows(by_tenor.underlying_swap())
    assert _cashflows(by_exercise.underlying_swap()) == expected
    assert _cashflows(by_dates.underlying_swap()) == expected
    assert by_dates.swaption().exercise.date == by_tenor.swaption().exercise.date


def test_exercise_on_non_business_day_is_rejected(flat_curve, euribor6m, vol_quote):
    with pytest.raises(ValueError, match="fixing date"):
        SwaptionHelper.from_exercise_date(
            date(2026, 3, 14), "5Y", vol_quote, euribor6m, "1Y", THIRTY_360E, ACT_360,
            flat_curve,
        )


def test_end_before_start_is_rejected(flat_curve, euribor6m, vol_quote):
    with pytest.raises(InvalidDateOrderError) as excinfo:
        SwaptionHelper.from_dates(
            date(2029, 3, 15), date(2027, 3, 15), vol_quote, euribor6m, "1Y",
            THIRTY_360E, ACT_360, flat_curve,
        )
    assert isinstance(excinfo.value, ValueError)


def test_resolved_dates_are_plain_values(flat_curve, euribor6m):
    dates = resolve_dates_from_tenor(euribor6m, flat_curve, "5Y", "10Y")
    assert dates == resolve_dates_from_tenor(euribor6m, flat_curve, Tenor(5, TimeUnit.YEARS), "10Y")
    assert dates.start_date <= dates.end_date


# Strike and direction


def test_atm_exercise_rate_is_forward(flat_curve, euribor6m, vol_quote):
    helper = _helper(flat_curve, euribor6m, vol_quote, nominal=1_000_000.0)

    trial = IborSwapBuilder().make_swap(helper.config, SwapType.RECEIVER, 0.0)
    trial.set_pricing_engine(DiscountingSwapEngine(flat_curve))

    assert helper.forward_rate() == pytest.approx(trial.fair_rate(), rel=1e-14)
    assert helper.exercise_rate() == helper.forward_rate()
    assert helper.underlying_swap().swap_type == SwapType.RECEIVER
    assert helper.underlying_swap().fixed_rate == helper.forward_rate()
    assert isinstance(helper.underlying_swap(), VanillaSwap)


def test_direction_from_strike(flat_curve, euribor6m, vol_quote):
    forward = _helper(flat_curve, euribor6m, vol_quote).forward_rate()

    above = _helper(flat_curve, euribor6m, vol_quote, strike=forward + 0.005)
    below = _helper(flat_curve, euribor6m, vol_quote, strike=forward - 0.005)
    at = _helper(flat_curve, euribor6m, vol_quote, strike=forward)

    assert above.underlying_swap().swap_type == SwapType.PAYER
    assert below.underlying_swap().swap_type == SwapType.RECEIVER
    assert at.underlying_swap().swap_type == SwapType.RECEIVER
    assert above.exercise_rate() == forward + 0.005
    assert at.exercise_rate() == forward


# Pricing


def test_model_value_requires_engine(flat_curve, euribor6m, vol_quote):
    with pytest.raises(MissingPricingEngineError):
        _helper(flat_curve, euribor6m, vol_quote).model_value()


def test_prices_are_idempotent(flat_curve, euribor6m, vol_quote, hull_white_engine):
    helper = _helper(flat_curve, euribor6m, vol_quote)
    helper.set_pricing_engine(hull_white_engine)

    assert helper.model_value() == helper.model_value()
    assert helper.black_price(0.2) == helper.black_price(0.2)
    assert helper.market_value() == helper.black_price(0.2)


def test_black_price_restores_engine(flat_curve, euribor6m, vol_quote, hull_white_engine):
    helper = _helper(flat_curve, euribor6m, vol_quote)
    helper.set_pricing_engine(hull_white_engine)
    before = helper.model_value()

    helper.black_price(0.35)

    assert helper.swaption().pricing_engine is hull_white_engine
    assert helper.model_value() == before


def test_black_price_leaves_model_engine_attached(
    flat_curve, euribor6m, vol_quote, hull_white_engine
):
    helper = _helper(flat_curve, euribor6m, vol_quote)
    helper.set_pricing_engine(hull_white_engine)

    helper.black_price(0.2)
    assert helper.swaption().pricing_engine is hull_white_engine
    assert helper.swaption().npv() == helper.model_value()

    flat_curve.rate = 0.032
    assert helper.swaption().pricing_engine is hull_white_engine


def test_black_price_restores_engine_on_failure(
    flat_curve, euribor6m, vol_quote, hull_white_engine, monkeypatch
):
    helper = _helper(flat_curve, euribor6m, vol_quote)
    helper.set_pricing_engine(hull_white_engine)
    helper.model_value()

    def fail(self, swaption):
        raise RuntimeError("engine failure")

    monkeypatch.setattr(BlackSwaptionEngine, "calculate", fail)
    with pytest.raises(RuntimeError, match="engine failure"):
        helper.black_price(0.2)
    assert helper.swaption().pricing_engine is hull_white_engine


def test_volatility_conventions_give_different_prices(flat_curve, euribor6m):
    quote = SimpleQuote(0.0050)
    lognormal = _helper(flat_curve, euribor6m, quote, nominal=1_000_000.0)
    normal = _helper(
        flat_curve, euribor6m, quote, nominal=1_000_000.0,
        volatility_type=VolatilityType.NORMAL,
    )

    assert lognormal.exercise_rate() == pytest.approx(normal.exercise_rate())
    sln_price = lognormal.black_price(0.0050)
    normal_price = normal.black_price(0.0050)
    assert sln_price > 0.0
    assert normal_price > 0.0
    assert sln_price != pytest.approx(normal_price)


def test_shift_raises_lognormal_price(flat_curve, euribor6m, vol_quote):
    plain = _helper(flat_curve, euribor6m, vol_quote)
    shifted = _helper(flat_curve, euribor6m, vol_quote, shift=0.02)
    assert shifted.black_price(0.2) > plain.black_price(0.2)


def test_unsupported_volatility_type(flat_curve, euribor6m, vol_quote):
    helper = _helper(flat_curve, euribor6m, vol_quote, volatility_type="LOGNORMAL")
    with pytest.raises(UnsupportedVolatilityTypeError, match="LOGNORMAL"):
        helper.black_price(0.2)


# Lazy recalculation


def test_queries_reuse_cached_instruments(flat_curve, euribor6m, vol_quote):
    helper = _helper(flat_curve, euribor6m, vol_quote)
    assert helper.state == HelperState.STALE

    swaption = helper.swaption()
    assert helper.state == HelperState.FRESH
    assert helper.swaption() is swaption
    assert helper.underlying_swap() is swaption.underlying_swap


def test_curve_change_triggers_rebuild(flat_curve, euribor6m, vol_quote):
    helper = _helper(flat_curve, euribor6m, vol_quote)
    swaption = helper.swaption()
    forward = helper.forward_rate()

    flat_curve.rate = 0.035

    assert helper.state == HelperState.STALE
    assert helper.forward_rate() > forward
    assert helper.swaption() is not swaption


def test_index_change_triggers_rebuild(flat_curve, euribor6m, vol_quote, reference_date):
    helper = _helper(flat_curve, euribor6m, vol_quote)
    forward = helper.forward_rate()

    euribor6m.forwarding_curve = FlatForwardCurve(reference_date, 0.04)

    assert helper.state == HelperState.STALE
    assert helper.forward_rate() > forward


def test_quote_change_refreshes_market_value(flat_curve, euribor6m, vol_quote):
    helper = _helper(flat_curve, euribor6m, vol_quote)
    before = helper.market_value()

    vol_quote.value = 0.25

    assert helper.market_value() > before
    assert helper.market_value() == helper.black_price(0.25)


def test_invalidate_forces_rebuild(flat_curve, euribor6m, vol_quote):
    helper = _helper(flat_curve, euribor6m, vol_quote)
    swaption = helper.swaption()

    helper.invalidate()

    assert helper.state == HelperState.STALE
    rebuilt = helper.swaption()
    assert rebuilt is not swaption
    assert _cashflows(rebuilt.underlying_swap) == _cashflows(swaption.underlying_swap)


# Calibration error


def test_price_errors(flat_curve, euribor6m, vol_quote, hull_white_engine):
    price = _helper(
        flat_curve, euribor6m, vol_quote, error_type=CalibrationErrorType.PRICE_ERROR
    )
    relative = _helper(flat_curve, euribor6m, vol_quote)
    for helper in (price, relative):
        helper.set_pricing_engine(hull_white_engine)

    market, model = price.market_value(), price.model_value()
    assert price.calibration_error() == pytest.approx(market - model)
    assert relative.calibration_error() == pytest.approx(abs(market - model) / market)


def test_implied_volatility_round_trip(flat_curve, euribor6m, vol_quote):
    helper = _helper(flat_curve, euribor6m, vol_quote)
    assert helper.implied_volatility(helper.market_value()) == pytest.approx(0.20, abs=1e-8)


def test_implied_vol_error(flat_curve, euribor6m, hull_white_engine):
    quote = SimpleQuote(0.20)
    helper = _helper(
        flat_curve, euribor6m, quote, error_type=CalibrationErrorType.IMPLIED_VOL_ERROR
    )
    helper.set_pricing_engine(hull_white_engine)
    implied = helper.implied_volatility(helper.model_value())
    assert helper.calibration_error() == pytest.approx(implied - 0.20)

    quote.value = implied
    assert helper.calibration_error() == pytest.approx(0.0, abs=1e-8)


def test_implied_vol_error_clamps_to_bounds(flat_curve, euribor6m, vol_quote):
    helper = _helper(
        flat_curve, euribor6m, vol_quote, error_type=CalibrationErrorType.IMPLIED_VOL_ERROR
    )
    helper.set_pricing_engine(JamshidianSwaptionEngine(HullWhite(flat_curve, 0.05, 1e-7)))
    assert helper.calibration_error() == pytest.approx(0.001 - 0.20)


def test_implied_volatility_not_bracketed(flat_curve, euribor6m, vol_quote):
    helper = _helper(flat_curve, euribor6m, vol_quote)
    with pytest.raises(ImpliedVolatilityError):
        helper.implied_volatility(-1.0)


# Lattice times


def test_add_times_to(flat_curve, euribor6m, vol_quote, reference_date):
    helper = _helper(flat_curve, euribor6m, vol_quote)
    times = [0.0]
    helper.add_times_to(times)

    swap = helper.underlying_swap()
    assert times[0] == 0.0
    assert len(times) == 1 + 2 * len(swap.fixed_leg) + 2 * len(swap.floating_leg) + 1
    assert all(t >= 0.0 for t in times)

    t_exercise = ACT_365F.year_fraction(reference_date, helper.exercise_date)
    t_start = ACT_365F.year_fraction(reference_date, helper.start_date)
    assert times[-1] == t_exercise
    # Resets two days after exercise sit on the exercise node
    assert t_start not in times
    assert times.count(t_exercise) == 3


# Overnight strategy


def test_overnight_swap_construction(flat_curve, estr, vol_quote):
    helper = _ois_helper(flat_curve, estr, vol_quote)
    swap = helper.underlying_swap()

    assert isinstance(swap, OvernightIndexedSwap)
    assert swap.floating_schedule.tenor == Tenor(1, TimeUnit.YEARS)
    assert len(swap.floating_leg) == 5
    assert swap.payment_lag == 0
    assert swap.payment_convention == BusinessDayAdjustment.FOLLOWING
    assert swap.spread == 0.0
    assert swap.averaging_method == RateAveraging.COMPOUND
    assert helper.overnight_index is estr


def test_overnight_forward_matches_discount_ratio(flat_curve, estr, vol_quote):
    helper = _ois_helper(flat_curve, estr, vol_quote)
    swap = helper.underlying_swap()

    annuity = sum(
        c.accrual_period * flat_curve.discount(c.payment_date) for c in swap.fixed_leg
    )
    expected = (
        flat_curve.discount(helper.start_date) - flat_curve.discount(helper.end_date)
    ) / annuity
    assert helper.forward_rate() == pytest.approx(expected, rel=1e-10)


def test_averaging_method_changes_only_averaging(flat_curve, estr, vol_quote):
    compound = _ois_helper(flat_curve, estr, vol_quote)
    simple = _ois_helper(flat_curve, estr, vol_quote, averaging_method=RateAveraging.SIMPLE)

    compound_swap = compound.underlying_swap()
    simple_swap = simple.underlying_swap()

    assert simple.averaging_method == RateAveraging.SIMPLE
    assert simple_swap.averaging_method == RateAveraging.SIMPLE
    assert simple_swap.floating_schedule.dates == compound_swap.floating_schedule.dates
    assert simple_swap.fixed_schedule.dates == compound_swap.fixed_schedule.dates
    assert simple.forward_rate() < compound.forward_rate()


def test_overnight_helper_needs_overnight_index(flat_curve, euribor6m, vol_quote):
    with pytest.raises(TypeError):
        _ois_helper(flat_curve, euribor6m, vol_quote)


def test_generic_helper_takes_swap_builder(flat_curve, euribor6m, vol_quote):
    generic = FixedVsFloatingSwaptionHelper.from_tenor(
        "5Y", "10Y", vol_quote, euribor6m, "1Y", THIRTY_360E, ACT_360, flat_curve,
        swap_builder=IborSwapBuilder(),
    )
    specific = _helper(flat_curve, euribor6m, vol_quote)
    assert _cashflows(generic.underlying_swap()) == _cashflows(specific.underlying_swap())
