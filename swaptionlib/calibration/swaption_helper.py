"""
Swaption calibration helpers.

Each helper builds, on demand, the fixed-vs-floating swap and European
swaption matching a market quote (exercise date, underlying start and end),
and prices it either with the model engine under calibration or with the
Black/Bachelier engine matching the quote's volatility convention.

The floating leg is built by a ``SwapBuilder``: ``IborSwapBuilder`` for
term-fixing indexes (``SwaptionHelper``) and ``OvernightIndexedSwapBuilder``
for overnight indexes (``OvernightIndexedSwaptionHelper``).

Example:
    >>> helper = SwaptionHelper.from_tenor(
    ...     "5Y", "10Y", SimpleQuote(0.20), Euribor6M(curve), "1Y",
    ...     THIRTY_360E, ACT_360, curve)
    >>> helper.set_pricing_engine(JamshidianSwaptionEngine(HullWhite(curve)))
    >>> helper.calibration_error()
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import date, datetime
from typing import List, Optional, Union

from swaptionlib.conventions.dates import to_date
from swaptionlib.conventions.daycount import ACT_365F, DayCountConvention
from swaptionlib.conventions.tenor import Tenor
from swaptionlib.conventions.types import (
    BusinessDayAdjustment,
    DateGeneration,
    Frequency,
    RateAveraging,
    TimeUnit,
)
from swaptionlib.curves.base import YieldCurve
from swaptionlib.indexes.ibor import IborIndex
from swaptionlib.indexes.overnight import OvernightIndex
from swaptionlib.instruments.swap import (
    FixedVsFloatingSwap,
    OvernightIndexedSwap,
    SwapType,
    VanillaSwap,
)
from swaptionlib.instruments.swaption import EuropeanExercise, Swaption
from swaptionlib.pricingengines.discretized import swaption_mandatory_times
from swaptionlib.pricingengines.swap import DiscountingSwapEngine
from swaptionlib.pricingengines.swaption import (
    BachelierSwaptionEngine,
    BlackSwaptionEngine,
)
from swaptionlib.quotes import SimpleQuote
from swaptionlib.schedule.core import Schedule
from swaptionlib.schedule.generator import make_schedule

from .helper import (
    BlackCalibrationHelper,
    CalibrationErrorType,
    UnsupportedVolatilityTypeError,
    VolatilityType,
)

logger = logging.getLogger(__name__)

DateLike = Union[date, datetime]
TenorLike = Union[str, Tenor]


class InvalidDateOrderError(ValueError):
    """Raised when a helper's end date falls before its start date."""


@dataclass(frozen=True)
class ResolvedDates:
    """Exercise date and underlying swap dates of a swaption helper."""

    exercise_date: date
    start_date: date
    end_date: date

    def __post_init__(self):
        if self.end_date < self.start_date:
            raise InvalidDateOrderError(
                f"End date {self.end_date} is before start date {self.start_date}"
            )


def resolve_start_date(
    index: IborIndex, exercise_date: DateLike, settlement_days: Optional[int] = None
) -> date:
    """
    Underlying start date for an exercise date.

    Without explicit settlement days the index value date is used; otherwise
    the exercise date is advanced by that many business days on the index
    fixing calendar with the index business day convention.
    """
    if settlement_days is None:
        return index.value_date(exercise_date)
    return index.fixing_calendar.advance(
        exercise_date,
        Tenor(settlement_days, TimeUnit.DAYS),
        index.business_day_convention,
    )


def resolve_exercise_date(index: IborIndex, curve: YieldCurve, maturity: TenorLike) -> date:
    """Exercise date a maturity tenor after the curve reference date."""
    return index.fixing_calendar.advance(
        curve.reference_date, maturity, index.business_day_convention
    )


def resolve_dates_from_end_date(
    index: IborIndex,
    exercise_date: DateLike,
    end_date: DateLike,
    settlement_days: Optional[int] = None,
) -> ResolvedDates:
    """Dates for an explicit exercise date and underlying end date."""
    exercise_date = to_date(exercise_date)
    start_date = resolve_start_date(index, exercise_date, settlement_days)
    return ResolvedDates(exercise_date, start_date, to_date(end_date))


def resolve_dates_from_exercise(
    index: IborIndex,
    exercise_date: DateLike,
    length: TenorLike,
    settlement_days: Optional[int] = None,
) -> ResolvedDates:
    """Dates for an exercise date and an underlying swap length."""
    exercise_date = to_date(exercise_date)
    start_date = resolve_start_date(index, exercise_date, settlement_days)
    end_date = index.fixing_calendar.advance(
        start_date, length, index.business_day_convention
    )
    return ResolvedDates(exercise_date, start_date, end_date)


def resolve_dates_from_tenor(
    index: IborIndex,
    curve: YieldCurve,
    maturity: TenorLike,
    length: TenorLike,
    settlement_days: Optional[int] = None,
) -> ResolvedDates:
    """Dates for an option maturity tenor and an underlying swap length."""
    exercise_date = resolve_exercise_date(index, curve, maturity)
    return resolve_dates_from_exercise(index, exercise_date, length, settlement_days)


@dataclass(frozen=True)
class SwaptionHelperConfig:
    """Fully resolved configuration of a swaption helper.

    Attributes:
        volatility: Market volatility quote
        index: Floating leg index, also supplying calendar and conventions
        term_structure: Discount curve, also the reference date for times
        dates: Exercise, start and end dates
        fixed_leg_tenor: Fixed leg payment period
        fixed_leg_day_count: Fixed leg accrual day count
        floating_leg_day_count: Floating leg accrual day count
        error_type: Calibration error definition
        strike: Fixed rate, or None for at-the-money
        nominal: Swap nominal
        volatility_type: Quoting convention of the volatility
        shift: Displacement for shifted lognormal volatilities
        settlement_days: Exercise-to-start lag, or None for the index value date
    """

    volatility: SimpleQuote
    index: IborIndex
    term_structure: YieldCurve
    dates: ResolvedDates
    fixed_leg_tenor: Tenor
    fixed_leg_day_count: DayCountConvention
    floating_leg_day_count: DayCountConvention
    error_type: CalibrationErrorType = CalibrationErrorType.RELATIVE_PRICE_ERROR
    strike: Optional[float] = None
    nominal: float = 1.0
    volatility_type: VolatilityType = VolatilityType.SHIFTED_LOGNORMAL
    shift: float = 0.0
    settlement_days: Optional[int] = None


@dataclass
class _HelperCache:
    """Derived state rebuilt on every recalculation."""

    start_date: Optional[date] = None
    end_date: Optional[date] = None
    forward_rate: Optional[float] = None
    exercise_rate: Optional[float] = None
    swap: Optional[FixedVsFloatingSwap] = None
    swaption: Optional[Swaption] = None


def _leg_schedule(config: SwaptionHelperConfig, tenor: Tenor) -> Schedule:
    """Forward-generated schedule over the helper's swap dates on the index calendar."""
    index = config.index
    return make_schedule(
        config.dates.start_date,
        config.dates.end_date,
        tenor,
        index.fixing_calendar,
        index.business_day_convention,
        index.business_day_convention,
        DateGeneration.FORWARD,
        end_of_month=False,
    )


class SwapBuilder(ABC):
    """Builds the underlying swap for a helper configuration."""

    @abstractmethod
    def make_swap(
        self, config: SwaptionHelperConfig, swap_type: SwapType, fixed_rate: float
    ) -> FixedVsFloatingSwap:
        pass


class IborSwapBuilder(SwapBuilder):
    """Fixed leg against the term-fixing index rolling on its own tenor."""

    def make_swap(self, config, swap_type, fixed_rate):
        return VanillaSwap(
            swap_type,
            config.nominal,
            _leg_schedule(config, config.fixed_leg_tenor),
            fixed_rate,
            config.fixed_leg_day_count,
            _leg_schedule(config, config.index.tenor),
            config.index,
            0.0,
            config.floating_leg_day_count,
        )


class OvernightIndexedSwapBuilder(SwapBuilder):
    """
    Fixed leg against an overnight leg paid annually.

    The overnight leg pays once a year whatever the index tenor; the daily
    compounding or averaging happens inside each coupon.
    """

    def __init__(
        self,
        index: OvernightIndex,
        averaging_method: RateAveraging = RateAveraging.COMPOUND,
    ):
        if not isinstance(index, OvernightIndex):
            raise TypeError(
                f"Overnight indexed swaptions need an overnight index, got {index!r}"
            )
        self.index = index
        self.averaging_method = averaging_method

    def make_swap(self, config, swap_type, fixed_rate):
        return OvernightIndexedSwap(
            swap_type,
            config.nominal,
            _leg_schedule(config, config.fixed_leg_tenor),
            fixed_rate,
            config.fixed_leg_day_count,
            _leg_schedule(config, Tenor.from_frequency(Frequency.ANNUAL)),
            self.index,
            spread=0.0,
            payment_lag=0,
            payment_convention=BusinessDayAdjustment.FOLLOWING,
            payment_calendar=None,
            averaging_method=self.averaging_method,
            floating_day_count=config.floating_leg_day_count,
        )


class FixedVsFloatingSwaptionHelper(BlackCalibrationHelper):
    """
    Calibration helper for a European swaption on a fixed-vs-floating swap.

    Derived state depends on the volatility quote, the index (and its
    forwarding curve) and the discount curve; a change to any of them makes
    the next query rebuild the swap and swaption.

    Args:
        config: Resolved helper configuration
        swap_builder: Builder for the underlying swap
    """

    def __init__(self, config: SwaptionHelperConfig, swap_builder: SwapBuilder):
        super().__init__(
            config.volatility,
            config.error_type,
            config.volatility_type,
            config.shift,
        )
        self.config = config
        self.swap_builder = swap_builder
        self._cache = _HelperCache()

    @classmethod
    def from_tenor(
        cls,
        maturity: TenorLike,
        length: TenorLike,
        volatility: SimpleQuote,
        index: IborIndex,
        fixed_leg_tenor: TenorLike,
        fixed_leg_day_count: DayCountConvention,
        floating_leg_day_count: DayCountConvention,
        term_structure: YieldCurve,
        error_type: CalibrationErrorType = CalibrationErrorType.RELATIVE_PRICE_ERROR,
        strike: Optional[float] = None,
        nominal: float = 1.0,
        volatility_type: VolatilityType = VolatilityType.SHIFTED_LOGNORMAL,
        shift: float = 0.0,
        settlement_days: Optional[int] = None,
        **helper_options,
    ):
        """Helper for an option maturity after the curve reference date and a swap length."""
        dates = resolve_dates_from_tenor(
            index, term_structure, maturity, length, settlement_days
        )
        return cls._from_dates(
            dates, volatility, index, fixed_leg_tenor, fixed_leg_day_count,
            floating_leg_day_count, term_structure, error_type, strike, nominal,
            volatility_type, shift, settlement_days, helper_options,
        )

    @classmethod
    def from_exercise_date(
        cls,
        exercise_date: DateLike,
        length: TenorLike,
        volatility: SimpleQuote,
        index: IborIndex,
        fixed_leg_tenor: TenorLike,
        fixed_leg_day_count: DayCountConvention,
        floating_leg_day_count: DayCountConvention,
        term_structure: YieldCurve,
        error_type: CalibrationErrorType = CalibrationErrorType.RELATIVE_PRICE_ERROR,
        strike: Optional[float] = None,
        nominal: float = 1.0,
        volatility_type: VolatilityType = VolatilityType.SHIFTED_LOGNORMAL,
        shift: float = 0.0,
        settlement_days: Optional[int] = None,
        **helper_options,
    ):
        """Helper for an explicit exercise date and a swap length."""
        dates = resolve_dates_from_exercise(index, exercise_date, length, settlement_days)
        return cls._from_dates(
            dates, volatility, index, fixed_leg_tenor, fixed_leg_day_count,
            floating_leg_day_count, term_structure, error_type, strike, nominal,
            volatility_type, shift, settlement_days, helper_options,
        )

    @classmethod
    def from_dates(
        cls,
        exercise_date: DateLike,
        end_date: DateLike,
        volatility: SimpleQuote,
        index: IborIndex,
        fixed_leg_tenor: TenorLike,
        fixed_leg_day_count: DayCountConvention,
        floating_leg_day_count: DayCountConvention,
        term_structure: YieldCurve,
        error_type: CalibrationErrorType = CalibrationErrorType.RELATIVE_PRICE_ERROR,
        strike: Optional[float] = None,
        nominal: float = 1.0,
        volatility_type: VolatilityType = VolatilityType.SHIFTED_LOGNORMAL,
        shift: float = 0.0,
        settlement_days: Optional[int] = None,
        **helper_options,
    ):
        """Helper for an explicit exercise date and underlying end date."""
        dates = resolve_dates_from_end_date(index, exercise_date, end_date, settlement_days)
        return cls._from_dates(
            dates, volatility, index, fixed_leg_tenor, fixed_leg_day_count,
            floating_leg_day_count, term_structure, error_type, strike, nominal,
            volatility_type, shift, settlement_days, helper_options,
        )

    @classmethod
    def _from_dates(
        cls, dates, volatility, index, fixed_leg_tenor, fixed_leg_day_count,
        floating_leg_day_count, term_structure, error_type, strike, nominal,
        volatility_type, shift, settlement_days, helper_options,
    ):
        config = SwaptionHelperConfig(
            volatility=volatility,
            index=index,
            term_structure=term_structure,
            dates=dates,
            fixed_leg_tenor=Tenor.coerce(fixed_leg_tenor),
            fixed_leg_day_count=fixed_leg_day_count,
            floating_leg_day_count=floating_leg_day_count,
            error_type=error_type,
            strike=strike,
            nominal=nominal,
            volatility_type=volatility_type,
            shift=shift,
            settlement_days=settlement_days,
        )
        return cls(config, **helper_options)

    @property
    def index(self) -> IborIndex:
        return self.config.index

    @property
    def term_structure(self) -> YieldCurve:
        return self.config.term_structure

    @property
    def exercise_date(self) -> date:
        return self.config.dates.exercise_date

    @property
    def start_date(self) -> date:
        return self.config.dates.start_date

    @property
    def end_date(self) -> date:
        return self.config.dates.end_date

    def _observed(self):
        return (
            self.volatility.version,
            self.config.index.version,
            self.config.term_structure.version,
        )

    def _perform_calculations(self) -> None:
        config = self.config
        swap_engine = DiscountingSwapEngine(
            config.term_structure, include_settlement_date_flows=False
        )

        trial = self.swap_builder.make_swap(config, SwapType.RECEIVER, 0.0)
        trial.set_pricing_engine(swap_engine)
        forward = trial.fair_rate()

        swap_type = SwapType.RECEIVER
        if config.strike is None:
            exercise_rate = forward
        else:
            exercise_rate = config.strike
            swap_type = SwapType.RECEIVER if config.strike <= forward else SwapType.PAYER

        swap = self.swap_builder.make_swap(config, swap_type, exercise_rate)
        swap.set_pricing_engine(swap_engine)
        swaption = Swaption(swap, EuropeanExercise(config.dates.exercise_date))

        self._cache = _HelperCache(
            start_date=config.dates.start_date,
            end_date=config.dates.end_date,
            forward_rate=forward,
            exercise_rate=exercise_rate,
            swap=swap,
            swaption=swaption,
        )
        logger.debug(
            "Rebuilt %s swaption %s -> %s: forward %.6f, exercise rate %.6f",
            swap_type.name.lower(),
            config.dates.exercise_date,
            config.dates.end_date,
            forward,
            exercise_rate,
        )

    def model_value(self) -> float:
        self.calculate()
        swaption = self._cache.swaption
        swaption.set_pricing_engine(self.pricing_engine)
        return swaption.npv()

    def black_price(self, sigma: float) -> float:
        self.calculate()
        vol = SimpleQuote(sigma)
        if self.volatility_type == VolatilityType.SHIFTED_LOGNORMAL:
            engine = BlackSwaptionEngine(
                self.config.term_structure, vol, ACT_365F, self.shift
            )
        elif self.volatility_type == VolatilityType.NORMAL:
            engine = BachelierSwaptionEngine(self.config.term_structure, vol, ACT_365F)
        else:
            raise UnsupportedVolatilityTypeError(
                f"cannot construct engine: {self.volatility_type}"
            )

        swaption = self._cache.swaption
        swaption.set_pricing_engine(engine)
        try:
            return swaption.npv()
        finally:
            swaption.set_pricing_engine(self.pricing_engine)

    def add_times_to(self, times: List[float]) -> None:
        self.calculate()
        curve = self.config.term_structure
        times.extend(
            swaption_mandatory_times(
                self._cache.swaption, curve.reference_date, curve.day_count
            )
        )

    def swaption(self) -> Swaption:
        self.calculate()
        return self._cache.swaption

    def underlying_swap(self) -> FixedVsFloatingSwap:
        self.calculate()
        return self._cache.swap

    def exercise_rate(self) -> float:
        """Strike if one was given, otherwise the forward swap rate."""
        self.calculate()
        return self._cache.exercise_rate

    def forward_rate(self) -> float:
        """Fair rate of the underlying swap."""
        self.calculate()
        return self._cache.forward_rate


class SwaptionHelper(FixedVsFloatingSwaptionHelper):
    """Swaption helper on a swap against a term-fixing index."""

    def __init__(self, config: SwaptionHelperConfig):
        super().__init__(config, IborSwapBuilder())


class OvernightIndexedSwaptionHelper(FixedVsFloatingSwaptionHelper):
    """
    Swaption helper on a swap against an overnight index.

    Args:
        config: Resolved helper configuration; its index must be overnight
        averaging_method: Daily compounding or simple averaging of fixings
    """

    def __init__(
        self,
        config: SwaptionHelperConfig,
        averaging_method: RateAveraging = RateAveraging.COMPOUND,
    ):
        super().__init__(config, OvernightIndexedSwapBuilder(config.index, averaging_method))

    @property
    def averaging_method(self) -> RateAveraging:
        return self.swap_builder.averaging_method

    @property
    def overnight_index(self) -> OvernightIndex:
        return self.swap_builder.index
