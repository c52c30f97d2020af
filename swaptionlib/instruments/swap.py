"""
Fixed-vs-floating interest rate swaps.
"""

from abc import abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from swaptionlib.conventions.calendars import Calendar
from swaptionlib.conventions.daycount import DayCountConvention
from swaptionlib.conventions.types import BusinessDayAdjustment, RateAveraging
from swaptionlib.indexes.ibor import IborIndex
from swaptionlib.indexes.overnight import OvernightIndex
from swaptionlib.schedule.core import Schedule

from .base import Instrument
from .cashflows import Coupon, fixed_rate_leg, ibor_leg, overnight_leg


class SwapType(Enum):
    """Direction with respect to the fixed leg."""

    PAYER = 1
    RECEIVER = -1


@dataclass
class SwapResults:
    """Valuation results of a fixed-vs-floating swap.

    Leg values are signed from the holder's point of view; index 0 is the
    fixed leg and index 1 the floating leg. BPS is the value change of a leg
    for a one basis point move in its rate.
    """

    value: float
    leg_npv: List[float] = field(default_factory=list)
    leg_bps: List[float] = field(default_factory=list)
    fair_rate: Optional[float] = None
    fair_spread: Optional[float] = None


class FixedVsFloatingSwap(Instrument):
    """
    Swap exchanging a fixed leg against a floating leg on the same nominal.

    A PAYER swap pays the fixed leg and receives the floating leg.
    """

    def __init__(
        self,
        swap_type: SwapType,
        nominal: float,
        fixed_schedule: Schedule,
        fixed_rate: float,
        fixed_day_count: DayCountConvention,
        floating_schedule: Schedule,
        index: IborIndex,
        spread: float,
        floating_day_count: DayCountConvention,
    ):
        super().__init__()
        self.swap_type = swap_type
        self.nominal = nominal
        self.fixed_schedule = fixed_schedule
        self.fixed_rate = fixed_rate
        self.fixed_day_count = fixed_day_count
        self.floating_schedule = floating_schedule
        self.index = index
        self.spread = spread
        self.floating_day_count = floating_day_count

        self.fixed_leg: List[Coupon] = fixed_rate_leg(
            fixed_schedule, nominal, fixed_rate, fixed_day_count
        )
        self.floating_leg: List[Coupon] = self._build_floating_leg()

    @abstractmethod
    def _build_floating_leg(self) -> List[Coupon]:
        pass

    def legs(self) -> List[Tuple[Sequence[Coupon], float]]:
        """Legs paired with the sign they carry for the holder."""
        payer = 1.0 if self.swap_type == SwapType.PAYER else -1.0
        return [(self.fixed_leg, -payer), (self.floating_leg, payer)]

    @property
    def start_date(self):
        return min(self.fixed_schedule.start_date, self.floating_schedule.start_date)

    @property
    def maturity_date(self):
        return max(self.fixed_schedule.end_date, self.floating_schedule.end_date)

    def fixed_leg_npv(self) -> float:
        return self.results().leg_npv[0]

    def floating_leg_npv(self) -> float:
        return self.results().leg_npv[1]

    def fixed_leg_bps(self) -> float:
        return self.results().leg_bps[0]

    def floating_leg_bps(self) -> float:
        return self.results().leg_bps[1]

    def fair_rate(self) -> float:
        fair = self.results().fair_rate
        if fair is None:
            raise ValueError("Fair rate not available: fixed leg has no annuity")
        return fair

    def fair_spread(self) -> float:
        fair = self.results().fair_spread
        if fair is None:
            raise ValueError("Fair spread not available: floating leg has no annuity")
        return fair


class VanillaSwap(FixedVsFloatingSwap):
    """Fixed leg against a term-fixing index leg."""

    def _build_floating_leg(self) -> List[Coupon]:
        return ibor_leg(
            self.floating_schedule,
            self.nominal,
            self.index,
            self.floating_day_count,
            self.spread,
        )


class OvernightIndexedSwap(FixedVsFloatingSwap):
    """
    Fixed leg against a daily compounded or averaged overnight leg.

    The overnight leg accrues with the index day count;
    ``floating_day_count`` is kept for reference only.
    """

    def __init__(
        self,
        swap_type: SwapType,
        nominal: float,
        fixed_schedule: Schedule,
        fixed_rate: float,
        fixed_day_count: DayCountConvention,
        overnight_schedule: Schedule,
        overnight_index: OvernightIndex,
        spread: float = 0.0,
        payment_lag: int = 0,
        payment_convention: BusinessDayAdjustment = BusinessDayAdjustment.FOLLOWING,
        payment_calendar: Optional[Calendar] = None,
        averaging_method: RateAveraging = RateAveraging.COMPOUND,
        floating_day_count: Optional[DayCountConvention] = None,
    ):
        self.payment_lag = payment_lag
        self.payment_convention = payment_convention
        self.payment_calendar = payment_calendar
        self.averaging_method = averaging_method
        super().__init__(
            swap_type,
            nominal,
            fixed_schedule,
            fixed_rate,
            fixed_day_count,
            overnight_schedule,
            overnight_index,
            spread,
            floating_day_count or overnight_index.day_count,
        )

    @property
    def overnight_index(self) -> OvernightIndex:
        return self.index

    def _build_floating_leg(self) -> List[Coupon]:
        return overnight_leg(
            self.floating_schedule,
            self.nominal,
            self.index,
            spread=self.spread,
            payment_lag=self.payment_lag,
            payment_convention=self.payment_convention,
            payment_calendar=self.payment_calendar,
            averaging_method=self.averaging_method,
        )
