"""
Discount curve implementations: flat forward and interpolated pillars.
"""
import logging
import math
from datetime import date, datetime
from typing import List, Sequence, Union

from swaptionlib.conventions.daycount import ACT_365F, DayCountConvention
from swaptionlib.interpolation import create_interpolator

from .base import YieldCurve

logger = logging.getLogger(__name__)


class FlatForwardCurve(YieldCurve):
    """Curve with a single continuously compounded rate for all maturities."""

    def __init__(
        self,
        reference_date: date,
        rate: float,
        day_count: Union[str, DayCountConvention] = ACT_365F,
        name: str = "FLAT",
    ):
        super().__init__(reference_date, day_count, name)
        self._rate = float(rate)

    @property
    def rate(self) -> float:
        return self._rate

    @rate.setter
    def rate(self, value: float) -> None:
        self._rate = float(value)
        self.notify_observers()

    def _discount(self, t: float) -> float:
        return math.exp(-self._rate * t)

    def instantaneous_forward(self, t: float, dt: float = 1e-4) -> float:
        return self._rate


class InterpolatedDiscountCurve(YieldCurve):
    """
    Discount curve interpolated between pillar discount factors.

    A pillar at the reference date with discount factor 1 is added when the
    input does not start there.
    """

    def __init__(
        self,
        reference_date: date,
        pillars: Sequence[Union[date, float]],
        discount_factors: Sequence[float],
        interpolation_method: str = "LOGLINEAR_DF",
        day_count: Union[str, DayCountConvention] = ACT_365F,
        name: str = "",
    ):
        """
        Initialize interpolated discount curve.

        Args:
            reference_date: Curve valuation date
            pillars: Pillar dates, or pillar times in years from reference date
            discount_factors: Discount factors at the pillars
            interpolation_method: Interpolation method name
            day_count: Day count converting pillar dates to times
            name: Curve name
        """
        super().__init__(reference_date, day_count, name)
        self.interpolation_method = interpolation_method
        self.pillar_times = [
            self.time_from_reference(p.date() if isinstance(p, datetime) else p)
            for p in pillars
        ]
        self._build(list(discount_factors))

    def _build(self, discount_factors: List[float]) -> None:
        if len(self.pillar_times) != len(discount_factors):
            raise ValueError("Pillar times and discount factors must have same length")
        if not self.pillar_times:
            raise ValueError("Need at least 1 pillar point")

        for i, df in enumerate(discount_factors):
            if df <= 0:
                raise ValueError(f"Discount factor at pillar {i} must be positive: {df}")

        sorted_pairs = sorted(zip(self.pillar_times, discount_factors, strict=True))
        for i in range(1, len(sorted_pairs)):
            increase = sorted_pairs[i][1] - sorted_pairs[i - 1][1]
            if increase > 1e-6:
                logger.warning(
                    "Discount factors increasing at pillar %s (increase = %.8f)",
                    i,
                    increase,
                )

        self.discount_factors = discount_factors
        times = [t for t, _ in sorted_pairs]
        dfs = [df for _, df in sorted_pairs]
        if times[0] > 0.0:
            times.insert(0, 0.0)
            dfs.insert(0, 1.0)
        self.interpolator = create_interpolator(self.interpolation_method, times, dfs)

    def _discount(self, t: float) -> float:
        if t <= 0:
            return 1.0
        return self.interpolator.interpolate(t)

    def update(self, discount_factors: Sequence[float]) -> None:
        """Replace pillar discount factors in place and notify dependents."""
        self._build(list(discount_factors))
        self.notify_observers()

    def shift_parallel(self, shift_bp: float) -> "InterpolatedDiscountCurve":
        """
        Create a parallel shifted version of the curve.

        Args:
            shift_bp: Parallel shift of zero rates in basis points

        Returns:
            New shifted curve
        """
        shift_decimal = shift_bp / 10000.0
        new_discount_factors = [
            df * math.exp(-shift_decimal * t)
            for t, df in zip(self.pillar_times, self.discount_factors, strict=True)
        ]
        return InterpolatedDiscountCurve(
            reference_date=self.reference_date,
            pillars=list(self.pillar_times),
            discount_factors=new_discount_factors,
            interpolation_method=self.interpolation_method,
            day_count=self.day_count,
            name=f"{self.name}_shifted_{shift_bp}bp",
        )
