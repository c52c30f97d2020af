"""
Black calibration helper: market quote to price, and the calibration error.

A calibration loop repeatedly sets model parameters and asks each helper for
``calibration_error()``. The helper converts its volatility quote into a
market price with a Black-style engine and compares it with the price the
model engine produces for the same instrument.
"""

import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional, Tuple

from scipy.optimize import brentq

from swaptionlib.instruments.base import PricingEngine
from swaptionlib.quotes import SimpleQuote

logger = logging.getLogger(__name__)


class CalibrationErrorType(Enum):
    RELATIVE_PRICE_ERROR = "RELATIVE_PRICE_ERROR"
    PRICE_ERROR = "PRICE_ERROR"
    IMPLIED_VOL_ERROR = "IMPLIED_VOL_ERROR"


class VolatilityType(Enum):
    SHIFTED_LOGNORMAL = "SHIFTED_LOGNORMAL"
    NORMAL = "NORMAL"


class HelperState(Enum):
    STALE = "STALE"
    RECOMPUTING = "RECOMPUTING"
    FRESH = "FRESH"


class UnsupportedVolatilityTypeError(ValueError):
    """Raised when no Black-style engine exists for a volatility type."""


class ImpliedVolatilityError(RuntimeError):
    """Raised when no volatility reproduces the target price."""


# Search bounds for implied volatility per quoting convention
VOLATILITY_BOUNDS = {
    VolatilityType.SHIFTED_LOGNORMAL: (0.0010, 10.0),
    VolatilityType.NORMAL: (0.00005, 0.50),
}


class BlackCalibrationHelper(ABC):
    """
    Lazily recomputed helper pricing one instrument from a volatility quote.

    Derived state is rebuilt by ``calculate()`` when any observed version
    stamp has moved since the last rebuild, or after ``invalidate()``.
    Queries made while a rebuild is in progress see the state being built.

    Args:
        volatility: Market volatility quote
        error_type: How ``calibration_error`` compares market and model
        volatility_type: Quoting convention of the volatility
        shift: Displacement for shifted lognormal volatilities
    """

    def __init__(
        self,
        volatility: SimpleQuote,
        error_type: CalibrationErrorType = CalibrationErrorType.RELATIVE_PRICE_ERROR,
        volatility_type: VolatilityType = VolatilityType.SHIFTED_LOGNORMAL,
        shift: float = 0.0,
    ):
        self.volatility = volatility
        self.error_type = error_type
        self.volatility_type = volatility_type
        self.shift = shift
        self._engine: Optional[PricingEngine] = None
        self._state = HelperState.STALE
        self._stamps: Optional[Tuple[int, ...]] = None
        self._market_value: Optional[float] = None

    @property
    def pricing_engine(self) -> Optional[PricingEngine]:
        return self._engine

    def set_pricing_engine(self, engine: PricingEngine) -> None:
        """Engine used by ``model_value``, typically backed by the model being fitted."""
        self._engine = engine

    @property
    def state(self) -> HelperState:
        if self._state == HelperState.FRESH and self._observed() != self._stamps:
            return HelperState.STALE
        return self._state

    def _observed(self) -> Tuple[int, ...]:
        """Version stamps of everything the derived state depends on."""
        return (self.volatility.version,)

    def invalidate(self) -> None:
        """Force a rebuild on the next query."""
        if self._state != HelperState.RECOMPUTING:
            self._state = HelperState.STALE

    def calculate(self) -> None:
        """Rebuild derived state if stale."""
        if self._state == HelperState.RECOMPUTING:
            return
        stamps = self._observed()
        if self._state == HelperState.FRESH and stamps == self._stamps:
            return

        self._state = HelperState.RECOMPUTING
        try:
            self._perform_calculations()
            if self.volatility.is_valid() and self.volatility.value <= 0.0:
                logger.warning("Non-positive volatility quote: %s", self.volatility.value)
            self._market_value = (
                self.black_price(self.volatility.value)
                if self.volatility.is_valid()
                else None
            )
        except Exception:
            self._state = HelperState.STALE
            raise
        self._stamps = stamps
        self._state = HelperState.FRESH

    @abstractmethod
    def _perform_calculations(self) -> None:
        """Rebuild the instrument being calibrated to."""

    @abstractmethod
    def model_value(self) -> float:
        """Instrument value under the attached pricing engine."""

    @abstractmethod
    def black_price(self, sigma: float) -> float:
        """Instrument value under the quoting convention at volatility sigma."""

    @abstractmethod
    def add_times_to(self, times: List[float]) -> None:
        """Append the times a lattice must contain for this instrument."""

    def market_value(self) -> float:
        """Black price at the quoted volatility."""
        self.calculate()
        if self._market_value is None:
            raise ValueError("Market value not available: volatility quote is not set")
        return self._market_value

    def volatility_bounds(self) -> Tuple[float, float]:
        try:
            return VOLATILITY_BOUNDS[self.volatility_type]
        except KeyError:
            raise UnsupportedVolatilityTypeError(
                f"unsupported volatility type: {self.volatility_type}"
            ) from None

    def calibration_error(self) -> float:
        """
        Distance between market and model for the calibration objective.

        Returns:
            RELATIVE_PRICE_ERROR: |market - model| / market
            PRICE_ERROR: market - model
            IMPLIED_VOL_ERROR: implied volatility of the model price minus the
                quoted volatility, with the implied volatility clamped to the
                search bounds
        """
        if self.error_type == CalibrationErrorType.RELATIVE_PRICE_ERROR:
            market = self.market_value()
            return abs(market - self.model_value()) / market
        if self.error_type == CalibrationErrorType.PRICE_ERROR:
            return self.market_value() - self.model_value()
        if self.error_type == CalibrationErrorType.IMPLIED_VOL_ERROR:
            min_vol, max_vol = self.volatility_bounds()
            lower_price = self.black_price(min_vol)
            upper_price = self.black_price(max_vol)
            model_price = self.model_value()
            if model_price <= lower_price:
                implied = min_vol
            elif model_price >= upper_price:
                implied = max_vol
            else:
                implied = self.implied_volatility(
                    model_price, 1e-12, 5000, min_vol, max_vol
                )
            return implied - self.volatility.value
        raise ValueError(f"Unknown calibration error type: {self.error_type}")

    def implied_volatility(
        self,
        target_value: float,
        accuracy: float = 1e-12,
        max_evaluations: int = 5000,
        min_vol: Optional[float] = None,
        max_vol: Optional[float] = None,
    ) -> float:
        """
        Volatility whose Black price equals the target value.

        Args:
            target_value: Price to match
            accuracy: Absolute tolerance on the volatility
            max_evaluations: Iteration limit for the root finder
            min_vol: Lower search bound, defaulting per volatility type
            max_vol: Upper search bound, defaulting per volatility type

        Returns:
            Implied volatility

        Raises:
            ImpliedVolatilityError: If the target is not bracketed or the
                root finder does not converge
        """
        default_min, default_max = self.volatility_bounds()
        min_vol = default_min if min_vol is None else min_vol
        max_vol = default_max if max_vol is None else max_vol

        def objective(sigma: float) -> float:
            return self.black_price(sigma) - target_value

        f_min = objective(min_vol)
        f_max = objective(max_vol)
        if f_min * f_max > 0.0:
            raise ImpliedVolatilityError(
                f"Target value {target_value} not bracketed by volatilities "
                f"[{min_vol}, {max_vol}]"
            )
        try:
            sigma = brentq(
                objective, min_vol, max_vol, xtol=accuracy, maxiter=max_evaluations
            )
        except RuntimeError as exc:
            raise ImpliedVolatilityError(str(exc)) from exc
        logger.debug("Implied volatility %.8f for target %.8f", sigma, target_value)
        return sigma
