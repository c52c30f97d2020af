"""
One-factor Hull-White short-rate model fitted to a discount curve.

    dr(t) = (theta(t) - a r(t)) dt + sigma dW(t)

theta(t) is chosen so that the model reproduces the curve's discount factors
exactly; only ``a`` and ``sigma`` are free parameters.
"""

import math
from typing import List, Sequence

from swaptionlib.curves.base import YieldCurve
from swaptionlib.observable import Observable
from swaptionlib.pricingengines.black_formula import OptionType, black_formula


class HullWhite(Observable):
    """
    Hull-White model with closed-form bond and bond option prices.

    Args:
        curve: Discount curve the model is fitted to
        a: Mean reversion speed
        sigma: Short-rate volatility
    """

    def __init__(self, curve: YieldCurve, a: float = 0.1, sigma: float = 0.01):
        super().__init__()
        self.curve = curve
        self._check(a, sigma)
        self.a = a
        self.sigma = sigma

    @staticmethod
    def _check(a: float, sigma: float) -> None:
        if a <= 0:
            raise ValueError(f"Mean reversion must be positive for Hull-White: {a}")
        if sigma <= 0:
            raise ValueError(f"Volatility must be positive for Hull-White: {sigma}")

    @property
    def params(self) -> List[float]:
        return [self.a, self.sigma]

    def set_params(self, params: Sequence[float]) -> None:
        """Set (a, sigma), as a calibration loop does on each trial point."""
        a, sigma = params
        self._check(a, sigma)
        self.a = a
        self.sigma = sigma
        self.notify_observers()

    def B(self, t: float, T: float) -> float:
        return (1.0 - math.exp(-self.a * (T - t))) / self.a

    def A(self, t: float, T: float) -> float:
        b = self.B(t, T)
        forward = self.curve.instantaneous_forward(t)
        variance = self.sigma ** 2 / (4.0 * self.a) * (1.0 - math.exp(-2.0 * self.a * t))
        return (
            self.curve.discount(T) / self.curve.discount(t)
            * math.exp(b * forward - variance * b * b)
        )

    def discount_bond(self, t: float, T: float, r: float) -> float:
        """Price at time t of a zero-coupon bond maturing at T, given r(t) = r."""
        return self.A(t, T) * math.exp(-self.B(t, T) * r)

    def discount_bond_option(
        self,
        option_type: OptionType,
        strike: float,
        maturity: float,
        bond_maturity: float,
    ) -> float:
        """
        Price of a European option on a zero-coupon bond.

        Args:
            option_type: CALL or PUT on the bond price
            strike: Strike price of the bond
            maturity: Option expiry time
            bond_maturity: Bond maturity time (after the expiry)

        Returns:
            Option value today
        """
        v = self.sigma * self.B(maturity, bond_maturity) * math.sqrt(
            (1.0 - math.exp(-2.0 * self.a * maturity)) / (2.0 * self.a)
        )
        p_option = self.curve.discount(maturity)
        p_bond = self.curve.discount(bond_maturity)
        return black_formula(option_type, strike, p_bond / p_option, v, p_option)
