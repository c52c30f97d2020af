"""
Linear and log-linear interpolation on discount factors.
"""
import math

import numpy as np

from .base import Interpolator


class LinearDiscountFactorInterpolator(Interpolator):
    """Linear interpolation on discount factors.

    Flat extrapolation beyond the first and last pillar.
    """

    def interpolate(self, t: float) -> float:
        if t <= self.pillars[0]:
            return float(self.values[0])
        if t >= self.pillars[-1]:
            return float(self.values[-1])

        i = self._segment(t)
        t1, t2 = self.pillars[i], self.pillars[i + 1]
        df1, df2 = self.values[i], self.values[i + 1]

        weight = (t - t1) / (t2 - t1)
        return float(df1 + weight * (df2 - df1))


class LogLinearDiscountFactorInterpolator(Interpolator):
    """Linear interpolation on log discount factors.

    Gives piecewise flat instantaneous forwards. The last segment's forward is
    extended beyond the final pillar, so the curve keeps discounting after it.
    """

    def __init__(self, pillars, values):
        super().__init__(pillars, values)
        if np.any(self.values <= 0):
            raise ValueError("Log-linear interpolation needs positive values")
        self.log_values = np.log(self.values)

    def interpolate(self, t: float) -> float:
        if t <= self.pillars[0]:
            return float(self.values[0])

        i = self._segment(t)
        t1, t2 = self.pillars[i], self.pillars[i + 1]
        l1, l2 = self.log_values[i], self.log_values[i + 1]

        weight = (t - t1) / (t2 - t1)
        return math.exp(l1 + weight * (l2 - l1))
