"""
Base classes for curve interpolation methods.
"""
from abc import ABC, abstractmethod
from typing import List

import numpy as np


class Interpolator(ABC):
    """Base class for curve interpolation methods."""

    def __init__(self, pillars: List[float], values: List[float]):
        """
        Initialize interpolator.

        Args:
            pillars: Time to maturity points (in years)
            values: Values to interpolate (discount factors)
        """
        if len(pillars) != len(values):
            raise ValueError("Pillars and values must have same length")
        if len(pillars) < 2:
            raise ValueError("Need at least 2 points for interpolation")

        sorted_pairs = sorted(zip(pillars, values, strict=True))
        self.pillars = np.array([p[0] for p in sorted_pairs], dtype=float)
        self.values = np.array([p[1] for p in sorted_pairs], dtype=float)

        if len(np.unique(self.pillars)) != len(self.pillars):
            raise ValueError("Duplicate pillar dates not allowed")

    @abstractmethod
    def interpolate(self, t: float) -> float:
        """Interpolate value at time t."""
        pass

    def interpolate_many(self, times: List[float]) -> List[float]:
        """Interpolate values at multiple times."""
        return [self.interpolate(t) for t in times]

    def _segment(self, t: float) -> int:
        """Index i of the pillar interval [i, i+1] used for time t."""
        i = int(np.searchsorted(self.pillars, t)) - 1
        return min(max(i, 0), len(self.pillars) - 2)
