"""
European swaptions on fixed-vs-floating swaps.
"""

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from typing import List, Optional

from .base import Instrument
from .swap import FixedVsFloatingSwap, SwapType


class SettlementType(Enum):
    PHYSICAL = "PHYSICAL"
    CASH = "CASH"


class EuropeanExercise:
    """Single exercise date."""

    def __init__(self, exercise_date: date):
        self.dates: List[date] = [exercise_date]

    @property
    def date(self) -> date:
        return self.dates[0]

    def __repr__(self) -> str:
        return f"EuropeanExercise({self.date.isoformat()})"


@dataclass
class SwaptionResults:
    """Swaption value with the market data it was priced from, where known."""

    value: float
    forward: Optional[float] = None
    annuity: Optional[float] = None
    vega: Optional[float] = None
    additional: dict = field(default_factory=dict)


class Swaption(Instrument):
    """Option to enter the underlying swap on the exercise date."""

    def __init__(
        self,
        swap: FixedVsFloatingSwap,
        exercise: EuropeanExercise,
        settlement_type: SettlementType = SettlementType.PHYSICAL,
    ):
        super().__init__()
        self.underlying_swap = swap
        self.exercise = exercise
        self.settlement_type = settlement_type

    @property
    def swap_type(self) -> SwapType:
        return self.underlying_swap.swap_type

    @property
    def strike(self) -> float:
        return self.underlying_swap.fixed_rate
