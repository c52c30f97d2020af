"""
Instrument base with a pluggable pricing engine.
"""

from abc import ABC
from typing import Any, Optional, Protocol


class MissingPricingEngineError(RuntimeError):
    """Raised when an instrument is priced before an engine is set."""


class PricingEngine(Protocol):
    """Anything that can price an instrument into a results object."""

    def calculate(self, instrument: Any) -> Any:
        ...


class Instrument(ABC):
    """Base instrument; values come from the attached pricing engine."""

    def __init__(self) -> None:
        self._engine: Optional[PricingEngine] = None

    @property
    def pricing_engine(self) -> Optional[PricingEngine]:
        return self._engine

    def set_pricing_engine(self, engine: Optional[PricingEngine]) -> None:
        self._engine = engine

    def results(self) -> Any:
        """Run the attached engine and return its results."""
        if self._engine is None:
            raise MissingPricingEngineError(
                f"{self.__class__.__name__} has no pricing engine set"
            )
        return self._engine.calculate(self)

    def npv(self) -> float:
        return self.results().value
