"""Market quotes."""

import math
from typing import Optional

from swaptionlib.observable import Observable


class SimpleQuote(Observable):
    """A settable market value, such as a quoted volatility."""

    def __init__(self, value: Optional[float] = None):
        super().__init__()
        self._value = value

    @property
    def value(self) -> float:
        if self._value is None:
            raise ValueError("Quote has no value set")
        return self._value

    @value.setter
    def value(self, value: Optional[float]) -> None:
        if value != self._value:
            self._value = value
            self.notify_observers()

    def is_valid(self) -> bool:
        return self._value is not None and not math.isnan(self._value)

    def __repr__(self) -> str:
        return f"SimpleQuote({self._value!r})"
