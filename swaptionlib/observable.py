"""Version stamps for market objects.

Quotes, curves and indexes carry an integer version that moves forward every
time they change. Objects that cache derived results remember the versions they
were computed against and recompute when any of them has moved.

Stamps are drawn from one process-wide counter, so the newest change anywhere
always has the largest stamp. A composite object can therefore report the
maximum of its own stamp and its dependencies' stamps.
"""

import itertools

_stamps = itertools.count(1)


class Observable:
    """Base class for market objects that notify changes by version stamp."""

    def __init__(self) -> None:
        self._version = next(_stamps)

    @property
    def version(self) -> int:
        """Stamp of the latest change to this object."""
        return self._version

    def notify_observers(self) -> None:
        """Record a change; dependents see a new version on their next query."""
        self._version = next(_stamps)
