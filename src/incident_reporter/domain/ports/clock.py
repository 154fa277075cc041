"""Port: Clock, the only source of "now" for the core.

Injected into the validator (future-date rule) and the mapper
(generated-at stamp) so both stay replayable under test.
"""

from abc import ABC, abstractmethod
from datetime import datetime


class ClockPort(ABC):
    """Contract for reading the current instant."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current local date and time."""
        ...
