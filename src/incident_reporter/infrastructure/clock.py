"""Clock adapters: implement ClockPort."""

from __future__ import annotations

from datetime import datetime, timezone

from incident_reporter.domain.ports.clock import ClockPort


class SystemClock(ClockPort):
    """Wall clock: UTC now, converted to the host's local time zone."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc).astimezone()


class FixedClock(ClockPort):
    """Always returns the same instant; makes mapping replayable."""

    def __init__(self, instant: datetime) -> None:
        self._instant = instant

    def now(self) -> datetime:
        return self._instant
