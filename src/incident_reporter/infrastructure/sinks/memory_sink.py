"""In-memory sink: accumulates the artifact for responses and tests."""

from __future__ import annotations

import io

from incident_reporter.domain.errors import OutputSinkError
from incident_reporter.domain.ports.output_sink import OutputSink


class MemorySink(OutputSink):
    """Byte accumulator; the content stays readable after ``close``."""

    def __init__(self) -> None:
        self._buffer = io.BytesIO()
        self.closed = False

    def write(self, chunk: bytes) -> None:
        if self.closed:
            raise OutputSinkError("Cannot write to a closed sink")
        self._buffer.write(chunk)

    def close(self) -> None:
        self.closed = True

    def getvalue(self) -> bytes:
        return self._buffer.getvalue()
