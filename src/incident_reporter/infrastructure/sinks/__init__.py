"""Output sinks: destinations for rendered report bytes."""

from incident_reporter.infrastructure.sinks.file_sink import FileSink
from incident_reporter.infrastructure.sinks.memory_sink import MemorySink

__all__ = ["FileSink", "MemorySink"]
