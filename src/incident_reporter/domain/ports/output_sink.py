"""Port: Output sink, where rendered report bytes go.

A sink is owned by the caller of ``render`` for the duration of one
call and is never shared between concurrent renders.
"""

from abc import ABC, abstractmethod


class OutputSink(ABC):
    """Contract for receiving an artifact incrementally."""

    @abstractmethod
    def write(self, chunk: bytes) -> None:
        """Append *chunk* to the artifact. May raise ``OSError``."""
        ...

    @abstractmethod
    def close(self) -> None:
        """Flush and release the underlying resource."""
        ...

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
