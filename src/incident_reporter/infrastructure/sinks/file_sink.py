"""File sink: streams the artifact to a path on disk."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO

from incident_reporter.domain.ports.output_sink import OutputSink

logger = logging.getLogger(__name__)


class FileSink(OutputSink):
    """Write to *path*, adding *suffix* when the path has none.

    The file and any missing parent directories are created on the first
    write, so a render that fails before producing bytes leaves nothing
    behind.
    """

    def __init__(self, path: Path | str, suffix: str = ".pdf") -> None:
        path = Path(path)
        if not path.suffix:
            path = path.with_suffix(suffix)
        self.path = path
        self._handle: BinaryIO | None = None

    def write(self, chunk: bytes) -> None:
        if self._handle is None:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._handle = self.path.open("wb")
            logger.debug("Opened %s for writing", self.path)
        self._handle.write(chunk)

    def close(self) -> None:
        if self._handle is not None:
            self._handle.close()
            self._handle = None
