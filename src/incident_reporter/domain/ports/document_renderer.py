"""Port: Document renderer, lays a document model out into an artifact.

This is a domain-level contract. The PDF page-flow renderer implements it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from incident_reporter.domain.models.document_model import DocumentModel
from incident_reporter.domain.ports.output_sink import OutputSink


@dataclass(frozen=True)
class RenderResult:
    """Tagged outcome of one render.

    Attributes:
        success: ``False`` when the artifact could not be written.
        page_count: Number of pages laid out.
        bytes_written: Size of the artifact delivered to the sink.
        error: Human-readable failure message (``None`` on success).
    """

    success: bool
    page_count: int = 0
    bytes_written: int = 0
    error: str | None = None


class DocumentRendererPort(ABC):
    """Contract for rendering a document model into a sink."""

    content_type: str = "application/octet-stream"
    extension: str = ""

    @abstractmethod
    def render(self, document: DocumentModel, sink: OutputSink) -> RenderResult:
        """Render *document* into *sink*; never raises for sink failures."""
        ...
