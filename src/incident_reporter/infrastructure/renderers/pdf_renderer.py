"""PDF renderer: implements DocumentRendererPort using fpdf2.

Thin wrapper around PdfAdapter: a fresh adapter per call does the layout
and painting, this class streams the bytes into the caller's sink.
"""

from __future__ import annotations

import logging

from incident_reporter.config.loader import get_config
from incident_reporter.config.models import ReportLayout
from incident_reporter.domain.errors import OutputSinkError, ReportGenerationError
from incident_reporter.domain.models.document_model import DocumentModel
from incident_reporter.domain.ports.document_renderer import DocumentRendererPort, RenderResult
from incident_reporter.domain.ports.output_sink import OutputSink

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


class PageFlowRenderer(DocumentRendererPort):
    """Render incident documents as paginated A4 PDFs."""

    content_type = "application/pdf"
    extension = ".pdf"

    def __init__(self, layout: ReportLayout | None = None) -> None:
        self._layout = layout or get_config()

    @property
    def layout(self) -> ReportLayout:
        return self._layout

    def render(self, document: DocumentModel, sink: OutputSink) -> RenderResult:
        """Lay out *document* and write it to *sink*.

        Paint and sink failures come back as ``RenderResult(success=False)``.
        """
        from incident_reporter.adapters.pdf_adapter import PdfAdapter

        adapter = PdfAdapter(document, self._layout)
        try:
            artifact = adapter.generate()
        except ReportGenerationError as exc:
            logger.warning("%s", exc)
            sink.close()
            return RenderResult(success=False, error=str(exc))
        page_count = adapter.page_count

        written = 0
        try:
            with sink:
                for start in range(0, len(artifact), CHUNK_SIZE):
                    chunk = artifact[start : start + CHUNK_SIZE]
                    sink.write(chunk)
                    written += len(chunk)
        except (OSError, OutputSinkError) as exc:
            logger.warning(
                "Could not write report %s after %d bytes: %s",
                document.reference_code,
                written,
                exc,
            )
            return RenderResult(
                success=False,
                page_count=page_count,
                bytes_written=written,
                error=f"Failed to write report: {exc}",
            )

        logger.info(
            "Rendered %s: %d page(s), %d bytes", document.reference_code, page_count, written
        )
        return RenderResult(success=True, page_count=page_count, bytes_written=written)
