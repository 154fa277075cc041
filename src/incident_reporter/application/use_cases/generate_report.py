"""Use Case: Generate Report, with pre-flight validation before rendering.

Orchestrates the export pipeline:

1. Run ``IncidentValidator.validate_for_export`` on the record.
2. If **blocking** errors exist → return the result, **abort** rendering.
3. Otherwise map the record to a ``DocumentModel`` and render it into the
   caller's sink.

Usage::

    use_case = GenerateReportUseCase(validator, mapper, renderer)
    sink = MemorySink()
    result = use_case.execute(record, ExportOptions.defaults(), sink)

    if result.blocked:
        show_errors(result.validation)
    elif result.success:
        send(sink.getvalue(), filename=result.filename)
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from incident_reporter.domain.models.export_options import ExportOptions
from incident_reporter.domain.models.incident import IncidentRecord
from incident_reporter.domain.models.validation import ValidationResult
from incident_reporter.domain.ports.document_renderer import DocumentRendererPort, RenderResult
from incident_reporter.domain.ports.output_sink import OutputSink
from incident_reporter.mappers.document_mapper import DocumentModelMapper
from incident_reporter.validators.incident_validator import IncidentValidator

logger = logging.getLogger(__name__)

VALIDATION_FAILED = "Incident data validation failed"
GENERATION_FAILED = "Report generation failed"


def generate_report_filename(
    record: IncidentRecord, options: ExportOptions, extension: str = ".pdf"
) -> str:
    """``Investigation_INC_2024_001_2024-03-01.pdf`` style download name."""
    kind = "Summary" if options.summary_only else "Investigation"
    reference = re.sub(r"[^A-Za-z0-9]", "_", record.reference_code or "UNREFERENCED")
    day = record.date_of_incident.isoformat() if record.date_of_incident else "undated"
    return f"{kind}_{reference}_{day}{extension}"


@dataclass
class GenerateResult:
    """Outcome of a generate attempt.

    Attributes:
        validation: The full validation result.
        blocked: ``True`` if rendering was aborted due to errors.
        render: The renderer's result (``None`` if blocked or crashed).
        filename: Suggested download name for the artifact.
        error: Failure message, ``None`` on success.
    """

    validation: ValidationResult
    blocked: bool = False
    render: RenderResult | None = None
    filename: str = ""
    error: str | None = None

    @property
    def success(self) -> bool:
        return not self.blocked and self.render is not None and self.render.success


class GenerateReportUseCase:
    """Validate → map → render orchestrator.

    Receives a ``DocumentRendererPort`` at construction time so the caller
    can choose the renderer and its layout.
    """

    def __init__(
        self,
        validator: IncidentValidator,
        mapper: DocumentModelMapper,
        renderer: DocumentRendererPort,
    ) -> None:
        self._validator = validator
        self._mapper = mapper
        self._renderer = renderer

    @property
    def content_type(self) -> str:
        return self._renderer.content_type

    def execute(
        self, record: IncidentRecord, options: ExportOptions, sink: OutputSink
    ) -> GenerateResult:
        """Validate and (conditionally) render into *sink*."""
        validation = ValidationResult()
        try:
            validation = self._validator.validate_for_export(record, options)
            if not validation.valid:
                logger.info(
                    "Export of %s blocked by %d validation error(s)",
                    record.reference_code,
                    len(validation.errors),
                )
                return GenerateResult(validation=validation, blocked=True, error=VALIDATION_FAILED)
            return self._render(record, options, sink, validation)
        except Exception:
            logger.exception("Report generation failed for %s", record.reference_code)
            return GenerateResult(validation=validation, error=GENERATION_FAILED)

    def force_export(
        self, record: IncidentRecord, options: ExportOptions, sink: OutputSink
    ) -> GenerateResult:
        """Bypass validation and render a draft unconditionally."""
        try:
            return self._render(record, options, sink, ValidationResult())
        except Exception:
            logger.exception("Draft generation failed for %s", record.reference_code)
            return GenerateResult(validation=ValidationResult(), error=GENERATION_FAILED)

    # -- Internal ------------------------------------------------------------

    def _render(
        self,
        record: IncidentRecord,
        options: ExportOptions,
        sink: OutputSink,
        validation: ValidationResult,
    ) -> GenerateResult:
        document = self._mapper.map(record, options)
        rendered = self._renderer.render(document, sink)
        return GenerateResult(
            validation=validation,
            render=rendered,
            filename=generate_report_filename(record, options, self._renderer.extension),
            error=rendered.error,
        )
