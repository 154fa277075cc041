"""Transport-agnostic request handlers.

Each handler takes an already-decoded JSON payload and returns a plain
response value, so any HTTP framework (or the CLI) can adapt it:

* ``handle_validate(record_payload)`` → ``{valid, errors, warnings}``
* ``handle_generate({"incident": ..., "options": ...})`` →
  ``GenerateResponse`` carrying the PDF bytes or a JSON error body.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from incident_reporter.application.error_messages import payload_findings
from incident_reporter.application.use_cases.generate_report import (
    VALIDATION_FAILED,
    GenerateReportUseCase,
)
from incident_reporter.application.use_cases.validate_incident import ValidateIncidentUseCase
from incident_reporter.domain.models.export_options import ExportOptions
from incident_reporter.domain.models.incident import IncidentRecord

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"


@dataclass
class GenerateResponse:
    """Framework-neutral HTTP-style response."""

    status: int
    body: bytes | dict[str, Any]
    content_type: str = JSON_CONTENT_TYPE
    filename: str | None = None

    @property
    def headers(self) -> dict[str, str]:
        headers = {"Content-Type": self.content_type}
        if self.filename:
            headers["Content-Disposition"] = f'attachment; filename="{self.filename}"'
        return headers


def _error(status: int, body: dict[str, Any]) -> GenerateResponse:
    return GenerateResponse(status=status, body=body)


def handle_validate(
    payload: Any, use_case: ValidateIncidentUseCase | None = None
) -> dict[str, Any]:
    """Validate a raw record payload for submission."""
    try:
        if use_case is None:
            from incident_reporter.bootstrap import Container

            use_case = Container().validate_incident()
        return use_case.execute_payload(payload).to_dict()
    except Exception:
        logger.exception("Validation request failed")
        return {"error": "Internal server error"}


def handle_generate(
    payload: Any, use_case: GenerateReportUseCase | None = None
) -> GenerateResponse:
    """Validate, render and return the report for ``{incident, options}``."""
    try:
        incident = payload.get("incident") if isinstance(payload, Mapping) else None
        if not incident:
            return _error(400, {"error": "Incident data is required"})

        try:
            record = IncidentRecord.model_validate(incident)
            raw_options = payload.get("options")
            options = (
                ExportOptions.model_validate(raw_options)
                if raw_options is not None
                else ExportOptions.defaults()
            )
        except ValidationError as exc:
            return _error(
                400, {"error": VALIDATION_FAILED, "validation": payload_findings(exc).to_dict()}
            )

        if use_case is None:
            from incident_reporter.bootstrap import Container

            use_case = Container().generate_report()

        from incident_reporter.infrastructure.sinks.memory_sink import MemorySink

        sink = MemorySink()
        result = use_case.execute(record, options, sink)

        if result.blocked:
            return _error(
                400, {"error": VALIDATION_FAILED, "validation": result.validation.to_dict()}
            )
        if not result.success:
            return _error(500, {"error": "Failed to generate PDF"})

        return GenerateResponse(
            status=200,
            body=sink.getvalue(),
            content_type=use_case.content_type,
            filename=result.filename,
        )
    except Exception:
        logger.exception("PDF generation request failed")
        return _error(500, {"error": "Internal server error"})
