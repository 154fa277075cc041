"""Use Case: Validate Incident.

Runs the validator against a record, either for submission (base,
category and advisory rules) or for a specific export profile.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from incident_reporter.application.error_messages import payload_findings
from incident_reporter.domain.models.export_options import ExportOptions
from incident_reporter.domain.models.incident import IncidentRecord
from incident_reporter.domain.models.validation import ValidationFinding, ValidationResult
from incident_reporter.validators.incident_validator import IncidentValidator


class ValidateIncidentUseCase:
    """Orchestrate record validation through an injected validator."""

    def __init__(self, validator: IncidentValidator) -> None:
        self._validator = validator

    def execute(
        self, record: IncidentRecord, options: ExportOptions | None = None
    ) -> ValidationResult:
        """Validate for submission, or for *options* when given."""
        if options is None:
            return self._validator.validate(record)
        return self._validator.validate_for_export(record, options)

    def execute_payload(
        self, payload: Mapping[str, Any], options: ExportOptions | None = None
    ) -> ValidationResult:
        """Parse a raw payload first; parsing failures become findings."""
        try:
            record = IncidentRecord.model_validate(payload)
        except ValidationError as exc:
            return payload_findings(exc)
        return self.execute(record, options)

    def validate_field(self, field_path: str, record: IncidentRecord) -> ValidationFinding | None:
        return self._validator.validate_field(field_path, record)

    def is_complete(self, record: IncidentRecord) -> bool:
        return self._validator.is_complete(record)
