"""Validation engine for incident records."""

from incident_reporter.validators.incident_validator import (
    IncidentValidator,
    is_potentially_riddor_reportable,
    required_fields,
)

__all__ = ["IncidentValidator", "is_potentially_riddor_reportable", "required_fields"]
