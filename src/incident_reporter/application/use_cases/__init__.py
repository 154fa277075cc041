"""Use cases orchestrating validation, mapping and rendering."""

from incident_reporter.application.use_cases.generate_report import (
    GenerateReportUseCase,
    GenerateResult,
    generate_report_filename,
)
from incident_reporter.application.use_cases.validate_incident import ValidateIncidentUseCase

__all__ = [
    "GenerateReportUseCase",
    "GenerateResult",
    "ValidateIncidentUseCase",
    "generate_report_filename",
]
