"""Domain errors: custom exceptions for the incident reporter.

Validation findings are never raised; these exceptions cover the few
paths that can genuinely fail (configuration, painting, output).
They are caught by the application layer and turned into result values.
"""


class IncidentReporterError(Exception):
    """Base exception for all incident reporter errors."""


class ReportGenerationError(IncidentReporterError):
    """Raised when laying out or painting a report fails."""


class OutputSinkError(IncidentReporterError):
    """Raised when a rendered artifact cannot be written to its sink."""


class ConfigurationError(IncidentReporterError):
    """Raised when layout configuration is invalid or missing."""
