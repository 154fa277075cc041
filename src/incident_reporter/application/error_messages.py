"""User-friendly messages for Pydantic validation errors.

Belongs to the Application layer. A payload that cannot even be parsed
into an ``IncidentRecord`` is reported the same way as a failed rule:
as findings with a reproducible field path, in the "Payload" section.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pydantic import ValidationError

from incident_reporter.domain.models.validation import FindingCollector, ValidationResult

PAYLOAD_SECTION = "Payload"

# Maps pydantic error type → message template
_ERROR_MAP: dict[str, str] = {
    "missing": "{field} is required",
    "model_type": "{field} must be an object",
    "model_attributes_type": "{field} must be an object",
    "dict_type": "{field} must be an object",
    "list_type": "{field} must be a list",
    "string_type": "{field} must be text",
    "bool_parsing": "{field} must be true or false",
    "bool_type": "{field} must be true or false",
    "int_parsing": "{field} must be a whole number",
    "int_from_float": "{field} must be a whole number",
    "float_parsing": "{field} must be a number",
    "date_parsing": "{field} must be a date (YYYY-MM-DD)",
    "date_from_datetime_parsing": "{field} must be a date (YYYY-MM-DD)",
    "date_from_datetime_inexact": "{field} must be a date without a time",
    "datetime_parsing": "{field} must be a date and time (ISO 8601)",
    "datetime_from_date_parsing": "{field} must be a date and time (ISO 8601)",
    "enum": "{field} has an unsupported value",
}


def field_path(loc: Sequence[Any]) -> str:
    """``("witnesses", 0, "name")`` → ``"witnesses[0].name"``."""
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}" if path else str(part)
    return path or "record"


def friendly_error(field: str, error_type: str, fallback: str | None = None) -> str:
    """Return a user-friendly error message.

    Args:
        field: Dotted/bracketed path of the failing value.
        error_type: The Pydantic error type string (e.g., ``missing``).
        fallback: Message to use when no mapping exists.
    """
    template = _ERROR_MAP.get(error_type)
    if template:
        return template.format(field=field)
    return fallback or f"Invalid value for '{field}'"


def payload_findings(exc: ValidationError) -> ValidationResult:
    """Translate a parsing failure into a (never valid) ``ValidationResult``."""
    findings = FindingCollector()
    for err in exc.errors():
        path = field_path(err.get("loc", ()))
        findings.error(path, friendly_error(path, err.get("type", ""), err.get("msg")), PAYLOAD_SECTION)
    if not findings.errors:
        findings.error("record", "Payload could not be read as an incident record", PAYLOAD_SECTION)
    return findings.result()
