"""Validation and display constants for incident reports."""

from __future__ import annotations

import re

from incident_reporter.domain.models.enums import IncidentCategory, InjurySeverity

# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

MIN_DESCRIPTION_LENGTH: int = 20

# 24-hour clock, hour may be single digit ("9:05")
TIME_RE = re.compile(r"^([01]?[0-9]|2[0-3]):[0-5][0-9]$")

# AB12CDE (current) or A123BCD (prefix); matched after removing whitespace
UK_REGISTRATION_RE = re.compile(r"^[A-Z]{2}[0-9]{2}[A-Z]{3}$|^[A-Z][0-9]{1,3}[A-Z]{3}$", re.IGNORECASE)

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

# +44 or 0 followed by 10-13 digits; matched after removing whitespace
UK_PHONE_RE = re.compile(r"^(\+44|0)[0-9]{10,13}$")

SERIOUS_SEVERITIES = frozenset({InjurySeverity.SEVERE, InjurySeverity.FATAL})

# Expected absence (days) above which an injury is potentially reportable
RIDDOR_LOST_TIME_DAYS: int = 7

BASE_REQUIRED_FIELDS: tuple[str, ...] = (
    "category",
    "dateOfIncident",
    "timeOfIncident",
    "location",
    "reportedBy.name",
    "incidentDescription.whatHappened",
)

# ---------------------------------------------------------------------------
# Display
# ---------------------------------------------------------------------------

NOT_AVAILABLE = "N/A"

CATEGORY_LABELS: dict[str, str] = {
    IncidentCategory.PERSONAL_INJURY.value: "Personal Injury",
    IncidentCategory.PROPERTY_DAMAGE.value: "Property Damage",
    IncidentCategory.VEHICLE_INCIDENT.value: "Vehicle Incident",
    IncidentCategory.PUBLIC_LIABILITY.value: "Public Liability",
}

SUMMARY_TITLE = "Incident Summary Report"
INVESTIGATION_TITLE = "Full Incident Investigation Report"

CURRENCY_SYMBOL = "£"
DATE_FORMAT = "%d/%m/%Y"
TIMESTAMP_FORMAT = "%d/%m/%Y %H:%M"
