"""Incident validator: the pre-export completeness gate.

Validates an ``IncidentRecord`` against an export profile, producing
blocking errors (the record is unfit for that export) and advisory
warnings (recommended improvements). The validator never raises:
absent data is always reported as a structured finding.

Rule groups, in the order they run:

* **Base rules**: apply to every category (date, time, location,
  narrative, reporter).
* **Category rules**: looked up in the shared category registry; an
  unknown category contributes nothing.
* **Investigation rules**: only for full (non-summary) exports.
* **Flag rules**: driven by ``include_signatures`` / ``include_photos``.
* **Warnings**: contact-detail shape, witness statements, evidence and
  the RIDDOR compliance reminder.

Given the same record, options and clock the result is identical,
ordering included.
"""

from __future__ import annotations

from incident_reporter.domain.categories import get_profile
from incident_reporter.domain.models.enums import AttachmentType
from incident_reporter.domain.models.export_options import ExportOptions
from incident_reporter.domain.models.incident import IncidentRecord
from incident_reporter.domain.models.validation import (
    FindingCollector,
    ValidationFinding,
    ValidationResult,
)
from incident_reporter.domain.ports.clock import ClockPort
from incident_reporter.domain.rules.constants import (
    BASE_REQUIRED_FIELDS,
    EMAIL_RE,
    MIN_DESCRIPTION_LENGTH,
    RIDDOR_LOST_TIME_DAYS,
    SERIOUS_SEVERITIES,
    TIME_RE,
    UK_PHONE_RE,
)
from incident_reporter.domain.rules.formatting import is_blank


def is_valid_email(email: str) -> bool:
    return EMAIL_RE.match(email) is not None


def is_valid_uk_phone(phone: str) -> bool:
    return UK_PHONE_RE.match("".join(phone.split())) is not None


def required_fields(category: str | None) -> list[str]:
    """Base required paths plus those owned by *category*."""
    fields = list(BASE_REQUIRED_FIELDS)
    profile = get_profile(category)
    if profile is not None:
        fields.extend(profile.required_fields)
    return fields


def is_potentially_riddor_reportable(record: IncidentRecord) -> bool:
    """Heuristic hint only; reportability is decided by a competent person."""
    injury = record.injury_details
    if injury is None:
        return False
    if injury.severity in SERIOUS_SEVERITIES:
        return True
    if injury.expected_lost_time_days and injury.expected_lost_time_days > RIDDOR_LOST_TIME_DAYS:
        return True
    return bool(injury.hospital_visit and injury.hospital_visit.admission_required)


class IncidentValidator:
    """Stateless rule engine for incident records.

    The clock is only consulted for the "not in the future" date rule.
    """

    def __init__(self, clock: ClockPort) -> None:
        self._clock = clock

    # -- Public API ----------------------------------------------------------

    def validate(self, record: IncidentRecord) -> ValidationResult:
        """Base, category and advisory rules: fit for submission."""
        return self._collect(record).result()

    def validate_for_export(
        self, record: IncidentRecord, options: ExportOptions
    ) -> ValidationResult:
        """Everything ``validate`` checks plus the export-profile rules."""
        findings = self._collect(record)

        if not options.summary_only:
            self._check_investigation(record, findings)

        self._check_export_flags(record, options, findings)
        return findings.result()

    def validate_field(self, field_path: str, record: IncidentRecord) -> ValidationFinding | None:
        """Return the first blocking error on *field_path*, if any."""
        errors = self.validate(record).errors_for(field_path)
        return errors[0] if errors else None

    def is_complete(self, record: IncidentRecord) -> bool:
        return self.validate(record).valid

    # -- Rule groups ---------------------------------------------------------

    def _collect(self, record: IncidentRecord) -> FindingCollector:
        findings = FindingCollector()
        self._check_basic_info(record, findings)

        profile = get_profile(record.category)
        if profile is not None:
            profile.check(record, findings)

        self._check_advisories(record, findings)
        return findings

    def _check_basic_info(self, record: IncidentRecord, findings: FindingCollector) -> None:
        basic = "Basic Information"

        if is_blank(record.category):
            findings.error("category", "Incident category is required", basic)

        if record.date_of_incident is None:
            findings.error("dateOfIncident", "Date of incident is required", basic)
        elif record.date_of_incident > self._clock.now().date():
            findings.error("dateOfIncident", "Incident date cannot be in the future", basic)

        if is_blank(record.time_of_incident):
            findings.error("timeOfIncident", "Time of incident is required", basic)
        elif TIME_RE.match(record.time_of_incident) is None:
            findings.error("timeOfIncident", "Time must be in HH:mm format (24-hour)", basic)

        location = record.location
        if location is None or (
            location.gps_coordinates is None and is_blank(location.manual_address)
        ):
            findings.error("location", "Location is required (GPS or manual address)", basic)

        description = record.incident_description
        what_happened = description.what_happened if description else None
        if is_blank(what_happened):
            findings.error(
                "incidentDescription.whatHappened",
                "Incident description is required",
                "Incident Description",
            )
        elif len(what_happened) < MIN_DESCRIPTION_LENGTH:
            findings.error(
                "incidentDescription.whatHappened",
                f"Incident description must be at least {MIN_DESCRIPTION_LENGTH} characters",
                "Incident Description",
            )

        if record.reported_by is None or is_blank(record.reported_by.name):
            findings.error("reportedBy.name", "Reporter name is required", basic)

    def _check_investigation(self, record: IncidentRecord, findings: FindingCollector) -> None:
        rca = record.root_cause_analysis
        section = "Root Cause Analysis"

        if rca is None or is_blank(rca.direct_cause):
            findings.error(
                "rootCauseAnalysis.directCause",
                "Direct cause is required for investigation report",
                section,
            )

        if rca is None or is_blank(rca.underlying_root_cause):
            findings.error(
                "rootCauseAnalysis.underlyingRootCause",
                "Underlying root cause is required for investigation report",
                section,
            )

        if rca is None or rca.were_controls_adequate is None:
            findings.error(
                "rootCauseAnalysis.wereControlsAdequate",
                "Assessment of existing controls is required",
                section,
            )

        actions = record.corrective_actions
        if not actions:
            findings.error(
                "correctiveActions",
                "At least one corrective action is required for investigation report",
                "Corrective Actions",
            )
            return

        for index, action in enumerate(actions):
            if is_blank(action.description):
                findings.error(
                    f"correctiveActions[{index}].description",
                    f"Corrective action {index + 1}: Description is required",
                    "Corrective Actions",
                )
            if is_blank(action.responsible_person):
                findings.error(
                    f"correctiveActions[{index}].responsiblePerson",
                    f"Corrective action {index + 1}: Responsible person is required",
                    "Corrective Actions",
                )

    def _check_export_flags(
        self,
        record: IncidentRecord,
        options: ExportOptions,
        findings: FindingCollector,
    ) -> None:
        if options.include_signatures:
            signatures = record.signatures
            if signatures is None or signatures.reporter is None:
                findings.error(
                    "signatures.reporter",
                    "Reporter signature is required for PDF export",
                    "Signatures",
                )
            if not options.summary_only and (
                signatures is None or signatures.investigator is None
            ):
                findings.error(
                    "signatures.investigator",
                    "Investigator signature is required for full investigation PDF",
                    "Signatures",
                )

        if options.include_photos and not any(
            a.type == AttachmentType.PHOTO for a in record.attachments
        ):
            findings.error("attachments", "No photos available to include in PDF", "Attachments")

    def _check_advisories(self, record: IncidentRecord, findings: FindingCollector) -> None:
        reporter = record.reported_by
        if reporter is not None:
            if reporter.email and not is_valid_email(reporter.email):
                findings.warn(
                    "reportedBy.email", "Email format appears invalid", "Basic Information"
                )
            if reporter.contact_number and not is_valid_uk_phone(reporter.contact_number):
                findings.warn(
                    "reportedBy.contactNumber",
                    "Phone number format appears invalid",
                    "Basic Information",
                )

        for index, witness in enumerate(record.witnesses):
            if is_blank(witness.statement):
                findings.warn(
                    f"witnesses[{index}].statement",
                    f"Witness {index + 1}: Statement is recommended",
                    "Witnesses",
                )

        if not record.attachments:
            findings.warn(
                "attachments", "Consider adding photos or other evidence", "Attachments"
            )

        injury = record.injury_details
        if (
            injury is not None
            and injury.severity in SERIOUS_SEVERITIES
            and record.riddor_assessment is None
        ):
            findings.warn(
                "riddorAssessment",
                "Serious injury may be RIDDOR reportable - ensure HSE notification is considered",
                "Legal Compliance",
            )
