"""Public liability: rules and report section."""

from __future__ import annotations

from incident_reporter.domain.models.document_model import LabelValueRow, LabelValueSection
from incident_reporter.domain.models.incident import IncidentRecord
from incident_reporter.domain.models.validation import FindingCollector
from incident_reporter.domain.rules.formatting import is_blank, or_na, yes_no

REQUIRED_FIELDS: tuple[str, ...] = (
    "personInvolved.fullName",
    "publicLiabilityDetails.reasonForBeingOnSite",
)


def check(record: IncidentRecord, findings: FindingCollector) -> None:
    person = record.person_involved
    liability = record.public_liability_details

    if person is None or is_blank(person.full_name):
        findings.error(
            "personInvolved.fullName", "Name of public member is required", "Person Involved"
        )

    if liability is None or is_blank(liability.reason_for_being_on_site):
        findings.error(
            "publicLiabilityDetails.reasonForBeingOnSite",
            "Reason for being on site is required",
            "Public Liability Details",
        )

    # A reported injury brings the injury severity rule with it
    injury = record.injury_details
    if injury is not None and not is_blank(injury.nature_of_injury) and injury.severity is None:
        findings.error(
            "injuryDetails.severity",
            "Injury severity is required when injury is reported",
            "Injury Details",
        )


def build_section(record: IncidentRecord) -> LabelValueSection | None:
    liability = record.public_liability_details
    if liability is None:
        return None

    rows = [
        ("Reason for Being On Site", or_na(liability.reason_for_being_on_site)),
        ("Authorized Visitor", yes_no(liability.authorized_visitor)),
        ("Signed In", yes_no(liability.signed_in)),
        ("Sign-in Time", or_na(liability.sign_in_time)),
        ("Pre-existing Conditions", or_na(liability.pre_existing_conditions, "None reported")),
        ("Refused Treatment", yes_no(liability.refused_treatment)),
        ("Legal Representative", or_na(liability.legal_representative)),
    ]
    return LabelValueSection(
        title="Public Liability Details",
        rows=tuple(LabelValueRow(label=label, value=value) for label, value in rows),
    )
