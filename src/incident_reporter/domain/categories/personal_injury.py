"""Personal injury: rules and report section."""

from __future__ import annotations

from incident_reporter.domain.models.document_model import LabelValueRow, LabelValueSection
from incident_reporter.domain.models.incident import IncidentRecord
from incident_reporter.domain.models.validation import FindingCollector
from incident_reporter.domain.rules.formatting import (
    is_blank,
    joined,
    or_na,
    upper,
    with_unit,
    yes_no,
)

REQUIRED_FIELDS: tuple[str, ...] = (
    "personInvolved.fullName",
    "injuryDetails.natureOfInjury",
    "injuryDetails.severity",
    "injuryDetails.bodyPartsAffected",
    "injuryDetails.ppeUsed",
)


def check(record: IncidentRecord, findings: FindingCollector) -> None:
    person = record.person_involved
    injury = record.injury_details

    if person is None or is_blank(person.full_name):
        findings.error(
            "personInvolved.fullName", "Injured person's name is required", "Person Involved"
        )

    if injury is None or is_blank(injury.nature_of_injury):
        findings.error(
            "injuryDetails.natureOfInjury", "Nature of injury is required", "Injury Details"
        )

    if injury is None or injury.severity is None:
        findings.error("injuryDetails.severity", "Injury severity is required", "Injury Details")

    if injury is None or not injury.body_parts_affected:
        findings.error(
            "injuryDetails.bodyPartsAffected",
            "At least one affected body part must be selected",
            "Injury Details",
        )

    # Presence of the PPE block is what matters, not whether PPE was worn
    if injury is None or injury.ppe_used is None:
        findings.error(
            "injuryDetails.ppeUsed", "PPE usage information is required", "Injury Details"
        )


def build_section(record: IncidentRecord) -> LabelValueSection | None:
    injury = record.injury_details
    if injury is None:
        return None

    first_aid = injury.first_aid_given
    hospital = injury.hospital_visit
    ppe = injury.ppe_used
    rows = [
        ("Nature of Injury", or_na(injury.nature_of_injury)),
        ("Body Parts Affected", joined(injury.body_parts_affected)),
        ("Other Body Part", or_na(injury.body_part_other)),
        ("Severity", upper(injury.severity)),
        ("First Aid Given", yes_no(first_aid.given if first_aid else None)),
        ("First Aid Details", or_na(first_aid.treatment if first_aid else None)),
        ("Hospital Visit", yes_no(hospital.went_to_hospital if hospital else None)),
        ("Hospital Name", or_na(hospital.hospital_name if hospital else None)),
        ("Expected Lost Time", with_unit(injury.expected_lost_time_days, "days")),
        ("PPE Used", yes_no(ppe.used if ppe else None)),
        ("PPE Types", joined(ppe.types if ppe else None)),
        ("PPE Functioning Properly", yes_no(ppe.functioning_properly if ppe else None)),
    ]
    return LabelValueSection(
        title="Injury Details",
        rows=tuple(LabelValueRow(label=label, value=value) for label, value in rows),
    )
