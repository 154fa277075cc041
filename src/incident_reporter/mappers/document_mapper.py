"""Document mapper: ``IncidentRecord`` → ``DocumentModel``.

Precondition (documented, not enforced): the caller validated the record
against the same export options first, or is deliberately producing a
draft. Either way the mapper never fails: missing optional data becomes
"N/A".

Section order is fixed:

1. Incident Information, Reported By (always)
2. Person Involved (if present)
3. The category section from the shared category registry (if present)
4. Incident Description (always), Witness Information (if any witnesses)
5. Export-profile sections: Root Cause Analysis, Corrective Actions,
   Attachments, Signatures: each gated by its flag *and* by data presence.
"""

from __future__ import annotations

import logging

from incident_reporter.domain.categories import get_profile
from incident_reporter.domain.models.document_model import (
    AttachmentEntry,
    AttachmentSection,
    DocumentModel,
    LabelValueRow,
    LabelValueSection,
    Section,
    SignatureEntry,
    SignatureSection,
    TableSection,
)
from incident_reporter.domain.models.enums import ReportKind
from incident_reporter.domain.models.export_options import ExportOptions
from incident_reporter.domain.models.incident import IncidentRecord, Signature
from incident_reporter.domain.ports.clock import ClockPort
from incident_reporter.domain.rules.constants import (
    INVESTIGATION_TITLE,
    NOT_AVAILABLE,
    SUMMARY_TITLE,
)
from incident_reporter.domain.rules.formatting import (
    category_label,
    humanize,
    is_blank,
    joined,
    or_na,
    uk_date,
    uk_timestamp,
    upper,
    yes_no,
)

logger = logging.getLogger(__name__)

CORRECTIVE_ACTION_HEADERS: tuple[str, ...] = ("Action", "Responsible Person", "Due Date", "Status")

WITHHELD_STATEMENT = "Not included in this export"


def _section(title: str, rows: list[tuple[str, str]]) -> LabelValueSection:
    return LabelValueSection(
        title=title,
        rows=tuple(LabelValueRow(label=label, value=value) for label, value in rows),
    )


def format_location(record: IncidentRecord) -> str:
    """Manual address wins over GPS; GPS is shown to six decimals."""
    location = record.location
    if location is None:
        return "Not specified"
    if not is_blank(location.manual_address):
        return location.manual_address
    if location.gps_coordinates is not None:
        gps = location.gps_coordinates
        return f"GPS: {gps.latitude:.6f}, {gps.longitude:.6f}"
    return "Not specified"


class DocumentModelMapper:
    """Build the renderer-agnostic document model for one export.

    The injected clock supplies the "generated at" stamp; everything else
    is a pure function of ``(record, options)``.
    """

    def __init__(self, clock: ClockPort) -> None:
        self._clock = clock

    def map(self, record: IncidentRecord, options: ExportOptions) -> DocumentModel:
        sections: list[Section] = [
            self._incident_information(record),
            self._reported_by(record),
        ]

        if record.person_involved is not None:
            sections.append(self._person_involved(record))

        profile = get_profile(record.category)
        if profile is not None:
            category_section = profile.build_section(record)
            if category_section is not None:
                sections.append(category_section)
        elif not is_blank(record.category):
            logger.warning("No category section for unknown category %r", record.category)

        sections.append(self._incident_description(record))

        if record.witnesses:
            sections.append(self._witnesses(record, options))

        sections.extend(self._export_sections(record, options))

        kind = ReportKind.SUMMARY if options.summary_only else ReportKind.INVESTIGATION
        return DocumentModel(
            report_title=SUMMARY_TITLE if options.summary_only else INVESTIGATION_TITLE,
            report_kind=kind,
            reference_code=or_na(record.reference_code),
            category_label=category_label(record.category),
            generated_at=uk_timestamp(self._clock.now()),
            sections=tuple(sections),
        )

    # -- Always-present sections ---------------------------------------------

    def _incident_information(self, record: IncidentRecord) -> LabelValueSection:
        location = record.location
        return _section(
            "Incident Information",
            [
                ("Incident Reference", or_na(record.reference_code)),
                ("Category", category_label(record.category)),
                ("Date of Incident", uk_date(record.date_of_incident)),
                ("Time of Incident", or_na(record.time_of_incident)),
                ("Location", format_location(record)),
                ("Site Name", or_na(location.site_name if location else None)),
                ("Department", or_na(location.department if location else None)),
                ("Area", or_na(location.area if location else None)),
                ("Postcode", or_na(location.postcode if location else None)),
            ],
        )

    def _reported_by(self, record: IncidentRecord) -> LabelValueSection:
        reporter = record.reported_by
        return _section(
            "Reported By",
            [
                ("Name", or_na(reporter.name if reporter else None)),
                ("Job Title", or_na(reporter.job_title if reporter else None)),
                ("Contact Number", or_na(reporter.contact_number if reporter else None)),
                ("Email", or_na(reporter.email if reporter else None)),
                ("Employer", or_na(reporter.employer if reporter else None)),
            ],
        )

    def _incident_description(self, record: IncidentRecord) -> LabelValueSection:
        desc = record.incident_description
        if desc is None:
            return _section("Incident Description", [("What Happened", NOT_AVAILABLE)])
        return _section(
            "Incident Description",
            [
                ("What Happened", or_na(desc.what_happened)),
                ("Sequence of Events", or_na(desc.sequence_of_events)),
                ("Activity at Time", or_na(desc.activity_at_time)),
                ("Immediate Cause", or_na(desc.immediate_cause)),
                ("Unsafe Conditions", or_na(desc.unsafe_conditions)),
                ("Unsafe Acts", or_na(desc.unsafe_acts)),
                ("Environmental Factors", or_na(desc.environmental_factors)),
                ("Equipment Factors", or_na(desc.equipment_factors)),
                ("Supervision Present", humanize(desc.supervision_present)),
                ("Area Previously Inspected", humanize(desc.area_previously_inspected)),
            ],
        )

    # -- Conditional sections ------------------------------------------------

    def _person_involved(self, record: IncidentRecord) -> LabelValueSection:
        person = record.person_involved
        training = person.relevant_training
        return _section(
            "Person Involved",
            [
                ("Full Name", or_na(person.full_name)),
                ("Age", or_na(person.age)),
                ("Role/Relationship", humanize(person.role_or_relationship)),
                ("Employer", or_na(person.employer)),
                ("Contact Details", or_na(person.contact_details)),
                ("Relevant Training", yes_no(training.has_training if training else None)),
            ],
        )

    def _witnesses(self, record: IncidentRecord, options: ExportOptions) -> LabelValueSection:
        rows: list[tuple[str, str]] = []
        for number, witness in enumerate(record.witnesses, start=1):
            if options.include_witness_statements:
                statement = or_na(witness.statement, "No statement provided")
            else:
                statement = WITHHELD_STATEMENT
            rows.extend(
                [
                    (f"Witness {number} Name", or_na(witness.name)),
                    (f"Witness {number} Contact", or_na(witness.contact_details)),
                    (f"Witness {number} Statement", statement),
                ]
            )
        return _section("Witness Information", rows)

    # -- Export-profile sections ---------------------------------------------

    def _export_sections(self, record: IncidentRecord, options: ExportOptions) -> list[Section]:
        sections: list[Section] = []
        full_report = not options.summary_only

        if full_report and options.include_root_cause and record.root_cause_analysis:
            sections.append(self._root_cause(record))

        if full_report and options.include_corrective_actions and record.corrective_actions:
            sections.append(self._corrective_actions(record))

        if options.include_attachments and record.attachments:
            sections.append(
                AttachmentSection(
                    title="Attachments",
                    attachments=tuple(
                        AttachmentEntry(uri=a.uri, caption=a.caption) for a in record.attachments
                    ),
                )
            )

        if options.include_signatures and record.signatures is not None:
            signatures = self._signatures(record)
            if signatures.signatures:
                sections.append(signatures)

        return sections

    def _root_cause(self, record: IncidentRecord) -> LabelValueSection:
        rca = record.root_cause_analysis
        return _section(
            "Root Cause Analysis",
            [
                ("Direct Cause", or_na(rca.direct_cause)),
                ("Indirect Cause", or_na(rca.indirect_cause)),
                ("Underlying Root Cause", or_na(rca.underlying_root_cause)),
                ("Contributing Factors", joined(rca.contributing_factors)),
                ("Preventative Measures", or_na(rca.preventative_measures)),
                ("Were Controls Adequate", humanize(rca.were_controls_adequate)),
                ("Controls Explanation", or_na(rca.controls_explanation)),
            ],
        )

    def _corrective_actions(self, record: IncidentRecord) -> TableSection:
        rows = tuple(
            (
                or_na(action.description),
                or_na(action.responsible_person, "Unassigned"),
                uk_date(action.due_date),
                upper(action.status),
            )
            for action in record.corrective_actions
        )
        return TableSection(title="Corrective Actions", headers=CORRECTIVE_ACTION_HEADERS, rows=rows)

    def _signatures(self, record: IncidentRecord) -> SignatureSection:
        slots: list[tuple[Signature | None, str]] = [
            (record.signatures.reporter, "Reporter"),
            (record.signatures.investigator, "Investigator"),
            (record.signatures.witness, "Witness"),
            (record.signatures.manager, "Manager"),
        ]
        entries = tuple(
            SignatureEntry(
                name=signature.name,
                role=signature.role or default_role,
                signed_at=uk_date(signature.signed_at),
                image_ref=signature.signature_image_uri,
            )
            for signature, default_role in slots
            if signature is not None
        )
        return SignatureSection(title="Signatures", signatures=entries)
