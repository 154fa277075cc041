"""Property damage: rules and report section."""

from __future__ import annotations

from incident_reporter.domain.models.document_model import LabelValueRow, LabelValueSection
from incident_reporter.domain.models.incident import IncidentRecord
from incident_reporter.domain.models.validation import FindingCollector
from incident_reporter.domain.rules.formatting import humanize, is_blank, money, or_na, yes_no

REQUIRED_FIELDS: tuple[str, ...] = (
    "propertyDamageDetails.assetDescription",
    "propertyDamageDetails.extentOfDamage",
    "propertyDamageDetails.assetType",
    "propertyDamageDetails.urgentRepairRequired",
)

_SECTION = "Property Damage Details"


def check(record: IncidentRecord, findings: FindingCollector) -> None:
    damage = record.property_damage_details

    if damage is None or is_blank(damage.asset_description):
        findings.error(
            "propertyDamageDetails.assetDescription",
            "Description of damaged property is required",
            _SECTION,
        )

    if damage is None or is_blank(damage.extent_of_damage):
        findings.error(
            "propertyDamageDetails.extentOfDamage", "Extent of damage is required", _SECTION
        )

    if damage is None or is_blank(damage.asset_type):
        findings.error("propertyDamageDetails.assetType", "Asset type is required", _SECTION)

    # Unset, not False, is the defect
    if damage is None or damage.urgent_repair_required is None:
        findings.error(
            "propertyDamageDetails.urgentRepairRequired",
            "Please indicate if urgent repair is required",
            _SECTION,
        )


def build_section(record: IncidentRecord) -> LabelValueSection | None:
    damage = record.property_damage_details
    if damage is None:
        return None

    rows = [
        ("Asset Type", or_na(damage.asset_type)),
        ("Description", or_na(damage.asset_description)),
        ("Asset ID/Serial", or_na(damage.asset_id_or_serial)),
        ("Extent of Damage", or_na(damage.extent_of_damage)),
        ("Estimated Cost", money(damage.estimated_cost)),
        ("Urgent Repair Required", yes_no(damage.urgent_repair_required)),
        ("Condition Before Incident", humanize(damage.condition_before_incident)),
        ("Owner of Property", or_na(damage.owner_of_property)),
        ("Insurance Claim", yes_no(damage.insurance_claim)),
        ("Insurance Reference", or_na(damage.insurance_reference_number)),
    ]
    return LabelValueSection(
        title=_SECTION,
        rows=tuple(LabelValueRow(label=label, value=value) for label, value in rows),
    )
