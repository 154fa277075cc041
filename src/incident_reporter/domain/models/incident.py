"""Incident record models.

Contains the category sub-records, the investigation blocks and
``IncidentRecord``: the aggregate root received from the (external) UI
and storage layer.

The models are deliberately lenient: every field is optional so that a
half-filled draft can still be parsed and then *reported on* by the
validator. Field names are snake_case in Python and camelCase on the
wire; both spellings are accepted when parsing.

This module belongs to the Domain layer. It only depends on:
- Python stdlib (datetime, typing)
- Pydantic (pragmatic exception for parsing)
- Domain enums
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional, get_origin

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel

from incident_reporter.domain.models.enums import (
    ActionPriority,
    ActionStatus,
    AssetCondition,
    AttachmentType,
    InjurySeverity,
    ReportStatus,
    YesNoUnknown,
)


class RecordModel(BaseModel):
    """Base for every record model: camelCase aliases, unknown keys ignored."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    @field_validator("*", mode="before")
    @classmethod
    def _null_list_is_empty(cls, v: Any, info: ValidationInfo) -> Any:
        """Clients send ``null`` for an array they have nothing to put in."""
        if v is None and get_origin(cls.model_fields[info.field_name].annotation) is list:
            return []
        return v


# ---------------------------------------------------------------------------
# Location & people
# ---------------------------------------------------------------------------


class GpsCoordinates(RecordModel):
    latitude: float
    longitude: float
    accuracy: Optional[float] = None
    timestamp: Optional[str] = None


class IncidentLocation(RecordModel):
    """Where the incident happened: GPS fix and/or a typed address."""

    gps_coordinates: Optional[GpsCoordinates] = None
    manual_address: Optional[str] = None
    site_name: Optional[str] = None
    department: Optional[str] = None
    area: Optional[str] = None
    postcode: Optional[str] = None


class ReportingPerson(RecordModel):
    name: Optional[str] = None
    job_title: Optional[str] = None
    contact_number: Optional[str] = None
    email: Optional[str] = None
    employer: Optional[str] = None
    department: Optional[str] = None


class PersonPresent(RecordModel):
    name: Optional[str] = None
    role: Optional[str] = None
    contact_details: Optional[str] = None


class Witness(RecordModel):
    name: Optional[str] = None
    contact_details: Optional[str] = None
    statement: Optional[str] = None
    statement_date: Optional[date] = None


class TrainingDetails(RecordModel):
    has_training: bool = False
    training_type: Optional[str] = None
    date_completed: Optional[date] = None
    expiry_date: Optional[date] = None
    details: Optional[str] = None


class PersonInvolved(RecordModel):
    """Injured person or member of the public at the centre of the incident."""

    full_name: Optional[str] = None
    age: Optional[int] = None
    date_of_birth: Optional[date] = None
    gender: Optional[str] = None
    role_or_relationship: Optional[str] = None
    role_other_details: Optional[str] = None
    employer: Optional[str] = None
    contact_details: Optional[str] = None
    address: Optional[str] = None
    length_of_employment_months: Optional[int] = None
    relevant_training: Optional[TrainingDetails] = None


# ---------------------------------------------------------------------------
# Category sub-records
# ---------------------------------------------------------------------------


class PPEUsage(RecordModel):
    used: bool = False
    types: list[str] = Field(default_factory=list)
    functioning_properly: Optional[bool] = None
    defects_noted: Optional[str] = None


class FirstAidDetails(RecordModel):
    given: bool = False
    treated_by: Optional[str] = None
    treatment: Optional[str] = None
    time_administered: Optional[str] = None


class HospitalVisit(RecordModel):
    went_to_hospital: bool = False
    hospital_name: Optional[str] = None
    hospital_address: Optional[str] = None
    time_of_arrival: Optional[str] = None
    admission_required: Optional[bool] = None
    treatment_received: Optional[str] = None
    discharge_time: Optional[str] = None


class InjuryDetails(RecordModel):
    """Personal injury sub-record (RIDDOR-aligned)."""

    nature_of_injury: Optional[str] = None
    body_parts_affected: list[str] = Field(default_factory=list)
    body_part_other: Optional[str] = None
    severity: Optional[InjurySeverity] = None
    first_aid_given: Optional[FirstAidDetails] = None
    hospital_visit: Optional[HospitalVisit] = None
    expected_lost_time_days: Optional[int] = None
    actual_lost_time_days: Optional[int] = None
    permanent_disability: Optional[bool] = None
    ppe_used: Optional[PPEUsage] = None
    work_related_illness: Optional[bool] = None


class PropertyDamageDetails(RecordModel):
    asset_type: Optional[str] = None
    asset_description: Optional[str] = None
    asset_id_or_serial: Optional[str] = None
    location: Optional[str] = None
    extent_of_damage: Optional[str] = None
    estimated_cost: Optional[float] = None
    urgent_repair_required: Optional[bool] = None
    condition_before_incident: Optional[AssetCondition] = None
    owner_of_property: Optional[str] = None
    insurance_claim: Optional[bool] = None
    insurance_reference_number: Optional[str] = None


class OtherVehicle(RecordModel):
    driver_name: Optional[str] = None
    vehicle_registration: Optional[str] = None
    make_model: Optional[str] = None
    insurance_provider: Optional[str] = None
    policy_number: Optional[str] = None
    contact_details: Optional[str] = None
    address: Optional[str] = None


class VehicleDetails(RecordModel):
    company_vehicle: Optional[bool] = None
    registration: Optional[str] = None
    make_model: Optional[str] = None
    year_of_manufacture: Optional[int] = None
    driver_name: Optional[str] = None
    driver_licence_number: Optional[str] = None
    driver_address: Optional[str] = None
    other_vehicles: list[OtherVehicle] = Field(default_factory=list)
    police_notified: Optional[bool] = None
    police_reference_number: Optional[str] = None
    police_officer_name: Optional[str] = None
    police_station: Optional[str] = None
    road_conditions: Optional[str] = None
    weather_conditions: Optional[str] = None
    visibility: Optional[str] = None
    approximate_speed_kmh: Optional[float] = None
    speed_limit_kmh: Optional[float] = None
    direction_of_travel: Optional[str] = None
    traffic_conditions: Optional[str] = None
    vehicle_damage: Optional[str] = None
    injuries_in_vehicle: Optional[bool] = None


class PublicLiabilityDetails(RecordModel):
    reason_for_being_on_site: Optional[str] = None
    authorized_visitor: Optional[bool] = None
    signed_in: Optional[bool] = None
    sign_in_time: Optional[str] = None
    pre_existing_conditions: Optional[str] = None
    refused_treatment: Optional[bool] = None
    legal_representative: Optional[str] = None
    legal_representative_contact: Optional[str] = None
    witness_statements: list[str] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Investigation
# ---------------------------------------------------------------------------


class IncidentDescription(RecordModel):
    what_happened: Optional[str] = None
    sequence_of_events: Optional[str] = None
    activity_at_time: Optional[str] = None
    task_being_performed: Optional[str] = None
    immediate_cause: Optional[str] = None
    unsafe_conditions: Optional[str] = None
    unsafe_acts: Optional[str] = None
    environmental_factors: Optional[str] = None
    equipment_factors: Optional[str] = None
    breaches_of_procedure: Optional[str] = None
    supervision_present: Optional[YesNoUnknown] = None
    supervisor_name: Optional[str] = None
    area_previously_inspected: Optional[YesNoUnknown] = None
    last_inspection_date: Optional[date] = None
    inspector_name: Optional[str] = None


class RootCauseAnalysis(RecordModel):
    direct_cause: Optional[str] = None
    indirect_cause: Optional[str] = None
    underlying_root_cause: Optional[str] = None
    contributing_factors: list[str] = Field(default_factory=list)
    contributing_factors_other: Optional[str] = None
    preventative_measures: Optional[str] = None
    were_controls_adequate: Optional[YesNoUnknown] = None
    controls_explanation: Optional[str] = None
    similar_incidents_previously: Optional[bool] = None
    similar_incidents_details: Optional[str] = None


class CorrectiveAction(RecordModel):
    id: Optional[str] = None
    description: Optional[str] = None
    responsible_person: Optional[str] = None
    responsible_person_role: Optional[str] = None
    due_date: Optional[date] = None
    completion_date: Optional[date] = None
    status: ActionStatus = ActionStatus.OPEN
    cost_estimate: Optional[float] = None
    priority: Optional[ActionPriority] = None
    verification_method: Optional[str] = None
    completion_notes: Optional[str] = None


# ---------------------------------------------------------------------------
# Evidence, signatures & compliance
# ---------------------------------------------------------------------------


class Attachment(RecordModel):
    id: Optional[str] = None
    uri: str
    type: AttachmentType
    caption: Optional[str] = None
    uploaded_at: Optional[datetime] = None
    file_size: Optional[int] = None
    mime_type: Optional[str] = None


class Signature(RecordModel):
    name: str
    role: Optional[str] = None
    signed_at: datetime
    signature_image_uri: Optional[str] = None
    ip_address: Optional[str] = None


class SignatureSet(RecordModel):
    """Named signature slots."""

    reporter: Optional[Signature] = None
    investigator: Optional[Signature] = None
    witness: Optional[Signature] = None
    manager: Optional[Signature] = None


class RIDDORAssessment(RecordModel):
    """Regulator (HSE) reportability assessment recorded by the investigator."""

    is_reportable: bool = False
    reportable_reason: Optional[str] = None
    reported_to_hse: bool = False
    hse_reference_number: Optional[str] = None
    reported_date: Optional[date] = None
    reported_by: Optional[str] = None


# ---------------------------------------------------------------------------
# Aggregate root
# ---------------------------------------------------------------------------


class IncidentRecord(RecordModel):
    """Complete incident investigation record."""

    id: Optional[str] = None
    reference_code: Optional[str] = None
    category: Optional[str] = Field(
        None, description="One of IncidentCategory; other values get no category rules"
    )

    date_of_incident: Optional[date] = None
    time_of_incident: Optional[str] = Field(None, description="24-hour HH:mm")
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    location: Optional[IncidentLocation] = None
    reported_by: Optional[ReportingPerson] = None

    people_present: list[PersonPresent] = Field(default_factory=list)
    witnesses: list[Witness] = Field(default_factory=list)
    person_involved: Optional[PersonInvolved] = None

    injury_details: Optional[InjuryDetails] = None
    property_damage_details: Optional[PropertyDamageDetails] = None
    vehicle_details: Optional[VehicleDetails] = None
    public_liability_details: Optional[PublicLiabilityDetails] = None

    incident_description: Optional[IncidentDescription] = None
    root_cause_analysis: Optional[RootCauseAnalysis] = None
    corrective_actions: list[CorrectiveAction] = Field(default_factory=list)

    attachments: list[Attachment] = Field(default_factory=list)
    signatures: Optional[SignatureSet] = None

    riddor_assessment: Optional[RIDDORAssessment] = None
    legal_notes: Optional[str] = None
    internal_comments: Optional[str] = None

    investigated_by: Optional[str] = None
    investigation_date: Optional[date] = None
    reviewed_by: Optional[str] = None
    review_date: Optional[date] = None
    report_status: Optional[ReportStatus] = None
