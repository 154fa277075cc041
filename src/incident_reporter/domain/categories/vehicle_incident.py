"""Vehicle incident: rules and report section."""

from __future__ import annotations

from incident_reporter.domain.models.document_model import LabelValueRow, LabelValueSection
from incident_reporter.domain.models.incident import IncidentRecord
from incident_reporter.domain.models.validation import FindingCollector
from incident_reporter.domain.rules.constants import UK_REGISTRATION_RE
from incident_reporter.domain.rules.formatting import is_blank, or_na, with_unit, yes_no

REQUIRED_FIELDS: tuple[str, ...] = (
    "vehicleDetails.registration",
    "vehicleDetails.driverName",
    "vehicleDetails.companyVehicle",
    "vehicleDetails.policeNotified",
)

_SECTION = "Vehicle Details"


def is_uk_registration(registration: str) -> bool:
    """Match current (AB12CDE) and prefix (A123BCD) plates, ignoring spaces."""
    return UK_REGISTRATION_RE.match("".join(registration.split())) is not None


def check(record: IncidentRecord, findings: FindingCollector) -> None:
    vehicle = record.vehicle_details

    if vehicle is None or is_blank(vehicle.registration):
        findings.error("vehicleDetails.registration", "Vehicle registration is required", _SECTION)
    elif not is_uk_registration(vehicle.registration):
        findings.error(
            "vehicleDetails.registration",
            "Please enter a valid UK vehicle registration",
            _SECTION,
        )

    if vehicle is None or is_blank(vehicle.driver_name):
        findings.error("vehicleDetails.driverName", "Driver name is required", _SECTION)

    if vehicle is None or vehicle.company_vehicle is None:
        findings.error(
            "vehicleDetails.companyVehicle",
            "Please indicate if this is a company vehicle",
            _SECTION,
        )

    if vehicle is None or vehicle.police_notified is None:
        findings.error(
            "vehicleDetails.policeNotified",
            "Please indicate if police were notified",
            _SECTION,
        )

    if vehicle is not None and vehicle.police_notified and is_blank(
        vehicle.police_reference_number
    ):
        findings.warn(
            "vehicleDetails.policeReferenceNumber",
            "Police reference number is strongly recommended when police are notified",
            _SECTION,
        )


def build_section(record: IncidentRecord) -> LabelValueSection | None:
    vehicle = record.vehicle_details
    if vehicle is None:
        return None

    rows = [
        ("Vehicle Registration", or_na(vehicle.registration)),
        ("Make/Model", or_na(vehicle.make_model)),
        ("Company Vehicle", yes_no(vehicle.company_vehicle)),
        ("Driver Name", or_na(vehicle.driver_name)),
        ("Driver Licence Number", or_na(vehicle.driver_licence_number)),
        ("Other Vehicles Involved", str(len(vehicle.other_vehicles))),
        ("Police Notified", yes_no(vehicle.police_notified)),
        ("Police Reference", or_na(vehicle.police_reference_number)),
        ("Road Conditions", or_na(vehicle.road_conditions)),
        ("Weather Conditions", or_na(vehicle.weather_conditions)),
        ("Approximate Speed", with_unit(vehicle.approximate_speed_kmh, "km/h")),
        ("Speed Limit", with_unit(vehicle.speed_limit_kmh, "km/h")),
    ]
    return LabelValueSection(
        title="Vehicle Incident Details",
        rows=tuple(LabelValueRow(label=label, value=value) for label, value in rows),
    )
