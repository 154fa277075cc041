"""Shared fixtures: a fixed clock and a complete personal-injury record."""

from __future__ import annotations

import copy
from datetime import datetime

import pytest

from incident_reporter.config.loader import clear_cache
from incident_reporter.domain.models.incident import IncidentRecord
from incident_reporter.infrastructure.clock import FixedClock

FIXED_NOW = datetime(2024, 6, 1, 9, 30)

# Passes every rule, including the full investigation export profile.
VALID_PAYLOAD: dict = {
    "id": "b7f3c2a0",
    "referenceCode": "INC-2024-001",
    "category": "personal_injury",
    "dateOfIncident": "2024-05-20",
    "timeOfIncident": "14:30",
    "location": {
        "manualAddress": "Unit 4, Riverside Works, Leeds",
        "siteName": "Riverside Works",
        "department": "Production",
        "postcode": "LS1 4AB",
    },
    "reportedBy": {
        "name": "Sam Taylor",
        "jobTitle": "Shift Supervisor",
        "contactNumber": "07700900123",
        "email": "sam.taylor@example.co.uk",
    },
    "personInvolved": {
        "fullName": "Alex Morgan",
        "age": 34,
        "roleOrRelationship": "employee",
        "relevantTraining": {"hasTraining": True},
    },
    "injuryDetails": {
        "natureOfInjury": "Laceration",
        "bodyPartsAffected": ["left_hand"],
        "severity": "moderate",
        "firstAidGiven": {"given": True, "treatment": "Cleaned and dressed"},
        "ppeUsed": {"used": True, "types": ["gloves"]},
    },
    "incidentDescription": {
        "whatHappened": "Operator cut left hand on an unguarded blade while clearing a jam.",
        "supervisionPresent": "yes",
    },
    "witnesses": [
        {"name": "Jo Patel", "contactDetails": "Ext 214", "statement": "The guard was off."}
    ],
    "rootCauseAnalysis": {
        "directCause": "Contact with blade",
        "underlyingRootCause": "Guard removed for maintenance and not refitted",
        "contributingFactors": ["time_pressure"],
        "wereControlsAdequate": "no",
    },
    "correctiveActions": [
        {
            "description": "Refit guard and add interlock",
            "responsiblePerson": "Maintenance Lead",
            "dueDate": "2024-06-15",
            "status": "in_progress",
        }
    ],
    "attachments": [
        {"uri": "file:///evidence/blade.jpg", "type": "photo", "caption": "Guard removed"}
    ],
    "signatures": {
        "reporter": {"name": "Sam Taylor", "role": "Supervisor", "signedAt": "2024-05-20T16:00:00"},
        "investigator": {"name": "Chris Lee", "signedAt": "2024-05-22T10:00:00"},
    },
}


@pytest.fixture(autouse=True)
def _fresh_layout_cache():
    clear_cache()
    yield
    clear_cache()


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(FIXED_NOW)


@pytest.fixture
def make_payload():
    """Factory: a deep copy of the valid payload with top-level keys replaced."""

    def _make(**overrides) -> dict:
        payload = copy.deepcopy(VALID_PAYLOAD)
        payload.update(overrides)
        return payload

    return _make


@pytest.fixture
def make_record(make_payload):
    def _make(**overrides) -> IncidentRecord:
        return IncidentRecord.model_validate(make_payload(**overrides))

    return _make
