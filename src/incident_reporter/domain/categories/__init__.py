"""Category registry: one entry per incident category.

Both the validator and the document mapper look categories up here, so
the rules a category enforces and the report section it contributes
cannot drift apart. Adding a category means adding one module with
``check``, ``build_section`` and ``REQUIRED_FIELDS`` plus one entry in
``_REGISTRY``.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from incident_reporter.domain.categories import (
    personal_injury,
    property_damage,
    public_liability,
    vehicle_incident,
)
from incident_reporter.domain.models.document_model import LabelValueSection
from incident_reporter.domain.models.enums import IncidentCategory
from incident_reporter.domain.models.incident import IncidentRecord
from incident_reporter.domain.models.validation import FindingCollector


@dataclass(frozen=True)
class CategoryProfile:
    """Everything category-specific, in one place."""

    category: IncidentCategory
    check: Callable[[IncidentRecord, FindingCollector], None]
    build_section: Callable[[IncidentRecord], LabelValueSection | None]
    required_fields: tuple[str, ...]


_REGISTRY: dict[str, CategoryProfile] = {
    profile.category.value: profile
    for profile in (
        CategoryProfile(
            IncidentCategory.PERSONAL_INJURY,
            personal_injury.check,
            personal_injury.build_section,
            personal_injury.REQUIRED_FIELDS,
        ),
        CategoryProfile(
            IncidentCategory.PROPERTY_DAMAGE,
            property_damage.check,
            property_damage.build_section,
            property_damage.REQUIRED_FIELDS,
        ),
        CategoryProfile(
            IncidentCategory.VEHICLE_INCIDENT,
            vehicle_incident.check,
            vehicle_incident.build_section,
            vehicle_incident.REQUIRED_FIELDS,
        ),
        CategoryProfile(
            IncidentCategory.PUBLIC_LIABILITY,
            public_liability.check,
            public_liability.build_section,
            public_liability.REQUIRED_FIELDS,
        ),
    )
}


def get_profile(category: str | None) -> CategoryProfile | None:
    """Return the profile for *category*, or ``None`` outside the closed set."""
    if category is None:
        return None
    return _REGISTRY.get(category)


def registered_categories() -> list[IncidentCategory]:
    return [p.category for p in _REGISTRY.values()]


__all__ = ["CategoryProfile", "get_profile", "registered_categories"]
