"""Enumerations for incident records and reports."""

from __future__ import annotations

from enum import Enum


class IncidentCategory(str, Enum):
    """Closed set of incident categories."""

    PERSONAL_INJURY = "personal_injury"
    PROPERTY_DAMAGE = "property_damage"
    VEHICLE_INCIDENT = "vehicle_incident"
    PUBLIC_LIABILITY = "public_liability"


class InjurySeverity(str, Enum):
    """Injury severity, aligned with RIDDOR classification."""

    MINOR = "minor"
    MODERATE = "moderate"
    SEVERE = "severe"
    FATAL = "fatal"


class AssetCondition(str, Enum):
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"
    UNKNOWN = "unknown"


class YesNoUnknown(str, Enum):
    """Answer to an investigation question."""

    YES = "yes"
    NO = "no"
    UNKNOWN = "unknown"


class ActionStatus(str, Enum):
    OPEN = "open"
    IN_PROGRESS = "in_progress"
    CLOSED = "closed"


class ActionPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class AttachmentType(str, Enum):
    PHOTO = "photo"
    VIDEO = "video"
    DIAGRAM = "diagram"
    DOCUMENT = "document"


class ReportStatus(str, Enum):
    DRAFT = "draft"
    SUBMITTED = "submitted"
    UNDER_INVESTIGATION = "under_investigation"
    CLOSED = "closed"


class ReportKind(str, Enum):
    """Which report a document model renders."""

    SUMMARY = "summary"
    INVESTIGATION = "investigation"
