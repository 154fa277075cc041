"""Domain models: incident records, export options, findings, document model."""

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
from incident_reporter.domain.models.enums import (
    IncidentCategory,
    InjurySeverity,
    ReportKind,
)
from incident_reporter.domain.models.export_options import ExportOptions
from incident_reporter.domain.models.incident import IncidentRecord
from incident_reporter.domain.models.validation import (
    FindingCollector,
    ValidationFinding,
    ValidationResult,
)

__all__ = [
    "AttachmentEntry",
    "AttachmentSection",
    "DocumentModel",
    "ExportOptions",
    "FindingCollector",
    "IncidentCategory",
    "IncidentRecord",
    "InjurySeverity",
    "LabelValueRow",
    "LabelValueSection",
    "ReportKind",
    "Section",
    "SignatureEntry",
    "SignatureSection",
    "TableSection",
    "ValidationFinding",
    "ValidationResult",
]
