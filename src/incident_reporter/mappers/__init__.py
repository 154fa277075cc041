"""Record → document model mapping."""

from incident_reporter.mappers.document_mapper import DocumentModelMapper

__all__ = ["DocumentModelMapper"]
