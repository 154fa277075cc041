"""Document renderers: turn document models into report files."""

from incident_reporter.infrastructure.renderers.pdf_renderer import PageFlowRenderer

__all__ = ["PageFlowRenderer"]
