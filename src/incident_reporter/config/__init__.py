"""Report layout configuration package."""

from incident_reporter.config.loader import get_config, load_config
from incident_reporter.config.models import ReportLayout

__all__ = ["ReportLayout", "get_config", "load_config"]
