"""Layout provider backed by JSON files on disk."""

from __future__ import annotations

from pathlib import Path

from incident_reporter.config.loader import load_config
from incident_reporter.config.models import ReportLayout
from incident_reporter.domain.ports.config_provider import ConfigProviderPort


class JsonConfigProvider(ConfigProviderPort):
    """Serve the layout at *config_path*, or the bundled layout when it is ``None``.

    Parsing and caching are left to ``load_config``.
    """

    def __init__(self, config_path: Path | str | None = None) -> None:
        self.config_path = Path(config_path) if config_path else None

    def get_config(self) -> ReportLayout:
        return load_config(self.config_path)
