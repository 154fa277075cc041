"""Report layout loading.

Layouts are read from JSON into ``ReportLayout`` and cached per resolved
path, so the bundled layout is parsed once per process.
"""

from __future__ import annotations

import json
from pathlib import Path

from incident_reporter.config.models import ReportLayout
from incident_reporter.domain.errors import ConfigurationError

BUNDLED_LAYOUT_PATH = Path(__file__).resolve().with_name("report_layout.json")

_layouts: dict[Path, ReportLayout] = {}


def load_config(path: Path | str | None = None) -> ReportLayout:
    """Return the layout stored at *path*, or the bundled one.

    A missing file raises ``FileNotFoundError``, broken JSON raises
    ``ConfigurationError`` and a schema mismatch raises pydantic's
    ``ValidationError``. Only valid layouts are cached.
    """
    source = Path(path).resolve() if path else BUNDLED_LAYOUT_PATH
    if source in _layouts:
        return _layouts[source]

    if not source.is_file():
        raise FileNotFoundError(f"Layout file not found: {source}")
    try:
        raw = json.loads(source.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Layout file {source} is not valid JSON: {exc}") from exc

    layout = _layouts[source] = ReportLayout.model_validate(raw)
    return layout


def get_config() -> ReportLayout:
    """The bundled layout."""
    return load_config()


def clear_cache() -> None:
    _layouts.clear()
