"""Smoke tests for the Typer CLI."""

from __future__ import annotations

import json

import pytest
from typer.testing import CliRunner

from incident_reporter.presentation.cli.app import app

runner = CliRunner()


@pytest.fixture
def record_file(tmp_path, make_payload):
    def _write(**overrides):
        path = tmp_path / "record.json"
        path.write_text(json.dumps(make_payload(**overrides)), encoding="utf-8")
        return path

    return _write


class TestValidateCommand:
    def test_valid_record(self, record_file):
        result = runner.invoke(app, ["validate", str(record_file())])
        assert result.exit_code == 0
        assert "VALID" in result.output

    def test_invalid_record_exits_nonzero(self, record_file):
        result = runner.invoke(app, ["validate", str(record_file(category=None))])
        assert result.exit_code == 1
        assert "INVALID" in result.output

    def test_export_profile(self, record_file):
        path = record_file(correctiveActions=[])
        assert runner.invoke(app, ["validate", str(path)]).exit_code == 0
        assert runner.invoke(app, ["validate", str(path), "--export"]).exit_code == 1
        assert runner.invoke(app, ["validate", str(path), "--summary"]).exit_code == 0

    def test_unparseable_record(self, record_file):
        result = runner.invoke(app, ["validate", str(record_file(dateOfIncident="soon"))])
        assert result.exit_code == 1
        assert "Payload" in result.output

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["validate", str(tmp_path / "missing.json")])
        assert result.exit_code == 1
        assert "File not found" in result.output

    def test_not_json(self, tmp_path):
        path = tmp_path / "record.json"
        path.write_text("{oops")
        result = runner.invoke(app, ["validate", str(path)])
        assert result.exit_code == 1


class TestExportCommand:
    def test_writes_pdf(self, record_file, tmp_path):
        out = tmp_path / "out" / "report.pdf"
        result = runner.invoke(app, ["export", str(record_file()), "--output", str(out)])
        assert result.exit_code == 0, result.output
        assert out.read_bytes().startswith(b"%PDF-")

    def test_summary(self, record_file, tmp_path):
        out = tmp_path / "summary.pdf"
        path = record_file(rootCauseAnalysis=None, correctiveActions=[])
        result = runner.invoke(app, ["export", str(path), "--summary", "-o", str(out)])
        assert result.exit_code == 0, result.output
        assert out.exists()

    def test_blocked_export(self, record_file, tmp_path):
        out = tmp_path / "blocked.pdf"
        result = runner.invoke(app, ["export", str(record_file(correctiveActions=[])), "-o", str(out)])
        assert result.exit_code == 1
        assert not out.exists()

    def test_force_draft(self, record_file, tmp_path):
        out = tmp_path / "draft.pdf"
        path = record_file(correctiveActions=[])
        result = runner.invoke(app, ["export", str(path), "--force", "-o", str(out)])
        assert result.exit_code == 0, result.output
        assert out.exists()

    def test_custom_layout(self, record_file, tmp_path):
        layout = tmp_path / "layout.json"
        layout.write_text(json.dumps({"margins": {"top": 72, "bottom": 72, "left": 72, "right": 72}}))
        out = tmp_path / "custom.pdf"
        result = runner.invoke(
            app, ["export", str(record_file()), "--layout", str(layout), "-o", str(out)]
        )
        assert result.exit_code == 0, result.output
        assert out.exists()

    def test_missing_layout(self, record_file, tmp_path):
        result = runner.invoke(
            app, ["export", str(record_file()), "--layout", str(tmp_path / "none.json")]
        )
        assert result.exit_code == 1

    def test_invalid_layout(self, record_file, tmp_path):
        layout = tmp_path / "layout.json"
        layout.write_text(json.dumps({"palette": {"primary": "blue"}}))
        out = tmp_path / "report.pdf"
        result = runner.invoke(
            app, ["export", str(record_file()), "--layout", str(layout), "-o", str(out)]
        )
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
        assert "#RRGGBB" in result.output
        assert not out.exists()


class TestOtherCommands:
    def test_required_fields(self):
        result = runner.invoke(app, ["required-fields", "vehicle_incident"])
        assert result.exit_code == 0
        assert "vehicleDetails.registration" in result.output

    def test_required_fields_unknown_category(self):
        result = runner.invoke(app, ["required-fields", "flood"])
        assert result.exit_code == 0
        assert "Unknown category" in result.output

    def test_config_show(self):
        result = runner.invoke(app, ["config", "show"])
        assert result.exit_code == 0
        assert "Helvetica" in result.output

    def test_config_validate(self, tmp_path):
        good = tmp_path / "good.json"
        good.write_text("{}")
        bad = tmp_path / "bad.json"
        bad.write_text(json.dumps({"palette": {"primary": "blue"}}))
        assert runner.invoke(app, ["config", "validate", str(good)]).exit_code == 0
        assert runner.invoke(app, ["config", "validate", str(bad)]).exit_code == 1

    def test_config_init(self, tmp_path):
        dest = tmp_path / "layout.json"
        result = runner.invoke(app, ["config", "init", "--output", str(dest)])
        assert result.exit_code == 0
        assert json.loads(dest.read_text())["page"]["name"] == "A4"
