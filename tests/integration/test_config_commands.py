"""Integration tests for config commands."""

from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from microdot_labels.app import app
from microdot_labels.config.manager import ConfigManager

runner = CliRunner()


class TestConfigCommands:
    def test_path(self, isolated_config: Path):
        result = runner.invoke(app, ["config", "path"])
        assert result.exit_code == 0
        assert result.stdout.strip() == str(isolated_config)

    def test_show_defaults_json(self):
        result = runner.invoke(app, ["config", "show", "--format", "json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["default_format"] == "table"
        assert data["effective_format"] == "table"

    def test_show_reports_env_override(self, monkeypatch):
        monkeypatch.setenv("MICRODOT_LABELS_FORMAT", "yaml")
        result = runner.invoke(app, ["config", "show", "-f", "json"])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["default_format"] == "table"
        assert data["effective_format"] == "yaml"

    def test_set_format(self, isolated_config: Path):
        result = runner.invoke(app, ["config", "set-format", "yaml"])
        assert result.exit_code == 0
        assert "yaml" in result.output
        assert ConfigManager(config_path=isolated_config).config.default_format == "yaml"

    def test_set_invalid_format(self):
        result = runner.invoke(app, ["config", "set-format", "xml"])
        assert result.exit_code == 6

    def test_reset(self, isolated_config: Path):
        runner.invoke(app, ["config", "set-format", "csv"])
        result = runner.invoke(app, ["config", "reset", "--force"])
        assert result.exit_code == 0
        assert "reset" in result.output
        assert not isolated_config.exists()

    def test_reset_nothing_to_remove(self):
        result = runner.invoke(app, ["config", "reset", "--force"])
        assert result.exit_code == 0
        assert "No config file" in result.output

    def test_reset_cancelled(self, isolated_config: Path):
        runner.invoke(app, ["config", "set-format", "csv"])
        result = runner.invoke(app, ["config", "reset"], input="n\n")
        assert result.exit_code == 0
        assert "Cancelled" in result.output
        assert isolated_config.exists()

    def test_broken_config_file(self, isolated_config: Path):
        isolated_config.write_text("default_format = [")
        result = runner.invoke(app, ["config", "show"])
        assert result.exit_code == 6

    def test_show_rejects_unknown_format(self):
        result = runner.invoke(app, ["config", "show", "-f", "xml"])
        assert result.exit_code == 6

    def test_show_uses_configured_format(self, isolated_config: Path):
        isolated_config.write_text('default_format = "json"\n')
        result = runner.invoke(app, ["config", "show"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["default_format"] == "json"
