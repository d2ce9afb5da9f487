"""Tests for the command-line interface."""
import json

from typer.testing import CliRunner

from agichat.cli.app import app

runner = CliRunner()


class TestSettingsCommands:
    """Tests for 'agichat settings'."""

    def test_show_defaults(self, storage_path):
        result = runner.invoke(app, ["settings", "show"])

        assert result.exit_code == 0
        assert "temperature" in result.output
        assert "0.7" in result.output

    def test_set_persists(self, storage_path):
        result = runner.invoke(app, ["settings", "set", "temperature", "0.2"])

        assert result.exit_code == 0
        stored = json.loads(json.loads(storage_path.read_text())["agi_settings"])
        assert stored["temperature"] == 0.2

    def test_set_clears_optional_field(self, storage_path):
        runner.invoke(app, ["settings", "set", "max_output_tokens", "256"])
        result = runner.invoke(app, ["settings", "set", "max_output_tokens", "none"])

        assert result.exit_code == 0
        stored = json.loads(json.loads(storage_path.read_text())["agi_settings"])
        assert stored["max_output_tokens"] is None

    def test_set_invalid_value(self, storage_path):
        result = runner.invoke(app, ["settings", "set", "temperature", "9"])

        assert result.exit_code == 1
        assert not storage_path.exists()

    def test_set_unknown_field(self, storage_path):
        result = runner.invoke(app, ["settings", "set", "theme", "dark"])

        assert result.exit_code == 1
        assert "unknown field" in result.output

    def test_reset(self, storage_path):
        runner.invoke(app, ["settings", "set", "user_name", "Ada"])
        result = runner.invoke(app, ["settings", "reset"])

        assert result.exit_code == 0
        stored = json.loads(json.loads(storage_path.read_text())["agi_settings"])
        assert stored["user_name"] == ""


class TestAskCommand:
    """Tests for 'agichat ask'."""

    def test_offline_echo(self, storage_path):
        result = runner.invoke(app, ["--offline", "ask", "Hello"])

        assert result.exit_code == 0
        assert "(echo #1) Hello" in result.output

    def test_without_provider_exits(self, storage_path, monkeypatch):
        monkeypatch.setenv("LLM_PROVIDER", "gemini")
        monkeypatch.delenv("GEMINI_API_KEY", raising=False)
        monkeypatch.delenv("GOOGLE_API_KEY", raising=False)

        result = runner.invoke(app, ["ask", "Hello"])

        assert result.exit_code == 1
