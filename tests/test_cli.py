"""Tests for the Statusboard CLI commands."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock, patch

from typer.testing import CliRunner

from statusboard.cli import app
from statusboard.config.models import StatusboardConfig

runner = CliRunner()


class TestStatusCommand:
    def test_status_success(self, sample_config: StatusboardConfig):
        with (
            patch("statusboard.config.loader.load_config", return_value=sample_config),
            patch(
                "statusboard.registry.manager.ServiceManager.update_all_status",
                new_callable=AsyncMock,
                return_value=True,
            ) as mock_refresh,
        ):
            result = runner.invoke(app, ["status"])
            assert result.exit_code == 0
            mock_refresh.assert_awaited_once()
            assert "Gateway" in result.output
            assert "Worker" in result.output
            assert "online" in result.output

    def test_status_runs_checks(self):
        config = StatusboardConfig(
            services=[
                {"name": "Gateway", "checker": {"type": "ping", "host": "gw.local"}},
                {"name": "Nowhere", "checker": {"type": "ping", "host": ""}},
            ]
        )
        with patch("statusboard.config.loader.load_config", return_value=config):
            result = runner.invoke(app, ["status"])
            assert result.exit_code == 0
            assert "offline" in result.output
            assert "Host address is empty" in result.output

    def test_status_no_config(self):
        with patch("statusboard.config.loader.load_config", side_effect=FileNotFoundError("No config")):
            result = runner.invoke(app, ["status"])
            assert result.exit_code == 1
            assert "No config" in result.output

    def test_status_bad_checker(self):
        config = StatusboardConfig(services=[{"name": "a", "checker": {"type": "smtp"}}])
        with patch("statusboard.config.loader.load_config", return_value=config):
            result = runner.invoke(app, ["status"])
            assert result.exit_code == 1
            assert "Unknown checker type" in result.output


class TestServeCommand:
    def test_serve(self, sample_config: StatusboardConfig):
        with (
            patch("statusboard.config.loader.load_config", return_value=sample_config),
            patch("uvicorn.run") as mock_run,
        ):
            result = runner.invoke(app, ["serve", "--host", "0.0.0.0", "--port", "9000"])
            assert result.exit_code == 0
            mock_run.assert_called_once_with(
                "statusboard.api.app:app", host="0.0.0.0", port=9000, log_level="info", reload=False
            )

    def test_serve_defaults_from_config(self, sample_config: StatusboardConfig):
        with (
            patch("statusboard.config.loader.load_config", return_value=sample_config),
            patch("uvicorn.run") as mock_run,
        ):
            result = runner.invoke(app, ["serve"])
            assert result.exit_code == 0
            mock_run.assert_called_once_with(
                "statusboard.api.app:app", host="127.0.0.1", port=8123, log_level="info", reload=False
            )

    def test_serve_without_config(self):
        with (
            patch("statusboard.config.loader.load_config", side_effect=FileNotFoundError("No config")),
            patch("uvicorn.run") as mock_run,
        ):
            result = runner.invoke(app, ["serve", "--log-level", "debug"])
            assert result.exit_code == 0
            mock_run.assert_called_once_with(
                "statusboard.api.app:app", host="127.0.0.1", port=8000, log_level="debug", reload=False
            )


class TestConfigValidate:
    def test_valid(self, config_file: Path):
        result = runner.invoke(app, ["config", "validate", "--path", str(config_file)])
        assert result.exit_code == 0
        assert "Configuration is valid" in result.output
        assert "Docs" in result.output  # no-checker warning

    def test_missing_file(self, tmp_path: Path):
        result = runner.invoke(app, ["config", "validate", "--path", str(tmp_path / "missing.yaml")])
        assert result.exit_code == 1

    def test_bad_yaml(self, tmp_path: Path):
        path = tmp_path / ".statusboard.yaml"
        path.write_text("services: [unclosed\n")
        result = runner.invoke(app, ["config", "validate", "--path", str(path)])
        assert result.exit_code == 1
        assert "YAML parsing failed" in result.output

    def test_semantic_errors(self, tmp_path: Path):
        path = tmp_path / ".statusboard.yaml"
        path.write_text(
            "services:\n"
            "  - name: a\n"
            "    checker: {type: smtp}\n"
            "  - name: b\n"
            "    checker: {type: http}\n"
            "  - name: c\n"
            "    checker: {type: command}\n"
            "  - name: d\n"
            "    checker: {type: ping}\n"
        )
        result = runner.invoke(app, ["config", "validate", "--path", str(path)])
        assert result.exit_code == 1
        assert "4 validation error(s)" in result.output
        assert "Unknown checker type: smtp" in result.output

    def test_checkers_are_constructed(self, config_file: Path, sample_config: StatusboardConfig):
        with patch("statusboard.checkers.create_checker", side_effect=ValueError("bad checker")) as mock_create:
            result = runner.invoke(app, ["config", "validate", "--path", str(config_file)])
        assert result.exit_code == 1
        assert mock_create.call_count == 3
        mock_create.assert_any_call(
            sample_config.services[0].checker, service_url="http://localhost:8080"
        )
        assert "3 validation error(s)" in result.output
        assert "Service 'Web': bad checker" in result.output


class TestConfigShow:
    def test_show(self, config_file: Path):
        result = runner.invoke(app, ["config", "show", "--path", str(config_file)])
        assert result.exit_code == 0
        assert "127.0.0.1:8123" in result.output
        assert "ping gateway.local" in result.output
        assert "http http://localhost:8080" in result.output
        assert "Checker: none" in result.output

    def test_show_missing(self, tmp_path: Path):
        result = runner.invoke(app, ["config", "show", "--path", str(tmp_path / "missing.yaml")])
        assert result.exit_code == 1
