"""Tests for the emitkit CLI (Click commands)."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from emitkit.api.cli import SCENARIOS, cli


@pytest.fixture
def runner():
    return CliRunner()


class TestCliVersion:
    def test_version_flag(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert "emitkit" in result.output
        assert "1.0.0" in result.output


class TestCliDemo:
    def test_basic(self, runner):
        result = runner.invoke(cli, ["demo", "basic"])
        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "--- basic ---",
            "Hello, Anwarul!",
            "Hello, Karim!",
            "How are you, Karim?",
        ]

    def test_once(self, runner):
        result = runner.invoke(cli, ["demo", "once"])
        assert result.exit_code == 0
        assert "Anwarul logged in (once)" in result.output
        assert "Karim logged in" not in result.output
        assert "Listeners left for login: 0" in result.output

    def test_remove(self, runner):
        result = runner.invoke(cli, ["demo", "remove"])
        assert result.exit_code == 0
        assert "Goodbye, Anwarul" in result.output
        assert "Goodbye, Karim" not in result.output

    def test_inspect(self, runner):
        result = runner.invoke(cli, ["demo", "inspect"])
        assert result.exit_code == 0
        assert "Registered events: ['greet', 'login']" in result.output
        assert "Listeners count for greet: 2" in result.output
        assert "Max listeners: 10" in result.output

    def test_server_events(self, runner):
        result = runner.invoke(cli, ["demo", "server-events"])
        assert result.exit_code == 0
        assert "Data received: {'id': 1, 'msg': 'Hello'}" in result.output
        assert "Error: Something went wrong" in result.output

    def test_server(self, runner):
        result = runner.invoke(cli, ["demo", "server"])
        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "--- server ---",
            "[API Server] Data processing...",
            "Received data: Hello World",
            "[API Server] Data processing...",
            "Received data: Another Request",
            "[API Server] Server shutting down...",
            "Server closed (once listener)",
            "[API Server] Server shutting down...",
        ]

    def test_all_runs_every_scenario(self, runner):
        result = runner.invoke(cli, ["demo"])
        assert result.exit_code == 0
        for name in SCENARIOS:
            assert f"--- {name} ---" in result.output

    def test_unknown_scenario(self, runner):
        result = runner.invoke(cli, ["demo", "nope"])
        assert result.exit_code != 0

    def test_bad_log_level(self, runner):
        result = runner.invoke(cli, ["--log-level", "LOUD", "demo", "basic"])
        assert result.exit_code == 2
        assert "Unknown log level: LOUD" in result.output


class TestCliSettings:
    def test_shows_effective_settings(self, runner, monkeypatch):
        monkeypatch.setenv("EMITKIT_DEFAULT_MAX_LISTENERS", "25")
        monkeypatch.setenv("EMITKIT_ERROR_POLICY", "log")
        result = runner.invoke(cli, ["settings"])
        assert result.exit_code == 0
        assert "default_max_listeners: 25" in result.output
        assert "error_policy: log" in result.output
