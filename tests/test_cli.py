from __future__ import annotations

from typer.testing import CliRunner

import upstream_ui.cli as cli

runner = CliRunner()


def test_screens_lists_registered_screens():
    result = runner.invoke(cli.app, ["screens"])

    assert result.exit_code == 0
    for key in ("main_menu", "connection_status", "commit_history", "commit_detail", "help"):
        assert key in result.output


def test_config_prints_effective_settings(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("UPSTREAM_PROXY_PORT", "9999")

    result = runner.invoke(cli.app, ["config"])

    assert result.exit_code == 0
    assert "UPSTREAM_PROXY_PORT" in result.output
    assert "9999" in result.output


def test_config_rejects_invalid_settings(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("UPSTREAM_PROXY_PORT", "not-a-port")

    result = runner.invoke(cli.app, ["config"])

    assert result.exit_code == 1
    assert "Invalid configuration" in result.output


def test_no_command_launches_interactive_menu(monkeypatch):
    calls = []
    monkeypatch.setattr(cli, "_interactive_menu", lambda: calls.append(True))

    result = runner.invoke(cli.app, [])

    assert result.exit_code == 0
    assert calls == [True]


def test_interactive_menu_runs_router_over_registry(monkeypatch, tmp_path):
    from upstream_ui.tui import router as router_module

    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("UPSTREAM_LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setattr(cli, "setup_logging", lambda settings: tmp_path / "logs" / "x.log")
    seen = {}

    def fake_run(self):
        seen["view"] = self.view.key
        seen["depth"] = self.nav.depth

    monkeypatch.setattr(router_module.Router, "run", fake_run)

    cli._interactive_menu()

    assert seen == {"view": "main_menu", "depth": 1}


def test_unknown_initial_screen_exits_with_message(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("UPSTREAM_INITIAL_SCREEN", "nowhere")
    monkeypatch.setattr(cli, "setup_logging", lambda settings: tmp_path / "x.log")

    result = runner.invoke(cli.app, [])

    assert result.exit_code == 1
    assert "Invalid navigation setup" in result.output
    assert "nowhere" in result.output
    assert not isinstance(result.exception, KeyError)


def test_incomplete_screen_registry_exits_with_message(monkeypatch, tmp_path):
    from upstream_ui.tui import router as router_module
    from upstream_ui.tui import screens  # noqa: F401

    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(cli, "setup_logging", lambda settings: tmp_path / "x.log")
    registry = dict(router_module.SCREENS)
    registry.pop("help")
    monkeypatch.setattr(router_module, "SCREENS", registry)

    result = runner.invoke(cli.app, [])

    assert result.exit_code == 1
    assert "help" in result.output
