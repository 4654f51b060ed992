from __future__ import annotations

import subprocess
from pathlib import Path
from types import SimpleNamespace

import pytest
from rich.console import Console

from upstream_ui.tui.components import menu_choices, render_problem
from upstream_ui.tui.menu import MAIN_MENU, SCREEN_LABELS
from upstream_ui.tui.router import Router
from upstream_ui.tui.screens import commits, status
from upstream_ui.tui.state import UIState
from upstream_ui.view import MenuItem, create


class _FakeSelect:
    def __init__(self, answer):
        self.answer = answer

    def ask(self):
        return self.answer


def _answer(monkeypatch, module, answer):
    monkeypatch.setattr(module.questionary, "select", lambda *a, **kw: _FakeSelect(answer))


def _settings(tmp_path: Path):
    return SimpleNamespace(
        UPSTREAM_REPO_PATH=tmp_path,
        UPSTREAM_COMMIT_LIMIT=5,
        UPSTREAM_PROXY_HOST="127.0.0.1",
        UPSTREAM_PROXY_PORT=17246,
        UPSTREAM_PROXY_TIMEOUT=0.1,
    )


def _router(tmp_path: Path, screens: dict) -> Router:
    nav = create(screens, "main_menu")
    return Router(
        console=Console(quiet=True),
        settings=_settings(tmp_path),
        state=UIState(),
        nav=nav,
    )


def test_menu_choices_use_keys_as_values():
    choices = menu_choices([MenuItem(icon="*", key="help", title="Help")])

    assert choices[0].value == "help"
    assert "Help" in choices[0].title


def test_every_menu_item_has_a_label():
    for item in MAIN_MENU:
        assert SCREEN_LABELS[item.key] == item.title


def test_load_commits_parses_git_log(monkeypatch, tmp_path):
    captured = {}

    def fake_run(cmd, **kwargs):
        captured["cmd"] = cmd
        out = "abc123\x1fAda\x1f2 days ago\x1fFix peer sync\nfff000\x1fBob\x1f3 days ago\x1fInit\n"
        return subprocess.CompletedProcess(cmd, 0, stdout=out, stderr="")

    monkeypatch.setattr(commits.subprocess, "run", fake_run)

    result = commits.load_commits(tmp_path, limit=2)

    assert result == [
        commits.Commit("abc123", "Ada", "2 days ago", "Fix peer sync"),
        commits.Commit("fff000", "Bob", "3 days ago", "Init"),
    ]
    assert captured["cmd"][:3] == ["git", "-C", str(tmp_path)]
    assert "-n2" in captured["cmd"]


def test_load_commits_without_limit(monkeypatch, tmp_path):
    captured = {}

    def fake_run(cmd, **kwargs):
        captured["cmd"] = cmd
        return subprocess.CompletedProcess(cmd, 0, stdout="", stderr="")

    monkeypatch.setattr(commits.subprocess, "run", fake_run)

    assert commits.load_commits(tmp_path, limit=0) == []
    assert not any(arg.startswith("-n") for arg in captured["cmd"])


def test_load_commits_outside_repository(monkeypatch, tmp_path):
    def fake_run(cmd, **kwargs):
        raise subprocess.CalledProcessError(128, cmd, stderr="fatal: not a git repository\n")

    monkeypatch.setattr(commits.subprocess, "run", fake_run)

    with pytest.raises(commits.GitError, match="not a git repository"):
        commits.load_commits(tmp_path)


def test_load_commits_without_git(monkeypatch, tmp_path):
    def fake_run(cmd, **kwargs):
        raise FileNotFoundError("git")

    monkeypatch.setattr(commits.subprocess, "run", fake_run)

    with pytest.raises(commits.GitError, match="not found"):
        commits.load_commits(tmp_path)


def test_commit_history_selection_opens_detail(monkeypatch, tmp_path):
    monkeypatch.setattr(
        commits, "load_commits", lambda repo, limit: [commits.Commit("abc123", "Ada", "now", "Fix")]
    )
    _answer(monkeypatch, commits, "abc123")
    router = _router(tmp_path, {"main_menu": object(), "commit_history": object()})

    result = commits.show_commit_history(router, router.view)

    assert result == ("commit_detail", {"sha": "abc123"})
    assert router.state.last_commit == "abc123"


def test_commit_history_git_error_goes_back(monkeypatch, tmp_path):
    def broken(repo, limit):
        raise commits.GitError("fatal: not a git repository")

    monkeypatch.setattr(commits, "load_commits", broken)
    _answer(monkeypatch, commits, "back")
    router = _router(tmp_path, {"main_menu": object()})

    assert commits.show_commit_history(router, router.view) == "back"


def test_commit_detail_reads_sha_from_props(monkeypatch, tmp_path):
    shown = []

    def fake_show(repo, sha):
        shown.append(sha)
        return "commit abc123\n"

    monkeypatch.setattr(commits, "show_commit", fake_show)
    _answer(monkeypatch, commits, "home")
    router = _router(tmp_path, {"main_menu": object(), "commit_detail": commits.show_commit_detail})
    router.nav.set("commit_detail", {"sha": "abc123"})

    result = commits.show_commit_detail(router, router.view)

    assert shown == ["abc123"]
    assert result == "home"


def test_commit_detail_without_props(monkeypatch, tmp_path):
    monkeypatch.setattr(commits, "show_commit", lambda repo, sha: pytest.fail("git called"))
    _answer(monkeypatch, commits, "back")
    router = _router(tmp_path, {"main_menu": object(), "commit_detail": commits.show_commit_detail})
    router.nav.set("commit_detail")

    assert commits.show_commit_detail(router, router.view) == "back"


def test_probe_proxy_reachable(monkeypatch):
    class _Conn:
        def __enter__(self):
            return self

        def __exit__(self, *exc):
            return False

    monkeypatch.setattr(status.socket, "create_connection", lambda addr, timeout: _Conn())

    assert status.probe_proxy("127.0.0.1", 17246, 0.1) == (True, "")


def test_probe_proxy_unreachable(monkeypatch):
    def refuse(addr, timeout):
        raise ConnectionRefusedError(111, "Connection refused")

    monkeypatch.setattr(status.socket, "create_connection", refuse)

    online, detail = status.probe_proxy("127.0.0.1", 17246, 0.1)
    assert online is False
    assert "refused" in detail


def test_connection_status_remembers_result(monkeypatch, tmp_path):
    monkeypatch.setattr(status, "probe_proxy", lambda host, port, timeout: (False, "timed out"))
    _answer(monkeypatch, status, "again")
    router = _router(tmp_path, {"main_menu": object()})

    assert status.show_connection_status(router, router.view) is None
    assert router.state.last_proxy_status == "offline"


def test_connection_status_shows_offline_reason(monkeypatch, tmp_path):
    monkeypatch.setattr(status, "probe_proxy", lambda host, port, timeout: (False, "[Errno 111] refused"))
    _answer(monkeypatch, status, "back")
    router = _router(tmp_path, {"main_menu": object()})
    router.console = Console(record=True, width=100)

    assert status.show_connection_status(router, router.view) == "back"

    out = router.console.export_text()
    assert "offline" in out
    assert "127.0.0.1:17246" in out
    assert "[Errno 111] refused" in out
    assert "History depth" in out


def test_render_problem_prints_markup_literally():
    console = Console(record=True, width=100)

    render_problem(console, "Cannot show commit [x]", "fatal: bad object [x]", hint="Try again")

    out = console.export_text()
    assert "Cannot show commit [x]" in out
    assert "fatal: bad object [x]" in out
    assert "Try again" in out
