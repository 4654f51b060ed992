"""Commit history and commit detail screens."""
from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

import questionary
from questionary import Choice
from rich.panel import Panel
from rich.table import Table

from ..components import BRAND_STYLE, nav_choices, render_breadcrumbs, render_problem
from ..router import register_screen

if TYPE_CHECKING:
    from ...view import View
    from ..router import Router

_FIELD_SEP = "\x1f"


class GitError(RuntimeError):
    """git could not be run or exited with an error."""


@dataclass(frozen=True)
class Commit:
    sha: str
    author: str
    when: str
    subject: str


def _git(repo_path: Path, *args: str) -> str:
    try:
        proc = subprocess.run(
            ["git", "-C", str(repo_path), *args],
            capture_output=True,
            text=True,
            check=True,
        )
    except FileNotFoundError as e:
        raise GitError("git executable not found") from e
    except subprocess.CalledProcessError as e:
        raise GitError((e.stderr or "").strip() or f"git exited with {e.returncode}") from e
    return proc.stdout


def load_commits(repo_path: Path, limit: int = 25) -> list[Commit]:
    """Read the latest commits of ``repo_path``, newest first.

    Args:
        repo_path: Repository (or any directory inside it)
        limit: Max commits, 0 for all

    Raises:
        GitError: If git fails, e.g. outside a repository
    """
    args = ["log", f"--format=%h{_FIELD_SEP}%an{_FIELD_SEP}%ar{_FIELD_SEP}%s"]
    if limit:
        args.append(f"-n{limit}")
    commits = []
    for line in _git(repo_path, *args).splitlines():
        parts = line.split(_FIELD_SEP, 3)
        if len(parts) == 4:
            commits.append(Commit(*parts))
    return commits


def show_commit(repo_path: Path, sha: str) -> str:
    """Return ``git show --stat`` output for one commit."""
    return _git(repo_path, "show", "--stat", "--format=medium", sha)


@register_screen("commit_history")
def show_commit_history(router: Router, view: View):
    """List recent commits; picking one opens its detail view.

    Args:
        router: Router instance
        view: The view being rendered

    Returns:
        Navigation command, ``("commit_detail", {"sha": ...})`` for a selection
    """
    router.console.clear()
    render_breadcrumbs(router)

    repo = router.settings.UPSTREAM_REPO_PATH
    try:
        commits = load_commits(repo, router.settings.UPSTREAM_COMMIT_LIMIT)
    except GitError as e:
        render_problem(router.console, "Cannot read commit history", str(e),
                       hint="Set UPSTREAM_REPO_PATH to a git repository")
        action = questionary.select(
            "", choices=nav_choices(include_separator=False), style=BRAND_STYLE
        ).ask()
        return "home" if action == "home" else "back"

    if not commits:
        router.console.print(f"\n[yellow]No commits in[/yellow] {repo}\n")
    else:
        table = Table(title=f"[bold]Commits: [cyan]{repo}[/cyan][/bold]")
        table.add_column("SHA", style="cyan", no_wrap=True)
        table.add_column("Author", style="magenta", max_width=20)
        table.add_column("When", style="dim")
        table.add_column("Subject", max_width=60)
        for c in commits:
            table.add_row(c.sha, c.author[:20], c.when, c.subject[:60])
        router.console.print(table)
        router.console.print()

    choices: list = [
        Choice(title=f"{c.sha}  {c.subject[:50]}", value=c.sha) for c in commits
    ]
    choices.extend(nav_choices(include_separator=bool(choices)))

    action = questionary.select("Open a commit", choices=choices, style=BRAND_STYLE).ask()

    if action is None or action == "back":
        return "back"
    if action == "home":
        return "home"
    router.state.remember(last_commit=action)
    return "commit_detail", {"sha": action}


@register_screen("commit_detail")
def show_commit_detail(router: Router, view: View) -> str | None:
    """Show one commit, identified by the ``sha`` property of the view."""
    router.console.clear()
    render_breadcrumbs(router)

    sha = (view.props or {}).get("sha")
    if not sha:
        render_problem(router.console, "No commit selected", "This screen needs a commit SHA",
                       hint="Open a commit from Commit History")
    else:
        try:
            output = show_commit(router.settings.UPSTREAM_REPO_PATH, str(sha))
        except GitError as e:
            render_problem(router.console, f"Cannot show commit {sha}", str(e))
        else:
            router.console.print(Panel(output.rstrip(), title=f"Commit {sha}", border_style="blue"))
            router.console.print()

    action = questionary.select(
        "",
        choices=nav_choices(include_separator=False),
        style=BRAND_STYLE,
    ).ask()

    if action == "home":
        return "home"
    return "back"
