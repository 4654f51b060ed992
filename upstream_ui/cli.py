from __future__ import annotations

import logging

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .logging import setup_logging
from .settings import Settings, load_settings
from .view import NavigationError

app = typer.Typer(
    add_completion=False,
    help="upstream_ui: terminal client with stacked screens",
    rich_markup_mode="rich",
)
console = Console()
logger = logging.getLogger(__name__)


def _settings_or_exit() -> Settings:
    try:
        return load_settings()
    except ValidationError as e:
        console.print(f"[red]Invalid configuration[/red]\n{escape(str(e))}")
        raise typer.Exit(code=1)


# ═══════════════════════════════════════════════════════════════════════════════
# MAIN CALLBACK
# ═══════════════════════════════════════════════════════════════════════════════

@app.callback(invoke_without_command=True)
def _root(ctx: typer.Context):
    """
    [bold]upstream_ui[/bold]: browse peer status and commit history.

    [dim]Run without arguments to launch the interactive menu.[/dim]
    """
    if ctx.invoked_subcommand is None:
        _interactive_menu()
        raise typer.Exit(code=0)


# ═══════════════════════════════════════════════════════════════════════════════
# COMMANDS
# ═══════════════════════════════════════════════════════════════════════════════

@app.command("screens", help="List the screens the navigation can show")
def screens() -> None:
    from .tui import screens as _screens  # noqa: F401
    from .tui.menu import SCREEN_LABELS
    from .tui.router import SCREENS

    table = Table(title="[bold]Screens[/bold]")
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Title")
    for key in sorted(SCREENS):
        table.add_row(key, SCREEN_LABELS.get(key, key))
    console.print(table)


@app.command("config", help="Show the effective settings")
def config() -> None:
    s = _settings_or_exit()
    table = Table(title="[bold]Settings[/bold]", show_header=False)
    table.add_column("Key", style="bold")
    table.add_column("Value", style="cyan")
    for key, value in s.model_dump().items():
        table.add_row(key, str(value))
    console.print(table)


# ═══════════════════════════════════════════════════════════════════════════════
# INTERACTIVE MENU
# ═══════════════════════════════════════════════════════════════════════════════

def _interactive_menu() -> None:
    """Launch the TUI over a fresh navigation."""
    from .tui.router import Router, build_navigation
    from .tui.state import UIState
    # Import screens to register them
    from .tui import screens as _screens  # noqa: F401

    settings = _settings_or_exit()
    log_file = setup_logging(settings)
    logger.info("starting TUI (log=%s)", log_file)

    state = UIState()
    try:
        nav = build_navigation(settings)
    except NavigationError as e:
        logger.error("cannot build navigation: %s", e)
        console.print(f"[red]Invalid navigation setup:[/red] {escape(str(e))}")
        raise typer.Exit(code=1)
    router = Router(
        console=console,
        settings=settings,
        state=state,
        nav=nav,
    )

    try:
        router.run()
    except KeyboardInterrupt:
        console.print("\n[dim]👋 Interrupted. Goodbye![/]")


def main():
    app()
