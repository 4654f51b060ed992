"""Help and shortcuts screen."""
from __future__ import annotations

from typing import TYPE_CHECKING

import questionary
from rich.panel import Panel

from ..components import BRAND_STYLE, nav_choices, render_breadcrumbs
from ..router import register_screen

if TYPE_CHECKING:
    from ...view import View
    from ..router import Router


@register_screen("help")
def show_help(router: Router, view: View) -> str | None:
    """Help screen with keyboard shortcuts and command overview.

    Args:
        router: Router instance
        view: The view being rendered

    Returns:
        Navigation command
    """
    router.console.clear()
    render_breadcrumbs(router)

    content = """[bold]Navigation[/bold]
  ↑/↓       Navigate menus
  Enter     Select option
  Ctrl+C    Return to the main menu (from anywhere)

[bold]Screens[/bold]
  Connection Status  →  Is the peer proxy reachable?
  Commit History     →  Latest commits of the configured repository

[bold]Icons[/bold]
  ✓   Success / reachable
  ✗   Error / unreachable

[bold]Command Line Usage[/bold]
  [cyan]upstream-ui[/cyan]            Interactive TUI
  [cyan]upstream-ui screens[/cyan]    List screens
  [cyan]upstream-ui config[/cyan]     Show effective settings
"""

    router.console.print(Panel.fit(content, title="Help", border_style="blue"))
    router.console.print()

    action = questionary.select(
        "",
        choices=nav_choices(include_separator=False),
        style=BRAND_STYLE,
    ).ask()

    if action == "home":
        return "home"
    return "back"
