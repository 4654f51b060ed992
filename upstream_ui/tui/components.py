"""Reusable UI components for the TUI."""
from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

import questionary
from questionary import Choice, Separator
from rich.markup import escape
from rich.panel import Panel

from .menu import SCREEN_LABELS

if TYPE_CHECKING:
    from rich.console import Console

    from ..settings import Settings
    from ..view import MenuItem
    from .router import Router


# ═══════════════════════════════════════════════════════════════════════════════
# BRAND STYLING
# ═══════════════════════════════════════════════════════════════════════════════

BRAND_STYLE = questionary.Style([
    ("qmark", "fg:#5555ff bold"),          # Violet accent
    ("question", "bold"),
    ("answer", "fg:#9999ff bold"),
    ("highlighted", "fg:#5555ff bold"),    # Highlighted item
    ("pointer", "fg:#5555ff bold"),        # Arrow pointer
    ("selected", "fg:#9999ff"),            # Selected item
])


# ═══════════════════════════════════════════════════════════════════════════════
# NAVIGATION HELPERS
# ═══════════════════════════════════════════════════════════════════════════════

def nav_choices(include_separator: bool = True) -> list:
    """Back and Home entries shared by every screen but the root."""
    back_home = [Choice(title="← Back", value="back"), Choice(title="Home", value="home")]
    return [Separator(), *back_home] if include_separator else back_home


def menu_choices(items: Iterable[MenuItem]) -> list[Choice]:
    """Turn menu descriptors into select choices whose value is the screen key."""
    return [Choice(title=f"{item.icon}  {item.title}", value=item.key) for item in items]


# ═══════════════════════════════════════════════════════════════════════════════
# WELCOME BANNER
# ═══════════════════════════════════════════════════════════════════════════════

_BANNER_ART = """\
[bold blue]╔═══════════════════════════════════════════════════╗
║                                                   ║
║     ╦ ╦╔═╗╔═╗╔╦╗╦═╗╔═╗╔═╗╔╦╗                      ║
║     ║ ║╠═╝╚═╗ ║ ╠╦╝║╣ ╠═╣║║║                      ║
║     ╚═╝╩  ╚═╝ ╩ ╩╚═╚═╝╩ ╩╩ ╩                      ║
║                                                   ║
║     [white]Terminal client for peer-to-peer code[/white]         ║
╚═══════════════════════════════════════════════════╝[/bold blue]"""


def render_welcome_banner(console: Console) -> None:
    """Print the banner shown above the root menu."""
    console.print(_BANNER_ART)
    console.print()


# ═══════════════════════════════════════════════════════════════════════════════
# HEADER (context bar below banner)
# ═══════════════════════════════════════════════════════════════════════════════

def render_header(console: Console, settings: Settings) -> None:
    """Render app header with proxy and repository context.

    Args:
        console: Rich Console for output
        settings: Application settings
    """
    content = (
        f"  [bold]Proxy[/bold] [dim]{settings.UPSTREAM_PROXY_HOST}:{settings.UPSTREAM_PROXY_PORT}[/dim]  "
        f"[bold]Repo[/bold] [dim]{settings.UPSTREAM_REPO_PATH}[/dim]"
    )
    console.print(Panel.fit(content, border_style="dim"))
    console.print()


def render_breadcrumbs(router: Router) -> None:
    """Print the trail of screens on the navigation stack, root first."""
    breadcrumbs = router.nav.breadcrumbs(SCREEN_LABELS)
    router.console.print(f"[dim]{breadcrumbs}[/dim]\n")


def render_problem(console: Console, headline: str, detail: str, hint: str | None = None) -> None:
    """Print a red panel for an operation a screen could not complete."""
    body = f"[bold red]✗ {escape(headline)}[/bold red]\n\n{escape(detail)}"
    if hint:
        body += f"\n\n[dim]{escape(hint)}[/dim]"
    console.print(Panel.fit(body, border_style="red"))
    console.print()
