"""Connection status screen."""
from __future__ import annotations

import logging
import socket
from typing import TYPE_CHECKING

import questionary
from questionary import Choice
from rich.markup import escape
from rich.table import Table

from ..components import BRAND_STYLE, nav_choices, render_breadcrumbs
from ..router import register_screen

if TYPE_CHECKING:
    from ...view import View
    from ..router import Router

logger = logging.getLogger(__name__)


def probe_proxy(host: str, port: int, timeout: float) -> tuple[bool, str]:
    """Try a TCP connection to the peer proxy.

    Returns:
        (reachable, detail) where detail is the error text when unreachable
    """
    try:
        with socket.create_connection((host, port), timeout=timeout):
            return True, ""
    except OSError as e:
        logger.info("proxy %s:%s unreachable: %s", host, port, e)
        return False, str(e) or e.__class__.__name__


@register_screen("connection_status")
def show_connection_status(router: Router, view: View) -> str | None:
    """Show whether the peer proxy answers plus navigation diagnostics.

    Args:
        router: Router instance
        view: The view being rendered

    Returns:
        Navigation command
    """
    router.console.clear()
    render_breadcrumbs(router)

    s = router.settings
    address = f"{s.UPSTREAM_PROXY_HOST}:{s.UPSTREAM_PROXY_PORT}"
    online, detail = probe_proxy(s.UPSTREAM_PROXY_HOST, s.UPSTREAM_PROXY_PORT, s.UPSTREAM_PROXY_TIMEOUT)
    router.state.remember(last_proxy_status="online" if online else "offline")

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column(style="bold")
    table.add_column()
    if online:
        table.add_row("Proxy", f"[green]● online[/green]  [dim]{address}[/dim]")
    else:
        table.add_row("Proxy", f"[red]● offline[/red]  [dim]{address}[/dim]")
        table.add_row("Reason", f"[yellow]{escape(detail)}[/yellow]")
    table.add_row("History depth", f"[cyan]{router.nav.depth}[/cyan]")
    table.add_row("Screens visited", f"[cyan]{len(router.state.session_history)}[/cyan]")
    router.console.print(table)
    router.console.print()

    action = questionary.select(
        "What next?",
        choices=[
            Choice(title="Check again", value="again"),
            *nav_choices(),
        ],
        style=BRAND_STYLE,
    ).ask()

    if action == "again":
        return None  # Re-render in place
    elif action == "home":
        return "home"
    return "back"
