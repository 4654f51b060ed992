"""Menu entries and breadcrumb labels for the application's screens."""
from __future__ import annotations

from typing import Literal

from ..view import MenuItem

ScreenKey = Literal[
    "main_menu",
    "connection_status",
    "commit_history",
    "commit_detail",
    "help",
]

MAIN_MENU: list[MenuItem] = [
    MenuItem(icon="📡", key="connection_status", title="Connection Status"),
    MenuItem(icon="📜", key="commit_history", title="Commit History"),
    MenuItem(icon="❓", key="help", title="Help"),
]

# Screen key to human-readable label mapping
SCREEN_LABELS: dict[str, str] = {
    "main_menu": "Home",
    "commit_detail": "Commit",
    **{item.key: item.title for item in MAIN_MENU},
}
