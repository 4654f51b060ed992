"""Screen modules for the TUI."""
from __future__ import annotations

# Import all screen modules to register them with the router
from . import (
    commits,
    help,
    main,
    status,
)

__all__ = [
    "commits",
    "help",
    "main",
    "status",
]
