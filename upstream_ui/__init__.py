"""Reactive navigation engine for stacked terminal screens."""

from .history import HistoryStack
from .store import NotificationDepthError, ReadOnlyStore, Readable, Writable, writable
from .view import (
    IncompleteComponentMapError,
    MenuItem,
    Navigation,
    NavigationError,
    Props,
    UnknownViewError,
    View,
    create,
)

__all__ = [
    "HistoryStack",
    "IncompleteComponentMapError",
    "MenuItem",
    "Navigation",
    "NavigationError",
    "NotificationDepthError",
    "Props",
    "ReadOnlyStore",
    "Readable",
    "UnknownViewError",
    "View",
    "Writable",
    "create",
    "writable",
]
