"""Session state for remembering user choices across screens."""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class UIState:
    """UI session state - remembers user choices and visited screens.

    Lives for a single TUI session; navigation history itself is owned by
    the ``Navigation`` instance, this only records what was shown.
    """

    # Last selected values (smart defaults)
    last_commit: str | None = None
    last_proxy_status: str | None = None

    # Every view key delivered to the router, in order
    session_history: list[str] = field(default_factory=list)

    # Generic cross-screen data store
    data: dict = field(default_factory=dict)

    def remember(self, **kwargs) -> None:
        """Update state with new values.

        Args:
            **kwargs: Attributes to update (e.g., last_commit="3f2a9c1")

        Unknown attribute names are ignored.
        """
        for key, value in kwargs.items():
            if hasattr(self, key):
                setattr(self, key, value)

    def add_to_history(self, screen: str) -> None:
        """Record screen visit in session history.

        Args:
            screen: Screen key that was shown
        """
        self.session_history.append(screen)
