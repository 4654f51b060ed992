"""Main router and screen registry for the TUI."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Callable, NamedTuple

from rich.markup import escape

from ..view import Navigation, Props, UnknownViewError, View, create
from .menu import ScreenKey

if TYPE_CHECKING:
    from rich.console import Console

    from ..settings import Settings
    from .state import UIState

logger = logging.getLogger(__name__)


class NavCommand(NamedTuple):
    key: str
    props: Props | None = None


_BACK_ALIASES = {"back", "← back", "< back", "go back", "previous", "prev", "b"}
_HOME_ALIASES = {"home", "main", "main menu", "h"}
_EXIT_ALIASES = {"exit", "quit", "q"}


class Router:
    """Main navigation loop driven by the navigation's current view.

    The router subscribes to ``nav.current`` and renders whatever view it was
    last handed. Screens return a navigation command which the router turns
    into ``set``/``back``/``home`` calls on the navigation; the resulting
    notification updates the view for the next iteration.
    """

    def __init__(
        self,
        console: Console,
        settings: Settings,
        state: UIState,
        nav: Navigation,
    ):
        """Initialize router with dependencies.

        Args:
            console: Rich Console for output
            settings: Application settings
            state: UI session state
            nav: Navigation whose views are rendered
        """
        self.console = console
        self.settings = settings
        self.state = state
        self.nav = nav
        self.view: View | None = None
        self._unsubscribe = nav.current.subscribe(self._on_view)

    def _on_view(self, view: View) -> None:
        self.view = view
        self.state.add_to_history(view.key)

    def close(self) -> None:
        """Stop listening to the navigation."""
        self._unsubscribe()

    def run(self) -> None:
        """Run the main navigation loop.

        Renders screens until "exit" is received.
        Handles navigation commands: exit, home, back, or a screen key.
        """
        try:
            while True:
                view = self.view
                try:
                    result = view.component(self, view)
                except KeyboardInterrupt:
                    # Graceful Ctrl+C handling
                    self.console.print("\n[dim]👋 Interrupted. Returning to main menu...[/]")
                    self.nav.home()
                    continue

                try:
                    command = self._normalize_nav_result(result)
                except ValueError:
                    logger.warning("screen %r returned malformed result %r", view.key, result)
                    self.console.print(
                        f"[yellow]Warning:[/yellow] Screen '{view.key}' returned "
                        f"{escape(repr(result))}, staying here"
                    )
                    continue
                if command is None:
                    # Stay on current screen
                    continue

                if command.key == "exit":
                    self.console.print("\n[dim]👋 Goodbye![/]")
                    break
                elif command.key == "home":
                    self.nav.home()
                elif command.key == "back":
                    if not self.nav.back():
                        self.nav.home()
                elif command.key == view.key and command.props == view.props:
                    # Returning the current view refreshes in place; pushing a
                    # duplicate would make Back appear broken.
                    continue
                else:
                    self._go(command)
        finally:
            self.close()

    def _go(self, command: NavCommand) -> None:
        try:
            self.nav.set(command.key, command.props)
        except UnknownViewError:
            self.console.print(
                f"[yellow]Warning:[/yellow] Unknown screen '{command.key}', staying here"
            )

    @staticmethod
    def _normalize_nav_result(result: Any) -> NavCommand | None:
        """Normalize a screen's return value to a navigation command.

        Screens return None (stay), a key, or a ``(key, props)`` pair. Some
        prompts may accidentally return rendered labels such as "← Back"
        instead of the internal value "back".
        """
        if result is None:
            return None
        if isinstance(result, tuple):
            if len(result) != 2:
                raise ValueError(f"expected a (key, props) pair, got {len(result)} items")
            key, props = result
        else:
            key, props = result, None
        s = str(key).strip()
        if not s:
            return None
        lowered = s.lower()
        if lowered in _BACK_ALIASES:
            return NavCommand("back")
        if lowered in _HOME_ALIASES:
            return NavCommand("home")
        if lowered in _EXIT_ALIASES:
            return NavCommand("exit")
        return NavCommand(s, props)


Screen = Callable[[Router, View], Any]

# Screen registry - maps screen keys to render functions.
# Populated by importing ``upstream_ui.tui.screens``.
SCREENS: dict[str, Screen] = {}


def register_screen(screen_id: str):
    """Decorator to register a screen function.

    Usage:
        @register_screen("main_menu")
        def show_main_menu(router: Router, view: View) -> str | None:
            ...
    """
    def decorator(fn: Screen):
        SCREENS[screen_id] = fn
        return fn
    return decorator


def build_navigation(settings: Settings, screens: dict[str, Screen] | None = None) -> Navigation:
    """Create the navigation over the registered screens.

    Args:
        settings: Application settings (root screen and depth limits)
        screens: Component map to use instead of the registry

    Raises:
        IncompleteComponentMapError: If a known screen key has no registered screen
    """
    keys = None
    if screens is None:
        screens = SCREENS
        keys = ScreenKey
    nav = create(
        screens,
        settings.UPSTREAM_INITIAL_SCREEN,
        keys=keys,
        max_depth=settings.UPSTREAM_NAV_MAX_DEPTH,
        max_notify_depth=settings.UPSTREAM_NAV_MAX_NOTIFY_DEPTH,
    )
    logger.debug("navigation ready over %d screens", len(nav.keys))
    return nav
