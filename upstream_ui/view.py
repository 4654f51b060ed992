"""Navigation between the application's named views.

A ``Navigation`` is a ``HistoryStack`` of ``View`` entries. Each view pairs a
screen key with the component registered for that key and an optional bag
of properties. The component map is fixed at construction and must cover
every key the navigation accepts.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Iterable, Literal, Mapping, Optional, Union, get_args, get_origin

from .history import HistoryStack
from .store import DEFAULT_MAX_NOTIFY_DEPTH, ReadOnlyStore

logger = logging.getLogger(__name__)

# Property values are either the literal 0 or a string.
PropValue = Union[Literal[0], str]
Props = Mapping[str, PropValue]


class NavigationError(Exception):
    """Base class for navigation failures."""


class UnknownViewError(NavigationError, KeyError):
    """A key outside the navigation's domain was requested."""

    def __init__(self, key: Any):
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"unknown navigation key: {self.key!r}"


class IncompleteComponentMapError(NavigationError, ValueError):
    """The component map does not cover every declared key."""

    def __init__(self, missing: Iterable[str]):
        self.missing = tuple(sorted(missing))
        super().__init__(f"component map has no entry for: {', '.join(self.missing)}")


@dataclass(frozen=True)
class View:
    """One entry of the navigation history."""

    component: Any
    key: str
    props: Optional[Props] = None


@dataclass(frozen=True)
class MenuItem:
    """Display descriptor for a menu entry that navigates to ``key``."""

    icon: Any
    key: str
    title: str


def _declared_keys(keys: Any) -> frozenset[str]:
    if isinstance(keys, type) and issubclass(keys, Enum):
        return frozenset(member.value for member in keys)
    if get_origin(keys) is Literal:
        return frozenset(get_args(keys))
    if isinstance(keys, str):
        raise TypeError("keys must be an iterable of keys, not a single string")
    return frozenset(keys)


class Navigation:
    """Typed facade over a history of views.

    Usage:
        nav = create({"main_menu": show_main_menu, "help": show_help}, "main_menu")
        unsubscribe = nav.current.subscribe(render)
        nav.set("help")
        nav.back()
    """

    def __init__(
        self,
        component_map: Mapping[str, Any],
        initial: str,
        keys: Any = None,
        max_depth: int = 0,
        max_notify_depth: int = DEFAULT_MAX_NOTIFY_DEPTH,
    ):
        present = {k for k, component in component_map.items() if component is not None}
        if keys is not None:
            domain = _declared_keys(keys)
            missing = domain - present
            if missing:
                raise IncompleteComponentMapError(missing)
        else:
            domain = frozenset(present)

        self._components: Mapping[str, Any] = MappingProxyType(
            {k: component_map[k] for k in domain}
        )
        self._keys = domain
        root = self._view(initial, None)
        self._history: HistoryStack[View] = HistoryStack(
            root, max_depth=max_depth, max_notify_depth=max_notify_depth
        )

    def _view(self, key: str, props: Props | None) -> View:
        if key not in self._components:
            logger.warning("rejected navigation to unknown key %r", key)
            raise UnknownViewError(key)
        if props is not None:
            props = MappingProxyType(dict(props))
        return View(component=self._components[key], key=key, props=props)

    @property
    def current(self) -> ReadOnlyStore[View]:
        return self._history.current

    def set(self, key: str, props: Props | None = None) -> None:
        """Navigate forward to ``key``.

        Args:
            key: Screen key; must be one of ``keys``
            props: Optional properties handed to the screen

        Raises:
            UnknownViewError: If ``key`` has no registered component
        """
        self._history.push(self._view(key, props))

    def back(self) -> bool:
        """Return to the previous view.

        Returns:
            True if the history moved, False when already at the root
        """
        return self._history.pop() is not None

    def home(self) -> None:
        """Drop every view above the root."""
        self._history.reset()

    def component_for(self, key: str) -> Any:
        try:
            return self._components[key]
        except KeyError:
            raise UnknownViewError(key) from None

    @property
    def view(self) -> View:
        return self._history.top

    @property
    def history(self) -> tuple[View, ...]:
        return self._history.entries

    @property
    def depth(self) -> int:
        return self._history.depth

    @property
    def can_go_back(self) -> bool:
        return self._history.can_pop

    @property
    def keys(self) -> frozenset[str]:
        return self._keys

    def breadcrumbs(self, labels: Mapping[str, str] | None = None) -> str:
        """Render the history as a path like ``Home > Commits > Commit``.

        Args:
            labels: Human-readable names per key; unknown keys show as-is
        """
        labels = labels or {}
        return " > ".join(labels.get(v.key, v.key) for v in self._history.entries)


def create(
    component_map: Mapping[str, Any],
    initial: str,
    keys: Any = None,
    max_depth: int = 0,
    max_notify_depth: int = DEFAULT_MAX_NOTIFY_DEPTH,
) -> Navigation:
    """Create a navigation rooted at ``initial``.

    Args:
        component_map: Component for every key; must be total over ``keys``
        initial: Key of the root view
        keys: Declared key domain (iterable, ``Enum`` subclass or ``Literal[...]``);
            defaults to the map's own keys
        max_depth: History cap, 0 for unbounded
        max_notify_depth: Bound on re-entrant notifications

    Raises:
        IncompleteComponentMapError: If ``keys`` names a key without a component
        UnknownViewError: If ``initial`` is not a known key
    """
    return Navigation(
        component_map,
        initial,
        keys=keys,
        max_depth=max_depth,
        max_notify_depth=max_notify_depth,
    )
