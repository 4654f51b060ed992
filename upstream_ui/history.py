"""Non-empty LIFO history with a reactive top-of-stack."""
from __future__ import annotations

import logging
from typing import Generic, TypeVar

from .store import DEFAULT_MAX_NOTIFY_DEPTH, ReadOnlyStore, Writable

logger = logging.getLogger(__name__)

T = TypeVar("T")


class HistoryStack(Generic[T]):
    """Stack of states whose bottom entry (the root) is fixed at creation.

    Follows a push-on-enter / pop-on-back model:
    - ``push`` makes a new entry current
    - ``pop`` returns to the previous entry; at the root it does nothing
    - ``reset`` drops everything above the root

    Every change is published through ``current``.

    With ``max_depth`` set, pushing onto a full stack evicts the oldest
    entry above the root first. Zero means no limit; the caller owns
    memory growth in that case.
    """

    def __init__(
        self,
        initial: T,
        max_depth: int = 0,
        max_notify_depth: int = DEFAULT_MAX_NOTIFY_DEPTH,
    ):
        if max_depth < 0 or max_depth == 1:
            raise ValueError("max_depth must be 0 (unbounded) or at least 2")
        self._items: list[T] = [initial]
        self._store: Writable[T] = Writable(initial, max_depth=max_notify_depth)
        self._current = self._store.readonly()
        self.max_depth = max_depth

    @property
    def current(self) -> ReadOnlyStore[T]:
        return self._current

    def push(self, item: T) -> None:
        """Make ``item`` the new top and notify subscribers.

        Args:
            item: State to navigate to
        """
        if self.max_depth and len(self._items) >= self.max_depth:
            evicted = self._items.pop(1)
            logger.debug("history full (%d), evicted %r", self.max_depth, evicted)
        self._items.append(item)
        logger.debug("push %r (depth=%d)", item, len(self._items))
        self._store.set(item)

    def pop(self) -> T | None:
        """Drop the top entry and notify with the one below it.

        Returns:
            The removed entry, or None if only the root was left
        """
        if len(self._items) <= 1:
            logger.debug("pop at root ignored")
            return None
        removed = self._items.pop()
        logger.debug("pop %r (depth=%d)", removed, len(self._items))
        self._store.set(self._items[-1])
        return removed

    def reset(self) -> None:
        """Truncate to the root entry and notify."""
        del self._items[1:]
        self._store.set(self._items[0])

    @property
    def root(self) -> T:
        return self._items[0]

    @property
    def top(self) -> T:
        return self._items[-1]

    @property
    def entries(self) -> tuple[T, ...]:
        return tuple(self._items)

    @property
    def depth(self) -> int:
        return len(self._items)

    @property
    def can_pop(self) -> bool:
        return len(self._items) > 1

    def __len__(self) -> int:
        return len(self._items)


def create(
    initial: T,
    max_depth: int = 0,
    max_notify_depth: int = DEFAULT_MAX_NOTIFY_DEPTH,
) -> HistoryStack[T]:
    """Create a history stack seeded with ``initial``."""
    return HistoryStack(initial, max_depth=max_depth, max_notify_depth=max_notify_depth)
