"""Single-value reactive store with subscribe-and-replay semantics."""
from __future__ import annotations

from typing import Callable, Generic, Protocol, TypeVar

T =TypeVar("T")
T_co = TypeVar("T_co", covariant=True)

Subscriber = Callable[[T], None]
Unsubscribe = Callable[[], None]

DEFAULT_MAX_NOTIFY_DEPTH = 32


class NotificationDepthError(RuntimeError):
    """Raised when subscribers keep re-entering ``set`` past the allowed depth."""


class Readable(Protocol[T_co]):
    """Anything that can be subscribed to."""

    def subscribe(self, callback: Callable[[T_co], None]) -> Unsubscribe:
        ...


class _Subscription:
    __slots__ = ("callback", "active")

    def __init__(self, callback: Callable) -> None:
        self.callback = callback
        self.active = True


class Writable(Generic[T]):
    """Holds one value and pushes every change to its subscribers.

    Subscribers are called synchronously, in registration order. A new
    subscriber is called once with the current value before ``subscribe``
    returns, so it never has to ask for the value separately.

    A subscriber that calls ``set`` on the same store queues a second round
    of notifications, delivered before the outermost ``set`` returns. At
    most ``max_depth`` such nested sets may chain within one dispatch.
    """

    def __init__(self, initial: T, max_depth: int = DEFAULT_MAX_NOTIFY_DEPTH):
        if max_depth < 1:
            raise ValueError("max_depth must be at least 1")
        self._value = initial
        self._subscriptions: list[_Subscription] = []
        self._queue: list[tuple[_Subscription, T]] | None = None
        self._nested = 0
        self.max_depth = max_depth

    def subscribe(self, callback: Subscriber[T]) -> Unsubscribe:
        """Register ``callback`` and replay the current value to it.

        Args:
            callback: Called with the current value now and with every new value later

        Returns:
            A handle that deregisters the callback; calling it again does nothing
        """
        sub = _Subscription(callback)
        self._subscriptions.append(sub)

        def unsubscribe() -> None:
            if not sub.active:
                return
            sub.active = False
            self._subscriptions.remove(sub)

        try:
            callback(self._value)
        except BaseException:
            unsubscribe()
            raise
        return unsubscribe

    def set(self, value: T) -> None:
        """Store ``value`` and notify every current subscriber.

        Called from inside a subscriber, the notifications are queued behind
        the ones still pending, so every subscriber sees the values in the
        order they were set and ends on the latest one.
        """
        self._value = value
        deliveries = [(sub, value) for sub in self._subscriptions]
        if self._queue is not None:
            self._nested += 1
            if self._nested >= self.max_depth:
                raise NotificationDepthError(
                    f"store notifications nested deeper than {self.max_depth} levels"
                )
            self._queue.extend(deliveries)
            return

        self._queue = deliveries
        self._nested = 0
        try:
            i = 0
            while i < len(self._queue):
                sub, pending = self._queue[i]
                i += 1
                # Skip subscribers removed earlier in this same dispatch.
                if sub.active:
                    sub.callback(pending)
        finally:
            self._queue = None
            self._nested = 0

    def update(self, fn: Callable[[T], T]) -> None:
        self.set(fn(self._value))

    def get(self) -> T:
        return self._value

    def readonly(self) -> ReadOnlyStore[T]:
        """Return a view of this store without the mutators."""
        return ReadOnlyStore(self)

    @property
    def subscriber_count(self) -> int:
        return len(self._subscriptions)


class ReadOnlyStore(Generic[T]):
    """Subscribe/get facade over a ``Writable`` owned by someone else."""

    __slots__ = ("_store",)

    def __init__(self, store: Writable[T]):
        self._store = store

    def subscribe(self, callback: Subscriber[T]) -> Unsubscribe:
        return self._store.subscribe(callback)

    def get(self) -> T:
        return self._store.get()

    @property
    def subscriber_count(self) -> int:
        return self._store.subscriber_count


def writable(initial: T, max_depth: int = DEFAULT_MAX_NOTIFY_DEPTH) -> Writable[T]:
    """Create a store holding ``initial``."""
    return Writable(initial, max_depth=max_depth)


def get(store: Readable[T]) -> T:
    """Read the current value of any readable by subscribing once."""
    box: list = []
    unsubscribe = store.subscribe(box.append)
    unsubscribe()
    return box[0]
