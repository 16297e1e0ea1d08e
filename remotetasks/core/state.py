"""
Screen-scoped state holders.
Plain get/set/subscribe objects that a rendering layer observes; nothing here
knows about any UI toolkit. State is discarded with the owning view-model.
"""

from typing import Any, Callable, Dict, Generic, List, Optional, TypeVar

from ..util.logging import logger

T = TypeVar("T")


class ObservableValue(Generic[T]):
    """
    A single value with change notification.

    Subscribers are called synchronously, in subscription order, with the new
    value whenever `set` changes it. Setting an equal value is silent.
    """

    def __init__(self, initial: T = None):
        self._value = initial
        self._subscribers: List[Callable[[T], None]] = []
        self._stats = {
            "updates": 0,
            "notifications": 0,
        }

    def get(self) -> T:
        return self._value

    def set(self, value: T) -> None:
        if value == self._value:
            return
        self._value = value
        self._stats["updates"] += 1
        self._notify()

    def subscribe(self, callback: Callable[[T], None]) -> Callable[[], None]:
        """Register a change callback; returns a function that unsubscribes it."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _notify(self) -> None:
        for callback in list(self._subscribers):
            callback(self._value)
            self._stats["notifications"] += 1

    def get_stats(self) -> Dict[str, Any]:
        """Get usage statistics."""
        stats = self._stats.copy()
        stats["subscribers"] = len(self._subscribers)
        return stats


class SelectionState(Generic[T]):
    """
    Zero-or-one selected record.

    `select` replaces any prior selection; `clear` returns to the empty state.
    The record is not checked against any store.
    """

    def __init__(self, scope: str = "selection"):
        self.scope = scope
        self._value: ObservableValue[Optional[T]] = ObservableValue(None)

    def select(self, record: T) -> None:
        self._value.set(record)
        logger.log_selection(self.scope, getattr(record, "id", None) or repr(record))

    def clear(self) -> None:
        if self._value.get() is None:
            return
        self._value.set(None)
        logger.log_selection(self.scope)

    def current(self) -> Optional[T]:
        return self._value.get()

    @property
    def has_selection(self) -> bool:
        return self._value.get() is not None

    def subscribe(self, callback: Callable[[Optional[T]], None]) -> Callable[[], None]:
        return self._value.subscribe(callback)
