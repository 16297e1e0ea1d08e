"""
Single-delivery contract for external media and document pickers.
The picker collaborator calls `deliver` at most once per request; the view-model
callback runs exactly once on a non-empty delivery, or never.
"""

from typing import Callable, Generic, List, Sequence, TypeVar

from ..util.logging import logger

P = TypeVar("P")


class PickRequest(Generic[P]):
    """One invocation of an external picker."""

    def __init__(self, name: str, on_picked: Callable[[List[P]], None], allow_multiple: bool = True):
        self.name = name
        self.on_picked = on_picked
        self.allow_multiple = allow_multiple
        self._completed = False
        self._cancelled = False

    @property
    def completed(self) -> bool:
        return self._completed

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def deliver(self, payloads: Sequence[P]) -> bool:
        """
        Hand picked payloads to the view-model.

        Returns True when the callback ran. Repeat deliveries and deliveries
        after cancel are ignored. An empty delivery completes the request
        without calling back.
        """
        if self._completed:
            logger.log_pick(self.name, len(payloads), status="ignored")
            return False

        self._completed = True
        picked = list(payloads)
        if not picked:
            logger.log_pick(self.name, 0, status="empty")
            return False

        if not self.allow_multiple:
            picked = picked[:1]

        self.on_picked(picked)
        logger.log_pick(self.name, len(picked))
        return True

    def cancel(self) -> None:
        if self._completed:
            return
        self._completed = True
        self._cancelled = True
        logger.log_pick(self.name, 0, status="cancelled")
