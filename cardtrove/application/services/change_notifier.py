"""Change notifier — in-process broadcaster for entity store mutations."""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class ChangeAction(str, Enum):
    """Kinds of mutation a store can publish."""

    SEEDED = "seeded"
    ADDED = "added"
    UPDATED = "updated"
    DELETED = "deleted"


@dataclass(frozen=True)
class StoreChange:
    """A single collection change event."""

    entity_type: str
    action: ChangeAction
    record_ids: tuple[str, ...]


ChangeCallback = Callable[[StoreChange], None]


class ChangeNotifier:
    """Manages subscribers and broadcasts store changes to them.

    Subscribers are called synchronously in subscription order. A subscriber
    that raises is logged and skipped; the remaining subscribers still run.
    """

    def __init__(self) -> None:
        self._subscribers: list[ChangeCallback] = []

    def subscribe(self, callback: ChangeCallback) -> Callable[[], None]:
        """Register ``callback`` and return a function that unsubscribes it."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def broadcast(self, change: StoreChange) -> None:
        """Deliver ``change`` to every current subscriber."""
        for callback in list(self._subscribers):
            try:
                callback(change)
            except Exception:
                logger.exception(
                    "Subscriber failed handling %s %s", change.entity_type, change.action.value
                )
