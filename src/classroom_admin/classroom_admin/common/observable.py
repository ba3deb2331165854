from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List

from ..core.enums import ChangeKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChangeEvent:
    kind: ChangeKind
    record_id: str


Listener = Callable[[ChangeEvent], None]


class Observable:
    """Observer Pattern: synchronous push notification to subscribers.

    Listeners run in subscription order before the mutating call returns.
    """

    def __init__(self) -> None:
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, event: ChangeEvent) -> None:
        # Copy so a listener may unsubscribe while being notified.
        for listener in list(self._listeners):
            listener(event)


def log_changes(event: ChangeEvent) -> None:
    logger.debug("change %s id=%s", event.kind.value, event.record_id)
