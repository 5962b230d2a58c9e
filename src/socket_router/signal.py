"""Finish signal - narrow completion notification for a reply.

Listeners are plain zero-argument callables invoked synchronously,
in registration order, when the reply has been emitted.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)

# Type for finish listeners
FinishListener = Callable[[], None]


class FinishSignal:
    """In-process listener registry for the single "finish" signal.

    Unlike the async event bus, firing never suspends: every listener
    runs before fire() returns.
    """

    def __init__(self) -> None:
        self._listeners: list[FinishListener] = []

    def __len__(self) -> int:
        return len(self._listeners)

    def connect(self, listener: FinishListener) -> Callable[[], None]:
        """Register a listener.

        Args:
            listener: Callable invoked with no arguments on fire()

        Returns:
            Unsubscribe function
        """
        self._listeners.append(listener)

        def disconnect() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return disconnect

    def fire(self) -> int:
        """Invoke all registered listeners.

        Returns:
            Number of listeners invoked
        """
        # Copy so listeners may disconnect themselves while firing
        listeners = list(self._listeners)
        for listener in listeners:
            try:
                listener()
            except Exception:
                logger.exception(f"Error in finish listener {listener!r}")
        return len(listeners)
