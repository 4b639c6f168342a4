"""Hooks that run once the request's transaction is committed."""

from collections.abc import Callable
import sys

import logfire


class AfterCommit:
    """Collects callbacks to run after a successful commit.

    Callbacks never run if the transaction is rolled back. They must not
    block: anything slow should be scheduled, not awaited.
    """

    def __init__(self) -> None:
        self._callbacks: list[Callable[[], None]] = []

    def register(self, callback: Callable[[], None]) -> None:
        """Queue a callback for after the commit."""
        self._callbacks.append(callback)

    @property
    def pending(self) -> int:
        return len(self._callbacks)

    def fire(self) -> None:
        """Run queued callbacks.

        The commit already happened, so failures are only logged.
        """
        callbacks, self._callbacks = self._callbacks, []
        for callback in callbacks:
            try:
                callback()
            except Exception as e:
                logfire.error(
                    "After-commit callback failed",
                    error=str(e),
                    _exc_info=sys.exc_info(),
                )

    def discard(self) -> None:
        """Drop queued callbacks after a rollback."""
        if self._callbacks:
            logfire.info("Discarding after-commit callbacks", count=len(self._callbacks))
        self._callbacks = []
