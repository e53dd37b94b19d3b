"""Cooperative cancellation for workflow runs."""

import threading

from .exceptions import WorkflowCancelledError


class CancellationToken:
    """Signal shared between a caller and a running workflow.

    The workflow checks the token before every step; a step already waiting
    on its provider is not interrupted and is bounded by the step timeout.
    """

    def __init__(self):
        self._event = threading.Event()
        self.reason: str | None = None

    def cancel(self, reason: str | None = None) -> None:
        """Request cancellation."""
        self.reason = reason
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    def raise_if_cancelled(self) -> None:
        """Raise WorkflowCancelledError if cancellation was requested."""
        if self._event.is_set():
            raise WorkflowCancelledError(self.reason or "Workflow cancelled")
