"""Exceptions raised inside a sync pass."""

from src.object_store.errors import SyncError


class PassFatalError(SyncError):
    """Raised when a sync pass cannot continue (e.g. sync root creation failed).

    Caught at the pass boundary; the pass reports failure and the watermark
    is left as it was.
    """

    def __init__(self, message: str):
        super().__init__(message)
