"""Typed exception hierarchy for object store errors.

This module defines the root SyncError used across the whole tool and the
errors raised by the object store client. ConfigurationError and
TransportError never escape the client's public operations: they are
translated into empty results and a user notice at the operation boundary.
"""

from typing import List, Optional


class SyncError(Exception):
    """Base exception for all s3-markdown-sync errors.

    Use this to catch any application-level error from the sync tool.
    """
    pass


class ObjectStoreError(SyncError):
    """Base exception for all object store errors."""
    pass


class ConfigurationError(ObjectStoreError):
    """Raised when bucket, endpoint or credentials are not configured."""

    def __init__(self, missing: List[str]):
        super().__init__(
            f"Object store is not configured (missing: {', '.join(missing)})"
        )
        self.missing = missing


class TransportError(ObjectStoreError):
    """Raised when a listing or fetch against the object store fails."""

    def __init__(self, operation: str, reason: Optional[str] = None):
        message = f"Object store operation '{operation}' failed"
        if reason:
            message += f": {reason}"
        super().__init__(message)
        self.operation = operation
        self.reason = reason
