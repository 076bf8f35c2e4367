"""Object store client library for incremental Markdown sync.

This package wraps the S3 API (via boto3) behind a small client that lists,
filters and downloads Markdown objects, translating every failure into an
empty result plus a user notice.
"""

from .errors import (
    SyncError,
    ObjectStoreError,
    ConfigurationError,
    TransportError,
)

__all__ = [
    "SyncError",
    "ObjectStoreError",
    "ConfigurationError",
    "TransportError",
]
