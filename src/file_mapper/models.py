"""Data models for file mapper.

This module defines the configuration record and the pass-scoped records
that flow from the object store listing to the local tree.
All models use dataclasses for clean, type-safe data structures.
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@dataclass(frozen=True)
class SyncConfig:
    """Persisted sync configuration.

    Immutable for the duration of a pass. Updates produce a new instance
    (see ConfigLoader.apply_update) which the owning service swaps in and
    persists.

    Attributes:
        bucket_name: Remote bucket holding the documents
        endpoint: Endpoint URL of the S3-compatible service
        region: Region name (empty falls back to us-east-1 at connect time)
        access_key: Access key ID (empty falls back to S3_ACCESS_KEY_ID)
        access_secret: Secret access key (empty falls back to S3_SECRET_ACCESS_KEY)
        remote_prefix: Key prefix to list under and strip from local paths
        sync_folder: Local folder, relative to the vault root, receiving documents
        auto_sync: Whether timer-driven passes are enabled
        auto_sync_interval: Minutes between timer-driven passes (5-120, step 5)
        last_sync_time: ISO 8601 wall-clock time of the last completed pass
        last_sync_timestamp: Watermark in ms since epoch (0 = never synced)
    """
    bucket_name: str = ""
    endpoint: str = ""
    region: str = ""
    access_key: str = ""
    access_secret: str = ""
    remote_prefix: str = ""
    sync_folder: str = ""
    auto_sync: bool = False
    auto_sync_interval: int = 30
    last_sync_time: str = ""
    last_sync_timestamp: int = 0


@dataclass(frozen=True)
class RemoteObjectDescriptor:
    """One entry of the object store listing.

    Attributes:
        key: Object key, unique within the bucket
        last_modified: Modification time reported by the store
        size: Object size in bytes
    """
    key: str
    last_modified: datetime
    size: int

    @property
    def timestamp_ms(self) -> int:
        """Modification time as whole milliseconds since epoch."""
        last_modified = self.last_modified
        if last_modified.tzinfo is None:
            last_modified = last_modified.replace(tzinfo=timezone.utc)
        return (last_modified - EPOCH) // timedelta(milliseconds=1)


@dataclass
class DocumentRecord:
    """A downloaded document on its way to the local tree.

    Attributes:
        id: Remote object key
        title: Filename without the .md extension
        content: Full text body
        local_path: Path relative to the sync root
        source_timestamp: ISO 8601 modification time of the remote object
    """
    id: str
    title: str
    content: str
    local_path: str
    source_timestamp: str


@dataclass(frozen=True)
class ConfigUpdate:
    """A single configuration change applied to the config holder.

    Attributes:
        field: SyncConfig attribute name
        value: New value (strings are coerced to the field's type)

    Example:
        >>> ConfigUpdate.parse("auto_sync_interval=15")
        ConfigUpdate(field='auto_sync_interval', value='15')
    """
    field: str
    value: Any

    @classmethod
    def parse(cls, assignment: str) -> "ConfigUpdate":
        """Parse a KEY=VALUE string.

        Raises:
            ValueError: If the string has no '=' or an empty key
        """
        key, sep, value = assignment.partition('=')
        key = key.strip()
        if not sep or not key:
            raise ValueError(f"Expected KEY=VALUE, got '{assignment}'")
        return cls(field=key, value=value.strip())
