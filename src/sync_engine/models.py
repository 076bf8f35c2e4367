"""Data models for sync passes."""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class SyncPassResult:
    """Outcome of one completed sync pass, for the caller to persist.

    Attributes:
        candidate_count: Number of objects that passed the listing filter
        success_count: Number of documents written to the local tree
        failed_keys: Keys whose local write failed
        skipped_keys: Keys whose content could not be downloaded
        new_watermark: Watermark to persist (ms since epoch)
        last_sync_time: ISO 8601 completion time, None when nothing was
            transferred and the last-sync marker should stay as it was

    Example:
        >>> result = SyncPassResult(candidate_count=3, success_count=2,
        ...                         new_watermark=1705314600000)
    """
    candidate_count: int = 0
    success_count: int = 0
    failed_keys: List[str] = field(default_factory=list)
    skipped_keys: List[str] = field(default_factory=list)
    new_watermark: int = 0
    last_sync_time: Optional[str] = None
