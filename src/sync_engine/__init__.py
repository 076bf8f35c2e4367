"""Incremental sync engine for mirroring remote Markdown into a local tree.

The engine itself lives in src.sync_engine.engine (DocumentSyncer); pass
orchestration with mutual exclusion and persistence in
src.sync_engine.service (SyncService); timer-driven passes in
src.sync_engine.scheduler (AutoSyncScheduler).
"""

from .errors import PassFatalError
from .models import SyncPassResult
from .notifier import Notifier

__all__ = [
    "Notifier",
    "PassFatalError",
    "SyncPassResult",
]
