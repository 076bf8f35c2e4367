"""Process-level orchestration of sync passes.

This module provides the SyncService class, the single entry point every
trigger (command line, timer) uses to request a pass. It owns:

- the configuration holder, with explicit load/save boundaries
- the pass-state lock guaranteeing at most one pass at a time
- the cached object store client
- the auto-sync scheduler

Configuration changes arrive as ConfigUpdate commands so the engine stays
independent of any presentation layer.
"""

import dataclasses
import logging
import threading
from typing import Callable, Optional

from src.file_mapper.config_loader import ConfigLoader
from src.file_mapper.local_vault import LocalVault
from src.file_mapper.models import ConfigUpdate, SyncConfig
from src.object_store.s3_client import S3ApiClient

from .engine import DocumentSyncer
from .models import SyncPassResult
from .notifier import Notifier
from .scheduler import AutoSyncScheduler

logger = logging.getLogger(__name__)

# Changing any of these invalidates the cached object store client
REMOTE_FIELDS = {
    'bucket_name',
    'endpoint',
    'region',
    'access_key',
    'access_secret',
    'remote_prefix',
}

AUTO_SYNC_FIELDS = {'auto_sync', 'auto_sync_interval'}


class SyncService:
    """Owns configuration, mutual exclusion and scheduling for sync passes.

    Example:
        >>> service = SyncService(".mdsync/config.yaml", LocalVault("."))
        >>> service.load_config()
        >>> service.sync_documents()
        True
    """

    def __init__(
        self,
        config_path: str,
        vault: LocalVault,
        notifier: Optional[Notifier] = None,
        store_client_factory: Optional[Callable[[SyncConfig, Notifier], S3ApiClient]] = None,
        scheduler: Optional[AutoSyncScheduler] = None,
    ):
        """Initialize the service.

        Args:
            config_path: Path to the YAML configuration file
            vault: Local storage receiving synced documents
            notifier: Channel for user-facing notices (optional)
            store_client_factory: Builds the object store client for a config
                (defaults to S3ApiClient)
            scheduler: Timer used for auto-sync (defaults to one calling
                sync_documents)
        """
        self.config_path = config_path
        self.vault = vault
        self.notifier = notifier or Notifier()
        self.store_client_factory = store_client_factory or (
            lambda config, notifier: S3ApiClient(config, notifier=notifier)
        )
        self.scheduler = scheduler or AutoSyncScheduler(self.sync_documents)
        self.config = SyncConfig()
        self.last_result: Optional[SyncPassResult] = None
        self._store_client: Optional[S3ApiClient] = None
        self._pass_lock = threading.Lock()

    @property
    def is_syncing(self) -> bool:
        return self._pass_lock.locked()

    def load_config(self) -> SyncConfig:
        """Load the configuration from disk, merged over defaults.

        Raises:
            FilesystemError: If the file cannot be read
            ConfigError: If the file is invalid
        """
        self.config = ConfigLoader.load(self.config_path)
        self._store_client = None
        logger.info(f"Loaded configuration from {self.config_path}")
        return self.config

    def save_config(self) -> None:
        """Persist the current configuration.

        Raises:
            FilesystemError: If the file cannot be written
        """
        ConfigLoader.save(self.config_path, self.config)

    def _get_store_client(self) -> S3ApiClient:
        if self._store_client is None:
            self._store_client = self.store_client_factory(self.config, self.notifier)
        return self._store_client

    def sync_documents(self) -> bool:
        """Request a sync pass.

        Rejected immediately (returns False) if another pass is running.
        On success the new watermark and last-sync time are applied to the
        configuration and saved.

        Returns:
            True if the pass completed
        """
        if not self._pass_lock.acquire(blocking=False):
            logger.info("Sync requested while another pass is running")
            self.notifier.notice("A sync is already in progress, please try again later")
            return False

        try:
            self.notifier.notice("Starting document sync...")

            syncer = DocumentSyncer(
                self.config,
                self.vault,
                self._get_store_client(),
                notifier=self.notifier,
            )
            success = syncer.sync_documents()
            self.last_result = syncer.last_result

            if success and syncer.last_result is not None:
                self._apply_pass_result(syncer.last_result)
                self.save_config()

            return success
        except Exception as e:
            logger.exception("Unexpected error during sync")
            self.notifier.notice(f"Document sync failed: {e}")
            return False
        finally:
            self._pass_lock.release()

    def _apply_pass_result(self, result: SyncPassResult) -> None:
        watermark = max(self.config.last_sync_timestamp, result.new_watermark)
        changes = {'last_sync_timestamp': watermark}
        if result.last_sync_time is not None:
            changes['last_sync_time'] = result.last_sync_time
        self.config = dataclasses.replace(self.config, **changes)

    def test_connection(self) -> bool:
        """Probe the object store and report the outcome to the user."""
        success = self._get_store_client().test_connection()
        if success:
            self.notifier.notice("Connection to the object store succeeded")
        else:
            self.notifier.notice("Connection to the object store failed, please check the configuration")
        return success

    def apply_config_update(self, update: ConfigUpdate) -> SyncConfig:
        """Apply and persist a configuration change.

        The in-memory configuration is only replaced once the file has been
        written. Drops the cached store client when a remote setting changes.
        A running auto-sync timer is stopped when auto-sync is disabled and
        restarted when its interval changes; a stopped timer is left alone
        (see start_auto_sync).

        Raises:
            ConfigError: If the update is invalid
            FilesystemError: If the configuration cannot be saved
        """
        previous = self.config
        new_config = ConfigLoader.apply_update(previous, update)
        ConfigLoader.save(self.config_path, new_config)
        self.config = new_config
        logger.info(f"Updated configuration field '{update.field}'")

        if update.field in REMOTE_FIELDS:
            self._store_client = None

        if update.field in AUTO_SYNC_FIELDS:
            if not new_config.auto_sync:
                self.stop_auto_sync()
            elif (self.scheduler.is_running
                  and previous.auto_sync_interval != new_config.auto_sync_interval):
                self.restart_auto_sync()

        return self.config

    def start_auto_sync(self) -> None:
        self.scheduler.start(self.config.auto_sync_interval)

    def stop_auto_sync(self) -> None:
        self.scheduler.stop()

    def restart_auto_sync(self) -> None:
        self.scheduler.restart(self.config.auto_sync_interval)
