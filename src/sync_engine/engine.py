"""One incremental sync pass from the object store into the local vault.

This module provides the DocumentSyncer class that runs a single pass:

    1. Ensure the sync folder exists (fatal for the pass if it can't be created)
    2. List objects modified after the persisted watermark
    3. Download and write each candidate in turn, oldest first
    4. Compute the new watermark from the successfully written documents

A download or write failure only affects that document. The watermark
advances to the newest modification time among documents that were written,
so a failed document at or below that time is not retried on later passes.
The engine never persists anything itself; the outcome is exposed as a
SyncPassResult for the caller.
"""

import logging
import re
from datetime import datetime, UTC
from typing import Optional

from src.file_mapper.local_vault import LocalFile, LocalFolder, LocalVault
from src.file_mapper.models import DocumentRecord, RemoteObjectDescriptor, SyncConfig
from src.file_mapper.path_mapper import PathMapper
from src.object_store.s3_client import S3ApiClient

from .errors import PassFatalError
from .models import SyncPassResult
from .notifier import Notifier

logger = logging.getLogger(__name__)


class DocumentSyncer:
    """Runs incremental sync passes for one configuration snapshot.

    Example:
        >>> syncer = DocumentSyncer(config, LocalVault("."), S3ApiClient(config))
        >>> if syncer.sync_documents():
        ...     print(syncer.last_result.new_watermark)
    """

    def __init__(
        self,
        config: SyncConfig,
        vault: LocalVault,
        store_client: S3ApiClient,
        notifier: Optional[Notifier] = None,
        path_mapper: Optional[PathMapper] = None,
    ):
        """Initialize the syncer.

        Args:
            config: Configuration snapshot for this pass
            vault: Local storage receiving the documents
            store_client: Object store client used for listing and download
            notifier: Channel for user-facing notices (optional)
            path_mapper: Key-to-path mapper (defaults to one using the
                configured remote prefix)
        """
        self.config = config
        self.vault = vault
        self.store_client = store_client
        self.notifier = notifier or Notifier()
        self.path_mapper = path_mapper or PathMapper(config.remote_prefix)
        self.last_result: Optional[SyncPassResult] = None

    def sync_documents(self) -> bool:
        """Run one sync pass.

        Returns:
            True if the pass completed (even with zero or partial successes),
            False if it was aborted by an error
        """
        self.last_result = None
        try:
            return self._sync_from_store()
        except Exception as e:
            logger.exception("Sync pass failed")
            self.notifier.notice(f"Document sync failed: {e}")
            return False

    def _sync_from_store(self) -> bool:
        self._ensure_sync_folder_exists()

        start_timestamp = self.config.last_sync_timestamp or 0
        logger.info(f"Listing documents modified after {start_timestamp}")
        candidates = self.store_client.list_files(start_timestamp)

        if not candidates:
            self.notifier.notice("No new documents to sync")
            self.last_result = SyncPassResult(new_watermark=start_timestamp)
            return True

        self.notifier.notice(f"Syncing {len(candidates)} document(s) from the object store...")

        result = SyncPassResult(candidate_count=len(candidates))
        latest_timestamp = start_timestamp

        for obj in candidates:
            content = self.store_client.download_file(obj.key)
            if content is None:
                result.skipped_keys.append(obj.key)
                continue

            doc = self._build_document(obj, content)

            if self._save_document(doc):
                result.success_count += 1
                latest_timestamp = max(latest_timestamp, obj.timestamp_ms)
            else:
                result.failed_keys.append(obj.key)

        result.new_watermark = latest_timestamp
        result.last_sync_time = datetime.now(UTC).isoformat()
        self.last_result = result

        logger.info(
            f"Sync pass finished: {result.success_count}/{result.candidate_count} written, "
            f"{len(result.failed_keys)} failed, {len(result.skipped_keys)} skipped, "
            f"watermark {start_timestamp} -> {latest_timestamp}"
        )
        self.notifier.notice(
            f"Sync complete: imported {result.success_count}/{result.candidate_count} document(s)"
        )
        return True

    def _build_document(self, obj: RemoteObjectDescriptor, content: str) -> DocumentRecord:
        file_name = obj.key.split('/')[-1]
        return DocumentRecord(
            id=obj.key,
            title=re.sub(r'\.md$', '', file_name),
            content=content,
            local_path=self.path_mapper.to_local_path(obj.key),
            source_timestamp=obj.last_modified.isoformat(),
        )

    def _ensure_sync_folder_exists(self) -> None:
        """Create the sync folder if it is configured and missing.

        Raises:
            PassFatalError: If the folder cannot be created
        """
        folder_path = self.config.sync_folder
        if not folder_path:
            return

        if isinstance(self.vault.get_abstract_file_by_path(folder_path), LocalFolder):
            return

        try:
            self.vault.create_folder(folder_path)
        except Exception as e:
            logger.error(f"Failed to create sync folder {folder_path}: {e}")
            raise PassFatalError(f"Failed to create sync folder {folder_path}: {e}") from e

    def _resolve_file_path(self, doc: DocumentRecord) -> str:
        if self.config.sync_folder:
            return f"{self.config.sync_folder.rstrip('/')}/{doc.local_path}"
        return doc.local_path

    def _save_document(self, doc: DocumentRecord) -> bool:
        """Write a document into the vault, overwriting an existing file.

        Returns:
            True if the document was written
        """
        try:
            file_path = self._resolve_file_path(doc)

            folder_path = file_path.rpartition('/')[0]
            if folder_path:
                if not isinstance(self.vault.get_abstract_file_by_path(folder_path), LocalFolder):
                    self.vault.create_folder(folder_path)

            existing = self.vault.get_abstract_file_by_path(file_path)
            if isinstance(existing, LocalFile):
                self.vault.modify(existing, doc.content)
                logger.debug(f"Updated {file_path} from {doc.id}")
            else:
                self.vault.create(file_path, doc.content)
                logger.debug(f"Created {file_path} from {doc.id}")

            return True
        except Exception as e:
            logger.error(f"Failed to save document {doc.title}: {e}")
            self.notifier.notice(f"Failed to save document {doc.title}: {e}")
            return False

