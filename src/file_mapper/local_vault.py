"""Local file tree used as the destination of synced documents.

This module provides LocalVault, a small storage abstraction over a root
directory. Paths are '/'-separated and relative to the root. Lookups are
type-discriminated: a path resolves to a LocalFile, a LocalFolder, or None.
Each file write goes through a temporary file and os.replace so a document
is either fully written or left untouched.
"""

import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .errors import LocalWriteError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LocalFile:
    """A file inside the vault.

    Attributes:
        path: Vault-relative path
    """
    path: str


@dataclass(frozen=True)
class LocalFolder:
    """A folder inside the vault.

    Attributes:
        path: Vault-relative path
    """
    path: str


class LocalVault:
    """Storage collaborator rooted at a local directory.

    Example:
        >>> vault = LocalVault("./notes")
        >>> vault.create_folder("synced/sub")
        >>> file = vault.create("synced/sub/page.md", "# Page")
        >>> vault.modify(file, "# Page v2")
    """

    def __init__(self, root: Union[str, Path] = "."):
        self.root = Path(root)

    def _resolve(self, path: str) -> Path:
        return self.root / path

    def get_abstract_file_by_path(self, path: str) -> Optional[Union[LocalFile, LocalFolder]]:
        """Look up a vault path.

        Returns:
            LocalFolder for directories, LocalFile for regular files,
            None when nothing exists at the path
        """
        full_path = self._resolve(path)
        if full_path.is_dir():
            return LocalFolder(path)
        if full_path.is_file():
            return LocalFile(path)
        return None

    def create_folder(self, path: str) -> LocalFolder:
        """Create a folder, including any missing intermediate folders.

        Raises:
            LocalWriteError: If the folder cannot be created
        """
        full_path = self._resolve(path)
        try:
            full_path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise LocalWriteError(path, 'create_folder', str(e)) from e
        logger.debug(f"Created folder {path}")
        return LocalFolder(path)

    def create(self, path: str, content: str) -> LocalFile:
        """Create a new file.

        Raises:
            LocalWriteError: If something already exists at the path
                or the write fails
        """
        if self._resolve(path).exists():
            raise LocalWriteError(path, 'create', 'File already exists')
        self._write(path, content, 'create')
        logger.debug(f"Created file {path}")
        return LocalFile(path)

    def modify(self, file: LocalFile, content: str) -> None:
        """Replace the content of an existing file in place.

        Raises:
            LocalWriteError: If the write fails
        """
        self._write(file.path, content, 'modify')
        logger.debug(f"Modified file {file.path}")

    def _write(self, path: str, content: str, operation: str) -> None:
        full_path = self._resolve(path)
        tmp_name = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                dir=full_path.parent,
                prefix=f".{full_path.name}.",
                suffix=".tmp",
            )
            with os.fdopen(fd, 'w', encoding='utf-8') as f:
                f.write(content)
            os.replace(tmp_name, full_path)
        except OSError as e:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise LocalWriteError(path, operation, str(e)) from e
