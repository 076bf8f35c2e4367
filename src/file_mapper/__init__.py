"""File mapper library for placing remote documents in the local tree.

This package maps object keys to local paths, writes documents into a local
vault, and persists the sync configuration (including the watermark) as YAML.
"""

from .config_loader import ConfigLoader
from .errors import ConfigError, FileMapperError, FilesystemError, LocalWriteError
from .local_vault import LocalFile, LocalFolder, LocalVault
from .models import ConfigUpdate, DocumentRecord, RemoteObjectDescriptor, SyncConfig
from .path_mapper import PathMapper

__all__ = [
    "ConfigLoader",
    "ConfigError",
    "ConfigUpdate",
    "DocumentRecord",
    "FileMapperError",
    "FilesystemError",
    "LocalFile",
    "LocalFolder",
    "LocalVault",
    "LocalWriteError",
    "PathMapper",
    "RemoteObjectDescriptor",
    "SyncConfig",
]
