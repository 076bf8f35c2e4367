"""Unit tests for file_mapper.errors module."""

from src.file_mapper.errors import (
    ConfigError,
    FileMapperError,
    FilesystemError,
    LocalWriteError,
)
from src.object_store.errors import SyncError


class TestFilesystemError:
    """Test cases for FilesystemError and LocalWriteError."""

    def test_message_includes_operation_path_and_reason(self):
        error = FilesystemError("Synced/page.md", "create", "File already exists")

        assert str(error) == "Filesystem operation 'create' failed for Synced/page.md: File already exists"
        assert error.file_path == "Synced/page.md"
        assert error.operation == "create"
        assert error.reason == "File already exists"

    def test_message_without_reason(self):
        assert str(FilesystemError("x", "read")) == "Filesystem operation 'read' failed for x"

    def test_local_write_error_is_a_sync_error(self):
        error = LocalWriteError("Synced", "create_folder", "denied")

        assert isinstance(error, FilesystemError)
        assert isinstance(error, FileMapperError)
        assert isinstance(error, SyncError)


class TestConfigError:
    """Test cases for ConfigError."""

    def test_message_with_field(self):
        error = ConfigError("Must be a boolean", "auto_sync")

        assert str(error) == "Configuration error in field 'auto_sync': Must be a boolean"
        assert error.config_field == "auto_sync"
        assert error.original_message == "Must be a boolean"

    def test_message_without_field(self):
        assert str(ConfigError("Invalid YAML syntax")) == "Configuration error: Invalid YAML syntax"
