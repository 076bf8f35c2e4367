"""Unit tests for object_store.errors module."""

import pytest

from src.object_store.errors import (
    SyncError,
    ObjectStoreError,
    ConfigurationError,
    TransportError,
)


class TestSyncError:
    """Test cases for the SyncError root exception."""

    def test_is_exception(self):
        """SyncError should inherit from Exception."""
        assert issubclass(SyncError, Exception)

    def test_object_store_error_is_sync_error(self):
        """ObjectStoreError should inherit from SyncError."""
        assert issubclass(ObjectStoreError, SyncError)


class TestConfigurationError:
    """Test cases for ConfigurationError."""

    def test_inherits_from_object_store_error(self):
        assert issubclass(ConfigurationError, ObjectStoreError)

    def test_message_lists_missing_fields(self):
        """ConfigurationError should name every missing setting."""
        error = ConfigurationError(['bucket_name', 'endpoint'])
        assert "bucket_name" in str(error)
        assert "endpoint" in str(error)

    def test_stores_missing_attribute(self):
        error = ConfigurationError(['bucket_name'])
        assert error.missing == ['bucket_name']


class TestTransportError:
    """Test cases for TransportError."""

    def test_inherits_from_object_store_error(self):
        assert issubclass(TransportError, ObjectStoreError)

    def test_message_with_reason(self):
        error = TransportError('list_files', 'AccessDenied')
        assert str(error) == "Object store operation 'list_files' failed: AccessDenied"

    def test_message_without_reason(self):
        error = TransportError('list_files')
        assert str(error) == "Object store operation 'list_files' failed"

    def test_can_be_caught_as_sync_error(self):
        with pytest.raises(SyncError):
            raise TransportError('download_file(a.md)', 'timeout')
