"""Integration tests for incremental S3 Markdown sync.

These tests wire the real components together (SyncService, DocumentSyncer,
S3ApiClient, LocalVault, ConfigLoader) around a boto3 client whose responses
are queued with botocore's Stubber, so no network access is needed.
"""
