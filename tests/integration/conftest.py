"""Pytest configuration and fixtures for integration tests.

Integration tests run a real boto3 S3 client whose responses are queued with
botocore's Stubber, against a real LocalVault on a temporary directory.
"""

from typing import Generator, Tuple

import boto3
import pytest
from botocore.stub import Stubber

from src.file_mapper.config_loader import ConfigLoader
from src.file_mapper.local_vault import LocalVault
from src.object_store.s3_client import S3ApiClient
from src.sync_engine.service import SyncService
from tests.fixtures.sample_objects import make_config


@pytest.fixture
def stubbed_s3() -> Generator[Tuple[object, Stubber], None, None]:
    """A real boto3 S3 client with a Stubber activated on it."""
    config = make_config()
    client = boto3.client(
        's3',
        endpoint_url=config.endpoint,
        region_name=config.region,
        aws_access_key_id=config.access_key,
        aws_secret_access_key=config.access_secret,
    )
    with Stubber(client) as stubber:
        yield client, stubber


@pytest.fixture
def config_path(tmp_path) -> str:
    path = str(tmp_path / ".mdsync" / "config.yaml")
    ConfigLoader.save(path, make_config())
    return path


@pytest.fixture
def vault_root(tmp_path):
    root = tmp_path / "vault"
    root.mkdir()
    return root


@pytest.fixture
def sync_service(config_path, vault_root, stubbed_s3) -> SyncService:
    """A SyncService whose object store client talks to the stubbed boto3 client."""
    client, _ = stubbed_s3
    service = SyncService(
        config_path,
        LocalVault(vault_root),
        store_client_factory=lambda config, notifier: S3ApiClient(
            config,
            notifier=notifier,
            client=client,
        ),
    )
    service.load_config()
    return service
