"""Root pytest configuration for all tests.

This conftest applies to all test types (unit, integration).
"""

import logging

import pytest

# botocore logs credential lookups and endpoint resolution at DEBUG/INFO,
# which only adds noise to captured test output.
logging.getLogger("botocore").setLevel(logging.WARNING)


@pytest.fixture(autouse=True)
def isolated_credentials(monkeypatch):
    """Keep credentials from the developer's environment out of tests."""
    monkeypatch.delenv("S3_ACCESS_KEY_ID", raising=False)
    monkeypatch.delenv("S3_SECRET_ACCESS_KEY", raising=False)
    monkeypatch.setattr("src.object_store.auth.load_dotenv", lambda: None)
