"""Credential resolution for the object store.

Credentials come from the persisted sync configuration. When a field is left
empty there, the value is read from the environment (a .env file is loaded
with python-dotenv) so secrets don't have to live in the config file.
"""

import os
from typing import NamedTuple

from dotenv import load_dotenv

from .errors import ConfigurationError

ACCESS_KEY_ENV = 'S3_ACCESS_KEY_ID'
SECRET_KEY_ENV = 'S3_SECRET_ACCESS_KEY'


class Credentials(NamedTuple):
    """Static access credential pair."""
    access_key: str
    secret_key: str


class Authenticator:
    """Resolves the access credential pair for the object store.

    Credentials are never cached or logged.

    Environment fallbacks:
        S3_ACCESS_KEY_ID: access key used when the config has none
        S3_SECRET_ACCESS_KEY: secret used when the config has none

    Example:
        >>> auth = Authenticator(access_key="AKIA...", secret_key="...")
        >>> creds = auth.get_credentials()
    """

    def __init__(self, access_key: str = "", secret_key: str = ""):
        load_dotenv()
        self._access_key = access_key
        self._secret_key = secret_key

    def get_credentials(self) -> Credentials:
        """Return the credential pair.

        Raises:
            ConfigurationError: If either half of the pair is missing
        """
        access_key = self._access_key or os.getenv(ACCESS_KEY_ENV, '')
        secret_key = self._secret_key or os.getenv(SECRET_KEY_ENV, '')

        missing = []
        if not access_key:
            missing.append('access_key')
        if not secret_key:
            missing.append('access_secret')
        if missing:
            raise ConfigurationError(missing)

        return Credentials(access_key=access_key, secret_key=secret_key)

    def has_credentials(self) -> bool:
        try:
            self.get_credentials()
        except ConfigurationError:
            return False
        return True
