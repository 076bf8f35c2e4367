"""Data models for CLI operations."""

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes for CLI operations.

    - SUCCESS (0): Operation completed successfully
    - GENERAL_ERROR (1): Sync pass failed or was rejected, unexpected errors
    - CONFIG_ERROR (2): Invalid configuration file or configuration update
    - NETWORK_ERROR (3): Object store unreachable or connection test failed

    Example:
        >>> exit_code = ExitCode.SUCCESS
        >>> sys.exit(exit_code)
    """
    SUCCESS = 0
    GENERAL_ERROR = 1
    CONFIG_ERROR = 2
    NETWORK_ERROR = 3
