"""Command-line interface for incremental S3 Markdown sync.

This package provides the `mdsync` CLI tool that runs sync passes, probes
the object store connection, edits the persisted configuration, and runs
timer-driven passes, with rich terminal output.
"""

from .models import ExitCode
from .errors import CLIError, InvalidOptionError

__all__ = [
    'ExitCode',
    'CLIError',
    'InvalidOptionError',
]
