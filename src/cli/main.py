"""Main CLI entry point for the mdsync command.

This module provides the Typer application that serves as the entry point
for the mdsync command-line tool. Like the rest of the tool it uses options
on a single command rather than subcommands: with no action option it runs
one sync pass.
"""

import logging
import sys
import time
from datetime import datetime
from pathlib import Path
from typing import List, Optional

import typer

from src.cli.errors import InvalidOptionError
from src.cli.models import ExitCode
from src.cli.output import OutputHandler
from src.file_mapper.config_loader import ConfigLoader
from src.file_mapper.errors import ConfigError, FilesystemError
from src.file_mapper.local_vault import LocalVault
from src.file_mapper.models import ConfigUpdate
from src.sync_engine.service import SyncService

__version__ = "0.1.0"

app = typer.Typer(
    name="mdsync",
    help="""Incrementally mirror Markdown documents from S3-compatible storage into a local folder.

QUICK START:
  mdsync --set bucket_name=docs --set endpoint=https://s3.example.com   # Configure
  mdsync --test-connection                                             # Check access
  mdsync                                                               # Sync now
  mdsync --set auto_sync=true --watch                                  # Sync on a timer""",
    add_completion=False,
    rich_markup_mode=None,
    no_args_is_help=False,
)

logger = logging.getLogger(__name__)


def _configure_logging(verbosity: int, logdir: Optional[str] = None) -> None:
    """Configure logging based on verbosity level.

    Configures only the 'src' namespace logger to avoid affecting third-party
    libraries. botocore is kept at WARNING.

    Args:
        verbosity: Verbosity level (0=WARNING, 1=INFO, 2=DEBUG)
        logdir: Optional directory for log files (creates timestamped log file)
    """
    if verbosity == 0:
        level = logging.WARNING
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG

    app_logger = logging.getLogger("src")
    app_logger.setLevel(level)

    log_format = "%(asctime)s [%(levelname)8s] %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"
    formatter = logging.Formatter(log_format, datefmt=date_format)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    app_logger.addHandler(console_handler)

    logging.getLogger("botocore").setLevel(logging.WARNING)

    if logdir:
        log_path = Path(logdir)
        log_path.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        log_file = log_path / f"mdsync_{timestamp}.log"

        file_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        file_formatter = logging.Formatter(file_format, datefmt=date_format)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(file_formatter)
        app_logger.addHandler(file_handler)

        logger.info(f"Logging to file: {log_file}")


def _wait_for_interrupt() -> None:
    """Block the main thread until Ctrl+C."""
    while True:
        time.sleep(1)


def _apply_updates(service: SyncService, output: OutputHandler, assignments: List[str]) -> None:
    """Apply --set KEY=VALUE options in order.

    Raises:
        InvalidOptionError: If an assignment is not KEY=VALUE
        ConfigError: If an update is rejected
    """
    for assignment in assignments:
        try:
            update = ConfigUpdate.parse(assignment)
        except ValueError as e:
            raise InvalidOptionError("--set", str(e)) from e

        service.apply_config_update(update)
        output.success(f"Updated {update.field}")


def _run_watch(service: SyncService, output: OutputHandler) -> ExitCode:
    if not service.config.auto_sync:
        output.error("Auto-sync is disabled")
        output.print("Enable it with: mdsync --set auto_sync=true --watch")
        return ExitCode.CONFIG_ERROR

    service.start_auto_sync()
    output.success(
        f"Auto-sync running every {service.config.auto_sync_interval} minute(s). Press Ctrl+C to stop."
    )
    try:
        _wait_for_interrupt()
    except KeyboardInterrupt:
        pass
    finally:
        service.stop_auto_sync()

    output.info("Auto-sync stopped")
    return ExitCode.SUCCESS


@app.command()
def main_command(
    config_path: str = typer.Option(
        ConfigLoader.default_path(),
        "--config",
        "-c",
        help="Path to the configuration file",
        metavar="PATH",
    ),
    vault: str = typer.Option(
        ".",
        "--vault",
        help="Root folder of the local document tree",
        metavar="DIR",
    ),
    set_values: Optional[List[str]] = typer.Option(
        None,
        "--set",
        help="Update a setting, e.g. --set sync_folder=Inbox (can be used multiple times)",
        metavar="KEY=VALUE",
    ),
    show_config: bool = typer.Option(
        False,
        "--show-config",
        help="Show the current settings and last sync time",
    ),
    test_connection: bool = typer.Option(
        False,
        "--test-connection",
        help="Check that the object store can be reached with the current settings",
    ),
    watch: bool = typer.Option(
        False,
        "--watch",
        help="Run sync passes on the configured interval until interrupted",
    ),
    logdir: Optional[str] = typer.Option(
        None,
        "--logdir",
        help="Directory for log files (creates timestamped log file)",
    ),
    verbosity: int = typer.Option(
        0,
        "--verbosity",
        "-v",
        help="Verbosity level: 0=summary, 1=info, 2=debug",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        help="Show version and exit",
    ),
) -> None:
    """Incrementally mirror Markdown documents from S3-compatible storage.

    \b
    Only objects ending in .md and modified after the last successful sync
    are downloaded. Remote changes always overwrite local copies; nothing is
    uploaded or deleted.
    """
    if version:
        typer.echo(f"mdsync version {__version__}")
        raise typer.Exit()

    _configure_logging(verbosity, logdir)
    output = OutputHandler(verbosity=verbosity, no_color=no_color)
    service = SyncService(config_path, LocalVault(vault), notifier=output)

    try:
        service.load_config()

        if set_values:
            _apply_updates(service, output, set_values)

    except InvalidOptionError as e:
        output.error(str(e))
        raise typer.Exit(ExitCode.GENERAL_ERROR)

    except (ConfigError, FilesystemError) as e:
        logger.error(f"Configuration error: {e}")
        output.error(f"Configuration error: {e}")
        raise typer.Exit(ExitCode.CONFIG_ERROR)

    if show_config:
        output.print_config(service.config)

    if test_connection:
        with output.spinner("Testing connection..."):
            connected = service.test_connection()
        raise typer.Exit(ExitCode.SUCCESS if connected else ExitCode.NETWORK_ERROR)

    if watch:
        raise typer.Exit(_run_watch(service, output))

    # Editing or showing settings alone doesn't trigger a pass
    if set_values or show_config:
        raise typer.Exit(ExitCode.SUCCESS)

    success = service.sync_documents()
    output.print_summary(service.last_result if success else None)
    raise typer.Exit(ExitCode.SUCCESS if success else ExitCode.GENERAL_ERROR)


def main() -> None:
    """Main entry point for the CLI application.

    This function is called when the module is executed directly or
    when the console script is invoked.
    """
    app()


# Allow running as: python -m src.cli.main
if __name__ == "__main__":
    main()
